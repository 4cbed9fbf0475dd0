"""
Breakdown schemas for StudyPace.

Defines Pydantic models for the task breakdown stored with each task:
- Reading chunks (reading tasks)
- Homework questions (homework tasks)
- Loaders that degrade a missing or malformed stored payload to a
  single placeholder unit

Stored payloads use camelCase keys (chunkText, estMinutes, wordCount);
both camelCase and snake_case are accepted on input.
"""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens in text."""
    return len(text.split())


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class StoredModel(BaseModel):
    """Base for models persisted inside a task breakdown."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# -----------------------------------------------------------------------------
# Units
# -----------------------------------------------------------------------------

class ReadingChunk(StoredModel):
    """A contiguous span of reading text sized for one sitting."""
    heading: Optional[str] = None
    chunk_text: str = Field(..., min_length=1)
    est_minutes: int = Field(..., ge=1)
    word_count: int = Field(..., ge=0)

    @field_validator('chunk_text')
    @classmethod
    def text_not_blank(cls, v):
        if not v.strip():
            raise ValueError('chunk_text must not be blank')
        return v

    @model_validator(mode='after')
    def word_count_matches_text(self):
        if self.word_count != count_words(self.chunk_text):
            raise ValueError(
                f'word_count {self.word_count} does not match chunk_text '
                f'({count_words(self.chunk_text)} words)'
            )
        return self


class HomeworkQuestion(StoredModel):
    """
    A detected homework question.

    `index` is the question's own number (it may skip values); consumers
    navigate by list position, not by index.
    """
    index: int = Field(..., ge=1)
    prompt: str = Field(..., min_length=1)
    difficulty: Optional[Difficulty] = None
    est_minutes: int = Field(..., ge=1)

    @field_validator('prompt')
    @classmethod
    def prompt_not_blank(cls, v):
        if not v.strip():
            raise ValueError('prompt must not be blank')
        return v


# -----------------------------------------------------------------------------
# Breakdown variants
# -----------------------------------------------------------------------------

class ReadingBreakdown(StoredModel):
    chunks: list[ReadingChunk] = []


class HomeworkBreakdown(StoredModel):
    questions: list[HomeworkQuestion] = []


PLACEHOLDER_CHUNK_TEXT = (
    "This reading has not been prepared yet. "
    "Ask your teacher to upload the material again."
)

PLACEHOLDER_QUESTION_PROMPT = "What is the main idea of this assignment?"


def placeholder_chunk() -> ReadingChunk:
    return ReadingChunk(
        chunk_text=PLACEHOLDER_CHUNK_TEXT,
        est_minutes=1,
        word_count=count_words(PLACEHOLDER_CHUNK_TEXT),
    )


def placeholder_question() -> HomeworkQuestion:
    return HomeworkQuestion(
        index=1,
        prompt=PLACEHOLDER_QUESTION_PROMPT,
        difficulty=Difficulty.MEDIUM,
        est_minutes=3,
    )


def load_reading_units(payload: Any) -> list[ReadingChunk]:
    """
    Load the chunk sequence from a stored breakdown payload.

    Accepts the stored JSON payload or a ReadingBreakdown. Missing, empty
    or malformed payloads yield a single placeholder chunk.
    """
    if isinstance(payload, ReadingBreakdown):
        payload = payload.model_dump(by_alias=True)
    if isinstance(payload, dict) and payload.get("chunks"):
        try:
            return ReadingBreakdown.model_validate(payload).chunks
        except ValidationError as e:
            logger.warning(f"Malformed reading breakdown, using placeholder: {e}")
    else:
        logger.warning("Reading breakdown missing or empty, using placeholder")
    return [placeholder_chunk()]


def load_homework_units(payload: Any) -> list[HomeworkQuestion]:
    """
    Load the question sequence from a stored breakdown payload.

    Accepts the stored JSON payload or a HomeworkBreakdown. Missing, empty
    or malformed payloads yield a single placeholder question.
    """
    if isinstance(payload, HomeworkBreakdown):
        payload = payload.model_dump(by_alias=True)
    if isinstance(payload, dict) and payload.get("questions"):
        try:
            return HomeworkBreakdown.model_validate(payload).questions
        except ValidationError as e:
            logger.warning(f"Malformed homework breakdown, using placeholder: {e}")
    else:
        logger.warning("Homework breakdown missing or empty, using placeholder")
    return [placeholder_question()]
