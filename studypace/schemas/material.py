"""
Material schemas for StudyPace.

Defines Pydantic models exchanged with collaborators around the engine:
- Extracted text handed over by the document extraction step
- Material summaries and homework study guides from content generators
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional

from .breakdown import count_words


class ExtractedText(BaseModel):
    """Plain text and counts produced by document text extraction."""
    text: str
    word_count: int = Field(..., ge=0)
    page_count: int = Field(default=1, ge=0)
    title: Optional[str] = None
    author: Optional[str] = None

    @classmethod
    def from_text(cls, text: str, page_count: int = 1, **kwargs) -> "ExtractedText":
        return cls(text=text, word_count=count_words(text), page_count=page_count, **kwargs)


class MaterialSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    summary: str
    vocabulary: list[str] = []
    key_concepts: list[str] = []


class HomeworkGuide(BaseModel):
    """Study steps and hints for a homework set."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    steps: list[str] = Field(..., min_length=1)
    hints: list[str] = []
    estimated_minutes: int = Field(..., ge=0)
