"""
LLM-backed content generator using the Gemini API.

Every failure (API errors after retries, empty responses, unparseable or
invalid JSON) is raised as GenerationError.
"""

import logging
import math
import time
from pathlib import Path
from typing import Any, Sequence

from google import genai
from google.genai import types as genai_types
from pydantic import ValidationError

from studypace.config import (
    DEFAULT_API_SLEEP,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
)
from studypace.engine import (
    CHUNK_READING_WPM,
    DEFAULT_QUESTION_MINUTES,
    grade_display_name,
    grade_to_wpm,
    target_chunk_size,
)
from studypace.schemas import (
    HomeworkGuide,
    HomeworkQuestion,
    MaterialSummary,
    ReadingChunk,
    count_words,
)
from studypace.utils import extract_json_from_response, format_prompt, load_prompt

from .base import GenerationError

logger = logging.getLogger(__name__)

# Summaries only need the opening of the material
SUMMARY_TEXT_CHARS = 2000


class RemoteModel:
    """Content generator that prompts a Gemini model for JSON."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_retries: int = DEFAULT_MAX_RETRIES,
        sleep_seconds: float = DEFAULT_API_SLEEP,
        client: Any = None,
        prompts_dir: Path | None = None,
    ):
        if client is None:
            if not api_key:
                raise ValueError("GEMINI_API_KEY not set. Check your .env file.")
            client = genai.Client(api_key=api_key)

        self.client = client
        self.model_name = model
        self.temperature = temperature
        self.max_retries = max_retries
        self.sleep_seconds = sleep_seconds
        self.prompts_dir = prompts_dir

    # -------------------------------------------------------------------------
    # API access
    # -------------------------------------------------------------------------

    def _call(self, full_prompt: str, temperature: float) -> str:
        """Send one prompt, retrying with linear back-off."""
        for attempt in range(self.max_retries):
            try:
                response = self.client.models.generate_content(
                    model=self.model_name,
                    contents=full_prompt,
                    config=genai_types.GenerateContentConfig(
                        temperature=temperature,
                    )
                )

                if response.text is None:
                    if response.candidates and len(response.candidates) > 0:
                        candidate = response.candidates[0]
                        if candidate.content and candidate.content.parts:
                            return candidate.content.parts[0].text
                    raise ValueError("Empty response from API")

                return response.text

            except Exception as e:
                logger.warning(f"API call failed (attempt {attempt + 1}/{self.max_retries}): {e}")
                if attempt < self.max_retries - 1:
                    time.sleep(self.sleep_seconds * (attempt + 1))
                else:
                    raise GenerationError(f"Gemini call failed: {e}") from e

        raise GenerationError("Gemini call not attempted (max_retries < 1)")

    def _generate_json(self, prompt_name: str, **values) -> Any:
        prompt = load_prompt(prompt_name, self.prompts_dir)
        user_prompt = format_prompt(prompt["user_template"], **values)
        full_prompt = f"{prompt['system']}\n\n---\n\n{user_prompt}"
        temperature = (prompt.get("meta") or {}).get("temperature", self.temperature)

        response_text = self._call(full_prompt, temperature)
        try:
            return extract_json_from_response(response_text)
        except ValueError as e:
            raise GenerationError(f"Unparseable {prompt_name} response: {e}") from e

    # -------------------------------------------------------------------------
    # Generator operations
    # -------------------------------------------------------------------------

    def summarize_material(self, text: str, grade) -> MaterialSummary:
        data = self._generate_json(
            "summarize_material",
            grade_name=grade_display_name(grade),
            text=text[:SUMMARY_TEXT_CHARS],
        )
        try:
            return MaterialSummary.model_validate(data)
        except ValidationError as e:
            raise GenerationError(f"Invalid summary: {e}") from e

    def chunk_reading(self, text: str, grade) -> list[ReadingChunk]:
        target_words = target_chunk_size(grade)
        data = self._generate_json(
            "chunk_reading",
            grade_name=grade_display_name(grade),
            target_words=target_words,
            target_minutes=max(1, round(target_words / grade_to_wpm(grade))),
            text=text,
        )
        if not isinstance(data, list) or not data:
            raise GenerationError("Chunking response is not a non-empty list")

        chunks = []
        try:
            for item in data:
                chunk_text = item.get("chunkText") or item.get("chunk_text") or ""
                # Word counts are recomputed; the model's own count is not trusted
                word_count = count_words(chunk_text)
                est_minutes = item.get("estMinutes") or math.ceil(word_count / CHUNK_READING_WPM)
                chunks.append(ReadingChunk(
                    heading=item.get("heading") or None,
                    chunk_text=chunk_text,
                    est_minutes=max(1, int(est_minutes)),
                    word_count=word_count,
                ))
        except (AttributeError, TypeError, ValueError) as e:
            raise GenerationError(f"Invalid chunk in response: {e}") from e
        return chunks

    def detect_questions(self, text: str) -> list[HomeworkQuestion]:
        data = self._generate_json("detect_questions", text=text)
        if not isinstance(data, list) or not data:
            raise GenerationError("Question response is not a non-empty list")

        questions = []
        try:
            for position, item in enumerate(data, 1):
                questions.append(HomeworkQuestion(
                    index=item.get("index") or position,
                    prompt=" ".join(str(item.get("prompt", "")).split()),
                    difficulty=item.get("difficulty") or None,
                    est_minutes=item.get("estMinutes") or DEFAULT_QUESTION_MINUTES,
                ))
        except (AttributeError, TypeError, ValueError) as e:
            raise GenerationError(f"Invalid question in response: {e}") from e
        return questions

    def breakdown_homework(self, questions: Sequence[HomeworkQuestion], grade) -> HomeworkGuide:
        listing = "\n".join(f"{q.index}. {q.prompt}" for q in questions)
        data = self._generate_json(
            "breakdown_homework",
            grade_name=grade_display_name(grade),
            questions=listing or "(none)",
        )
        try:
            return HomeworkGuide.model_validate(data)
        except ValidationError as e:
            raise GenerationError(f"Invalid homework guide: {e}") from e
