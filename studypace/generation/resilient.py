"""
Resilient generator: try the primary generator, fall back on any failure.
"""

import logging
from typing import Sequence

from studypace.config import Settings, load_settings
from studypace.schemas import (
    HomeworkGuide,
    HomeworkQuestion,
    MaterialSummary,
    ReadingChunk,
    parse_grade,
)

from .base import ContentGenerator
from .fallback import DeterministicFallback
from .remote import RemoteModel

logger = logging.getLogger(__name__)


class ResilientGenerator:
    """
    Compose two generators behind the ContentGenerator interface.

    Provider errors never reach the caller; they are logged and the
    fallback result is returned. An invalid grade is a caller error and is
    raised before either generator runs.
    """

    def __init__(self, primary: ContentGenerator, fallback: ContentGenerator | None = None):
        self.primary = primary
        self.fallback = fallback or DeterministicFallback()

    def _run(self, operation: str, *args):
        try:
            return getattr(self.primary, operation)(*args)
        except Exception as e:
            logger.warning(f"{operation} failed on {type(self.primary).__name__}, using fallback: {e}")
            return getattr(self.fallback, operation)(*args)

    def summarize_material(self, text: str, grade) -> MaterialSummary:
        return self._run("summarize_material", text, parse_grade(grade))

    def chunk_reading(self, text: str, grade) -> list[ReadingChunk]:
        return self._run("chunk_reading", text, parse_grade(grade))

    def detect_questions(self, text: str) -> list[HomeworkQuestion]:
        return self._run("detect_questions", text)

    def breakdown_homework(self, questions: Sequence[HomeworkQuestion], grade) -> HomeworkGuide:
        return self._run("breakdown_homework", list(questions), parse_grade(grade))


def create_generator(settings: Settings | None = None) -> ContentGenerator:
    """
    Build the generator for the current configuration.

    With an API key: the remote model wrapped with the deterministic
    fallback. Without one: the deterministic fallback alone.
    """
    settings = settings or load_settings()
    if not settings.ai_enabled:
        logger.warning("No AI API key provided, using fallback mode")
        return DeterministicFallback()

    remote = RemoteModel(
        api_key=settings.api_key,
        model=settings.model,
        temperature=settings.temperature,
        max_retries=settings.max_retries,
        sleep_seconds=settings.sleep_seconds,
    )
    return ResilientGenerator(remote, DeterministicFallback())
