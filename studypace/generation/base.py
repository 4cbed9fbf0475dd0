"""
Content generator interface.

A generator turns extracted text into the structures stored with a task.
Implementations: RemoteModel (LLM-backed) and DeterministicFallback
(engine-backed); ResilientGenerator composes the two.
"""

from typing import Protocol, Sequence, runtime_checkable

from studypace.schemas import (
    HomeworkGuide,
    HomeworkQuestion,
    MaterialSummary,
    ReadingChunk,
)


class GenerationError(RuntimeError):
    """A generator could not produce a usable result."""


@runtime_checkable
class ContentGenerator(Protocol):

    def summarize_material(self, text: str, grade) -> MaterialSummary:
        ...

    def chunk_reading(self, text: str, grade) -> list[ReadingChunk]:
        ...

    def detect_questions(self, text: str) -> list[HomeworkQuestion]:
        ...

    def breakdown_homework(self, questions: Sequence[HomeworkQuestion], grade) -> HomeworkGuide:
        ...
