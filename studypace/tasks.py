"""
Task preparation: extracted text + grade + kind -> stored breakdown.

Reading tasks are chunked, homework tasks have their questions detected;
the task total is estimated from the result with the grade-calibrated
rules.
"""

import logging
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from studypace.engine import estimate_task_minutes
from studypace.generation import ContentGenerator, DeterministicFallback
from studypace.schemas import (
    ExtractedText,
    GradeLevel,
    HomeworkBreakdown,
    ReadingBreakdown,
    TaskKind,
    parse_grade,
)

logger = logging.getLogger(__name__)


class PreparedTask(BaseModel):
    kind: TaskKind
    grade: GradeLevel
    breakdown: Union[ReadingBreakdown, HomeworkBreakdown]
    etc_minutes: int = Field(..., ge=0)

    @property
    def unit_count(self) -> int:
        if isinstance(self.breakdown, ReadingBreakdown):
            return len(self.breakdown.chunks)
        return len(self.breakdown.questions)

    def breakdown_payload(self) -> dict[str, Any]:
        """Breakdown as stored with the task (camelCase JSON)."""
        return self.breakdown.model_dump(by_alias=True, mode="json", exclude_none=True)


def prepare_task(
    material: Union[ExtractedText, str],
    grade,
    kind: Union[TaskKind, str],
    generator: Optional[ContentGenerator] = None,
) -> PreparedTask:
    """
    Build the breakdown and total minutes for a new task.

    Args:
        material: Extracted text (or the raw text itself)
        grade: Grade level of the class
        kind: READING or HOMEWORK
        generator: Content generator (default: deterministic engine)

    Raises:
        InvalidGradeError: If grade is not a known grade level
    """
    level = parse_grade(grade)
    kind = TaskKind(kind.upper()) if isinstance(kind, str) else TaskKind(kind)
    text = material.text if isinstance(material, ExtractedText) else material
    generator = generator or DeterministicFallback()

    if kind is TaskKind.READING:
        breakdown = ReadingBreakdown(chunks=generator.chunk_reading(text, level))
    else:
        breakdown = HomeworkBreakdown(questions=generator.detect_questions(text))

    task = PreparedTask(
        kind=kind,
        grade=level,
        breakdown=breakdown,
        etc_minutes=estimate_task_minutes(breakdown, level),
    )
    if task.unit_count == 0:
        logger.warning(f"No {kind.value.lower()} units found in material; breakdown is empty")
    return task
