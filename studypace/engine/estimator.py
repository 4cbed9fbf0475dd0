"""
Grade-calibrated time estimates for reading and homework.

The reading rule here is separate from the flat per-chunk estimate the
segmenter writes into each chunk; the two are not interchangeable.
"""

import math
from typing import Iterable, Optional, Union

from studypace.schemas import (
    Difficulty,
    HomeworkBreakdown,
    HomeworkQuestion,
    ReadingBreakdown,
)

from .grade_table import grade_to_base_minutes_per_question, grade_to_wpm

DEFAULT_COMPREHENSION_FACTOR = 1.15

DIFFICULTY_MULTIPLIERS = {
    Difficulty.EASY: 1.0,
    Difficulty.MEDIUM: 1.3,
    Difficulty.HARD: 1.6,
}
UNSET_DIFFICULTY_MULTIPLIER = 1.2  # medium-hard


def estimate_reading_minutes(
    word_count: int,
    grade,
    comp_factor: float = DEFAULT_COMPREHENSION_FACTOR,
) -> int:
    """Whole minutes to read `word_count` words at the grade's reading speed."""
    return math.ceil((word_count / grade_to_wpm(grade)) * comp_factor)


def difficulty_multiplier(difficulty: Optional[Union[Difficulty, str]]) -> float:
    if difficulty is None:
        return UNSET_DIFFICULTY_MULTIPLIER
    try:
        return DIFFICULTY_MULTIPLIERS[Difficulty(difficulty)]
    except ValueError:
        return UNSET_DIFFICULTY_MULTIPLIER


def estimate_homework_minutes(questions: Iterable[HomeworkQuestion], grade) -> float:
    """
    Sum of base minutes per question scaled by difficulty.

    Not rounded; callers round for display.
    """
    base_minutes = grade_to_base_minutes_per_question(grade)
    return sum(
        (base_minutes * difficulty_multiplier(q.difficulty) for q in questions),
        0.0,
    )


def estimate_task_minutes(breakdown: Union[ReadingBreakdown, HomeworkBreakdown], grade) -> int:
    """Total minutes for a whole task, as stored with the task."""
    if isinstance(breakdown, ReadingBreakdown):
        total_words = sum(chunk.word_count for chunk in breakdown.chunks)
        return estimate_reading_minutes(total_words, grade)
    if isinstance(breakdown, HomeworkBreakdown):
        # Trim float noise from the multiplier sum before rounding up
        return math.ceil(round(estimate_homework_minutes(breakdown.questions, grade), 6))
    raise TypeError(f"Unsupported breakdown type: {type(breakdown).__name__}")
