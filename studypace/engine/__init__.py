"""
StudyPace Engine - Deterministic segmentation and time estimation.

This module provides:
- Grade tables: reading speed, per-question time, chunk size
- Segmenter: sentence-aware reading chunks
- Question detection with difficulty classification
- Estimator: grade-calibrated reading and homework minutes
- Progress: percent complete and remaining time
"""

from .grade_table import (
    GradeBand,
    GRADE_BANDS,
    grade_band,
    grade_to_wpm,
    grade_to_base_minutes_per_question,
    is_primary_grade,
    target_chunk_size,
    grade_display_name,
)

from .segmenter import (
    CHUNK_READING_WPM,
    split_sentences,
    chunk_text,
    chunk_reading_for_grade,
)

from .questions import (
    DEFAULT_QUESTION_MINUTES,
    estimate_difficulty,
    detect_numbered_questions,
    detect_question_sentences,
    detect_questions,
)

from .estimator import (
    DEFAULT_COMPREHENSION_FACTOR,
    DIFFICULTY_MULTIPLIERS,
    estimate_reading_minutes,
    difficulty_multiplier,
    estimate_homework_minutes,
    estimate_task_minutes,
)

from .progress import (
    reading_progress,
    homework_progress,
    reading_time_remaining,
    homework_time_remaining,
    status_for_progress,
    ReadingCursor,
    build_progress_update,
)

__all__ = [
    # Grade table
    "GradeBand",
    "GRADE_BANDS",
    "grade_band",
    "grade_to_wpm",
    "grade_to_base_minutes_per_question",
    "is_primary_grade",
    "target_chunk_size",
    "grade_display_name",
    # Segmenter
    "CHUNK_READING_WPM",
    "split_sentences",
    "chunk_text",
    "chunk_reading_for_grade",
    # Questions
    "DEFAULT_QUESTION_MINUTES",
    "estimate_difficulty",
    "detect_numbered_questions",
    "detect_question_sentences",
    "detect_questions",
    # Estimator
    "DEFAULT_COMPREHENSION_FACTOR",
    "DIFFICULTY_MULTIPLIERS",
    "estimate_reading_minutes",
    "difficulty_multiplier",
    "estimate_homework_minutes",
    "estimate_task_minutes",
    # Progress
    "reading_progress",
    "homework_progress",
    "reading_time_remaining",
    "homework_time_remaining",
    "status_for_progress",
    "ReadingCursor",
    "build_progress_update",
]
