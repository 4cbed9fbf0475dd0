"""
StudyPace Schemas - Pydantic models for the task breakdown engine.

This module exports all schema classes for:
- Grade: grade levels and grade parsing
- Breakdown: reading chunks, homework questions, stored breakdowns
- Material: extracted text, summaries, homework guides
- Progress: task kinds, statuses, progress updates
"""

# Grade schemas
from .grade import (
    GradeLevel,
    GRADE_LEVELS,
    InvalidGradeError,
    parse_grade,
)

# Breakdown schemas
from .breakdown import (
    Difficulty,
    ReadingChunk,
    HomeworkQuestion,
    ReadingBreakdown,
    HomeworkBreakdown,
    count_words,
    placeholder_chunk,
    placeholder_question,
    load_reading_units,
    load_homework_units,
)

# Material schemas
from .material import (
    ExtractedText,
    MaterialSummary,
    HomeworkGuide,
)

# Progress schemas
from .progress import (
    TaskKind,
    TaskStatus,
    ProgressUpdate,
)

__all__ = [
    # Grade
    'GradeLevel',
    'GRADE_LEVELS',
    'InvalidGradeError',
    'parse_grade',
    # Breakdown
    'Difficulty',
    'ReadingChunk',
    'HomeworkQuestion',
    'ReadingBreakdown',
    'HomeworkBreakdown',
    'count_words',
    'placeholder_chunk',
    'placeholder_question',
    'load_reading_units',
    'load_homework_units',
    # Material
    'ExtractedText',
    'MaterialSummary',
    'HomeworkGuide',
    # Progress
    'TaskKind',
    'TaskStatus',
    'ProgressUpdate',
]
