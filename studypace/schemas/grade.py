"""
Grade level schema for StudyPace.

Defines the ordered grade enumeration used for every numeric band
(reading speed, per-question time, chunk size).
"""

from enum import Enum


class InvalidGradeError(ValueError):
    """Raised when a value does not name one of the supported grade levels."""


class GradeLevel(str, Enum):
    K = "K"
    G1 = "G1"
    G2 = "G2"
    G3 = "G3"
    G4 = "G4"
    G5 = "G5"
    G6 = "G6"
    G7 = "G7"
    G8 = "G8"
    G9 = "G9"
    G10 = "G10"
    G11 = "G11"
    G12 = "G12"


# Declaration order is the grade order
GRADE_LEVELS: tuple[GradeLevel, ...] = tuple(GradeLevel)


def parse_grade(value) -> GradeLevel:
    """
    Resolve a grade from an enum member, its value ("K", "G5") or a bare
    grade number ("5", 5, "0" for kindergarten).

    Raises:
        InvalidGradeError: If the value names no grade
    """
    if isinstance(value, GradeLevel):
        return value
    if isinstance(value, bool):
        raise InvalidGradeError(f"Invalid grade: {value!r}")
    if isinstance(value, int):
        value = "K" if value == 0 else f"G{value}"
    if isinstance(value, str):
        key = value.strip().upper()
        if key.isdigit():
            key = "K" if int(key) == 0 else f"G{int(key)}"
        try:
            return GradeLevel(key)
        except ValueError:
            pass
    raise InvalidGradeError(f"Invalid grade: {value!r}")
