"""
Grade-calibrated lookup tables.

Every grade maps explicitly to a band; reading speed, per-question time and
chunk size are looked up by band. Values are midpoints of published
reading-speed ranges for each band.
"""

from enum import Enum

from studypace.schemas import GradeLevel, parse_grade


class GradeBand(str, Enum):
    EARLY = "early"                        # K-G2
    UPPER_ELEMENTARY = "upper_elementary"  # G3-G5
    MIDDLE = "middle"                      # G6-G8
    HIGH = "high"                          # G9-G12


GRADE_BANDS: dict[GradeLevel, GradeBand] = {
    GradeLevel.K: GradeBand.EARLY,
    GradeLevel.G1: GradeBand.EARLY,
    GradeLevel.G2: GradeBand.EARLY,
    GradeLevel.G3: GradeBand.UPPER_ELEMENTARY,
    GradeLevel.G4: GradeBand.UPPER_ELEMENTARY,
    GradeLevel.G5: GradeBand.UPPER_ELEMENTARY,
    GradeLevel.G6: GradeBand.MIDDLE,
    GradeLevel.G7: GradeBand.MIDDLE,
    GradeLevel.G8: GradeBand.MIDDLE,
    GradeLevel.G9: GradeBand.HIGH,
    GradeLevel.G10: GradeBand.HIGH,
    GradeLevel.G11: GradeBand.HIGH,
    GradeLevel.G12: GradeBand.HIGH,
}

WPM_BY_BAND = {
    GradeBand.EARLY: 100,             # 90-110
    GradeBand.UPPER_ELEMENTARY: 140,  # 130-150
    GradeBand.MIDDLE: 165,            # 160-170
    GradeBand.HIGH: 190,              # 180-200
}

BASE_MINUTES_PER_QUESTION_BY_BAND = {
    GradeBand.EARLY: 2,
    GradeBand.UPPER_ELEMENTARY: 3,
    GradeBand.MIDDLE: 4,
    GradeBand.HIGH: 5,
}

PRIMARY_BANDS = frozenset({GradeBand.EARLY, GradeBand.UPPER_ELEMENTARY})
PRIMARY_CHUNK_WORDS = 300    # 250-350
SECONDARY_CHUNK_WORDS = 500  # 400-600


def grade_band(grade) -> GradeBand:
    """Band for a grade; raises InvalidGradeError for unknown grades."""
    return GRADE_BANDS[parse_grade(grade)]


def grade_to_wpm(grade) -> int:
    return WPM_BY_BAND[grade_band(grade)]


def grade_to_base_minutes_per_question(grade) -> int:
    return BASE_MINUTES_PER_QUESTION_BY_BAND[grade_band(grade)]


def is_primary_grade(grade) -> bool:
    return grade_band(grade) in PRIMARY_BANDS


def target_chunk_size(grade) -> int:
    """Target words per reading chunk."""
    return PRIMARY_CHUNK_WORDS if is_primary_grade(grade) else SECONDARY_CHUNK_WORDS


def grade_display_name(grade) -> str:
    level = parse_grade(grade)
    if level is GradeLevel.K:
        return "Kindergarten"
    return f"Grade {level.value[1:]}"
