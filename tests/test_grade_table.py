"""
Tests for grade-calibrated lookup tables.
"""

import pytest

from studypace.engine import (
    GradeBand,
    GRADE_BANDS,
    grade_band,
    grade_to_wpm,
    grade_to_base_minutes_per_question,
    is_primary_grade,
    target_chunk_size,
    grade_display_name,
)
from studypace.schemas import GRADE_LEVELS, GradeLevel, InvalidGradeError


class TestGradeBands:
    """Every grade belongs to exactly one band."""

    def test_bands_cover_all_grades(self):
        assert set(GRADE_BANDS) == set(GRADE_LEVELS)

    def test_band_edges(self):
        assert grade_band("K") is GradeBand.EARLY
        assert grade_band("G2") is GradeBand.EARLY
        assert grade_band("G3") is GradeBand.UPPER_ELEMENTARY
        assert grade_band("G5") is GradeBand.UPPER_ELEMENTARY
        assert grade_band("G6") is GradeBand.MIDDLE
        assert grade_band("G8") is GradeBand.MIDDLE
        assert grade_band("G9") is GradeBand.HIGH
        assert grade_band("G12") is GradeBand.HIGH

    def test_bands_are_contiguous(self):
        bands = [grade_band(g) for g in GRADE_LEVELS]
        seen = []
        for band in bands:
            if not seen or seen[-1] is not band:
                assert band not in seen
                seen.append(band)
        assert seen == list(GradeBand)


class TestReadingSpeed:

    def test_wpm_examples(self):
        assert grade_to_wpm("K") == 100
        assert grade_to_wpm("G5") == 140
        assert grade_to_wpm("G8") == 165
        assert grade_to_wpm("G12") == 190

    def test_wpm_by_grade(self):
        expected = [100] * 3 + [140] * 3 + [165] * 3 + [190] * 4
        assert [grade_to_wpm(g) for g in GRADE_LEVELS] == expected

    def test_wpm_never_decreases(self):
        speeds = [grade_to_wpm(g) for g in GRADE_LEVELS]
        assert speeds == sorted(speeds)


class TestQuestionMinutes:

    def test_base_minutes_by_grade(self):
        expected = [2] * 3 + [3] * 3 + [4] * 3 + [5] * 4
        assert [grade_to_base_minutes_per_question(g) for g in GRADE_LEVELS] == expected


class TestChunkSize:

    def test_primary_grades(self):
        assert all(is_primary_grade(g) for g in GRADE_LEVELS[:6])
        assert not any(is_primary_grade(g) for g in GRADE_LEVELS[6:])

    def test_target_chunk_size(self):
        assert target_chunk_size("K") == 300
        assert target_chunk_size("G5") == 300
        assert target_chunk_size("G6") == 500
        assert target_chunk_size(GradeLevel.G12) == 500


class TestDisplayName:

    def test_display_names(self):
        assert grade_display_name("K") == "Kindergarten"
        assert grade_display_name("G1") == "Grade 1"
        assert grade_display_name(GradeLevel.G10) == "Grade 10"


class TestInvalidGrade:
    """Unknown grades fail instead of defaulting."""

    @pytest.mark.parametrize("func", [
        grade_to_wpm,
        grade_to_base_minutes_per_question,
        target_chunk_size,
        is_primary_grade,
        grade_display_name,
    ])
    def test_invalid_grade_raises(self, func):
        with pytest.raises(InvalidGradeError):
            func("G13")
