"""
Tests for task preparation (text + grade + kind -> breakdown + minutes).
"""

import pytest

from studypace import PreparedTask, prepare_task
from studypace.schemas import (
    ExtractedText,
    GradeLevel,
    HomeworkBreakdown,
    InvalidGradeError,
    ReadingBreakdown,
    TaskKind,
    load_homework_units,
    load_reading_units,
)

SENTENCE = "Our solar system has eight planets that orbit the Sun."  # 10 words
HOMEWORK = (
    "Solar System Quiz\n\n"
    "1. What is the name of our star?\n"
    "2. List the four inner planets.\n"
    "3. Explain why Jupiter is called a gas giant."
)


class RecordingGenerator:
    """Generator that returns canned units and records calls."""

    def __init__(self):
        self.calls = []

    def chunk_reading(self, text, grade):
        self.calls.append(("chunk_reading", grade))
        return []

    def detect_questions(self, text):
        self.calls.append(("detect_questions", text))
        return []


class TestReadingTasks:

    def test_reading_task(self):
        task = prepare_task(" ".join([SENTENCE] * 42), "G5", TaskKind.READING)
        assert isinstance(task, PreparedTask)
        assert task.kind is TaskKind.READING
        assert task.grade is GradeLevel.G5
        assert isinstance(task.breakdown, ReadingBreakdown)
        assert task.unit_count == 2
        assert task.etc_minutes == 4

    def test_accepts_extracted_text(self):
        material = ExtractedText.from_text(" ".join([SENTENCE] * 3), page_count=1)
        task = prepare_task(material, 8, "reading")
        assert task.grade is GradeLevel.G8
        assert task.unit_count == 1

    def test_payload_is_camel_case(self):
        task = prepare_task(SENTENCE, "K", "READING")
        payload = task.breakdown_payload()
        assert list(payload) == ["chunks"]
        chunk = payload["chunks"][0]
        assert chunk["chunkText"] == SENTENCE
        assert chunk["wordCount"] == 10
        assert chunk["estMinutes"] == 1
        assert "heading" not in chunk

    def test_payload_loads_back(self):
        task = prepare_task(" ".join([SENTENCE] * 60), "G3", TaskKind.READING)
        assert load_reading_units(task.breakdown_payload()) == task.breakdown.chunks

    def test_empty_material(self):
        task = prepare_task("   ", "G5", TaskKind.READING)
        assert task.unit_count == 0
        assert task.etc_minutes == 0
        assert len(load_reading_units(task.breakdown_payload())) == 1


class TestHomeworkTasks:

    def test_homework_task(self):
        task = prepare_task(HOMEWORK, "G5", TaskKind.HOMEWORK)
        assert isinstance(task.breakdown, HomeworkBreakdown)
        assert [q.index for q in task.breakdown.questions] == [1, 2, 3]
        # base 3: easy 3.0 + easy 3.0 + hard 4.8 = 10.8
        assert task.etc_minutes == 11

    def test_payload_loads_back(self):
        task = prepare_task(HOMEWORK, "G10", "homework")
        payload = task.breakdown_payload()
        assert payload["questions"][2]["difficulty"] == "hard"
        assert load_homework_units(payload) == task.breakdown.questions

    def test_no_questions(self):
        task = prepare_task("Read chapter four tonight.", "G5", TaskKind.HOMEWORK)
        assert task.unit_count == 0
        assert task.etc_minutes == 0


class TestPrepareTaskInputs:

    def test_invalid_grade(self):
        with pytest.raises(InvalidGradeError):
            prepare_task(SENTENCE, "G13", TaskKind.READING)

    def test_invalid_kind(self):
        with pytest.raises(ValueError):
            prepare_task(SENTENCE, "G5", "quiz")

    def test_uses_given_generator(self):
        generator = RecordingGenerator()
        prepare_task(SENTENCE, "7", TaskKind.READING, generator=generator)
        prepare_task(HOMEWORK, "7", TaskKind.HOMEWORK, generator=generator)
        assert generator.calls == [
            ("chunk_reading", GradeLevel.G7),
            ("detect_questions", HOMEWORK),
        ]
