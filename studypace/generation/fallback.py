"""
Deterministic content generator backed by the segmentation engine.
"""

import math
import re
from collections import Counter
from typing import Sequence

from studypace.engine import (
    chunk_reading_for_grade,
    detect_questions,
    estimate_homework_minutes,
    grade_display_name,
)
from studypace.schemas import (
    HomeworkGuide,
    HomeworkQuestion,
    MaterialSummary,
    ReadingChunk,
    count_words,
)

WORD_PATTERN = re.compile(r"[A-Za-z][A-Za-z'-]+")

STOPWORDS = frozenset("""
a about above after again against all also an and any are as at be because
been before being below between both but by can could did do does doing down
during each few for from further had has have having he her here hers him his
how i if in into is it its itself just like many more most much must my no nor
not now of off on once only or other our ours out over own same she should so
some such than that the their theirs them then there these they this those
through to too under until up very was we were what when where which while who
whom why will with would you your yours
""".split())

VOCABULARY_MIN_LENGTH = 8
VOCABULARY_SIZE = 8
KEY_CONCEPT_COUNT = 3

STUDY_STEPS = [
    "Read the question carefully",
    "Think about what you know",
    "Write your answer",
]
STUDY_HINTS = [
    "Take your time",
    "Ask for help if needed",
]


class DeterministicFallback:
    """Content generator that needs no network access."""

    def summarize_material(self, text: str, grade) -> MaterialSummary:
        grade_name = grade_display_name(grade)
        words = [w.lower() for w in WORD_PATTERN.findall(text)]
        content_words = Counter(w for w in words if w not in STOPWORDS and len(w) > 3)

        key_concepts = [w for w, _ in content_words.most_common(KEY_CONCEPT_COUNT)]
        vocabulary = sorted(
            {w for w in content_words if len(w) >= VOCABULARY_MIN_LENGTH},
            key=lambda w: (-content_words[w], w),
        )[:VOCABULARY_SIZE]

        return MaterialSummary(
            summary=(
                f"This material contains {count_words(text)} words and covers "
                f"important topics for {grade_name} students."
            ),
            vocabulary=vocabulary,
            key_concepts=key_concepts,
        )

    def chunk_reading(self, text: str, grade) -> list[ReadingChunk]:
        return chunk_reading_for_grade(text, grade)

    def detect_questions(self, text: str) -> list[HomeworkQuestion]:
        return detect_questions(text)

    def breakdown_homework(self, questions: Sequence[HomeworkQuestion], grade) -> HomeworkGuide:
        minutes = estimate_homework_minutes(questions, grade)
        return HomeworkGuide(
            steps=list(STUDY_STEPS),
            hints=list(STUDY_HINTS),
            estimated_minutes=math.ceil(round(minutes, 6)),
        )
