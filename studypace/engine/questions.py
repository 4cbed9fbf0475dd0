"""
Homework question detection.

Primary strategy: numbered-question patterns ("1. ...", "1) ...",
"Question 1: ..."). Fallback, used only when no numbered question is
found: question-like sentences.

Several patterns can match the same physical question. Matches are taken in
text order; a match overlapping an accepted match is dropped, and a repeated
question number keeps its first occurrence.
"""

import re
from typing import NamedTuple

from studypace.schemas import Difficulty, HomeworkQuestion

DEFAULT_QUESTION_MINUTES = 3
MIN_PROMPT_LENGTH = 10

# A numbered line, a "Question n" marker, a blank line, or end of text
_NEXT_QUESTION = (
    r'(?=\n[ \t]*\d+[ \t]*[.)](?!\d)'
    r'|\n[ \t]*Question[ \t]*\d+[ \t]*[:.]'
    r'|\n[ \t]*\n'
    r'|\Z)'
)

QUESTION_PATTERNS = [
    # 1. text
    re.compile(r'^[ \t]*(\d+)[ \t]*\.(?!\d)[ \t]*(.+?)' + _NEXT_QUESTION, re.M | re.S),
    # 1) text
    re.compile(r'^[ \t]*(\d+)[ \t]*\)[ \t]*(.+?)' + _NEXT_QUESTION, re.M | re.S),
    # Question 1: text
    re.compile(
        r'Question[ \t]*(\d+)[ \t]*[:.][ \t]*(.+?)'
        r'(?=Question[ \t]*\d+[ \t]*[:.]|\n[ \t]*\d+[ \t]*[.)](?!\d)|\n[ \t]*\n|\Z)',
        re.M | re.S | re.I,
    ),
]

QUESTION_MARKERS = ("what", "how", "why", "explain", "describe")
FALLBACK_SENTENCE = re.compile(r'[^.!?]+[.!?]*')

HARD_MARKERS = ("explain", "analyze", "compare")
EASY_MARKERS = ("what is", "define", "list")


class _Match(NamedTuple):
    start: int
    end: int
    index: int
    prompt: str


def _normalize(text: str) -> str:
    return " ".join(text.split())


def estimate_difficulty(text: str) -> Difficulty:
    """Keyword heuristic; hard markers are checked before easy markers."""
    lower = text.lower()
    if any(marker in lower for marker in HARD_MARKERS):
        return Difficulty.HARD
    if any(marker in lower for marker in EASY_MARKERS):
        return Difficulty.EASY
    return Difficulty.MEDIUM


def _numbered_matches(text: str) -> list[_Match]:
    # Boundaries are matched on "\n" only; PDF extraction often yields CRLF
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    found = []
    for pattern in QUESTION_PATTERNS:
        for m in pattern.finditer(text):
            index = int(m.group(1))
            prompt = _normalize(m.group(2))
            if index < 1 or len(prompt) < MIN_PROMPT_LENGTH:
                continue
            found.append(_Match(m.start(), m.end(), index, prompt))
    return found


def _deduplicate(matches: list[_Match]) -> list[_Match]:
    accepted = []
    seen_indices = set()
    covered_until = -1
    # Stable sort keeps pattern order for matches starting at the same offset
    for match in sorted(matches, key=lambda m: m.start):
        if match.start < covered_until:
            continue
        covered_until = match.end
        if match.index in seen_indices:
            continue
        seen_indices.add(match.index)
        accepted.append(match)
    return accepted


def detect_numbered_questions(text: str) -> list[HomeworkQuestion]:
    return [
        HomeworkQuestion(
            index=m.index,
            prompt=m.prompt,
            difficulty=estimate_difficulty(m.prompt),
            est_minutes=DEFAULT_QUESTION_MINUTES,
        )
        for m in _deduplicate(_numbered_matches(text))
    ]


def detect_question_sentences(text: str) -> list[HomeworkQuestion]:
    """Question-like sentences, numbered by position."""
    questions = []
    for raw in FALLBACK_SENTENCE.findall(text):
        sentence = _normalize(raw)
        if not sentence.rstrip(".!?"):
            continue
        lower = sentence.lower()
        if "?" in sentence or any(marker in lower for marker in QUESTION_MARKERS):
            questions.append(HomeworkQuestion(
                index=len(questions) + 1,
                prompt=sentence,
                difficulty=estimate_difficulty(sentence),
                est_minutes=DEFAULT_QUESTION_MINUTES,
            ))
    return questions


def detect_questions(text: str) -> list[HomeworkQuestion]:
    """
    Detect homework questions in extracted text.

    Returns:
        Questions in text order; empty when nothing question-like is found
    """
    if not text or not text.strip():
        return []
    return detect_numbered_questions(text) or detect_question_sentences(text)
