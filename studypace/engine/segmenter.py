"""
Sentence-aware reading chunker.

Splits text into chunks of whole sentences bounded by a target word count.
A sentence longer than the target becomes its own chunk; sentences are
never split.
"""

import math
import re

from studypace.schemas import ReadingChunk

from .grade_table import target_chunk_size

# Flat reading speed for the rough per-chunk estimate (grade independent)
CHUNK_READING_WPM = 150

SENTENCE_DELIMITERS = re.compile(r'[.!?]+')


def split_sentences(text: str) -> list[str]:
    """Split on runs of terminal punctuation, dropping blank pieces."""
    return [s.strip() for s in SENTENCE_DELIMITERS.split(text) if s.strip()]


def _make_chunk(sentences: list[str], word_count: int) -> ReadingChunk:
    return ReadingChunk(
        chunk_text=" ".join(f"{s}." for s in sentences),
        est_minutes=math.ceil(word_count / CHUNK_READING_WPM),
        word_count=word_count,
    )


def chunk_text(text: str, target_words: int) -> list[ReadingChunk]:
    """
    Group sentences into chunks of at most `target_words` words.

    Args:
        text: Raw extracted text
        target_words: Word budget per chunk (must be positive)

    Returns:
        Chunks in reading order; empty for blank text
    """
    if target_words < 1:
        raise ValueError(f"target_words must be positive, got {target_words}")

    chunks: list[ReadingChunk] = []
    current: list[str] = []
    current_words = 0

    for sentence in split_sentences(text or ""):
        sentence_words = len(sentence.split())
        if current and current_words + sentence_words > target_words:
            chunks.append(_make_chunk(current, current_words))
            current = []
            current_words = 0
        current.append(sentence)
        current_words += sentence_words

    if current:
        chunks.append(_make_chunk(current, current_words))

    return chunks


def chunk_reading_for_grade(text: str, grade) -> list[ReadingChunk]:
    """Chunk text using the grade's target chunk size."""
    return chunk_text(text, target_chunk_size(grade))
