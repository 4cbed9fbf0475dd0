"""
Tests for the sentence-aware reading chunker.
"""

import pytest

from studypace.engine import (
    CHUNK_READING_WPM,
    chunk_text,
    chunk_reading_for_grade,
    split_sentences,
)
from studypace.schemas import count_words

TEN_WORD_SENTENCE = "Alpha beta gamma delta epsilon zeta eta theta iota kappa."


def repeated_text(sentences: int) -> str:
    return " ".join([TEN_WORD_SENTENCE] * sentences)


class TestSplitSentences:

    def test_split_on_terminal_punctuation(self):
        assert split_sentences("Wow! Really?? Yes. Done...") == ["Wow", "Really", "Yes", "Done"]

    def test_blank_pieces_dropped(self):
        assert split_sentences("  ...  !!!  ") == []


class TestChunkText:

    def test_empty_text(self):
        assert chunk_text("", 100) == []
        assert chunk_text("   \n\t ", 100) == []
        assert chunk_text("... ?! .", 100) == []

    def test_groups_sentences_up_to_target(self):
        chunks = chunk_text("One two three. Four five six. Seven eight nine.", 6)
        assert [c.chunk_text for c in chunks] == [
            "One two three. Four five six.",
            "Seven eight nine.",
        ]
        assert [c.word_count for c in chunks] == [6, 3]

    def test_terminal_punctuation_normalized_to_period(self):
        chunks = chunk_text("Wow! Really? Yes.", 100)
        assert len(chunks) == 1
        assert chunks[0].chunk_text == "Wow. Really. Yes."

    def test_long_sentence_forms_own_chunk(self):
        chunks = chunk_text("a b c d e f g h. i j. k l m.", 5)
        assert [c.chunk_text for c in chunks] == ["a b c d e f g h.", "i j. k l m."]
        assert chunks[0].word_count == 8

    def test_long_sentence_after_short_one(self):
        chunks = chunk_text("Short one. a b c d e f g h.", 5)
        assert [c.chunk_text for c in chunks] == ["Short one.", "a b c d e f g h."]

    def test_chunks_within_target_unless_single_sentence(self):
        text = "A b c. " + "d e f g h i j k. " + "l m. n o p q. r s t u v w. x."
        target = 5
        for chunk in chunk_text(text, target):
            assert chunk.word_count > 0
            if chunk.word_count > target:
                assert len(split_sentences(chunk.chunk_text)) == 1

    def test_sentence_order_and_content_preserved(self):
        text = "The Sun is a star! Earth orbits it? Mars is red. Jupiter is large.\nSaturn has rings."
        chunks = chunk_text(text, 7)
        rebuilt = " ".join(c.chunk_text for c in chunks)
        assert rebuilt == " ".join(f"{s}." for s in split_sentences(text))

    def test_word_count_matches_text(self):
        for chunk in chunk_text(repeated_text(37), 120):
            assert chunk.word_count == count_words(chunk.chunk_text)

    def test_flat_minutes_estimate(self):
        assert CHUNK_READING_WPM == 150
        one = chunk_text("Hello.", 300)[0]
        assert one.est_minutes == 1
        full = chunk_text(repeated_text(30), 300)[0]
        assert full.word_count == 300
        assert full.est_minutes == 2
        over = chunk_text(repeated_text(16), 300)[0]
        assert over.word_count == 160
        assert over.est_minutes == 2

    def test_target_must_be_positive(self):
        with pytest.raises(ValueError):
            chunk_text("Hello.", 0)


class TestChunkReadingForGrade:

    def test_primary_grade_uses_300_words(self):
        chunks = chunk_reading_for_grade(repeated_text(100), "G5")
        assert [c.word_count for c in chunks] == [300, 300, 300, 100]

    def test_secondary_grade_uses_500_words(self):
        chunks = chunk_reading_for_grade(repeated_text(100), "G9")
        assert [c.word_count for c in chunks] == [500, 500]

    def test_invalid_grade(self):
        with pytest.raises(ValueError):
            chunk_reading_for_grade("Hello.", "G20")
