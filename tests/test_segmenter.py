"""
Tests for the sentence segmenter.
"""

import pytest

from transcript_digest.core.segmenter import segment, split_sentences
from transcript_digest.models.schemas import SummarizerConfig


def test_two_sentences_come_back_unchanged():
    """Test that joined valid sentences are segmented back exactly."""
    first = "The first sentence is long enough."
    second = "The second sentence is also long enough."

    sentences = segment(f"{first} {second}")

    assert [s.text for s in sentences] == [first, second]
    assert [s.index for s in sentences] == [0, 1]


def test_short_fragments_are_dropped_not_merged():
    """Test that fragments of 20 characters or fewer are discarded."""
    sentences = segment("Hi there. This sentence is certainly long enough!")

    assert [s.text for s in sentences] == ["This sentence is certainly long enough!"]
    assert sentences[0].index == 0


def test_length_boundary():
    """Test that exactly 20 characters is dropped and 21 is kept."""
    twenty = "x" * 19 + "."
    twenty_one = "y" * 20 + "."

    sentences = segment(f"{twenty} {twenty_one}")

    assert [s.text for s in sentences] == [twenty_one]


def test_newlines_collapse_to_a_single_space():
    """Test that runs of newlines become one space."""
    sentences = segment("Line one continues here\n\n\non the next line. Another sentence that is long.")

    assert sentences[0].text == "Line one continues here on the next line."
    assert len(sentences) == 2


def test_all_terminators_split():
    """Test splitting on question and exclamation marks."""
    sentences = segment("Is this a real question? Yes it is a real answer! And a statement too, see.")

    assert [s.text for s in sentences] == [
        "Is this a real question?",
        "Yes it is a real answer!",
        "And a statement too, see.",
    ]


def test_abbreviations_are_split_points():
    """Test that an abbreviation such as Mr. ends a piece."""
    sentences = segment("Mr. Smith went to Washington today. He liked the monuments a lot.")

    assert [s.text for s in sentences] == [
        "Smith went to Washington today.",
        "He liked the monuments a lot.",
    ]


def test_terminator_without_whitespace_does_not_split():
    """Test that a period inside a token is not a boundary."""
    sentences = segment("We shipped version 2.0 of the product today.")

    assert len(sentences) == 1


def test_trailing_fragment_without_terminator_is_kept():
    """Test that the unterminated tail is still produced."""
    sentences = segment("This one ends properly. and this trailing fragment has no end")

    assert sentences[-1].text == "and this trailing fragment has no end"


def test_tab_after_terminator_splits():
    """Test that any whitespace after a terminator is a split point."""
    pieces = split_sentences("First sentence here is long.\tSecond sentence is long too.")

    assert pieces == ["First sentence here is long.", "Second sentence is long too."]


@pytest.mark.parametrize("text", ["", "   ", "too short", "Hello. World. Bye."])
def test_no_sentences(text):
    """Test inputs that yield no sentences at all."""
    assert segment(text) == []


def test_minimum_length_is_configurable():
    """Test the length filter follows the configuration."""
    config = SummarizerConfig(min_sentence_length=4)

    sentences = segment("Hello. World. Bye.", config)

    assert [s.text for s in sentences] == ["Hello.", "World."]


def test_indexes_count_kept_sentences_only(talk_transcript):
    """Test indexes are contiguous over the kept sentences."""
    sentences = segment(talk_transcript)

    assert [s.index for s in sentences] == list(range(len(sentences)))
    assert all(len(s.text) > 20 for s in sentences)
    assert all(s.text == s.text.strip() for s in sentences)
