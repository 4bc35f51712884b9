"""Behavior tests for word counting and stop-word filtering."""

import pytest

from vid2words.aggregator import aggregate, is_significant
from vid2words.constants import STOP_WORDS
from vid2words.models import Token, WordStat


def test_is_significant_rejects_noise() -> None:
    """Empty tokens, numerals and stop words should be rejected."""
    assert not is_significant("")
    assert not is_significant("42")
    assert not is_significant("the")
    assert is_significant("bunny")
    assert is_significant("4th")


def test_stop_words_include_required_function_words() -> None:
    """The closed stop-word list should cover the required entries."""
    required = (
        "the a an and or but is are was were in on at of to for with by as "
        "i you he she it we they that this so be from out up down like just me"
    ).split()

    assert set(required) <= STOP_WORDS


def test_aggregate_counts_words_and_collects_offsets() -> None:
    """Counts and distinct offsets should accumulate per word."""
    tokens = [
        Token("big", 1.0),
        Token("buck", 1.0),
        Token("bunny", 1.0),
        Token("big", 3.0),
        Token("bunny", 3.0),
    ]

    stats = aggregate(tokens)

    assert stats == {
        "big": WordStat(2, {1.0, 3.0}),
        "buck": WordStat(1, {1.0}),
        "bunny": WordStat(2, {1.0, 3.0}),
    }


def test_aggregate_collapses_repeated_offsets() -> None:
    """A word repeated at one offset counts twice but keeps one offset."""
    stats = aggregate([Token("bunny", 1.0), Token("bunny", 1.0)])

    assert stats["bunny"].count == 2
    assert stats["bunny"].timestamps == {1.0}


def test_aggregate_drops_numerals_and_stop_words() -> None:
    """Only significant words should reach the mapping."""
    stats = aggregate([Token("42", 0.0), Token("is", 0.0), Token("the", 0.0), Token("answer", 0.0)])

    assert list(stats) == ["answer"]
    assert stats["answer"].count == 1


def test_aggregate_accepts_custom_stop_words_case_insensitively() -> None:
    """Caller-supplied stop words should replace the defaults."""
    stats = aggregate([Token("the", 0.0), Token("bunny", 1.0)], stop_words=["Bunny"])

    assert list(stats) == ["the"]


def test_aggregate_keeps_first_occurrence_order() -> None:
    """Mapping keys should follow the order words are first spoken."""
    stats = aggregate([Token("zebra", 0.0), Token("apple", 1.0), Token("zebra", 2.0)])

    assert list(stats) == ["zebra", "apple"]


def test_aggregate_empty_input() -> None:
    """No tokens should give an empty mapping."""
    assert aggregate([]) == {}


def test_aggregate_rejects_bare_string_stop_words() -> None:
    """A single string would be split into letters, so it should raise."""
    with pytest.raises(TypeError, match="stop_words"):
        aggregate([Token("the", 0.0)], stop_words="the")
