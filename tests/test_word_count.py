"""
Tests for word counting and expansion arithmetic.
"""

import pytest
from src.uno.utils.word_count import (
    WordCounter,
    DEFAULT_EXPANSION_TARGET,
    round_half_up,
)


def test_default_expansion_target_constant():
    """Tests that the default expansion target doubles the text."""
    assert DEFAULT_EXPANSION_TARGET == 200


def test_word_count_basic():
    """Tests basic word counting functionality."""
    counter = WordCounter()
    assert counter.count_words("This is a test sentence with eight words.") == 8


def test_word_count_collapses_whitespace_runs():
    counter = WordCounter()
    assert counter.count_words("  one\t two\n\nthree   ") == 3


def test_word_count_empty():
    """Tests word counting with empty text, blank text and None."""
    counter = WordCounter()
    assert counter.count_words("") == 0
    assert counter.count_words("   \n ") == 0
    assert counter.count_words(None) == 0


def test_word_count_non_string_is_zero():
    counter = WordCounter()
    assert counter.count_words(123) == 0
    assert counter.count_words(["a", "b"]) == 0


@pytest.mark.parametrize("value,expected", [
    (2.5, 3),
    (3.5, 4),
    (2.4, 2),
    (0.5, 1),
    (10.0, 10),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_target_count():
    counter = WordCounter()
    assert counter.target_count(10) == 20
    assert counter.target_count(10, 150) == 15
    assert counter.target_count(5, 150) == 8
    assert counter.target_count(0, 300) == 0


def test_expansion_percent():
    counter = WordCounter()
    assert counter.expansion_percent(10, 25) == 250
    assert counter.expansion_percent(3, 4) == 133
    assert counter.expansion_percent(0, 40) == 0


def test_has_reached_target():
    counter = WordCounter()
    assert counter.has_reached_target(10, 15, 150) is True
    assert counter.has_reached_target(10, 14, 150) is False
    assert counter.has_reached_target(0, 10, 100) is False
