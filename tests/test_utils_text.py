"""Tests for the tokenizer."""

from __future__ import annotations

import types

import pytest

from filescout.utils.text import count_words, iter_tokens


class TestIterTokens:
    """Test iter_tokens function."""

    def test_lowercases_and_strips_punctuation(self) -> None:
        """Should normalize case and drop surrounding punctuation."""
        assert list(iter_tokens("Hello, World! hello...")) == ["hello", "world", "hello"]

    def test_splits_on_punctuation_boundaries(self) -> None:
        """Punctuation inside a run splits it into separate tokens."""
        assert list(iter_tokens("don't snake_case e-mail")) == [
            "don",
            "t",
            "snake",
            "case",
            "e",
            "mail",
        ]

    def test_keeps_digits_and_unicode_letters(self) -> None:
        """Should keep alphanumeric runs including non-ASCII letters."""
        assert list(iter_tokens("R2D2 visited the Café in 1999")) == [
            "r2d2",
            "visited",
            "the",
            "café",
            "in",
            "1999",
        ]

    def test_whitespace_only_and_empty(self) -> None:
        """Should yield nothing for empty or punctuation-only text."""
        assert list(iter_tokens("")) == []
        assert list(iter_tokens("   \n\t ")) == []
        assert list(iter_tokens("... !!! ---")) == []

    def test_is_lazy(self) -> None:
        """Should return a generator rather than a list."""
        assert isinstance(iter_tokens("a b"), types.GeneratorType)

    def test_restartable(self) -> None:
        """Each call over the same text yields the same sequence."""
        text = "One fish, two fish. Red fish, blue fish!"
        assert list(iter_tokens(text)) == list(iter_tokens(text))


class TestCountWords:
    """Test count_words function."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", 0),
            ("single", 1),
            ("Hello, world! Hello again.", 4),
            ("  spaced   out\nlines  ", 3),
        ],
    )
    def test_counts(self, text: str, expected: int) -> None:
        assert count_words(text) == expected
