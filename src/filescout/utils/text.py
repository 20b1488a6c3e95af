"""Text helpers: word tokenization."""

from __future__ import annotations

import re
from typing import Iterator

# Runs of letters and digits; underscores and punctuation act as boundaries.
_WORD_RE = re.compile(r"[^\W_]+")


def iter_tokens(text: str) -> Iterator[str]:
    """Yield lower-cased word tokens from text.

    Tokens are split on whitespace and punctuation, so surrounding
    punctuation never survives and empty tokens are never produced.
    Calling it again on the same text yields the same sequence.
    """
    for match in _WORD_RE.finditer(text):
        yield match.group(0).lower()


def count_words(text: str) -> int:
    """Count the tokens in text without materializing them."""
    return sum(1 for _ in iter_tokens(text))
