"""
stemmer.py - Heuristic suffix-stripping stemmer

Groups inflected forms (skriver, skriving, skrive) under one root so the
repetition radar counts them together. It is not a linguistic stemmer:
the first suffix in the list that matches, and leaves enough of the word,
is removed. The list must therefore be ordered longest / most specific
first by whoever authors it.

stem() is not idempotent: ``stem(stem(w))`` may strip a second suffix.
"""

from __future__ import annotations

from typing import Callable, Iterable, Tuple

StemFunction = Callable[[str], str]

MIN_STEM_LENGTH = 4
# a suffix is only removed when the word is longer than the suffix + this
STEM_MARGIN = 2


def identity_stem(word: str) -> str:
    return word


class Stemmer:
    """Callable stemmer over an ordered suffix list."""

    def __init__(self, suffixes: Iterable[str], min_length: int = MIN_STEM_LENGTH,
                 margin: int = STEM_MARGIN):
        self.suffixes: Tuple[str, ...] = tuple(s for s in suffixes if s)
        self.min_length = min_length
        self.margin = margin

    def stem(self, word: str) -> str:
        if len(word) < self.min_length:
            return word
        for suffix in self.suffixes:
            if len(word) > len(suffix) + self.margin and word.endswith(suffix):
                return word[:-len(suffix)]
        return word

    __call__ = stem

    def __repr__(self) -> str:
        return f"Stemmer({len(self.suffixes)} suffixes)"
