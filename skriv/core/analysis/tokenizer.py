"""
tokenizer.py - Locale-aware word tokenizer

Word characters are Unicode letters, which covers æ, ø, å and other
diacritics in every locale. Some locales also allow a joiner between
letters (English "don't"). Digits, underscores, punctuation and
whitespace are boundaries.
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, NamedTuple, Optional, Pattern

from skriv.utils.text_processing import normalize_word

# a letter plus any combining marks that follow it (decomposed å = a + U+030A)
_LETTERS = r"(?:[^\W\d_][\u0300-\u036f]*)+"

# characters allowed *inside* a word, between letters
LOCALE_JOINERS: Dict[str, str] = {
    "en": "'’",
    "nb": "",
    "nn": "",
}

_PATTERNS: Dict[str, Pattern[str]] = {}


class Token(NamedTuple):
    word: str
    start: int
    end: int

    @property
    def normalized(self) -> str:
        return normalize_word(self.word)


def word_pattern(locale: Optional[str] = None) -> Pattern[str]:
    # "en-US" and "en_GB" use the "en" joiners
    primary = (locale or "").replace("_", "-").split("-")[0].lower()
    joiners = LOCALE_JOINERS.get(primary, "")
    pattern = _PATTERNS.get(joiners)
    if pattern is None:
        if joiners:
            body = f"{_LETTERS}(?:[{re.escape(joiners)}]{_LETTERS})*"
        else:
            body = _LETTERS
        pattern = _PATTERNS[joiners] = re.compile(body)
    return pattern


class TokenStream:
    """Lazy, restartable sequence of tokens.

    Every iteration scans the text again from the start, so two passes over
    the same stream yield identical tokens.
    """

    def __init__(self, text: str, locale: Optional[str] = None):
        self.text = text
        self.locale = locale
        self._pattern = word_pattern(locale)

    def __iter__(self) -> Iterator[Token]:
        for match in self._pattern.finditer(self.text):
            yield Token(match.group(0), match.start(), match.end())


def tokenize(text: str, locale: Optional[str] = None) -> TokenStream:
    return TokenStream(text, locale)
