"""Synonym suggestions for overused words.

Tables are hand-authored per surface form ("mener", not the stem "men"),
so lookup is an exact match on the case-folded word.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Tuple

from skriv.utils.text_processing import normalize_word

SynonymTable = Mapping[str, Tuple[str, ...]]


def normalize_key(word: str) -> str:
    return normalize_word(word.strip())


def build_synonym_table(mapping: Mapping[str, Iterable[Any]]) -> SynonymTable:
    """Freeze a ``word -> alternatives`` mapping with normalized keys.

    Alternatives keep their authored order (presentation priority).
    """
    table = {}
    for word, alternatives in mapping.items():
        table[normalize_key(str(word))] = tuple(str(a) for a in alternatives)
    return MappingProxyType(table)


def suggest(word: str, table: Mapping[str, Iterable[str]]) -> List[str]:
    """Ordered alternatives for *word*, or ``[]`` when it has no entry."""
    return list(table.get(normalize_key(word), ()))


def has_synonyms(word: str, table: Mapping[str, Iterable[str]]) -> bool:
    return bool(table.get(normalize_key(word)))
