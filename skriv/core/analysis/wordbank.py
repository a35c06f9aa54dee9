"""
wordbank.py - Per-language word data for feedback features

A word bank bundles the static data the analyzer and the synonym popup
need for one language:

    stopwords   words ignored by the repetition radar
    synonyms    overused word -> ordered alternatives
    suffixes    ordered suffix list for the stemmer
    starters    sentence starters grouped by rhetorical function

Banks are loaded once and passed by reference; nothing here holds global
state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Tuple

import yaml

from skriv.utils.io_helpers import read_utf8
from skriv.utils.logging_helper import get_logger
from skriv.utils.paths import WORDBANK_DIR
from skriv.utils.text_processing import normalize_word
from ..errors import WordBankError
from .stemmer import Stemmer, StemFunction, identity_stem
from .synonyms import SynonymTable, build_synonym_table

log = get_logger()

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class WordBank:
    language: str
    stopwords: FrozenSet[str] = frozenset()
    synonyms: SynonymTable = field(default_factory=lambda: _EMPTY)
    suffixes: Tuple[str, ...] = ()
    starters: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: _EMPTY)
    stem: StemFunction = field(default=identity_stem, compare=False)

    @classmethod
    def empty(cls, language: str) -> "WordBank":
        return cls(language)


def _string_list(data: Mapping[str, Any], name: str, path: Path) -> list:
    value = data.get(name) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise WordBankError(f"{path}: '{name}' must be a list of strings")
    return value


def parse_word_bank(data: Any, language: str, path: Path = Path("<memory>")) -> WordBank:
    if not isinstance(data, Mapping):
        raise WordBankError(f"{path}: expected a mapping at top level")

    stopwords = frozenset(normalize_word(w) for w in _string_list(data, "stopwords", path))
    suffixes = tuple(_string_list(data, "suffixes", path))

    synonyms = data.get("synonyms") or {}
    if not isinstance(synonyms, Mapping) or not all(isinstance(v, list) for v in synonyms.values()):
        raise WordBankError(f"{path}: 'synonyms' must map words to lists")

    starters = data.get("starters") or {}
    if not isinstance(starters, Mapping) or not all(isinstance(v, list) for v in starters.values()):
        raise WordBankError(f"{path}: 'starters' must map categories to lists")

    return WordBank(
        language=language,
        stopwords=stopwords,
        synonyms=build_synonym_table(synonyms),
        suffixes=suffixes,
        starters=MappingProxyType({str(k): tuple(v) for k, v in starters.items()}),
        stem=Stemmer(suffixes) if suffixes else identity_stem,
    )


def bank_language(language: str) -> str:
    """Nynorsk has its own bank; every other language uses Bokmål."""
    return "nn" if language == "nn" else "nb"


def load_word_bank_file(path: Path, language: str) -> WordBank:
    path = Path(path)
    try:
        data = yaml.safe_load(read_utf8(path))
    except OSError as exc:
        raise WordBankError(f"Cannot read word bank {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise WordBankError(f"Cannot parse word bank {path}: {exc}") from exc
    return parse_word_bank(data, language, path)


def load_word_bank(language: str, banks_dir: Path = WORDBANK_DIR) -> WordBank:
    """Load the bank for *language*; on failure log and return an empty bank."""
    bank_lang = bank_language(language)
    path = Path(banks_dir) / f"{bank_lang}.yaml"
    try:
        bank = load_word_bank_file(path, bank_lang)
    except WordBankError as exc:
        log.error(f"Failed to load word bank for {language!r}: {exc}")
        return WordBank.empty(bank_lang)
    log.debug(f"Loaded word bank {bank_lang}: {len(bank.stopwords)} stopwords, "
              f"{len(bank.synonyms)} synonym entries, {len(bank.suffixes)} suffixes")
    return bank
