"""
frequency.py - Word frequency analysis for the repetition radar

    analyze(text, stopwords, stem_fn) -> FrequencyReport

Tokenize -> case-fold -> drop stopwords -> stem -> count per stem.
The report is rebuilt from scratch on every call; documents are short
enough that a full re-scan is cheap.

Every token that survives the stopword filter contributes to exactly one
stem, so ``report.total`` equals the number of non-stopword tokens.
Whether a stem counts as "overused" is the caller's threshold.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Iterator, List, Optional, Tuple

from .stemmer import StemFunction
from .tokenizer import tokenize


@dataclass
class StemStats:
    stem: str
    count: int = 0
    forms: Counter = field(default_factory=Counter)        # normalized form -> count
    positions: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def distinct_forms(self) -> int:
        """How many different inflections were seen for this root."""
        return len(self.forms)

    @property
    def words(self) -> List[str]:
        return sorted(self.forms)


@dataclass
class FrequencyReport:
    entries: Dict[str, StemStats] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[StemStats]:
        return iter(self.entries.values())

    def __contains__(self, stem: object) -> bool:
        return stem in self.entries

    def __getitem__(self, stem: str) -> StemStats:
        return self.entries[stem]

    def get(self, stem: str) -> Optional[StemStats]:
        return self.entries.get(stem)

    @property
    def total(self) -> int:
        return sum(s.count for s in self.entries.values())

    def counts(self) -> Dict[str, int]:
        return {stem: s.count for stem, s in self.entries.items()}

    def most_common(self, n: Optional[int] = None) -> List[StemStats]:
        ranked = sorted(self.entries.values(), key=lambda s: (-s.count, s.stem))
        return ranked if n is None else ranked[:n]

    def overused(self, threshold: int) -> List[StemStats]:
        """Stems whose count is strictly greater than *threshold*."""
        return [s for s in self.most_common() if s.count > threshold]


def analyze(
    text: str,
    stopwords: AbstractSet[str],
    stem_fn: StemFunction,
    locale: Optional[str] = None,
) -> FrequencyReport:
    report = FrequencyReport()
    entries = report.entries

    for token in tokenize(text, locale):
        normalized = token.normalized
        if normalized in stopwords:
            continue
        key = stem_fn(normalized)
        stats = entries.get(key)
        if stats is None:
            stats = entries[key] = StemStats(key)
        stats.count += 1
        stats.forms[normalized] += 1
        stats.positions.append((token.start, token.end))

    return report
