"""
sentences.py – sentence length feedback (writing rhythm).

Splits each block of text into sentences, counts words and classifies
each sentence so the editor can mark long ones and draw a rhythm bar.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from skriv.utils.text_processing import count_words

# terminal punctuation followed by whitespace (incl. NBSP) or end of block
_SENTENCE_END = re.compile(r"[.!?]+\s+|[.!?]+$")


class SentenceLength(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    VERY_LONG = "veryLong"


@dataclass(frozen=True)
class LengthThresholds:
    medium: int = 10
    long: int = 20
    very_long: int = 30

    def classify(self, word_count: int) -> SentenceLength:
        if word_count >= self.very_long:
            return SentenceLength.VERY_LONG
        if word_count >= self.long:
            return SentenceLength.LONG
        if word_count >= self.medium:
            return SentenceLength.MEDIUM
        return SentenceLength.SHORT


DEFAULT_THRESHOLDS = LengthThresholds()


@dataclass(frozen=True)
class Sentence:
    text: str
    start: int
    end: int
    word_count: int
    category: SentenceLength

    @property
    def is_long(self) -> bool:
        return self.category in (SentenceLength.LONG, SentenceLength.VERY_LONG)


@dataclass
class SentenceReport:
    sentences: List[Sentence] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.sentences)

    def __iter__(self) -> Iterator[Sentence]:
        return iter(self.sentences)

    @property
    def average(self) -> float:
        if not self.sentences:
            return 0.0
        total = sum(s.word_count for s in self.sentences)
        return round(total / len(self.sentences), 1)

    @property
    def longest(self) -> int:
        return max((s.word_count for s in self.sentences), default=0)

    def long_sentences(self) -> List[Sentence]:
        return [s for s in self.sentences if s.is_long]


def _block_spans(text: str):
    """Yield (offset, block) for every non-empty line of *text*."""
    offset = 0
    for line in text.splitlines(keepends=True):
        if line.strip():
            yield offset, line.rstrip("\r\n")
        offset += len(line)


def split_sentences(block: str) -> List[tuple]:
    """Return ``(start, end)`` spans of the sentences in one block.

    Trailing text without terminal punctuation is its own sentence.
    """
    spans = []
    last_end = 0
    for match in _SENTENCE_END.finditer(block):
        spans.append((last_end, match.end()))
        last_end = match.end()
    if last_end < len(block) and block[last_end:].strip():
        spans.append((last_end, len(block)))
    return spans


def analyze_sentences(text: str, thresholds: Optional[LengthThresholds] = None) -> SentenceReport:
    thresholds = thresholds or DEFAULT_THRESHOLDS
    report = SentenceReport()
    for offset, block in _block_spans(text):
        for start, end in split_sentences(block):
            raw = block[start:end]
            stripped = raw.strip()
            words = count_words(stripped)
            if not words:
                continue
            lead = len(raw) - len(raw.lstrip())
            abs_start = offset + start + lead
            report.sentences.append(Sentence(
                text=stripped,
                start=abs_start,
                end=abs_start + len(stripped),
                word_count=words,
                category=thresholds.classify(words),
            ))
    return report
