"""
feedback.py - Editor feedback built from analysis + translations

The analyzer and the resolver never call each other; this module is the
caller that combines them into what the editor shows: repetition marks
with tooltips, long-sentence marks and the word counter label.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from skriv.utils.text_processing import normalize_word
from .analysis.frequency import FrequencyReport, analyze
from .analysis.sentences import LengthThresholds, SentenceLength, analyze_sentences
from .analysis.synonyms import has_synonyms
from .analysis.wordbank import WordBank

Translate = Callable[..., str]

SENTENCE_TOOLTIPS = {
    SentenceLength.LONG: "sentence.tooltipLong",
    SentenceLength.VERY_LONG: "sentence.tooltipVeryLong",
}


@dataclass(frozen=True)
class RepetitionMark:
    start: int
    end: int
    word: str
    count: int
    has_synonym: bool
    tooltip: str


@dataclass(frozen=True)
class SentenceMark:
    start: int
    end: int
    word_count: int
    category: SentenceLength
    tooltip: str


def repetition_marks(
    text: str,
    report: FrequencyReport,
    bank: WordBank,
    translate: Translate,
    threshold: int,
) -> Iterator[RepetitionMark]:
    """Yield one mark per occurrence of an overused stem, in text order."""
    flagged = []
    for stats in report.overused(threshold):
        for start, end in stats.positions:
            flagged.append((start, end, stats.count))
    flagged.sort()

    for start, end, count in flagged:
        surface = text[start:end]
        word = normalize_word(surface)
        yield RepetitionMark(
            start=start,
            end=end,
            word=word,
            count=count,
            has_synonym=has_synonyms(word, bank.synonyms),
            tooltip=translate("radar.tooltip", word=surface, count=count),
        )


def find_repetitions(
    text: str,
    bank: WordBank,
    translate: Translate,
    threshold: int,
    locale: Optional[str] = None,
) -> List[RepetitionMark]:
    report = analyze(text, bank.stopwords, bank.stem, locale)
    return list(repetition_marks(text, report, bank, translate, threshold))


def sentence_marks(
    text: str,
    translate: Translate,
    thresholds: Optional[LengthThresholds] = None,
) -> List[SentenceMark]:
    marks = []
    for sentence in analyze_sentences(text, thresholds).long_sentences():
        marks.append(SentenceMark(
            start=sentence.start,
            end=sentence.end,
            word_count=sentence.word_count,
            category=sentence.category,
            tooltip=translate(SENTENCE_TOOLTIPS[sentence.category], count=sentence.word_count),
        ))
    return marks


def word_count_label(
    translate: Translate,
    count: int,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> str:
    """``"250 ord (mål: 300–500)"`` style label for the word counter."""
    label = translate("wordCounter.count", count=count)
    if minimum and maximum:
        label += " " + translate("wordCounter.goalRange", min=minimum, max=maximum)
    elif minimum:
        label += " " + translate("wordCounter.goalMin", min=minimum)
    elif maximum:
        label += " " + translate("wordCounter.goalMax", max=maximum)
    return label
