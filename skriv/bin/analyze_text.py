#!/usr/bin/env python
"""
analyze_text.py - Repetition and sentence length report for a text file.

Shows the words a student repeats most (grouped by root), synonym
suggestions for them, and a sentence length summary.

Usage:
    python skriv/bin/analyze_text.py --in essay.txt
    python skriv/bin/analyze_text.py --in essay.txt --lang nn --threshold 3
    python skriv/bin/analyze_text.py --in essay.txt --json
    python skriv/bin/analyze_text.py --in essay.txt --out report.json
"""

import argparse
import json
import pathlib
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

# Add project root to path
PROJECT_ROOT = pathlib.Path(__file__).parent.parent.parent
sys.path.append(str(PROJECT_ROOT))

from skriv.core.analysis import analyze, analyze_sentences, load_word_bank, suggest
from skriv.core.analysis.sentences import LengthThresholds
from skriv.core.i18n import Translator, log_diagnostic
from skriv.core.feedback import word_count_label
from skriv.utils.config import load_settings
from skriv.utils.io_helpers import ensure_utf8_windows, read_utf8, write_utf8
from skriv.utils.logging_helper import get_logger, set_level
from skriv.utils.text_processing import clean_text, count_words

console = Console()
log = get_logger()


def build_report(text: str, language: str, threshold: int,
                 thresholds: LengthThresholds, top: Optional[int] = None) -> Dict[str, Any]:
    """Collect everything the report shows into plain data."""
    bank = load_word_bank(language)
    freq = analyze(text, bank.stopwords, bank.stem, language)
    sentences = analyze_sentences(text, thresholds)

    repeated: List[Dict[str, Any]] = []
    for stats in freq.overused(threshold)[:top]:
        suggestions: List[str] = []
        for form in stats.words:
            for alt in suggest(form, bank.synonyms):
                if alt not in suggestions:
                    suggestions.append(alt)
        repeated.append({
            "stem": stats.stem,
            "count": stats.count,
            "forms": stats.words,
            "suggestions": suggestions,
        })

    return {
        "language": language,
        "words": count_words(text),
        "threshold": threshold,
        "repeated": repeated,
        "sentences": {
            "count": len(sentences.sentences),
            "average": sentences.average,
            "longest": sentences.longest,
            "long": len(sentences.long_sentences()),
        },
    }


def render_report(report: Dict[str, Any], translator: Translator, name: str) -> None:
    t = translator.t
    console.print(Panel(t("analysis.title", file=name), box=box.ROUNDED))
    console.print(word_count_label(t, report["words"]))

    if report["repeated"]:
        table = Table(title=t("analysis.repeatedTitle"), box=box.SIMPLE_HEAVY)
        table.add_column(t("analysis.stem"), style="bold")
        table.add_column(t("analysis.count"), justify="right")
        table.add_column(t("analysis.forms"))
        table.add_column(t("analysis.synonyms"), style="green")
        for row in report["repeated"]:
            table.add_row(row["stem"], str(row["count"]), ", ".join(row["forms"]),
                          ", ".join(row["suggestions"][:3]))
        console.print(table)
    else:
        console.print(t("analysis.noRepeats", threshold=report["threshold"]))

    s = report["sentences"]
    console.print(f"[bold]{t('analysis.sentencesTitle')}[/bold]: "
                  f"{t('analysis.sentenceCount', count=s['count'])}, "
                  f"{t('analysis.longSentences', count=s['long'])}")
    console.print(t("sentence.avgLength", avg=f"{s['average']:.1f}"))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = load_settings()
    p = argparse.ArgumentParser(description="Word repetition and sentence length report.")
    p.add_argument("--in", dest="src", type=pathlib.Path, required=True,
                   help="Text file to analyze (.txt / .md).")
    p.add_argument("--lang", default=settings.language,
                   help="UI and word bank language (nb, nn, en).")
    p.add_argument("--threshold", type=int, default=settings.repeat_threshold,
                   help="Flag roots used more than this many times.")
    p.add_argument("--top", type=int, default=None,
                   help="Show at most this many repeated roots.")
    p.add_argument("--out", type=pathlib.Path, default=None,
                   help="Also write the JSON report to this file.")
    p.add_argument("--json", action="store_true",
                   help="Print the report as JSON instead of tables.")
    p.add_argument("--log-level", default=None,
                   help="DEBUG, INFO, WARNING or ERROR (default: SKRIV_LOG_LEVEL).")
    args = p.parse_args(argv)
    args.thresholds = LengthThresholds(settings.medium_sentence, settings.long_sentence,
                                       settings.very_long_sentence)
    return args


def main(argv: Optional[List[str]] = None) -> None:
    ensure_utf8_windows()
    args = parse_args(argv)
    if args.log_level:
        set_level(args.log_level)

    if not args.src.exists():
        log.error(f"Input file not found: {args.src}")
        sys.exit(1)

    text = clean_text(read_utf8(args.src))
    translator = Translator(args.lang, on_diagnostic=log_diagnostic)
    report = build_report(text, translator.language, args.threshold, args.thresholds, args.top)

    if args.out:
        write_utf8(args.out, json.dumps(report, ensure_ascii=False, indent=2))
        log.info(f"Report written to {args.out}")

    if args.json:
        print(json.dumps(report, ensure_ascii=False, indent=2))
    else:
        render_report(report, translator, args.src.name)


if __name__ == "__main__":
    main()
