#!/usr/bin/env python
"""
translate.py - Resolve one translation key from the command line.

Usage:
    python skriv/bin/translate.py wordCounter.count --count 250
    python skriv/bin/translate.py radar.tooltip --lang nn --param word=mener --count 4
"""

import argparse
import pathlib
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console

# Add project root to path
PROJECT_ROOT = pathlib.Path(__file__).parent.parent.parent
sys.path.append(str(PROJECT_ROOT))

from skriv.core.i18n import DiagnosticCollector, Translator
from skriv.utils.config import load_settings
from skriv.utils.io_helpers import ensure_utf8_windows
from skriv.utils.logging_helper import get_logger, set_level

console = Console()
log = get_logger()


def parse_number(raw: str) -> Any:
    """'3' -> 3, '2.5' -> 2.5, anything else stays a string."""
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            continue
    return raw


def parse_params(pairs: List[str]) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected name=value, got {pair!r}")
        params[name.strip()] = value
    return params


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Resolve a dotted translation key.")
    p.add_argument("key", help="Dotted key, e.g. wordCounter.count")
    p.add_argument("--lang", default=None,
                   help="Language to resolve in (nb, nn, en). Defaults to settings.")
    p.add_argument("--param", action="append", default=[], metavar="NAME=VALUE",
                   help="Interpolation parameter; repeatable.")
    p.add_argument("--count", type=parse_number, default=None,
                   help="Count used for plural selection and {{count}}.")
    p.add_argument("--log-level", default=None,
                   help="DEBUG, INFO, WARNING or ERROR (default: SKRIV_LOG_LEVEL).")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    ensure_utf8_windows()
    args = parse_args(argv)
    if args.log_level:
        set_level(args.log_level)

    try:
        params = parse_params(args.param)
    except ValueError as e:
        log.error(str(e))
        sys.exit(1)
    if args.count is not None:
        params["count"] = args.count

    diagnostics = DiagnosticCollector()
    translator = Translator(args.lang or load_settings().language, on_diagnostic=diagnostics)

    text = translator.t(args.key, **params)
    console.print(text, markup=False, highlight=False)
    for diagnostic in diagnostics:
        log.warning(str(diagnostic))


if __name__ == "__main__":
    main()
