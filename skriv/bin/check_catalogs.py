#!/usr/bin/env python
"""
check_catalogs.py - Compare every locale catalog with the default one.

Reports, per locale:
  * keys missing compared to the default catalog (these fall back at runtime)
  * keys the default catalog does not have
  * malformed entries
  * keys that are plural in one catalog and plain in the other

Exits with status 1 when any catalog has malformed entries.

Usage:
    python skriv/bin/check_catalogs.py
    python skriv/bin/check_catalogs.py --dir path/to/locales --verbose
"""

import argparse
import pathlib
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich import box

# Add project root to path
PROJECT_ROOT = pathlib.Path(__file__).parent.parent.parent
sys.path.append(str(PROJECT_ROOT))

from skriv.core.errors import CatalogError
from skriv.core.i18n import Catalog, PluralEntry, load_catalog
from skriv.core.i18n.translator import DEFAULT_LANGUAGE, find_catalog_file
from skriv.utils.io_helpers import ensure_utf8_windows
from skriv.utils.logging_helper import get_logger, set_level
from skriv.utils.paths import LOCALES_DIR

console = Console()
log = get_logger()

CATALOG_SUFFIXES = (".yaml", ".yml", ".json")


@dataclass
class CatalogCheck:
    locale: str
    entries: int = 0
    missing: List[str] = field(default_factory=list)
    extra: List[str] = field(default_factory=list)
    malformed: List[str] = field(default_factory=list)
    shape_mismatch: List[str] = field(default_factory=list)


def compare(catalog: Catalog, reference: Catalog) -> CatalogCheck:
    check = CatalogCheck(catalog.locale, entries=len(catalog))
    check.missing = sorted(k for k in reference if k not in catalog)
    check.extra = sorted(k for k in catalog if k not in reference)
    check.malformed = sorted(catalog.malformed_keys())
    for key in sorted(k for k in catalog if k in reference):
        mine, theirs = catalog.get(key), reference.get(key)
        if isinstance(mine, PluralEntry) != isinstance(theirs, PluralEntry):
            check.shape_mismatch.append(key)
    return check


def check_directory(locales_dir: pathlib.Path) -> List[CatalogCheck]:
    reference = load_catalog(find_catalog_file(DEFAULT_LANGUAGE, locales_dir))
    results = [compare(reference, reference)]
    for path in sorted(locales_dir.iterdir()):
        if path.suffix.lower() not in CATALOG_SUFFIXES or path.stem == DEFAULT_LANGUAGE:
            continue
        results.append(compare(load_catalog(path), reference))
    return results


def render(results: List[CatalogCheck], verbose: bool = False) -> None:
    table = Table(title="Locale catalogs", box=box.SIMPLE_HEAVY)
    table.add_column("Locale", style="bold")
    table.add_column("Entries", justify="right")
    table.add_column("Missing", justify="right")
    table.add_column("Extra", justify="right")
    table.add_column("Malformed", justify="right")
    table.add_column("Shape", justify="right")
    for r in results:
        malformed = f"[red]{len(r.malformed)}[/red]" if r.malformed else "0"
        table.add_row(r.locale, str(r.entries), str(len(r.missing)), str(len(r.extra)),
                      malformed, str(len(r.shape_mismatch)))
    console.print(table)

    for r in results:
        sections = [("malformed", r.malformed), ("plural/plain mismatch", r.shape_mismatch)]
        if verbose:
            sections += [("missing", r.missing), ("extra", r.extra)]
        for label, keys in sections:
            if keys:
                console.print(f"[bold]{r.locale}[/bold] {label}: " + ", ".join(keys))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Check locale catalogs against the default locale.")
    p.add_argument("--dir", type=pathlib.Path, default=LOCALES_DIR,
                   help="Directory holding <lang>.yaml / <lang>.json catalogs.")
    p.add_argument("--verbose", "-v", action="store_true",
                   help="List missing and extra keys too.")
    p.add_argument("--log-level", default=None,
                   help="DEBUG, INFO, WARNING or ERROR (default: SKRIV_LOG_LEVEL).")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    ensure_utf8_windows()
    args = parse_args(argv)
    if args.log_level:
        set_level(args.log_level)

    try:
        results = check_directory(args.dir)
    except (CatalogError, OSError) as e:
        log.error(f"Catalog check failed: {e}")
        sys.exit(1)

    render(results, args.verbose)
    if any(r.malformed for r in results):
        sys.exit(1)


if __name__ == "__main__":
    main()
