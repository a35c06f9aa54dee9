"""
catalog.py - Translation catalogs

A catalog is the full set of translation entries for one locale. The nested
source tree (YAML or JSON) is flattened once, at load time, into a mapping
from dotted key to a tagged entry:

    PlainEntry      a single template string
    PluralEntry     {one, other} templates selected by count
    MalformedEntry  anything else; resolves to "" with a diagnostic

Resolution is then a dictionary lookup plus a match on the entry type.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

import yaml

from skriv.utils.io_helpers import read_utf8
from skriv.utils.logging_helper import get_logger
from ..errors import CatalogError
from .plural import CATEGORIES, ONE, OTHER

log = get_logger()


@dataclass(frozen=True)
class PlainEntry:
    template: str


@dataclass(frozen=True)
class PluralEntry:
    one: Optional[str] = None
    other: Optional[str] = None

    def form(self, category: str) -> str:
        """Template for *category*; a missing form falls back to other, then one."""
        chosen = self.one if category == ONE else self.other
        if chosen is None:
            chosen = self.other if self.other is not None else self.one
        return chosen if chosen is not None else ""


@dataclass(frozen=True)
class MalformedEntry:
    raw: Any
    reason: str = ""


Entry = Union[PlainEntry, PluralEntry, MalformedEntry]


def classify_leaf(value: Any) -> Optional[Entry]:
    """Return the entry for *value*, or None if it is a branch to recurse into."""
    if isinstance(value, str):
        return PlainEntry(value)

    if isinstance(value, Mapping):
        keys = set(value)
        plural_keys = keys & set(CATEGORIES)
        if not plural_keys:
            return None
        if keys != plural_keys:
            extra = ", ".join(sorted(str(k) for k in keys - plural_keys))
            return MalformedEntry(dict(value), f"plural object has extra keys: {extra}")
        for cat in plural_keys:
            if not isinstance(value[cat], str):
                return MalformedEntry(dict(value), f"plural form '{cat}' is not a string")
        return PluralEntry(one=value.get(ONE), other=value.get(OTHER))

    return MalformedEntry(value, f"unsupported leaf type {type(value).__name__}")


class Catalog:
    """Immutable, flattened translation entries for one locale."""

    def __init__(self, locale: str, entries: Mapping[str, Entry]):
        self.locale = locale
        self._entries = MappingProxyType(dict(entries))

    def get(self, key: str) -> Optional[Entry]:
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> List[str]:
        return list(self._entries)

    def items(self):
        return self._entries.items()

    def malformed_keys(self) -> List[str]:
        return [k for k, e in self._entries.items() if isinstance(e, MalformedEntry)]

    def __repr__(self) -> str:
        return f"Catalog({self.locale!r}, {len(self)} entries)"


def _flatten(node: Mapping[str, Any], prefix: str, out: Dict[str, Entry]) -> None:
    for name, value in node.items():
        key = f"{prefix}.{name}" if prefix else str(name)
        entry = classify_leaf(value)
        if entry is None:
            _flatten(value, key, out)
        else:
            out[key] = entry


def build_catalog(tree: Mapping[str, Any], locale: str) -> Catalog:
    """Flatten a nested translation tree into a :class:`Catalog`."""
    if not isinstance(tree, Mapping):
        raise CatalogError(f"Catalog for {locale!r} must be a mapping, got {type(tree).__name__}")
    entries: Dict[str, Entry] = {}
    _flatten(tree, "", entries)

    malformed = [k for k, e in entries.items() if isinstance(e, MalformedEntry)]
    if malformed:
        log.warning(f"Catalog {locale}: {len(malformed)} malformed entries: {', '.join(malformed)}")
    return Catalog(locale, entries)


def load_catalog(path: Path, locale: Optional[str] = None) -> Catalog:
    """Load a catalog from a ``.yaml``/``.yml`` or ``.json`` file.

    The locale defaults to the file stem (``nb.yaml`` -> ``nb``).
    """
    path = Path(path)
    locale = locale or path.stem
    try:
        text = read_utf8(path)
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            tree = json.loads(text)
        else:
            tree = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise CatalogError(f"Cannot parse catalog {path}: {exc}") from exc

    catalog = build_catalog(tree if tree is not None else {}, locale)
    log.debug(f"Loaded {catalog!r} from {path}")
    return catalog
