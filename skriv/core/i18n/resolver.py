"""
resolver.py - Resolve a dotted key into display text

    resolve(active, fallback, key, params) -> str

1. Look the key up in the locale chain ``(active, fallback)``.
2. Missing everywhere: return the key itself (MissingTranslation).
3. Plural entry: ``one`` iff ``params["count"] == 1``, else ``other``;
   no usable count means ``other`` plus MissingCount.
4. Replace every ``{{name}}`` with ``params[name]``; unbound placeholders
   stay as they are (MissingParam).

Resolution is total and deterministic; the only side effect is the
optional diagnostics hook.
"""

from __future__ import annotations

import re
from typing import Any, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from .catalog import Catalog, Entry, MalformedEntry, PluralEntry
from .diagnostics import Diagnostic, DiagnosticHook, DiagnosticKind
from .plural import OTHER, is_valid_count, plural_category

PLACEHOLDER = re.compile(r"\{\{([A-Za-z_][A-Za-z0-9_]*)\}\}")


class LocaleChain(NamedTuple):
    """Lookup order: the active catalog first, then the fallback."""
    active: Optional[Catalog]
    fallback: Optional[Catalog] = None

    def catalogs(self) -> Iterator[Catalog]:
        if self.active is not None:
            yield self.active
        if self.fallback is not None and self.fallback is not self.active:
            yield self.fallback

    def lookup(self, key: str) -> Tuple[Optional[Entry], Optional[Catalog]]:
        for catalog in self.catalogs():
            entry = catalog.get(key)
            if entry is not None:
                return entry, catalog
        return None, None

    @property
    def locale(self) -> Optional[str]:
        return self.active.locale if self.active is not None else None


def format_value(value: Any) -> str:
    """Render a parameter the way the UI expects (``5.0`` -> ``"5"``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def interpolate(template: str, params: Mapping[str, Any]) -> Tuple[str, List[str]]:
    """Substitute ``{{name}}`` placeholders.

    Returns the rendered text and the names left unbound, in order of first
    appearance.
    """
    unbound: List[str] = []

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None:
            if name not in unbound:
                unbound.append(name)
            return match.group(0)
        return format_value(value)

    return PLACEHOLDER.sub(substitute, template), unbound


def _emit(hook: Optional[DiagnosticHook], kind: DiagnosticKind, key: str,
          locale: Optional[str], detail: str = "") -> None:
    if hook is not None:
        hook(Diagnostic(kind, key, locale, detail))


def resolve(
    active: Optional[Catalog],
    fallback: Optional[Catalog],
    key: str,
    params: Optional[Mapping[str, Any]] = None,
    on_diagnostic: Optional[DiagnosticHook] = None,
) -> str:
    """Resolve *key* against ``(active, fallback)`` and render it with *params*."""
    return resolve_in(LocaleChain(active, fallback), key, params, on_diagnostic)


def resolve_in(
    chain: LocaleChain,
    key: str,
    params: Optional[Mapping[str, Any]] = None,
    on_diagnostic: Optional[DiagnosticHook] = None,
) -> str:
    params = params or {}
    entry, source = chain.lookup(key)

    if entry is None:
        _emit(on_diagnostic, DiagnosticKind.MISSING_TRANSLATION, key, chain.locale)
        return key

    locale = source.locale

    if isinstance(entry, MalformedEntry):
        _emit(on_diagnostic, DiagnosticKind.MALFORMED_ENTRY, key, locale, entry.reason)
        return ""

    if isinstance(entry, PluralEntry):
        if "count" not in params:
            _emit(on_diagnostic, DiagnosticKind.MISSING_COUNT, key, locale)
            template = entry.form(OTHER)
        elif not is_valid_count(params["count"]):
            _emit(on_diagnostic, DiagnosticKind.MISSING_COUNT, key, locale,
                  f"invalid count {params['count']!r}")
            template = entry.form(OTHER)
        else:
            template = entry.form(plural_category(params["count"]))
    else:
        template = entry.template

    text, unbound = interpolate(template, params)
    for name in unbound:
        _emit(on_diagnostic, DiagnosticKind.MISSING_PARAM, key, locale, name)
    return text


class MessageResolver:
    """A locale chain bound to a diagnostics hook.

    ``resolver.t("radar.tooltip", word="mener", count=3)``
    """

    def __init__(self, active: Optional[Catalog], fallback: Optional[Catalog] = None,
                 on_diagnostic: Optional[DiagnosticHook] = None):
        self.chain = LocaleChain(active, fallback)
        self.on_diagnostic = on_diagnostic

    @property
    def locale(self) -> Optional[str]:
        return self.chain.locale

    def resolve(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return resolve_in(self.chain, key, params, self.on_diagnostic)

    def t(self, key: str, /, **params: Any) -> str:
        return self.resolve(key, params)

    __call__ = t
