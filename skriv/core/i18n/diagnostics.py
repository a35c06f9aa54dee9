"""
diagnostics.py - Side channel for resolution problems

The resolver never raises; whatever goes wrong is reported as a
:class:`Diagnostic` through an injectable hook. With no hook the diagnostic
is dropped and the best-effort string is still returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional

from skriv.utils.logging_helper import get_logger

log = get_logger("i18n")


class DiagnosticKind(str, Enum):
    MISSING_TRANSLATION = "missing_translation"
    MISSING_COUNT = "missing_count"
    MISSING_PARAM = "missing_param"
    # leaf that is neither a string nor a {one, other} object
    MALFORMED_ENTRY = "malformed_entry"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    key: str
    locale: Optional[str] = None
    detail: str = ""

    def __str__(self) -> str:
        where = f" ({self.locale})" if self.locale else ""
        extra = f": {self.detail}" if self.detail else ""
        return f"[i18n] {self.kind.value} \"{self.key}\"{where}{extra}"


DiagnosticHook = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Hook that reports diagnostics as warnings in the i18n log."""
    log.warning(str(diagnostic))


class DiagnosticCollector:
    """Hook that records diagnostics in order of emission."""

    def __init__(self) -> None:
        self.items: List[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def kinds(self) -> List[DiagnosticKind]:
        return [d.kind for d in self.items]

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.items if d.kind is kind]

    def clear(self) -> None:
        self.items.clear()
