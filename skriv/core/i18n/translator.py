"""
translator.py - Locale session for the UI

Holds the active language, the catalog for it and the default-language
catalog used as fallback. Switching language swaps in a freshly loaded
catalog; catalogs are never edited in place, so a resolve running against
the old pair stays consistent.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from skriv.utils.logging_helper import get_logger
from skriv.utils.paths import LOCALES_DIR
from ..errors import CatalogError
from .catalog import Catalog, load_catalog
from .diagnostics import DiagnosticHook
from .resolver import LocaleChain, resolve_in

log = get_logger()

DEFAULT_LANGUAGE = "nb"
SUPPORTED_LANGUAGES = ("nb", "nn", "en")

LANGUAGE_NAMES = {
    "nb": "Norsk bokmål",
    "nn": "Norsk nynorsk",
    "en": "English",
}

# app language -> BCP 47 locale for date formatting
DATE_LOCALES = {
    "nb": "nb-NO",
    "nn": "nn-NO",
    "en": "en-US",
    "uk": "uk-UA",
    "se": "se-NO",
}


def negotiate_language(stored: Optional[str] = None, accept: Optional[str] = None) -> str:
    """Pick the UI language: stored preference > client language > default."""
    if stored and stored in SUPPORTED_LANGUAGES:
        return stored
    if accept:
        primary = accept.split(",")[0].split(";")[0].strip().split("-")[0].lower()
        if primary in SUPPORTED_LANGUAGES:
            return primary
    return DEFAULT_LANGUAGE


def supported_languages() -> List[Dict[str, str]]:
    return [{"code": code, "name": LANGUAGE_NAMES[code]} for code in SUPPORTED_LANGUAGES]


def find_catalog_file(language: str, catalogs_dir: Path) -> Path:
    for suffix in (".yaml", ".yml", ".json"):
        path = Path(catalogs_dir) / f"{language}{suffix}"
        if path.exists():
            return path
    raise CatalogError(f"No catalog for {language!r} in {catalogs_dir}")


class Translator:
    """Active language plus the ``(active, fallback)`` catalog pair."""

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        catalogs_dir: Path = LOCALES_DIR,
        on_diagnostic: Optional[DiagnosticHook] = None,
    ):
        self.catalogs_dir = Path(catalogs_dir)
        self.on_diagnostic = on_diagnostic
        self._listeners: List[Callable[[str], None]] = []

        self._fallback = self._load_default()
        self.language = DEFAULT_LANGUAGE
        self._chain = LocaleChain(self._fallback, self._fallback)
        self._activate(language if language in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE)

    # ── loading ────────────────────────────────────────────────────────────
    def _load_default(self) -> Optional[Catalog]:
        try:
            return load_catalog(find_catalog_file(DEFAULT_LANGUAGE, self.catalogs_dir))
        except CatalogError as exc:
            log.error(f"Failed to load default locale {DEFAULT_LANGUAGE!r}: {exc}")
            return None

    def _activate(self, language: str) -> bool:
        """Swap in *language*. On a load failure the current language and
        chain stay as they are and False is returned."""
        if language == DEFAULT_LANGUAGE:
            active = self._fallback
        else:
            try:
                active = load_catalog(find_catalog_file(language, self.catalogs_dir))
            except CatalogError as exc:
                log.error(f"Failed to load locale {language!r}, keeping "
                          f"{self.language!r}: {exc}")
                return False
        self.language = language
        self._chain = LocaleChain(active, self._fallback)
        return True

    # ── public API ─────────────────────────────────────────────────────────
    @property
    def chain(self) -> LocaleChain:
        return self._chain

    def t(self, key: str, /, **params: Any) -> str:
        return resolve_in(self._chain, key, params, self.on_diagnostic)

    __call__ = t

    def date_locale(self) -> str:
        return DATE_LOCALES.get(self.language, "nb-NO")

    def set_language(self, language: str) -> bool:
        """Switch language. Returns True if the active language changed;
        listeners are only called in that case."""
        if language not in SUPPORTED_LANGUAGES or language == self.language:
            return False
        if not self._activate(language):
            return False
        for callback in list(self._listeners):
            callback(language)
        return True

    def on_language_change(self, callback: Callable[[str], None]) -> Callable[[], None]:
        """Register *callback*; the returned function unregisters it."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe
