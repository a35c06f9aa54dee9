"""
i18n module - Locale-aware message resolution

This module provides:
- Catalog loading into tagged entries (plain / plural / malformed)
- resolve(): key lookup with fallback, plural selection and interpolation
- Diagnostics hooks for missing translations, counts and parameters
- Translator: the UI's language session
"""

from .catalog import Catalog, MalformedEntry, PlainEntry, PluralEntry, build_catalog, load_catalog
from .diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind, log_diagnostic
from .plural import plural_category
from .resolver import LocaleChain, MessageResolver, interpolate, resolve
from .translator import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    Translator,
    negotiate_language,
    supported_languages,
)

__all__ = [
    'Catalog', 'PlainEntry', 'PluralEntry', 'MalformedEntry',
    'build_catalog', 'load_catalog',
    'Diagnostic', 'DiagnosticKind', 'DiagnosticCollector', 'log_diagnostic',
    'plural_category',
    'LocaleChain', 'MessageResolver', 'interpolate', 'resolve',
    'DEFAULT_LANGUAGE', 'SUPPORTED_LANGUAGES', 'Translator',
    'negotiate_language', 'supported_languages',
]
