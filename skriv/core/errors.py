"""Exceptions raised while loading static data.

Resolution and analysis never raise; only loading catalogs and word banks
from disk can fail.
"""


class SkrivError(Exception):
    """Base class for skriv errors."""


class CatalogError(SkrivError):
    """A translation catalog could not be read or is not a mapping."""


class WordBankError(SkrivError):
    """A word bank file could not be read or has the wrong shape."""
