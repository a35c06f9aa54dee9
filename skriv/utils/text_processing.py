"""
text_processing.py - Text processing and normalization utilities

Provides common text processing functions used across the project.
"""

import unicodedata
from ftfy import fix_text


def normalize_text(text: str) -> str:
    """Normalize text using Unicode NFC normalization.

    Handles line endings and Unicode normalization.

    Args:
        text: Text to normalize

    Returns:
        Normalized text
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return unicodedata.normalize("NFC", text)


def clean_text(text: str) -> str:
    """Repair mojibake and normalize a document before analysis.

    Pasted student text often arrives double-encoded (``Ã¸`` for ``ø``);
    ftfy fixes that before normalization.

    Args:
        text: Raw document text

    Returns:
        Cleaned text
    """
    return normalize_text(fix_text(text))


def normalize_word(word: str) -> str:
    """Case-fold a single word token (NFC first so composed and decomposed
    forms of å compare equal)."""
    return unicodedata.normalize("NFC", word).casefold()


def count_words(text: str) -> int:
    """Count words in text. Splits on whitespace, filters empty strings.

    Args:
        text: Text to count words in

    Returns:
        Number of words
    """
    if not text or not text.strip():
        return 0
    return len(text.split())
