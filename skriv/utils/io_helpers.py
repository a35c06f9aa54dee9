#!/usr/bin/env python
"""
io_helpers.py – tiny utilities for BOM-safe UTF-8 reading / writing.

All project code should import these instead of calling Path.read_text().
"""

from pathlib import Path
import sys, os

from .text_processing import normalize_text

BOM = b"\xef\xbb\xbf"

# ── public API ─────────────────────────────────────────────────────────────
def read_utf8(path: Path) -> str:
    """
    Return file contents as str, decoded UTF-8, stripping BOM if present.
    Undecodable bytes are replaced rather than raised so student text
    always loads.
    """
    raw = Path(path).read_bytes()
    if raw.startswith(BOM):
        raw = raw[len(BOM):]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return normalize_text(raw.decode("utf-8", errors="replace"))


def write_utf8(path: Path, text: str) -> None:
    """Write text to file using UTF-8 encoding, NFC-normalized."""
    Path(path).write_text(normalize_text(text), encoding="utf-8")


def ensure_utf8_windows() -> None:
    """Force UTF-8 on Windows terminals so æ/ø/å print correctly."""
    if sys.platform == "win32":
        for stream in (sys.stdout, sys.stderr):
            if stream.encoding != "utf-8":
                stream.reconfigure(encoding="utf-8")
        os.environ["PYTHONIOENCODING"] = "utf-8"
