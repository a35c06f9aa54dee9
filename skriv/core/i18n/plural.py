"""Plural category selection.

Only the two categories used by the nb, nn and en catalogs are modeled:
``one`` for exactly one, ``other`` for everything else (0, negatives and
fractions included).
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any

ONE = "one"
OTHER = "other"
CATEGORIES = (ONE, OTHER)


def is_valid_count(count: Any) -> bool:
    """Return True for finite real numbers. Booleans are not counts."""
    if isinstance(count, bool) or not isinstance(count, Real):
        return False
    if isinstance(count, Integral):
        # exact ints are finite; too large for a float is still a count
        return True
    return math.isfinite(count)


def plural_category(count: Any) -> str:
    """Return ``"one"`` iff *count* equals 1, otherwise ``"other"``."""
    if is_valid_count(count) and count == 1:
        return ONE
    return OTHER
