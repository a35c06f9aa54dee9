import math

import pytest

from skriv.core.i18n.plural import is_valid_count, plural_category


@pytest.mark.parametrize("count", [1, 1.0])
def test_one(count):
    assert plural_category(count) == "one"


@pytest.mark.parametrize("count", [0, 2, 5, -1, 0.5, 1.5, 100])
def test_other(count):
    assert plural_category(count) == "other"


@pytest.mark.parametrize("count", [True, None, "1", math.nan, math.inf])
def test_invalid_counts_are_other(count):
    assert not is_valid_count(count)
    assert plural_category(count) == "other"


def test_huge_int_is_a_count():
    big = 10 ** 400
    assert is_valid_count(big)
    assert plural_category(big) == "other"
