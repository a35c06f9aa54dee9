import random

from skriv.core.analysis import StarterPicker, load_word_bank

POOL = {"innledning": ["a", "b", "c"], "ett": ["bare"], "tom": []}


def test_cycle_uses_whole_pool():
    picker = StarterPicker(POOL, random.Random(1))
    assert {picker.pick("innledning") for _ in range(3)} == {"a", "b", "c"}


def test_never_repeats_back_to_back():
    picker = StarterPicker(POOL, random.Random(7))
    picks = [picker.pick("innledning") for _ in range(60)]
    assert all(a != b for a, b in zip(picks, picks[1:]))


def test_single_and_empty_pools():
    picker = StarterPicker(POOL, random.Random(0))
    assert [picker.pick("ett") for _ in range(3)] == ["bare"] * 3
    assert picker.pick("tom") is None
    assert picker.pick("finnes-ikke") is None


def test_bundled_categories():
    picker = StarterPicker(load_word_bank("nb").starters)
    assert "innledning" in picker.categories()
    assert picker.pick("innledning")
