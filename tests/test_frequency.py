from skriv.core.analysis import Stemmer, analyze, identity_stem, tokenize

STOP = frozenset({"eg", "at", "det"})


def test_counts_non_stopwords():
    report = analyze("Eg meiner at eg meiner det", STOP, identity_stem)
    assert report.counts() == {"meiner": 2}
    assert report["meiner"].positions == [(3, 9), (16, 22)]


def test_groups_by_stem():
    stem = Stemmer(["ing", "er", "e"])
    report = analyze("Skriving er gøy. Jeg skriver og skrive.", {"er", "jeg", "og"}, stem)
    stats = report["skriv"]
    assert stats.count == 3
    assert stats.words == ["skrive", "skriver", "skriving"]
    assert stats.distinct_forms == 3


def test_partition_law():
    text = "Hun sa at hun sa det, og så sa hun ingenting mer."
    stop = frozenset({"at", "det", "og"})
    report = analyze(text, stop, identity_stem)
    survivors = [t for t in tokenize(text) if t.normalized not in stop]
    assert report.total == len(survivors)


def test_empty_text():
    report = analyze("", STOP, identity_stem)
    assert len(report) == 0
    assert not report
    assert report.total == 0
    assert report.overused(0) == []


def test_only_stopwords():
    assert analyze("eg at det", STOP, identity_stem).counts() == {}


def test_overused_is_strict():
    report = analyze("bra bra bra fint fint", set(), identity_stem)
    assert [s.stem for s in report.overused(2)] == ["bra"]
    assert [s.stem for s in report.overused(1)] == ["bra", "fint"]
    assert report.overused(3) == []


def test_most_common_ties_by_stem():
    report = analyze("b a c a b c d", set(), identity_stem)
    assert [s.stem for s in report.most_common()] == ["a", "b", "c", "d"]
    assert [s.stem for s in report.most_common(2)] == ["a", "b"]


def test_case_insensitive():
    report = analyze("Viktig VIKTIG viktig", set(), identity_stem)
    assert report.counts() == {"viktig": 3}
    assert report["viktig"].forms == {"viktig": 3}
