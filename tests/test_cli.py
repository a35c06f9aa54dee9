import json

import pytest

from skriv.bin import analyze_text, check_catalogs, translate
from skriv.core.analysis.sentences import LengthThresholds
from skriv.utils.paths import LOCALES_DIR


def test_build_report():
    text = "Bra, bra, bra. Dette er en fin tekst."
    report = analyze_text.build_report(text, "nb", 2, LengthThresholds())
    [row] = report["repeated"]
    assert row["stem"] == "bra"
    assert row["count"] == 3
    assert report["sentences"]["count"] == 2
    assert report["words"] == 8


def test_analyze_json(tmp_path, capsys):
    src = tmp_path / "essay.txt"
    src.write_text("Jeg mener at vi mener og mener mye.\n", encoding="utf-8")
    analyze_text.main(["--in", str(src), "--lang", "nb", "--json"])
    report = json.loads(capsys.readouterr().out)
    assert report["language"] == "nb"
    assert report["repeated"][0]["count"] == 3
    assert "hevder" in report["repeated"][0]["suggestions"]


def test_analyze_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        analyze_text.main(["--in", str(tmp_path / "nope.txt")])
    assert exc.value.code == 1


def test_translate(capsys):
    translate.main(["wordCounter.count", "--lang", "en", "--count", "3"])
    assert capsys.readouterr().out.strip() == "3 words"


def test_translate_params(capsys):
    translate.main(["radar.tooltip", "--lang", "nn", "--param", "word=meiner", "--count", "4"])
    assert capsys.readouterr().out.strip() == "«meiner» vert brukt 4 gonger"


def test_translate_bad_param():
    with pytest.raises(SystemExit):
        translate.main(["radar.tooltip", "--param", "novalue"])


def test_parse_number():
    assert translate.parse_number("3") == 3
    assert translate.parse_number("2.5") == 2.5
    assert translate.parse_number("x") == "x"


def test_bundled_catalogs_are_clean():
    results = {r.locale: r for r in check_catalogs.check_directory(LOCALES_DIR)}
    assert set(results) == {"nb", "nn", "en"}
    assert all(not r.malformed and not r.shape_mismatch for r in results.values())
    # en is partial and falls back to nb
    assert results["en"].missing


def test_check_catalogs_fails_on_malformed(tmp_path):
    (tmp_path / "nb.yaml").write_text("a: A\nting:\n  one: 1 ting\n  other: ting\n", encoding="utf-8")
    (tmp_path / "nn.yaml").write_text("a: 3\nting: ting\nx: X\n", encoding="utf-8")
    [nb, nn] = check_catalogs.check_directory(tmp_path)
    assert nn.malformed == ["a"]
    assert nn.shape_mismatch == ["ting"]
    assert nn.extra == ["x"]
    assert nb.missing == []
    with pytest.raises(SystemExit) as exc:
        check_catalogs.main(["--dir", str(tmp_path)])
    assert exc.value.code == 1


def test_analyze_writes_report(tmp_path, capsys):
    src = tmp_path / "essay.txt"
    src.write_text("Fint. Fint. Fint. Fint.", encoding="utf-8")
    out = tmp_path / "report.json"
    analyze_text.main(["--in", str(src), "--json", "--out", str(out)])
    saved = json.loads(out.read_text(encoding="utf-8"))
    assert saved["repeated"][0]["count"] == 4
    assert saved == json.loads(capsys.readouterr().out)
