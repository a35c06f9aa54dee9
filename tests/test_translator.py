import json

from skriv.core.i18n import DiagnosticKind, Translator, negotiate_language, supported_languages


def test_negotiate_language():
    assert negotiate_language("nn", "en-US,en") == "nn"
    assert negotiate_language("de", "en-US,en;q=0.9") == "en"
    assert negotiate_language(None, "sv-SE") == "nb"
    assert negotiate_language() == "nb"


def test_supported_languages():
    assert [lang["code"] for lang in supported_languages()] == ["nb", "nn", "en"]


def test_bundled_catalogs():
    tr = Translator("nn")
    assert tr.language == "nn"
    assert tr.t("radar.tooltip", word="meiner", count=4) == "«meiner» vert brukt 4 gonger"
    assert tr.date_locale() == "nn-NO"


def test_partial_locale_falls_back_to_nb(collector):
    tr = Translator("en", on_diagnostic=collector)
    assert tr.t("wordCounter.count", count=3) == "3 words"
    assert tr.t("time.daysAgo", count=1) == "1 dag siden"
    assert len(collector) == 0


def test_unknown_language_uses_default():
    assert Translator("de").language == "nb"


def test_set_language_notifies(tmp_path):
    (tmp_path / "nb.json").write_text(json.dumps({"hi": "Hei"}), encoding="utf-8")
    (tmp_path / "en.json").write_text(json.dumps({"hi": "Hi"}), encoding="utf-8")
    tr = Translator("nb", catalogs_dir=tmp_path)
    seen = []
    unsubscribe = tr.on_language_change(seen.append)

    assert tr.set_language("en") is True
    assert tr.t("hi") == "Hi"
    assert tr.set_language("en") is False
    assert tr.set_language("xx") is False
    assert seen == ["en"]

    unsubscribe()
    tr.set_language("nb")
    assert seen == ["en"]
    assert tr.t("hi") == "Hei"


def test_failed_switch_keeps_current_language(tmp_path):
    (tmp_path / "nb.json").write_text(json.dumps({"hi": "Hei"}), encoding="utf-8")
    (tmp_path / "nn.json").write_text(json.dumps({"hi": "Hei på deg"}), encoding="utf-8")
    (tmp_path / "en.json").write_text("{broken", encoding="utf-8")
    tr = Translator("nn", catalogs_dir=tmp_path)
    seen = []
    tr.on_language_change(seen.append)
    before = tr.chain
    assert tr.set_language("en") is False
    assert tr.language == "nn"
    assert tr.chain is before
    assert tr.t("hi") == "Hei på deg"
    assert seen == []


def test_old_chain_unaffected_by_switch(tmp_path):
    (tmp_path / "nb.json").write_text(json.dumps({"hi": "Hei"}), encoding="utf-8")
    (tmp_path / "en.json").write_text(json.dumps({"hi": "Hi"}), encoding="utf-8")
    tr = Translator("en", catalogs_dir=tmp_path)
    before = tr.chain
    tr.set_language("nb")
    assert before.active.get("hi").template == "Hi"
    assert tr.chain is not before


def test_broken_locale_falls_back(tmp_path):
    (tmp_path / "nb.json").write_text(json.dumps({"hi": "Hei"}), encoding="utf-8")
    (tmp_path / "nn.json").write_text("{broken", encoding="utf-8")
    tr = Translator("nb", catalogs_dir=tmp_path)
    assert tr.set_language("nn") is False
    assert tr.language == "nb"
    assert tr.t("hi") == "Hei"


def test_no_catalogs_at_all(tmp_path, collector):
    tr = Translator("nb", catalogs_dir=tmp_path, on_diagnostic=collector)
    assert tr.t("common.ok") == "common.ok"
    assert collector.kinds() == [DiagnosticKind.MISSING_TRANSLATION]
