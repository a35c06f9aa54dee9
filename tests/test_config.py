import pytest

from skriv.utils.config import Settings, load_settings

ENV = ["SKRIV_LANGUAGE", "SKRIV_REPEAT_THRESHOLD", "SKRIV_LONG_SENTENCE",
       "SKRIV_VERY_LONG_SENTENCE"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults(tmp_path):
    assert load_settings(tmp_path / "none.yaml") == Settings()


def test_yaml_file(tmp_path):
    path = tmp_path / "skriv.yaml"
    path.write_text("language: nn\nrepeat_threshold: 3\nbogus: 1\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.language == "nn"
    assert settings.repeat_threshold == 3
    assert settings.long_sentence == 20


def test_env_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "skriv.yaml"
    path.write_text("language: nn\n", encoding="utf-8")
    monkeypatch.setenv("SKRIV_LANGUAGE", "en")
    monkeypatch.setenv("SKRIV_LONG_SENTENCE", "15")
    settings = load_settings(path)
    assert settings.language == "en"
    assert settings.long_sentence == 15


def test_invalid_int_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("SKRIV_REPEAT_THRESHOLD", "mange")
    assert load_settings(tmp_path / "none.yaml").repeat_threshold == 2


def test_non_mapping_yaml(tmp_path):
    path = tmp_path / "skriv.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_yaml_values_are_type_checked(tmp_path):
    path = tmp_path / "skriv.yaml"
    path.write_text("language: 5\nrepeat_threshold: lots\nmedium_sentence: 12\n"
                    "long_sentence: true\nvery_long_sentence: 2.5\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.medium_sentence == 12
    assert settings.language == "nb"
    assert settings.repeat_threshold == 2
    assert settings.long_sentence == 20
    assert settings.very_long_sentence == 30


def test_yaml_numeric_strings_accepted(tmp_path):
    path = tmp_path / "skriv.yaml"
    path.write_text("repeat_threshold: '4'\nlong_sentence: 18.0\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.repeat_threshold == 4
    assert settings.long_sentence == 18
