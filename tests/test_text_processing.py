from skriv.utils.io_helpers import read_utf8, write_utf8
from skriv.utils.text_processing import (
    clean_text,
    count_words,
    normalize_text,
    normalize_word,
)


def test_normalize_text():
    assert normalize_text("a\r\nb\rc") == "a\nb\nc"
    assert normalize_text("a\u030a") == "\u00e5"


def test_clean_text_repairs_mojibake():
    assert clean_text("BlÃ¥bÃ¦rsyltetÃ¸y") == "Blåbærsyltetøy"


def test_normalize_word():
    assert normalize_word("ÆRLIG") == "ærlig"
    assert normalize_word("Straße") == "strasse"


def test_count_words():
    assert count_words("  en  to\ntre ") == 3
    assert count_words("   ") == 0


def test_read_utf8_strips_bom(tmp_path):
    path = tmp_path / "tekst.txt"
    path.write_bytes(b"\xef\xbb\xbf" + "Hei på deg".encode("utf-8"))
    assert read_utf8(path) == "Hei på deg"


def test_read_utf8_replaces_bad_bytes(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("bær".encode("latin-1"))
    assert read_utf8(path) == "b\ufffdr"


def test_write_utf8_normalizes(tmp_path):
    path = tmp_path / "ut.txt"
    write_utf8(path, "a\u030a")
    assert path.read_text(encoding="utf-8") == "\u00e5"
