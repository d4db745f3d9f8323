from pathlib import Path

import pytest
from packages.datasets import validate_wordlist, pretty_summary, load_word_list, write_word_list, read_lines


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "raise", "stare"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'Planet' not lowercase
    words = tmp_path / "words_6.txt"
    words.write_text("raiser\ncrane\n???\nPlanet\n\n", encoding="utf-8")

    rep = validate_wordlist(6, str(words))
    assert rep["passed"] is False
    assert rep["count"] == 1 and rep["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlist_duplicates_reported_not_failed(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "stare", "crane"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_load_word_list_normalizes(tmp_path: Path):
    p = write_word_list(["Crane", "", "  stare  ", "hi"], tmp_path / "sub" / "w.txt")
    assert load_word_list(p) == ["crane", "stare", "hi"]


def test_load_word_list_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_word_list(tmp_path / "nope.txt")


def test_read_lines_keeps_raw_entries(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("Crane\r\n\n stare\n", encoding="utf-8")
    assert read_lines(p) == ["Crane", "", " stare"]
