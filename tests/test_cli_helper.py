import io

import pytest
from apps.cli.helper import parse_entry, format_candidates, run_session, main
from packages.puzzle import Puzzle

WORDS = ["hello", "house", "whoop", "lemon", "felon"]


def _puzzle():
    p = Puzzle()
    p.load_word_list(WORDS)
    return p


@pytest.mark.parametrize("s,expected", [
    ("crane:GY--G", ("crane", "GY--G")),
    ("CRANE gybbg", ("crane", "gybbg")),
    (" crane : 21002 ", ("crane", "21002")),
])
def test_parse_entry(s, expected):
    assert parse_entry(s) == expected


def test_parse_entry_rejects_missing_feedback():
    with pytest.raises(ValueError):
        parse_entry("crane")


def test_format_candidates():
    assert format_candidates([]).startswith("no candidates")
    assert format_candidates(["a", "b", "c"], limit=2) == "3 candidate(s): a b ... (+1 more)"


def test_run_session_narrows_and_undoes():
    p = _puzzle()
    out = io.StringIO()
    run_session(p, ["hello:-GG-Y", "rules", "undo", "q", "hello:GGGGG"], out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "1 candidate(s): felon"
    assert "  exactly 0 x 'h'" in lines
    assert lines[-1] == "5 candidate(s): hello house whoop lemon felon"
    assert p.next_empty_row() == 0


def test_run_session_reports_bad_entries():
    p = _puzzle()
    out = io.StringIO()
    run_session(p, ["hello:GG", "hi:GG", "hello:-GG-Y"], out)
    text = out.getvalue()
    assert text.count("  ! ") == 2
    assert text.strip().endswith("1 candidate(s): felon")


def test_main_one_shot(tmp_path, capsys):
    words = tmp_path / "w.txt"
    words.write_text("\n".join(WORDS + ["hi"]) + "\n", encoding="utf-8")
    rc = main(["--words", str(words), "--guess", "hello:-GG-Y"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Loaded 5 words" in out and "1 candidate(s): felon" in out


def test_main_strict_rejects_bad_dictionary(tmp_path, capsys):
    words = tmp_path / "w.txt"
    words.write_text("hello\nhi\n", encoding="utf-8")
    assert main(["--words", str(words), "--strict", "--guess", "hello:GGGGG"]) == 2
    assert "error:" in capsys.readouterr().err
