import pytest
from packages.engine import (
    score, parse_pattern, pattern_from_statuses, filter_candidates, derive_restrictions,
    Word, Cell, Row, Restriction, RestrictionKind, LetterStatus,
    LengthMismatch, InvalidPattern,
)
from packages.engine.restrictions import exact, at_least, at, not_at

A = LetterStatus.ABSENT
W = LetterStatus.WRONG_POSITION
R = LetterStatus.RIGHT_POSITION


def _cells(word, statuses):
    return [Cell(i, ch, st) for i, (ch, st) in enumerate(zip(word, statuses))]


# --- scoring: N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","-GYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GG---"),
    ("cools","scoop","YYG-Y"),
    ("scoop","scoop","GGGGG"),
    ("raise","crane","YY--G"),
    ("stare","crane","--GYG"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected

def test_score_length_mismatch():
    with pytest.raises(LengthMismatch):
        score("cranes", "crane")

@pytest.mark.parametrize("text", ["GY--G", "gybbg", "21002", " gyx.G "])
def test_parse_pattern_spellings(text):
    assert parse_pattern(text, 5) == [R, W, A, A, R]

@pytest.mark.parametrize("text", ["GY-G", "GY--GG", "GY-?G"])
def test_parse_pattern_rejects(text):
    with pytest.raises(InvalidPattern):
        parse_pattern(text, 5)

def test_pattern_from_statuses():
    assert pattern_from_statuses([R, W, A, A, R]) == "GY--G"


# --- word model ---
def test_word_lowercases_and_counts():
    w = Word("LeVeL")
    assert w.text == "level"
    assert w.count("l") == 2 and w.count("E") == 2 and w.count("z") == 0
    assert w.has_at("v", 2) and not w.has_at("l", 1)

@pytest.mark.parametrize("text", ["hi", "", "cranes"])
def test_word_length_mismatch(text):
    with pytest.raises(LengthMismatch) as ei:
        Word(text)
    assert ei.value.word == text and ei.value.expected == 5

def test_word_length_checked_after_lowercasing():
    # "\u0130" lower-cases to two code points
    with pytest.raises(LengthMismatch):
        Word("\u0130stan")
    assert len(Word("\u0130stn", length=5)) == 5

def test_word_custom_length():
    assert Word("planet", length=6).text == "planet"
    with pytest.raises(LengthMismatch):
        Word("crane", length=6)

@pytest.mark.parametrize("r,expected", [
    (exact("l", 2), True),
    (exact("l", 1), False),
    (at_least("e", 2), True),
    (at_least("e", 3), False),
    (at("v", 2), True),
    (at("v", 1), False),
    (not_at("l", 1), True),
    (not_at("l", 0), False),
])
def test_word_satisfies_each_kind(r, expected):
    assert Word("level").satisfies(r) is expected

def test_every_kind_has_an_evaluator():
    w = Word("hello")
    for kind in RestrictionKind:
        w.satisfies(Restriction("h", kind, 0))

def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        Word("hello").satisfies(Restriction("h", "bogus", 0))

def test_satisfies_all_is_conjunction():
    w = Word("felon")
    assert w.satisfies_all([])
    assert w.satisfies_all([at("e", 1), exact("h", 0)])
    assert not w.satisfies_all([at("e", 1), exact("l", 2)])

def test_restrictions_compare_by_value():
    assert exact("e", 1) == Restriction("e", RestrictionKind.EXACT_OCCURRENCES, 1)
    assert len({at("e", 1), at("e", 1), not_at("e", 1)}) == 2


# --- row deduction ---
def test_duplicate_letter_absent_and_right():
    cells = [Cell(0, "e", A), Cell(1, "e", R)]
    rs = derive_restrictions(cells)
    assert exact("e", 1) in rs and at("e", 1) in rs
    assert not any(r.kind is RestrictionKind.MIN_OCCURRENCES and r.letter == "e" for r in rs)
    assert rs == [exact("e", 1), at("e", 1)]

def test_wrong_position_alone():
    rs = derive_restrictions([Cell(0, "e", W)])
    assert rs == [at_least("e", 1), not_at("e", 0)]

def test_wrong_and_absent_exclude_both_positions():
    rs = derive_restrictions([Cell(0, "e", W), Cell(3, "e", A)])
    assert rs == [exact("e", 1), not_at("e", 0), not_at("e", 3)]

def test_all_absent_letter_has_no_positional_exclusion():
    rs = derive_restrictions([Cell(2, "z", A)])
    assert rs == [exact("z", 0)]

def test_hello_row():
    rs = derive_restrictions(_cells("hello", [A, R, R, A, W]))
    assert rs == [
        exact("h", 0),
        at_least("e", 1), at("e", 1),
        exact("l", 1), at("l", 2),
        at_least("o", 1), not_at("o", 4),
    ]
    assert not_at("l", 3) not in rs

def test_grouping_is_case_insensitive():
    rs = derive_restrictions([Cell(0, "E", W), Cell(1, "e", R)])
    assert rs == [at_least("e", 2), not_at("e", 0), at("e", 1)]

def test_empty_row_yields_nothing():
    assert Row().restrictions() == []
    assert derive_restrictions([Cell(0, None), Cell(1, ""), Cell(2, " ")]) == []

def test_unmarked_row_defaults_to_absent():
    row = Row()
    for c, ch in zip(row.cells, "crane"):
        c.letter = ch
    assert row.restrictions() == [exact(ch, 0) for ch in "crane"]

def test_row_recomputes_after_edit():
    row = Row()
    row.cells[0].letter = "e"
    assert row.restrictions() == [exact("e", 0)]
    row.cells[0].status = R
    assert row.restrictions() == [at_least("e", 1), at("e", 0)]
    assert row.word == "e...." and not row.is_empty
    row.clear()
    assert row.is_empty and row.restrictions() == []


# --- candidate filter ---
def test_filter_conjunction_law():
    rs = [exact("h", 0), at_least("o", 1), at("e", 1), not_at("o", 4)]
    words = ["felon", "lemon", "hello", "melon", "demon", "women"]
    out = filter_candidates(words, rs)
    for w in words:
        assert (w in out) == all(Word(w).satisfies(r) for r in rs)
    assert out == ["felon", "lemon", "melon", "demon"]

def test_filter_end_to_end_hello():
    rs = derive_restrictions(_cells("hello", [A, R, R, A, W]))
    assert filter_candidates(["hello", "house", "whoop", "lemon"], rs) == []
    assert filter_candidates(["hello", "house", "felon", "whoop", "lemon"], rs) == ["felon"]

def test_filter_preserves_order_and_accepts_words():
    words = [Word("stare"), Word("crane"), Word("trace")]
    assert filter_candidates(words, [at_least("r", 1)]) == ["stare", "crane", "trace"]

def test_filter_empty_inputs():
    assert filter_candidates([], [exact("a", 0)]) == []
    assert filter_candidates(["hi", " Crane "], []) == ["crane"]

@pytest.mark.parametrize("guess,answer", [
    ("belle","level"), ("lemon","level"), ("cools","scoop"), ("raise","crane"),
    ("eerie","there"), ("allot","total"), ("speed","abide"), ("geese","eerie"),
])
def test_feedback_never_excludes_answer(guess, answer):
    statuses = parse_pattern(score(guess, answer), 5)
    rs = derive_restrictions(_cells(guess, statuses))
    assert Word(answer).satisfies_all(rs)
    assert filter_candidates([guess, answer], rs) in ([answer], [guess, answer])
