"""
Wordle-style feedback patterns.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

`score` produces a pattern for a known (guess, answer) pair; the replay harness
uses it to feed realistic feedback into a Puzzle. `parse_pattern` turns what a
human types at the helper prompt into LetterStatus values.

Algorithm for `score` (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from .errors import InvalidPattern, LengthMismatch
from .restrictions import LetterStatus

# Accepted spellings for each status at the prompt.
#   G/Y/-     : the engine's own pattern alphabet
#   g/y/b     : green / yellow / black, as people usually type it
#   2/1/0     : numeric form
#   x/.       : alternative grays
_PATTERN_CHARS = {
    "g": LetterStatus.RIGHT_POSITION,
    "2": LetterStatus.RIGHT_POSITION,
    "y": LetterStatus.WRONG_POSITION,
    "1": LetterStatus.WRONG_POSITION,
    "-": LetterStatus.ABSENT,
    "b": LetterStatus.ABSENT,
    "x": LetterStatus.ABSENT,
    ".": LetterStatus.ABSENT,
    "0": LetterStatus.ABSENT,
}


def score(guess: str, answer: str) -> str:
    """
    Compute Wordle feedback pattern for `guess` against `answer`.

    Raises LengthMismatch if the two words differ in length.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise LengthMismatch(guess, len(answer))

    n = len(guess)
    pattern = ["-"] * n

    # Pass 1: greens, and count the answer's letters that are still unmatched
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the answer's true multiplicity
    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def parse_pattern(text: str, N: int) -> List[LetterStatus]:
    """
    Parse a typed feedback pattern into N statuses.

    Accepts 'GY--G', 'gybbg', '21002' (case-insensitive, surrounding
    whitespace ignored). Raises InvalidPattern on wrong length or an
    unknown character.
    """
    s = text.strip().lower()
    if len(s) != N:
        raise InvalidPattern(f"feedback {text!r} must have {N} characters")
    try:
        return [_PATTERN_CHARS[ch] for ch in s]
    except KeyError as e:
        raise InvalidPattern(
            f"feedback {text!r} has unknown mark {e.args[0]!r}; use G/Y/- , g/y/b or 2/1/0"
        ) from e


def pattern_from_statuses(statuses: Iterable[LetterStatus]) -> str:
    """Inverse of parse_pattern, in the canonical 'G'/'Y'/'-' alphabet."""
    return "".join(s.value for s in statuses)
