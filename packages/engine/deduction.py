"""
Row deduction: one guess row's feedback -> restrictions on the solution.

Each distinct letter in the row is handled on its own (case-insensitive):

  1) Split that letter's cells by status into absent (A), wrong-position (W)
     and right-position (R).
  2) present = |W| + |R| is how many copies the row confirms.
  3) Occurrence count:
       - any gray copy   -> the solution has EXACTLY `present` copies
                            (a gray next to a green/yellow of the same letter
                            means "no more than the coloured ones")
       - otherwise       -> AT LEAST `present` copies
  4) If any copy is yellow, every yellow and gray position is a place the
     letter is NOT. With no yellow, grays are already covered by the exact
     count (0 for an all-gray letter), so they are left out.
  5) Every green position is a place the letter MUST be.

The result is an ordinary list; rows hold at most a handful of letters so
there is nothing to gain from laziness.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .config import WORD_LENGTH
from .restrictions import LetterStatus, Restriction, at, at_least, exact, not_at


@dataclass
class Cell:
    """One square of the grid: a typed letter (or None) plus its feedback."""
    position: int
    letter: Optional[str] = None
    status: LetterStatus = LetterStatus.ABSENT

    @property
    def is_filled(self) -> bool:
        return bool(self.letter) and self.letter.isalpha()

    def clear(self) -> None:
        self.letter = None
        self.status = LetterStatus.ABSENT


def derive_restrictions(cells: Iterable[Cell]) -> List[Restriction]:
    """
    Return the minimal restriction list implied by one row's cells.

    Empty cells are ignored, so a blank row yields []. Cells that have a
    letter but were never marked count as ABSENT; the function never fails on
    a half-marked row, it just answers for what it has been given.
    """
    # Group filled cells by lower-cased letter, keeping first-appearance order.
    groups: Dict[str, List[Cell]] = {}
    for c in cells:
        if c.is_filled:
            groups.setdefault(c.letter.lower(), []).append(c)

    out: List[Restriction] = []
    for letter, group in groups.items():
        absent = [c for c in group if c.status is LetterStatus.ABSENT]
        wrong = [c for c in group if c.status is LetterStatus.WRONG_POSITION]
        right = [c for c in group if c.status is LetterStatus.RIGHT_POSITION]
        present = len(wrong) + len(right)

        if absent:
            out.append(exact(letter, present))
        elif present:
            out.append(at_least(letter, present))

        if wrong:
            for c in wrong + absent:
                out.append(not_at(letter, c.position))

        for c in right:
            out.append(at(letter, c.position))

    return out


class Row:
    """
    One guess attempt: a fixed number of editable cells.

    Restrictions are derived from the current cell contents on every call;
    nothing is cached, so edits are always reflected.
    """

    def __init__(self, index: int = 0, length: int = WORD_LENGTH):
        self.index = index
        self.cells: List[Cell] = [Cell(position=i) for i in range(length)]

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        marks = "".join(c.status.value for c in self.cells)
        return f"Row({self.index}, {self.word!r}, {marks!r})"

    @property
    def word(self) -> str:
        """Typed letters, with '.' for empty cells."""
        return "".join(c.letter.lower() if c.is_filled else "." for c in self.cells)

    @property
    def is_empty(self) -> bool:
        return not any(c.is_filled for c in self.cells)

    @property
    def statuses(self) -> List[LetterStatus]:
        return [c.status for c in self.cells]

    def clear(self) -> None:
        for c in self.cells:
            c.clear()

    def restrictions(self) -> List[Restriction]:
        return derive_restrictions(self.cells)
