"""
Puzzle state: the feedback grid plus the dictionary it narrows.

- Puzzle owns NUM_ROWS rows of WORD_LENGTH cells and the loaded word list.
- Cells are edited in place (set_letter / set_status / set_guess).
- restrictions() is the de-duplicated union over all rows, recomputed on
  every call; recompute_candidates() runs the whole pipeline, and the
  candidates / has_candidates properties run it again on every read.

Rows are combined without any cross-row simplification: an exact count from
one row and a minimum count from another are both kept and both checked.
Contradictory feedback is not reported; it just leaves zero candidates.

The object is UI-agnostic so the interactive helper, the replay harness and
tests all drive it the same way.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Union

from packages.engine import (
    NUM_ROWS,
    WORD_LENGTH,
    LengthMismatch,
    LetterStatus,
    OutOfRange,
    Restriction,
    Row,
    Word,
    filter_candidates,
    parse_pattern,
)

logger = logging.getLogger(__name__)


class Puzzle:
    def __init__(self, *, word_length: int = WORD_LENGTH, num_rows: int = NUM_ROWS):
        self.word_length = int(word_length)
        self.num_rows = int(num_rows)
        self.rows: List[Row] = [Row(i, self.word_length) for i in range(self.num_rows)]
        self.words: List[Word] = []

    def __repr__(self) -> str:
        return (f"Puzzle(word_length={self.word_length}, num_rows={self.num_rows}, "
                f"words={len(self.words)})")

    # --- grid editing ---

    def _row(self, row: int) -> Row:
        if not 0 <= row < self.num_rows:
            raise OutOfRange("row", row, self.num_rows)
        return self.rows[row]

    def _cell(self, row: int, col: int):
        r = self._row(row)
        if not 0 <= col < self.word_length:
            raise OutOfRange("column", col, self.word_length)
        return r.cells[col]

    def set_letter(self, row: int, col: int, character: str | None) -> None:
        """
        Type (or with None / "" erase) one letter. Only bounds are checked;
        a longer string keeps just its first character.
        """
        self._cell(row, col).letter = character[:1] if character else None

    def set_status(self, row: int, col: int, status: LetterStatus) -> None:
        self._cell(row, col).status = LetterStatus(status)

    def set_guess(
            self,
            row: int,
            word: str,
            statuses: Union[str, Sequence[LetterStatus]],
    ) -> None:
        """
        Fill a whole row at once.

        `statuses` is either a sequence of LetterStatus or a feedback pattern
        string accepted by parse_pattern ('GY--G', 'gybbg', '21002').
        """
        r = self._row(row)
        if len(word) != self.word_length:
            raise LengthMismatch(word, self.word_length)
        if isinstance(statuses, str):
            statuses = parse_pattern(statuses, self.word_length)
        elif len(statuses) != self.word_length:
            raise LengthMismatch("".join(s.value for s in statuses), self.word_length)

        for cell, ch, st in zip(r.cells, word, statuses):
            cell.letter = ch
            cell.status = LetterStatus(st)

    def clear_row(self, row: int) -> None:
        self._row(row).clear()

    def reset(self) -> None:
        """Clear every row; the word list stays loaded."""
        for r in self.rows:
            r.clear()

    def next_empty_row(self) -> int | None:
        for r in self.rows:
            if r.is_empty:
                return r.index
        return None

    # --- dictionary ---

    def load_word_list(self, words: Iterable[str], *, skip_invalid: bool = False) -> int:
        """
        Replace the dictionary.

        Strict (default): the first entry of the wrong length raises
        LengthMismatch and the previously loaded list is left as it was.
        skip_invalid=True: such entries are dropped (and logged) instead.

        Returns the number of words loaded.
        """
        loaded: List[Word] = []
        skipped = 0
        for raw in words:
            try:
                loaded.append(Word(raw, self.word_length))
            except LengthMismatch:
                if not skip_invalid:
                    raise
                skipped += 1
                logger.debug("skipping %r: not %d letters", raw, self.word_length)

        self.words = loaded
        if skipped:
            logger.info("word list: skipped %d entr%s of the wrong length",
                        skipped, "y" if skipped == 1 else "ies")
        logger.debug("word list: loaded %d word(s)", len(loaded))
        return len(loaded)

    # --- deduction ---

    def restrictions(self) -> List[Restriction]:
        """Union of every row's restrictions, duplicates removed (first seen wins)."""
        seen = set()
        out: List[Restriction] = []
        for r in self.rows:
            for rs in r.restrictions():
                if rs not in seen:
                    seen.add(rs)
                    out.append(rs)
        return out

    def recompute_candidates(self) -> List[str]:
        """Run rows -> restrictions -> filter against the current grid."""
        return filter_candidates(self.words, self.restrictions(), self.word_length)

    @property
    def candidates(self) -> List[str]:
        return self.recompute_candidates()

    @property
    def has_candidates(self) -> bool:
        return bool(self.recompute_candidates())
