"""
Word model.

A Word wraps one dictionary entry of the puzzle's fixed length and answers the
questions a Restriction can ask about it: how many times does a letter occur,
and which letter sits at a given position.

Construction is strict: a word of the wrong length raises LengthMismatch
instead of being truncated or padded. Text is lower-cased on the way in, so
matching is case-insensitive.
"""

from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, Iterable

from .config import WORD_LENGTH
from .errors import LengthMismatch
from .restrictions import Restriction, RestrictionKind


class Word:
    __slots__ = ("text", "_counts")

    def __init__(self, text: str, length: int = WORD_LENGTH):
        lowered = text.lower()
        # lower() can change the length (e.g. "\u0130" -> "i\u0307")
        if len(lowered) != length:
            raise LengthMismatch(text, length)
        self.text = lowered
        self._counts = Counter(self.text)

    def __repr__(self) -> str:
        return f"Word({self.text!r})"

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def __eq__(self, other) -> bool:
        if isinstance(other, Word):
            return self.text == other.text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    # --- letter queries ---

    def count(self, letter: str) -> int:
        return self._counts[letter.lower()]

    def has_at(self, letter: str, position: int) -> bool:
        return self.text[position] == letter.lower()

    # --- restriction evaluation ---

    def satisfies(self, r: Restriction) -> bool:
        try:
            check = _CHECKS[r.kind]
        except KeyError as e:
            raise ValueError(f"Unknown restriction kind: {r.kind!r}") from e
        return check(self, r)

    def satisfies_all(self, restrictions: Iterable[Restriction]) -> bool:
        return all(self.satisfies(r) for r in restrictions)


# One evaluator per RestrictionKind; satisfies() raises for a kind missing here.
_CHECKS: Dict[RestrictionKind, Callable[[Word, Restriction], bool]] = {
    RestrictionKind.EXACT_OCCURRENCES: lambda w, r: w.count(r.letter) == r.value,
    RestrictionKind.MIN_OCCURRENCES: lambda w, r: w.count(r.letter) >= r.value,
    RestrictionKind.MUST_OCCUR_AT: lambda w, r: w.has_at(r.letter, r.value),
    RestrictionKind.MUST_NOT_OCCUR_AT: lambda w, r: not w.has_at(r.letter, r.value),
}
