"""
Feedback statuses and restrictions.

A Restriction is one logical fact about the hidden solution word, e.g.
"contains exactly one 'l'" or "has 'e' at position 1". Restrictions are plain
immutable values: two of them are equal iff letter, kind and value all match,
which is what lets the puzzle de-duplicate them with a set.

Restrictions never remember which guess produced them. They describe the
solution, not a row.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LetterStatus(Enum):
    """Feedback colour of one guessed letter."""
    ABSENT = "-"            # gray
    WRONG_POSITION = "Y"    # yellow
    RIGHT_POSITION = "G"    # green


class RestrictionKind(Enum):
    EXACT_OCCURRENCES = "exact"       # value = exact count of letter
    MIN_OCCURRENCES = "min"           # value = lower bound on count
    MUST_OCCUR_AT = "at"              # value = 0-based position
    MUST_NOT_OCCUR_AT = "not_at"      # value = 0-based position


@dataclass(frozen=True)
class Restriction:
    letter: str
    kind: RestrictionKind
    value: int

    def __str__(self) -> str:
        k = self.kind
        if k is RestrictionKind.EXACT_OCCURRENCES:
            return f"exactly {self.value} x '{self.letter}'"
        if k is RestrictionKind.MIN_OCCURRENCES:
            return f"at least {self.value} x '{self.letter}'"
        if k is RestrictionKind.MUST_OCCUR_AT:
            return f"'{self.letter}' at {self.value}"
        return f"'{self.letter}' not at {self.value}"


# Short constructors; keep call sites in the deduction engine readable.

def exact(letter: str, n: int) -> Restriction:
    return Restriction(letter, RestrictionKind.EXACT_OCCURRENCES, n)


def at_least(letter: str, n: int) -> Restriction:
    return Restriction(letter, RestrictionKind.MIN_OCCURRENCES, n)


def at(letter: str, pos: int) -> Restriction:
    return Restriction(letter, RestrictionKind.MUST_OCCUR_AT, pos)


def not_at(letter: str, pos: int) -> Restriction:
    return Restriction(letter, RestrictionKind.MUST_NOT_OCCUR_AT, pos)
