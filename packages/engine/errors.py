"""
Exceptions raised by the engine and puzzle layers.

All of them derive from WordleHelperError so a caller (e.g. a CLI) can report
input problems with a single `except` clause, and from the matching builtin so
existing `except ValueError` / `except IndexError` code keeps working.
"""

from __future__ import annotations


class WordleHelperError(Exception):
    """Base class for all wordle-helper errors."""


class LengthMismatch(WordleHelperError, ValueError):
    """A word (or feedback row) does not have the required length."""

    def __init__(self, word: str, expected: int):
        self.word = word
        self.expected = expected
        super().__init__(f"{word!r} has length {len(word)}; expected {expected}")


class OutOfRange(WordleHelperError, IndexError):
    """A row or column index falls outside the puzzle grid."""

    def __init__(self, what: str, index: int, size: int):
        self.what = what
        self.index = index
        self.size = size
        super().__init__(f"{what} index {index} out of range [0, {size})")


class InvalidPattern(WordleHelperError, ValueError):
    """A feedback pattern string could not be parsed."""
