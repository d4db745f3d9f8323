from .config import WORD_LENGTH, NUM_ROWS
from .errors import WordleHelperError, LengthMismatch, OutOfRange, InvalidPattern
from .restrictions import LetterStatus, RestrictionKind, Restriction
from .word import Word
from .deduction import Cell, Row, derive_restrictions
from .constraints import filter_candidates
from .scoring import score, parse_pattern, pattern_from_statuses

__all__ = [
    "WORD_LENGTH", "NUM_ROWS",
    "WordleHelperError", "LengthMismatch", "OutOfRange", "InvalidPattern",
    "LetterStatus", "RestrictionKind", "Restriction",
    "Word", "Cell", "Row", "derive_restrictions",
    "filter_candidates",
    "score", "parse_pattern", "pattern_from_statuses",
]
