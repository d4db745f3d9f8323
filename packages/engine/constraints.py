"""
Candidate filtering given a restriction set.

Given:
  - a pool of words (Word objects, or plain strings)
  - the restrictions derived from every feedback row so far
  - target word length N

Return:
  - words that satisfy ALL restrictions, as lowercase strings.

This is the step that turns feedback into a shrinking candidate set. An empty
return value is the "no candidates" answer; there is no placeholder entry.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Union

from .config import WORD_LENGTH
from .restrictions import Restriction
from .word import Word

logger = logging.getLogger(__name__)


def filter_candidates(
        words: Iterable[Union[Word, str]],
        restrictions: Iterable[Restriction],
        N: int = WORD_LENGTH,
) -> List[str]:
    """
    Keep only words that satisfy every restriction.

    Args:
      words        : iterable of Word objects or raw strings
      restrictions : iterable of Restriction (materialized once here)
      N            : expected word length for raw strings

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    rs = list(restrictions)
    out: List[str] = []

    for w in words:
        if not isinstance(w, Word):
            w = w.strip()
            # Basic hygiene: a raw string of the wrong length can never match
            if len(w) != N:
                continue
            w = Word(w, N)

        if w.satisfies_all(rs):
            out.append(w.text)

    logger.debug("filter: %d restriction(s) -> %d candidate(s)", len(rs), len(out))
    return out
