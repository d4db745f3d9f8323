"""
Word-list files: one entry per line, UTF-8.

Sourcing is the caller's job; these helpers only move word lists between
disk and memory. Lengths are never checked here. Puzzle.load_word_list and
the validator decide what a wrong-length entry means.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """Raw lines of a word-list file, line endings removed, blanks kept."""
    with Path(p).open("r", encoding="utf-8") as f:
        return f.read().splitlines()


def load_word_list(p: Path | str) -> List[str]:
    """Entries of a word-list file, stripped and lower-cased, blanks dropped."""
    words = [s.lower() for s in (ln.strip() for ln in read_lines(p)) if s]
    logger.debug("read %d word(s) from %s", len(words), p)
    return words


def write_word_list(words: Iterable[str], p: Path | str) -> str:
    """Write entries one per line (parent dirs created); return the path."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    words = list(words)
    p.write_text("".join(f"{w}\n" for w in words), encoding="utf-8")
    logger.debug("wrote %d word(s) to %s", len(words), p)
    return str(p)
