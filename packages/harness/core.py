"""
Replay harness.

- replay_game:  play a fixed guess sequence against a known answer, feeding
                the scored feedback into a Puzzle row by row.
- replay_batch: the same opening sequence against many answers.

Each turn records how far the candidate list shrank and whether the answer
survived; an answer that drops out means the deduction engine produced an
unsound restriction, so a batch run doubles as a large consistency check.

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Sequence

from packages.engine import NUM_ROWS, score
from packages.puzzle import Puzzle

logger = logging.getLogger(__name__)


def _check_turns(guesses: Sequence[str], num_rows: int) -> None:
    """Guardrail: a puzzle has only `num_rows` rows to put guesses in."""
    if len(guesses) > num_rows:
        raise ValueError(f"at most {num_rows} guesses fit in the grid; got {len(guesses)}")


def replay_game(
        answer: str,
        guesses: Sequence[str],
        *,
        words: Iterable[str],
        N: int,
        num_rows: int = NUM_ROWS,
) -> Dict:
    """
    Replay `guesses` against `answer`.

    Args:
        answer:    the hidden word for this case
        guesses:   guess sequence to enter, one per row
        words:     dictionary to narrow
        N:         word length
        num_rows:  grid height (guesses beyond it are rejected)

    Returns:
        dict with keys:
            answer, solved (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern, num_candidates, answer_kept)])
    """
    _check_turns(guesses, num_rows)

    puzzle = Puzzle(word_length=N, num_rows=num_rows)
    puzzle.load_word_list(words, skip_invalid=True)

    history: List[tuple] = []
    solved = False

    t0 = time.perf_counter()
    for row, guess in enumerate(guesses):
        patt = score(guess, answer)
        puzzle.set_guess(row, guess, patt)
        cands = puzzle.recompute_candidates()
        kept = answer.lower() in cands
        history.append((guess.lower(), patt, len(cands), kept))

        if not kept:
            logger.warning("answer %r dropped after guess %r (%s)", answer, guess, patt)

        if patt == "G" * N:
            solved = True
            break

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "answer": answer,
        "solved": solved,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
    }


def replay_batch(
        answers: List[str],
        guesses: Sequence[str],
        *,
        words: List[str],
        N: int,
        num_rows: int = NUM_ROWS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run replay_game for many answers. If 'sample' is provided, only the first
    K answers (after filtering to length N) are used to speed up quick checks.
    """
    _check_turns(guesses, num_rows)

    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    return [
        replay_game(ans, guesses, words=words, N=N, num_rows=num_rows)
        for ans in pool
    ]
