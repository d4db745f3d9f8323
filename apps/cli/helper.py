# apps/cli/helper.py
"""
Interactive Wordle helper (human-in-the-loop).

- You type each guess you played and the feedback you saw.
- Feedback accepted as: 'GY--G', 'gybbg' or '21002'.
- After every row the remaining candidates are printed.

Run:
  python -m apps.cli.helper --words packages/datasets/data/words_5.txt
  python -m apps.cli.helper --words words.txt --guess crane:--Y-G --guess pilot:-G---

Prompt commands:
  quit / q / exit  -> exit
  undo             -> clear the last entered row
  rules            -> show the current restriction set
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, TextIO, Tuple

from packages.datasets import load_word_list
from packages.engine import WordleHelperError
from packages.puzzle import Puzzle

QUIT = {"quit", "q", "exit"}


def parse_entry(s: str) -> Tuple[str, str]:
    """
    Split 'crane:GY--G' (or 'crane GY--G') into (guess, pattern).
    Raises ValueError if either half is missing.
    """
    s = s.strip()
    for sep in (":", " ", ","):
        if sep in s:
            guess, patt = s.split(sep, 1)
            guess, patt = guess.strip(), patt.strip()
            if guess and patt:
                return guess.lower(), patt
    raise ValueError("expected GUESS:FEEDBACK, e.g. crane:--Y-G")


def format_candidates(cands: List[str], limit: int = 30) -> str:
    if not cands:
        return "no candidates (check the feedback you entered)"
    shown = " ".join(cands[:limit])
    more = f" ... (+{len(cands) - limit} more)" if len(cands) > limit else ""
    return f"{len(cands)} candidate(s): {shown}{more}"


def enter_row(puzzle: Puzzle, entry: str) -> int:
    """Put one GUESS:FEEDBACK entry in the next free row; return its index."""
    row = puzzle.next_empty_row()
    if row is None:
        raise ValueError(f"all {puzzle.num_rows} rows are used")
    guess, patt = parse_entry(entry)
    puzzle.set_guess(row, guess, patt)
    return row


def run_session(puzzle: Puzzle, lines: Iterable[str], out: TextIO, *, limit: int = 30) -> None:
    """
    Drive the helper from an iterable of input lines.

    Bad entries are reported and skipped; the session keeps going.
    """
    last: List[int] = []
    for line in lines:
        cmd = line.strip()
        if not cmd:
            continue
        if cmd.lower() in QUIT:
            break
        if cmd.lower() == "undo":
            if last:
                puzzle.clear_row(last.pop())
            print(format_candidates(puzzle.recompute_candidates(), limit), file=out)
            continue
        if cmd.lower() == "rules":
            for r in puzzle.restrictions():
                print(f"  {r}", file=out)
            continue

        try:
            last.append(enter_row(puzzle, cmd))
        except (WordleHelperError, ValueError) as e:
            print(f"  ! {e}", file=out)
            continue
        print(format_candidates(puzzle.recompute_candidates(), limit), file=out)


def _prompt_lines(prompt: str):
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordle-helper: narrow a word list from feedback")
    ap.add_argument("--words", default="packages/datasets/data/words_5.txt",
                    help="dictionary file (one word per line)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--guess", action="append", default=[],
                    help="GUESS:FEEDBACK pair; repeatable. With any --guess, run once and exit")
    ap.add_argument("--limit", type=int, default=30, help="max candidates to print")
    ap.add_argument("--strict", action="store_true",
                    help="fail on dictionary entries of the wrong length instead of skipping them")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    puzzle = Puzzle(word_length=args.N)
    try:
        n = puzzle.load_word_list(load_word_list(args.words), skip_invalid=not args.strict)
    except (WordleHelperError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(f"Loaded {n} words of length {args.N}.")

    if args.guess:
        run_session(puzzle, args.guess, sys.stdout, limit=args.limit)
        return 0

    print("Enter GUESS:FEEDBACK (G/Y/-), 'undo', 'rules' or 'q'.")
    run_session(puzzle, _prompt_lines("> "), sys.stdout, limit=args.limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
