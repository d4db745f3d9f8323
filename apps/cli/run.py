# apps/cli/run.py
"""
CLI entry point for replaying an opening against many answers.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the answers and the dictionary.
  3) Replays the fixed guess sequence against every answer with a live progress
     bar, feeding scored feedback into a Puzzle, and writes:
       - CSV:  per-answer results + guess/pattern/candidates-left columns
       - JSON: manifest with config, word-list hash, git commit, etc.

Any answer that falls out of its own candidate list is counted as unsound and
reported; a clean run prints "unsound=0".

Usage:
    python -m apps.cli.run --words packages/datasets/data/words_5.txt \
        --guesses crane,pilot --sample 200
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from tqdm import tqdm

from packages.datasets import validate_wordlist, pretty_summary, load_word_list
from packages.engine import NUM_ROWS, WordleHelperError
from packages.harness import replay_game, unsound_answers, write_replay_outputs

logger = logging.getLogger("apps.cli.run")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-helper: replay an opening against many answers")
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5 or 6)")
    ap.add_argument("--words", default="packages/datasets/data/words_5.txt",
                    help="dictionary to narrow (one word per line)")
    ap.add_argument("--answers",
                    help="answers to replay against (default: the dictionary itself)")
    ap.add_argument("--guesses", required=True,
                    help=f"comma-separated guess sequence (at most {NUM_ROWS})")
    ap.add_argument("--sample", type=int,
                    help="replay only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print(f"error: {rep['issues'][0]}", file=sys.stderr)
        return 2

    # 2) Load lists into memory (lowercased, no blanks)
    words = load_word_list(args.words)
    answers = load_word_list(args.answers) if args.answers else list(words)
    answers = [a for a in answers if len(a) == args.N]
    guesses = [g.strip().lower() for g in args.guesses.split(",") if g.strip()]

    # 3) Choose cases (deterministic sample by seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        random.Random(args.seed).shuffle(pool)
        answers = pool[: args.sample]

    # 4) Replay with progress
    results = []
    try:
        for ans in tqdm(answers, ncols=80, desc="Replaying", unit="game",
                        disable=args.no_progress):
            results.append(replay_game(ans, guesses, words=words, N=args.N))
    except (WordleHelperError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    unsound = unsound_answers(results)
    solved = sum(1 for r in results if r["solved"])
    print(f"cases={len(results)} solved={solved} unsound={len(unsound)}")
    if unsound:
        logger.warning("answers dropped by deduction: %s", ", ".join(unsound[:10]))

    # 5) Write outputs (CSV + manifest)
    csv_path, manifest_path = write_replay_outputs(
        results, args.outdir, wordlist=rep, config=vars(args), num_rows=NUM_ROWS, N=args.N,
    )

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
