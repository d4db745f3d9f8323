"""
Clean up a word-list file.

Features:
- Preserves original order by default (stable dedupe).
- Optional case-insensitive mode (treat 'TEARS' == 'tears').
- Optional stripping of blank/whitespace-only lines.
- Optional --N: keep only entries that make a valid Word of that length.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in packages/datasets/data/words_5.txt \
        --case-insensitive --strip-blanks --N 5
"""

import argparse
import logging
from pathlib import Path

from packages.datasets import read_lines, write_word_list
from packages.engine import LengthMismatch, Word

logger = logging.getLogger("script.dedupe_txt")


def unique_preserve_order(lines: list[str], key=None) -> list[str]:
    seen, out = set(), []
    for s in lines:
        k = key(s) if key else s
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out


def keep_length(lines: list[str], N: int) -> list[str]:
    """Drop every entry that is not a valid N-letter Word."""
    out = []
    for s in lines:
        try:
            Word(s.strip(), N)
        except LengthMismatch:
            logger.debug("dropping %r", s)
            continue
        out.append(s.strip())
    return out


def main():
    ap = argparse.ArgumentParser(description="Remove duplicate lines from a word-list file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--case-insensitive", action="store_true", help="treat 'TEARS' and 'tears' as the same")
    ap.add_argument("--strip-blanks", action="store_true", help="drop empty/whitespace-only lines")
    ap.add_argument("--N", type=int, help="keep only words of this length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log dropped entries")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(message)s")

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    if args.strip_blanks:
        lines = [s.strip() for s in lines if s.strip()]
    if args.N:
        lines = keep_length(lines, args.N)

    key = (lambda s: s.lower()) if args.case_insensitive else None
    out = unique_preserve_order(lines, key=key)
    if args.sort:
        out = sorted(out, key=(str.lower if args.case_insensitive else None))

    write_word_list(out, outp)
    logger.info("Input: %s (%d lines) -> Output: %s (%d unique)", inp, len(lines), outp, len(out))


if __name__ == "__main__":
    main()
