"""
Scrape past Wordle answers from wordlehints.co.uk and write a clean list.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Keeps the final UPPERCASE token as the answer if it makes a valid Word.
- Lowercases, de-duplicates while preserving calendar order, and writes to file.

The result is a replay answer list for apps.cli.run.

Usage:
    python -m script.extract_wordle_answers --out packages/datasets/data/answers_5.txt
"""

import argparse
import logging
import re

import requests
from bs4 import BeautifulSoup

from packages.datasets import write_word_list
from packages.engine import WORD_LENGTH, LengthMismatch, Word

logger = logging.getLogger("script.extract_wordle_answers")

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]+)\b")


def parse_answers(text: str, N: int = WORD_LENGTH) -> list[str]:
    """Pull answers out of the page text, calendar order, duplicates removed."""
    seen, out = set(), []
    for m in ROW_RE.finditer(text):
        try:
            w = Word(m.group(2), N).text
        except LengthMismatch:
            logger.debug("ignoring %r", m.group(2))
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_answers(url: str = URL, N: int = WORD_LENGTH) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    soup = BeautifulSoup(r.text, "html.parser")
    return parse_answers(soup.get_text("\n", strip=True), N)


def main():
    ap = argparse.ArgumentParser(description="Extract unique Wordle answers")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/datasets/data/answers_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(answers)

    write_word_list(answers, args.out)
    logger.info("Wrote %d unique answers -> %s", len(answers), args.out)


if __name__ == "__main__":
    main()
