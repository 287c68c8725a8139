"""
Download the scrabble word list and write a clean local copy.

What it does:
- Downloads the raw list (one word per line).
- Keeps uppercase A–Z words of at least 4 letters (same filter as Dictionary).
- Sorts alphabetically and writes one word per line.

Usage:
    python -m script.fetch_wordlist --out data/scrabble_words.txt
"""

import argparse

from beesolver.datasets import WORD_LIST_URL, DictionaryError, fetch_dictionary, write_lines


def main():
    ap = argparse.ArgumentParser(description="Fetch and clean the scrabble word list")
    ap.add_argument("--url", default=WORD_LIST_URL)
    ap.add_argument("--out", default="data/scrabble_words.txt")
    args = ap.parse_args()

    try:
        dictionary = fetch_dictionary(args.url)
    except DictionaryError as e:
        raise SystemExit(f"{e} ({e.__cause__})")

    path = write_lines(sorted(dictionary.words), args.out)
    print(f"Wrote {len(dictionary)} words -> {path}")


if __name__ == "__main__":
    main()
