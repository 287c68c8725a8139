"""
Dictionary acquisition.

The solver works against an immutable set of uppercase words, each at least
MIN_WORD_LENGTH letters long. This module builds that set from raw text:

  - from_lines:      filter an iterable of lines (shared by the two loaders)
  - load_dictionary: read a local word list (one word per line)
  - fetch_dictionary: download the public scrabble word list over HTTP

Line filtering:
  - surrounding whitespace is trimmed
  - blank lines are dropped
  - lines with anything but A–Z (lowercase, digits, punctuation) are dropped
  - words shorter than MIN_WORD_LENGTH are dropped

Failures (missing file, HTTP error, timeout) raise DictionaryError with the
underlying exception chained. Nothing is retried, and no partial dictionary
is ever returned.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable

import requests

from beesolver.engine.validation import MIN_WORD_LENGTH
from .io import read_lines

WORD_LIST_URL = "https://raw.githubusercontent.com/rressler/data_raw_courses/main/scrabble_words.txt"
REQUEST_TIMEOUT = 30  # seconds

_UPPER_RE = re.compile(r"^[A-Z]+$")


class DictionaryError(RuntimeError):
    """The word list could not be acquired."""


@dataclass(frozen=True)
class Dictionary:
    words: FrozenSet[str]

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return word in self.words

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Dictionary":
        words = set()
        for raw in lines:
            w = raw.strip()
            if len(w) >= MIN_WORD_LENGTH and _UPPER_RE.match(w):
                words.add(w)
        return cls(frozenset(words))


def load_dictionary(path: Path | str) -> Dictionary:
    """Read a UTF-8 word list from disk."""
    try:
        lines = read_lines(path)
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryError(f"failed to read word list {path}") from e
    return Dictionary.from_lines(lines)


def fetch_dictionary(url: str = WORD_LIST_URL, timeout: float = REQUEST_TIMEOUT) -> Dictionary:
    """Download the word list at `url` and filter it into a Dictionary."""
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise DictionaryError(f"failed to GET {url}") from e
    return Dictionary.from_lines(r.text.splitlines())
