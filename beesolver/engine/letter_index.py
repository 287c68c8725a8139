"""
Letter index: letter -> dictionary words containing that letter.

Every valid answer contains the center letter, so the bucket for the center
letter is a safe superset of the answers. Indexed solvers only score that
bucket instead of the whole dictionary.

The index is built once per solver instance and never modified afterwards.
Buckets hold the dictionary's own string objects (no copies).
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, Mapping, Set

LetterIndex = Mapping[str, FrozenSet[str]]

_EMPTY: FrozenSet[str] = frozenset()


def build_letter_index(words: Iterable[str]) -> Dict[str, FrozenSet[str]]:
    """
    Bucket each word under every distinct letter it contains.

    Args:
      words : iterable of uppercase words (typically Dictionary.words)

    Returns:
      dict letter -> frozenset of words. Letters that appear in no word
      have no entry; use `bucket()` to read with an empty default.
    """
    buckets: Dict[str, Set[str]] = defaultdict(set)
    for w in words:
        for ch in set(w):
            buckets[ch].add(w)
    return {ch: frozenset(ws) for ch, ws in buckets.items()}


def bucket(index: LetterIndex, letter: str) -> FrozenSet[str]:
    """Words indexed under `letter`; empty when the letter is absent."""
    return index.get(letter, _EMPTY)
