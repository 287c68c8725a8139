"""
PuzzleResult: the accepted words of one solve and their points.

A read-only mapping word -> points. Only accepted words are present; a word
that was rejected has no entry at all. Order is not meaningful; use
`ranked()` for display.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Iterator, List, Tuple

from .puzzle import NormalizedPuzzle
from .scoring import is_pangram


class PuzzleResult(Mapping):
    __slots__ = ("_points",)

    def __init__(self, word_to_points: Dict[str, int] | None = None):
        self._points: Dict[str, int] = dict(word_to_points or {})

    def __getitem__(self, word: str) -> int:
        return self._points[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __eq__(self, other) -> bool:
        if isinstance(other, PuzzleResult):
            return self._points == other._points
        if isinstance(other, Mapping):
            return self._points == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"PuzzleResult({len(self)} words, {self.total_points()} points)"

    def total_points(self) -> int:
        return sum(self._points.values())

    def pangrams(self, puzzle: NormalizedPuzzle) -> List[str]:
        return sorted(w for w in self._points if is_pangram(w, puzzle))

    def ranked(self) -> List[Tuple[str, int]]:
        """(word, points) pairs: highest points first, then alphabetical."""
        return sorted(self._points.items(), key=lambda kv: (-kv[1], kv[0]))

    def as_dict(self) -> Dict[str, int]:
        return dict(self._points)
