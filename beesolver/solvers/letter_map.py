"""
Letter-map solver (indexed scan).

Idea:
  - At construction, bucket the dictionary by letter: letter -> words that
    contain it (engine.letter_index).
  - Every valid answer contains the center letter, so at solve time only the
    center letter's bucket needs scoring. The rest of the dictionary can't
    contain an answer.

Why it works:
  - A typical bucket is a fraction of the dictionary, so repeated solves
    against the same dictionary pay the indexing cost once.

Notes:
  - A center letter that no word contains gives an empty result, not an error.
"""

from __future__ import annotations

from beesolver.engine import NormalizedPuzzle, PuzzleResult
from beesolver.engine.letter_index import bucket, build_letter_index
from .base import BaseSolver, register, scan


@register
class LetterMapSolver(BaseSolver):
    id = "letter_map"
    name = "Letter Map"
    version = "1.0.0"

    def __init__(self, dictionary):
        super().__init__(dictionary)
        self.index = build_letter_index(dictionary.words)

    def solve(self, puzzle: NormalizedPuzzle) -> PuzzleResult:
        candidates = bucket(self.index, puzzle.center)
        return PuzzleResult(scan(candidates, puzzle, self.dictionary))
