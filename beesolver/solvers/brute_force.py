"""
Brute-force solver.

Strategy:
  - Score every word in the dictionary against the puzzle.
  - Keep the accepted (word, points) pairs.

Notes:
  - No precomputation; construction is free.
  - Cost is O(dictionary size x average word length) per solve.
  - This is the reference the other solvers must agree with.
"""

from __future__ import annotations

from beesolver.engine import NormalizedPuzzle, PuzzleResult
from .base import BaseSolver, register, scan


@register
class BruteForceSolver(BaseSolver):
    id = "brute_force"
    name = "Brute Force"
    version = "1.0.0"

    def solve(self, puzzle: NormalizedPuzzle) -> PuzzleResult:
        return PuzzleResult(scan(self.dictionary.words, puzzle, self.dictionary))
