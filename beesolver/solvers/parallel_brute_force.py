"""
Parallel brute-force solver.

Same traversal as brute_force, split across a thread pool (see parallel.py).
Every word is scored by exactly one worker; per-worker results are merged
into one mapping.
"""

from __future__ import annotations

from beesolver.engine import NormalizedPuzzle, PuzzleResult
from .base import BaseSolver, register
from .parallel import ParallelMixin


@register
class ParallelBruteForceSolver(ParallelMixin, BaseSolver):
    id = "parallel_brute_force"
    name = "Parallel Brute Force"
    version = "1.0.0"

    def solve(self, puzzle: NormalizedPuzzle) -> PuzzleResult:
        return PuzzleResult(self._parallel_scan(self.dictionary.words, puzzle))
