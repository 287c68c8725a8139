"""
Parallel letter-map solver.

Prunes to the center letter's bucket like letter_map, then splits that
bucket across a thread pool like parallel_brute_force.
"""

from __future__ import annotations

from beesolver.engine import NormalizedPuzzle, PuzzleResult
from beesolver.engine.letter_index import bucket, build_letter_index
from .base import BaseSolver, register
from .parallel import ParallelMixin


@register
class ParallelLetterMapSolver(ParallelMixin, BaseSolver):
    id = "parallel_letter_map"
    name = "Parallel Letter Map"
    version = "1.0.0"

    def __init__(self, dictionary, **options):
        super().__init__(dictionary, **options)
        self.index = build_letter_index(dictionary.words)

    def solve(self, puzzle: NormalizedPuzzle) -> PuzzleResult:
        candidates = bucket(self.index, puzzle.center)
        return PuzzleResult(self._parallel_scan(candidates, puzzle))
