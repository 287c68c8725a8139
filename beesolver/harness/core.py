"""
Solve/benchmark harness primitives.

- solve_puzzle:  normalize a raw Puzzle and solve it with one solver.
- time_solver:   solve the same puzzle `repeats` times and summarize timings.
- run_solvers:   build and time several registered solvers on one puzzle.
- results_agree: every solver must return the same word -> points mapping.

These functions are UI-agnostic so they can be reused by the CLI apps,
a notebook, or tests without changes. They print nothing.
"""

from __future__ import annotations
import argparse
import time
from typing import Dict, Iterable, List, Tuple

import numpy as np

from beesolver.engine import NormalizedPuzzle, Puzzle, PuzzleResult, normalize
from beesolver.solvers import create_solver


def _as_normalized(puzzle: Puzzle | NormalizedPuzzle) -> NormalizedPuzzle:
    if isinstance(puzzle, NormalizedPuzzle):
        return puzzle
    return normalize(puzzle)


def solve_puzzle(solver, puzzle: Puzzle | NormalizedPuzzle) -> PuzzleResult:
    """
    Normalize (raising InvalidPuzzle for a bad puzzle) and solve.
    An invalid puzzle never reaches the solver.
    """
    return solver.solve(_as_normalized(puzzle))


def positive_int(text: str) -> int:
    """argparse `type=` for counts that must be at least 1 (e.g. --repeats)."""
    try:
        n = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from e
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1; got {n}")
    return n


def _ms_since(t0: int) -> float:
    return (time.perf_counter_ns() - t0) / 1_000_000.0


def timing_stats(samples_ms: Iterable[float]) -> Dict[str, float]:
    arr = np.asarray(list(samples_ms), dtype=float)
    if arr.size == 0:
        return {"runs": 0, "min_ms": 0.0, "mean_ms": 0.0, "median_ms": 0.0, "std_ms": 0.0}
    return {
        "runs": int(arr.size),
        "min_ms": round(float(arr.min()), 3),
        "mean_ms": round(float(arr.mean()), 3),
        "median_ms": round(float(np.median(arr)), 3),
        "std_ms": round(float(arr.std()), 3),
    }


def time_solver(solver, puzzle: Puzzle | NormalizedPuzzle, *,
                repeats: int = 1) -> Tuple[PuzzleResult, Dict[str, float]]:
    """
    Solve `puzzle` `repeats` times with the same solver instance.

    Returns:
        (result of the last run, timing stats in milliseconds)
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1; got {repeats}")

    norm = _as_normalized(puzzle)
    samples: List[float] = []
    result = PuzzleResult()
    for _ in range(repeats):
        t0 = time.perf_counter_ns()
        result = solver.solve(norm)
        samples.append(_ms_since(t0))
    return result, timing_stats(samples)


def run_solvers(
        dictionary,
        puzzle: Puzzle | NormalizedPuzzle,
        solver_ids: Iterable[str],
        *,
        repeats: int = 1,
        **options,
) -> List[Dict]:
    """
    Build each solver (timed separately: index building is up-front cost)
    and time its solves on the same puzzle.

    Returns one dict per solver with keys:
        solver_id, build_ms, timing (see timing_stats), result (PuzzleResult)
    """
    norm = _as_normalized(puzzle)
    records: List[Dict] = []
    for sid in solver_ids:
        t0 = time.perf_counter_ns()
        solver = create_solver(sid, dictionary, **options)
        build_ms = _ms_since(t0)

        result, timing = time_solver(solver, norm, repeats=repeats)
        records.append({
            "solver_id": solver.id,
            "build_ms": round(build_ms, 3),
            "timing": timing,
            "result": result,
        })
    return records


def results_agree(records: List[Dict]) -> bool:
    """True iff every record's result equals the first one's (vacuously True if empty)."""
    if not records:
        return True
    first = records[0]["result"]
    return all(r["result"] == first for r in records[1:])
