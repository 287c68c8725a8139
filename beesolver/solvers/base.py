from __future__ import annotations
from typing import Dict, Iterable, Type

from beesolver.engine import NormalizedPuzzle, PuzzleResult
from beesolver.engine.scoring import evaluate, is_accepted

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Interface every solving strategy implements ----
class BaseSolver:
    """
    A solver is built once per Dictionary (and may precompute an index
    there), then `solve` is called any number of times with different
    puzzles. Neither the dictionary nor any index is modified by `solve`.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"
    parallel = False  # accepts max_workers / chunk_size

    def __init__(self, dictionary):
        self.dictionary = dictionary

    def solve(self, puzzle: NormalizedPuzzle) -> PuzzleResult:
        raise NotImplementedError("Override in subclass")


def scan(words: Iterable[str], puzzle: NormalizedPuzzle, dictionary) -> Dict[str, int]:
    """
    Score every word in `words`; keep the accepted ones.
    Rejections are dropped silently (they're the common case).
    """
    out: Dict[str, int] = {}
    for w in words:
        outcome = evaluate(w, puzzle, dictionary)
        if is_accepted(outcome):
            out[w] = outcome
    return out
