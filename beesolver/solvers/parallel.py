"""
Thread-pool fan-out shared by the parallel solvers.

Scheme:
  - split the candidate words into contiguous chunks of `chunk_size`
  - each chunk is scored by one task into its own local dict
  - the caller merges the local dicts as tasks complete

Each word lands in exactly one chunk, so the local dicts have disjoint keys
and the merge gives the same mapping whatever order tasks finish in.
Workers only read the dictionary and puzzle; nothing shared is written
until the merge, which happens on the calling thread.
"""

from __future__ import annotations

import concurrent.futures
from typing import Dict, Iterable, List, Optional, Sequence

from beesolver.engine import NormalizedPuzzle
from .base import scan

DEFAULT_CHUNK_SIZE = 2048


def chunked(words: Iterable[str], size: int) -> List[Sequence[str]]:
    if size < 1:
        raise ValueError(f"chunk_size must be >= 1; got {size}")
    items = list(words)
    return [items[i:i + size] for i in range(0, len(items), size)]


def parallel_scan(
        words: Iterable[str],
        puzzle: NormalizedPuzzle,
        dictionary,
        *,
        max_workers: Optional[int] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Dict[str, int]:
    chunks = chunked(words, chunk_size)
    if not chunks:
        return {}

    out: Dict[str, int] = {}
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(scan, chunk, puzzle, dictionary) for chunk in chunks]
        for fut in concurrent.futures.as_completed(futures):
            out.update(fut.result())
    return out


class ParallelMixin:
    """
    Worker options and fan-out for the parallel solvers.
    Mix in ahead of BaseSolver: `class X(ParallelMixin, BaseSolver)`.
    """
    parallel = True

    def __init__(self, dictionary, *, max_workers: Optional[int] = None,
                 chunk_size: int = DEFAULT_CHUNK_SIZE):
        super().__init__(dictionary)
        self.max_workers = max_workers
        self.chunk_size = chunk_size

    def _parallel_scan(self, words: Iterable[str], puzzle: NormalizedPuzzle) -> Dict[str, int]:
        return parallel_scan(words, puzzle, self.dictionary,
                             max_workers=self.max_workers, chunk_size=self.chunk_size)
