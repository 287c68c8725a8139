"""
Puzzle input and its normalized form.

A `Puzzle` is what the caller types in: one center letter plus the other
permitted letters, in any order, possibly with repeats. Solvers never see it
directly; they take a `NormalizedPuzzle`, which:
  - stores the non-center letters as a set (repeats are merged on purpose:
    listing 'A' twice is the same puzzle as listing it once)
  - guarantees the center letter is NOT among the non-center letters

The invariant is checked once, at construction, so scoring code can rely on it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Sequence, Tuple


class InvalidPuzzle(ValueError):
    """Raised when puzzle input cannot be normalized."""


@dataclass(frozen=True)
class Puzzle:
    """Raw puzzle as supplied by the caller (config, CLI, tests)."""
    center: str
    others: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence (list, str) but keep a hashable tuple internally
        object.__setattr__(self, "others", tuple(self.others))


@dataclass(frozen=True)
class NormalizedPuzzle:
    center: str
    others: FrozenSet[str]

    def __post_init__(self):
        if self.center in self.others:
            raise InvalidPuzzle("center letter may not be part of non center letters")

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle) -> "NormalizedPuzzle":
        center = _clean_letter(puzzle.center)
        others = [_clean_letter(ch) for ch in puzzle.others]
        return cls(center=center, others=frozenset(others))

    def letter_count(self) -> int:
        """Number of distinct permitted letters (pangram threshold)."""
        return len(self.others) + 1

    def letters(self) -> FrozenSet[str]:
        return self.others | {self.center}


def _clean_letter(ch: str) -> str:
    # upper() can widen a character ('ß' -> 'SS'), so check after it
    up = ch.upper() if isinstance(ch, str) else ""
    if len(up) != 1 or not ("A" <= up <= "Z"):
        raise InvalidPuzzle(f"not a single letter A-Z: {ch!r}")
    return up


def normalize(puzzle: Puzzle) -> NormalizedPuzzle:
    return NormalizedPuzzle.from_puzzle(puzzle)


def parse_letters(text: str) -> Sequence[str]:
    """
    Split CLI letter input into single letters.
    Accepts "ALTEFI", "A,L,T,E,F,I" or "A L T E F I".
    """
    return [ch for ch in text if not ch.isspace() and ch != ","]
