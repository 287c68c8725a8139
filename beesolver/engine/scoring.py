"""
Spelling Bee scoring for a single (word, puzzle) pair.

Rules, checked in this order (first failure wins):
  1) at least MIN_WORD_LENGTH letters
  2) exact dictionary member
  3) every letter is the center letter or one of the others
  4) the center letter appears at least once

Points (only for accepted words):
  - a 4-letter word is worth 1 point
  - every letter past the 4th earns 1 extra point
  - a pangram (uses every permitted letter at least once) earns PANGRAM_BONUS

    points = 1 + (len(word) - 4) + (7 if pangram else 0)

Rules 3 and 4 share one left-to-right scan, which is why an illegal letter is
reported even when the center letter is also missing.
"""

from __future__ import annotations

from typing import Set, Union

from .puzzle import NormalizedPuzzle
from .validation import (
    MIN_WORD_LENGTH,
    MISSING_CENTER_LETTER,
    Rejection,
    check_word,
    disallowed_letter,
)

PANGRAM_BONUS = 7

Points = int
Outcome = Union[Points, Rejection]


def points_for(length: int, is_pangram: bool) -> Points:
    return 1 + (length - MIN_WORD_LENGTH) + (PANGRAM_BONUS if is_pangram else 0)


def evaluate(word: str, puzzle: NormalizedPuzzle, dictionary) -> Outcome:
    """
    Score `word` for `puzzle`, or say why it is not allowed.

    Returns:
      int points on acceptance, otherwise a `Rejection` value.

    Examples (puzzle: center C, others A L T E F I):
      evaluate("FACT", ...)  -> 1
      evaluate("FIZZ", ...)  -> Rejection(DISALLOWED_LETTER, 'Z')
    """
    rejected = check_word(word, dictionary)
    if rejected is not None:
        return rejected

    center = puzzle.center
    others = puzzle.others
    center_count = 0
    used: Set[str] = set()

    for ch in word:
        if ch == center:
            center_count += 1
        elif ch not in others:
            return disallowed_letter(ch)
        used.add(ch)

    if center_count == 0:
        return MISSING_CENTER_LETTER

    return points_for(len(word), len(used) == puzzle.letter_count())


def is_accepted(outcome: Outcome) -> bool:
    return not isinstance(outcome, Rejection)


def is_pangram(word: str, puzzle: NormalizedPuzzle) -> bool:
    """True if `word` uses every permitted letter of `puzzle` at least once."""
    return set(word) >= puzzle.letters()


def explain(word: str, puzzle: NormalizedPuzzle, dictionary) -> str:
    """Human-readable verdict for one word, e.g. 'FACT: 1 point'."""
    word = word.strip().upper()
    outcome = evaluate(word, puzzle, dictionary)
    if isinstance(outcome, Rejection):
        return f"{word}: rejected ({outcome})"
    suffix = "" if outcome == 1 else "s"
    return f"{word}: {outcome} point{suffix}"
