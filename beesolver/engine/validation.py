"""
Guess rejection reasons and the cheap up-front checks.

A candidate word can be turned down for one of four reasons. These are
ordinary outcomes of scoring (most of a dictionary is rejected for any given
puzzle), so they are returned as values, never raised:

  - TOO_SHORT              : fewer than MIN_WORD_LENGTH letters
  - UNKNOWN_WORD           : not an exact member of the dictionary
  - DISALLOWED_LETTER(ch)  : uses a letter outside the puzzle (first one found)
  - MISSING_CENTER_LETTER  : never uses the center letter

This module answers the first two ("is it a real, long-enough word?");
the letter rules live with scoring because one scan does both.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MIN_WORD_LENGTH = 4


class RejectionKind(Enum):
    TOO_SHORT = "too_short"
    UNKNOWN_WORD = "unknown_word"
    DISALLOWED_LETTER = "disallowed_letter"
    MISSING_CENTER_LETTER = "missing_center_letter"


@dataclass(frozen=True)
class Rejection:
    kind: RejectionKind
    letter: Optional[str] = None  # only set for DISALLOWED_LETTER

    def __str__(self) -> str:
        if self.kind is RejectionKind.DISALLOWED_LETTER:
            return f"{self.kind.value}({self.letter})"
        return self.kind.value


TOO_SHORT = Rejection(RejectionKind.TOO_SHORT)
UNKNOWN_WORD = Rejection(RejectionKind.UNKNOWN_WORD)
MISSING_CENTER_LETTER = Rejection(RejectionKind.MISSING_CENTER_LETTER)


def disallowed_letter(letter: str) -> Rejection:
    return Rejection(RejectionKind.DISALLOWED_LETTER, letter)


def check_word(word: str, dictionary) -> Optional[Rejection]:
    """
    Return the rejection for `word` on length/membership grounds, or None.

    Args:
      word       : candidate, already uppercase
      dictionary : anything with a `words` set (see datasets.Dictionary)
    """
    if len(word) < MIN_WORD_LENGTH:
        return TOO_SHORT
    if word not in dictionary.words:
        return UNKNOWN_WORD
    return None
