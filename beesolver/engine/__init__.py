from .puzzle import InvalidPuzzle, NormalizedPuzzle, Puzzle, normalize
from .validation import MIN_WORD_LENGTH, Rejection, RejectionKind
from .scoring import PANGRAM_BONUS, evaluate, explain
from .letter_index import build_letter_index
from .result import PuzzleResult

__all__ = [
    "InvalidPuzzle", "NormalizedPuzzle", "Puzzle", "normalize",
    "MIN_WORD_LENGTH", "Rejection", "RejectionKind",
    "PANGRAM_BONUS", "evaluate", "explain",
    "build_letter_index", "PuzzleResult",
]
