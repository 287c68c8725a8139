import pytest

from beesolver.datasets import Dictionary
from beesolver.engine import Puzzle, normalize

WORDS = [
    "GALACTIC", "ACTICAL", "FACT", "FELICITATE", "CAFE", "TACIT",
    "LATTE", "FIZZ", "FACETIAE", "ZEBRA", "QUIZ",
]

# Accepted words for center C, others A L T E F I
EXPECTED_CALTEFI = {
    "ACTICAL": 4,
    "FACT": 1,
    "FELICITATE": 14,  # pangram: 1 + 6 + 7
    "CAFE": 1,
    "TACIT": 2,
    "FACETIAE": 5,  # no L, so no bonus
}


@pytest.fixture
def dictionary():
    return Dictionary(frozenset(WORDS))


@pytest.fixture
def puzzle():
    return normalize(Puzzle("C", ["A", "L", "T", "E", "F", "I"]))


@pytest.fixture
def expected():
    return dict(EXPECTED_CALTEFI)
