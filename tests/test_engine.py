import pytest
from beesolver.datasets import Dictionary
from beesolver.engine import (
    InvalidPuzzle, Puzzle, PuzzleResult, Rejection, RejectionKind,
    build_letter_index, evaluate, explain, normalize,
)
from beesolver.engine.letter_index import bucket
from beesolver.engine.puzzle import parse_letters
from beesolver.engine.scoring import is_accepted, is_pangram, points_for



# --- puzzle normalization ---
def test_normalize_merges_duplicates_and_upcases():
    p = normalize(Puzzle("c", ["a", "L", "A", "l"]))
    assert p.center == "C"
    assert p.others == frozenset({"A", "L"})
    assert p.letter_count() == 3
    assert p.letters() == frozenset({"A", "C", "L"})

@pytest.mark.parametrize("center,others", [
    ("C", ["A", "C"]),
    ("C", ["A", "c"]),
    ("C", "ALTEFIC"),
])
def test_center_in_others_is_invalid(center, others):
    with pytest.raises(InvalidPuzzle):
        normalize(Puzzle(center, others))

@pytest.mark.parametrize("center,others", [
    ("CA", ["L"]),
    ("C", ["1"]),
    ("", ["A"]),
    ("ß", "ALTEFI"),
    ("C", ["ß", "S"]),
    ("É", ["A"]),
])
def test_non_letters_are_invalid(center, others):
    with pytest.raises(InvalidPuzzle):
        normalize(Puzzle(center, others))

def test_invalid_puzzle_is_value_error():
    assert issubclass(InvalidPuzzle, ValueError)

def test_parse_letters():
    assert list(parse_letters("A,L T EF")) == ["A", "L", "T", "E", "F"]


# --- scoring rules ---
@pytest.mark.parametrize("word,expected", [
    ("FACT", 1),
    ("CAFE", 1),
    ("TACIT", 2),
    ("ACTICAL", 4),
    ("FACETIAE", 5),
    ("FELICITATE", 14),
])
def test_evaluate_accepts(dictionary, puzzle, word, expected):
    assert evaluate(word, puzzle, dictionary) == expected

@pytest.mark.parametrize("word,kind,letter", [
    ("GALACTIC", RejectionKind.DISALLOWED_LETTER, "G"),
    ("FIZZ", RejectionKind.DISALLOWED_LETTER, "Z"),
    ("LATTE", RejectionKind.MISSING_CENTER_LETTER, None),
    ("FACTS", RejectionKind.UNKNOWN_WORD, None),
    ("ACT", RejectionKind.TOO_SHORT, None),
])
def test_evaluate_rejects(dictionary, puzzle, word, kind, letter):
    out = evaluate(word, puzzle, dictionary)
    assert isinstance(out, Rejection)
    assert out.kind is kind and out.letter == letter

def test_too_short_wins_even_for_dictionary_members(puzzle):
    d = Dictionary(frozenset({"ACT", "FACT"}))
    assert evaluate("ACT", puzzle, d).kind is RejectionKind.TOO_SHORT

def test_illegal_letter_reported_before_missing_center(puzzle):
    d = Dictionary(frozenset({"LATHE"}))
    out = evaluate("LATHE", puzzle, d)
    assert out.kind is RejectionKind.DISALLOWED_LETTER and out.letter == "H"

def test_four_letter_pangram_scores_eight():
    d = Dictionary(frozenset({"FACT"}))
    p = normalize(Puzzle("A", ["C", "T", "F"]))
    assert evaluate("FACT", p, d) == 8

def test_one_letter_short_of_pangram_gets_no_bonus(dictionary, puzzle):
    assert not is_pangram("FACETIAE", puzzle)
    assert evaluate("FACETIAE", puzzle, dictionary) == points_for(8, False)

def test_points_formula():
    assert points_for(4, False) == 1
    assert points_for(4, True) == 8
    assert points_for(10, False) == 7
    assert points_for(10, True) == 14

def test_accepted_words_are_long_dictionary_members(dictionary, puzzle):
    for w in sorted(dictionary.words) + ["ACT", "FACTS", "CAFES"]:
        out = evaluate(w, puzzle, dictionary)
        if not isinstance(out, Rejection):
            assert len(w) >= 4 and w in dictionary.words

def test_explain(dictionary, puzzle):
    assert explain("fact", puzzle, dictionary) == "FACT: 1 point"
    assert explain("FELICITATE", puzzle, dictionary) == "FELICITATE: 14 points"
    assert explain("FIZZ", puzzle, dictionary) == "FIZZ: rejected (disallowed_letter(Z))"
    assert explain("LATTE", puzzle, dictionary) == "LATTE: rejected (missing_center_letter)"


# --- letter index ---
def test_letter_index_buckets():
    idx = build_letter_index(["FACT", "CAFE", "QUIZ"])
    assert idx["F"] == frozenset({"FACT", "CAFE"})
    assert idx["T"] == frozenset({"FACT"})
    assert bucket(idx, "X") == frozenset()
    assert bucket(idx, "Z") == frozenset({"QUIZ"})


# --- result ---
def test_puzzle_result_mapping(puzzle):
    r = PuzzleResult({"FACT": 1, "FELICITATE": 14, "TACIT": 2})
    assert len(r) == 3 and r["FACT"] == 1
    assert r.total_points() == 17
    assert r.ranked() == [("FELICITATE", 14), ("TACIT", 2), ("FACT", 1)]
    assert r.pangrams(puzzle) == ["FELICITATE"]
    assert r == {"FACT": 1, "FELICITATE": 14, "TACIT": 2}
    assert r != PuzzleResult({"FACT": 1})
    assert PuzzleResult() == {}

def test_puzzle_result_as_dict_is_a_copy():
    r = PuzzleResult({"FACT": 1})
    d = r.as_dict()
    assert type(d) is dict and d == {"FACT": 1}
    d["CAFE"] = 1
    assert "CAFE" not in r

def test_is_accepted(dictionary, puzzle):
    assert is_accepted(evaluate("FACT", puzzle, dictionary))
    assert not is_accepted(evaluate("LATTE", puzzle, dictionary))
