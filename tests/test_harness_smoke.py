import argparse
import csv
import json
from pathlib import Path

import pytest

from beesolver.engine import InvalidPuzzle, Puzzle
from beesolver.harness import (
    format_result, results_agree, run_solvers, solve_puzzle, time_solver,
    write_csv, write_manifest,
)
from beesolver.harness.core import positive_int, timing_stats
from beesolver.solvers import create_solver, get_solver_ids


class _NeverCalled:
    def solve(self, puzzle):
        raise AssertionError("solver must not see an invalid puzzle")


def test_solve_puzzle_normalizes(dictionary, expected):
    solver = create_solver("brute_force", dictionary)
    assert solve_puzzle(solver, Puzzle("c", "altefi")) == expected


def test_invalid_puzzle_never_reaches_solver():
    with pytest.raises(InvalidPuzzle):
        solve_puzzle(_NeverCalled(), Puzzle("C", ["A", "C"]))


def test_time_solver(dictionary, puzzle, expected):
    solver = create_solver("letter_map", dictionary)
    result, timing = time_solver(solver, puzzle, repeats=3)
    assert result == expected
    assert timing["runs"] == 3
    assert 0.0 <= timing["min_ms"] <= timing["median_ms"]
    with pytest.raises(ValueError):
        time_solver(solver, puzzle, repeats=0)


def test_timing_stats():
    t = timing_stats([1.0, 2.0, 6.0])
    assert t == {"runs": 3, "min_ms": 1.0, "mean_ms": 3.0, "median_ms": 2.0,
                 "std_ms": round(float((14 / 3) ** 0.5), 3)}
    assert timing_stats([])["runs"] == 0


def test_run_solvers_agree(dictionary, expected):
    records = run_solvers(dictionary, Puzzle("C", "ALTEFI"), get_solver_ids(),
                          repeats=2, chunk_size=2)
    assert [r["solver_id"] for r in records] == get_solver_ids()
    assert results_agree(records)
    assert records[0]["result"] == expected
    assert all(r["build_ms"] >= 0 for r in records)


def test_results_agree_detects_mismatch():
    assert results_agree([])
    assert not results_agree([{"result": {"FACT": 1}}, {"result": {"FACT": 2}}])


def test_outputs(tmp_path: Path, dictionary, puzzle):
    result = create_solver("parallel_letter_map", dictionary).solve(puzzle)

    text = format_result(result, puzzle)
    assert "FELICITATE" in text and " *" in text
    assert text.splitlines()[-1] == "6 words | 27 points | 1 pangram(s)"
    assert "... 4 more" in format_result(result, puzzle, top=2)

    csv_path = write_csv(result, puzzle, str(tmp_path / "out" / "r.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 6
    assert rows[0] == {"word": "FELICITATE", "length": "10", "points": "14", "pangram": "True"}

    m_path = write_manifest({"num_words": len(result)}, str(tmp_path / "m.json"))
    assert json.loads(Path(m_path).read_text(encoding="utf-8")) == {"num_words": 6}


@pytest.mark.parametrize("value", ["0", "-3", "two"])
def test_repeats_below_one_rejected_by_argparse(value):
    ap = argparse.ArgumentParser()
    ap.add_argument("--repeats", type=positive_int, default=1)
    with pytest.raises(SystemExit):
        ap.parse_args(["--repeats", value])
    assert ap.parse_args(["--repeats", "3"]).repeats == 3
