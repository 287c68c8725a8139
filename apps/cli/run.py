# apps/cli/run.py
"""
CLI entry point for solving one Spelling Bee puzzle.

This script:
  1) Normalizes the puzzle (--center / --letters); a bad puzzle exits with the reason.
  2) Loads the dictionary (local word list via --dictionary, else downloads
     the public scrabble list), printing a one-line summary.
  3) Solves it with the requested solver and prints the ranked words.
  4) Optionally writes:
       - CSV:  one row per accepted word (word, length, points, pangram)
       - JSON: manifest with config, dictionary summary, timings, git commit

Usage:
    python -m apps.cli.run --center C --letters ALTEFI
    python -m apps.cli.run --dictionary data/scrabble_words.txt --solver letter_map --outdir reports
    python -m apps.cli.run --check FACT --check GALACTIC
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from beesolver.datasets import (
    WORD_LIST_URL,
    DictionaryError,
    fetch_dictionary,
    load_dictionary,
    pretty_summary,
    validate_wordlist,
)
from beesolver.engine import InvalidPuzzle, Puzzle, explain, normalize
from beesolver.engine.puzzle import parse_letters
from beesolver.harness import format_result, time_solver, write_csv, write_manifest
from beesolver.harness.core import positive_int
from beesolver.harness.io import git_commit_or_unknown, timestamp_id
from beesolver.solvers import create_solver, get_solver_ids

DEFAULT_CENTER = "C"
DEFAULT_LETTERS = "ALTEFI"


def _load_dictionary(args):
    """
    Local file if given (validated first), otherwise the download.
    Returns (dictionary, summary dict for the manifest).
    """
    t0 = time.perf_counter_ns()
    if args.dictionary:
        rep = validate_wordlist(args.dictionary)
        print(pretty_summary(rep))
        dictionary = load_dictionary(args.dictionary)
        source = {"path": args.dictionary, "report": rep}
    else:
        dictionary = fetch_dictionary(args.url)
        source = {"url": args.url}
    ms = (time.perf_counter_ns() - t0) / 1_000_000.0
    print(f"[timeit] 'load dictionary' took {ms:.1f}ms ({len(dictionary)} words)", file=sys.stderr)
    source["num_words"] = len(dictionary)
    return dictionary, source


def main():
    """
    Parse CLI args, load the dictionary, solve, print, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="beesolver — solve a Spelling Bee puzzle")
    ap.add_argument("--center", default=DEFAULT_CENTER, help="required center letter")
    ap.add_argument("--letters", default=DEFAULT_LETTERS,
                    help="the other permitted letters, e.g. ALTEFI or A,L,T,E,F,I")
    ap.add_argument("--solver", default="letter_map",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--dictionary", help="path to a word list (one uppercase word per line)")
    ap.add_argument("--url", default=WORD_LIST_URL,
                    help="word list URL used when --dictionary is not given")
    ap.add_argument("--workers", type=positive_int, help="thread count for parallel solvers")
    ap.add_argument("--repeats", type=positive_int, default=1, help="solve N times and report timings")
    ap.add_argument("--top", type=int, help="print only the N best words")
    ap.add_argument("--check", action="append", default=[], metavar="WORD",
                    help="explain the verdict for WORD (repeatable)")
    ap.add_argument("--outdir", help="directory for CSV + manifest (skipped if omitted)")
    args = ap.parse_args()

    # 1) Puzzle first: an invalid puzzle should fail before any download
    try:
        puzzle = normalize(Puzzle(args.center, parse_letters(args.letters)))
    except InvalidPuzzle as e:
        raise SystemExit(f"Invalid puzzle: {e}")

    if args.solver not in get_solver_ids():
        raise SystemExit(f"Unknown solver id: {args.solver}. Available: {solver_choices}")

    # 2) Dictionary
    try:
        dictionary, source = _load_dictionary(args)
    except DictionaryError as e:
        raise SystemExit(f"Could not load dictionary: {e} ({e.__cause__})")

    # 3) Solver (index building is timed apart from solving)
    t0 = time.perf_counter_ns()
    solver = create_solver(args.solver, dictionary, max_workers=args.workers)
    build_ms = (time.perf_counter_ns() - t0) / 1_000_000.0

    result, timing = time_solver(solver, puzzle, repeats=args.repeats)
    print(f"[timeit] '{solver.id}' build {build_ms:.1f}ms | solve "
          f"median {timing['median_ms']:.1f}ms over {timing['runs']} run(s)", file=sys.stderr)

    print(format_result(result, puzzle, top=args.top))
    for word in args.check:
        print(explain(word, puzzle, dictionary))

    # 4) Outputs
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)

        csv_path = outdir / f"solve_{run_id}.csv"
        manifest_path = outdir / f"solve_{run_id}_manifest.json"

        write_csv(result, puzzle, str(csv_path))
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "puzzle": {"center": puzzle.center, "others": sorted(puzzle.others)},
            "dictionary": source,
            "solvers": [{"solver_id": solver.id, "build_ms": round(build_ms, 3),
                         "timing": timing}],
            "num_words": len(result),
            "total_points": result.total_points(),
            "pangrams": result.pangrams(puzzle),
            "words": result.as_dict(),
        }
        write_manifest(manifest, str(manifest_path))

        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
