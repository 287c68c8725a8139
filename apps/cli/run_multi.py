# apps/cli/run_multi.py
"""
Run multiple solvers on one puzzle with shared dictionary and progress.

Every solver must produce the same word -> points mapping; the run fails
(exit status 1) if any disagrees with the first.

Writes per-solver outputs to: <outdir>/<solver_id>/solve_<timestamp>.csv
and one <outdir>/solve_<timestamp>_manifest.json with all timings.
"""

from __future__ import annotations
import argparse, sys, time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from beesolver.datasets import (
    WORD_LIST_URL,
    DictionaryError,
    fetch_dictionary,
    load_dictionary,
    pretty_summary,
    validate_wordlist,
)
from beesolver.engine import InvalidPuzzle, Puzzle, normalize
from beesolver.engine.puzzle import parse_letters
from beesolver.harness import results_agree, run_solvers, write_csv, write_manifest
from beesolver.harness.core import positive_int
from beesolver.harness.io import git_commit_or_unknown, timestamp_id
from beesolver.solvers import get_solver_ids


def _load_dictionary(args):
    if args.dictionary:
        rep = validate_wordlist(args.dictionary)
        print(pretty_summary(rep))
        return load_dictionary(args.dictionary), {"path": args.dictionary, "report": rep}
    return fetch_dictionary(args.url), {"url": args.url}


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_all(todo: List[str], *, dictionary, puzzle, repeats: int, workers,
             progress: str) -> List[Dict]:
    mode = _progress_mode(progress)
    iterator = tqdm(todo, ncols=80, desc="solvers", unit="solver") if mode == "bar" else todo
    records: List[Dict] = []
    start = time.time()

    for idx, sid in enumerate(iterator, 1):
        rec = run_solvers(dictionary, puzzle, [sid], repeats=repeats, max_workers=workers)[0]
        records.append(rec)
        if mode == "plain":
            elapsed = time.time() - start
            sys.stderr.write(
                f"\r[{idx}/{len(todo)}] {sid:<22} | elapsed {elapsed:6.1f}s")
            sys.stderr.flush()
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    return records


def main():
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="beesolver — run many solvers on one puzzle")
    ap.add_argument("--solvers", nargs="+", default=["ALL"],
                    help=f"list of solver ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="solver ids to skip (only if --solvers ALL)")
    ap.add_argument("--center", default="C")
    ap.add_argument("--letters", default="ALTEFI")
    ap.add_argument("--dictionary")
    ap.add_argument("--url", default=WORD_LIST_URL)
    ap.add_argument("--workers", type=positive_int)
    ap.add_argument("--repeats", type=positive_int, default=5)
    ap.add_argument("--outdir")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    args = ap.parse_args()

    # 1) puzzle
    try:
        puzzle = normalize(Puzzle(args.center, parse_letters(args.letters)))
    except InvalidPuzzle as e:
        raise SystemExit(f"Invalid puzzle: {e}")

    # 2) expand solvers
    if len(args.solvers) == 1 and args.solvers[0].lower() == "all":
        todo = [s for s in registered if s not in set(args.exclude)]
    else:
        todo = args.solvers
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown solver ids: {missing}. Registered: {registered}")

    # 3) load dictionary once
    try:
        dictionary, source = _load_dictionary(args)
    except DictionaryError as e:
        raise SystemExit(f"Could not load dictionary: {e} ({e.__cause__})")
    source["num_words"] = len(dictionary)

    # 4) run every solver on the same puzzle
    records = _run_all(todo, dictionary=dictionary, puzzle=puzzle, repeats=args.repeats,
                       workers=args.workers, progress=args.progress)

    for r in records:
        t = r["timing"]
        print(f"{r['solver_id']:<22} build {r['build_ms']:9.1f}ms | solve median "
              f"{t['median_ms']:9.1f}ms (min {t['min_ms']:.1f}, n={t['runs']}) "
              f"| {len(r['result'])} words")

    agree = results_agree(records)
    print("results agree" if agree else "RESULTS DIFFER between solvers")

    # 5) outputs
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)
        for r in records:
            csv_path = write_csv(r["result"], puzzle,
                                 str(outdir / r["solver_id"] / f"solve_{run_id}.csv"))
            print(f"Wrote: {csv_path}")
        first = records[0]["result"] if records else None
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "puzzle": {"center": puzzle.center, "others": sorted(puzzle.others)},
            "dictionary": source,
            "solvers": [{k: v for k, v in r.items() if k != "result"} for r in records],
            "results_agree": agree,
            "num_words": len(first) if first is not None else 0,
            "total_points": first.total_points() if first is not None else 0,
        }
        manifest_path = write_manifest(manifest, str(outdir / f"solve_{run_id}_manifest.json"))
        print(f"Wrote: {manifest_path}")

    if not agree:
        sys.exit(1)


if __name__ == "__main__":
    main()
