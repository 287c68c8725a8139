"""
I/O utilities for solve runs.

Responsibilities:
- format_result:  plain-text listing of a result for the console.
- write_csv:      one row per accepted word (word, length, points, pangram).
- write_manifest: dump a JSON manifest with config, timings, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from beesolver.engine import NormalizedPuzzle, PuzzleResult
from beesolver.engine.scoring import is_pangram


def format_result(result: PuzzleResult, puzzle: NormalizedPuzzle, top: int | None = None) -> str:
    """
    Ranked listing, pangrams starred, followed by a totals line.

    Example:
        center=C others=AEFILT
          GALACTIC      12 *
          FACT           1
        2 words | 13 points | 1 pangram(s)
    """
    lines: List[str] = [f"center={puzzle.center} others={''.join(sorted(puzzle.others))}"]
    ranked = result.ranked()
    shown = ranked if top is None else ranked[:top]
    width = max((len(w) for w, _ in shown), default=4)
    for word, pts in shown:
        star = " *" if is_pangram(word, puzzle) else ""
        lines.append(f"  {word:<{width}}  {pts:>4}{star}")
    if len(shown) < len(ranked):
        lines.append(f"  ... {len(ranked) - len(shown)} more")
    lines.append(
        f"{len(result)} words | {result.total_points()} points "
        f"| {len(result.pangrams(puzzle))} pangram(s)"
    )
    return "\n".join(lines)


def write_csv(result: PuzzleResult, puzzle: NormalizedPuzzle, path: str) -> str:
    """
    Serialize a result to CSV, ranked (points desc, then word).

    Schema (columns):
      word, length, points, pangram

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["word", "length", "points", "pangram"]
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for word, pts in result.ranked():
            w.writerow({
                "word": word,
                "length": len(word),
                "points": pts,
                "pangram": is_pangram(word, puzzle),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver(s), letters, dictionary source, repeats)
      - dictionary: output of datasets.validate_wordlist(...) or a word count
      - solvers: per-solver build/solve timings
      - num_words, total_points
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
