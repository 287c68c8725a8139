"""
Word-list validator for beesolver.

What this module does:
- Inspect a raw word list file (one word per line) before it becomes a Dictionary.
- Count how many lines survive the Dictionary filter and why the rest don't
  (blank, lowercase/mixed-case, non-letters, too short).
- Detect duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for run manifests) and a pretty one-line summary.

Typical use:
    from beesolver.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/scrabble_words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib
import re

from beesolver.engine.validation import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Per-file diagnostics and metadata."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    lines: int = 0         # raw line count
    count: int = 0         # lines that pass the Dictionary filter
    unique_count: int = 0  # distinct valid words
    blank_lines: int = 0
    not_uppercase: int = 0  # has lowercase letters (would be dropped, not upcased)
    non_alpha: int = 0      # digits, punctuation, inner spaces...
    too_short: int = 0      # uppercase A–Z but below MIN_WORD_LENGTH
    sha256: str = ""        # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

_ALPHA_RE = re.compile(r"^[A-Za-z]+$")


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _classify(rep: WordlistReport, path: Path) -> List[str]:
    """Walk the file once, bump the per-reason counters, return valid words."""
    valid: List[str] = []
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            rep.lines += 1
            w = raw.strip()
            if not w:
                rep.blank_lines += 1
            elif not _ALPHA_RE.match(w):
                rep.non_alpha += 1
            elif w != w.upper():
                rep.not_uppercase += 1
            elif len(w) < MIN_WORD_LENGTH:
                rep.too_short += 1
            else:
                valid.append(w)
    return valid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate a word list for use as a Dictionary.

    Returns
    -------
    Dict
        JSON-serializable WordlistReport. `passed` is True when the file
        exists and at least one word survives filtering; dropped lines are
        reported under `issues` but do not fail the check (the Dictionary
        loader drops them anyway).
    """
    p = Path(path)
    rep = WordlistReport(path=str(p), exists=p.exists())

    if not rep.exists:
        rep.issues.append(f"word list not found: {path}")
        return asdict(rep)

    valid = _classify(rep, p)
    rep.count = len(valid)
    rep.unique_count = len(set(valid))
    rep.sha256 = _sha256_file(p)

    if rep.count == 0:
        rep.issues.append("word list contains 0 valid words")
    if rep.count != rep.unique_count:
        rep.issues.append(f"{rep.count - rep.unique_count} duplicate word(s)")
    if rep.not_uppercase:
        rep.issues.append(f"{rep.not_uppercase} line(s) not uppercase")
    if rep.non_alpha:
        rep.issues.append(f"{rep.non_alpha} line(s) with non-letters")
    if rep.too_short:
        rep.issues.append(f"{rep.too_short} word(s) shorter than {MIN_WORD_LENGTH}")

    rep.passed = rep.count > 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=178691 (uniq=178691, sha=abc123...) | dropped: blank=0 case=0 alpha=0 short=1035 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| dropped: blank={report['blank_lines']} case={report['not_uppercase']} "
        f"alpha={report['non_alpha']} short={report['too_short']} | {status}"
    )
