"""
Word list validator.

What this module does:
- Validate the solver's word list (one word per line).
- Count raw lines, valid words (lowercase a-z, exact length N), duplicates
  and invalid lines; compute the SHA-256 of the raw file.
- Return a machine-readable dict (for run manifests) and a pretty one-line summary.

Unlike load_corpus, which silently normalizes, this reports what normalization
had to clean up so a bad list is visible before a long run.

Typical use:
    from wordlesolver.datasets import validate_corpus, pretty_summary
    rep = validate_corpus("wordlesolver/datasets/data/wordle.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple

from wordlesolver.config import WORD_LENGTH
from wordlesolver.engine.validation import is_word


@dataclass
class CorpusReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    N: int               # required word length
    exists: bool         # did the file exist on disk?
    lines: int           # raw line count
    count: int           # number of VALID words (before dedupe)
    unique_count: int    # unique valid words (what the solver will see)
    invalid_lines: int   # lines that normalization drops
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int, int]:
    """
    Returns (valid_words, invalid_count, line_count). Valid means the line,
    after trimming and lowercasing, is an N-letter a-z word; blank lines count
    as invalid.
    """
    valid: List[str] = []
    invalid = 0
    total = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            total += 1
            w = raw.strip().lower()
            if is_word(w, N):
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid, total


def validate_corpus(path: str | Path, N: int = WORD_LENGTH) -> Dict:
    """
    Validate the word list at `path`.

    Returns a JSON-serializable dict (see CorpusReport). `passed` is True when
    the file exists and holds at least one valid word; invalid and duplicate
    lines are reported in `issues` but do not fail the check, since the
    loader drops them.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(CorpusReport(str(path), N, False, 0, 0, 0, 0, "", False, issues))

    words, invalid, total = _load_and_check(p, N)
    unique = len(set(words))

    if not words:
        issues.append(f"word list contains 0 valid {N}-letter words")
    if invalid:
        issues.append(f"{invalid} invalid line(s) will be skipped")
    if unique != len(words):
        issues.append(f"{len(words) - unique} duplicate word(s) will be collapsed")

    rep = CorpusReport(
        path=str(p),
        N=N,
        exists=True,
        lines=total,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
