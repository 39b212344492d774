"""
I/O utilities for solver runs.

Responsibilities:
- write_csv:      one row per game: outcome plus guess/pattern columns per turn.
- write_manifest: JSON manifest with config, word list report and summary.
- timestamp_id:   compact UTC run id for file names.
- git_commit_or_unknown: short commit hash for reproducibility.

Patterns are prefixed with an apostrophe so spreadsheet apps keep strings
like "-GYY-" as text instead of parsing them as formulas.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str | Path, max_turns: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Columns:
      solver, answer, success, guesses, time_ms, error,
      guess_1, patt_1, ..., guess_<max_turns>, patt_<max_turns>

    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "guesses", "time_ms", "error"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "error": r.get("error", ""),
            }
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                g, patt = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _excel_safe_pattern(patt)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str | Path) -> str:
    """
    Write the run manifest as JSON.

    Typical keys: run_id, git_commit, config (CLI args), corpus
    (validate_corpus report), summary (harness.summarize), solver_id.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """UTC timestamp suitable for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short git hash of the working tree, or 'unknown' outside a repo / without git."""
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
