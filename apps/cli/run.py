# apps/cli/run.py
"""
CLI entry point for evaluating a solver over a word list.

This script:
  1) Validates the word list (prints counts + SHA, flags invalid/duplicate lines).
  2) Loads the corpus and instantiates the requested solver on it.
  3) Plays one game per answer with a live progress indicator and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, word list hash, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from wordlesolver.config import DEFAULT_CORPUS_PATH, MAX_TURNS, SolverConfig
from wordlesolver.datasets import load_corpus, pretty_summary, validate_corpus
from wordlesolver.engine.errors import CorpusError
from wordlesolver.harness import run_case, summarize
from wordlesolver.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from wordlesolver.solvers import create_solver, get_solver_ids

logger = logging.getLogger("wordlesolver.cli")


def _build_config(args) -> SolverConfig:
    if args.openings is None:
        return SolverConfig(early_exit_threshold=args.threshold)
    openings = tuple(w.strip().lower() for w in args.openings.split(",") if w.strip())
    return SolverConfig(openings=openings, early_exit_threshold=args.threshold)


def _choose_cases(words: List[str], sample: Optional[int], seed: int) -> List[str]:
    """Every word, or a deterministic sample without replacement."""
    if sample and sample < len(words):
        pool = list(words)
        random.Random(seed).shuffle(pool)
        return pool[:sample]
    return list(words)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, validate the word list, run the games with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordlesolver: evaluate a solver over a word list")
    ap.add_argument("--solver", default="fixed_opening",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default=str(DEFAULT_CORPUS_PATH),
                    help="path to the word list (one word per line)")
    ap.add_argument("--openings", default=None,
                    help="comma-separated scripted opening guesses (default: spine,tardy,jumbo)")
    ap.add_argument("--threshold", type=int, default=SolverConfig().early_exit_threshold,
                    help="skip remaining openings once fewer candidates than this remain")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate the word list and print a one-liner summary
    rep = validate_corpus(args.words)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        logger.info("word list: %s", issue)

    # 2) Load corpus (fatal if missing/empty) and build the solver
    try:
        corpus = load_corpus(args.words)
    except CorpusError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    try:
        config = _build_config(args)
        solver = create_solver(args.solver, corpus, config)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    cases = _choose_cases(list(corpus), args.sample, args.seed)
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Solving", unit="game") if mode == "bar" else cases

    # 3) Play every case
    for idx, ans in enumerate(iterator, 1):
        r = run_case(solver, ans, corpus=corpus, max_turns=MAX_TURNS)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 4) Write outputs (CSV + manifest)
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, csv_path, max_turns=MAX_TURNS)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "solver_config": {"openings": list(config.openings),
                          "early_exit_threshold": config.early_exit_threshold},
        "corpus": rep,
        "summary": summary,
        "solver_id": solver.id,
    }, manifest_path)

    print(f"{solver.id}: {summary['wins']}/{summary['games']} solved "
          f"({100.0 * summary['win_rate']:.1f}%), mean guesses {summary['mean_guesses']:.2f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
