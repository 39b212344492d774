"""
Game harness primitives.

- run_case:  play a single puzzle (one hidden answer) with a given solver.
- run_batch: play many puzzles in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

The harness owns the scoring side of the protocol: it scores each guess
against the hidden answer and hands the solver a GuessFeedback record. The
solver never sees the answer.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Tuple

from wordlesolver.config import MAX_TURNS, WORD_LENGTH
from wordlesolver.datasets.corpus import WordCorpus
from wordlesolver.engine import GuessFeedback, score, validate_guess
from wordlesolver.engine.errors import ExhaustedCandidatesError
from wordlesolver.engine.feedback import format_pattern, is_solved

logger = logging.getLogger(__name__)


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != MAX_TURNS:
        raise ValueError(f"max_turns must be {MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        corpus: WordCorpus,
        max_turns: int = MAX_TURNS,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:    a BaseSolver built on `corpus`
        answer:    the hidden word for this case
        corpus:    the word list guesses are checked against
        max_turns: must be 6 (Wordle rule; enforced)

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str),
            error (str, only when the game ended abnormally)
    """
    _assert_wordle_turns(max_turns)
    answer = answer.strip().lower()

    solver.reset()
    feedback = GuessFeedback.initial()
    history: List[Tuple[str, str]] = []
    guesses: List[str] = []
    error = None
    success = False

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        try:
            guess = solver.pick_next_guess(feedback)
        except ExhaustedCandidatesError as e:
            # Recoverable at this level: the game is simply lost.
            logger.warning("%s ran out of candidates on turn %d for %r", solver.id, turn, answer)
            error = str(e)
            break

        guesses.append(guess)
        if not validate_guess(guess, corpus, WORD_LENGTH):
            history.append((guess, ""))
            error = f"invalid guess {guess!r}"
            logger.warning("%s proposed %r, not in the word list", solver.id, guess)
            break

        statuses = score(guess, answer)
        history.append((guess, format_pattern(statuses)))

        if is_solved(statuses):
            success = True
            break

        feedback = GuessFeedback(
            word=guess,
            statuses=statuses,
            guess_number=turn,
            guesses=tuple(guesses),
        )

    dt = (time.perf_counter() - t0) * 1000.0
    result = {
        "success": success, "guesses": len(history), "time_ms": dt,
        "history": history, "answer": answer,
    }
    if error is not None:
        result["error"] = error
    return result


def run_batch(
        solver,
        answers: Iterable[str],
        *,
        corpus: WordCorpus,
        max_turns: int = MAX_TURNS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments.
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for ans in pool:
        r = run_case(solver, ans, corpus=corpus, max_turns=max_turns)
        r["solver_id"] = solver.id
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """Win rate and mean guesses over wins, for console output and manifests."""
    wins = [r for r in results if r["success"]]
    return {
        "games": len(results),
        "wins": len(wins),
        "win_rate": (len(wins) / len(results)) if results else 0.0,
        "mean_guesses": (sum(r["guesses"] for r in wins) / len(wins)) if wins else 0.0,
        "errors": sum(1 for r in results if "error" in r),
    }
