"""
Guess selection policy.

Turn state machine, keyed by n = number of guesses already made:
  - n < len(openings): play the scripted opening openings[n], except that
    from the second turn on (n > 0) a nearly solved board (fewer than
    `early_exit_threshold` candidates) goes straight to the fallback pick.
  - otherwise: fallback pick.

With the default openings ("spine", "tardy", "jumbo") and threshold 4 this is:
  n=0 -> spine, n=1 -> tardy or pick, n=2 -> jumbo or pick, n>=3 -> pick.

The fallback pick is the first candidate in corpus order; it is removed from
the set so the same session never proposes it twice.
"""

from __future__ import annotations

import logging
from typing import Sequence

from wordlesolver.engine.candidates import CandidateSet

logger = logging.getLogger(__name__)


def fallback_pick(candidates: CandidateSet) -> str:
    """
    Take the first candidate and remove it from `candidates`.

    Raises ExhaustedCandidatesError when the set is empty.
    """
    choice = candidates.first()
    candidates.remove(choice)
    return choice


def select_guess(n: int, candidates: CandidateSet, openings: Sequence[str],
                 early_exit_threshold: int) -> str:
    """
    Choose the guess for the turn after `n` completed guesses.

    `candidates` must already reflect the feedback of guess n; it is mutated
    only when the fallback pick fires.
    """
    if n < 0:
        raise ValueError(f"guess count must be >= 0; got {n}")

    if n < len(openings):
        if n > 0 and len(candidates) < early_exit_threshold:
            logger.debug("turn %d: %d candidate(s) left, skipping opening %r",
                         n + 1, len(candidates), openings[n])
            return fallback_pick(candidates)
        return openings[n]

    return fallback_pick(candidates)
