"""
Lightweight guess and feedback validation.

Two questions are answered here:
  - validate_guess: "Is this word an acceptable guess right now?"
    A guess is valid iff it is a string of exactly N letters a-z and it exists
    in the provided `allowed` collection.
  - check_feedback_shape: "Can this (guess, statuses) pair be filtered on?"
    Anything else is a contract violation and raises MalformedFeedbackError,
    since filtering on a bad record would corrupt every later turn.
"""

from __future__ import annotations

from typing import Collection, Sequence

from .errors import MalformedFeedbackError
from .feedback import LetterStatus


def is_word(word: object, N: int) -> bool:
    """True for a lowercase a-z string of length N."""
    return (
        isinstance(word, str)
        and len(word) == N
        and word.isascii()
        and word.isalpha()
        and word.islower()
    )


def validate_guess(word: str, allowed: Collection[str], N: int) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Notes:
      - `allowed` is used for membership only; pass a set or a WordCorpus
        (which keeps its own set) to avoid linear scans in the harness loop.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if not is_word(w, N):
        return False
    return w in allowed


def check_feedback_shape(guess: str, statuses: Sequence[LetterStatus], N: int) -> None:
    """Raise MalformedFeedbackError unless `guess`/`statuses` describe one scored N-letter guess."""
    if not is_word(guess, N):
        raise MalformedFeedbackError(f"guess must be {N} lowercase letters; got {guess!r}")
    if len(statuses) != N:
        raise MalformedFeedbackError(
            f"expected {N} statuses for {guess!r}; got {len(statuses)}")
    bad = [s for s in statuses if not isinstance(s, LetterStatus)]
    if bad:
        raise MalformedFeedbackError(f"unknown status value(s): {bad!r}")
