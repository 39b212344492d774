"""
Candidate filtering from a single guess's feedback.

Given:
  - the current CandidateSet
  - the word just guessed
  - its per-position LetterStatus sequence

Return:
  - a new CandidateSet holding exactly the candidates consistent with it.

Rules per position i (g = guess[i]):
  - CORRECT   : candidate[i] must be g
  - MISPLACED : candidate[i] must not be g, but g must occur in the candidate
  - UNUSED    : if g is CORRECT/MISPLACED at another position of the same guess,
                this occurrence only says "no extra copies", so containing g is
                not a reason to reject; otherwise the candidate must not contain g.

All positions must pass. Feedback is reported per letter occurrence, so a
letter guessed twice can be CORRECT once and UNUSED once; the UNUSED rule
above is what keeps such answers alive.
"""

from __future__ import annotations

from typing import Sequence, Set

from wordlesolver.config import WORD_LENGTH

from .candidates import CandidateSet
from .feedback import LetterStatus
from .validation import check_feedback_shape, is_word


def _credited_letters(guess: str, statuses: Sequence[LetterStatus]) -> Set[str]:
    """Letters of `guess` that are CORRECT or MISPLACED somewhere in it."""
    return {g for g, s in zip(guess, statuses) if s is not LetterStatus.UNUSED}


def _consistent(candidate: str, guess: str, statuses: Sequence[LetterStatus],
                credited: Set[str]) -> bool:
    for i, (g, s) in enumerate(zip(guess, statuses)):
        c = candidate[i]
        if s is LetterStatus.CORRECT:
            if c != g:
                return False
        elif s is LetterStatus.MISPLACED:
            if c == g or g not in candidate:
                return False
        elif g not in credited and g in candidate:
            # UNUSED, and no other occurrence of g earned credit in this guess.
            # A credited letter can only come from another position, since
            # this one is UNUSED.
            return False
    return True


def is_consistent(candidate: str, guess: str, statuses: Sequence[LetterStatus],
                  N: int = WORD_LENGTH) -> bool:
    """
    True if `candidate` survives the (guess, statuses) feedback.

    A candidate that is not an N-letter word is never consistent.
    Raises MalformedFeedbackError on a wrong-length guess/status sequence.
    """
    check_feedback_shape(guess, statuses, N)
    if not is_word(candidate, N):
        return False
    return _consistent(candidate, guess, statuses, _credited_letters(guess, statuses))


def filter_candidates(candidates: CandidateSet, guess: str,
                      statuses: Sequence[LetterStatus], N: int = WORD_LENGTH) -> CandidateSet:
    """
    Keep only the candidates consistent with one guess's feedback.

    Args:
      candidates : current CandidateSet (not modified)
      guess      : the word just guessed (N lowercase letters)
      statuses   : N LetterStatus values aligned with `guess`
      N          : word length (candidates come from a corpus of this length)

    Returns:
      New CandidateSet, order preserved.
    """
    check_feedback_shape(guess, statuses, N)
    credited = _credited_letters(guess, statuses)
    return candidates.filtered(lambda w: is_word(w, N) and _consistent(w, guess, statuses, credited))
