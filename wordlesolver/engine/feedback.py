"""
Feedback model and Wordle-style scoring for a single (guess, answer) pair.

Conventions (pattern symbols, used in logs, CSVs and test fixtures):
  - 'G' : LetterStatus.CORRECT   = correct letter in the correct position
  - 'Y' : LetterStatus.MISPLACED = letter present elsewhere in the answer
  - '-' : LetterStatus.UNUSED    = letter absent (or present fewer times than guessed)

Scoring is the canonical two-pass algorithm:
  1) First pass marks all greens and counts the unmatched answer letters.
  2) Second pass marks yellows only while the letter still has remaining count.
"""

from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Tuple


class LetterStatus(enum.Enum):
    CORRECT = "G"
    MISPLACED = "Y"
    UNUSED = "-"

    @property
    def symbol(self) -> str:
        return self.value


Statuses = Tuple[LetterStatus, ...]


def parse_pattern(pattern: str) -> Statuses:
    """
    Convert a pattern string such as "GY--G" into a tuple of statuses.
    Raises ValueError on any symbol other than 'G', 'Y' or '-'.
    """
    try:
        return tuple(LetterStatus(ch) for ch in pattern.strip().upper())
    except ValueError as e:
        raise ValueError(f"Bad pattern {pattern!r}: use only 'G', 'Y', '-'") from e


def format_pattern(statuses: Iterable[LetterStatus]) -> str:
    return "".join(s.symbol for s in statuses)


@dataclass(frozen=True)
class GuessFeedback:
    """
    Result of scoring one guess, as handed to a solver.

    Fields:
      word         : the guess just scored ("" before the first guess)
      statuses     : per-position statuses aligned with `word`
      guess_number : running count of guesses made so far (0 before the first)
      guesses      : every guess made so far, oldest first
      is_valid     : False when the record does not describe a real scored guess
    """
    word: str
    statuses: Statuses
    guess_number: int
    guesses: Tuple[str, ...]
    is_valid: bool = True

    @classmethod
    def initial(cls) -> "GuessFeedback":
        """The record a solver receives before its first guess."""
        return cls(word="", statuses=(), guess_number=0, guesses=())

    @classmethod
    def invalid(cls, word: str, guesses: Iterable[str] = ()) -> "GuessFeedback":
        g = tuple(guesses)
        return cls(word=word, statuses=(), guess_number=len(g), guesses=g, is_valid=False)

    @property
    def pattern(self) -> str:
        return format_pattern(self.statuses)


def score(guess: str, answer: str) -> Statuses:
    """
    Compute the feedback statuses for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      format_pattern(score("belle", "level")) -> "-GYYY"
      format_pattern(score("lemon", "level")) -> "GG---"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"Guess and answer must be the same length: {guess!r} vs {answer!r}")

    out = [LetterStatus.UNUSED] * len(guess)

    # Pass 1: greens, and leftover answer letters for pass 2
    remaining: Counter[str] = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            out[i] = LetterStatus.CORRECT
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the answer's true multiplicity
    for i, g in enumerate(guess):
        if out[i] is LetterStatus.CORRECT:
            continue
        if remaining[g] > 0:
            out[i] = LetterStatus.MISPLACED
            remaining[g] -= 1

    return tuple(out)


def is_solved(statuses: Iterable[LetterStatus]) -> bool:
    s = tuple(statuses)
    return bool(s) and all(x is LetterStatus.CORRECT for x in s)
