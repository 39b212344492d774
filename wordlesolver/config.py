"""
Solver configuration.

Module constants are the single source of truth for the puzzle's shape;
SolverConfig carries the tunable parts of the fixed-opening policy and is
immutable so one instance can be shared by many solver sessions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

WORD_LENGTH = 5
MAX_TURNS = 6  # Wordle hard limit

DEFAULT_CORPUS_PATH = Path(__file__).resolve().parent / "datasets" / "data" / "wordle.txt"

# spine: common letters; tardy: complementary letters; jumbo: remaining vowels
DEFAULT_OPENINGS: Tuple[str, ...] = ("spine", "tardy", "jumbo")
DEFAULT_EARLY_EXIT_THRESHOLD = 4


@dataclass(frozen=True)
class SolverConfig:
    """
    Attributes:
        openings: scripted guesses for turns 1..len(openings).
        early_exit_threshold: from the second turn on, a scripted guess is
            skipped in favour of a candidate once fewer than this many remain.
        word_length: letters per word; openings and feedback are checked against it.
    """
    openings: Tuple[str, ...] = DEFAULT_OPENINGS
    early_exit_threshold: int = DEFAULT_EARLY_EXIT_THRESHOLD
    word_length: int = WORD_LENGTH

    def __post_init__(self):
        object.__setattr__(self, "openings", tuple(self.openings))
        if self.word_length < 1:
            raise ValueError(f"word_length must be >= 1; got {self.word_length}")
        for w in self.openings:
            if not (isinstance(w, str) and len(w) == self.word_length and w.isascii()
                    and w.isalpha() and w.islower()):
                raise ValueError(f"opening {w!r} must be {self.word_length} lowercase letters")
        if self.early_exit_threshold < 0:
            raise ValueError(f"early_exit_threshold must be >= 0; got {self.early_exit_threshold}")
