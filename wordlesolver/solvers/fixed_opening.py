"""
Fixed-opening solver.

Strategy:
  - Turns 1-3 play scripted words chosen for letter coverage:
      spine (common letters), tardy (complementary letters), jumbo (vowels).
  - After every scored guess the candidate set is narrowed with the guess's
    feedback (see engine.constraints).
  - From turn 4 on, or earlier once fewer than 4 candidates remain, play the
    first remaining candidate in corpus order.

Notes:
  - Fully deterministic: the same corpus and feedback history always yield
    the same guesses.
  - The candidate set belongs to this instance; call reset() before every new
    puzzle.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from wordlesolver.config import SolverConfig
from wordlesolver.datasets.corpus import WordCorpus
from wordlesolver.engine.candidates import CandidateSet
from wordlesolver.engine.constraints import filter_candidates
from wordlesolver.engine.errors import MalformedFeedbackError, ProtocolError
from wordlesolver.engine.feedback import GuessFeedback

from .base import BaseSolver, register
from .selector import select_guess

logger = logging.getLogger(__name__)


@register
class FixedOpeningSolver(BaseSolver):
    id = "fixed_opening"
    name = "Fixed Opening + First Consistent"
    version = "1.0.0"

    def __init__(self, corpus: WordCorpus, config: Optional[SolverConfig] = None):
        super().__init__(corpus, config)
        self._candidates: Optional[CandidateSet] = None

    @property
    def candidates(self) -> List[str]:
        """Copy of the current candidates, in pick order."""
        if self._candidates is None:
            return []
        return self._candidates.to_list()

    def reset(self) -> None:
        """Forget everything learned so far; all corpus words are candidates again."""
        self._candidates = CandidateSet(self.corpus)

    def pick_next_guess(self, feedback: GuessFeedback) -> str:
        """
        Decide the next guess.

        Args:
            feedback: the scored result of the previous guess, or
                GuessFeedback.initial() before the first one.

        Returns:
            A single lowercase five-letter word.

        Raises:
            ProtocolError: feedback is flagged invalid, or reset() was never called.
            MalformedFeedbackError: feedback has the wrong shape.
            ExhaustedCandidatesError: a candidate is needed but none survive.
        """
        if not feedback.is_valid:
            raise ProtocolError("pick_next_guess shouldn't be called if previous result isn't valid")
        if self._candidates is None:
            raise ProtocolError("reset() must be called before the first pick_next_guess()")

        n = len(feedback.guesses)
        if n > 0:
            if feedback.guesses[-1] != feedback.word:
                raise MalformedFeedbackError(
                    f"feedback word {feedback.word!r} is not the last guess {feedback.guesses[-1]!r}")
            before = len(self._candidates)
            self._candidates = filter_candidates(self._candidates, feedback.word, feedback.statuses,
                                                 N=self.config.word_length)
            logger.debug("turn %d: %s %s -> %d/%d candidates", n, feedback.word,
                         feedback.pattern, len(self._candidates), before)

        return select_guess(n, self._candidates, self.config.openings,
                            self.config.early_exit_threshold)


@register
class FirstConsistentSolver(FixedOpeningSolver):
    """Baseline: no scripted openings, always the first remaining candidate."""
    id = "first_consistent"
    name = "First Consistent"
    version = "1.0.0"

    def __init__(self, corpus: WordCorpus, config: Optional[SolverConfig] = None):
        base = config or SolverConfig()
        super().__init__(corpus, SolverConfig(openings=(),
                                              early_exit_threshold=base.early_exit_threshold,
                                              word_length=base.word_length))
