"""
Error taxonomy for the solver.

  - CorpusError            : word list missing or unusable (startup, fatal)
  - ProtocolError          : solver called out of sequence or with invalid feedback
  - MalformedFeedbackError : feedback record has the wrong shape
  - ExhaustedCandidatesError: a pick was requested but no candidate survives
"""

from __future__ import annotations


class SolverError(Exception):
    """Base class for everything the solver raises on purpose."""


class CorpusError(SolverError):
    pass


class ProtocolError(SolverError):
    pass


class MalformedFeedbackError(SolverError, ValueError):
    pass


class ExhaustedCandidatesError(SolverError):
    """
    Raised when the candidate set is empty at pick time. Usually means the
    feedback fed to the solver does not match the hidden answer upstream.
    """
