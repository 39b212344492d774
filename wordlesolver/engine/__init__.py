from .feedback import LetterStatus, GuessFeedback, score, parse_pattern, format_pattern
from .candidates import CandidateSet
from .constraints import filter_candidates, is_consistent
from .validation import validate_guess
from .errors import (SolverError, CorpusError, ProtocolError, MalformedFeedbackError,
                     ExhaustedCandidatesError)

__all__ = [
    "LetterStatus", "GuessFeedback", "score", "parse_pattern", "format_pattern",
    "CandidateSet", "filter_candidates", "is_consistent", "validate_guess",
    "SolverError", "CorpusError", "ProtocolError", "MalformedFeedbackError",
    "ExhaustedCandidatesError",
]
