from __future__ import annotations
from typing import List, Optional

from wordlesolver.config import SolverConfig
from wordlesolver.datasets.corpus import WordCorpus

from .base import BaseSolver, REGISTRY, register

from . import fixed_opening  # noqa: F401


def create_solver(solver_id: str, corpus: WordCorpus,
                  config: Optional[SolverConfig] = None) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(corpus, config)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
