from __future__ import annotations
from typing import Dict, Optional, Type

from wordlesolver.config import SolverConfig
from wordlesolver.datasets.corpus import WordCorpus
from wordlesolver.engine.feedback import GuessFeedback

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    One solving session. The corpus is shared and read-only; everything a
    solver learns during a game lives on the instance and is wiped by reset().
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, corpus: WordCorpus, config: Optional[SolverConfig] = None):
        self.corpus = corpus
        self.config = config or SolverConfig()

    def reset(self) -> None:
        raise NotImplementedError("Override in subclass")

    def pick_next_guess(self, feedback: GuessFeedback) -> str:
        raise NotImplementedError("Override in subclass")
