from __future__ import annotations
import random
from typing import Dict, Type

from .config import SolveConfig, resolve_config

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
    A solver only chooses guesses. The solve loop (harness.core) owns the
    ConstraintSet, derives feedback and filters candidates between turns.

    `next_guess(state)` receives a dict with:
      - "turn"        : 1-based attempt number
      - "candidates"  : List[Word], current candidate set, sorted, non-empty
      - "constraints" : ConstraintSet the candidates were filtered with
      - "history"     : list of (guess_text, pattern) so far
      - "N"           : word length
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, config: SolveConfig | None = None, *, workers: int = 1):
        self.config: SolveConfig = config if config is not None else resolve_config(None)
        self.workers = int(workers)
        self.rng = random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict):
        raise NotImplementedError("Override in subclass")
