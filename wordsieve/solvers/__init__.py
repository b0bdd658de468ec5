from __future__ import annotations
from typing import List

from .base import BaseSolver, REGISTRY, register
from .config import (MAX_PERMUTATION_THRESHOLD, PRESETS, PartitionStrategy, Preset,
                     SolveConfig, resolve_config)

from . import remaining  # noqa: F401
from . import random_consistent  # noqa: F401


def create_solver(solver_id: str, config: SolveConfig | None = None, *,
                  workers: int = 1) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(config, workers=workers)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseSolver", "REGISTRY", "register", "create_solver", "get_solver_ids",
    "SolveConfig", "Preset", "PartitionStrategy", "PRESETS", "resolve_config",
    "MAX_PERMUTATION_THRESHOLD",
]
