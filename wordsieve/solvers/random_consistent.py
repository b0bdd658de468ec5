"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with all facts so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - This is a baseline for benchmark runs; it ignores the scoring config.
"""

from __future__ import annotations

from typing import List

from ..engine.words import Word
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> Word:
        candidates: List[Word] = state["candidates"]
        return candidates[self.rng.randrange(len(candidates))]
