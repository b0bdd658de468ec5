"""
Remaining-candidates solver.

Policy per turn:
  - Small candidate set (<= config.partition_threshold): try every candidate
    as a guess against every candidate as a hypothetical answer and keep the
    one with the best feedback partition (expected or worst bucket size, per
    config.partition_strategy). The guess pool is the first
    config.permutation_threshold candidates in word order.
  - Large candidate set: exhaustive partitioning is O(n^2), so rank the
    candidates with the letter-frequency scorer instead and take the top word.

Guesses are always drawn from the candidates, so a wrong guess always rules
itself out on the next filter.
"""

from __future__ import annotations
import logging
from typing import List

from ..engine import build_frequency_model, rank_words
from ..engine.words import Word
from .base import BaseSolver, register
from .partition import best_partition_guess

log = logging.getLogger(__name__)


@register
class RemainingSolver(BaseSolver):
    id = "remaining"
    name = "Remaining Candidates (partition + frequency fallback)"
    version = "1.0.0"

    def _heuristic_guess(self, candidates: List[Word], state: dict) -> Word:
        model = build_frequency_model(candidates, state["constraints"], workers=self.workers)
        return rank_words(candidates, model, self.config, limit=1)[0].word

    def next_guess(self, state: dict) -> Word:
        candidates: List[Word] = state["candidates"]
        if len(candidates) == 1:
            return candidates[0]

        cfg = self.config
        if len(candidates) <= cfg.partition_threshold:
            pool = candidates[: cfg.permutation_threshold]
            if len(pool) < len(candidates):
                log.debug("Permutation budget: evaluating %d of %d candidate guesses",
                          len(pool), len(candidates))
            best = best_partition_guess(pool, candidates, cfg.partition_strategy,
                                        workers=self.workers)
            if best is not None:
                return best.guess

        return self._heuristic_guess(candidates, state)
