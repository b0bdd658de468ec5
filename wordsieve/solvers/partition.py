"""
Exhaustive feedback-partition scoring.

For a guess g, the CURRENT candidates split into buckets by the feedback
pattern g would produce against each of them. With bucket sizes {c_i} over n
candidates:

    expected remaining  E[left | g] = (1/n) * sum_i c_i^2
    worst case                      = max_i c_i

MEAN minimizes sum c_i^2 (same ordering as E[left], exact in integers),
WORST minimizes the largest bucket. Each strategy breaks ties with the other
metric and then by word order, so the pick is deterministic.

This costs O(guesses * candidates) feedback computations; the solver only
calls it below its partition threshold and with a capped guess pool.
"""

from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass
from functools import partial
from typing import Dict, List, Optional, Sequence

from ..engine.feedback import feedback
from ..engine.parallel import map_shards
from ..engine.words import Word
from .config import PartitionStrategy


@dataclass(frozen=True)
class PartitionStats:
    guess: Word
    buckets: int   # number of distinct feedback patterns
    worst: int     # size of the largest bucket
    sum_sq: int    # sum of squared bucket sizes
    total: int     # number of candidates partitioned

    @property
    def expected_remaining(self) -> float:
        return self.sum_sq / self.total if self.total else 0.0


def partition_stats(guess: Word, candidates: Sequence[Word]) -> PartitionStats:
    buckets: Dict[str, int] = defaultdict(int)
    for ans in candidates:
        buckets[feedback(guess, ans)] += 1
    worst = max(buckets.values()) if buckets else 0
    sum_sq = sum(c * c for c in buckets.values())
    return PartitionStats(guess, len(buckets), worst, sum_sq, len(candidates))


def _stats_shard(guesses: Sequence[Word], candidates: Sequence[Word]) -> List[PartitionStats]:
    return [partition_stats(g, candidates) for g in guesses]


def _key(strategy: PartitionStrategy):
    if strategy is PartitionStrategy.WORST:
        return lambda s: (s.worst, s.sum_sq, s.guess.text)
    return lambda s: (s.sum_sq, s.worst, s.guess.text)


def best_partition_guess(guesses: Sequence[Word], candidates: Sequence[Word],
                         strategy: PartitionStrategy = PartitionStrategy.MEAN,
                         *, workers: int = 1) -> Optional[PartitionStats]:
    """
    Evaluate every guess against every candidate and return the stats of the
    best one under `strategy` (None if there are no guesses).
    """
    if not guesses:
        return None
    parts = map_shards(partial(_stats_shard, candidates=tuple(candidates)), guesses, workers)
    stats: List[PartitionStats] = [s for part in parts for s in part]
    return min(stats, key=_key(strategy))

