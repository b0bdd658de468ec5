"""
Letter weights over the CURRENT candidate set.

Each candidate adds 1 to the weight of every DISTINCT letter it contains
(a word with two 'e's still counts 'e' once). That rewards guesses that split
the candidates by letter presence rather than by repeated occurrence.

Letters in `exclude_letters` are left out entirely. The ranking service passes
the already-required letters here to build "fishing" weights: a word that
re-confirms known letters learns nothing.

Accumulation is a sum of per-shard numpy vectors (one slot per letter), which
is associative and commutative, so shards can be counted in any order.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from functools import partial
from typing import Dict, FrozenSet, Iterable, Sequence

import numpy as np

from .constraints import ConstraintSet
from .parallel import map_shards
from .words import ALPHABET, Word

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


@dataclass(frozen=True)
class FrequencyModel:
    total_candidates: int
    letter_weight: Dict[str, int]
    constraints: ConstraintSet = field(default_factory=ConstraintSet)
    excluded_letters: FrozenSet[str] = frozenset()

    def weight(self, letter: str) -> int:
        return self.letter_weight.get(letter, 0)

    @property
    def total_weight(self) -> int:
        return sum(self.letter_weight.values())


def _count_shard(words: Sequence[Word], excluded: FrozenSet[str]) -> np.ndarray:
    counts = np.zeros(len(ALPHABET), dtype=np.int64)
    for w in words:
        for ch in w.letter_counts:
            if ch not in excluded:
                counts[_INDEX[ch]] += 1
    return counts


def build_frequency_model(candidates: Iterable[Word],
                          constraints: ConstraintSet | None = None,
                          exclude_letters: Iterable[str] = (),
                          *, workers: int = 1) -> FrequencyModel:
    """
    Count distinct-letter occurrences over `candidates`.

    Args:
      candidates      : the filtered candidate set
      constraints     : the ConstraintSet the candidates were filtered with
                        (kept on the model for scoring)
      exclude_letters : letters to leave out of the weights
      workers         : >1 counts shards in a process pool

    Returns:
      FrequencyModel with only non-zero weights in `letter_weight`.
    """
    pool = list(candidates)
    excluded = frozenset(exclude_letters)

    partials = map_shards(partial(_count_shard, excluded=excluded), pool, workers)
    totals = np.sum(partials, axis=0) if partials else np.zeros(len(ALPHABET), dtype=np.int64)

    weights = {ALPHABET[i]: int(c) for i, c in enumerate(totals) if c > 0}
    return FrequencyModel(
        total_candidates=len(pool),
        letter_weight=weights,
        constraints=constraints if constraints is not None else ConstraintSet(),
        excluded_letters=excluded,
    )
