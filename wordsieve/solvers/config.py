"""
Solver/scoring configuration and named presets.

A SolveConfig fixes the linear blend used by the heuristic scorer and the
thresholds that decide when the solver pays for exhaustive partition scoring:

  - partition_threshold   : largest candidate set for which every candidate is
                            tried as a guess against every other (O(n^2)).
                            Above it the O(n) heuristic ranking is used.
  - permutation_threshold : hard cap on the number of guesses evaluated in
                            exhaustive mode; never above MAX_PERMUTATION_THRESHOLD.

Preset names coming from the outside are resolved once, here. Unknown names
fall back to DEFAULT_PRESET and log a warning.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional

log = logging.getLogger(__name__)

MAX_PERMUTATION_THRESHOLD = 200


class PartitionStrategy(str, Enum):
    MEAN = "mean"    # minimize expected remaining candidates
    WORST = "worst"  # minimize the largest feedback bucket (minimax)


class Preset(str, Enum):
    SIMPLE = "SIMPLE"
    OPTIMAL_MEAN = "OPTIMAL_MEAN"
    OPTIMAL_WORST = "OPTIMAL_WORST"


@dataclass(frozen=True)
class SolveConfig:
    name: str = Preset.OPTIMAL_MEAN.value
    right_location_multiplier: float = 4.0
    uniqueness_multiplier: float = 9.0
    viable_word_preference: float = 0.007
    partition_threshold: int = 50
    partition_strategy: PartitionStrategy = PartitionStrategy.MEAN
    permutation_threshold: int = MAX_PERMUTATION_THRESHOLD

    def __post_init__(self):
        if self.partition_threshold < 0:
            raise ValueError(f"partition_threshold must be >= 0, got {self.partition_threshold}")
        if not 0 <= self.permutation_threshold <= MAX_PERMUTATION_THRESHOLD:
            raise ValueError(f"permutation_threshold must be in [0, {MAX_PERMUTATION_THRESHOLD}], "
                             f"got {self.permutation_threshold}")

    def with_permutation_threshold(self, n: int) -> "SolveConfig":
        """Copy with the permutation budget clamped to [0, MAX_PERMUTATION_THRESHOLD]."""
        return replace(self, permutation_threshold=max(0, min(int(n), MAX_PERMUTATION_THRESHOLD)))


PRESETS: Dict[Preset, SolveConfig] = {
    # Heuristic only: never partitions.
    Preset.SIMPLE: SolveConfig(name=Preset.SIMPLE.value, partition_threshold=0),
    Preset.OPTIMAL_MEAN: SolveConfig(name=Preset.OPTIMAL_MEAN.value,
                                     partition_strategy=PartitionStrategy.MEAN),
    Preset.OPTIMAL_WORST: SolveConfig(name=Preset.OPTIMAL_WORST.value,
                                      partition_strategy=PartitionStrategy.WORST),
}

DEFAULT_PRESET = Preset.OPTIMAL_MEAN

TUNABLE_FIELDS = frozenset({
    "right_location_multiplier", "uniqueness_multiplier", "viable_word_preference",
    "partition_threshold", "partition_strategy",
})


def resolve_preset(name: str | Preset | None) -> Preset:
    if isinstance(name, Preset):
        return name
    if name is None or not name.strip():
        return DEFAULT_PRESET
    try:
        return Preset(name.strip().upper())
    except ValueError:
        pass
    log.warning("Unknown config preset %r, using %s", name, DEFAULT_PRESET.value)
    return DEFAULT_PRESET


def resolve_config(name: str | Preset | None,
                   permutation_threshold: Optional[int] = None,
                   **overrides) -> SolveConfig:
    """
    Map a preset name to a fully-populated SolveConfig.

    None or blank resolves to DEFAULT_PRESET; unknown names do too, with a
    logged warning (never raised).
    `permutation_threshold`, when given, is clamped to [0, 200].
    `overrides` replace individual tuning fields of the preset
    (right_location_multiplier, uniqueness_multiplier, viable_word_preference,
    partition_threshold, partition_strategy); None values are ignored.
    """
    config = PRESETS[resolve_preset(name)]
    given = {k: v for k, v in overrides.items() if v is not None}
    unknown = set(given) - TUNABLE_FIELDS
    if unknown:
        raise ValueError(f"Unknown config field(s): {sorted(unknown)}")
    if given:
        config = replace(config, **given)
    if permutation_threshold is not None:
        config = config.with_permutation_threshold(permutation_threshold)
    return config
