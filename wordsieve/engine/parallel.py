"""
Data-parallel helpers for the engine.

Work is split into contiguous shards, each shard is processed by a pure
function, and the partial results are returned in shard order so the caller
can reduce them at a single join point. No shared mutable state is involved.

workers <= 1 runs everything inline (the default, and what tests use mostly);
larger values fan shards out to a ProcessPoolExecutor. `fn` must then be a
module-level callable (or functools.partial of one) so it can be pickled.
"""

from __future__ import annotations
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def shard(items: Sequence[T], n: int) -> List[Sequence[T]]:
    """
    Split `items` into at most `n` contiguous, near-equal shards.
    Empty input -> no shards.
    """
    if n < 1:
        raise ValueError(f"shard count must be >= 1, got {n}")
    total = len(items)
    if total == 0:
        return []
    n = min(n, total)
    size, extra = divmod(total, n)
    out: List[Sequence[T]] = []
    start = 0
    for i in range(n):
        end = start + size + (1 if i < extra else 0)
        out.append(items[start:end])
        start = end
    return out


def map_shards(fn: Callable[[Sequence[T]], R], items: Sequence[T], workers: int = 1) -> List[R]:
    """Apply `fn` to each shard of `items`; results come back in shard order."""
    if workers <= 1 or len(items) < 2:
        return [fn(items)]
    shards = shard(items, workers)
    with ProcessPoolExecutor(max_workers=len(shards)) as executor:
        return list(executor.map(fn, shards))
