"""
Content-addressed result cache owned by the calling layer.

Keys are hashable values describing the whole request (constraints, length,
dictionary id, result limit, config). Each key is computed at most once even
when several threads ask for it at the same time: the first caller computes,
the others wait on the per-key lock and then read the stored value.

Least recently used entries are evicted past `maxsize`.
"""

from __future__ import annotations
import threading
from collections import OrderedDict
from typing import Callable, Dict, Hashable, TypeVar

V = TypeVar("V")


class ResultCache:
    def __init__(self, maxsize: int = 1024):
        if maxsize < 1:
            raise ValueError(f"maxsize must be >= 1, got {maxsize}")
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._values: "OrderedDict[Hashable, object]" = OrderedDict()
        self._key_locks: Dict[Hashable, threading.Lock] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._values

    def _lookup(self, key: Hashable):
        # caller holds self._lock
        self._values.move_to_end(key)
        self.hits += 1
        return self._values[key]

    def get_or_compute(self, key: Hashable, compute: Callable[[], V]) -> V:
        with self._lock:
            if key in self._values:
                return self._lookup(key)
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            try:
                with self._lock:
                    if key in self._values:
                        return self._lookup(key)
                value = compute()
                with self._lock:
                    self.misses += 1
                    self._values[key] = value
                    while len(self._values) > self.maxsize:
                        self._values.popitem(last=False)
            finally:
                with self._lock:
                    self._key_locks.pop(key, None)
        return value

    def clear(self) -> None:
        with self._lock:
            self._values.clear()
            self.hits = self.misses = 0
