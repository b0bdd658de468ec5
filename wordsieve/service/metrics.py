"""
Request counting for the calling layer.

The counter is an injected object, not module state: each WordService owns
one, and tests pass a fake clock. It logs the running total and hourly rate
on the first request, every `log_every` requests, and whenever
`log_interval` has passed since the last report.
"""

from __future__ import annotations
import logging
import threading
from datetime import datetime, timedelta
from typing import Callable

log = logging.getLogger(__name__)


class RequestCounter:
    def __init__(self, *, clock: Callable[[], datetime] = datetime.now,
                 log_every: int = 1000,
                 log_interval: timedelta = timedelta(minutes=30)):
        self.clock = clock
        self.log_every = log_every
        self.log_interval = log_interval
        self.count = 0
        self.reports = 0
        self.started = clock()
        self._last_report = self.started
        self._lock = threading.Lock()

    def requests_per_hour(self, now: datetime | None = None) -> float:
        now = now if now is not None else self.clock()
        hours = (now - self.started).total_seconds() / 3600.0
        return self.count / hours if hours > 0 else 0.0

    def record(self) -> int:
        """Count one request; returns the new total."""
        with self._lock:
            now = self.clock()
            due = (self.count % self.log_every == 0
                   or now - self._last_report >= self.log_interval)
            self.count += 1
            if due:
                self.reports += 1
                self._last_report = now
                log.info("%d requests made since %s (%.1f per hour)",
                         self.count, self.started.isoformat(timespec="seconds"),
                         self.requests_per_hour(now))
            return self.count
