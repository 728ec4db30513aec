"""
Timer Schedulers

Playback is driven by callbacks scheduled after a delay rather than by
sleeping in a loop, so the same sequencer runs on real timers or on a
virtual clock.
"""

import heapq
import itertools
import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class Scheduler:
    """Schedules a callback to run once after a delay in seconds."""

    def call_later(self, delay: float, callback: Callable[[], None]):
        raise NotImplementedError

    def cancel(self, handle) -> None:
        raise NotImplementedError


class ThreadingScheduler(Scheduler):
    """Real-time scheduler backed by daemon ``threading.Timer`` objects."""

    def call_later(self, delay, callback):
        timer = threading.Timer(max(delay, 0.0), callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle):
        if handle is not None:
            handle.cancel()


class ManualScheduler(Scheduler):
    """
    Virtual clock scheduler.

    Nothing runs until ``advance`` is called; due callbacks then fire in
    time order (ties in scheduling order). Callbacks may schedule more
    work, which fires within the same ``advance`` if it falls due.
    """

    def __init__(self):
        self._now = 0.0
        self._queue = []
        self._counter = itertools.count()
        self._cancelled = set()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return sum(1 for _, seq, _ in self._queue if seq not in self._cancelled)

    def call_later(self, delay, callback):
        seq = next(self._counter)
        heapq.heappush(self._queue, (self._now + max(delay, 0.0), seq, callback))
        return seq

    def cancel(self, handle):
        if handle is not None:
            self._cancelled.add(handle)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every callback that falls due."""
        deadline = self._now + seconds
        while self._queue and self._queue[0][0] <= deadline:
            due, seq, callback = heapq.heappop(self._queue)
            self._now = due
            if seq in self._cancelled:
                self._cancelled.discard(seq)
                continue
            callback()
        self._now = deadline

    def run_until_idle(self, limit: int = 10000) -> None:
        """Fire everything queued, including work scheduled along the way."""
        fired = 0
        while self._queue and fired < limit:
            due = self._queue[0][0]
            self.advance(due - self._now)
            fired += 1
