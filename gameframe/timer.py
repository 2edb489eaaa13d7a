"""Frame timers measuring the time between updates."""

from __future__ import annotations

import time
from typing import Callable

from gameframe.structs import EngineError


class Timer:
    """Measures the seconds elapsed between successive updates."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._last = clock()
        self.time_delta = 0.0

    def update(self) -> float:
        """Read the clock and return the time since the previous update."""
        now = self._clock()
        self.time_delta = now - self._last
        self._last = now
        return self.time_delta


class TimerManager:
    """Named timers."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._timers: dict[str, Timer] = {}

    def add_timer(self, tag: str) -> Timer:
        if tag in self._timers:
            raise EngineError(f"timer {tag!r} already exists")
        timer = self._timers[tag] = Timer(self._clock)
        return timer

    def compute_time_delta(self, tag: str) -> None:
        """Update the named timer; unknown names are ignored."""
        timer = self._timers.get(tag)
        if timer is not None:
            timer.update()

    def get_time_delta(self, tag: str) -> float:
        """Last delta of the named timer, or 0.0 for an unknown name."""
        timer = self._timers.get(tag)
        return 0.0 if timer is None else timer.time_delta