"""Elapsed-time measurement since creation and since the last update."""

from __future__ import annotations

import time
from typing import Callable

_NANO_PER_MICRO = 1_000
_NANO_PER_MILLI = 1_000_000
_NANO_PER_SECOND = 1_000_000_000


class Timer:
    """Measures time since creation and since the last update.

    ``clock`` returns a monotonic time in integer nanoseconds.
    """

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        now = clock()
        self._start = now
        self._last_update = now

    def update(self) -> None:
        """Restart the delta measurement from now."""
        self._last_update = self._clock()

    def delta_nano(self, update: bool = True) -> float:
        """Nanoseconds since the last update; restarts the delta if ``update``."""
        now = self._clock()
        delta = now - self._last_update
        if update:
            self._last_update = now
        return float(delta)

    def delta_micro(self, update: bool = True) -> float:
        """Microseconds since the last update."""
        return self.delta_nano(update) / _NANO_PER_MICRO

    def delta_milli(self, update: bool = True) -> float:
        """Milliseconds since the last update."""
        return self.delta_nano(update) / _NANO_PER_MILLI

    def delta_second(self, update: bool = True) -> float:
        """Seconds since the last update."""
        return self.delta_nano(update) / _NANO_PER_SECOND

    def life_nano(self) -> float:
        """Nanoseconds since the timer was created."""
        return float(self._clock() - self._start)

    def life_micro(self) -> float:
        """Microseconds since the timer was created."""
        return self.life_nano() / _NANO_PER_MICRO

    def life_milli(self) -> float:
        """Milliseconds since the timer was created."""
        return self.life_nano() / _NANO_PER_MILLI

    def life_second(self) -> float:
        """Seconds since the timer was created."""
        return self.life_nano() / _NANO_PER_SECOND