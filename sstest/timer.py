"""A stopwatch for measuring time intervals in seconds."""

from __future__ import annotations

import time as _time
from collections.abc import Callable


class Stopwatch:
    """Measures elapsed time with a monotonic clock.

    Times are returned as float seconds. Once stopped, queries report the
    time up to the stop; calling ``start`` again begins afresh.
    """

    def __init__(self, clock: Callable[[], float] = _time.perf_counter) -> None:
        self._clock = clock
        self.reset()

    @property
    def running(self) -> bool:
        """True between ``start`` and ``stop``."""
        return self._running

    def reset(self) -> None:
        """Return to the idle state with every recorded point set to now."""
        now = self._clock()
        self._start_point = now
        self._last_lap_point = now
        self._stop_point = now
        self._running = False

    def start(self) -> None:
        """Mark now as the start time and begin running."""
        now = self._clock()
        self._start_point = now
        self._last_lap_point = now
        self._stop_point = now
        self._running = True

    def lap(self) -> float:
        """Time since the previous lap (or start); begins a new lap if running."""
        if self._running:
            now = self._clock()
            elapsed = now - self._last_lap_point
            self._last_lap_point = now
            return elapsed
        return self._stop_point - self._last_lap_point

    def split(self) -> float:
        """Time since the previous lap (or start), without starting a new lap."""
        if self._running:
            return self._clock() - self._last_lap_point
        return self._stop_point - self._last_lap_point

    def time(self) -> float:
        """Total time since start, up to now or up to the stop."""
        if self._running:
            return self._clock() - self._start_point
        return self._stop_point - self._start_point

    def stop(self) -> float:
        """Stop the stopwatch and return the total time."""
        if self._running:
            self._stop_point = self._clock()
        self._running = False
        return self.time()