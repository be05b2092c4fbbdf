"""Stopwatch measuring wall-clock intervals."""

from __future__ import annotations

import time as _clock


class Timer:
    """A stopwatch: elapsed time runs from start() until stop() or now."""

    __slots__ = ("_start_time", "_end_time", "_is_running")

    def __init__(self) -> None:
        self._start_time = 0.0
        self._end_time = 0.0
        self._is_running = False

    @property
    def is_running(self) -> bool:
        """True between start() and stop()."""
        return self._is_running

    def start(self) -> None:
        """Start (or restart) measuring."""
        self._start_time = _clock.perf_counter()
        self._is_running = True

    def stop(self) -> None:
        """Stop measuring; the elapsed time is frozen."""
        self._end_time = _clock.perf_counter()
        self._is_running = False

    def elapsed_seconds(self) -> float:
        """Seconds since start(), up to now or to stop()."""
        end = _clock.perf_counter() if self._is_running else self._end_time
        return end - self._start_time

    def elapsed_milliseconds(self) -> float:
        """Milliseconds since start(), up to now or to stop()."""
        return self.elapsed_seconds() * 1000.0