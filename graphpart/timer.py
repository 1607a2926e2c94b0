"""Wall-clock stopwatch."""

from __future__ import annotations

import time


class Timer:
    """Measures seconds elapsed since creation or the last restart."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def restart(self) -> None:
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since the timer was started, with a fractional part."""
        return time.perf_counter() - self._start