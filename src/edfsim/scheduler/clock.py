"""Time sources for the energy trace's time axis."""

import time


class LogicalClock:
    """
    Deterministic clock driven by simulated execution time.

    Elapsed time is the sum of the execution times the scheduler
    reports through advance().
    """

    def __init__(self):
        self.elapsed_seconds = 0.0

    def start(self) -> None:
        self.elapsed_seconds = 0.0

    def advance(self, seconds: float) -> None:
        self.elapsed_seconds += seconds

    def elapsed(self) -> float:
        return self.elapsed_seconds


class WallClock:
    """
    Real elapsed time since start(), read from time.monotonic().

    advance() is ignored: wall-clock time passes on its own.
    """

    def __init__(self, timer=time.monotonic):
        self._timer = timer
        self._start = timer()

    def start(self) -> None:
        self._start = self._timer()

    def advance(self, seconds: float) -> None:
        pass

    def elapsed(self) -> float:
        return self._timer() - self._start
