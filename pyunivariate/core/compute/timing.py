"""
Wall-clock timing for backend solves.

Backends record one named section per statistic plus the shared setup
steps ('center', 'sort'); the totals end up in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total time of a solve plus per-section durations.

    A section entered more than once accumulates.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section `name`, even if it raises."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - start
            )

    def result(self) -> dict[str, float]:
        """
        Section durations keyed by name, plus 'total_seconds'.

        Raises:
            RuntimeError: If stop() has not been called
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """Yield a started Timer and stop it when the block exits."""
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
