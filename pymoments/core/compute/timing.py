"""
Wall-clock timing for describe().

describe() runs inside timed(); each statistic gets its own section, so
Result.timing reports the total alongside one entry per statistic.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named, accumulating sections.

    The total covers start() to stop(). Sections are measured
    independently and may nest inside the total; a section name used
    twice accumulates both durations.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the duration of the with-block to section `name`."""
        began = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - began
            self._sections[name] = self._sections.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        Timings in seconds: 'total_seconds' plus one key per section.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Start a Timer for the with-block and stop it on exit, even on error.

        with timed() as timer:
            with timer.section('median'):
                ...
        timer.result()
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
