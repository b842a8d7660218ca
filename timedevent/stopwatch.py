"""Defines the Stopwatch class."""

from typing import Any, Optional

from .clock import Clock, monotonic
from .errors import StopwatchNotRun


class Stopwatch:
    """
    Stopwatch measures the time between two points.

    Call start(), then stop(), then read elapsed(). It may also be used as a
    context manager, in which case the enclosed block is timed:

        with Stopwatch() as watch:
            do_work()
        print(watch.elapsed())
    """

    # Time points from the clock; None until first recorded
    _start_time: Optional[float]
    _end_time: Optional[float]
    _running: bool

    def __init__(self, clock: Clock = monotonic) -> None:
        """
        Create a stopwatch that has not been started.

        Parameters:
            clock: Function returning the current monotonic time (seconds)

        """
        self._clock = clock
        self._start_time = None
        self._end_time = None
        self._running = False

    def start(self) -> None:
        """Record the current time as the start time."""
        self._start_time = self._clock()
        self._running = True

    def stop(self) -> None:
        """Record the current time as the end time."""
        self._end_time = self._clock()
        self._running = False

    def elapsed(self) -> float:
        """
        Get the time between the last start() and stop().

        Returns:
            The elapsed time in seconds.

        Raises:
            StopwatchNotRun: If the stopwatch has not been stopped since it
                was last started

        """
        if self._running or None in (self._start_time, self._end_time):
            raise StopwatchNotRun("stopwatch must be started and stopped "
                                  "before reading elapsed time")
        return self._end_time - self._start_time

    @property
    def start_time(self) -> Optional[float]:
        """Get the recorded start time."""
        return self._start_time

    @property
    def end_time(self) -> Optional[float]:
        """Get the recorded end time."""
        return self._end_time

    @property
    def running(self) -> bool:
        """Whether the stopwatch was started more recently than stopped."""
        return self._running

    def __enter__(self) -> 'Stopwatch':
        """Start timing a block."""
        self.start()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        """Stop timing a block."""
        self.stop()

    def __str__(self) -> str:
        """Return string representation of a Stopwatch."""
        if self._running or None in (self._start_time, self._end_time):
            return f"Stopwatch(start={self._start_time})"
        return f"Stopwatch(elapsed={self.elapsed()})"
