"""Exceptions raised by the timed-event types."""


class Error(Exception):
    """Base class for exceptions from the timedevent package."""


class NegativeWait(Error, ValueError):
    """
    An event was constructed with a negative wait time.

    Such an event would be due forever, so it is refused.

    Attributes:
        wait_time: The rejected wait time (seconds)

    """

    def __init__(self, wait_time: float) -> None:
        """Create an exception for a rejected wait time."""
        self.wait_time = wait_time
        super().__init__(f"wait time must not be negative: {wait_time}")


class UnsetCallback(Error):
    """A CallbackEvent fired with no job installed."""


class StopwatchNotRun(Error):
    """Elapsed time was requested before the stopwatch was started and stopped."""
