"""Time source used by all of the timed-event types."""

import time
from typing import Callable

# A clock is any zero-argument function returning monotonic seconds.
Clock = Callable[[], float]


def monotonic() -> float:
    """Return the current monotonic time in seconds."""
    return time.monotonic()
