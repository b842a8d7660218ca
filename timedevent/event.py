"""Defines the DueEvent class."""

import logging

from .clock import Clock, monotonic
from .errors import NegativeWait

LOGGER = logging.getLogger(__name__)


class DueEvent:
    """
    DueEvent tracks whether it is time to act.

    The event becomes due once wait_time seconds have passed since it was
    started (at construction). The owner polls it, typically:

        if event.handle():
            do_stuff()

    A one-shot event (repeated=False) can be handled exactly once; afterwards
    it stays handled and handle() always returns False. A repeated event is
    never handled. Instead, each successful handle() restarts its timer from
    the current time, so the period drifts by however late the event was
    handled.
    """

    # Time at which the current wait period began
    _start_time: float
    # Seconds to wait after _start_time before the event is due
    _wait_time: float
    _repeated: bool
    _handled: bool

    def __init__(self, repeated: bool, wait_time: float,
                 clock: Clock = monotonic) -> None:
        """
        Create an event and start its timer.

        Parameters:
            repeated: Whether the event restarts after each handling
            wait_time: Time (seconds) until the event is due
            clock: Function returning the current monotonic time (seconds)

        Raises:
            NegativeWait: If wait_time is less than zero (or NaN)

        """
        if not wait_time >= 0:
            raise NegativeWait(wait_time)
        self._clock = clock
        self._repeated = repeated
        self._wait_time = wait_time
        self._handled = False
        self._start_time = clock()

    @property
    def start_time(self) -> float:
        """Get the time the current wait period began."""
        return self._start_time

    @property
    def wait_time(self) -> float:
        """Get the wait time for this event (seconds)."""
        return self._wait_time

    @property
    def repeated(self) -> bool:
        """Get whether this event repeats."""
        return self._repeated

    def lateness(self) -> float:
        """
        Get how late this event is.

        Returns:
            Seconds since the event became due. This is negative while the
            event is still waiting.

        """
        return (self._clock() - self._start_time) - self._wait_time

    def is_due(self) -> bool:
        """Return whether the wait time has passed."""
        return self.lateness() >= 0

    def is_handled(self) -> bool:
        """Return whether this (one-shot) event has been handled."""
        return self._handled

    def should_handle(self) -> bool:
        """Return whether a call to handle() would succeed right now."""
        return not self._handled and self.is_due()

    def handle(self) -> bool:
        """
        Handle the event if it is due.

        A repeated event restarts its timer. A one-shot event becomes handled.

        Returns:
            True if the event was handled by this call.

        """
        if not self.should_handle():
            return False
        if self._repeated:
            LOGGER.debug("restart: %s", self)
            self._start_time = self._clock()
        else:
            LOGGER.debug("handled: %s", self)
            self._handled = True
        return True

    def __str__(self) -> str:
        """Return string representation of a DueEvent."""
        kind = "repeated" if self._repeated else "one-shot"
        return f"{type(self).__name__}({kind}, wait={self._wait_time})"
