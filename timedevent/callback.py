"""Due events that run a function when handled."""

import logging
from typing import Callable, List, Optional

from .clock import Clock, monotonic
from .errors import UnsetCallback
from .event import DueEvent

LOGGER = logging.getLogger(__name__)

Job = Callable[[], None]


class CallbackEvent(DueEvent):
    """An event that calls a function each time it is handled."""

    # Held in a single element list: mypy rejects assigning to a function
    # attribute, and a bare function here would be bound as a method.
    _job: List[Optional[Job]]

    def __init__(self, callback: Optional[Job], repeated: bool,
                 wait_time: float, clock: Clock = monotonic) -> None:
        """
        Define an event that runs a function when it is handled.

        Parameters:
            callback: A function to call each time the event is handled. It
                may be None initially, but must be set before the event is
                first handled.
            repeated: Whether the event restarts after each handling
            wait_time: Time (seconds) until the event is due
            clock: Function returning the current monotonic time (seconds)

        """
        self._job = [callback]
        super().__init__(repeated=repeated, wait_time=wait_time, clock=clock)

    @property
    def job(self) -> Optional[Job]:
        """Get the function run when the event is handled."""
        return self._job[0]

    @job.setter
    def job(self, callback: Optional[Job]) -> None:
        """Set the function run when the event is handled."""
        self._job[0] = callback

    def handle(self) -> bool:
        """
        Handle the event and run its job if it is due.

        The event changes state before the job runs, so an exception from the
        job propagates to the caller with the event already handled (or
        restarted).

        Returns:
            True if the event was handled (and the job run) by this call.

        Raises:
            UnsetCallback: If the event was handled but has no job

        """
        if not super().handle():
            return False
        job = self._job[0]
        if job is None:
            raise UnsetCallback(f"{self} was handled with no job set")
        LOGGER.debug("run job: %s", self)
        job()
        return True


class PriorityCallbackEvent(CallbackEvent):
    """
    A CallbackEvent that can be ordered by priority.

    a > b when a has a higher priority than b. Events of equal priority are
    unordered: neither a > b nor b > a. Priority has no effect on when the
    event is due; it exists so the owner can decide which of several ready
    events to handle first.
    """

    _priority: int

    def __init__(self, callback: Optional[Job],  # pylint: disable=too-many-arguments
                 priority: int, repeated: bool, wait_time: float,
                 clock: Clock = monotonic) -> None:
        """
        Define a prioritized event that runs a function when it is handled.

        Parameters:
            callback: A function to call each time the event is handled
            priority: Larger values take precedence
            repeated: Whether the event restarts after each handling
            wait_time: Time (seconds) until the event is due
            clock: Function returning the current monotonic time (seconds)

        """
        self._priority = priority
        super().__init__(callback, repeated=repeated, wait_time=wait_time,
                         clock=clock)

    @property
    def priority(self) -> int:
        """Get the priority of this event."""
        return self._priority

    @priority.setter
    def priority(self, priority: int) -> None:
        """Set the priority of this event."""
        self._priority = priority

    def has_priority(self, other: 'PriorityCallbackEvent') -> bool:
        """Return whether this event takes precedence over other."""
        return self._priority > other.priority

    def __gt__(self, other: object) -> bool:
        """Greater."""
        if not isinstance(other, PriorityCallbackEvent):
            return NotImplemented
        return self.has_priority(other)

    def __lt__(self, other: object) -> bool:
        """Less."""
        if not isinstance(other, PriorityCallbackEvent):
            return NotImplemented
        return other.has_priority(self)

    def __str__(self) -> str:
        """Return string representation of a PriorityCallbackEvent."""
        kind = "repeated" if self.repeated else "one-shot"
        return (f"{type(self).__name__}({kind}, wait={self.wait_time}, "
                f"priority={self._priority})")
