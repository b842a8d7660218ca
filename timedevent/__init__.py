"""
Timed-event primitives.

A DueEvent becomes due a fixed time after it is started. Its owner polls it
with handle(), which reports whether it was time to act and, if so, either
marks a one-shot event as handled or restarts a repeated one. CallbackEvent
additionally runs a function when handled, and PriorityCallbackEvent adds a
priority so that the owner can order ready events. Nothing here runs a loop
or keeps a queue; that is left to the caller.
"""

from .callback import CallbackEvent, PriorityCallbackEvent
from .clock import Clock, monotonic
from .errors import Error, NegativeWait, StopwatchNotRun, UnsetCallback
from .event import DueEvent
from .stopwatch import Stopwatch
