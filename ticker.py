#!/usr/bin/env python3
"""Polls a set of timed events from the command line and logs their firings."""

import argparse
import collections
import logging
import os
import time
from typing import Callable, Counter, List, Sequence, Tuple

from timedevent import Clock, PriorityCallbackEvent, monotonic

LOGGER = logging.getLogger(__name__)

# (wait time in seconds, priority)
EventArg = Tuple[float, int]


def event_arg(text: str) -> EventArg:
    """
    Parse an event description of the form SECONDS[:PRIORITY].

    Parameters:
        text: The command-line value

    Returns:
        The wait time and priority (default 0).

    """
    seconds, _, priority = text.partition(":")
    try:
        return (float(seconds), int(priority) if priority else 0)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected SECONDS[:PRIORITY], got '{text}'") from None


def build_events(every: Sequence[EventArg],
                 after: Sequence[EventArg],
                 counts: Counter[str],
                 clock: Clock = monotonic) -> List[PriorityCallbackEvent]:
    """
    Create the events to poll.

    Each event's job increments its own entry in counts. Entries are named
    by kind, wait time and position, so events with equal wait times are
    counted separately.

    Parameters:
        every: Wait time & priority of each repeated event
        after: Wait time & priority of each one-shot event
        counts: Fire counts, keyed by event name
        clock: Function returning the current monotonic time (seconds)

    Returns:
        The new events, repeated ones first.

    """
    def counter(name: str) -> Callable[[], None]:
        def job() -> None:
            counts[name] += 1
        return job

    events = []
    for repeated, args, label in ((True, every, "every"),
                                   (False, after, "after")):
        for index, (wait_time, priority) in enumerate(args, start=1):
            name = f"{label} {wait_time}s #{index}"
            counts.setdefault(name, 0)
            events.append(PriorityCallbackEvent(counter(name),
                                                priority=priority,
                                                repeated=repeated,
                                                wait_time=wait_time,
                                                clock=clock))
    return events


def poll(events: Sequence[PriorityCallbackEvent],
         duration: float,
         interval: float,
         clock: Clock = monotonic,
         sleep: Callable[[float], None] = time.sleep) -> int:
    """
    Handle events as they become due until the duration has passed.

    On each pass, all ready events are handled, highest priority first.

    Parameters:
        events: The events to poll
        duration: How long to poll (seconds)
        interval: Time to sleep between passes (seconds)
        clock: Function returning the current monotonic time (seconds)
        sleep: Function used to wait between passes

    Returns:
        The total number of events handled.

    """
    handled = 0
    deadline = clock() + duration
    while clock() < deadline:
        ready = [event for event in events if event.should_handle()]
        for event in sorted(ready, reverse=True):
            late = event.lateness()
            if event.handle():
                handled += 1
                LOGGER.info("fired: %s (%.3fs late)", event, late)
        sleep(interval)
    return handled


def setup_logging(log_dir: str, verbose: bool) -> None:
    """Initializes logging to stderr and, optionally, to a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(log_dir, "ticker.log")))

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logging.Formatter.converter = time.gmtime
    formatter = \
        logging.Formatter("%(asctime)s %(name)s - %(levelname)s - %(message)s")
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def main() -> None:
    """Poll the requested events."""
    parser = argparse.ArgumentParser()
    parser.add_argument("-a", "--after",
                        default=[],
                        action="append",
                        type=event_arg,
                        help="Add a one-shot event, SECONDS[:PRIORITY]")
    parser.add_argument("-d", "--duration",
                        default=5,
                        type=float,
                        help="How long to poll the events (s)")
    parser.add_argument("-e", "--every",
                        default=[],
                        action="append",
                        type=event_arg,
                        help="Add a repeated event, SECONDS[:PRIORITY]")
    parser.add_argument("-l", "--log-dir",
                        default="",
                        type=str,
                        help="Directory for a copy of the log (default: none)")
    parser.add_argument("-p", "--poll",
                        default=0.01,
                        type=float,
                        help="Time between polls (s)")
    parser.add_argument("-v", "--verbose",
                        action="store_true",
                        help="Log each state change of every event")
    cli_args = parser.parse_args()

    assert cli_args.duration > 0, "duration must be greater than 0"
    assert cli_args.poll > 0, "poll interval must be greater than 0"
    assert all(arg[0] >= 0 for arg in cli_args.every + cli_args.after), \
           "event wait times must not be negative"

    setup_logging(cli_args.log_dir, cli_args.verbose)
    logging.info("program arguments: %s", cli_args)

    counts: Counter[str] = collections.Counter()
    events = build_events(cli_args.every, cli_args.after, counts)
    total = poll(events, cli_args.duration, cli_args.poll)

    for name, count in counts.items():
        logging.info("%s: fired %d time(s)", name, count)
    logging.info("total: %d", total)

if __name__ == '__main__':
    main()
