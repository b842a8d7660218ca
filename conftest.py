"""Test fixtures for pytest."""

from fractions import Fraction

import pytest


def pytest_addoption(parser):
    """Add command-line options to pytest."""
    parser.addoption(
        "--skip-realtime", action="store_true", default=False,
        help="skip tests that sleep on the real monotonic clock"
    )

def pytest_configure(config):
    """Define realtime pytest mark."""
    config.addinivalue_line("markers", "realtime: mark test as sleeping on the real clock")

def pytest_collection_modifyitems(config, items):
    """Skip realtime tests when --skip-realtime is used."""
    if config.getoption("--skip-realtime"):
        skip_realtime = pytest.mark.skip(reason="--skip-realtime was given")
        for item in items:
            if "realtime" in item.keywords:
                item.add_marker(skip_realtime)


class FakeClock:
    """
    A monotonic clock that only moves when told to.

    Time is kept as an exact Fraction so that stepping by decimal amounts
    (e.g., 0.005s) lands exactly on event boundaries.
    """

    def __init__(self, now: float = 1000) -> None:
        """Create a clock reading now."""
        self.now = Fraction(str(now))

    def __call__(self) -> Fraction:
        """Return the current time."""
        return self.now

    def advance(self, seconds: float) -> None:
        """Move the clock forward."""
        self.now += Fraction(str(seconds))


@pytest.fixture
def fake_clock():
    """
    Provide a manually advanced clock.

    Pass it as the clock of the object under test, then call
    fake_clock.advance(seconds) to simulate the passage of time.
    """
    return FakeClock()
