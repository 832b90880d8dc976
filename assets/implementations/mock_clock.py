"""
Mock Clock Implementation

Virtual clock for testing the poll loop without real delays.
Sleeping advances virtual time instantly.
"""

import logging
from typing import List

from assets.interfaces.clock_interface import ClockInterface


class MockClock(ClockInterface):
    """
    Virtual clock.

    Example:
        clock = MockClock()
        clock.sleep(5)
        assert clock.monotonic() == 5
        assert clock.sleeps == [5]
    """

    def __init__(self, start: float = 0.0):
        self.logger = logging.getLogger(__name__)
        self.now = start

        # Track sleeps for testing
        self.sleeps: List[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += max(seconds, 0.0)
        self.logger.debug(f"[MOCK] Slept {seconds}s (now: {self.now}s)")

    def advance(self, seconds: float) -> None:
        """Move time forward without recording a sleep"""
        self.now += seconds

    @property
    def elapsed(self) -> float:
        """Total virtual time spent sleeping"""
        return sum(self.sleeps)
