"""
Clock Interface

Time source for the status poller, so the poll loop can run against a
virtual clock in tests.
"""

from abc import ABC, abstractmethod


class ClockInterface(ABC):
    """Monotonic time plus blocking sleep"""

    @abstractmethod
    def monotonic(self) -> float:
        """Seconds from an arbitrary, never-decreasing origin"""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Block for the given number of seconds"""
