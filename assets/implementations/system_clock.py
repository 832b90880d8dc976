"""
System Clock Implementation

Wall-clock implementation of ClockInterface.
"""

import time

from assets.interfaces.clock_interface import ClockInterface


class SystemClock(ClockInterface):
    """Real time: time.monotonic and time.sleep"""

    def monotonic(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)
