"""
Throttle helper for work that should run at most once per interval
inside the frame loop
"""

import time
from typing import Callable


class OnceInMs:
    """
    Rate limiter for periodic work inside a fast loop.

    Example:
        self._status_log = OnceInMs(60000)

        # every frame:
        if self._status_log.should_execute():
            self._log_usage()
    """

    def __init__(self, interval_ms: int, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            interval_ms: Minimum milliseconds between two executions
            clock: Seconds-based time source
        """
        self.interval_ms = interval_ms
        self._clock = clock
        self._last_execution = None

    def should_execute(self) -> bool:
        """True (and restart the interval) when the interval has elapsed"""
        now = self._clock()
        if self._last_execution is None or (now - self._last_execution) * 1000 >= self.interval_ms:
            self._last_execution = now
            return True
        return False

    def reset(self) -> None:
        """Make the next should_execute() call return True"""
        self._last_execution = None
