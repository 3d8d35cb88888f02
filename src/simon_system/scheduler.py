"""
Single-threaded callback scheduler polled by the frame loop
"""

import heapq
import itertools
import time
from typing import Callable, List, Tuple


class ScheduledCallback:
    """Handle for a pending callback. cancel() may be called any number of times."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class CallbackScheduler:
    """
    Delayed callbacks without threads.

    The frame loop calls run_due() once per frame; callbacks whose time has
    come run in due order (insertion order for equal due times). Callbacks
    may schedule further callbacks. cancel_all() drops everything that is
    still pending, which is how the controller makes sure nothing from an
    abandoned round fires after a reset.

    Example:
        scheduler = CallbackScheduler()
        scheduler.call_later(600, lambda: lights.off(2))
        ...
        scheduler.run_due()     # every frame
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            clock: Seconds-based monotonic time source
        """
        self._clock = clock
        self._queue: List[Tuple[float, int, ScheduledCallback]] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledCallback:
        """
        Schedule callback to run delay_ms from now.

        Returns:
            ScheduledCallback handle that can cancel this callback only
        """
        handle = ScheduledCallback(self._clock() + delay_ms / 1000.0, callback)
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle))
        return handle

    def run_due(self) -> int:
        """
        Run every callback that is due.

        Returns:
            Number of callbacks executed
        """
        executed = 0
        now = self._clock()
        while self._queue and self._queue[0][0] <= now:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            handle.cancelled = True
            handle.callback()
            executed += 1
        return executed

    def cancel_all(self) -> int:
        """
        Cancel every pending callback.

        Returns:
            Number of callbacks that were still pending
        """
        pending = self.pending_count()
        for _, _, handle in self._queue:
            handle.cancel()
        self._queue.clear()
        return pending

    def pending_count(self) -> int:
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)
