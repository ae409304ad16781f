"""
Fixed window rate limiter.

Counts requests per client key inside windows of `window_seconds`
aligned on the epoch. When the window rolls over every counter starts
again from zero.
"""

import time
from typing import Callable, Dict

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


class FixedWindowRateLimiter:

    def __init__(self, max_requests: int = 100, window_seconds: int = 900,
                 clock: Callable[[], float] = time.time):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._window = None
        self._counts: Dict[str, int] = {}

    def _current_window(self) -> int:
        return int(self._clock() // self.window_seconds)

    def hit(self, key: str) -> bool:
        """Record one request for `key`. Returns False once the key is over the limit."""
        window = self._current_window()
        if window != self._window:
            self._window = window
            self._counts.clear()

        count = self._counts.get(key, 0) + 1
        self._counts[key] = count
        return count <= self.max_requests

    def remaining(self, key: str) -> int:
        if self._current_window() != self._window:
            return self.max_requests
        return max(self.max_requests - self._counts.get(key, 0), 0)

    def reset(self) -> None:
        self._window = None
        self._counts.clear()
