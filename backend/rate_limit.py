# file: backend/rate_limit.py

import logging
import threading
import time
from typing import Callable, Dict, Tuple


class RateLimiter:
    """Fixed-window request counter keyed by client."""

    def __init__(self, max_requests: int, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        if max_requests < 1 or window_seconds <= 0:
            raise ValueError("max_requests must be >= 1 and window_seconds > 0")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._last_prune = clock()
        self._lock = threading.Lock()

    def hit(self, key: str) -> Tuple[bool, int]:
        """Count one request for key; return (allowed, seconds until the window resets)."""
        now = self._clock()
        with self._lock:
            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window_seconds:
                started, count = now, 0
            count += 1
            self._windows[key] = (started, count)
            if now - self._last_prune >= self.window_seconds:
                self._prune(now)

        retry_after = max(1, int(round(started + self.window_seconds - now)))
        if count > self.max_requests:
            logging.warning(f"Rate limit exceeded for {key}: {count} requests in window")
            return False, retry_after
        return True, retry_after

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _prune(self, now: float) -> None:
        """Drop windows that have expired; runs at most once per window."""
        expired = [key for key, (started, _) in self._windows.items() if now - started >= self.window_seconds]
        for key in expired:
            del self._windows[key]
        self._last_prune = now
