"""Per-user in-flight request flag."""

import threading

from .rate_limiter import RateLimiter


class ProcessingGuard:
    """Rejects a second request from a user while one is outstanding."""

    def __init__(self, rate_limiter: RateLimiter | None = None):
        self._lock = threading.Lock()
        self._active: set[int] = set()
        self._rate_limiter = rate_limiter

    def try_begin(self, user_id: int) -> bool:
        """Atomically mark the user busy. False if already busy."""
        with self._lock:
            if user_id in self._active:
                return False
            self._active.add(user_id)
            return True

    def end(self, user_id: int) -> None:
        """Clear the flag and stamp the rate limiter."""
        with self._lock:
            self._active.discard(user_id)
        if self._rate_limiter is not None:
            self._rate_limiter.record(user_id)

    def is_processing(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._active
