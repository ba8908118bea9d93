"""Per-user minimum interval between messages."""

import threading
import time
from typing import Callable

Clock = Callable[[], float]


class RateLimiter:
    """Fixed minimum gap between a user's processed messages."""

    def __init__(self, interval: float = 1.0, clock: Clock = time.monotonic):
        self._lock = threading.Lock()
        self._last: dict[int, float] = {}
        self._interval = interval
        self._clock = clock

    @property
    def interval(self) -> float:
        return self._interval

    def allow(self, user_id: int) -> bool:
        """True if the user has no record or the interval has elapsed."""
        with self._lock:
            last = self._last.get(user_id)
            if last is None:
                return True
            return self._clock() - last >= self._interval

    def record(self, user_id: int) -> None:
        """Stamp the current time for the user."""
        with self._lock:
            self._last[user_id] = self._clock()
