import threading
import time
from typing import Callable, Dict, Optional, Tuple

from src.application.ports import RateLimiterPort
from src.infrastructure.config import Settings


WINDOW_SECONDS = 60.0


class InMemoryRateLimiter(RateLimiterPort):
    """Fixed-window request counter per user id, reset every minute.

    State lives in process memory only; a restart clears all counters.
    """

    def __init__(
        self,
        max_per_window: Optional[int] = None,
        window_seconds: float = WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        settings: Settings | None = None,
    ):
        if max_per_window is None:
            max_per_window = (settings or Settings()).rate_limit_per_minute
        self.max_per_window = max_per_window
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        # user_id -> (count, window reset time)
        self._entries: Dict[str, Tuple[int, float]] = {}

    def allow(self, user_id: str) -> bool:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(user_id)
            if entry is None or now > entry[1]:
                self._entries[user_id] = (1, now + self.window_seconds)
                return True
            count, reset_at = entry
            if count >= self.max_per_window:
                return False
            self._entries[user_id] = (count + 1, reset_at)
            return True

    def reset(self, user_id: str | None = None) -> None:
        with self._lock:
            if user_id is None:
                self._entries.clear()
            else:
                self._entries.pop(user_id, None)
