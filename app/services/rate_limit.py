"""Fixed-window throttle for the login endpoint, keyed by caller address."""

import logging
import threading
import time
from collections.abc import Callable

from app.core.errors import RateLimitExceededError

logger = logging.getLogger(__name__)


class LoginRateLimiter:
    """
    Allow at most ``max_attempts`` hits per ``window_sec`` per key.

    Every attempt counts, successful or not. Independent of the per-account
    lockout kept in the users table.
    """

    def __init__(
        self,
        max_attempts: int,
        window_sec: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_attempts = max_attempts
        self.window_sec = window_sec
        self._clock = clock
        self._lock = threading.Lock()
        # key -> (window start, hits in window)
        self._windows: dict[str, tuple[float, int]] = {}

    def hit(self, key: str) -> None:
        """Record one attempt for key; raise RateLimitExceededError past the limit."""
        now = self._clock()
        with self._lock:
            self._evict_expired(now)
            start, count = self._windows.get(key, (now, 0))
            count += 1
            self._windows[key] = (start, count)
        if count > self.max_attempts:
            logger.warning(
                "Login rate limit exceeded",
                extra={"client": key, "attempts": count, "window_sec": self.window_sec},
            )
            raise RateLimitExceededError()

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _evict_expired(self, now: float) -> None:
        expired = [k for k, (start, _) in self._windows.items() if now - start >= self.window_sec]
        for k in expired:
            del self._windows[k]
