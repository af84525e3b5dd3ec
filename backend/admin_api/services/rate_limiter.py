# in-memory fixed-window rate limiter keyed by client address
# process-wide state: fine for a single instance, a multi-instance deployment
# would need a shared counter (e.g. in redis) instead

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from admin_api.config import settings

logger = logging.getLogger(__name__)


@dataclass
class _Window:
    count: int
    started_at: float


class RateLimiter:
    """allow ``limit`` requests per key, then refuse until ``window_seconds``
    have passed since the window started. refused requests are not counted."""

    def __init__(
        self,
        limit: int = 100,
        window_seconds: float = 15 * 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}

    def hit(self, key: str, now: Optional[float] = None) -> bool:
        """record one request for key, returns false when over the limit"""
        now = self._clock() if now is None else now
        record = self._windows.get(key)

        # stale windows are overwritten lazily, never swept
        if record is None or record.started_at < now - self.window_seconds:
            self._windows[key] = _Window(count=1, started_at=now)
            return True

        if record.count >= self.limit:
            logger.warning(f"Rate limit exceeded for {key}")
            return False

        record.count += 1
        return True

    def reset(self):
        self._windows.clear()


# singleton instance shared by the request middleware
rate_limiter = RateLimiter(
    limit=settings.RATE_LIMIT_MAX_REQUESTS,
    window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
)
