"""In-process sliding-window counters for rate limiting."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass

import structlog

logger = structlog.get_logger()

# Drop idle keys after this many hits
_CLEANUP_EVERY = 1000


@dataclass(frozen=True)
class WindowResult:
    """Outcome of a single rate-limit check."""

    count: int  # hits in the window before this one
    allowed: bool
    retry_after: int  # seconds until the oldest hit leaves the window


class MemoryRateLimitStore:
    """Per-key timestamp log, pruned to the window on every hit.

    Only touched from the event loop thread; each ``hit`` runs without
    awaiting, so check and record happen together.
    """

    def __init__(self) -> None:
        self._hits: dict[str, deque[float]] = {}
        self._calls = 0

    async def hit(self, key: str, window_seconds: int, max_requests: int, now: float | None = None) -> WindowResult:
        now = time.time() if now is None else now
        window_start = now - window_seconds
        self._calls += 1
        if self._calls % _CLEANUP_EVERY == 0:
            self._cleanup(window_start)

        log = self._hits.setdefault(key, deque())
        while log and log[0] <= window_start:
            log.popleft()

        count = len(log)
        if count < max_requests:
            log.append(now)
            return WindowResult(count=count, allowed=True, retry_after=window_seconds)

        retry_after = max(1, int(log[0] + window_seconds - now) + 1)
        return WindowResult(count=count, allowed=False, retry_after=retry_after)

    def _cleanup(self, window_start: float) -> None:
        idle = [key for key, log in self._hits.items() if not log or log[-1] <= window_start]
        for key in idle:
            del self._hits[key]
        if idle:
            logger.debug("rate_limit_keys_cleaned", count=len(idle))

    def reset(self) -> None:
        self._hits.clear()
        self._calls = 0
