"""Sliding-window rate limiter middleware for API paths."""

from __future__ import annotations

import time
from typing import Protocol

import structlog
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from quote_server.config.loader import QuoteSettings
from quote_server.middleware.pipeline import Middleware, RequestContext
from quote_server.store.memory import WindowResult

logger = structlog.get_logger()

# Only paths under this prefix are limited
API_PREFIX = "/api/"

RATE_LIMIT_BODY = {
    "error": "Too Many Requests",
    "message": "Too many requests from this IP, please try again later.",
}


class RateLimitStore(Protocol):
    async def hit(self, key: str, window_seconds: int, max_requests: int, now: float | None = None) -> WindowResult:
        ...


def is_rate_limited_path(path: str) -> bool:
    """Return True if the path falls under the rate-limited API prefix."""
    return path.startswith(API_PREFIX)


def client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


class RateLimiter(Middleware):
    """Per-client sliding-window limiter for ``/api/`` paths.

    - Window length and request budget come from settings
    - Rejected requests get 429 with Retry-After; the route handler never runs
    - Fail-closed (503) when the counter store errors
    - Injects RateLimit-* response headers on limited paths
    """

    def __init__(self, store: RateLimitStore, settings: QuoteSettings) -> None:
        self._store = store
        self._window = settings.rate_limit_window_seconds
        self._max = settings.rate_limit_max_requests

    async def process_request(self, request: Request, context: RequestContext) -> Response | None:
        if not is_rate_limited_path(request.url.path):
            return None

        ip = context.client_ip or client_ip(request)
        now = time.time()
        try:
            result = await self._store.hit(ip, self._window, self._max, now=now)
        except Exception as exc:
            logger.error("rate_limiter_store_error", error=str(exc), action="fail_closed")
            return JSONResponse(
                status_code=503,
                content={"error": "Service Unavailable", "message": "Service temporarily unavailable"},
            )

        if result.allowed:
            context.extra["rate_limit_remaining"] = max(0, self._max - result.count - 1)
            context.extra["rate_limit_reset"] = self._window
            return None

        logger.warning(
            "rate_limit_exceeded",
            client_ip=ip,
            path=request.url.path,
            current=result.count,
            max=self._max,
            request_id=context.request_id,
        )
        context.extra["rate_limit_remaining"] = 0
        context.extra["rate_limit_reset"] = result.retry_after

        return JSONResponse(
            status_code=429,
            content=RATE_LIMIT_BODY,
            headers={"Retry-After": str(result.retry_after)},
        )

    async def process_response(self, response: Response, context: RequestContext) -> Response:
        """Inject RateLimit-* headers into responses for limited paths."""
        if "rate_limit_remaining" in context.extra:
            response.headers["RateLimit-Policy"] = f"{self._max};w={self._window}"
            response.headers["RateLimit-Limit"] = str(self._max)
            response.headers["RateLimit-Remaining"] = str(context.extra["rate_limit_remaining"])
            response.headers["RateLimit-Reset"] = str(context.extra["rate_limit_reset"])
        return response
