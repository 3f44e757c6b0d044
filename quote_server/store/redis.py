"""Redis-backed sliding-window counters, shared by every server worker."""

from __future__ import annotations

import re
import time
from uuid import uuid4

import redis.asyncio as aioredis
import structlog
from redis.exceptions import RedisError

from quote_server.store.memory import WindowResult

logger = structlog.get_logger()

_URL_CREDENTIALS = re.compile(r"(rediss?://[^:@/]*:)[^@]+(@)")

_client: aioredis.Redis | None = None


def _redact_url(url: str) -> str:
    return _URL_CREDENTIALS.sub(r"\1***\2", url)


async def connect(url: str) -> aioredis.Redis:
    """Create the shared client and check it once.

    Startup does not wait for Redis. A failed ping is only logged: the
    client reconnects on demand and the rate limiter answers 503 until
    Redis is reachable.
    """
    global _client
    _client = aioredis.from_url(
        url,
        decode_responses=True,
        socket_connect_timeout=2,
        socket_timeout=2,
    )
    try:
        await _client.ping()
    except (RedisError, OSError) as exc:
        logger.warning("redis_unavailable", url=_redact_url(url), error=str(exc), action="fail_closed")
    else:
        logger.info("redis_connected", url=_redact_url(url))
    return _client


def get_client() -> aioredis.Redis | None:
    return _client


async def disconnect() -> None:
    global _client
    if _client is None:
        return
    await _client.aclose()
    _client = None
    logger.info("redis_disconnected")


# Atomic Lua script: cleanup + count + conditional add in one operation.
# Returns [current_count, was_added (0 or 1), oldest_score]
_RATE_LIMIT_LUA = """
local key = KEYS[1]
local window_start = tonumber(ARGV[1])
local now = tonumber(ARGV[2])
local max_requests = tonumber(ARGV[3])
local member = ARGV[4]
local ttl = tonumber(ARGV[5])

redis.call('ZREMRANGEBYSCORE', key, 0, window_start)

local count = redis.call('ZCARD', key)

if count < max_requests then
    redis.call('ZADD', key, now, member)
    redis.call('EXPIRE', key, ttl)
    return {count, 1, tostring(now)}
end

local oldest = redis.call('ZRANGE', key, 0, 0, 'WITHSCORES')
return {count, 0, oldest[2] or tostring(now)}
"""

# Redis key prefix
_KEY_PREFIX = "ratelimit"


class RedisRateLimitStore:
    """Sliding-window counters in Redis sorted sets, shared across workers.

    The check and the increment run in a single Lua script. Calling ``hit`` before
    ``connect`` raises ``RuntimeError``; the limiter fails closed on any store error.
    """

    def __init__(self, client: aioredis.Redis | None = None) -> None:
        self._client = client

    def _redis(self) -> aioredis.Redis:
        client = self._client or get_client()
        if client is None:
            raise RuntimeError("Redis is not connected")
        return client

    async def hit(self, key: str, window_seconds: int, max_requests: int, now: float | None = None) -> WindowResult:
        now = time.time() if now is None else now
        window_start = now - window_seconds
        member = f"{now}:{uuid4().hex}"

        result = await self._redis().eval(
            _RATE_LIMIT_LUA,
            1,  # number of keys
            f"{_KEY_PREFIX}:{key}",
            str(window_start),
            str(now),
            str(max_requests),
            member,
            str(int(window_seconds) + 1),
        )
        count = int(result[0])
        allowed = bool(int(result[1]))
        if allowed:
            return WindowResult(count=count, allowed=True, retry_after=window_seconds)
        oldest = float(result[2])
        retry_after = max(1, int(oldest + window_seconds - now) + 1)
        return WindowResult(count=count, allowed=False, retry_after=retry_after)
