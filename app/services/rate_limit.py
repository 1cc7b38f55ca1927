from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from threading import Lock
from typing import Protocol

import redis
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings

_LOG = logging.getLogger("app.rate_limit")

KEY_PREFIX = "ratelimit:api:"
RATE_LIMITED_PREFIXES = ("/api/",)
EXEMPT_PATHS = {"/health"}


@dataclass
class RateLimitResult:
    allowed: bool
    retry_after_seconds: int
    current_value: int
    limit: int = 0

    @property
    def remaining(self) -> int:
        return max(self.limit - self.current_value, 0)


class RateLimiter(Protocol):
    def hit(self, key: str, *, limit: int, window_seconds: int) -> RateLimitResult:
        ...


class InMemoryRateLimiter:
    def __init__(self):
        self._windows: dict[str, tuple[int, datetime]] = {}
        self._lock = Lock()

    def hit(self, key: str, *, limit: int, window_seconds: int) -> RateLimitResult:
        now = datetime.now(timezone.utc)
        with self._lock:
            count, resets_at = self._windows.get(key, (0, now))
            if resets_at <= now:
                count = 0
                resets_at = now + timedelta(seconds=max(int(window_seconds), 1))
            count += 1
            self._windows[key] = (count, resets_at)
            retry_after = max(0, int((resets_at - now).total_seconds()))
        return RateLimitResult(allowed=count <= limit, retry_after_seconds=retry_after, current_value=count, limit=limit)


class RedisRateLimiter:
    def __init__(self, client: redis.Redis):
        self.client = client

    def hit(self, key: str, *, limit: int, window_seconds: int) -> RateLimitResult:
        count = int(self.client.incr(key))
        if count == 1:
            self.client.expire(key, int(max(window_seconds, 1)))
        ttl = int(self.client.ttl(key))
        if ttl < 0:
            ttl = int(max(window_seconds, 1))
        return RateLimitResult(allowed=count <= limit, retry_after_seconds=ttl, current_value=count, limit=limit)


_cached_limiter: RateLimiter | None = None


def _build_limiter() -> RateLimiter:
    if not settings.REDIS_URL.strip():
        return InMemoryRateLimiter()
    try:
        client = redis.Redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_timeout=0.4,
            socket_connect_timeout=0.4,
        )
        client.ping()
        return RedisRateLimiter(client)
    except redis.RedisError:
        _LOG.warning("Redis limiter unavailable; fallback to in-memory limiter")
        return InMemoryRateLimiter()


def get_rate_limiter() -> RateLimiter:
    global _cached_limiter
    if _cached_limiter is None:
        _cached_limiter = _build_limiter()
    return _cached_limiter


def reset_rate_limiter_for_tests() -> None:
    global _cached_limiter
    _cached_limiter = None


def _client_key(request: Request) -> str:
    forwarded = str(request.headers.get("X-Forwarded-For") or "").split(",")[0].strip()
    host = forwarded or (request.client.host if request.client else "unknown")
    return f"{KEY_PREFIX}{host}"


def _is_exempt(request: Request) -> bool:
    if settings.APP_ENV.strip().lower() == "test":
        return True
    path = request.url.path
    if path in EXEMPT_PATHS:
        return True
    return not path.startswith(RATE_LIMITED_PREFIXES)


def install_rate_limit(app: FastAPI) -> None:
    @app.middleware("http")
    async def _rate_limit_middleware(request: Request, call_next):
        if _is_exempt(request):
            return await call_next(request)

        result = get_rate_limiter().hit(
            _client_key(request),
            limit=settings.rate_limit_max_requests,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
        )
        if not result.allowed:
            _LOG.warning(
                "Rate limit exceeded %s %s client=%s count=%s",
                request.method,
                request.url.path,
                _client_key(request),
                result.current_value,
            )
            return JSONResponse(
                status_code=429,
                content={
                    "error": "Too Many Requests",
                    "message": "You have exceeded the rate limit. Please try again later.",
                    "retryAfter": result.retry_after_seconds,
                },
                headers={"Retry-After": str(result.retry_after_seconds)},
            )

        response = await call_next(request)
        response.headers["RateLimit-Limit"] = str(result.limit)
        response.headers["RateLimit-Remaining"] = str(result.remaining)
        return response
