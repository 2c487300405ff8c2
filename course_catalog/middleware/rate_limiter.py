"""
Course Catalog — Sliding window rate limiter middleware (Redis-backed)

Limits POST /api/auth/login attempts per email address.
Uses sorted sets (ZADD/ZREMRANGEBYSCORE/ZCARD) for a true sliding window.
"""
import json
import logging
import time

import redis.asyncio as aioredis
from fastapi import Request, Response
from redis.exceptions import RedisError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from course_catalog.core.errors import ErrorKind

logger = logging.getLogger(__name__)

RATE_LIMIT_PREFIX = "ratelimit:login:"
LOGIN_PATHS = ("/api/auth/login", "/api/auth/login/")


class SlidingWindowRateLimiter(BaseHTTPMiddleware):
    """
    Key is derived from the email in the request body.
    Falls back to the client IP if the body cannot be parsed.
    """

    def __init__(self, app: ASGIApp, redis: aioredis.Redis, max_attempts: int, window_seconds: int):
        super().__init__(app)
        self.redis = redis
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method != "POST" or request.url.path not in LOGIN_PATHS:
            return await call_next(request)

        body = await request.body()
        client_host = request.client.host if request.client else "unknown"
        try:
            data = json.loads(body)
            tracking_key = data.get("email") or client_host
        except (ValueError, AttributeError):
            tracking_key = client_host

        key = f"{RATE_LIMIT_PREFIX}{tracking_key}"
        now = time.time()
        window_start = now - self.window_seconds

        pipe = self.redis.pipeline()
        # Drop attempts that fell out of the window
        pipe.zremrangebyscore(key, "-inf", window_start)
        pipe.zcard(key)
        pipe.zadd(key, {str(now): now})
        pipe.expire(key, self.window_seconds + 1)
        try:
            results = await pipe.execute()
        except (RedisError, ConnectionError, OSError):
            # fail open
            logger.exception("Rate limiter store unavailable; letting login through")
            return await call_next(request)

        attempt_count = results[1]  # count before this attempt

        if attempt_count >= self.max_attempts:
            logger.warning("Login rate limit hit for %s", tracking_key)
            return JSONResponse(
                status_code=429,
                content={
                    "message": (
                        f"Too many login attempts. Maximum {self.max_attempts} "
                        f"attempts per {self.window_seconds} seconds."
                    ),
                    "error": ErrorKind.RATE_LIMITED.value,
                    "retry_after_seconds": self.window_seconds,
                },
                headers={"Retry-After": str(self.window_seconds)},
            )

        # Starlette caches the body read above, so the route can read it again
        return await call_next(request)
