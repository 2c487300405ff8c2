"""
Course Catalog — Redis client (login rate limiting)
"""
import redis.asyncio as aioredis

from course_catalog.core.config import Settings


def create_redis(settings: Settings) -> aioredis.Redis:
    # from_url is lazy: no connection is opened until the first command
    return aioredis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_connect_timeout=settings.HEALTH_CHECK_TIMEOUT,
    )


async def close_redis(client: aioredis.Redis | None):
    if client is not None:
        await client.aclose()
