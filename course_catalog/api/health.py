"""
Course Catalog — Health endpoint
"""
import asyncio
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from course_catalog.schemas.auth import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """
    Deep health check — verifies database connectivity, and Redis when
    login rate limiting is enabled.
    Returns 200 if all dependencies are healthy, 503 otherwise.
    """
    settings = request.app.state.settings
    deps: dict[str, str] = {}
    healthy = True

    try:
        async with request.app.state.engine.connect() as conn:
            await asyncio.wait_for(conn.execute(text("SELECT 1")), timeout=settings.HEALTH_CHECK_TIMEOUT)
        deps["database"] = "ok"
    except Exception:
        logger.exception("Health check: database unreachable")
        deps["database"] = "error"
        healthy = False

    redis = request.app.state.redis
    if redis is not None:
        try:
            await asyncio.wait_for(redis.ping(), timeout=settings.HEALTH_CHECK_TIMEOUT)
            deps["redis"] = "ok"
        except Exception:
            logger.exception("Health check: redis unreachable")
            deps["redis"] = "error"
            healthy = False

    response = HealthResponse(
        status="healthy" if healthy else "degraded",
        service=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        dependencies=deps,
    )

    return JSONResponse(
        content=response.model_dump(),
        status_code=200 if healthy else 503,
    )
