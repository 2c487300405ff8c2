"""
Course Catalog — FastAPI application entrypoint
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from course_catalog.core.config import Settings, get_settings
from course_catalog.core.errors import register_error_handlers
from course_catalog.core.redis_client import close_redis, create_redis
from course_catalog.core.security import TokenIssuer, build_password_context
from course_catalog.db.database import build_engine, build_sessionmaker, init_models
from course_catalog.middleware.auth import AccessGuardMiddleware
from course_catalog.middleware.rate_limiter import SlidingWindowRateLimiter
from course_catalog.api import auth, courses, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: no database means no service
    try:
        await init_models(app.state.engine)
    except Exception:
        logger.exception("Database connection failed at startup")
        raise
    logger.info("Connected to database")
    yield
    # Shutdown
    await close_redis(app.state.redis)
    await app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with configuration injected once."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Course Catalog API",
        description="Student registration, JWT login and course CRUD.",
        version=settings.SERVICE_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
    )

    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url)
    app.state.sessionmaker = build_sessionmaker(app.state.engine)
    app.state.pwd_context = build_password_context(settings.BCRYPT_ROUNDS)
    app.state.token_issuer = TokenIssuer(
        secret_key=settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        expire_days=settings.JWT_EXPIRE_DAYS,
    )
    app.state.redis = create_redis(settings) if settings.RATE_LIMIT_ENABLED else None

    register_error_handlers(app)

    # ── Middleware (last added runs first) ────────────────────────────────────
    app.add_middleware(AccessGuardMiddleware, issuer=app.state.token_issuer)

    if app.state.redis is not None:
        app.add_middleware(
            SlidingWindowRateLimiter,
            redis=app.state.redis,
            max_attempts=settings.RATE_LIMIT_MAX_ATTEMPTS,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
        )

    # CORS outermost so preflight and 401 responses carry the headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOWED_ORIGINS,
        allow_origin_regex=settings.CORS_ALLOWED_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Prometheus Metrics ────────────────────────────────────────────────────
    if settings.METRICS_ENABLED:
        Instrumentator().instrument(app).expose(app, endpoint="/metrics")

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(courses.router)
    app.include_router(health.router)

    @app.get("/")
    async def root():
        return {
            "service": settings.SERVICE_NAME,
            "version": settings.SERVICE_VERSION,
            "message": "Course Management API running",
        }

    return app


app = create_app()
