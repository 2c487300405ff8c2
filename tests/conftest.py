"""
Shared fixtures: an app per test backed by in-memory SQLite, and an
httpx client talking to it over ASGI.
"""
import httpx
import pytest_asyncio

from course_catalog.core.config import Settings
from course_catalog.db.database import init_models
from course_catalog.main import create_app

ANN = {"name": "Ann", "email": "a@x.com", "password": "secret1"}
ALGO = {"courseName": "Algo", "courseDescription": "Sorting and searching", "instructor": "Dr. X"}


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite+aiosqlite://",
        "JWT_SECRET_KEY": "test-secret",
        "BCRYPT_ROUNDS": 4,
        "METRICS_ENABLED": False,
        "RATE_LIMIT_ENABLED": False,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


@pytest_asyncio.fixture
async def app():
    application = create_app(make_settings())
    await init_models(application.state.engine)
    yield application
    application.dependency_overrides.clear()
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def token(client):
    """Register Ann and return her bearer token."""
    r = await client.post("/api/auth/register", json=ANN)
    assert r.status_code == 201, r.text
    return r.json()["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
