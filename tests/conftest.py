"""
Shared test fixtures.

Environment variables are set before anything from tailblocks is imported:
Settings requires SECRET_KEY, and the engine is built from DATABASE_URL at
import time.
"""
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789abcdef0123456789")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["APP_ENV"] = "test"

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient, Response  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from tailblocks.api.dependencies.database import get_db  # noqa: E402
from tailblocks.api.main import app  # noqa: E402
from tailblocks.shared.models import Base  # noqa: E402

DEFAULT_PASSWORD = "secret1"


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the app, with get_db pointed at the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client: AsyncClient) -> Callable[..., Awaitable[Response]]:
    async def _register(
        username: str = "alice",
        email: str | None = None,
        password: str = DEFAULT_PASSWORD,
    ) -> Response:
        return await client.post(
            "/api/auth/register",
            json={
                "username": username,
                "email": email or f"{username}@x.com",
                "password": password,
            },
        )

    return _register


@pytest.fixture
def login_headers(client: AsyncClient) -> Callable[..., Awaitable[dict[str, str]]]:
    async def _login(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = await client.post(
            "/api/auth/login",
            json={"email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login


@pytest.fixture
async def alice(register_user, login_headers) -> dict[str, str]:
    """Auth headers for a registered user named alice."""
    response = await register_user("alice")
    assert response.status_code == 201, response.text
    return await login_headers("alice@x.com")


@pytest.fixture
async def bob(register_user, login_headers) -> dict[str, str]:
    """Auth headers for a registered user named bob."""
    response = await register_user("bob")
    assert response.status_code == 201, response.text
    return await login_headers("bob@x.com")


@pytest.fixture
def create_component(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    async def _create(headers: dict[str, str], **overrides: Any) -> dict[str, Any]:
        payload = {
            "name": "Btn",
            "description": "A primary call to action button",
            "category": "buttons",
            "tags": ["ui", "primary"],
            "code": "<button class=\"btn\">Go</button>",
        }
        payload.update(overrides)
        response = await client.post("/api/components", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
