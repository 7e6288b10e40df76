"""
Database Session Management

One async engine per process, one AsyncSession per request.

Transaction per Request:
========================
    get_db()
      ├── open session
      ├── yield to handler → service → repositories (flush only)
      ├── handler returned  → COMMIT
      └── handler raised    → ROLLBACK, exception propagates

Repositories never commit, so a request either persists all of its writes
or none of them. The favorites toggle additionally uses a SAVEPOINT inside
this transaction for its insert.

Drivers:
========
    postgresql+asyncpg://...     production; pooled with DATABASE_POOL_SIZE
                                 and DATABASE_MAX_OVERFLOW
    sqlite+aiosqlite://...       local runs and tests; no pool sizing
"""

from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tailblocks.config.settings import settings
from tailblocks.shared.core.logging import logger


def _engine_options() -> dict[str, Any]:
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if not settings.uses_sqlite:
        options.update(
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
        )
    return options


engine = create_async_engine(settings.DATABASE_URL, **_engine_options())

# Response schemas read ORM attributes after commit, hence expire_on_commit=False
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session; commits when the handler succeeds.

    Yields:
        AsyncSession bound to the shared engine
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """
    Check that the database answers before serving traffic.

    Raises:
        Exception: Whatever the driver raised; startup is aborted
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("Database unreachable", error=str(e))
        raise
    logger.info("Database connection verified")


async def close_db() -> None:
    await engine.dispose()
    logger.info("Database engine disposed")
