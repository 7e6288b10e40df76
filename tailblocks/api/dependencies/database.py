"""
Database Dependency

Per-request AsyncSession for route handlers and service factories.

Every request runs in one transaction: commit when the handler returns,
rollback when anything raises. Tests replace this dependency through
app.dependency_overrides[get_db] to point at an in-memory database.

Usage:
======
    from tailblocks.api.dependencies.database import DbSession

    @router.get("/components/{component_id}")
    async def get_component(component_id: str, db: DbSession):
        return await ComponentService(db).get_component(component_id)
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tailblocks.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield the request's database session."""
    async for session in _get_db():
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db)]
