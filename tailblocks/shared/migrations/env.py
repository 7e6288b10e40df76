# pylint: skip-file
# ruff: noqa
"""
Alembic Environment

Migrations for the users, components and user_favorites tables. The URL is
always Settings.DATABASE_URL (async driver); alembic.ini carries none.

    alembic upgrade head            apply pending revisions
    alembic upgrade head --sql      print the DDL instead
    alembic revision --autogenerate -m "..."
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from tailblocks.config.settings import settings
from tailblocks.shared.models import Base

# Importing tailblocks.shared.models registers every table on Base.metadata
target_metadata = Base.metadata

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, compare_type=True, **kwargs)


def _migrate(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    engine = create_async_engine(settings.DATABASE_URL, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    _configure(
        url=settings.DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()
else:
    asyncio.run(_migrate_online())
