"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models in
Tailblocks: the declarative base and the timestamp mixin.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Usage:
======
    from tailblocks.shared.models.base import Base, TimestampMixin

    class User(Base, TimestampMixin):
        __tablename__ = "users"
        id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current time used for timestamp defaults."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    JSON-typed attributes map to JSONB on PostgreSQL and to plain JSON
    elsewhere, so the same models run against SQLite in tests.
    """

    type_annotation_map = {
        dict[str, Any]: JSON().with_variant(JSONB(), "postgresql"),
        list[str]: JSON().with_variant(JSONB(), "postgresql"),
    }


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    - created_at: Set when the record is first inserted
    - updated_at: Updated whenever the record is modified

    The values are generated in Python with microsecond precision so that
    "newest first" ordering is stable even for rows inserted in the same
    second; the server default covers rows inserted outside the ORM.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
        index=True,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utcnow,
        nullable=False,
    )
