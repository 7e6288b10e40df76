"""
User Entity Model

Represents a registered marketplace user.

Model Hierarchy:
================
    User
       ├── components (Component[])     - Components this user uploaded
       └── favorites (UserFavorite[])   - This user's favorites set

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ username         │ "alice"                                                   │
│ email            │ "alice@x.com"                                             │
│ password_hash    │ "$2b$12$..."                                              │
│ created_at       │ 2026-01-01T00:00:00Z                                      │
│ updated_at       │ 2026-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tailblocks.shared.models.base import Base, TimestampMixin


# TYPE_CHECKING block prevents circular imports while enabling type hints
if TYPE_CHECKING:
    from tailblocks.shared.models.component import Component
    from tailblocks.shared.models.user_favorite import UserFavorite


class User(Base, TimestampMixin):
    """
    User model representing a registered marketplace user.

    Users can:
    - Upload components (as their author)
    - Keep a set of favorite components

    Attributes:
        id: Unique identifier (UUID v4)
        username: Display name (unique, 3-30 characters)
        email: Login address (unique, stored lowercased)
        password_hash: Bcrypt hashed password

    Relationships:
        components: Components authored by this user
        favorites: Rows of the user's favorites set
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # IDENTITY
    # ═══════════════════════════════════════════════════════════════════════════

    username: Mapped[str] = mapped_column(
        String(30),
        unique=True,
        nullable=False,
        index=True,
    )

    # Email address - used for login
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # Bcrypt hashed password
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    components: Mapped[list["Component"]] = relationship(
        "Component",
        back_populates="author",
    )

    favorites: Mapped[list["UserFavorite"]] = relationship(
        "UserFavorite",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
