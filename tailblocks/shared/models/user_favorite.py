"""
UserFavorite Entity Model

One membership row of a user's favorites set.

This is the many-to-many relationship between Users and Components. The
composite primary key (user_id, component_id) makes the favorites a true
set: the same component can never appear twice for one user, even when two
toggles race.

SAMPLE USER_FAVORITE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ component_id     │ 770e8400-e29b-41d4-a716-446655440000                      │
│ created_at       │ 2026-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING
import uuid

from sqlalchemy import DateTime, ForeignKey, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tailblocks.shared.models.base import Base, utcnow


if TYPE_CHECKING:
    from tailblocks.shared.models.user import User
    from tailblocks.shared.models.component import Component


class UserFavorite(Base):
    """
    UserFavorite model - (user, component) membership.

    Attributes:
        user_id: Owner of the favorites set
        component_id: The favorited component
        created_at: When the component was favorited

    Relationships:
        user: The owner
        component: The favorited component
    """

    __tablename__ = "user_favorites"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    component_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("components.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="favorites",
    )

    component: Mapped["Component"] = relationship(
        "Component",
        back_populates="favorited_by",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<UserFavorite(user_id={self.user_id}, component_id={self.component_id})>"
