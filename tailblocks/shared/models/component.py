"""
Component Entity Model

A reusable UI snippet published to the marketplace.

SAMPLE COMPONENT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 770e8400-e29b-41d4-a716-446655440000                      │
│ name             │ "Btn"                                                     │
│ description      │ "A nice button component"                                 │
│ category         │ buttons                                                   │
│ tags             │ ["ui"]                                                    │
│ code             │ "<button/>"                                               │
│ author_id        │ 550e8400-e29b-41d4-a716-446655440000                      │
└──────────────────────────────────────────────────────────────────────────────┘

Components are immutable once uploaded: nothing in the API edits or deletes
them, and author_id never changes.
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import Enum as SQLEnum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tailblocks.shared.models.base import Base, TimestampMixin
from tailblocks.shared.models.enums import ComponentCategory


if TYPE_CHECKING:
    from tailblocks.shared.models.user import User
    from tailblocks.shared.models.user_favorite import UserFavorite


class Component(Base, TimestampMixin):
    """
    Component model - a tagged code snippet with a single author.

    Attributes:
        id: Unique identifier (UUID v4)
        name: Short title (3-100 characters)
        description: What the snippet is for (10-500 characters)
        category: One of ComponentCategory
        tags: Free-text labels, searchable
        code: Snippet payload, stored verbatim
        author_id: The uploading user

    Relationships:
        author: Uploading user (only id and username are ever exposed)
        favorited_by: Favorites rows pointing at this component
    """

    __tablename__ = "components"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # SEARCHABLE FIELDS
    # ═══════════════════════════════════════════════════════════════════════════

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
    )

    description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
    )

    tags: Mapped[list[str]] = mapped_column(
        nullable=False,
        default=list,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CLASSIFICATION & PAYLOAD
    # ═══════════════════════════════════════════════════════════════════════════

    category: Mapped[ComponentCategory] = mapped_column(
        SQLEnum(
            ComponentCategory,
            name="componentcategory",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        index=True,
    )

    code: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    author: Mapped["User"] = relationship(
        "User",
        back_populates="components",
    )

    favorited_by: Mapped[list["UserFavorite"]] = relationship(
        "UserFavorite",
        back_populates="component",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Component(id={self.id}, name={self.name})>"
