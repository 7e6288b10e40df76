# pylint: skip-file
# ruff: noqa
"""Initial schema - users, components, favorites

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00

Tables created:
- users: User accounts
- components: Uploaded UI components
- user_favorites: (user, component) favorites membership

Enums created:
- componentcategory: buttons, cards, forms, navigation, other
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


component_category_enum = postgresql.ENUM(
    "buttons",
    "cards",
    "forms",
    "navigation",
    "other",
    name="componentcategory",
    create_type=False,
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    component_category_enum.create(op.get_bind(), checkfirst=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # USERS
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_created_at", "users", ["created_at"])

    # ═══════════════════════════════════════════════════════════════════════════
    # COMPONENTS
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "components",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=False),
        sa.Column("category", component_category_enum, nullable=False),
        sa.Column(
            "tags",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default=sa.text("'[]'::jsonb"),
            nullable=False,
        ),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("author_id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_components_name", "components", ["name"])
    op.create_index("ix_components_category", "components", ["category"])
    op.create_index("ix_components_author_id", "components", ["author_id"])
    op.create_index("ix_components_created_at", "components", ["created_at"])

    # ═══════════════════════════════════════════════════════════════════════════
    # USER FAVORITES
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "user_favorites",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("component_id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["component_id"], ["components.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "component_id"),
    )
    op.create_index("ix_user_favorites_component_id", "user_favorites", ["component_id"])


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("user_favorites")
    op.drop_table("components")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS componentcategory")
