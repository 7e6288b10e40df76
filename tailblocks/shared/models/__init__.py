"""
Tailblocks SQLAlchemy Models

Model Hierarchy:
================
    User
       ├── components (Component[])
       └── favorites (UserFavorite[])

    Component
       ├── author (User)
       └── favorited_by (UserFavorite[])

Models Overview:
================
- Base: Base class and timestamp mixin
- User: Registered marketplace user
- Component: Uploaded UI snippet
- UserFavorite: Junction row of a user's favorites set

Usage:
======
    from tailblocks.shared.models import User, Component, UserFavorite
"""

from tailblocks.shared.models.base import Base, TimestampMixin
from tailblocks.shared.models.enums import ComponentCategory, SortKey
from tailblocks.shared.models.user import User
from tailblocks.shared.models.component import Component
from tailblocks.shared.models.user_favorite import UserFavorite

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "ComponentCategory",
    "SortKey",
    # Models
    "User",
    "Component",
    "UserFavorite",
]
