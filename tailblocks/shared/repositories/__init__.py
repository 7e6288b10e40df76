"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data
access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── UserRepository             ← Login lookup, uniqueness checks
         └── ComponentRepository        ← Catalog search and ordering

    FavoriteRepository                  ← Favorites set (junction table)

Usage Example:
==============
    from tailblocks.shared.repositories import ComponentRepository, FavoriteRepository

    components = await ComponentRepository(db).search(terms=["card"])
    favorite_ids = await FavoriteRepository(db).get_component_ids(user_id)
"""

from tailblocks.shared.repositories.base import BaseRepository
from tailblocks.shared.repositories.user_repository import UserRepository
from tailblocks.shared.repositories.component_repository import ComponentRepository
from tailblocks.shared.repositories.favorite_repository import FavoriteRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ComponentRepository",
    "FavoriteRepository",
]
