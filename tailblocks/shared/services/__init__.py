"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories and
domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Raise TailblocksException subclasses for expected failures
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: User registration and login
- UserService: Profile read and update
- ComponentService: Catalog listing, lookup and upload
- FavoriteService: Favorites toggle

Usage:
======
    from tailblocks.shared.services import ComponentService

    service = ComponentService(db)
    rows = await service.list_components(query, user_id)
"""

from tailblocks.shared.services.auth_service import AuthService
from tailblocks.shared.services.user_service import UserService
from tailblocks.shared.services.component_service import ComponentService, annotate_favorites
from tailblocks.shared.services.favorite_service import FavoriteService

__all__ = [
    "AuthService",
    "UserService",
    "ComponentService",
    "FavoriteService",
    "annotate_favorites",
]
