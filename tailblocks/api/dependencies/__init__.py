"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), get_optional_user(), CurrentUser, OptionalUser
- Catalog query: get_component_query(), ComponentQueryParams
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        query: ComponentQuery = Depends(get_component_query),
        user: Optional[dict] = Depends(get_optional_user),
    ):

    # Write this:
    async def handler(query: ComponentQueryParams, user: OptionalUser):
"""

from tailblocks.api.dependencies.database import (
    get_db,
    DbSession,
)
from tailblocks.api.dependencies.auth import (
    get_current_user,
    get_optional_user,
    CurrentUser,
    OptionalUser,
)
from tailblocks.api.dependencies.query import (
    get_component_query,
    ComponentQueryParams,
)
from tailblocks.api.dependencies.services import (
    get_auth_service,
    get_user_service,
    get_component_service,
    get_favorite_service,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_optional_user",
    "CurrentUser",
    "OptionalUser",
    # Query
    "get_component_query",
    "ComponentQueryParams",
    # Services
    "get_auth_service",
    "get_user_service",
    "get_component_service",
    "get_favorite_service",
]
