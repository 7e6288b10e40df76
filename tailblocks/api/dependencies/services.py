"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

Usage:
======
    from tailblocks.api.dependencies.services import get_component_service

    @router.get("/{component_id}")
    async def get_component(
        component_id: str,
        service: ComponentService = Depends(get_component_service),
    ):
        return await service.get_component(component_id)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tailblocks.api.dependencies.database import get_db
from tailblocks.shared.services.auth_service import AuthService
from tailblocks.shared.services.component_service import ComponentService
from tailblocks.shared.services.favorite_service import FavoriteService
from tailblocks.shared.services.user_service import UserService


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_user_service(
    db: AsyncSession = Depends(get_db),
) -> UserService:
    return UserService(db)


async def get_component_service(
    db: AsyncSession = Depends(get_db),
) -> ComponentService:
    """
    Dependency to get ComponentService instance.
    """
    return ComponentService(db)


async def get_favorite_service(
    db: AsyncSession = Depends(get_db),
) -> FavoriteService:
    return FavoriteService(db)
