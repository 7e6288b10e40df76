"""
Favorite Service

Toggles a component in the caller's favorites set.
"""

from typing import Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tailblocks.shared.core.exceptions import ComponentNotFoundError, UserNotFoundError
from tailblocks.shared.core.logging import get_logger
from tailblocks.shared.repositories.component_repository import ComponentRepository
from tailblocks.shared.repositories.favorite_repository import FavoriteRepository
from tailblocks.shared.repositories.user_repository import UserRepository
from tailblocks.shared.services.component_service import parse_component_id

logger = get_logger(__name__)


class FavoriteService:
    """Service for favorites membership changes."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = FavoriteRepository(session)
        self.components = ComponentRepository(session)
        self.users = UserRepository(session)

    async def toggle_favorite(
        self,
        component_id: Union[str, UUID],
        user_id: UUID,
    ) -> bool:
        """
        Flip the component's membership in the user's favorites set.

        Args:
            component_id: Component to toggle (raw path value accepted)
            user_id: Caller identity

        Returns:
            True if the component is now a favorite, False otherwise

        Raises:
            ComponentNotFoundError: Unknown or malformed component id
            UserNotFoundError: Caller no longer exists
        """
        parsed_id = parse_component_id(component_id)
        if not await self.components.exists(parsed_id):
            raise ComponentNotFoundError(str(component_id))
        if not await self.users.exists(user_id):
            raise UserNotFoundError(str(user_id))

        is_favorite = await self.repo.toggle(user_id, parsed_id)
        logger.info(
            "Favorite toggled",
            component_id=str(parsed_id),
            is_favorite=is_favorite,
        )
        return is_favorite
