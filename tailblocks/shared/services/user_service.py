"""
User Service

Profile read and update for the authenticated user.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tailblocks.shared.core.exceptions import DuplicateResourceError, UserNotFoundError
from tailblocks.shared.core.logging import get_logger
from tailblocks.shared.repositories.favorite_repository import FavoriteRepository
from tailblocks.shared.repositories.user_repository import UserRepository
from tailblocks.shared.schemas.user import UserProfile

logger = get_logger(__name__)


class UserService:
    """Service for the current user's profile."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)
        self.favorites = FavoriteRepository(session)

    async def get_profile(self, user_id: UUID) -> UserProfile:
        """
        Get the user's profile, including the favorites set.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.repo.get(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        favorite_ids = await self.favorites.get_component_ids(user_id)
        return UserProfile(
            id=user.id,
            username=user.username,
            email=user.email,
            favorites=sorted(favorite_ids, key=str),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    async def update_profile(
        self,
        user_id: UUID,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> UserProfile:
        """
        Update username and/or email.

        Raises:
            UserNotFoundError: If the user does not exist
            DuplicateResourceError: If another user holds either value
        """
        if not await self.repo.exists(user_id):
            raise UserNotFoundError(str(user_id))

        conflict = await self.repo.find_by_username_or_email(
            username=username,
            email=email,
            exclude_id=user_id,
        )
        if conflict:
            raise DuplicateResourceError("Username or email already in use")

        try:
            await self.repo.update(user_id, username=username, email=email)
        except IntegrityError:
            raise DuplicateResourceError("Username or email already in use")

        logger.info("Profile updated", user_id=str(user_id))
        return await self.get_profile(user_id)
