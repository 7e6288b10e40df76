"""
Favorite Repository

Data access for the user_favorites junction table, i.e. each user's
favorites set.

Toggle Semantics:
=================
toggle() never reads the set before writing it:

    1. DELETE the (user, component) row
    2. If a row was deleted      → now unfavorited
    3. Otherwise INSERT the row  → now favorited

The INSERT runs in a savepoint. If a concurrent request inserted the same
pair first, the composite primary key rejects ours and the pair is simply
reported as favorited. A duplicate membership row cannot be produced.
Any other integrity failure (a user or component deleted in between) is
raised, never reported as a successful toggle.
"""

from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tailblocks.shared.models.user_favorite import UserFavorite


class FavoriteRepository:
    """Repository for UserFavorite rows."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_component_ids(self, user_id: UUID) -> set[UUID]:
        """
        Get the favorites set of a user.

        Args:
            user_id: Owner of the set

        Returns:
            Set of favorited component ids
        """
        result = await self.session.execute(
            select(UserFavorite.component_id).where(UserFavorite.user_id == user_id)
        )
        return set(result.scalars().all())

    async def remove(self, user_id: UUID, component_id: UUID) -> bool:
        """
        Remove a component from the user's favorites.

        Returns:
            True if a row was deleted, False if it was not a favorite
        """
        result = await self.session.execute(
            delete(UserFavorite).where(
                UserFavorite.user_id == user_id,
                UserFavorite.component_id == component_id,
            )
        )
        return result.rowcount > 0

    async def add(self, user_id: UUID, component_id: UUID) -> bool:
        """
        Add a component to the user's favorites.

        Returns:
            True if a row was inserted, False if it was already present

        Raises:
            IntegrityError: Any other violation (unknown user or component)
        """
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(UserFavorite).values(user_id=user_id, component_id=component_id)
                )
        except IntegrityError:
            if await self.contains(user_id, component_id):
                return False
            raise
        return True

    async def contains(self, user_id: UUID, component_id: UUID) -> bool:
        result = await self.session.execute(
            select(UserFavorite.user_id).where(
                UserFavorite.user_id == user_id,
                UserFavorite.component_id == component_id,
            )
        )
        return result.first() is not None

    async def toggle(self, user_id: UUID, component_id: UUID) -> bool:
        """
        Flip membership of component_id in the user's favorites set.

        Args:
            user_id: Owner of the set
            component_id: Component to toggle

        Returns:
            The new membership state (True = favorited)
        """
        if await self.remove(user_id, component_id):
            return False
        await self.add(user_id, component_id)
        return True
