"""
Component Service

Business logic for the component catalog: listing, lookup and upload.

Query Shaping:
==============
The caller identity is optional for reads. It changes two things:

    identity present  → every row carries isFavorite from the caller's set
    identity absent   → every row carries isFavorite = false

A favorites-only listing is the one read that requires an identity.

Usage:
======
    from tailblocks.shared.services.component_service import ComponentService

    service = ComponentService(db)
    rows = await service.list_components(ComponentQuery(search_term="card"), user_id)
"""

from typing import Iterable, Optional, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tailblocks.shared.core.exceptions import (
    AuthenticationError,
    ComponentNotFoundError,
    UserNotFoundError,
)
from tailblocks.shared.core.logging import get_logger
from tailblocks.shared.models.component import Component
from tailblocks.shared.models.enums import ComponentCategory
from tailblocks.shared.repositories.component_repository import ComponentRepository
from tailblocks.shared.repositories.favorite_repository import FavoriteRepository
from tailblocks.shared.repositories.user_repository import UserRepository
from tailblocks.shared.schemas.component import (
    ComponentCreate,
    ComponentListItem,
    ComponentQuery,
    ComponentResponse,
)

logger = get_logger(__name__)


def parse_component_id(component_id: Union[str, UUID]) -> UUID:
    """
    Parse a component id taken from a URL.

    Raises:
        ComponentNotFoundError: If the value is not a UUID
    """
    if isinstance(component_id, UUID):
        return component_id
    try:
        return UUID(component_id)
    except (TypeError, ValueError):
        raise ComponentNotFoundError(str(component_id))


def annotate_favorites(
    components: Iterable[Component],
    favorite_ids: Optional[set[UUID]] = None,
) -> list[ComponentListItem]:
    """
    Build response rows with isFavorite set from a favorites set.

    Args:
        components: Components with their authors loaded
        favorite_ids: Caller's favorites set, None for anonymous callers

    Returns:
        Rows in the same order as the input
    """
    favorite_ids = favorite_ids or set()
    return [
        ComponentListItem.model_validate(component).model_copy(
            update={"is_favorite": component.id in favorite_ids}
        )
        for component in components
    ]


class ComponentService:
    """
    Service for component catalog operations.

    Attributes:
        session: Database session
        repo: ComponentRepository instance
        favorites: FavoriteRepository instance
        users: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = ComponentRepository(session)
        self.favorites = FavoriteRepository(session)
        self.users = UserRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_components(
        self,
        query: ComponentQuery,
        user_id: Optional[UUID] = None,
    ) -> list[ComponentListItem]:
        """
        List components for a catalog query.

        Args:
            query: Parsed query parameters
            user_id: Caller identity, if any

        Returns:
            Annotated component rows

        Raises:
            AuthenticationError: favorites_only without an identity
            UserNotFoundError: favorites_only for a user that no longer exists
        """
        if query.favorites_only:
            if user_id is None:
                raise AuthenticationError("Login required to list favorites")
            if not await self.users.exists(user_id):
                raise UserNotFoundError(str(user_id))

        category: Optional[ComponentCategory] = None
        if query.category is not None:
            if query.category not in ComponentCategory.values():
                # Unknown categories match nothing
                return []
            category = ComponentCategory(query.category)

        components = await self.repo.search(
            terms=query.terms,
            category=category,
            favorites_of=user_id if query.favorites_only else None,
            sort=query.sort,
        )

        favorite_ids = await self._favorite_ids(user_id)
        logger.debug(
            "Components listed",
            count=len(components),
            sort=query.sort.value,
            favorites_only=query.favorites_only,
        )
        return annotate_favorites(components, favorite_ids)

    async def get_component(
        self,
        component_id: Union[str, UUID],
        user_id: Optional[UUID] = None,
    ) -> ComponentListItem:
        """
        Get a single component.

        Raises:
            ComponentNotFoundError: Unknown or malformed id
        """
        parsed_id = parse_component_id(component_id)
        component = await self.repo.get_with_author(parsed_id)
        if not component:
            raise ComponentNotFoundError(str(component_id))

        favorite_ids = await self._favorite_ids(user_id)
        return annotate_favorites([component], favorite_ids)[0]

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_component(
        self,
        author_id: UUID,
        data: ComponentCreate,
    ) -> ComponentResponse:
        """
        Create a component authored by the caller.

        Raises:
            UserNotFoundError: If the author does not exist
        """
        if not await self.users.exists(author_id):
            raise UserNotFoundError(str(author_id))

        created = await self.repo.create(
            name=data.name,
            description=data.description,
            category=data.category,
            tags=data.tags,
            code=data.code,
            author_id=author_id,
        )
        component = await self.repo.get_with_author(created.id)

        logger.info("Component created", component_id=str(created.id))
        return ComponentResponse.model_validate(component)

    async def _favorite_ids(self, user_id: Optional[UUID]) -> Optional[set[UUID]]:
        if user_id is None:
            return None
        return await self.favorites.get_component_ids(user_id)
