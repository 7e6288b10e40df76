"""
Component Repository

Database operations specific to the Component model.

Common Operations:
==================
- get_with_author()  → Single component with its author eagerly loaded
- search()           → Filtered, ordered catalog listing

Term Search:
============
The search text is split on whitespace. A component matches when ANY term
occurs (case-insensitively) in its name, its description or one of its tags:

    WHERE (name ILIKE '%card%' OR description ILIKE '%card%'
           OR EXISTS (SELECT 1 FROM <tag values> AS tag WHERE tag.value ILIKE '%card%'))
       OR (name ILIKE '%dark%' OR ...)

Tag values come from jsonb_array_elements_text() on PostgreSQL and
json_each() on SQLite. Name ordering uses the "C" collation on PostgreSQL.

Popularity:
===========
SortKey.POPULAR orders by how many users favorited the component. The
count is computed from user_favorites with a correlated subquery; no
counter is stored on the component row.
"""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import func, literal, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from tailblocks.shared.repositories.base import BaseRepository
from tailblocks.shared.models.component import Component
from tailblocks.shared.models.enums import ComponentCategory, SortKey
from tailblocks.shared.models.user_favorite import UserFavorite


def _like_pattern(term: str) -> str:
    """Wrap a search term for a contains-match, escaping LIKE wildcards."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class ComponentRepository(BaseRepository[Component]):
    """Repository for Component entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Component, session)

    @property
    def _dialect(self) -> str:
        return self.session.bind.dialect.name

    def _tag_matches(self, pattern: str):
        """
        EXISTS over the individual tag values of the outer component row.

        Matching the serialized JSON array instead would let brackets, quotes
        and commas match, and miss non-ASCII tags that SQLite stores escaped.
        """
        if self._dialect == "postgresql":
            elements = func.jsonb_array_elements_text(Component.tags)
        else:
            elements = func.json_each(Component.tags)
        tag = elements.table_valued("value").alias("tag")
        return (
            select(literal(1))
            .select_from(tag)
            .where(tag.c.value.ilike(pattern, escape="\\"))
            .exists()
        )

    def _name_order(self):
        # Byte order, not the locale collation of the PostgreSQL database
        if self._dialect == "postgresql":
            return Component.name.collate("C")
        return Component.name

    async def get_with_author(self, component_id: UUID) -> Optional[Component]:
        """
        Get a component with its author loaded in the same query.

        Args:
            component_id: Component UUID

        Returns:
            Component if found, None otherwise
        """
        stmt = (
            select(Component)
            .options(joinedload(Component.author))
            .where(Component.id == component_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(
        self,
        *,
        terms: Sequence[str] = (),
        category: Optional[ComponentCategory] = None,
        favorites_of: Optional[UUID] = None,
        sort: SortKey = SortKey.NEWEST,
    ) -> list[Component]:
        """
        List components matching the given filters.

        Args:
            terms: Search terms; any one matching is enough
            category: Restrict to a single category
            favorites_of: Restrict to the favorites set of this user
            sort: Ordering to apply

        Returns:
            Components with their authors loaded
        """
        stmt = select(Component).options(joinedload(Component.author))

        if terms:
            term_conditions = []
            for term in terms:
                pattern = _like_pattern(term)
                term_conditions.append(
                    or_(
                        Component.name.ilike(pattern, escape="\\"),
                        Component.description.ilike(pattern, escape="\\"),
                        self._tag_matches(pattern),
                    )
                )
            stmt = stmt.where(or_(*term_conditions))

        if category is not None:
            stmt = stmt.where(Component.category == category)

        if favorites_of is not None:
            favorite_ids = select(UserFavorite.component_id).where(
                UserFavorite.user_id == favorites_of
            )
            stmt = stmt.where(Component.id.in_(favorite_ids))

        if sort == SortKey.NAME:
            stmt = stmt.order_by(self._name_order().asc())
        elif sort == SortKey.POPULAR:
            favorite_count = (
                select(func.count())
                .select_from(UserFavorite)
                .where(UserFavorite.component_id == Component.id)
                .correlate(Component)
                .scalar_subquery()
            )
            stmt = stmt.order_by(favorite_count.desc(), Component.created_at.desc())
        else:
            stmt = stmt.order_by(Component.created_at.desc())

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
