"""
Base Repository

Shared data access for the Tailblocks entities. UserRepository and
ComponentRepository subclass it and add their own queries; the favorites
junction table has no id column and uses FavoriteRepository instead.

Operations:
===========
- get(id)              → Row by primary key, or None
- exists(id)           → Primary key lookup without loading the row
- create(**fields)     → Insert, then reload server/default values
- update(id, **fields) → Partial update; None means "leave as is"

Transactions:
=============
Nothing here commits. Writes are flushed so constraint violations surface
inside the service call; get_db() commits or rolls back the whole request.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tailblocks.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Primary-key CRUD for one mapped model.

    Attributes:
        model: Mapped class handled by this repository
        session: Request-scoped async session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        stmt = select(self.model).where(self.model.id == record_id)
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def exists(self, record_id: UUID) -> bool:
        """
        Test whether a row with this id is present.

        Used by services to turn dangling ids into NotFound errors before
        writing to a table that references them.
        """
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(self.model.id == record_id)
        )
        return bool((await self.session.execute(stmt)).scalar())

    async def create(self, **fields: Any) -> ModelType:
        """
        Insert a row.

        Args:
            **fields: Column values

        Returns:
            The new instance with id and timestamps populated

        Raises:
            IntegrityError: On a unique or foreign key violation
        """
        record = self.model(**fields)
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def update(self, record_id: UUID, **fields: Any) -> Optional[ModelType]:
        """
        Apply the non-None fields to an existing row.

        Returns:
            The refreshed instance, or None if the id is unknown

        Raises:
            IntegrityError: On a unique violation
        """
        record = await self.get(record_id)
        if record is None:
            return None

        changes = {name: value for name, value in fields.items() if value is not None}
        for name, value in changes.items():
            setattr(record, name, value)

        if changes:
            await self.session.flush()
            await self.session.refresh(record)
        return record
