"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods.

Common Operations:
==================
- get_by_email()             → Find user by email address (login)
- find_by_username_or_email() → Single combined uniqueness lookup
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from tailblocks.shared.repositories.base import BaseRepository
from tailblocks.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.

    Provides methods for common user queries beyond basic CRUD:
    - Looking up users by email
    - Checking username/email availability
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Emails are stored lowercased, so callers pass a normalized address.

        Args:
            email: Email address to search for

        Returns:
            User if found, None otherwise
        """
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def find_by_username_or_email(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
        exclude_id: Optional[UUID] = None,
    ) -> Optional[User]:
        """
        Find any user holding the given username or email.

        One query covers both fields. Passing exclude_id skips the caller's
        own record, which is what profile updates need.

        Args:
            username: Username to check (optional)
            email: Email to check (optional)
            exclude_id: User id to ignore

        Returns:
            The first conflicting user, or None if both values are free

        SQL Generated:
            SELECT * FROM users
            WHERE (username = :username OR email = :email) AND id != :exclude_id
            LIMIT 1
        """
        conditions = []
        if username is not None:
            conditions.append(User.username == username)
        if email is not None:
            conditions.append(User.email == email)
        if not conditions:
            return None

        query = select(User).where(or_(*conditions))
        if exclude_id is not None:
            query = query.where(User.id != exclude_id)

        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()
