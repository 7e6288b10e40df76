"""
Authentication Service

Account creation and credential checks.

Registration:
=============
Username and email are both unique. Either one being taken rejects the
registration with the same "User already exists" message, whether the
clash is found by the pre-check or by the database constraint (two
concurrent registrations).

Login:
======
Unknown email and wrong password produce the identical 401 message, so the
endpoint cannot be used to probe which emails are registered.

Usage:
======
    from tailblocks.shared.services.auth_service import AuthService

    service = AuthService(db)
    await service.register_user("alice", "alice@x.com", "secret1")
    user, token, expires_in = await service.login_user("alice@x.com", "secret1")
"""

from datetime import timedelta
from typing import Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tailblocks.config.settings import settings
from tailblocks.shared.core.exceptions import AuthenticationError, DuplicateResourceError
from tailblocks.shared.core.logging import get_logger
from tailblocks.shared.models.user import User
from tailblocks.shared.repositories.user_repository import UserRepository
from tailblocks.shared.utils.security import SecurityUtils

logger = get_logger(__name__)

USER_EXISTS = "User already exists"
INVALID_CREDENTIALS = "Email or password incorrect"


class AuthService:
    """
    Registration and login.

    Attributes:
        session: Request-scoped database session
        repo: UserRepository bound to the session
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def register_user(self, username: str, email: str, password: str) -> User:
        """
        Create an account.

        Args:
            username: Trimmed display name
            email: Trimmed, lowercased email
            password: Plaintext; only its bcrypt hash is stored

        Raises:
            DuplicateResourceError: Username or email already in use
        """
        if await self.repo.find_by_username_or_email(username=username, email=email):
            raise DuplicateResourceError(USER_EXISTS)

        try:
            user = await self.repo.create(
                username=username,
                email=email,
                password_hash=SecurityUtils.hash_password(password),
            )
        except IntegrityError:
            raise DuplicateResourceError(USER_EXISTS)

        logger.info("User registered", user_id=str(user.id))
        return user

    async def login_user(self, email: str, password: str) -> Tuple[User, str, int]:
        """
        Check credentials and issue a login token.

        Returns:
            (user, token, lifetime in seconds)

        Raises:
            AuthenticationError: Unknown email or wrong password
        """
        user = await self.repo.get_by_email(email)
        if user is None or not SecurityUtils.verify_password(password, user.password_hash):
            logger.info("Login rejected")
            raise AuthenticationError(INVALID_CREDENTIALS)

        lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        token = SecurityUtils.create_access_token(
            subject=str(user.id),
            secret_key=settings.SECRET_KEY,
            expires_delta=lifetime,
            algorithm=settings.JWT_ALGORITHM,
        )

        logger.info("User logged in", user_id=str(user.id))
        return user, token, int(lifetime.total_seconds())
