"""
Security Utilities

Credential handling for Tailblocks accounts.

Passwords:
==========
Stored only as bcrypt hashes (passlib, random salt per hash). A hash is
recomputed only when a new plaintext password is supplied.

Login Tokens:
=============
HS256 JWTs signed with Settings.SECRET_KEY:

    {"sub": "<user uuid>", "iat": <issued>, "exp": <issued + lifetime>}

The gate trusts "sub" only after the signature and expiry check passed.

Usage:
======
    from tailblocks.shared.utils.security import SecurityUtils

    user.password_hash = SecurityUtils.hash_password(plaintext)

    token = SecurityUtils.create_access_token(str(user.id), settings.SECRET_KEY)
    user_id = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)["sub"]
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from passlib.context import CryptContext


DEFAULT_TOKEN_LIFETIME = timedelta(days=7)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class SecurityUtils:
    """Password hashing and login token helpers. Stateless."""

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """True when plain_password produces hashed_password."""
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def create_access_token(
        subject: str,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Issue a login token for a user.

        Args:
            subject: User id, stored as "sub"
            secret_key: Signing key
            expires_delta: Lifetime (default: 7 days)
            algorithm: Signing algorithm

        Returns:
            Compact JWT string
        """
        issued_at = datetime.now(timezone.utc)
        claims = {
            "sub": subject,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or DEFAULT_TOKEN_LIFETIME),
        }
        return jwt.encode(claims, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict[str, Any]:
        """
        Verify a login token and return its claims.

        Raises:
            ValueError: Expired, badly signed, malformed, or missing "sub"/"exp"
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ValueError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}") from e
