"""
Authentication Dependencies

The access-control gate: FastAPI dependencies that resolve the caller
identity from an `Authorization: Bearer <token>` header.

Gate Variants:
==============
    get_current_user()    ← Mandatory. Missing/invalid/expired token → 401,
                            the handler never runs.
    get_optional_user()   ← Optional. Missing or invalid token → None,
                            the handler runs anonymously.

Both only verify the token signature and claims. Neither touches the
database; services decide what a missing user means.

On success the subject id is attached to request.state.user_id and bound
into the structlog context, so every log line of the request carries it.

Type Aliases:
=============
    CurrentUser   - {"user_id": UUID}
    OptionalUser  - {"user_id": UUID} or None

Usage:
======
    from tailblocks.api.dependencies.auth import CurrentUser, OptionalUser

    @router.post("/components")
    async def create(data: ComponentCreate, current_user: CurrentUser):
        author_id = current_user["user_id"]

    @router.get("/components")
    async def list_components(user: OptionalUser):
        user_id = user["user_id"] if user else None
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tailblocks.config.settings import settings
from tailblocks.shared.core.exceptions import AuthenticationError
from tailblocks.shared.core.logging import bind_request_user
from tailblocks.shared.utils.security import SecurityUtils


# auto_error=False: a missing header must become our 401, not FastAPI's 403
security = HTTPBearer(auto_error=False)


def _resolve_identity(credentials: Optional[HTTPAuthorizationCredentials]) -> UUID:
    """
    Verify the bearer token and return its subject.

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    if not credentials or not credentials.credentials:
        raise AuthenticationError("No token provided")

    try:
        payload = SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e

    try:
        return UUID(str(payload["sub"]))
    except (KeyError, ValueError) as e:
        raise AuthenticationError("Invalid token payload") from e


def _attach_identity(request: Request, user_id: UUID) -> dict:
    request.state.user_id = user_id
    bind_request_user(str(user_id))
    return {"user_id": user_id}


async def get_current_user(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Mandatory identity.

    Returns:
        {"user_id": UUID}

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    user_id = _resolve_identity(credentials)
    return _attach_identity(request, user_id)


async def get_optional_user(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> Optional[dict]:
    """
    Optional identity.

    Returns:
        {"user_id": UUID}, or None when no valid token was sent
    """
    try:
        user_id = _resolve_identity(credentials)
    except AuthenticationError:
        return None
    return _attach_identity(request, user_id)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[dict, Depends(get_current_user)]
OptionalUser = Annotated[Optional[dict], Depends(get_optional_user)]
