"""
Authentication Handler

Handles user registration and login endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Service exceptions
(DuplicateResourceError, AuthenticationError) propagate to the global
exception handlers, which render the error envelope.
"""

from fastapi import APIRouter, Depends, status

from tailblocks.api.dependencies.services import get_auth_service
from tailblocks.shared.schemas.common import MessageResponse
from tailblocks.shared.schemas.user import (
    LoginResponse,
    UserLogin,
    UserRegister,
    UserSummary,
)
from tailblocks.shared.services.auth_service import AuthService


router = APIRouter()


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Raises:
        400: If username or email is already taken, or the body is invalid
    """
    await auth_service.register_user(
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
    )
    return MessageResponse(message="Registration successful")


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and return JWT token.

    Raises:
        401: If credentials are invalid
    """
    user, access_token, expires_in = await auth_service.login_user(
        email=credentials.email,
        password=credentials.password,
    )
    return LoginResponse(
        token=access_token,
        expires_in=expires_in,
        user=UserSummary.model_validate(user),
    )
