"""
User Handler

Profile endpoints for the authenticated user.
"""

from fastapi import APIRouter, Depends

from tailblocks.api.dependencies.auth import CurrentUser
from tailblocks.api.dependencies.services import get_user_service
from tailblocks.shared.schemas.user import UserProfile, UserUpdate
from tailblocks.shared.services.user_service import UserService


router = APIRouter()


@router.get("/me", response_model=UserProfile)
async def get_me(
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """Get the current user without the password hash."""
    return await user_service.get_profile(current_user["user_id"])


@router.put("/me", response_model=UserProfile)
async def update_me(
    data: UserUpdate,
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Update username and/or email.

    Raises:
        400: If another user already holds either value
    """
    return await user_service.update_profile(
        current_user["user_id"],
        username=data.username,
        email=data.email,
    )
