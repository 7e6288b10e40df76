"""
Component Handler

Catalog endpoints: list, lookup, upload and favorite toggle.

Identity Requirements:
======================
    GET  /components                  optional  (favorites=true needs one)
    GET  /components/{id}             optional
    POST /components                  mandatory
    POST /components/{id}/favorite    mandatory

With an identity, listed and fetched components carry isFavorite for the
caller. Without one, isFavorite is always false.
"""

from fastapi import APIRouter, Depends, status

from tailblocks.api.dependencies.auth import CurrentUser, OptionalUser
from tailblocks.api.dependencies.query import ComponentQueryParams
from tailblocks.api.dependencies.services import (
    get_component_service,
    get_favorite_service,
)
from tailblocks.shared.schemas.component import (
    ComponentCreate,
    ComponentListItem,
    ComponentResponse,
    FavoriteToggleResponse,
)
from tailblocks.shared.services.component_service import ComponentService
from tailblocks.shared.services.favorite_service import FavoriteService


router = APIRouter()


@router.get("", response_model=list[ComponentListItem])
async def list_components(
    query: ComponentQueryParams,
    user: OptionalUser,
    component_service: ComponentService = Depends(get_component_service),
):
    """
    List components.

    Query params: search, category, sort (newest|name|popular), favorites.

    Raises:
        400: Unknown sort key
        401: favorites=true without a valid token
    """
    user_id = user["user_id"] if user else None
    return await component_service.list_components(query, user_id)


@router.get("/{component_id}", response_model=ComponentListItem)
async def get_component(
    component_id: str,
    user: OptionalUser,
    component_service: ComponentService = Depends(get_component_service),
):
    """
    Get one component.

    Raises:
        404: Unknown or malformed id
    """
    user_id = user["user_id"] if user else None
    return await component_service.get_component(component_id, user_id)


@router.post(
    "",
    response_model=ComponentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_component(
    data: ComponentCreate,
    current_user: CurrentUser,
    component_service: ComponentService = Depends(get_component_service),
):
    """
    Upload a component authored by the caller.

    Raises:
        400: Invalid body
        401: Missing or invalid token
    """
    return await component_service.create_component(current_user["user_id"], data)


@router.post("/{component_id}/favorite", response_model=FavoriteToggleResponse)
async def toggle_favorite(
    component_id: str,
    current_user: CurrentUser,
    favorite_service: FavoriteService = Depends(get_favorite_service),
):
    """
    Toggle the component in the caller's favorites.

    Raises:
        404: Unknown component or user
    """
    is_favorite = await favorite_service.toggle_favorite(
        component_id,
        current_user["user_id"],
    )
    return FavoriteToggleResponse(is_favorite=is_favorite)
