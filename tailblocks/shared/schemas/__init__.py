"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, message and error responses
- user: Authentication and profile schemas
- component: Catalog schemas and the listing query

Usage:
======
    from tailblocks.shared.schemas.user import UserRegister, LoginResponse
    from tailblocks.shared.schemas.component import ComponentListItem
"""

from tailblocks.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from tailblocks.shared.schemas.user import (
    UserRegister,
    UserLogin,
    UserUpdate,
    UserSummary,
    AuthorSummary,
    UserProfile,
    LoginResponse,
)
from tailblocks.shared.schemas.component import (
    ComponentCreate,
    ComponentResponse,
    ComponentListItem,
    ComponentQuery,
    FavoriteToggleResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "UserSummary",
    "AuthorSummary",
    "UserProfile",
    "LoginResponse",
    # Component
    "ComponentCreate",
    "ComponentResponse",
    "ComponentListItem",
    "ComponentQuery",
    "FavoriteToggleResponse",
]
