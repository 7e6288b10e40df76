"""
Common Schemas

Building blocks shared by the user and component schemas, plus the generic
payloads (confirmation message, error envelope, health probe).

Wire Format:
============
Attributes are snake_case in Python and camelCase in JSON:

    ComponentListItem.is_favorite   ↔  "isFavorite"
    UserProfile.created_at          ↔  "createdAt"

Responses are serialized by alias (FastAPI's default for response_model);
request bodies accept both spellings.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """camelCase aliases, and construction straight from ORM rows."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(BaseModel):
    message: str
    success: bool = True


class ErrorDetail(BaseModel):
    code: str = Field(description="Stable error code, e.g. NOT_FOUND")
    message: str = Field(description="Text meant to be shown to the user")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Field errors for VALIDATION_ERROR, otherwise usually empty",
    )


class ErrorResponse(BaseModel):
    """
    Body of every non-2xx API response.

        {"error": {"code": "NOT_FOUND", "message": "Component with id 'x' not found", "details": {}}}
    """

    error: ErrorDetail


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = "tailblocks"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
