"""
Component Schemas

Request/response models for the component catalog.

Schema Flow:
============
    ComponentCreate     → POST /api/components body
    ComponentResponse   → 201 body of a create (no favorite annotation)
    ComponentListItem   → list and detail rows (carries isFavorite)
    ComponentQuery      → parsed query string of GET /api/components
    FavoriteToggleResponse → {"isFavorite": bool}
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from tailblocks.shared.models.enums import ComponentCategory, SortKey
from tailblocks.shared.schemas.common import BaseSchema
from tailblocks.shared.schemas.user import AuthorSummary


class ComponentCreate(BaseSchema):
    """Schema for uploading a component."""

    name: str = Field(min_length=3, max_length=100)
    description: str = Field(min_length=10, max_length=500)
    category: ComponentCategory
    tags: list[str] = Field(default_factory=list)
    code: str = Field(min_length=1)

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, value: list[str]) -> list[str]:
        return [tag.strip() for tag in value if tag.strip()]

    @field_validator("code")
    @classmethod
    def code_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Code is required")
        return value


class ComponentResponse(BaseSchema):
    """Component as stored, with its author summary."""

    id: UUID
    name: str
    description: str
    category: ComponentCategory
    tags: list[str]
    code: str
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime


class ComponentListItem(ComponentResponse):
    """Component annotated for the caller."""

    is_favorite: bool = False


class FavoriteToggleResponse(BaseSchema):
    """New membership state after a toggle."""

    is_favorite: bool


@dataclass(frozen=True)
class ComponentQuery:
    """
    Closed query structure for catalog listing.

    Built once at the HTTP boundary. category stays a raw string so an
    unknown value can match nothing instead of being rejected.
    """

    search_term: Optional[str] = None
    category: Optional[str] = None
    sort: SortKey = SortKey.NEWEST
    favorites_only: bool = False

    @property
    def terms(self) -> list[str]:
        return self.search_term.split() if self.search_term else []
