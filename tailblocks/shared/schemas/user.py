"""
User Schemas

Request/response models for authentication and profile endpoints.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from tailblocks.shared.schemas.common import BaseSchema


def _normalize_email(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip().lower()


class UserRegister(BaseSchema):
    """Schema for user registration."""

    username: str = Field(min_length=3, max_length=30)
    email: EmailStr
    password: str = Field(min_length=6, description="Password (minimum 6 characters)")

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value) if isinstance(value, str) else value


class UserLogin(BaseSchema):
    """Schema for user login."""

    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value) if isinstance(value, str) else value


class UserUpdate(BaseSchema):
    """Schema for profile updates. Omitted fields are left unchanged."""

    username: Optional[str] = Field(default=None, min_length=3, max_length=30)
    email: Optional[EmailStr] = None

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value) if isinstance(value, str) else value


class UserSummary(BaseSchema):
    """Public identity returned with a login token."""

    id: UUID
    username: str
    email: str


class AuthorSummary(BaseSchema):
    """Author fields embedded in component responses."""

    id: UUID
    username: str


class UserProfile(BaseSchema):
    """Current user, without the password hash."""

    id: UUID
    username: str
    email: str
    favorites: list[UUID] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class LoginResponse(BaseSchema):
    """Schema for a successful login."""

    token: str
    expires_in: int  # seconds
    user: UserSummary
