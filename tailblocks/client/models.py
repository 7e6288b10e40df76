"""
Client Models

Shapes of the API responses the client consumes. Keys arrive in camelCase.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ClientModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Author(ClientModel):
    id: str
    username: str


class Component(ClientModel):
    """A catalog entry as returned by the API."""

    id: str
    name: str
    description: str
    category: str
    tags: list[str] = Field(default_factory=list)
    code: str
    author: Author
    created_at: Optional[datetime] = None
    is_favorite: bool = False


class User(ClientModel):
    id: str
    username: str
    email: str
    favorites: list[str] = Field(default_factory=list)
