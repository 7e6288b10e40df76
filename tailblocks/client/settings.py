"""
Client Settings

Configuration for the client library and command line tool, loaded from
TAILBLOCKS_* environment variables (or a .env file).

    TAILBLOCKS_API_URL     Base URL of the API, e.g. http://localhost:3000/api (required)
    TAILBLOCKS_TOKEN_FILE  Where the login token is kept
    TAILBLOCKS_TIMEOUT     Request timeout in seconds

Kept apart from tailblocks.config so the client never needs server secrets.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_token_file() -> Path:
    return Path.home() / ".config" / "tailblocks" / "credentials.json"


class ClientSettings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TAILBLOCKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    API_URL: str = Field(
        min_length=1,
        description="Base URL of the Tailblocks API (required)",
    )
    TOKEN_FILE: Path = Field(default_factory=default_token_file)
    TIMEOUT: float = Field(default=30.0, gt=0)
