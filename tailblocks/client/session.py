"""
Client Session

Token persistence and the authenticated session of the client.

Lifecycle:
==========
    AuthSession.restore()   ← load the stored token, revalidate via /users/me,
                              discard it if the backend rejects it
    AuthSession.login()     ← store the new token, cache the user
    AuthSession.logout()    ← forget token and user

The token is the only thing written to disk. It lives in a JSON file,
readable by the owner only, under the key "tailblocks.authToken".

Usage:
======
    session = AuthSession(http, TokenStore(settings.TOKEN_FILE))
    session.restore()
    if session.is_authenticated:
        http.get("/components", headers=session.auth_header())
"""

import json
import os
from pathlib import Path
from typing import Optional

import httpx
import structlog

from tailblocks.client.exceptions import ClientError, raise_for_error
from tailblocks.client.models import User

logger = structlog.get_logger(__name__)

TOKEN_KEY = "tailblocks.authToken"


class TokenStore:
    """Persists a single token string in a user-private JSON file."""

    def __init__(self, path: Path, key: str = TOKEN_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("Token file unreadable, ignoring", path=str(self.path))
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(data, handle)
        os.chmod(self.path, 0o600)

    def get(self) -> Optional[str]:
        token = self._read().get(self.key)
        return token if isinstance(token, str) and token else None

    def store(self, token: str) -> None:
        data = self._read()
        data[self.key] = token
        self._write(data)

    def delete(self) -> None:
        data = self._read()
        if self.key not in data:
            return
        del data[self.key]
        if data:
            self._write(data)
        else:
            self.path.unlink(missing_ok=True)


class AuthSession:
    """
    Bearer token plus cached profile of the logged-in user.

    Attributes:
        http: httpx.Client with base_url set to the API root
        store: Where the token is persisted
    """

    def __init__(self, http: httpx.Client, store: TokenStore) -> None:
        self.http = http
        self.store = store
        self._token: Optional[str] = None
        self._current_user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    @property
    def current_user(self) -> Optional[User]:
        return self._current_user

    def auth_header(self) -> dict[str, str]:
        """Authorization header for the current token, empty when logged out."""
        return {"Authorization": f"Bearer {self._token}"} if self._token else {}

    def restore(self) -> bool:
        """
        Load the stored token and revalidate it.

        A token the backend rejects, or that cannot be checked, is discarded.

        Returns:
            True if a valid session was restored
        """
        self._token = self.store.get()
        if not self._token:
            return False
        try:
            self.refresh_user()
        except ClientError as e:
            logger.info("Stored token discarded", reason=str(e))
            self._token = None
            self._current_user = None
            self.store.delete()
            return False
        return True

    def refresh_user(self) -> User:
        """
        Fetch the current user from /users/me.

        Raises:
            ClientError: If the request fails or the token is rejected
        """
        try:
            response = self.http.get("/users/me", headers=self.auth_header())
        except httpx.HTTPError as e:
            raise ClientError(f"Could not reach server: {e}") from e
        raise_for_error(response, "Failed to fetch user")
        self._current_user = User.model_validate(response.json())
        return self._current_user

    def login(self, email: str, password: str) -> User:
        """
        Log in and persist the token.

        Raises:
            ClientError: With the backend message on failure
        """
        try:
            response = self.http.post(
                "/auth/login",
                json={"email": email, "password": password},
            )
        except httpx.HTTPError as e:
            raise ClientError(f"Could not reach server: {e}") from e
        raise_for_error(response, "Login failed")

        body = response.json()
        self._token = body["token"]
        self._current_user = User.model_validate(body["user"])
        self.store.store(self._token)
        logger.info("Logged in", user_id=self._current_user.id)
        return self._current_user

    def register(self, username: str, email: str, password: str) -> str:
        """
        Create an account. Does not log in.

        Returns:
            The backend's confirmation message

        Raises:
            ClientError: With the backend message on failure
        """
        try:
            response = self.http.post(
                "/auth/register",
                json={"username": username, "email": email, "password": password},
            )
        except httpx.HTTPError as e:
            raise ClientError(f"Could not reach server: {e}") from e
        raise_for_error(response, "Registration failed")
        return response.json().get("message", "Registration successful")

    def logout(self) -> None:
        self._token = None
        self._current_user = None
        self.store.delete()
