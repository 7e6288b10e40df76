"""Client fixtures: an in-process fake of the API behind httpx.MockTransport."""
import json
from collections.abc import Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

from tailblocks.client.api_client import ComponentClient
from tailblocks.client.session import AuthSession, TokenStore

BASE_URL = "http://api.test/api"
VALID_TOKEN = "valid-token"


def component_payload(**overrides: Any) -> dict[str, Any]:
    data = {
        "id": "c1",
        "name": "Btn",
        "description": "A primary call to action button",
        "category": "buttons",
        "tags": ["ui"],
        "code": "<button>Go</button>",
        "author": {"id": "u1", "username": "alice"},
        "createdAt": "2026-10-19T10:00:00Z",
        "isFavorite": False,
    }
    data.update(overrides)
    return data


def error(status: int, message: str) -> httpx.Response:
    return httpx.Response(
        status,
        json={"error": {"code": "ERR", "message": message, "details": {}}},
    )


class FakeBackend:
    """Answers the API routes the client uses and records every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.components = [component_payload()]
        self.favorites: set[str] = set()
        self.fail_with: str | None = None

    def _authorized(self, request: httpx.Request) -> bool:
        return request.headers.get("Authorization") == f"Bearer {VALID_TOKEN}"

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with:
            return error(500, self.fail_with)
        path = request.url.path.removeprefix("/api")

        if path == "/auth/login" and request.method == "POST":
            body = json.loads(request.content)
            if body["password"] != "secret1":
                return error(401, "Email or password incorrect")
            return httpx.Response(200, json={
                "token": VALID_TOKEN,
                "expiresIn": 604800,
                "user": {"id": "u1", "username": "alice", "email": body["email"]},
            })

        if path == "/auth/register" and request.method == "POST":
            body = json.loads(request.content)
            if body["username"] == "taken":
                return error(400, "User already exists")
            return httpx.Response(201, json={"message": "Registration successful", "success": True})

        if path == "/users/me":
            if not self._authorized(request):
                return error(401, "Invalid token")
            return httpx.Response(200, json={
                "id": "u1",
                "username": "alice",
                "email": "alice@x.com",
                "favorites": sorted(self.favorites),
            })

        if path == "/components" and request.method == "GET":
            if request.url.params.get("favorites") == "true":
                if not self._authorized(request):
                    return error(401, "Login required to list favorites")
                rows = [c for c in self.components if c["id"] in self.favorites]
            else:
                rows = list(self.components)
            return httpx.Response(200, json=rows)

        if path == "/components" and request.method == "POST":
            if not self._authorized(request):
                return error(401, "No token provided")
            body = json.loads(request.content)
            created = component_payload(id="c2", **body)
            created.pop("isFavorite")
            return httpx.Response(201, json=created)

        if path.startswith("/components/"):
            parts = path.split("/")
            component_id = parts[2]
            match = [c for c in self.components if c["id"] == component_id]
            if not match:
                return error(404, f"Component with id '{component_id}' not found")
            if len(parts) == 4 and parts[3] == "favorite":
                if not self._authorized(request):
                    return error(401, "No token provided")
                if component_id in self.favorites:
                    self.favorites.remove(component_id)
                else:
                    self.favorites.add(component_id)
                return httpx.Response(200, json={"isFavorite": component_id in self.favorites})
            return httpx.Response(200, json=match[0])

        return error(500, "unexpected route")


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def http(backend: FakeBackend) -> Generator[httpx.Client]:
    with httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(backend)) as client:
        yield client


@pytest.fixture
def token_store(tmp_path: Path) -> TokenStore:
    return TokenStore(tmp_path / "credentials.json")


@pytest.fixture
def session(http: httpx.Client, token_store: TokenStore) -> AuthSession:
    return AuthSession(http, token_store)


@pytest.fixture
def logged_in(session: AuthSession) -> AuthSession:
    session.login("alice@x.com", "secret1")
    return session


@pytest.fixture
def component_client(http: httpx.Client, session: AuthSession) -> ComponentClient:
    return ComponentClient(http, session)


@pytest.fixture
def make_component():
    return component_payload
