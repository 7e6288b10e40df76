"""Tests for the current-user profile endpoints."""
import uuid

from httpx import AsyncClient

from tailblocks.config.settings import settings
from tailblocks.shared.utils.security import SecurityUtils


async def test_get_me_requires_token(client: AsyncClient) -> None:
    response = await client.get("/api/users/me")
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


async def test_get_me_rejects_invalid_token(client: AsyncClient) -> None:
    response = await client.get(
        "/api/users/me",
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 401


async def test_get_me_rejects_token_signed_with_other_key(client: AsyncClient) -> None:
    token = SecurityUtils.create_access_token(str(uuid.uuid4()), "another-secret-key-0123456789abcdef012345")
    response = await client.get(
        "/api/users/me",
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 401


async def test_get_me_returns_profile(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    component = await create_component(alice)
    await client.post(f"/api/components/{component['id']}/favorite", headers=alice)

    response = await client.get("/api/users/me", headers=alice)
    assert response.status_code == 200

    data = response.json()
    assert data["username"] == "alice"
    assert data["email"] == "alice@x.com"
    assert data["favorites"] == [component["id"]]
    assert "createdAt" in data
    assert "updatedAt" in data
    assert "password" not in data
    assert "passwordHash" not in data


async def test_get_me_for_missing_user_is_404(client: AsyncClient) -> None:
    token = SecurityUtils.create_access_token(str(uuid.uuid4()), settings.SECRET_KEY)
    response = await client.get(
        "/api/users/me",
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 404


async def test_update_me_changes_username(client: AsyncClient, alice: dict[str, str]) -> None:
    response = await client.put("/api/users/me", json={"username": "alicia"}, headers=alice)
    assert response.status_code == 200
    assert response.json()["username"] == "alicia"
    assert response.json()["email"] == "alice@x.com"


async def test_update_me_keeping_own_values_is_allowed(
    client: AsyncClient, alice: dict[str, str],
) -> None:
    response = await client.put(
        "/api/users/me",
        json={"username": "alice", "email": "alice@x.com"},
        headers=alice,
    )
    assert response.status_code == 200


async def test_update_me_conflict_with_other_user(
    client: AsyncClient, alice: dict[str, str], bob: dict[str, str],
) -> None:
    response = await client.put("/api/users/me", json={"email": "bob@x.com"}, headers=alice)
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "CONFLICT"
