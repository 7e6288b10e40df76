"""Tests for registration and login endpoints."""
from httpx import AsyncClient

from tailblocks.config.settings import settings
from tailblocks.shared.utils.security import SecurityUtils


async def test_register_returns_201(register_user) -> None:
    response = await register_user("alice")
    assert response.status_code == 201
    assert response.json() == {"message": "Registration successful", "success": True}


async def test_register_duplicate_username_is_conflict(register_user) -> None:
    await register_user("alice", email="alice@x.com")

    response = await register_user("alice", email="other@x.com")
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "CONFLICT"


async def test_register_duplicate_email_is_conflict(register_user) -> None:
    await register_user("alice", email="alice@x.com")

    response = await register_user("alice2", email="ALICE@x.com")
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "CONFLICT"


async def test_register_duplicate_leaves_single_account(
    client: AsyncClient, register_user, login_headers,
) -> None:
    await register_user("alice", password="secret1")
    await register_user("alice", password="different")

    # The original password still works, so the first record was kept as-is
    headers = await login_headers("alice@x.com", "secret1")
    response = await client.get("/api/users/me", headers=headers)
    assert response.json()["username"] == "alice"


async def test_register_validates_fields(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/register",
        json={"username": "al", "email": "not-an-email", "password": "123"},
    )
    assert response.status_code == 400

    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {item["field"] for item in error["details"]["errors"]}
    assert fields == {"username", "email", "password"}


async def test_register_trims_username_and_lowercases_email(
    client: AsyncClient, register_user, login_headers,
) -> None:
    response = await register_user("  carol  ", email="  Carol@X.com ")
    assert response.status_code == 201

    headers = await login_headers("carol@x.com")
    profile = (await client.get("/api/users/me", headers=headers)).json()
    assert profile["username"] == "carol"
    assert profile["email"] == "carol@x.com"


async def test_login_wrong_password(client: AsyncClient, register_user) -> None:
    await register_user("alice")

    response = await client.post(
        "/api/auth/login",
        json={"email": "alice@x.com", "password": "wrong-password"},
    )
    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Email or password incorrect"


async def test_login_unknown_email_has_same_message(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/login",
        json={"email": "nobody@x.com", "password": "secret1"},
    )
    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Email or password incorrect"


async def test_login_returns_token_and_user(client: AsyncClient, register_user) -> None:
    await register_user("alice")

    response = await client.post(
        "/api/auth/login",
        json={"email": "Alice@X.com", "password": "secret1"},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["expiresIn"] == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    assert data["user"]["username"] == "alice"
    assert data["user"]["email"] == "alice@x.com"
    assert "password" not in str(data["user"]).lower()

    payload = SecurityUtils.decode_access_token(data["token"], settings.SECRET_KEY)
    assert payload["sub"] == data["user"]["id"]
