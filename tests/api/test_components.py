"""Tests for the component catalog endpoints."""
import uuid

from httpx import AsyncClient

from tailblocks.config.settings import settings
from tailblocks.shared.utils.security import SecurityUtils


# ═══════════════════════════════════════════════════════════════════════════════
# CREATE
# ═══════════════════════════════════════════════════════════════════════════════


async def test_create_component(client: AsyncClient, alice: dict[str, str]) -> None:
    response = await client.post(
        "/api/components",
        json={
            "name": "Btn",
            "description": "A primary call to action button",
            "category": "buttons",
            "tags": [" ui ", "", "primary"],
            "code": "<button>Go</button>",
        },
        headers=alice,
    )
    assert response.status_code == 201

    data = response.json()
    assert data["name"] == "Btn"
    assert data["category"] == "buttons"
    assert data["tags"] == ["ui", "primary"]
    assert data["author"]["username"] == "alice"
    assert set(data["author"]) == {"id", "username"}
    assert "isFavorite" not in data
    assert data["id"]
    assert data["createdAt"]


async def test_create_component_requires_token(client: AsyncClient) -> None:
    response = await client.post(
        "/api/components",
        json={
            "name": "Btn",
            "description": "A primary call to action button",
            "category": "buttons",
            "code": "<button>Go</button>",
        },
    )
    assert response.status_code == 401


async def test_create_component_validation(client: AsyncClient, alice: dict[str, str]) -> None:
    response = await client.post(
        "/api/components",
        json={
            "name": "B",
            "description": "short",
            "category": "tables",
            "code": "   ",
        },
        headers=alice,
    )
    assert response.status_code == 400

    fields = {item["field"] for item in response.json()["error"]["details"]["errors"]}
    assert fields == {"name", "description", "category", "code"}


# ═══════════════════════════════════════════════════════════════════════════════
# LIST
# ═══════════════════════════════════════════════════════════════════════════════


async def test_list_empty(client: AsyncClient) -> None:
    response = await client.get("/api/components")
    assert response.status_code == 200
    assert response.json() == []


async def test_list_default_sort_is_newest_first(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice, name="First")
    await create_component(alice, name="Second")
    await create_component(alice, name="Third")

    response = await client.get("/api/components")
    assert [c["name"] for c in response.json()] == ["Third", "Second", "First"]


async def test_list_sort_by_name(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice, name="Navbar")
    await create_component(alice, name="Accordion")
    await create_component(alice, name="Modal")

    response = await client.get("/api/components", params={"sort": "name"})
    assert [c["name"] for c in response.json()] == ["Accordion", "Modal", "Navbar"]


async def test_list_sort_popular(
    client: AsyncClient, alice: dict[str, str], bob: dict[str, str], create_component,
) -> None:
    liked_once = await create_component(alice, name="Liked once")
    liked_twice = await create_component(alice, name="Liked twice")
    await create_component(alice, name="Not liked")

    await client.post(f"/api/components/{liked_twice['id']}/favorite", headers=alice)
    await client.post(f"/api/components/{liked_twice['id']}/favorite", headers=bob)
    await client.post(f"/api/components/{liked_once['id']}/favorite", headers=bob)

    response = await client.get("/api/components", params={"sort": "popular"})
    assert [c["name"] for c in response.json()] == ["Liked twice", "Liked once", "Not liked"]


async def test_list_invalid_sort_is_rejected(client: AsyncClient) -> None:
    response = await client.get("/api/components", params={"sort": "random"})
    assert response.status_code == 400
    assert response.json()["error"]["details"]["errors"][0]["field"] == "sort"


async def test_list_search_matches_any_term(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice, name="Pricing Card", description="Three tier pricing table")
    await create_component(
        alice, name="Login", description="Email and password form", category="forms",
    )
    await create_component(alice, name="Topbar", description="Sticky header links", tags=["dark"])

    response = await client.get("/api/components", params={"search": "CARD dark"})
    names = {c["name"] for c in response.json()}
    assert names == {"Pricing Card", "Topbar"}


async def test_list_search_matches_description(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice, name="Login", description="Email and password form")
    await create_component(alice, name="Btn")

    response = await client.get("/api/components", params={"search": "password"})
    assert [c["name"] for c in response.json()] == ["Login"]


async def test_list_search_treats_wildcards_literally(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice, name="Btn")

    response = await client.get("/api/components", params={"search": "%"})
    assert response.json() == []


async def test_list_search_ignores_tag_list_punctuation(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice, name="Plain", tags=["a", "b"])

    for term in ("[", '"', ",", "]"):
        response = await client.get("/api/components", params={"search": term})
        assert response.json() == [], term


async def test_list_search_matches_non_ascii_tag(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice, name="Menu", tags=["café"])
    await create_component(alice, name="Btn", tags=["ui"])

    response = await client.get("/api/components", params={"search": "café"})
    assert [c["name"] for c in response.json()] == ["Menu"]


async def test_list_filter_by_category(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice, name="Btn", category="buttons")
    await create_component(alice, name="Profile card", category="cards")

    response = await client.get("/api/components", params={"category": "cards"})
    assert [c["name"] for c in response.json()] == ["Profile card"]


async def test_list_category_without_matches_is_empty(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice, category="buttons")

    response = await client.get("/api/components", params={"category": "forms"})
    assert response.status_code == 200
    assert response.json() == []


async def test_list_unknown_category_matches_nothing(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice)

    response = await client.get("/api/components", params={"category": "tables"})
    assert response.status_code == 200
    assert response.json() == []


async def test_list_anonymous_rows_are_not_favorites(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    component = await create_component(alice)
    await client.post(f"/api/components/{component['id']}/favorite", headers=alice)

    response = await client.get("/api/components")
    assert [c["isFavorite"] for c in response.json()] == [False]


async def test_list_marks_exactly_the_callers_favorites(
    client: AsyncClient, alice: dict[str, str], bob: dict[str, str], create_component,
) -> None:
    first = await create_component(alice, name="First")
    second = await create_component(alice, name="Second")
    await client.post(f"/api/components/{first['id']}/favorite", headers=alice)
    await client.post(f"/api/components/{second['id']}/favorite", headers=bob)

    response = await client.get("/api/components", headers=alice)
    flags = {c["id"]: c["isFavorite"] for c in response.json()}
    assert flags == {first["id"]: True, second["id"]: False}


async def test_list_with_invalid_token_is_anonymous(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice)

    response = await client.get(
        "/api/components",
        headers={"Authorization": "Bearer garbage"},
    )
    assert response.status_code == 200
    assert response.json()[0]["isFavorite"] is False


async def test_list_rows_never_expose_author_credentials(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    await create_component(alice)

    row = (await client.get("/api/components")).json()[0]
    assert set(row["author"]) == {"id", "username"}


# ═══════════════════════════════════════════════════════════════════════════════
# FAVORITES-ONLY LISTING
# ═══════════════════════════════════════════════════════════════════════════════


async def test_list_favorites_requires_identity(client: AsyncClient) -> None:
    response = await client.get("/api/components", params={"favorites": "true"})
    assert response.status_code == 401


async def test_list_favorites_only(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    kept = await create_component(alice, name="Kept")
    await create_component(alice, name="Ignored")
    await client.post(f"/api/components/{kept['id']}/favorite", headers=alice)

    response = await client.get(
        "/api/components", params={"favorites": "true"}, headers=alice,
    )
    data = response.json()
    assert [c["name"] for c in data] == ["Kept"]
    assert data[0]["isFavorite"] is True


async def test_list_favorites_combines_with_search(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    card = await create_component(alice, name="Card")
    btn = await create_component(alice, name="Btn")
    for component in (card, btn):
        await client.post(f"/api/components/{component['id']}/favorite", headers=alice)

    response = await client.get(
        "/api/components",
        params={"favorites": "true", "search": "card"},
        headers=alice,
    )
    assert [c["name"] for c in response.json()] == ["Card"]


async def test_list_favorites_for_missing_user_is_404(client: AsyncClient) -> None:
    token = SecurityUtils.create_access_token(str(uuid.uuid4()), settings.SECRET_KEY)
    response = await client.get(
        "/api/components",
        params={"favorites": "true"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 404


# ═══════════════════════════════════════════════════════════════════════════════
# GET ONE
# ═══════════════════════════════════════════════════════════════════════════════


async def test_get_component(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    component = await create_component(alice)

    response = await client.get(f"/api/components/{component['id']}")
    assert response.status_code == 200
    data = response.json()
    assert data["code"] == component["code"]
    assert data["author"]["username"] == "alice"
    assert data["isFavorite"] is False


async def test_get_component_annotated_for_caller(
    client: AsyncClient, alice: dict[str, str], create_component,
) -> None:
    component = await create_component(alice)
    await client.post(f"/api/components/{component['id']}/favorite", headers=alice)

    response = await client.get(f"/api/components/{component['id']}", headers=alice)
    assert response.json()["isFavorite"] is True


async def test_get_unknown_component_is_404(client: AsyncClient) -> None:
    response = await client.get(f"/api/components/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


async def test_get_malformed_id_is_404(client: AsyncClient) -> None:
    response = await client.get("/api/components/not-a-uuid")
    assert response.status_code == 404
