"""Tests for the API tokens endpoints (in-memory SQLite behind the session dependencies)."""

from httpx import AsyncClient

BASE = "/api/v1/api-tokens"


async def _create(client: AsyncClient, **body) -> dict:
    response = await client.post(BASE, json=body)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_read_only_token_returns_access_key(client: AsyncClient) -> None:
    """POST read-only: 201, access key shown, no permissions field."""
    data = await _create(client, name="n", type="read-only")
    assert data["type"] == "read-only"
    assert "permissions" not in data
    assert len(data["access_key"]) == 256
    assert data["id"]
    assert data["created_at"]


async def test_access_key_never_returned_again(client: AsyncClient) -> None:
    created = await _create(client, name="n", type="full-access", description="ci")

    detail = (await client.get(f"{BASE}/{created['id']}")).json()
    listing = (await client.get(BASE)).json()

    assert detail["description"] == "ci"
    for body in [detail, *listing]:
        assert "access_key" not in body
        assert created["access_key"] not in str(body)


async def test_custom_token_without_permissions_returns_400(client: AsyncClient) -> None:
    response = await client.post(BASE, json={"name": "n", "type": "custom"})
    assert response.status_code == 400
    assert response.json()["error"] == "MISSING_PERMISSIONS"
    assert (await client.get(BASE)).json() == []


async def test_read_only_token_with_permissions_returns_400(client: AsyncClient) -> None:
    response = await client.post(
        BASE, json={"name": "n", "type": "read-only", "permissions": ["a"]}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_PERMISSIONS"


async def test_unknown_type_returns_422(client: AsyncClient) -> None:
    response = await client.post(BASE, json={"name": "n", "type": "admin"})
    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert list(body["details"]["fields"]) == ["type"]


async def test_empty_name_returns_422(client: AsyncClient) -> None:
    response = await client.post(BASE, json={"name": "", "type": "read-only"})
    assert response.status_code == 422
    assert "name" in response.json()["details"]["fields"]


async def test_duplicate_name_returns_409(client: AsyncClient) -> None:
    await _create(client, name="dup", type="read-only")
    response = await client.post(BASE, json={"name": "dup", "type": "read-only"})
    assert response.status_code == 409
    assert response.json()["error"] == "PERSISTENCE_ERROR"


async def test_update_reconciles_permissions(client: AsyncClient) -> None:
    created = await _create(client, name="n", type="custom", permissions=["a", "b"])
    assert created["permissions"] == ["a", "b"]

    response = await client.put(f"{BASE}/{created['id']}", json={"permissions": ["b", "c"]})

    assert response.status_code == 200
    assert response.json()["permissions"] == ["b", "c"]
    detail = (await client.get(f"{BASE}/{created['id']}")).json()
    assert detail["permissions"] == ["b", "c"]


async def test_update_rename_and_clear_description(client: AsyncClient) -> None:
    created = await _create(client, name="old", type="read-only", description="d")
    response = await client.put(
        f"{BASE}/{created['id']}", json={"name": "new", "description": None}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "new"
    assert "description" not in data
    assert "access_key" not in data


async def test_update_missing_token_returns_404(client: AsyncClient) -> None:
    response = await client.put(f"{BASE}/missing", json={"name": "x"})
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_revoke_then_get_returns_404(client: AsyncClient) -> None:
    created = await _create(client, name="n", type="custom", permissions=["a"])

    response = await client.delete(f"{BASE}/{created['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]
    assert response.json()["permissions"] == ["a"]

    missing = await client.get(f"{BASE}/{created['id']}")
    assert missing.status_code == 404
    assert missing.json()["error"] == "RESOURCE_NOT_FOUND"
    assert (await client.delete(f"{BASE}/{created['id']}")).status_code == 404


async def test_list_sorted_by_name(client: AsyncClient) -> None:
    for name in ["charlie", "alpha", "bravo"]:
        await _create(client, name=name, type="read-only")
    names = [t["name"] for t in (await client.get(BASE)).json()]
    assert names == ["alpha", "bravo", "charlie"]
