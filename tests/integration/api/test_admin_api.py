"""
Integration tests for operator endpoints guarded by the admin API key.
"""
import pytest
from httpx import AsyncClient

ADMIN_HEADERS = {"X-Admin-API-Key": "test-admin-key-12345"}
PASSWORD = "SecurePass123!"


async def register(client: AsyncClient, email="user@acme.com"):
    response = await client.post(
        "/auth/register", json={"email": email, "password": PASSWORD, "name": "Test User"}
    )
    return response.json()


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_deactivate_requires_admin_key(client: AsyncClient):
    user = (await register(client))["user"]

    missing = await client.post(f"/admin/users/{user['id']}/deactivate")
    wrong = await client.post(
        f"/admin/users/{user['id']}/deactivate", headers={"X-Admin-API-Key": "nope"}
    )

    assert missing.status_code == 401
    assert missing.json()["error"]["code"] == "UNAUTHORIZED"
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "INVALID_API_KEY"


@pytest.mark.asyncio
async def test_deactivate_user(client: AsyncClient):
    registered = await register(client)
    user_id = registered["user"]["id"]

    response = await client.post(f"/admin/users/{user_id}/deactivate", headers=ADMIN_HEADERS)
    assert response.status_code == 200

    # Existing session is dead and login is refused like bad credentials
    me = await client.get("/auth/me", headers={"Authorization": f"Bearer {registered['token']}"})
    assert me.status_code == 401
    login = await client.post("/auth/login", json={"email": "user@acme.com", "password": PASSWORD})
    assert login.status_code == 401
    assert login.json()["error"]["code"] == "INVALID_CREDENTIALS"

    again = await client.post(f"/admin/users/{user_id}/deactivate", headers=ADMIN_HEADERS)
    assert again.status_code == 409


@pytest.mark.asyncio
async def test_deactivate_unknown_user(client: AsyncClient):
    response = await client.post(
        "/admin/users/00000000-0000-0000-0000-000000000000/deactivate", headers=ADMIN_HEADERS
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_change_role(client: AsyncClient):
    user_id = (await register(client))["user"]["id"]

    response = await client.put(
        f"/admin/users/{user_id}/role", json={"role": "admin"}, headers=ADMIN_HEADERS
    )
    invalid = await client.put(
        f"/admin/users/{user_id}/role", json={"role": "owner"}, headers=ADMIN_HEADERS
    )

    assert response.status_code == 200
    assert response.json()["role"] == "admin"
    assert invalid.status_code == 400
    assert invalid.json()["error"]["code"] == "INVALID_ROLE"
