"""HTTP tests for login account management."""

import httpx
import pytest

from hrms_api.models.orm import UserORM


async def _create(client: httpx.AsyncClient, headers: dict[str, str], name: str, email: str) -> dict:
    response = await client.post(
        "/api/v1/users",
        json={"name": name, "email": email, "password": "initial-pass"},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["user"]


async def test_create_user(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.post(
        "/api/v1/users",
        json={"name": "Fay Hill", "email": "fay.hill@company.com", "password": "initial-pass"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User created successfully"
    assert body["user"]["email"] == "fay.hill@company.com"
    assert "password_hash" not in body["user"]


async def test_create_duplicate(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.post(
        "/api/v1/users",
        json={"name": "Again", "email": "admin@company.com", "password": "initial-pass"},
        headers=auth_headers,
    )

    assert response.status_code == 409
    assert response.json() == {"error": "User with this email already exists"}


async def test_create_missing_fields(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post(
        "/api/v1/users", json={"name": "Nameless"}, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"


async def test_list_and_search(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> None:
    await _create(client, auth_headers, "Fay Hill", "fay.hill@company.com")
    await _create(client, auth_headers, "Gus Lane", "gus.lane@company.com")

    listing = await client.get("/api/v1/users", headers=auth_headers)
    search = await client.get("/api/v1/users", params={"search": "lane"}, headers=auth_headers)

    assert listing.status_code == 200
    assert [u["name"] for u in listing.json()["data"]] == ["Gus Lane", "Fay Hill", "Admin User"]
    assert listing.json()["pagination"]["total_count"] == 3
    assert [u["name"] for u in search.json()["data"]] == ["Gus Lane"]
    assert search.json()["filters"] == {"search": "lane"}


async def test_get_user(
    client: httpx.AsyncClient, auth_headers: dict[str, str], admin_user: UserORM
) -> None:
    response = await client.get(f"/api/v1/users/{admin_user.id}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["email"] == "admin@company.com"


async def test_get_missing_user(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get("/api/v1/users/999", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


async def test_update_user(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> None:
    user = await _create(client, auth_headers, "Fay Hill", "fay.hill@company.com")

    response = await client.put(
        f"/api/v1/users/{user['id']}",
        json={"name": "Fay Stone", "password": "changed-pass"},
        headers=auth_headers,
    )
    login = await client.post(
        "/api/v1/auth/login",
        json={"email": "fay.hill@company.com", "password": "changed-pass"},
    )

    assert response.status_code == 200
    assert response.json()["message"] == "User updated successfully"
    assert response.json()["user"]["name"] == "Fay Stone"
    assert login.status_code == 200


async def test_update_to_taken_email(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    user = await _create(client, auth_headers, "Fay Hill", "fay.hill@company.com")

    response = await client.put(
        f"/api/v1/users/{user['id']}", json={"email": "admin@company.com"}, headers=auth_headers
    )

    assert response.status_code == 409


async def test_delete_user(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> None:
    user = await _create(client, auth_headers, "Fay Hill", "fay.hill@company.com")

    response = await client.delete(f"/api/v1/users/{user['id']}", headers=auth_headers)
    again = await client.get(f"/api/v1/users/{user['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}
    assert again.status_code == 404


async def test_stats(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> None:
    await _create(client, auth_headers, "Fay Hill", "fay.hill@company.com")

    response = await client.get("/api/v1/users/stats", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total_users"] == 2
    assert set(data) == {"total_users", "users_created_this_month", "users_created_this_year"}
    assert data["users_created_this_month"] <= data["users_created_this_year"] <= 2


@pytest.mark.parametrize("method", ["get", "delete"])
async def test_requires_token(client: httpx.AsyncClient, method: str) -> None:
    response = await client.request(method.upper(), "/api/v1/users/1")

    assert response.status_code == 401
