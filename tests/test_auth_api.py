"""HTTP tests for registration, login and profile."""

import httpx
from jose import jwt

from hrms_api.config import get_settings
from hrms_api.models.orm import UserORM


async def test_register_returns_token(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register",
        json={"name": "Eve Adams", "email": "Eve.Adams@company.com", "password": "s3cret-pass"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User registered successfully"
    assert body["user"]["email"] == "eve.adams@company.com"
    assert body["user"]["role"] == "EMPLOYEE"
    assert body["user"]["employee_id"] is None

    settings = get_settings()
    claims = jwt.decode(body["token"], settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    assert claims["userId"] == body["user"]["id"]
    assert claims["email"] == "eve.adams@company.com"
    assert claims["role"] == "EMPLOYEE"


async def test_register_duplicate(client: httpx.AsyncClient, admin_user: UserORM) -> None:
    response = await client.post(
        "/api/v1/auth/register",
        json={"name": "Other", "email": "admin@company.com", "password": "whatever1"},
    )

    assert response.status_code == 409
    assert response.json() == {"error": "User already exists"}


async def test_register_missing_fields(client: httpx.AsyncClient) -> None:
    response = await client.post("/api/v1/auth/register", json={"email": "x@company.com"})

    assert response.status_code == 400
    assert response.json() == {
        "error": "Missing required fields",
        "required": ["name", "email", "password"],
    }


async def test_register_rejects_invalid_email(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register",
        json={"name": "X", "email": "not-an-email", "password": "whatever1"},
    )

    assert response.status_code == 422


async def test_login(client: httpx.AsyncClient, admin_user: UserORM) -> None:
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "ADMIN@company.com", "password": "AdminPassword123!"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["user"]["role"] == "ADMIN"
    assert body["token"]


async def test_login_wrong_password(client: httpx.AsyncClient, admin_user: UserORM) -> None:
    response = await client.post(
        "/api/v1/auth/login", json={"email": "admin@company.com", "password": "nope"}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


async def test_login_unknown_email(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/login", json={"email": "ghost@company.com", "password": "nope"}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


async def test_login_missing_fields(client: httpx.AsyncClient) -> None:
    response = await client.post("/api/v1/auth/login", json={"email": "admin@company.com"})

    assert response.status_code == 400
    assert response.json()["required"] == ["email", "password"]


async def test_profile(
    client: httpx.AsyncClient, admin_user: UserORM, auth_headers: dict[str, str]
) -> None:
    response = await client.get("/api/v1/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["message"] == "Profile retrieved successfully"
    assert response.json()["user"]["id"] == admin_user.id


async def test_login_token_works_for_profile(
    client: httpx.AsyncClient, admin_user: UserORM
) -> None:
    login = await client.post(
        "/api/v1/auth/login",
        json={"email": "admin@company.com", "password": "AdminPassword123!"},
    )
    token = login.json()["token"]

    response = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.json()["user"]["email"] == "admin@company.com"


async def test_response_headers(client: httpx.AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "trace-123"})

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
    assert response.headers["X-Request-ID"] == "trace-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
