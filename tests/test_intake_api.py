"""HTTP tests for the employee intake endpoints."""

import json

import httpx
import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from conftest import FakeEmailService, FakeProvider, employee_payload
from hrms_api.dependencies import get_text_generation_provider
from hrms_api.exceptions import ExtractionError
from hrms_api.models.orm import EmployeeORM, UserORM

JOHN_PROMPT = (
    "Please add John Doe, a Software Engineer in Engineering starting 2026-11-02, "
    "email john.doe@company.com"
)


async def test_intake_creates_employee(
    client: httpx.AsyncClient,
    auth_headers: dict[str, str],
    fake_provider: FakeProvider,
    fake_email: FakeEmailService,
) -> None:
    fake_provider.reply = "```json\n" + json.dumps(
        [employee_payload("John", "Doe", "john.doe@company.com")]
    ) + "\n```"

    response = await client.post(
        "/api/v1/employees", json={"prompt": JOHN_PROMPT}, headers=auth_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Employees processed successfully"
    assert body["summary"] == {
        "total_processed": 1,
        "successful_creations": 1,
        "emails_sent": 1,
        "skipped": 0,
        "errors": 0,
    }
    entry = body["processed_employees"][0]
    assert entry["first_name"] == "John"
    assert entry["start_date"] == "2026-11-02"
    assert entry["hrms_api_status"]["status"] == "success"
    assert entry["hrms_api_status"]["email_sent"] is True
    assert fake_email.sent[0]["to"] == "john.doe@company.com"

    employee_id = entry["hrms_api_status"]["employee_id"]
    detail = await client.get(f"/api/v1/employees/{employee_id}", headers=auth_headers)
    assert detail.status_code == 200
    assert detail.json()["data"]["email"] == "john.doe@company.com"
    assert detail.json()["data"]["status"] == "active"


async def test_intake_skips_on_second_submission(
    client: httpx.AsyncClient, auth_headers: dict[str, str], fake_provider: FakeProvider
) -> None:
    fake_provider.reply = json.dumps([employee_payload("John", "Doe", "john.doe@company.com")])
    await client.post("/api/v1/employees", json={"prompt": JOHN_PROMPT}, headers=auth_headers)

    response = await client.post(
        "/api/v1/employees", json={"prompt": JOHN_PROMPT}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["summary"]["skipped"] == 1
    assert response.json()["processed_employees"][0]["hrms_api_status"]["status"] == "skipped"


async def test_intake_reports_partial_success(
    client: httpx.AsyncClient,
    auth_headers: dict[str, str],
    fake_provider: FakeProvider,
    fake_email: FakeEmailService,
) -> None:
    fake_provider.reply = json.dumps([employee_payload("John", "Doe", "john.doe@company.com")])
    fake_email.fail = True

    response = await client.post(
        "/api/v1/employees", json={"prompt": JOHN_PROMPT}, headers=auth_headers
    )

    assert response.status_code == 200
    status = response.json()["processed_employees"][0]["hrms_api_status"]
    assert status["status"] == "partial_success"
    assert status["email_sent"] is False


@pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": "   "}, None])
async def test_intake_requires_prompt(
    client: httpx.AsyncClient,
    auth_headers: dict[str, str],
    fake_provider: FakeProvider,
    body: dict | None,
) -> None:
    response = await client.post("/api/v1/employees", json=body, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing 'prompt' field in request."}
    assert fake_provider.prompts == []


async def test_intake_without_provider(
    app,
    client: httpx.AsyncClient,
    auth_headers: dict[str, str],
    fake_email: FakeEmailService,
    session_maker: async_sessionmaker[AsyncSession],
) -> None:
    app.dependency_overrides[get_text_generation_provider] = lambda: None

    response = await client.post(
        "/api/v1/employees", json={"prompt": JOHN_PROMPT}, headers=auth_headers
    )

    assert response.status_code == 503
    body = response.json()
    assert body["error"].startswith("AI service is not available")
    assert "message" in body
    assert fake_email.sent == []
    async with session_maker() as session:
        assert (await session.execute(select(EmployeeORM))).scalars().all() == []
        accounts = (await session.execute(select(UserORM))).scalars().all()
        assert [a.email for a in accounts] == ["admin@company.com"]


async def test_intake_with_unparseable_reply(
    client: httpx.AsyncClient, auth_headers: dict[str, str], fake_provider: FakeProvider
) -> None:
    fake_provider.reply = "I could not find anyone."

    response = await client.post(
        "/api/v1/employees", json={"prompt": JOHN_PROMPT}, headers=auth_headers
    )

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Error processing employee creation"
    assert body["details"].startswith("AI response is not valid JSON")


async def test_intake_with_provider_failure(
    client: httpx.AsyncClient, auth_headers: dict[str, str], fake_provider: FakeProvider
) -> None:
    fake_provider.exc = ExtractionError("AI provider returned status 500")

    response = await client.post(
        "/api/v1/employees", json={"prompt": JOHN_PROMPT}, headers=auth_headers
    )

    assert response.status_code == 500
    assert response.json() == {
        "error": "Error processing employee creation",
        "details": "AI provider returned status 500",
    }


async def test_intake_requires_token(client: httpx.AsyncClient) -> None:
    response = await client.post("/api/v1/employees", json={"prompt": JOHN_PROMPT})

    assert response.status_code == 401
    assert response.json() == {"error": "Access token missing"}


async def test_intake_rejects_bad_token(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/v1/employees",
        json={"prompt": JOHN_PROMPT},
        headers={"Authorization": "Bearer not-a-jwt"},
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or expired token"}


async def test_resend_welcome(
    client: httpx.AsyncClient,
    auth_headers: dict[str, str],
    fake_provider: FakeProvider,
    fake_email: FakeEmailService,
) -> None:
    fake_provider.reply = json.dumps([employee_payload("John", "Doe", "john.doe@company.com")])
    created = await client.post(
        "/api/v1/employees", json={"prompt": JOHN_PROMPT}, headers=auth_headers
    )
    employee_id = created.json()["processed_employees"][0]["hrms_api_status"]["employee_id"]

    response = await client.post(
        f"/api/v1/employees/{employee_id}/resend-welcome", headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Welcome email sent successfully"
    assert [m["template"] for m in fake_email.sent] == ["welcome", "reset"]
    assert fake_email.sent[0]["password"] != fake_email.sent[1]["password"]


async def test_resend_welcome_delivery_failure(
    client: httpx.AsyncClient,
    auth_headers: dict[str, str],
    fake_provider: FakeProvider,
    fake_email: FakeEmailService,
) -> None:
    fake_provider.reply = json.dumps([employee_payload("John", "Doe", "john.doe@company.com")])
    created = await client.post(
        "/api/v1/employees", json={"prompt": JOHN_PROMPT}, headers=auth_headers
    )
    employee_id = created.json()["processed_employees"][0]["hrms_api_status"]["employee_id"]
    fake_email.fail = True

    response = await client.post(
        f"/api/v1/employees/{employee_id}/resend-welcome", headers=auth_headers
    )

    assert response.status_code == 502
    assert response.json()["error"] == "Email delivery failed"


async def test_resend_welcome_unknown_employee(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post("/api/v1/employees/999/resend-welcome", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Employee not found"}
