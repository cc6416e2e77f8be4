"""Employee intake DTOs."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class IntakeRequest(BaseModel):
    """Natural-language intake request."""

    prompt: str | None = Field(
        default=None,
        max_length=20_000,
        description="Natural language description of employee(s) to create",
    )


class ExtractedEmployee(BaseModel):
    """One person as returned by the extraction model.

    Values are not trusted: ``start_date`` may be ``"unknown"`` and ``email``
    is only checked by the store's uniqueness constraint.
    """

    first_name: str
    last_name: str
    email: str
    job_title: str
    department: str
    start_date: str


class IntakeStatus(StrEnum):
    """Per-record intake result."""

    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"
    SKIPPED = "skipped"
    ERROR = "error"


class IntakeOutcome(BaseModel):
    """Result of provisioning one extracted employee."""

    status: IntakeStatus
    message: str
    employee_id: int | None = None
    user_id: int | None = None
    email_sent: bool | None = None

    @property
    def provisioned(self) -> bool:
        """True when the employee and account now exist because of this call."""
        return self.status in (IntakeStatus.SUCCESS, IntakeStatus.PARTIAL_SUCCESS)


class ProcessedEmployee(BaseModel):
    """Extracted fields echoed back with their outcome.

    Fields are optional because a malformed model element is still reported.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    job_title: str | None = None
    department: str | None = None
    start_date: str | None = None
    hrms_api_status: IntakeOutcome

    @classmethod
    def from_raw(cls, raw: Any, outcome: IntakeOutcome) -> "ProcessedEmployee":
        """Echo whatever string fields a raw model element carried."""
        fields: dict[str, str] = {}
        if isinstance(raw, dict):
            for name in ExtractedEmployee.model_fields:
                value = raw.get(name)
                if isinstance(value, str):
                    fields[name] = value
        return cls(**fields, hrms_api_status=outcome)


class IntakeSummary(BaseModel):
    """Aggregate counts for an intake batch."""

    total_processed: int = 0
    successful_creations: int = 0
    emails_sent: int = 0
    skipped: int = 0
    errors: int = 0


class IntakeReport(BaseModel):
    """Full intake response."""

    message: str = "Employees processed successfully"
    summary: IntakeSummary
    processed_employees: list[ProcessedEmployee]


class ResendWelcomeResponse(BaseModel):
    """Response for a welcome-email resend."""

    message: str
    employee_id: int
    user_id: int
    email_sent: bool = True
