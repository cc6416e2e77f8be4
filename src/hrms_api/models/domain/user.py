"""User domain model."""

from enum import StrEnum

from pydantic import BaseModel


class UserRole(StrEnum):
    """Account roles."""

    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class CurrentUser(BaseModel):
    """Authenticated actor decoded from an access token."""

    id: int
    name: str
    email: str
    role: UserRole = UserRole.EMPLOYEE
    employee_id: int | None = None
