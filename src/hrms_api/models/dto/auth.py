"""Authentication DTOs."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from hrms_api.models.domain.user import UserRole


class RegisterRequest(BaseModel):
    """Self-registration request.

    Fields are optional at the schema level so a missing field is reported
    as a 400 listing every required field, not a per-field 422.
    """

    name: str | None = Field(default=None, max_length=255)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6, max_length=128)


class LoginRequest(BaseModel):
    """Email/password login request."""

    email: EmailStr | None = None
    password: str | None = Field(default=None, max_length=128)


class UserInfo(BaseModel):
    """Public view of an account."""

    id: int
    name: str
    email: str
    role: UserRole
    employee_id: int | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True


class AuthResponse(BaseModel):
    """Register/login response carrying an access token."""

    message: str
    user: UserInfo
    token: str


class ProfileResponse(BaseModel):
    """Current user profile response."""

    message: str
    user: UserInfo
