"""User account DTOs."""

from pydantic import BaseModel, EmailStr, Field

from hrms_api.models.dto.auth import UserInfo
from hrms_api.models.dto.pagination import PaginationInfo


class UserCreate(BaseModel):
    """DTO for creating an account."""

    name: str | None = Field(default=None, max_length=255)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6, max_length=128)


class UserUpdate(BaseModel):
    """DTO for updating an account. Omitted fields are left untouched."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6, max_length=128)


class UserMutationResponse(BaseModel):
    """Create/update response."""

    message: str
    user: UserInfo


class UserFiltersEcho(BaseModel):
    """Filters applied to a user listing."""

    search: str | None = None


class UserListResponse(BaseModel):
    """User list response DTO."""

    message: str
    data: list[UserInfo]
    pagination: PaginationInfo
    filters: UserFiltersEcho


class UserStats(BaseModel):
    """Account creation statistics."""

    total_users: int
    users_created_this_month: int
    users_created_this_year: int


class UserStatsResponse(BaseModel):
    """User statistics response."""

    message: str
    data: UserStats
