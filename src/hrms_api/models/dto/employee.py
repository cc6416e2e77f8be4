"""Employee DTOs."""

from datetime import date, datetime

from pydantic import BaseModel, EmailStr, Field

from hrms_api.models.domain.employee import EmployeeStatus
from hrms_api.models.dto.pagination import PaginationInfo


class EmployeeResponse(BaseModel):
    """Employee response DTO."""

    id: int
    first_name: str
    last_name: str
    email: str
    job_title: str
    department: str
    joining_date: date
    status: EmployeeStatus
    created_by: int
    created_at: datetime
    updated_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True


class EmployeeUpdate(BaseModel):
    """DTO for updating an employee. Omitted fields are left untouched."""

    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    job_title: str | None = Field(default=None, min_length=1, max_length=255)
    department: str | None = Field(default=None, min_length=1, max_length=255)
    joining_date: date | None = None
    status: EmployeeStatus | None = None


class EmployeeFiltersEcho(BaseModel):
    """Filters applied to an employee listing."""

    department: str | None = None
    status: str | None = None
    search: str | None = None


class EmployeeListResponse(BaseModel):
    """Employee list response DTO."""

    message: str
    data: list[EmployeeResponse]
    pagination: PaginationInfo
    filters: EmployeeFiltersEcho


class EmployeeDetailResponse(BaseModel):
    """Single employee response."""

    message: str
    data: EmployeeResponse


class DepartmentCount(BaseModel):
    """Headcount for one department."""

    department: str
    count: int


class DepartmentListResponse(BaseModel):
    """Departments response."""

    message: str
    data: list[DepartmentCount]


class EmployeeStats(BaseModel):
    """Employee statistics."""

    total_employees: int
    active_employees: int
    inactive_employees: int
    department_stats: list[DepartmentCount]


class EmployeeStatsResponse(BaseModel):
    """Employee statistics response."""

    message: str
    data: EmployeeStats
