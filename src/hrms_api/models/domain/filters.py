"""Listing filter criteria.

Query parameters are parsed into these objects at the router boundary;
repositories translate them into SQL conditions.
"""

from dataclasses import dataclass

from hrms_api.models.domain.employee import EmployeeStatus
from hrms_api.utils.validation import sanitize_department, sanitize_search, sanitize_status

ALLOWED_EMPLOYEE_STATUSES = {status.value for status in EmployeeStatus}


@dataclass(frozen=True)
class EmployeeFilters:
    """Validated employee listing filters."""

    department: str | None = None
    status: EmployeeStatus | None = None
    search: str | None = None

    @classmethod
    def from_query(
        cls,
        department: str | None = None,
        status: str | None = None,
        search: str | None = None,
    ) -> "EmployeeFilters":
        """Build filters from raw query parameters, dropping unusable values."""
        clean_status = sanitize_status(status, ALLOWED_EMPLOYEE_STATUSES)
        return cls(
            department=sanitize_department(department),
            status=EmployeeStatus(clean_status) if clean_status else None,
            search=sanitize_search(search),
        )


@dataclass(frozen=True)
class UserFilters:
    """Validated user listing filters."""

    search: str | None = None

    @classmethod
    def from_query(cls, search: str | None = None) -> "UserFilters":
        """Build filters from raw query parameters."""
        return cls(search=sanitize_search(search))
