"""Domain models package."""

from hrms_api.models.domain.employee import EmployeeStatus
from hrms_api.models.domain.user import CurrentUser, UserRole

__all__ = [
    "CurrentUser",
    "EmployeeStatus",
    "UserRole",
]
