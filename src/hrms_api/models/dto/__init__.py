"""Data Transfer Objects package."""

from hrms_api.models.dto.auth import AuthResponse, UserInfo
from hrms_api.models.dto.employee import EmployeeListResponse, EmployeeResponse
from hrms_api.models.dto.intake import IntakeOutcome, IntakeReport, IntakeStatus
from hrms_api.models.dto.pagination import PaginationInfo

__all__ = [
    "AuthResponse",
    "UserInfo",
    "EmployeeListResponse",
    "EmployeeResponse",
    "IntakeOutcome",
    "IntakeReport",
    "IntakeStatus",
    "PaginationInfo",
]
