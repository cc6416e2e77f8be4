"""Repositories package."""

from hrms_api.repositories.base import BaseRepository
from hrms_api.repositories.employee_repository import EmployeeRepository
from hrms_api.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "EmployeeRepository",
    "UserRepository",
]
