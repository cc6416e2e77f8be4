"""Services package."""

from hrms_api.services.auth_service import AuthService
from hrms_api.services.email_service import EmailService
from hrms_api.services.employee_service import EmployeeService
from hrms_api.services.intake_service import EmployeeIntakeService
from hrms_api.services.user_service import UserService

__all__ = [
    "AuthService",
    "EmailService",
    "EmployeeIntakeService",
    "EmployeeService",
    "UserService",
]
