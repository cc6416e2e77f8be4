"""Security package."""

from hrms_api.security.auth import (
    create_access_token,
    get_current_user,
)
from hrms_api.security.password import PasswordService, get_password_service

__all__ = [
    "PasswordService",
    "get_current_user",
    "get_password_service",
    "create_access_token",
]
