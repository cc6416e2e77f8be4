"""API routers package."""

from hrms_api.routers import auth, employees, users

__all__ = [
    "auth",
    "employees",
    "users",
]
