"""SQLAlchemy ORM models package."""

from hrms_api.models.orm.base import Base
from hrms_api.models.orm.employee import EmployeeORM
from hrms_api.models.orm.user import UserORM

__all__ = [
    "Base",
    "EmployeeORM",
    "UserORM",
]
