"""Employee ORM model."""

from datetime import date

from sqlalchemy import Date, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms_api.models.orm.base import Base, IDMixin, TimestampMixin


class EmployeeORM(Base, IDMixin, TimestampMixin):
    """Employee database model."""

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    job_title: Mapped[str] = mapped_column(String(255), nullable=False)
    department: Mapped[str] = mapped_column(String(255), nullable=False)
    joining_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="active")
    # Actor id that created the record; not a foreign key so the system
    # fallback actor works on an empty database
    created_by: Mapped[int] = mapped_column(Integer, nullable=False)

    # Loaded eagerly so deleting an employee can cascade to its account
    # without lazy IO on the async session
    account: Mapped["UserORM | None"] = relationship(
        "UserORM",
        back_populates="employee",
        uselist=False,
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    __table_args__ = (
        Index("idx_employees_status", "status"),
        Index("idx_employees_department", "department"),
    )


# Import here to avoid circular import
from hrms_api.models.orm.user import UserORM  # noqa: E402, F401
