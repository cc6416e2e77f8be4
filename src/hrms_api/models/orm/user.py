"""User account ORM model."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms_api.models.orm.base import Base, IDMixin, TimestampMixin


class UserORM(Base, IDMixin, TimestampMixin):
    """Login account, optionally linked to an employee record."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False, default="EMPLOYEE")
    employee_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        unique=True,
        nullable=True,
    )

    employee: Mapped["EmployeeORM | None"] = relationship(
        "EmployeeORM",
        back_populates="account",
        lazy="selectin",
    )
