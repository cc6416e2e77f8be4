"""Employee service for managing employee records."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from hrms_api.exceptions import (
    EmployeeAlreadyExistsError,
    EmployeeNotFoundError,
    UserAlreadyExistsError,
)
from hrms_api.models.domain.employee import EmployeeStatus
from hrms_api.models.domain.filters import EmployeeFilters
from hrms_api.models.dto.common import MessageResponse
from hrms_api.models.dto.employee import (
    DepartmentCount,
    DepartmentListResponse,
    EmployeeDetailResponse,
    EmployeeFiltersEcho,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeStats,
    EmployeeStatsResponse,
    EmployeeUpdate,
)
from hrms_api.models.dto.pagination import PaginationInfo
from hrms_api.models.orm.employee import EmployeeORM
from hrms_api.repositories.employee_repository import EmployeeRepository
from hrms_api.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for employee operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo = EmployeeRepository(session)
        self.user_repo = UserRepository(session)

    async def _get_or_404(self, employee_id: int) -> EmployeeORM:
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def list_employees(
        self,
        filters: EmployeeFilters,
        page: int = 1,
        limit: int = 10,
    ) -> EmployeeListResponse:
        """List employees with filters, newest first.

        Args:
            filters: Validated filters
            page: 1-based page number
            limit: Page size

        Returns:
            EmployeeListResponse
        """
        employees, total = await self.employee_repo.list_with_filters(
            filters, offset=(page - 1) * limit, limit=limit
        )
        return EmployeeListResponse(
            message="Employees retrieved successfully",
            data=[EmployeeResponse.model_validate(e) for e in employees],
            pagination=PaginationInfo.from_counts(page, limit, total),
            filters=EmployeeFiltersEcho(
                department=filters.department,
                status=filters.status.value if filters.status else None,
                search=filters.search,
            ),
        )

    async def get_employee(self, employee_id: int) -> EmployeeDetailResponse:
        """Get employee by ID.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self._get_or_404(employee_id)
        return EmployeeDetailResponse(
            message="Success",
            data=EmployeeResponse.model_validate(employee),
        )

    async def update_employee(self, employee_id: int, data: EmployeeUpdate) -> EmployeeDetailResponse:
        """Update an employee. Omitted fields are left untouched.

        Email and name changes are mirrored onto the linked account so the
        two records keep sharing one email.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            EmployeeAlreadyExistsError: If the new email belongs to another employee
            UserAlreadyExistsError: If the new email belongs to another account
        """
        employee = await self._get_or_404(employee_id)
        account = employee.account

        update_data: dict[str, Any] = data.model_dump(exclude_unset=True, exclude_none=True)
        account_update: dict[str, Any] = {}

        if "email" in update_data:
            new_email = str(update_data["email"]).lower()
            if new_email == employee.email:
                del update_data["email"]
            else:
                if await self.employee_repo.email_exists(new_email, exclude_id=employee_id):
                    raise EmployeeAlreadyExistsError()
                account_id = account.id if account else None
                if await self.user_repo.email_exists(new_email, exclude_id=account_id):
                    raise UserAlreadyExistsError()
                update_data["email"] = new_email
                account_update["email"] = new_email

        if isinstance(update_data.get("status"), EmployeeStatus):
            update_data["status"] = update_data["status"].value

        if "first_name" in update_data or "last_name" in update_data:
            first = update_data.get("first_name", employee.first_name)
            last = update_data.get("last_name", employee.last_name)
            account_update["name"] = f"{first} {last}"

        if update_data:
            employee = await self.employee_repo.update(employee, **update_data)
            if account is not None and account_update:
                await self.user_repo.update(account, **account_update)
            logger.info("Updated employee %s (%s)", employee_id, ", ".join(sorted(update_data)))

        return EmployeeDetailResponse(
            message="Updated successfully",
            data=EmployeeResponse.model_validate(employee),
        )

    async def delete_employee(self, employee_id: int) -> MessageResponse:
        """Delete an employee and its linked account.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self._get_or_404(employee_id)
        await self.employee_repo.delete(employee)
        logger.info("Deleted employee %s", employee_id)
        return MessageResponse(message="Deleted successfully")

    async def list_departments(self) -> DepartmentListResponse:
        """Get all departments with headcount."""
        rows = await self.employee_repo.count_by_department()
        return DepartmentListResponse(
            message="Departments retrieved",
            data=[DepartmentCount(department=dept, count=count) for dept, count in rows],
        )

    async def get_stats(self) -> EmployeeStatsResponse:
        """Get headcount by status and department."""
        by_status = await self.employee_repo.count_by_status()
        by_department = await self.employee_repo.count_by_department()

        return EmployeeStatsResponse(
            message="Employee statistics retrieved successfully",
            data=EmployeeStats(
                total_employees=sum(by_status.values()),
                active_employees=by_status.get(EmployeeStatus.ACTIVE.value, 0),
                inactive_employees=by_status.get(EmployeeStatus.INACTIVE.value, 0),
                department_stats=[
                    DepartmentCount(department=dept, count=count) for dept, count in by_department
                ],
            ),
        )
