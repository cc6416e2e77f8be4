"""Employee repository."""

from typing import Any

from sqlalchemy import func, or_, select

from hrms_api.models.domain.employee import EmployeeStatus
from hrms_api.models.domain.filters import EmployeeFilters
from hrms_api.models.orm.employee import EmployeeORM
from hrms_api.repositories.base import BaseRepository
from hrms_api.utils.validation import escape_like_wildcards

# Columns covered by the free-text search filter
SEARCH_COLUMNS = ("first_name", "last_name", "email", "job_title")


class EmployeeRepository(BaseRepository[EmployeeORM]):
    """Repository for employee operations."""

    model = EmployeeORM

    def _filter_conditions(self, filters: EmployeeFilters) -> list[Any]:
        """Translate listing filters into SQL conditions."""
        conditions: list[Any] = []

        if filters.department:
            conditions.append(EmployeeORM.department == filters.department)

        if filters.status:
            conditions.append(EmployeeORM.status == filters.status.value)

        if filters.search:
            pattern = f"%{escape_like_wildcards(filters.search)}%"
            conditions.append(
                or_(
                    *(
                        getattr(EmployeeORM, column).ilike(pattern, escape="\\")
                        for column in SEARCH_COLUMNS
                    )
                )
            )

        return conditions

    async def list_with_filters(
        self,
        filters: EmployeeFilters,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[EmployeeORM], int]:
        """Get a page of employees, newest first.

        Args:
            filters: Validated listing filters
            offset: Pagination offset
            limit: Pagination limit

        Returns:
            Tuple of (employees, total_count)
        """
        conditions = self._filter_conditions(filters)

        count_query = select(func.count()).select_from(EmployeeORM).where(*conditions)
        total = (await self.session.execute(count_query)).scalar_one()

        query = (
            select(EmployeeORM)
            .where(*conditions)
            .order_by(EmployeeORM.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    async def count_by_status(self) -> dict[str, int]:
        """Count employees by status.

        Returns:
            Dict mapping every known status to its count
        """
        result = await self.session.execute(
            select(EmployeeORM.status, func.count()).group_by(EmployeeORM.status)
        )
        counts = {status.value: 0 for status in EmployeeStatus}
        counts.update(dict(result.all()))
        return counts

    async def count_by_department(self) -> list[tuple[str, int]]:
        """Headcount per department, ordered by department name."""
        result = await self.session.execute(
            select(EmployeeORM.department, func.count(EmployeeORM.id))
            .group_by(EmployeeORM.department)
            .order_by(EmployeeORM.department)
        )
        return [(department, count) for department, count in result.all()]
