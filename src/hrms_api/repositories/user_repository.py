"""User account repository."""

from datetime import datetime

from sqlalchemy import func, or_, select

from hrms_api.models.domain.filters import UserFilters
from hrms_api.models.orm.user import UserORM
from hrms_api.repositories.base import BaseRepository
from hrms_api.utils.validation import escape_like_wildcards


class UserRepository(BaseRepository[UserORM]):
    """Repository for account operations."""

    model = UserORM

    async def get_by_employee_id(self, employee_id: int) -> UserORM | None:
        """Get the account linked to an employee.

        Args:
            employee_id: Employee ID

        Returns:
            UserORM or None if the employee has no account
        """
        result = await self.session.execute(
            select(UserORM).where(UserORM.employee_id == employee_id)
        )
        return result.scalar_one_or_none()

    async def list_with_filters(
        self,
        filters: UserFilters,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[UserORM], int]:
        """Get a page of accounts, newest first.

        Args:
            filters: Validated listing filters
            offset: Pagination offset
            limit: Pagination limit

        Returns:
            Tuple of (users, total_count)
        """
        conditions = []
        if filters.search:
            pattern = f"%{escape_like_wildcards(filters.search)}%"
            conditions.append(
                or_(
                    UserORM.name.ilike(pattern, escape="\\"),
                    UserORM.email.ilike(pattern, escape="\\"),
                )
            )

        count_query = select(func.count()).select_from(UserORM).where(*conditions)
        total = (await self.session.execute(count_query)).scalar_one()

        result = await self.session.execute(
            select(UserORM)
            .where(*conditions)
            .order_by(UserORM.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all()), total

    async def count_created_since(self, since: datetime) -> int:
        """Count accounts created at or after ``since``."""
        result = await self.session.execute(
            select(func.count()).select_from(UserORM).where(UserORM.created_at >= since)
        )
        return result.scalar_one()
