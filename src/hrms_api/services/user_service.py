"""User service for account management."""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from hrms_api.exceptions import MissingFieldsError, UserAlreadyExistsError, UserNotFoundError
from hrms_api.models.domain.filters import UserFilters
from hrms_api.models.domain.user import UserRole
from hrms_api.models.dto.auth import UserInfo
from hrms_api.models.dto.common import MessageResponse
from hrms_api.models.dto.pagination import PaginationInfo
from hrms_api.models.dto.user import (
    UserCreate,
    UserFiltersEcho,
    UserListResponse,
    UserMutationResponse,
    UserStats,
    UserStatsResponse,
    UserUpdate,
)
from hrms_api.models.orm.user import UserORM
from hrms_api.repositories.user_repository import UserRepository
from hrms_api.security.password import get_password_service


class UserService:
    """Service for user account management."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.user_repo = UserRepository(session)
        self.password_service = get_password_service()

    async def _get_or_404(self, user_id: int) -> UserORM:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def list_users(self, filters: UserFilters, page: int, limit: int) -> UserListResponse:
        """List accounts with pagination.

        Args:
            filters: Validated filters
            page: 1-based page number
            limit: Page size

        Returns:
            UserListResponse
        """
        users, total = await self.user_repo.list_with_filters(
            filters, offset=(page - 1) * limit, limit=limit
        )
        return UserListResponse(
            message="Users retrieved successfully",
            data=[UserInfo.model_validate(u) for u in users],
            pagination=PaginationInfo.from_counts(page, limit, total),
            filters=UserFiltersEcho(search=filters.search),
        )

    async def get_user(self, user_id: int) -> UserInfo:
        """Get a single account.

        Raises:
            UserNotFoundError: If the account does not exist
        """
        return UserInfo.model_validate(await self._get_or_404(user_id))

    async def create_user(self, data: UserCreate) -> UserMutationResponse:
        """Create an account.

        Raises:
            MissingFieldsError: If name, email or password is missing
            UserAlreadyExistsError: If the email is taken
        """
        if not (data.name and data.email and data.password):
            raise MissingFieldsError(["name", "email", "password"])

        email = data.email.lower()
        if await self.user_repo.email_exists(email):
            raise UserAlreadyExistsError()

        user = await self.user_repo.create(
            name=data.name,
            email=email,
            password_hash=self.password_service.hash_password(data.password),
            role=UserRole.EMPLOYEE.value,
        )
        return UserMutationResponse(
            message="User created successfully",
            user=UserInfo.model_validate(user),
        )

    async def update_user(self, user_id: int, data: UserUpdate) -> UserMutationResponse:
        """Update an account. Omitted fields are left untouched.

        Raises:
            UserNotFoundError: If the account does not exist
            UserAlreadyExistsError: If the new email belongs to another account
        """
        user = await self._get_or_404(user_id)

        update_data: dict[str, str] = {}
        if data.name is not None:
            update_data["name"] = data.name
        if data.email is not None:
            new_email = data.email.lower()
            if new_email != user.email:
                if await self.user_repo.email_exists(new_email, exclude_id=user_id):
                    raise UserAlreadyExistsError()
                update_data["email"] = new_email
        if data.password is not None:
            update_data["password_hash"] = self.password_service.hash_password(data.password)

        if update_data:
            user = await self.user_repo.update(user, **update_data)

        return UserMutationResponse(
            message="User updated successfully",
            user=UserInfo.model_validate(user),
        )

    async def delete_user(self, user_id: int) -> MessageResponse:
        """Delete an account. A linked employee record is kept.

        Raises:
            UserNotFoundError: If the account does not exist
        """
        user = await self._get_or_404(user_id)
        await self.user_repo.delete(user)
        return MessageResponse(message="User deleted successfully")

    async def get_stats(self) -> UserStatsResponse:
        """Count accounts in total and created this calendar month and year (UTC)."""
        now = datetime.now(timezone.utc)
        start_of_month = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        start_of_year = start_of_month.replace(month=1)

        return UserStatsResponse(
            message="User statistics retrieved successfully",
            data=UserStats(
                total_users=await self.user_repo.count(),
                users_created_this_month=await self.user_repo.count_created_since(start_of_month),
                users_created_this_year=await self.user_repo.count_created_since(start_of_year),
            ),
        )
