"""Authentication service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from hrms_api.exceptions import (
    AuthenticationError,
    MissingFieldsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from hrms_api.models.domain.user import UserRole
from hrms_api.models.dto.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UserInfo,
)
from hrms_api.repositories.user_repository import UserRepository
from hrms_api.security.auth import create_access_token
from hrms_api.security.password import get_password_service
from hrms_api.utils.secure_logging import mask_email

logger = logging.getLogger(__name__)

# Placeholder hash checked for unknown emails
_DUMMY_PASSWORD_HASH = "$2b$04$C6UzMDM.H6dfI/f/IKcEeO5hY2hQ1zGyR1a6A5rO7b3n5YjY8eW1W"


class AuthService:
    """Service for authentication operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.user_repo = UserRepository(session)
        self.password_service = get_password_service()

    async def register(self, data: RegisterRequest) -> AuthResponse:
        """Register a new account and issue a token.

        Raises:
            MissingFieldsError: If name, email or password is missing
            UserAlreadyExistsError: If the email is taken
        """
        if not (data.name and data.email and data.password):
            raise MissingFieldsError(["name", "email", "password"])

        email = data.email.lower()
        if await self.user_repo.email_exists(email):
            raise UserAlreadyExistsError("User already exists")

        user = await self.user_repo.create(
            name=data.name,
            email=email,
            password_hash=self.password_service.hash_password(data.password),
            role=UserRole.EMPLOYEE.value,
        )
        logger.info("Registered account %s", user.id)

        return AuthResponse(
            message="User registered successfully",
            user=UserInfo.model_validate(user),
            token=create_access_token(user),
        )

    async def login(self, data: LoginRequest) -> AuthResponse:
        """Authenticate with email and password.

        Raises:
            MissingFieldsError: If email or password is missing
            AuthenticationError: If the credentials do not match
        """
        if not (data.email and data.password):
            raise MissingFieldsError(["email", "password"])

        user = await self.user_repo.get_by_email(data.email.lower())
        password_hash = user.password_hash if user else _DUMMY_PASSWORD_HASH
        password_ok = self.password_service.verify_password(data.password, password_hash)

        if user is None or not password_ok:
            logger.warning("Failed login for %s", mask_email(data.email))
            raise AuthenticationError()

        return AuthResponse(
            message="Login successful",
            user=UserInfo.model_validate(user),
            token=create_access_token(user),
        )

    async def get_profile(self, user_id: int) -> ProfileResponse:
        """Get the profile of the authenticated account.

        Raises:
            UserNotFoundError: If the account was deleted after the token was issued
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return ProfileResponse(
            message="Profile retrieved successfully",
            user=UserInfo.model_validate(user),
        )
