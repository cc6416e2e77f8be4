"""Centralized dependency injection factories for FastAPI.

This module provides reusable service factory functions for dependency injection,
eliminating duplicate definitions across routers.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hrms_api.config import get_settings
from hrms_api.database import get_db
from hrms_api.providers.base import TextGenerationProvider
from hrms_api.providers.gemini import GeminiProvider
from hrms_api.services.auth_service import AuthService
from hrms_api.services.email_service import EmailService
from hrms_api.services.employee_service import EmployeeService
from hrms_api.services.intake_service import EmployeeIntakeService
from hrms_api.services.user_service import UserService


# =============================================================================
# External Collaborators
# =============================================================================


def get_text_generation_provider() -> TextGenerationProvider | None:
    """Get the configured text generation provider.

    Returns:
        GeminiProvider, or None when no API key is configured
    """
    settings = get_settings()
    if not settings.extraction_enabled:
        return None
    return GeminiProvider(
        api_key=settings.gemini_api_key or "",
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.extraction_timeout_seconds,
    )


def get_email_service() -> EmailService:
    """Get EmailService instance."""
    return EmailService(get_settings())


# =============================================================================
# Core Service Factories
# =============================================================================


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """Get AuthService instance."""
    return AuthService(db)


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """Get UserService instance."""
    return UserService(db)


def get_employee_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    """Get EmployeeService instance."""
    return EmployeeService(db)


def get_intake_service(
    db: AsyncSession = Depends(get_db),
    provider: TextGenerationProvider | None = Depends(get_text_generation_provider),
    email_service: EmailService = Depends(get_email_service),
) -> EmployeeIntakeService:
    """Get EmployeeIntakeService instance."""
    return EmployeeIntakeService(db, provider, email_service)
