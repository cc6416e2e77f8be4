"""Authentication router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from hrms_api.dependencies import get_auth_service
from hrms_api.models.domain.user import CurrentUser
from hrms_api.models.dto.auth import AuthResponse, LoginRequest, ProfileResponse, RegisterRequest
from hrms_api.security.auth import get_current_user
from hrms_api.security.rate_limit import API_DEFAULT_LIMIT, AUTH_LOGIN_LIMIT, limiter
from hrms_api.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(AUTH_LOGIN_LIMIT)
async def register(
    request: Request,
    body: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    """Register a new account and return an access token."""
    return await auth_service.register(body)


@router.post("/login", response_model=AuthResponse)
@limiter.limit(AUTH_LOGIN_LIMIT)
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    """Authenticate with email and password."""
    return await auth_service.login(body)


@router.get("/me", response_model=ProfileResponse)
@limiter.limit(API_DEFAULT_LIMIT)
async def get_profile(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> ProfileResponse:
    """Get the profile of the authenticated account."""
    return await auth_service.get_profile(current_user.id)
