"""Users router - login account management."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status

from hrms_api.dependencies import get_user_service
from hrms_api.models.domain.filters import UserFilters
from hrms_api.models.domain.user import CurrentUser
from hrms_api.models.dto.auth import UserInfo
from hrms_api.models.dto.common import MessageResponse
from hrms_api.models.dto.user import (
    UserCreate,
    UserListResponse,
    UserMutationResponse,
    UserStatsResponse,
    UserUpdate,
)
from hrms_api.security.auth import get_current_user
from hrms_api.security.rate_limit import API_DEFAULT_LIMIT, limiter
from hrms_api.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=UserListResponse)
async def list_users(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
    search: str | None = Query(default=None, max_length=200),
    page: int = Query(default=1, ge=1, le=10000),
    limit: int = Query(default=10, ge=1, le=100),
) -> UserListResponse:
    """List accounts, newest first."""
    return await user_service.list_users(UserFilters.from_query(search), page, limit)


@router.get("/stats", response_model=UserStatsResponse)
async def get_user_stats(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserStatsResponse:
    """Get account creation statistics."""
    return await user_service.get_stats()


@router.get("/{user_id}", response_model=UserInfo)
async def get_user(
    user_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserInfo:
    """Get a single account."""
    return await user_service.get_user(user_id)


@router.post("", response_model=UserMutationResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(API_DEFAULT_LIMIT)
async def create_user(
    request: Request,
    body: UserCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserMutationResponse:
    """Create an account."""
    return await user_service.create_user(body)


@router.put("/{user_id}", response_model=UserMutationResponse)
@limiter.limit(API_DEFAULT_LIMIT)
async def update_user(
    request: Request,
    user_id: int,
    body: UserUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserMutationResponse:
    """Update an account."""
    return await user_service.update_user(user_id, body)


@router.delete("/{user_id}", response_model=MessageResponse)
@limiter.limit(API_DEFAULT_LIMIT)
async def delete_user(
    request: Request,
    user_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> MessageResponse:
    """Delete an account."""
    return await user_service.delete_user(user_id)
