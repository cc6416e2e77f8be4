"""Authentication and authorization utilities."""

from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from hrms_api.config import get_settings
from hrms_api.models.domain.user import CurrentUser, UserRole
from hrms_api.models.orm.user import UserORM

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(user: UserORM) -> str:
    """Create a JWT access token for an account.

    Args:
        user: Account the token is issued to

    Returns:
        JWT token string
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)

    payload: dict[str, Any] = {
        "sub": str(user.id),
        "userId": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "employeeId": user.employee_id,
        "exp": now + timedelta(hours=settings.jwt_expiration_hours),
        "iat": now,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """Decode and verify a JWT token.

    Args:
        token: JWT token string

    Returns:
        Token payload

    Raises:
        HTTPException: If token is invalid or expired
    """
    settings = get_settings()

    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        ) from e


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
) -> CurrentUser:
    """Get the current authenticated actor from the bearer token.

    Args:
        credentials: HTTP Bearer credentials

    Returns:
        CurrentUser decoded from the token

    Raises:
        HTTPException: If authentication fails
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token missing",
        )

    payload = decode_token(credentials.credentials)

    try:
        return CurrentUser(
            id=int(payload["sub"]),
            name=payload.get("name") or "",
            email=payload["email"],
            role=UserRole(payload.get("role", UserRole.EMPLOYEE)),
            employee_id=payload.get("employeeId"),
        )
    except (KeyError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        ) from e
