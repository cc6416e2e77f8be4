"""Global error handling to prevent information disclosure.

Every error response has the shape ``{"error": <message>, ...}``.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from hrms_api.config import get_settings
from hrms_api.exceptions import HRMSAPIError
from hrms_api.utils.secure_logging import sanitize_exception_message

logger = logging.getLogger(__name__)

# Validation errors reported back to the client outside debug mode
MAX_REPORTED_VALIDATION_ERRORS = 3


def _get_cors_headers(request: Request) -> dict[str, str]:
    """Get CORS headers for error responses.

    Exception handlers run outside the CORS middleware, so allowed origins
    would otherwise get error responses the browser refuses to read.

    Args:
        request: The incoming request

    Returns:
        Dict of CORS headers to add to the response
    """
    origin = request.headers.get("origin")
    if not origin:
        return {}

    if origin in get_settings().cors_origins_list:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
        }

    return {}


# Safe error messages that can be shown to users
SAFE_ERROR_MESSAGES = {
    400: "Invalid request",
    401: "Authentication required",
    403: "Access denied",
    404: "Resource not found",
    405: "Method not allowed",
    409: "Conflict with existing resource",
    422: "Invalid input data",
    429: "Too many requests",
    500: "Internal server error",
    502: "Service unavailable",
    503: "Service temporarily unavailable",
}

# Error messages that are safe to pass through
# These don't reveal internal implementation details
ALLOWED_ERROR_PATTERNS = [
    "Invalid credentials",
    "Authentication required",
    "Access token missing",
    "Invalid or expired token",
    "Access denied",
    "Resource not found",
    "User not found",
    "Employee not found",
    "Not Found",
    "Method Not Allowed",
]


def is_safe_error_message(message: str) -> bool:
    """Check if an error message is safe to expose to users.

    Args:
        message: Error message to check

    Returns:
        True if message is safe to expose
    """
    message_lower = message.lower()
    return any(pattern.lower() in message_lower for pattern in ALLOWED_ERROR_PATTERNS)


def sanitize_error_detail(detail: Any, status_code: int) -> str:
    """Sanitize error detail to prevent information disclosure.

    Args:
        detail: Original error detail
        status_code: HTTP status code

    Returns:
        Safe error message
    """
    if isinstance(detail, str) and is_safe_error_message(detail):
        return detail

    # Return generic message for unknown patterns
    return SAFE_ERROR_MESSAGES.get(status_code, "Request failed")


def summarize_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Reduce pydantic errors to ``"field: message"`` strings.

    Only the field name is kept, not the full location or input value.
    """
    summaries = []
    for error in errors:
        loc = error.get("loc", ())
        msg = error.get("msg", "Invalid value")
        field = loc[-1] if loc else "field"
        if isinstance(field, int):
            field = loc[-2] if len(loc) > 1 else "field"
        if isinstance(field, str) and not field.startswith("_"):
            summaries.append(f"{field}: {msg}")
    return summaries


async def hrms_api_exception_handler(request: Request, exc: HRMSAPIError) -> JSONResponse:
    """Render domain exceptions with their own status and message.

    Args:
        request: FastAPI request
        exc: Domain exception

    Returns:
        JSONResponse with ``{"error": message, **details}``
    """
    if exc.status_code >= 500:
        logger.warning(
            "%s for %s %s: %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc.details.get("details", exc.message),
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, **exc.details},
        headers=_get_cors_headers(request),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions with sanitized messages.

    Args:
        request: FastAPI request
        exc: HTTP exception

    Returns:
        JSONResponse with sanitized error
    """
    settings = get_settings()
    headers = {**(exc.headers or {}), **_get_cors_headers(request)}

    # In debug mode, return original detail
    detail = exc.detail if settings.debug else sanitize_error_detail(exc.detail, exc.status_code)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=headers,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle validation exceptions with sanitized messages.

    Args:
        request: FastAPI request
        exc: Validation exception

    Returns:
        JSONResponse with field-level error summaries
    """
    settings = get_settings()
    summaries = summarize_validation_errors(list(exc.errors()))

    logger.warning("Validation error for %s %s: %s", request.method, request.url.path, summaries)

    if not settings.debug:
        summaries = summaries[:MAX_REPORTED_VALIDATION_ERRORS]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": SAFE_ERROR_MESSAGES[422], "details": summaries},
        headers=_get_cors_headers(request),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking information.

    Args:
        request: FastAPI request
        exc: Unexpected exception

    Returns:
        JSONResponse with generic error
    """
    settings = get_settings()
    cors_headers = _get_cors_headers(request)

    logger.error(
        "Unhandled exception for %s %s: %s",
        request.method,
        request.url.path,
        sanitize_exception_message(exc),
        exc_info=True,
    )

    # In debug mode, return more details
    if settings.debug:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": str(exc),
                "type": type(exc).__name__,
            },
            headers=cors_headers,
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": SAFE_ERROR_MESSAGES[500]},
        headers=cors_headers,
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle SQLAlchemy exceptions without leaking database details.

    Args:
        request: FastAPI request
        exc: SQLAlchemy exception

    Returns:
        JSONResponse with safe error
    """
    settings = get_settings()
    cors_headers = _get_cors_headers(request)

    logger.error(
        "Database error for %s %s: %s",
        request.method,
        request.url.path,
        sanitize_exception_message(exc),
        exc_info=settings.debug,
    )

    # Check for integrity errors (duplicates, foreign key violations)
    if isinstance(exc, IntegrityError):
        message = str(exc).lower()
        if "unique" in message or "duplicate" in message:
            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content={"error": "Resource already exists"},
                headers=cors_headers,
            )
        if "foreign key" in message:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": "Referenced resource not found"},
                headers=cors_headers,
            )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Database error occurred",
            **({"type": type(exc).__name__} if settings.debug else {}),
        },
        headers=cors_headers,
    )
