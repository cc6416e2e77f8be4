"""Secure logging utilities to prevent information disclosure."""

import logging
import re
from functools import lru_cache

from hrms_api.config import get_settings

_PATH_PATTERN = re.compile(r"['\"]?(/[a-zA-Z0-9_./\-]+|[A-Z]:\\[^\s'\"]+)['\"]?")
_URL_PATTERN = re.compile(r"(postgresql|postgres|sqlite|smtp|http|https)(\+\w+)?://[^\s]+")
_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+")
_TOKEN_PATTERN = re.compile(r"[a-zA-Z0-9_\-]{32,}")

MAX_LOGGED_MESSAGE_LENGTH = 200


@lru_cache(maxsize=1)
def is_debug_mode() -> bool:
    """Check if application is running in debug mode."""
    return get_settings().debug


def sanitize_exception_message(error: Exception) -> str:
    """Sanitize exception message for logging in production.

    Removes file system paths, connection strings, email addresses and
    long token-like strings, then truncates.

    Args:
        error: The exception to sanitize

    Returns:
        Sanitized error message suitable for production logs
    """
    error_msg = str(error)

    # Order matters: URLs can contain paths and emails
    error_msg = _URL_PATTERN.sub("[URL]", error_msg)
    error_msg = _PATH_PATTERN.sub("[PATH]", error_msg)
    error_msg = _EMAIL_PATTERN.sub("[EMAIL]", error_msg)
    error_msg = _TOKEN_PATTERN.sub("[TOKEN]", error_msg)

    if len(error_msg) > MAX_LOGGED_MESSAGE_LENGTH:
        error_msg = error_msg[: MAX_LOGGED_MESSAGE_LENGTH - 3] + "..."

    return error_msg


def mask_email(email: str | None) -> str:
    """Mask the local part of an email for log lines.

    ``john.doe@example.com`` becomes ``j***@example.com``.
    """
    if not email or "@" not in email:
        return "[EMAIL]"
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}"


def log_error(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
) -> None:
    """Log an error with appropriate detail level based on environment.

    In debug mode, logs full exception details with traceback.
    Otherwise logs the sanitized message only.

    Args:
        logger: The logger instance to use
        message: The log message (should be generic, no sensitive data)
        error: Optional exception to include
    """
    if error is None:
        logger.error(message)
    elif is_debug_mode():
        logger.error("%s: %s", message, error, exc_info=error)
    else:
        logger.error("%s: %s", message, sanitize_exception_message(error))


def log_warning(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
) -> None:
    """Log a warning with appropriate detail level based on environment."""
    if error is None:
        logger.warning(message)
    elif is_debug_mode():
        logger.warning("%s: %s", message, error)
    else:
        logger.warning("%s: %s", message, sanitize_exception_message(error))
