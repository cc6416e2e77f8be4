"""Domain-specific exceptions for the HRMS API.

These exceptions keep service-layer errors separate from HTTP responses.
Each class carries the status code it maps to; the handlers in
``hrms_api.middleware.error_handler`` render them as ``{"error": message}``
merged with ``details``.
"""

from typing import Any


class HRMSAPIError(Exception):
    """Base exception for all HRMS API errors."""

    status_code: int = 500

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(HRMSAPIError):
    """Raised when request input is missing or malformed."""

    status_code = 400


class MissingPromptError(ValidationError):
    """Raised when an intake request carries no prompt text."""

    def __init__(self) -> None:
        super().__init__("Missing 'prompt' field in request.")


class MissingFieldsError(ValidationError):
    """Raised when required body fields are absent."""

    def __init__(self, required: list[str]) -> None:
        super().__init__("Missing required fields", {"required": required})


# =============================================================================
# Authentication Errors (401)
# =============================================================================


class AuthenticationError(HRMSAPIError):
    """Raised when credentials are missing or wrong."""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(HRMSAPIError):
    """Base class for resource not found errors."""

    status_code = 404


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee cannot be found."""

    def __init__(self, employee_id: int | None = None) -> None:
        super().__init__("Employee not found")
        self.employee_id = employee_id


class UserNotFoundError(NotFoundError):
    """Raised when a user account cannot be found."""

    def __init__(self, user_id: int | None = None) -> None:
        super().__init__("User not found")
        self.user_id = user_id


# =============================================================================
# Conflict Errors (409)
# =============================================================================


class ConflictError(HRMSAPIError):
    """Base class for resource conflict errors."""

    status_code = 409


class UserAlreadyExistsError(ConflictError):
    """Raised when trying to create a user that already exists."""

    def __init__(self, message: str = "User with this email already exists") -> None:
        super().__init__(message)


class EmployeeAlreadyExistsError(ConflictError):
    """Raised when an employee update collides with another employee's email."""

    def __init__(self) -> None:
        super().__init__("Employee with this email already exists")


class AccountNotLinkedError(ConflictError):
    """Raised when an employee has no linked login account."""

    def __init__(self) -> None:
        super().__init__("Employee has no linked account")


# =============================================================================
# Upstream Errors (500 / 502 / 503)
# =============================================================================


class ExtractionError(HRMSAPIError):
    """Raised when the model output cannot be obtained or parsed.

    Aborts the whole intake batch; nothing is provisioned.
    """

    status_code = 500

    def __init__(self, reason: str) -> None:
        super().__init__("Error processing employee creation", {"details": reason})
        self.reason = reason


class EmailDeliveryError(HRMSAPIError):
    """Raised when the mail transport fails to deliver a message."""

    status_code = 502

    def __init__(self, reason: str) -> None:
        super().__init__("Email delivery failed", {"details": reason})
        self.reason = reason


class ServiceUnavailableError(HRMSAPIError):
    """Raised when an optional capability is used without being configured."""

    status_code = 503


class ExtractionServiceUnavailableError(ServiceUnavailableError):
    """Raised when intake is requested but no AI provider is configured."""

    def __init__(self) -> None:
        super().__init__(
            "AI service is not available. Please set GEMINI_API_KEY in your .env file "
            "to enable AI functionality.",
            {
                "message": (
                    "To use this endpoint, you need to set up a Gemini API key. "
                    "Visit https://aistudio.google.com/app/apikey to get one."
                )
            },
        )
