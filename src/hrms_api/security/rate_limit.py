"""Rate limiting configuration for security-sensitive endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from hrms_api.config import get_settings


def _get_rate_limit_settings() -> dict[str, str]:
    """Get rate limit settings from configuration.

    Returns:
        Dictionary of rate limit strings
    """
    settings = get_settings()
    return {
        "default": f"{settings.rate_limit_default}/minute",
        "auth_login": f"{settings.rate_limit_auth_login}/minute",
        "intake": f"{settings.rate_limit_intake}/minute",
    }


# Get rate limits from config
_rate_limits = _get_rate_limit_settings()

# In-memory storage; one limiter per process
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[_rate_limits["default"]],
    enabled=get_settings().rate_limit_enabled,
)

# Rate limit constants for different endpoint types
AUTH_LOGIN_LIMIT = _rate_limits["auth_login"]
API_DEFAULT_LIMIT = _rate_limits["default"]

# Intake calls a paid model and sends mail per record
EMPLOYEE_INTAKE_LIMIT = _rate_limits["intake"]
