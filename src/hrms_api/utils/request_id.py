"""Request ID generation utilities."""

import re
import uuid

# Accept caller-supplied IDs only if they look like opaque tokens
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9\-_.]{1,64}$")


def generate_request_id() -> str:
    """Generate a unique request ID for tracing.

    Returns:
        A UUID4 string for request tracking across the application.
    """
    return str(uuid.uuid4())


def resolve_request_id(incoming: str | None) -> str:
    """Reuse a well-formed incoming ``X-Request-ID`` or generate a new one."""
    if incoming and _REQUEST_ID_PATTERN.match(incoming):
        return incoming
    return generate_request_id()
