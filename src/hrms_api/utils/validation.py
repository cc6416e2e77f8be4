"""Input validation utilities for list filters."""

import re

# Maximum lengths for common fields
MAX_SEARCH_LENGTH = 200
MAX_DEPARTMENT_LENGTH = 100
MAX_STATUS_LENGTH = 50

# Pattern for safe text input (letters, numbers, spaces, common punctuation)
SAFE_TEXT_PATTERN = re.compile(r'^[\w\s\-.,&()\'"/]+$', re.UNICODE)


def sanitize_search(search: str | None, max_length: int = MAX_SEARCH_LENGTH) -> str | None:
    """Sanitize search input.

    Args:
        search: Raw search string
        max_length: Maximum allowed length

    Returns:
        Sanitized search string or None
    """
    if search is None:
        return None

    search = search[:max_length]

    # Queries are parameterized; stripping statement separators is extra hygiene
    search = search.replace(";", "").replace("--", "")

    return search.strip() or None


def sanitize_department(
    department: str | None, max_length: int = MAX_DEPARTMENT_LENGTH
) -> str | None:
    """Sanitize department filter input.

    Args:
        department: Raw department string
        max_length: Maximum allowed length

    Returns:
        Sanitized department string or None if empty or unsafe
    """
    if department is None:
        return None

    department = department[:max_length].strip()

    if not department:
        return None

    if not SAFE_TEXT_PATTERN.match(department):
        return None

    return department


def sanitize_status(status: str | None, allowed_values: set[str] | None = None) -> str | None:
    """Sanitize status filter input.

    Args:
        status: Raw status string
        allowed_values: Optional set of allowed status values

    Returns:
        Lower-cased status or None if empty or not allowed
    """
    if status is None:
        return None

    status = status[:MAX_STATUS_LENGTH].strip().lower()

    if not status:
        return None

    if allowed_values and status not in allowed_values:
        return None

    return status


def escape_like_wildcards(value: str) -> str:
    """Escape SQL LIKE wildcards so user input matches literally.

    Example:
        >>> escape_like_wildcards("test%value")
        'test\\\\%value'
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
