"""Tests for log sanitization and request tracing helpers."""

import logging

import pytest

from hrms_api.logging_config import HANDLER_NAME, ColorFormatter, setup_logging
from hrms_api.utils.request_id import resolve_request_id
from hrms_api.utils.secure_logging import mask_email, sanitize_exception_message


class TestSanitizeExceptionMessage:
    """Secrets and locations are removed from logged errors."""

    def test_connection_string_removed(self) -> None:
        error = Exception("could not connect to postgresql+asyncpg://hrms:pw@db:5432/hrms")
        assert sanitize_exception_message(error) == "could not connect to [URL]"

    def test_email_removed(self) -> None:
        error = Exception("duplicate key value (email)=(john.doe@company.com)")
        assert "john.doe@company.com" not in sanitize_exception_message(error)
        assert "[EMAIL]" in sanitize_exception_message(error)

    def test_path_removed(self) -> None:
        error = Exception("No such file: '/etc/hrms/secret.key'")
        assert sanitize_exception_message(error) == "No such file: [PATH]"

    def test_token_removed(self) -> None:
        error = Exception("bad key " + "a" * 40)
        assert sanitize_exception_message(error) == "bad key [TOKEN]"

    def test_truncated(self) -> None:
        assert len(sanitize_exception_message(Exception("word " * 100))) == 200


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("john.doe@company.com", "j***@company.com"),
        ("a@company.com", "a***@company.com"),
        ("not-an-email", "[EMAIL]"),
        (None, "[EMAIL]"),
    ],
)
def test_mask_email(email: str | None, expected: str) -> None:
    assert mask_email(email) == expected


class TestRequestId:
    """Incoming request IDs are reused only when well-formed."""

    def test_keeps_valid_id(self) -> None:
        assert resolve_request_id("abc-123_x.y") == "abc-123_x.y"

    @pytest.mark.parametrize("incoming", [None, "", "has space", "x" * 65, "line\nbreak"])
    def test_replaces_invalid_id(self, incoming: str | None) -> None:
        generated = resolve_request_id(incoming)
        assert generated != incoming
        assert len(generated) == 36


class TestLoggingSetup:
    """Console handler installation."""

    def test_setup_is_idempotent(self) -> None:
        setup_logging(logging.INFO)
        setup_logging(logging.INFO)

        ours = [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_plain_formatter_has_no_escape_codes(self) -> None:
        record = logging.LogRecord("hrms_api", logging.WARNING, __file__, 1, "careful", None, None)

        assert "\x1b[" not in ColorFormatter(use_color=False).format(record)
        assert ColorFormatter(use_color=True).format(record).startswith("\x1b[33m")
