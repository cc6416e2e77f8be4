"""Password hashing and generation utilities."""

import secrets
import string

import bcrypt

from hrms_api.config import get_settings


class PasswordService:
    """Service for password hashing and one-time password generation."""

    SPECIAL_CHARS = "!@#$%^&*"
    ALPHABET = string.ascii_letters + string.digits + SPECIAL_CHARS

    DEFAULT_GENERATED_LENGTH = 12

    def __init__(self, rounds: int | None = None) -> None:
        """Initialize with a bcrypt cost factor (defaults to settings)."""
        self.rounds = rounds if rounds is not None else get_settings().bcrypt_rounds

    def hash_password(self, password: str, rounds: int | None = None) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password
            rounds: Cost factor for this call (defaults to the service's)

        Returns:
            Hashed password string
        """
        salt = bcrypt.gensalt(rounds=rounds or self.rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        """Verify a password against a hash.

        Args:
            password: Plain text password
            hashed: Hashed password

        Returns:
            True if password matches
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except (ValueError, UnicodeDecodeError, UnicodeEncodeError):
            # Invalid hash format or encoding issues
            return False

    def generate_password(self, length: int | None = None) -> str:
        """Generate a one-time password.

        Every character is drawn independently and uniformly from
        ``ALPHABET`` using the ``secrets`` CSPRNG.

        Args:
            length: Password length (defaults to 12)

        Returns:
            Random password
        """
        length = length or self.DEFAULT_GENERATED_LENGTH
        return "".join(secrets.choice(self.ALPHABET) for _ in range(length))


# Singleton instance
_password_service: PasswordService | None = None


def get_password_service() -> PasswordService:
    """Get the password service singleton.

    Returns:
        PasswordService instance
    """
    global _password_service
    if _password_service is None:
        _password_service = PasswordService()
    return _password_service
