"""Tests for password hashing and one-time password generation."""

import pytest

from hrms_api.security.password import PasswordService


@pytest.fixture
def service() -> PasswordService:
    return PasswordService(rounds=4)


class TestHashing:
    """bcrypt hashing and verification."""

    def test_hash_and_verify(self, service: PasswordService) -> None:
        hashed = service.hash_password("correct horse battery staple")

        assert hashed.startswith("$2b$04$")
        assert service.verify_password("correct horse battery staple", hashed)
        assert not service.verify_password("wrong password", hashed)

    def test_hashes_are_salted(self, service: PasswordService) -> None:
        assert service.hash_password("same") != service.hash_password("same")

    def test_malformed_hash_does_not_verify(self, service: PasswordService) -> None:
        assert service.verify_password("anything", "not-a-bcrypt-hash") is False


class TestGeneration:
    """One-time password generation."""

    def test_default_length(self, service: PasswordService) -> None:
        assert len(service.generate_password()) == 12

    @pytest.mark.parametrize("length", [8, 16, 64])
    def test_requested_length(self, service: PasswordService, length: int) -> None:
        assert len(service.generate_password(length)) == length

    def test_characters_come_from_alphabet(self, service: PasswordService) -> None:
        for _ in range(50):
            password = service.generate_password()
            assert set(password) <= set(PasswordService.ALPHABET)

    def test_alphabet_contents(self) -> None:
        assert len(PasswordService.ALPHABET) == 70
        assert set("!@#$%^&*") <= set(PasswordService.ALPHABET)

    def test_passwords_differ(self, service: PasswordService) -> None:
        assert len({service.generate_password() for _ in range(20)}) == 20
