"""Port for password hashing and verification."""

from __future__ import annotations

from typing import Protocol


class InvalidPasswordInputError(ValueError):
    """Raised when a blank plaintext password is submitted for hashing."""


class HashAlgorithmUnavailableError(RuntimeError):
    """Raised when the configured digest primitive cannot be instantiated."""

    def __init__(self, *, algorithm: str) -> None:
        super().__init__(f"hash algorithm unavailable: {algorithm}")
        self.algorithm = algorithm


class PasswordHasherPort(Protocol):
    """Password hashing/verification contract."""

    def hash_password(self, password: str) -> str:
        """Hash plaintext password for storage."""

    def verify_password(self, *, password: str | None, password_hash: str | None) -> bool:
        """Verify plaintext password against stored hash, never raising."""
