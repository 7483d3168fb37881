"""Application service for registration and password-reset credential flows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from credential_guard.application.ports.password_hasher_port import (
    InvalidPasswordInputError,
    PasswordHasherPort,
)
from credential_guard.application.ports.random_source_port import RandomSourcePort
from credential_guard.domain.auth.credentials import require_non_blank_password
from credential_guard.domain.auth.password_policy import MIN_PASSWORD_LENGTH, is_password_strong
from credential_guard.infrastructure.security.password_generator import generate_random_password

logger = logging.getLogger(__name__)

MAX_TEMPORARY_PASSWORD_ATTEMPTS = 32


class WeakPasswordError(ValueError):
    """Raised when a new password fails the strength policy."""

    def __init__(self) -> None:
        super().__init__(
            f"password must have at least {MIN_PASSWORD_LENGTH} characters and include "
            "uppercase, lowercase, digit and special characters"
        )


class PasswordConfirmationError(ValueError):
    """Raised when password and confirmation inputs differ."""

    def __init__(self) -> None:
        super().__init__("password confirmation does not match")


class TemporaryPasswordGenerationError(RuntimeError):
    """Raised when no generated candidate satisfies the strength policy."""

    def __init__(self, *, attempts: int) -> None:
        super().__init__(f"no strong temporary password after {attempts} attempts")
        self.attempts = attempts


@dataclass(frozen=True)
class IssuedPassword:
    """One generated plaintext password and its encoded hash."""

    password: str = field(repr=False)
    password_hash: str


class CredentialService:
    """Produce and check stored credentials for locally-managed accounts."""

    def __init__(
        self,
        *,
        password_hasher: PasswordHasherPort,
        random_source: RandomSourcePort | None = None,
        generated_password_length: int = 16,
        require_strong_passwords: bool = True,
    ) -> None:
        self._password_hasher = password_hasher
        self._random_source = random_source
        self._generated_password_length = generated_password_length
        self._require_strong_passwords = require_strong_passwords

    def hash_new_password(
        self,
        *,
        password: str,
        confirm_password: str | None = None,
    ) -> str:
        """Validate one new password and return its encoded hash for storage."""

        try:
            require_non_blank_password(password=password)
        except ValueError as exc:
            raise InvalidPasswordInputError(str(exc)) from exc

        if confirm_password is not None and confirm_password != password:
            logger.info("credential_rejected reason=confirmation_mismatch")
            raise PasswordConfirmationError()

        if self._require_strong_passwords and not is_password_strong(password):
            logger.info("credential_rejected reason=weak_password")
            raise WeakPasswordError()

        return self._password_hasher.hash_password(password)

    def verify_password(self, *, password: str | None, password_hash: str | None) -> bool:
        """Check one plaintext password against its stored encoded hash."""

        is_valid = self._password_hasher.verify_password(
            password=password,
            password_hash=password_hash,
        )
        logger.debug("credential_verified matched=%s", is_valid)
        return is_valid

    def issue_temporary_password(self, *, length: int | None = None) -> IssuedPassword:
        """Generate a strong one-time password and return it with its hash."""

        resolved_length = self._generated_password_length if length is None else length
        for attempt in range(1, MAX_TEMPORARY_PASSWORD_ATTEMPTS + 1):
            candidate = generate_random_password(
                resolved_length,
                random_source=self._random_source,
            )
            if is_password_strong(candidate):
                logger.info(
                    "temporary_password_issued length=%s attempts=%s",
                    len(candidate),
                    attempt,
                )
                return IssuedPassword(
                    password=candidate,
                    password_hash=self._password_hasher.hash_password(candidate),
                )

        logger.error(
            "temporary_password_failed attempts=%s",
            MAX_TEMPORARY_PASSWORD_ATTEMPTS,
        )
        raise TemporaryPasswordGenerationError(attempts=MAX_TEMPORARY_PASSWORD_ATTEMPTS)
