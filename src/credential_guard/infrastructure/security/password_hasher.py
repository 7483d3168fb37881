"""Salted SHA-256 password hasher adapter."""

from __future__ import annotations

import base64
import binascii
import hashlib
import logging

from credential_guard.application.ports.password_hasher_port import (
    HashAlgorithmUnavailableError,
    InvalidPasswordInputError,
    PasswordHasherPort,
)
from credential_guard.application.ports.random_source_port import RandomSourcePort
from credential_guard.domain.auth.credentials import is_blank_password
from credential_guard.infrastructure.security.constant_time import constant_time_equals
from credential_guard.infrastructure.security.random_source import SystemRandomSource

logger = logging.getLogger(__name__)

SALT_LENGTH = 16
HASH_ALGORITHM = "sha256"
DIGEST_LENGTH = 32


def _salted_digest(*, salt: bytes, password_bytes: bytes) -> bytes:
    """Return the digest of `salt || password_bytes`."""

    try:
        digest = hashlib.new(HASH_ALGORITHM)
    except ValueError as exc:
        raise HashAlgorithmUnavailableError(algorithm=HASH_ALGORITHM) from exc
    digest.update(salt)
    digest.update(password_bytes)
    return digest.digest()


class Sha256PasswordHasher(PasswordHasherPort):
    """Password hashing adapter storing base64(salt || sha256(salt || password))."""

    def __init__(self, *, random_source: RandomSourcePort | None = None) -> None:
        self._random_source = random_source or SystemRandomSource()

    def hash_password(self, password: str) -> str:
        if is_blank_password(password):
            raise InvalidPasswordInputError("password cannot be blank")

        try:
            password_bytes = password.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidPasswordInputError("password must be valid unicode text") from exc

        salt = self._random_source.token_bytes(SALT_LENGTH)
        try:
            digest = _salted_digest(salt=salt, password_bytes=password_bytes)
        except HashAlgorithmUnavailableError:
            logger.error("password_hash_algorithm_unavailable algorithm=%s", HASH_ALGORITHM)
            raise
        return base64.b64encode(salt + digest).decode("ascii")

    def verify_password(self, *, password: str | None, password_hash: str | None) -> bool:
        if password is None or password_hash is None:
            return False
        if is_blank_password(password) or is_blank_password(password_hash):
            return False

        try:
            combined = base64.b64decode(password_hash, validate=True)
        except (binascii.Error, ValueError):
            logger.warning("password_verify_rejected reason=malformed_encoding")
            return False

        if len(combined) <= SALT_LENGTH:
            logger.warning(
                "password_verify_rejected reason=too_short decoded_bytes=%s",
                len(combined),
            )
            return False

        try:
            password_bytes = password.encode("utf-8")
        except UnicodeEncodeError:
            logger.warning("password_verify_rejected reason=unencodable_password")
            return False

        salt = combined[:SALT_LENGTH]
        stored_digest = combined[SALT_LENGTH:]
        try:
            candidate_digest = _salted_digest(salt=salt, password_bytes=password_bytes)
        except HashAlgorithmUnavailableError:
            logger.error("password_hash_algorithm_unavailable algorithm=%s", HASH_ALGORITHM)
            return False
        return constant_time_equals(candidate_digest, stored_digest)
