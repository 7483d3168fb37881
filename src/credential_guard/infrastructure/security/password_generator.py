"""Secure random password generation."""

from __future__ import annotations

from credential_guard.application.ports.random_source_port import RandomSourcePort
from credential_guard.domain.auth.password_policy import MIN_PASSWORD_LENGTH, PASSWORD_ALPHABET
from credential_guard.infrastructure.security.random_source import SystemRandomSource


def generate_random_password(
    length: int,
    *,
    random_source: RandomSourcePort | None = None,
) -> str:
    """Return a random password drawn uniformly from the generator alphabet.

    Lengths below the policy minimum are clamped up. Character-class coverage
    is not guaranteed.
    """

    source = random_source or SystemRandomSource()
    resolved_length = max(length, MIN_PASSWORD_LENGTH)
    alphabet_size = len(PASSWORD_ALPHABET)
    return "".join(
        PASSWORD_ALPHABET[source.randbelow(alphabet_size)] for _ in range(resolved_length)
    )
