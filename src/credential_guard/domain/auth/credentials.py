"""Shared guards for plaintext credential inputs."""

from __future__ import annotations


def is_blank_password(password: str | None) -> bool:
    """Return whether one plaintext password is missing or whitespace-only."""

    return password is None or not password.strip()


def require_non_blank_password(*, password: str | None) -> str:
    """Return the password unchanged, rejecting missing or blank values."""

    if password is not None and not is_blank_password(password):
        return password
    raise ValueError("password cannot be blank")
