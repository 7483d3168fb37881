"""OS-backed cryptographic random source adapter."""

from __future__ import annotations

import secrets

from credential_guard.application.ports.random_source_port import RandomSourcePort


class SystemRandomSource(RandomSourcePort):
    """Random source backed by the operating system CSPRNG."""

    def token_bytes(self, size: int) -> bytes:
        return secrets.token_bytes(size)

    def randbelow(self, upper: int) -> int:
        return secrets.randbelow(upper)
