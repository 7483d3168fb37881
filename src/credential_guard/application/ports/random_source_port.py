"""Port for the cryptographic random source used by credential primitives."""

from __future__ import annotations

from typing import Protocol


class RandomSourcePort(Protocol):
    """Random-source capability contract.

    Production code must only bind this port to an OS-backed cryptographic
    generator.
    """

    def token_bytes(self, size: int) -> bytes:
        """Return `size` random bytes."""

    def randbelow(self, upper: int) -> int:
        """Return one uniform integer in `[0, upper)`."""
