"""Port for the cryptographically secure random source used for salts."""

from __future__ import annotations

from typing import Protocol


class RandomSourcePort(Protocol):
    """Secure random bytes contract."""

    def random_bytes(self, size: int) -> bytes:
        """Return `size` bytes from a cryptographically secure source."""
