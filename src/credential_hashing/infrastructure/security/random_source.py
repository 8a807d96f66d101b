"""Operating-system backed secure random source."""

from __future__ import annotations

import secrets

from credential_hashing.application.ports.random_source_port import RandomSourcePort
from credential_hashing.domain.credentials.errors import EntropyUnavailable


class SystemRandomSource(RandomSourcePort):
    """Random source backed by `secrets.token_bytes`; stateless and self-seeding."""

    def random_bytes(self, size: int) -> bytes:
        try:
            data = secrets.token_bytes(size)
        except OSError as exc:
            raise EntropyUnavailable("operating system entropy source failed") from exc
        if len(data) != size:
            raise EntropyUnavailable(f"entropy source returned {len(data)} of {size} bytes")
        return data


SYSTEM_RANDOM_SOURCE = SystemRandomSource()
