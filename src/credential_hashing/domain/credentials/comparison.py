"""Constant-time comparison of derived keys."""

from __future__ import annotations

import hmac

from credential_hashing.domain.credentials.errors import LengthMismatch


def constant_time_equals(candidate: bytes, stored: bytes) -> bool:
    """Compare two keys without timing dependence on the first differing byte.

    Buffers of different sizes are a corrupted credential, not a mismatch.
    """

    if len(candidate) != len(stored):
        raise LengthMismatch(
            f"derived key is {len(candidate)} bytes but stored key is {len(stored)} bytes"
        )
    return hmac.compare_digest(candidate, stored)
