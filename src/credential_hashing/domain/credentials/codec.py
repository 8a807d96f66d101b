"""Textual codec for stored credentials: `<hex key>.<hex salt>`."""

from __future__ import annotations

import re
from dataclasses import dataclass

from credential_hashing.domain.credentials.errors import InvalidEncoding, MalformedCredential

SEPARATOR = "."
SALT_BYTES = 16
DERIVED_KEY_BYTES = 64

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")


@dataclass(frozen=True)
class Credential:
    """Derived key and salt pair recovered from one stored credential."""

    derived_key: bytes
    salt: bytes

    @property
    def encoded(self) -> str:
        """Re-encode the pair; a decoded key of the wrong size is not re-encodable."""

        return encode_credential(derived_key=self.derived_key, salt=self.salt)


def encode_credential(*, derived_key: bytes, salt: bytes) -> str:
    """Join hex-encoded key and salt with the credential separator."""

    if len(derived_key) != DERIVED_KEY_BYTES:
        raise InvalidEncoding(
            f"derived key must be {DERIVED_KEY_BYTES} bytes, got {len(derived_key)}"
        )
    if len(salt) != SALT_BYTES:
        raise InvalidEncoding(f"salt must be {SALT_BYTES} bytes, got {len(salt)}")
    return f"{derived_key.hex()}{SEPARATOR}{salt.hex()}"


def decode_credential(encoded: str) -> Credential:
    """Split a stored credential on its first separator and decode both fields.

    The key field length is left to the verifier, which compares it against
    the freshly derived key. The salt field must decode to exactly
    `SALT_BYTES` bytes.
    """

    key_field, separator, salt_field = encoded.partition(SEPARATOR)
    if not separator:
        raise MalformedCredential("credential is missing the key/salt separator")

    derived_key = _decode_hex_field(key_field, field_name="key")
    salt = _decode_hex_field(salt_field, field_name="salt")
    if len(salt) != SALT_BYTES:
        raise InvalidEncoding(f"salt field must decode to {SALT_BYTES} bytes, got {len(salt)}")
    return Credential(derived_key=derived_key, salt=salt)


def _decode_hex_field(value: str, *, field_name: str) -> bytes:
    """Decode one strict hex field; `bytes.fromhex` alone would accept whitespace."""

    if _HEX_PATTERN.fullmatch(value) is None:
        raise InvalidEncoding(f"{field_name} field contains non-hex characters")
    if len(value) % 2:
        raise InvalidEncoding(f"{field_name} field has odd hex length")
    return bytes.fromhex(value)
