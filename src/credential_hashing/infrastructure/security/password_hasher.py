"""Scrypt password hasher adapter."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from credential_hashing.application.ports.password_hasher_port import PasswordHasherPort
from credential_hashing.application.ports.random_source_port import RandomSourcePort
from credential_hashing.domain.credentials.codec import (
    DERIVED_KEY_BYTES,
    SALT_BYTES,
    decode_credential,
    encode_credential,
)
from credential_hashing.domain.credentials.comparison import constant_time_equals
from credential_hashing.domain.credentials.errors import EntropyUnavailable
from credential_hashing.infrastructure.security.random_source import SYSTEM_RANDOM_SOURCE

# hashlib caps maxmem at INT_MAX; OpenSSL caps r*p below 2**30.
_MAX_MAXMEM = 2**31 - 1
_MAX_BLOCK_PARALLELISM = 2**30 - 1


@dataclass(frozen=True)
class ScryptParameters:
    """Scrypt work factors shared by hashing and verification."""

    n: int = 16_384
    r: int = 8
    p: int = 1
    maxmem: int = 64 * 1024 * 1024

    def __post_init__(self) -> None:
        if self.n < 2 or self.n & (self.n - 1):
            raise ValueError("scrypt cost must be a power of two greater than 1")
        if self.r < 1 or self.p < 1:
            raise ValueError("scrypt block size and parallelism must be positive")
        if self.r * self.p > _MAX_BLOCK_PARALLELISM:
            raise ValueError("scrypt block size times parallelism must be below 2**30")
        if self.n.bit_length() - 1 >= 16 * self.r:
            raise ValueError(f"scrypt cost must be below 2**{16 * self.r} for block size {self.r}")
        if self.maxmem > _MAX_MAXMEM:
            raise ValueError(f"scrypt maxmem must not exceed {_MAX_MAXMEM} bytes")
        if self.maxmem < self.required_memory:
            raise ValueError(
                f"scrypt maxmem {self.maxmem} is below required {self.required_memory} bytes"
            )

    @property
    def required_memory(self) -> int:
        # Same bound OpenSSL enforces: the V working buffer plus the p*r B blocks.
        return 128 * self.r * (self.n + self.p + 2)


class ScryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using scrypt and the `<hex key>.<hex salt>` format."""

    def __init__(
        self,
        *,
        parameters: ScryptParameters | None = None,
        random_source: RandomSourcePort = SYSTEM_RANDOM_SOURCE,
    ) -> None:
        self._parameters = parameters or ScryptParameters()
        self._random_source = random_source

    @property
    def parameters(self) -> ScryptParameters:
        return self._parameters

    def hash_password(self, password: str | bytes) -> str:
        salt = self._random_source.random_bytes(SALT_BYTES)
        if len(salt) != SALT_BYTES:
            raise EntropyUnavailable(f"random source returned {len(salt)} of {SALT_BYTES} bytes")
        derived_key = self._derive(password, salt=salt)
        return encode_credential(derived_key=derived_key, salt=salt)

    def verify_password(self, *, password: str | bytes, password_hash: str) -> bool:
        credential = decode_credential(password_hash)
        candidate = self._derive(password, salt=credential.salt)
        return constant_time_equals(candidate, credential.derived_key)

    def _derive(self, password: str | bytes, *, salt: bytes) -> bytes:
        """Derive the 64-byte key; the salt enters scrypt as its lowercase hex text."""

        secret = password.encode("utf-8") if isinstance(password, str) else bytes(password)
        return hashlib.scrypt(
            secret,
            salt=salt.hex().encode("ascii"),
            n=self._parameters.n,
            r=self._parameters.r,
            p=self._parameters.p,
            maxmem=self._parameters.maxmem,
            dklen=DERIVED_KEY_BYTES,
        )
