"""Application credential service: off-loop hashing and typed verification results."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import StrEnum

from credential_hashing.application.ports.password_hasher_port import PasswordHasherPort
from credential_hashing.domain.credentials.errors import CredentialError

logger = logging.getLogger(__name__)


class VerificationOutcome(StrEnum):
    """Supported verification outcomes."""

    MATCH = "match"
    MISMATCH = "mismatch"
    CORRUPTED_CREDENTIAL = "corrupted_credential"


@dataclass(frozen=True)
class VerificationResult:
    """Verification result model; `error` is set only for corrupted credentials."""

    outcome: VerificationOutcome
    error: CredentialError | None = None

    @property
    def is_match(self) -> bool:
        return self.outcome is VerificationOutcome.MATCH


class CredentialService:
    """Run password hashing and verification in worker threads.

    Key derivation is deliberately slow, so each call is dispatched with
    `asyncio.to_thread` to keep the event loop responsive. Calls share no
    state and may run concurrently. A derivation that has started always
    runs to completion; callers enforce deadlines before calling.
    """

    def __init__(self, *, password_hasher: PasswordHasherPort) -> None:
        self._password_hasher = password_hasher

    async def hash_password(self, password: str | bytes) -> str:
        """Hash one plaintext password for storage."""

        password_hash = await asyncio.to_thread(self._password_hasher.hash_password, password)
        logger.debug("issued new password credential")
        return password_hash

    async def verify_password(
        self,
        *,
        password: str | bytes,
        password_hash: str,
    ) -> VerificationResult:
        """Verify one password, keeping corrupted credentials apart from mismatches."""

        try:
            is_valid = await asyncio.to_thread(
                self._password_hasher.verify_password,
                password=password,
                password_hash=password_hash,
            )
        except CredentialError as error:
            logger.warning(
                "stored credential could not be verified: %s",
                type(error).__name__,
            )
            return VerificationResult(
                outcome=VerificationOutcome.CORRUPTED_CREDENTIAL,
                error=error,
            )

        if not is_valid:
            logger.info("password did not match stored credential")
            return VerificationResult(outcome=VerificationOutcome.MISMATCH)
        return VerificationResult(outcome=VerificationOutcome.MATCH)
