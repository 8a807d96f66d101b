"""Error taxonomy for stored credential decoding and verification."""

from __future__ import annotations


class CredentialError(ValueError):
    """Base class for stored credentials that cannot be verified."""


class MalformedCredential(CredentialError):
    """Raised when a stored credential lacks the key/salt separator."""


class InvalidEncoding(CredentialError):
    """Raised when a credential field is not valid hex or has the wrong size."""


class LengthMismatch(CredentialError):
    """Raised when a stored key and a freshly derived key differ in length."""


class EntropyUnavailable(RuntimeError):
    """Raised when the secure random source cannot supply salt bytes."""
