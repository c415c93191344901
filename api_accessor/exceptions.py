"""
Accessor Exceptions
===================
Exception classes raised by accessor construction and checks.
"""

from .models import RejectReason


class AccessorError(Exception):
    """Base class for every request check failure."""

    reason: RejectReason

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ArgumentMissing(AccessorError):
    """Raised when a reserved argument is absent or unparseable."""
    reason = RejectReason.ARGUMENT_MISSING


class SignatureUnmatched(AccessorError):
    """Raised when the computed signature differs from the supplied one."""
    reason = RejectReason.SIGNATURE_UNMATCHED


class TimestampTimeout(AccessorError):
    """Raised when the request timestamp is outside the allowed window."""
    reason = RejectReason.TIMESTAMP_TIMEOUT


class NonceAlreadyUsed(AccessorError):
    """Raised when the nonce checker reports a replay."""
    reason = RejectReason.NONCE_ALREADY_USED


class NonceBackendError(AccessorError):
    """Raised when the nonce checker itself fails (storage unavailable, etc.)."""
    reason = RejectReason.NONCE_BACKEND_ERROR
