"""
Accessor Models
===============
Data models and enums shared by the request checks.
"""

from dataclasses import dataclass
from enum import Enum


class RejectReason(str, Enum):
    """Reasons for rejecting a request."""
    ARGUMENT_MISSING = "argument_missing"
    SIGNATURE_UNMATCHED = "signature_unmatched"
    TIMESTAMP_TIMEOUT = "timestamp_timeout"
    NONCE_ALREADY_USED = "nonce_already_used"
    NONCE_BACKEND_ERROR = "nonce_backend_error"


@dataclass(frozen=True)
class Argument:
    """A single request parameter."""
    key: str
    value: str
