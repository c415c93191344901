"""
API Accessor
============
Signature, timestamp and nonce checks for API requests carried as flat
string parameters.

Replay protection is opt-in: without a ``nonce_checker`` the nonce check
accepts every request.
"""

__version__ = "0.1.0"

from .models import Argument, RejectReason
from .exceptions import (
    AccessorError,
    ArgumentMissing,
    SignatureUnmatched,
    TimestampTimeout,
    NonceAlreadyUsed,
    NonceBackendError,
)
from .arguments import Arguments
from .signature import (
    EvalSignature,
    build_origin,
    canonicalize,
    md5_signature,
    digest_evaluator,
    signatures_match,
    generate_nonce,
    DEFAULT_EVAL_SIGNATURE,
)
from .timestamp import TimestampChecker, check_timestamp_skew, timestamp_window
from .nonce import NonceChecker, accept_any_nonce
from .query import sign_params, parse_query_string, build_query_string
from .accessor import Accessor, AccessorConfig, new_accessor
from .config import (
    MAX_TIMESTAMP_SKEW_SECONDS,
    SIGNATURE_ROTATION,
    NONCE_TAG,
    TIMESTAMP_TAG,
    SIGNATURE_TAG,
)

__all__ = [
    # Models
    "Argument",
    "RejectReason",
    # Exceptions
    "AccessorError",
    "ArgumentMissing",
    "SignatureUnmatched",
    "TimestampTimeout",
    "NonceAlreadyUsed",
    "NonceBackendError",
    # Arguments
    "Arguments",
    # Signature
    "EvalSignature",
    "build_origin",
    "canonicalize",
    "md5_signature",
    "digest_evaluator",
    "signatures_match",
    "generate_nonce",
    "DEFAULT_EVAL_SIGNATURE",
    # Timestamp
    "TimestampChecker",
    "check_timestamp_skew",
    "timestamp_window",
    # Nonce
    "NonceChecker",
    "accept_any_nonce",
    # Query
    "sign_params",
    "parse_query_string",
    "build_query_string",
    # Accessor
    "Accessor",
    "AccessorConfig",
    "new_accessor",
    # Configuration
    "MAX_TIMESTAMP_SKEW_SECONDS",
    "SIGNATURE_ROTATION",
    "NONCE_TAG",
    "TIMESTAMP_TAG",
    "SIGNATURE_TAG",
]
