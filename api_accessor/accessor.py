"""
Request Accessor
================
Facade running the signature, timestamp and nonce checks against one
request's arguments.
"""

from dataclasses import dataclass, fields
from typing import Any, Optional

import structlog

from .arguments import Arguments
from .config import NONCE_TAG, REQUIRED_TAGS, SIGNATURE_TAG, TIMESTAMP_TAG
from .exceptions import (
    AccessorError,
    ArgumentMissing,
    NonceAlreadyUsed,
    NonceBackendError,
    SignatureUnmatched,
    TimestampTimeout,
)
from .nonce import NonceChecker, accept_any_nonce
from .query import parse_query_string
from .signature import DEFAULT_EVAL_SIGNATURE, EvalSignature, build_origin, signatures_match
from .timestamp import TimestampChecker, check_timestamp_skew, parse_timestamp

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AccessorConfig:
    """
    Pluggable checks for an Accessor.

    Every field defaults to the built-in policy. Note that the default
    ``nonce_checker`` accepts everything: replay protection only works when
    a real checker is supplied.
    """
    eval_signature: EvalSignature = DEFAULT_EVAL_SIGNATURE
    timestamp_checker: TimestampChecker = check_timestamp_skew
    nonce_checker: NonceChecker = accept_any_nonce


class Accessor:
    """
    Validated view of a signed request.

    Construction fails with ArgumentMissing unless ``nonce``, ``timestamp``
    and ``signature`` are present and the timestamp is an integer. After
    that the instance is read-only and the three checks can run in any
    order, any number of times, from any thread.
    """

    __slots__ = ("_arguments", "_secret_key", "_config", "_timestamp")

    def __init__(
        self,
        params: Any,
        secret_key: str,
        config: Optional[AccessorConfig] = None,
    ):
        """
        Args:
            params: Request parameters (mapping, multidict or iterable of pairs)
            secret_key: Shared secret, never part of the parameters
            config: Check overrides; defaults apply when omitted
        """
        arguments = params if isinstance(params, Arguments) else Arguments(params)

        missing = arguments.missing(REQUIRED_TAGS)
        if missing:
            logger.warning("Request arguments missing", missing=list(missing))
            raise ArgumentMissing(f"arg lack: {', '.join(missing)}")

        try:
            timestamp = parse_timestamp(arguments[TIMESTAMP_TAG])
        except ValueError as e:
            logger.warning("Request timestamp invalid", error=str(e))
            raise ArgumentMissing(f"arg invalid: {TIMESTAMP_TAG}") from e

        self._arguments = arguments
        self._secret_key = secret_key
        self._config = config or AccessorConfig()
        self._timestamp = timestamp

    @classmethod
    def from_query_string(
        cls,
        query: str,
        secret_key: str,
        config: Optional[AccessorConfig] = None,
    ) -> "Accessor":
        """Build an Accessor from a raw URL query string."""
        return cls(parse_query_string(query), secret_key, config)

    @property
    def arguments(self) -> Arguments:
        return self._arguments

    @property
    def nonce(self) -> str:
        return self._arguments[NONCE_TAG]

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def signature(self) -> str:
        return self._arguments[SIGNATURE_TAG]

    def check_signature(self) -> None:
        """
        Recompute the request signature and compare it with the supplied one.

        Raises:
            SignatureUnmatched: If the digests differ
        """
        origin = build_origin(self._arguments, self._secret_key)
        expected = self._config.eval_signature(origin)
        if not signatures_match(expected, self.signature):
            logger.warning("Signature unmatched", nonce=self.nonce[:8])
            raise SignatureUnmatched("signature is unmatched")

    def check_timestamp(self) -> None:
        """
        Run the configured window policy on the request timestamp.

        Raises:
            TimestampTimeout: If the policy rejects the timestamp
        """
        if not self._config.timestamp_checker(self._timestamp):
            logger.warning("Timestamp out of window", timestamp=self._timestamp)
            raise TimestampTimeout("timestamp time out")

    def check_nonce(self) -> None:
        """
        Hand the nonce to the configured checker.

        Raises:
            NonceAlreadyUsed: If the checker reports a replay
            NonceBackendError: If the checker fails for any other reason
        """
        nonce = self.nonce
        try:
            fresh = self._config.nonce_checker(nonce)
        except AccessorError:
            raise
        except Exception as e:
            logger.error("Nonce checker failed", nonce=nonce[:8], error=str(e))
            raise NonceBackendError(f"nonce checker failed: {e}") from e

        if not fresh:
            logger.warning("Replay attack detected", nonce=nonce[:8])
            raise NonceAlreadyUsed("nonce is used")

    def check_all(self) -> None:
        """Run the signature, timestamp and nonce checks, in that order."""
        self.check_signature()
        self.check_timestamp()
        self.check_nonce()

    def __repr__(self) -> str:
        return f"Accessor(arguments={self._arguments!r})"


def new_accessor(params: Any, secret_key: str, **overrides: Any) -> Accessor:
    """
    Build an Accessor, overriding individual checks by keyword.

    Keywords are the AccessorConfig fields: ``eval_signature``,
    ``timestamp_checker`` and ``nonce_checker``.

    Raises:
        TypeError: For an unknown keyword
        ArgumentMissing: If a reserved argument is absent or invalid
    """
    known = {f.name for f in fields(AccessorConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"unknown accessor options: {', '.join(sorted(unknown))}")
    return Accessor(params, secret_key, AccessorConfig(**overrides))
