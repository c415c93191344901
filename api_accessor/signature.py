"""
Signature Functions
===================
Canonicalization of request arguments and digest computation.

The signed origin string holds every argument except ``signature``, plus
the shared secret as a ``secret_key`` argument, sorted by key and joined as
``k1=v1&k2=v2...`` with raw (unescaped) values. The default evaluator takes
its MD5 as lowercase hex and rotates it left by two characters.
"""

import hashlib
import hmac
import uuid
from typing import Callable, Iterable, Tuple

from .arguments import Arguments
from .config import SECRET_KEY_TAG, SIGNATURE_ROTATION, UNSIGNED_TAGS

# Maps the origin string to a digest string
EvalSignature = Callable[[str], str]


def canonicalize(pairs: Iterable[Tuple[str, str]]) -> str:
    """Join (key, value) pairs sorted by key as ``k=v`` with ``&``."""
    return "&".join(f"{key}={value}" for key, value in sorted(pairs))


def build_origin(arguments: Arguments, secret_key: str) -> str:
    """
    Build the string that gets hashed for a request.

    A ``secret_key`` argument sent with the request is replaced by the
    shared secret, so callers cannot choose the key they are checked with.

    Args:
        arguments: Request arguments
        secret_key: Shared secret

    Returns:
        Origin string for the signature evaluator
    """
    signed = dict(arguments.items(exclude=UNSIGNED_TAGS))
    signed[SECRET_KEY_TAG] = secret_key
    return canonicalize(signed.items())


def md5_signature(origin: str) -> str:
    """Default evaluator: lowercase hex MD5 of the origin, rotated left."""
    digest = hashlib.md5(origin.encode("utf-8")).hexdigest()
    return digest[SIGNATURE_ROTATION:] + digest[:SIGNATURE_ROTATION]


def digest_evaluator(algorithm: str) -> EvalSignature:
    """
    Build a plain hex evaluator for any ``hashlib`` algorithm.

    Args:
        algorithm: hashlib algorithm name (e.g. "sha256")

    Returns:
        Callable mapping an origin string to a hex digest

    Raises:
        ValueError: If hashlib does not know the algorithm
    """
    hashlib.new(algorithm)

    def evaluate(origin: str) -> str:
        return hashlib.new(algorithm, origin.encode("utf-8")).hexdigest()

    evaluate.__name__ = f"{algorithm}_signature"
    return evaluate


def signatures_match(expected: str, provided: str) -> bool:
    """
    Compare two signatures exactly, in constant time.

    Both sides are encoded first so non-ASCII input compares unequal
    instead of raising.
    """
    return hmac.compare_digest(expected.encode("utf-8"), provided.encode("utf-8"))


def generate_nonce() -> str:
    """Generate a unique nonce for request signing."""
    return str(uuid.uuid4())


# Evaluator used when none is configured
DEFAULT_EVAL_SIGNATURE: EvalSignature = md5_signature
