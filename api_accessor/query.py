"""
Query Functions
===============
Functions for creating and parsing signed request parameters.
"""

import time
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from .arguments import Arguments
from .config import NONCE_TAG, SECRET_KEY_TAG, SIGNATURE_TAG, TIMESTAMP_TAG
from .signature import DEFAULT_EVAL_SIGNATURE, EvalSignature, build_origin, generate_nonce


def sign_params(
    params: Any,
    secret_key: str,
    nonce: Optional[str] = None,
    timestamp: Optional[int] = None,
    eval_signature: EvalSignature = DEFAULT_EVAL_SIGNATURE,
) -> Dict[str, str]:
    """
    Add ``nonce``, ``timestamp`` and ``signature`` to a parameter set.

    Args:
        params: Request parameters to sign
        secret_key: Shared secret
        nonce: Nonce to use (a fresh UUID4 when omitted)
        timestamp: Unix timestamp to use (now when omitted)
        eval_signature: Digest function, must match the verifier's

    Returns:
        New parameter dict ready to send
    """
    signed = dict(Arguments(params).mapping)
    signed.pop(SIGNATURE_TAG, None)
    signed.pop(SECRET_KEY_TAG, None)
    signed[NONCE_TAG] = nonce if nonce is not None else generate_nonce()
    signed[TIMESTAMP_TAG] = str(timestamp if timestamp is not None else int(time.time()))

    origin = build_origin(Arguments(signed), secret_key)
    signed[SIGNATURE_TAG] = eval_signature(origin)
    return signed


def parse_query_string(query: str) -> List[Tuple[str, str]]:
    """
    Split a raw URL query string into decoded (key, value) pairs.

    Blank values are kept. A leading ``?`` is ignored.
    """
    return parse_qsl(query.lstrip("?"), keep_blank_values=True)


def build_query_string(params: Any) -> str:
    """Encode a parameter set as a URL query string."""
    return urlencode(list(Arguments(params).mapping.items()))
