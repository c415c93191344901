"""
Timestamp Checks
================
Window policies for the request ``timestamp`` argument.
"""

import re
import time
from typing import Callable

from .config import MAX_TIMESTAMP_SKEW_SECONDS

# Returns True when the timestamp (Unix seconds) is acceptable
TimestampChecker = Callable[[int], bool]

_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")


def check_timestamp_skew(
    timestamp: int,
    max_skew: int = MAX_TIMESTAMP_SKEW_SECONDS
) -> bool:
    """
    Check if timestamp is within acceptable skew.

    The window is symmetric: timestamps too old and too far in the future
    are both rejected.

    Args:
        timestamp: Unix timestamp from request
        max_skew: Maximum allowed skew in seconds

    Returns:
        True if timestamp is acceptable
    """
    current_time = int(time.time())
    return abs(current_time - timestamp) <= max_skew


def timestamp_window(max_skew: int) -> TimestampChecker:
    """Build a symmetric window checker with a custom skew."""
    if max_skew <= 0:
        raise ValueError("max_skew must be positive")

    def check(timestamp: int) -> bool:
        return check_timestamp_skew(timestamp, max_skew)

    return check


def parse_timestamp(value: str) -> int:
    """
    Parse a base-10 Unix timestamp.

    Raises:
        ValueError: If the value is not an optionally signed run of digits
    """
    if not _TIMESTAMP_RE.fullmatch(value):
        raise ValueError(f"invalid timestamp: {value!r}")
    return int(value)
