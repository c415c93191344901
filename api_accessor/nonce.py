"""
Nonce Checks
============
Contract for replay detection backends.

No storage is provided here. The caller injects a checker backed by a
cache, database or distributed store. Without one, ``check_nonce`` accepts
every nonce and replay protection is OFF.
"""

from typing import Protocol


class NonceChecker(Protocol):
    """
    Records a nonce as consumed.

    Returns True if the nonce was fresh and is now recorded, False if it
    was already consumed. Implementations shared between workers must make
    the check-and-record step atomic (e.g. Redis ``SET NX``), otherwise two
    concurrent requests with the same nonce can both be accepted.
    """

    def __call__(self, nonce: str) -> bool:
        ...


def accept_any_nonce(nonce: str) -> bool:
    """Permissive default: every nonce is accepted and nothing is recorded."""
    return True
