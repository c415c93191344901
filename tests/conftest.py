"""
Shared fixtures for api_accessor tests.
"""

import time

import pytest


@pytest.fixture
def secret_key():
    return "123"


@pytest.fixture
def known_signature():
    """Signature of known_params under secret_key."""
    return "ca444a9db0301178257b0d9e959533a3"


@pytest.fixture
def known_params(known_signature):
    """Parameters whose signature is known_signature."""
    return {
        "nonce": "12345",
        "signature": known_signature,
        "timestamp": "12345",
        "phone": "12345",
        "abc": "abc",
    }


@pytest.fixture
def fresh_params():
    """Parameters stamped with the current time."""
    return {
        "nonce": "12345",
        "signature": "12345",
        "timestamp": str(int(time.time())),
        "phone": "12345",
        "abc": "abc",
    }


@pytest.fixture
def nonce_store():
    """In-memory stand-in for an external nonce backend."""
    return {}


@pytest.fixture
def nonce_checker(nonce_store):
    def check(nonce: str) -> bool:
        if nonce in nonce_store:
            return False
        nonce_store[nonce] = True
        return True

    return check
