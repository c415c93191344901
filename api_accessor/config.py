"""
Accessor Configuration
======================
Configuration constants and environment variables.
"""

import os

# Reserved request arguments
NONCE_TAG = "nonce"
TIMESTAMP_TAG = "timestamp"
SIGNATURE_TAG = "signature"
SECRET_KEY_TAG = "secret_key"

REQUIRED_TAGS = (NONCE_TAG, TIMESTAMP_TAG, SIGNATURE_TAG)

# Excluded from the signed payload
UNSIGNED_TAGS = frozenset({SIGNATURE_TAG})

# Hex characters moved from the front to the back of the default digest
SIGNATURE_ROTATION = 2

# Configuration from environment
MAX_TIMESTAMP_SKEW_SECONDS = int(os.getenv("API_ACCESSOR_MAX_TIMESTAMP_SKEW", "300"))
