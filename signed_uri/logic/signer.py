"""HMAC-SHA256 signing of canonical query strings."""

from __future__ import annotations

import hashlib
import hmac

from itsdangerous.encoding import want_bytes
from itsdangerous.signer import HMACAlgorithm

from signed_uri.errors import InvalidQuery

ALGORITHM = HMACAlgorithm(hashlib.sha256)


def sign(query: str, secret: str | bytes) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``query`` keyed by ``secret``."""
    if not query:
        raise InvalidQuery("Hash cannot be created, query string empty")
    return ALGORITHM.get_signature(want_bytes(secret), want_bytes(query)).hex()


def signatures_match(expected: str, given: str) -> bool:
    return hmac.compare_digest(want_bytes(expected), want_bytes(given))
