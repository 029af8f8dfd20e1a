"""HMAC-signed URLs with optional expiry."""

from signed_uri.errors import InvalidQuery, InvalidTimeout, SignatureExpired, SignatureInvalid, SignedUrlError
from signed_uri.logic.codec import SignedUrlCodec
from signed_uri.settings import CodecSettings, load_settings, settings_from_env

__all__ = [
    "CodecSettings",
    "InvalidQuery",
    "InvalidTimeout",
    "SignatureExpired",
    "SignatureInvalid",
    "SignedUrlCodec",
    "SignedUrlError",
    "load_settings",
    "settings_from_env",
]
