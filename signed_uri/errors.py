"""Error taxonomy for signed URL handling."""

from __future__ import annotations

import itsdangerous


class SignedUrlError(Exception):
    """Base class for every error raised by signed_uri."""


class InvalidQuery(SignedUrlError, ValueError):
    """A query string is missing or empty where one is required."""


class InvalidTimeout(SignedUrlError, ValueError):
    """A timeout could not be resolved or lies in the past."""


class SignatureInvalid(SignedUrlError, itsdangerous.BadSignature):
    """The signature parameter is absent or the URL is malformed."""


class SignatureExpired(SignedUrlError, itsdangerous.SignatureExpired):
    """The URL carries an expiry that has already passed."""
