"""Creation and verification of HMAC-signed URLs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Mapping

from signed_uri.errors import InvalidQuery, InvalidTimeout, SignatureExpired, SignatureInvalid
from signed_uri.logic.query import ParamValue, parse_query, serialize_query
from signed_uri.logic.signer import sign, signatures_match
from signed_uri.settings import CodecSettings
from signed_uri.utils.dates import current_timestamp, resolve_timeout
from signed_uri.utils.urls import join_url, split_url

logger = logging.getLogger(__name__)


class SignedUrlCodec:
    """Sign URL query strings with HMAC-SHA256 and verify them later.

    The secret is held per instance and can be swapped with
    :meth:`set_secret`; doing so while other threads are signing is the
    caller's problem to serialize. Reserved parameter names come from
    ``settings`` and ``clock`` returns the current Unix timestamp.
    """

    algorithm = "sha256"

    def __init__(
        self,
        secret: str | bytes,
        *,
        settings: CodecSettings | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.set_secret(secret)
        self.settings = settings or CodecSettings()
        self._clock = clock or current_timestamp

    def set_secret(self, secret: str | bytes) -> None:
        if not secret:
            raise ValueError("Secret cannot be empty")
        self._secret = secret

    def get_secret(self) -> str | bytes:
        return self._secret

    secret = property(get_secret, set_secret)

    def create(
        self,
        base: str,
        data: Mapping[str, ParamValue] | None = None,
        timeout: Any = None,
    ) -> str:
        """Return ``base`` with ``data`` appended and signed.

        Without ``data`` the parameters are taken from the query string of
        ``base``. When ``timeout`` is given it is resolved to a Unix timestamp
        and stored under the expiry parameter before signing.
        """
        url, query, fragment = split_url(base)
        params: dict[str, ParamValue] = {}
        if query:
            params.update(parse_query(query))
        if data:
            params.update(data)
        elif not query:
            raise InvalidQuery("No query parameters specified")
        # a stale signature would be signed along and shadow the new one
        params.pop(self.settings.signature_param, None)

        if timeout is not None:
            now = self._clock()
            expires = resolve_timeout(timeout, now)
            if expires <= now:
                raise InvalidTimeout("Timeout cannot be in the past")
            params[self.settings.expires_param] = str(expires)

        canonical = serialize_query(params)
        signature = sign(canonical, self._secret)
        logger.debug("Signed %s with %d parameters", url, len(params))
        return join_url(url, f"{canonical}&{self.settings.signature_param}={signature}", fragment)

    def verify(self, url: str) -> bool:
        """Check the signature of ``url``.

        Returns ``False`` only when a well-formed URL carries the wrong
        signature. A missing query raises :class:`InvalidQuery`, a missing
        signature :class:`SignatureInvalid` and a passed expiry
        :class:`SignatureExpired`.
        """
        base, query, _ = split_url(url)
        if not query:
            raise InvalidQuery("No URI parameters provided, cannot validate")

        params = parse_query(query)
        signature = params.pop(self.settings.signature_param, None)
        if not signature:
            raise SignatureInvalid("No signature found!")
        canonical = serialize_query(params)

        # expiry is enforced before the signature is looked at
        if self.settings.expires_param in params:
            self._check_expiry(params[self.settings.expires_param], base)

        expected = sign(canonical, self._secret)
        if signatures_match(expected, signature):
            return True
        logger.info("Signature mismatch for %s", base)
        return False

    def _check_expiry(self, value: str | None, base: str) -> None:
        try:
            expires = int(value or "")
        except ValueError:
            raise SignatureInvalid(f"Malformed expiry value: {value!r}") from None
        if expires < self._clock():
            logger.info("Signed URL for %s expired at %d", base, expires)
            raise SignatureExpired("Signature has expired")
