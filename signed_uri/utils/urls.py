"""Signed URL utilities."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from signed_uri.logic.codec import SignedUrlCodec

DEFAULT_SECRET = "change-me"


def split_url(url: str) -> tuple[str, str | None, str | None]:
    """Return ``(base, query, fragment)``; missing parts are ``None``."""
    rest, hash_sep, fragment = url.partition("#")
    base, query_sep, query = rest.partition("?")
    return base, query if query_sep else None, fragment if hash_sep else None


def join_url(base: str, query: str, fragment: str | None = None) -> str:
    url = f"{base}?{query}"
    if fragment is not None:
        url += f"#{fragment}"
    return url


def _codec() -> SignedUrlCodec:
    from signed_uri.logic.codec import SignedUrlCodec
    from signed_uri.settings import settings_from_env

    secret = os.environ.get("SIGNING_SECRET", DEFAULT_SECRET)
    return SignedUrlCodec(secret, settings=settings_from_env())


def sign_url(url: str, data: Mapping[str, Any] | None = None, *, timeout: Any = None) -> str:
    return _codec().create(url, data, timeout)


def verify_url(url: str) -> bool:
    return _codec().verify(url)
