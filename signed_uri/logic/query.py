"""Query string parsing and canonical serialization."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import quote_plus, unquote_plus

ParamValue = str | int | bool | None


def parse_query(query: str) -> dict[str, str | None]:
    """Split a raw query string into an ordered parameter mapping.

    Tokens are split on the first ``=`` only. A token without ``=`` maps to
    ``None``; a repeated name overwrites the earlier value in place.
    """
    params: dict[str, str | None] = {}
    for token in query.split("&"):
        if not token:
            continue
        name, sep, value = token.partition("=")
        name = unquote_plus(name)
        if not name:
            continue
        params[name] = unquote_plus(value) if sep else None
    return params


def serialize_query(params: Mapping[str, ParamValue]) -> str:
    """Build the canonical form-urlencoded string for ``params``.

    ``None`` serializes as ``key=``, so a bare ``key`` does not survive a
    parse/serialize round trip unchanged. Signatures are always computed over
    this reconstructed string.
    """
    pairs = []
    for name, value in params.items():
        pairs.append(f"{quote_plus(str(name))}={quote_plus(_stringify(value))}")
    return "&".join(pairs)


def _stringify(value: ParamValue) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
