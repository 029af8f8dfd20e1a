"""Datetime helpers and timeout resolution."""

from __future__ import annotations

import os
import re
from datetime import date, datetime, time, timedelta
from functools import singledispatch

import pendulum

from signed_uri.errors import InvalidTimeout

DEFAULT_TZ = "UTC"

_UNITS = {
    "sec": "seconds",
    "second": "seconds",
    "min": "minutes",
    "minute": "minutes",
    "hour": "hours",
    "day": "days",
    "week": "weeks",
    "fortnight": "weeks",
    "month": "months",
    "year": "years",
}
_RELATIVE_TERM_RE = re.compile(r"(?:([+-])\s*)?(\d+)\s*(fortnight|sec|second|min|minute|hour|day|week|month|year)s?\b", re.I)
_AGO_RE = re.compile(r"\s+ago$", re.I)
_AT_TIMESTAMP_RE = re.compile(r"^@(-?\d+)$")


def timezone_name() -> str:
    return os.environ.get("TIMEZONE", DEFAULT_TZ)


def current_timestamp() -> int:
    return pendulum.now(pendulum.timezone(timezone_name())).int_timestamp


def from_timestamp(value: int) -> pendulum.DateTime:
    return pendulum.from_timestamp(value, tz=pendulum.timezone(timezone_name()))


def resolve_timeout(timeout: object, now: int) -> int:
    """Normalize ``timeout`` to an absolute Unix timestamp.

    Accepted shapes are ``int`` (taken as-is), ``str`` (relative expressions
    like ``+1 minute`` or anything :func:`pendulum.parse` understands),
    ``datetime``, ``date``, ``time`` and ``timedelta``. ``now`` anchors
    relative values and bare times of day.
    """
    return _resolve(timeout, from_timestamp(now))


@singledispatch
def _resolve(timeout: object, now: pendulum.DateTime) -> int:
    raise InvalidTimeout(
        f'Unknown timeout type given: "{type(timeout).__name__}" (expected: int|str|datetime|date|time|timedelta)'
    )


@_resolve.register
def _(timeout: bool, now: pendulum.DateTime) -> int:
    raise InvalidTimeout('Unknown timeout type given: "bool" (expected: int|str|datetime|date|time|timedelta)')


@_resolve.register
def _(timeout: int, now: pendulum.DateTime) -> int:
    return timeout


@_resolve.register
def _(timeout: timedelta, now: pendulum.DateTime) -> int:
    return int((now + timeout).timestamp())


@_resolve.register
def _(timeout: datetime, now: pendulum.DateTime) -> int:
    return pendulum.instance(timeout, tz=pendulum.timezone(timezone_name())).int_timestamp


@_resolve.register
def _(timeout: date, now: pendulum.DateTime) -> int:
    tz = pendulum.timezone(timezone_name())
    return pendulum.datetime(timeout.year, timeout.month, timeout.day, tz=tz).int_timestamp


@_resolve.register
def _(timeout: time, now: pendulum.DateTime) -> int:
    return now.at(timeout.hour, timeout.minute, timeout.second).int_timestamp


@_resolve.register
def _(timeout: str, now: pendulum.DateTime) -> int:
    value = timeout.strip()
    if not value:
        raise InvalidTimeout("The timeout string is empty")

    match = _AT_TIMESTAMP_RE.match(value)
    if match:
        return int(match.group(1))

    keyword = _keyword_datetime(value.lower(), now)
    if keyword is not None:
        return keyword.int_timestamp

    terms = _relative_terms(value)
    if terms is not None:
        return _apply_relative(terms, bool(_AGO_RE.search(value)), now).int_timestamp

    try:
        # exact=True keeps bare dates and times unanchored so they follow ``now``
        parsed = pendulum.parse(value, exact=True, tz=pendulum.timezone(timezone_name()))
    except ValueError as exc:
        raise InvalidTimeout(f'The timeout "{timeout}" cannot be parsed as a date') from exc
    # durations such as "P1D" come back as timedelta subclasses
    if isinstance(parsed, (datetime, date, time, timedelta)):
        return _resolve(parsed, now)
    raise InvalidTimeout(f'The timeout "{timeout}" does not describe a point in time')


def _keyword_datetime(value: str, now: pendulum.DateTime) -> pendulum.DateTime | None:
    if value == "now":
        return now
    if value in ("today", "midnight"):
        return now.start_of("day")
    if value == "tomorrow":
        return now.add(days=1).start_of("day")
    if value == "yesterday":
        return now.subtract(days=1).start_of("day")
    return None


def _relative_terms(value: str) -> list[tuple[str | None, str, str]] | None:
    """Split ``+1 day 2 hours`` style input into terms, or ``None`` if anything else is left over."""
    body = _AGO_RE.sub("", value)
    terms = []
    pos = 0
    for match in _RELATIVE_TERM_RE.finditer(body):
        if body[pos:match.start()].strip():
            return None
        terms.append(match.groups())
        pos = match.end()
    if not terms or body[pos:].strip():
        return None
    return terms


def _apply_relative(
    terms: list[tuple[str | None, str, str]], ago: bool, now: pendulum.DateTime
) -> pendulum.DateTime:
    result = now
    for sign, amount, unit in terms:
        count = int(amount)
        unit = unit.lower()
        if unit == "fortnight":
            count *= 2
        if sign == "-":
            count = -count
        if ago:
            count = -count
        result = result.add(**{_UNITS[unit]: count})
    return result
