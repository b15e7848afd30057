"""Parsers for the ISO 8601-like formats produced by ``format_iso()``.

Numeric fields may be followed by whitespace, and a second of 60 denotes
a leap second. Fractional digits beyond nanosecond precision are ignored.
"""

import re
from typing import NoReturn

from ._common import NS_PER_SEC, Nanos

# Unsigned years have at most 4 digits. Larger (or negative) years
# need an explicit sign.
_YEAR = r"([+-]\d+|\d{1,4})"
_FIELD = r"(\d{1,2})"
_DATE = rf"{_YEAR}\s*-{_FIELD}\s*-{_FIELD}\s*"
_TIME = rf"{_FIELD}\s*:{_FIELD}\s*:{_FIELD}(?:\.(\d+))?\s*"

_match_date = re.compile(_DATE, re.ASCII).fullmatch
_match_time = re.compile(_TIME, re.ASCII).fullmatch
_match_datetime = re.compile(rf"{_DATE}T{_TIME}", re.ASCII).fullmatch
_match_tdelta = re.compile(r"(-)?PT(\d+)(?:\.(\d{1,9}))?S", re.ASCII).fullmatch


def parse_err(s: str) -> NoReturn:
    raise ValueError(f"Invalid format: {s!r}") from None


def _parse_nanos(s: str | None) -> Nanos:
    if not s:
        return 0
    return int(s[:9].ljust(9, "0"))


def _time_fields(
    hour: str, minute: str, second: str, frac: str | None
) -> tuple[int, int, int, Nanos]:
    nanos = _parse_nanos(frac)
    if second == "60":
        return int(hour), int(minute), 59, nanos + NS_PER_SEC
    return int(hour), int(minute), int(second), nanos


def date_from_iso(s: str) -> tuple[int, int, int]:
    if (m := _match_date(s)) is None:
        parse_err(s)
    return int(m[1]), int(m[2]), int(m[3])


def time_from_iso(s: str) -> tuple[int, int, int, Nanos]:
    if (m := _match_time(s)) is None:
        parse_err(s)
    return _time_fields(*m.groups())


def datetime_from_iso(s: str) -> tuple[int, int, int, int, int, int, Nanos]:
    if (m := _match_datetime(s)) is None:
        parse_err(s)
    return (int(m[1]), int(m[2]), int(m[3]), *_time_fields(*m.groups()[3:]))


def tdelta_from_iso(s: str) -> tuple[bool, int, Nanos]:
    """Parse ``[-]PT<secs>[.<frac>]S`` into ``(negative, secs, nanos)``"""
    if s == "P0D":
        return False, 0, 0
    if (m := _match_tdelta(s)) is None:
        parse_err(s)
    return m[1] is not None, int(m[2]), _parse_nanos(m[3])
