"""Timezone database access, caching, and resolution of local times."""

from __future__ import annotations

import logging
import os.path
from collections import OrderedDict
from datetime import datetime as _datetime
from io import BytesIO
from threading import Lock
from typing import Literal, NewType
from weakref import WeakValueDictionary
from zoneinfo import ZoneInfo

__all__ = [
    "Disambiguate",
    "RepeatedTime",
    "SkippedTime",
    "TimeZoneNotFoundError",
    "get_tz",
    "resolve_ambiguity",
    "_clear_tz_cache",
    "_clear_tz_cache_by_keys",
    "_set_tzpath",
]

_logger = logging.getLogger("chronokit")

Disambiguate = Literal["compatible", "earlier", "later", "raise"]

_TZPATH: tuple[str, ...] = ()

# Our cache for loaded tz files. The design is based off that of `zoneinfo`.
_TZCACHE_LRU_SIZE = 8
_tzcache_lru: OrderedDict[str, ZoneInfo] = OrderedDict()
_tzcache_lookup: WeakValueDictionary[str, ZoneInfo] = WeakValueDictionary()
_tzcache_lru_lock = Lock()


def _set_tzpath(to: tuple[str, ...]) -> None:
    global _TZPATH
    _logger.debug("Timezone search path set to %r", to)
    _TZPATH = to


def _clear_tz_cache() -> None:
    _tzcache_lookup.clear()
    with _tzcache_lru_lock:
        _tzcache_lru.clear()


def _clear_tz_cache_by_keys(keys: tuple[str, ...]) -> None:
    with _tzcache_lru_lock:
        for k in keys:
            _tzcache_lookup.pop(k, None)
            _tzcache_lru.pop(k, None)


def get_tz(key: str) -> ZoneInfo:
    instance = _tzcache_lookup.get(key)
    if instance is None:
        # Concurrency note: we accept the possibility of multiple threads
        # loading the same timezone at the same time, since ZoneInfo instances
        # are immutable after construction. The first one stored wins.
        instance = _tzcache_lookup.setdefault(
            key, _load_tz(validate_tzid(key))
        )

    with _tzcache_lru_lock:
        _tzcache_lru[key] = _tzcache_lru.pop(key, instance)
        if len(_tzcache_lru) > _TZCACHE_LRU_SIZE:
            _tzcache_lru.popitem(last=False)

    return instance


def validate_tzid(key: str) -> SafeTzId:
    """Checks for invalid characters and path traversal in the key."""
    if (
        isinstance(key, str)
        and key.isascii()
        # There's no standard limit on IANA tz IDs, but we have to draw
        # the line somewhere to prevent abuse.
        and 0 < len(key) < 100
        and all(b.isalnum() or b in "-_+/." for b in key)
        # specific sequences not allowed
        and ".." not in key
        and "//" not in key
        and "/./" not in key
        # specific restrictions on the first and last characters
        and key[0] not in ".-+/"
        and key[-1] != "/"
    ):
        return SafeTzId(key)
    else:
        raise TimeZoneNotFoundError.for_key(key)


# Alias for a TZ key that has been confirmed not to be a path traversal
# or contain other "bad" characters.
SafeTzId = NewType("SafeTzId", str)


def _try_tzif_from_path(key: SafeTzId) -> bytes | None:
    for search_path in _TZPATH:
        target = os.path.join(search_path, key)
        if os.path.isfile(target):
            _logger.debug("Loading timezone %r from %s", key, target)
            with open(target, "rb") as f:
                return f.read()
    return None


def _tzif_from_tzdata(key: SafeTzId) -> bytes:
    try:
        tzdata_path = __import__("tzdata.zoneinfo").zoneinfo.__path__[0]
        # We check before we read, since the resulting exceptions vary
        # on different platforms
        if os.path.isfile(
            relpath := os.path.join(tzdata_path, *key.split("/"))
        ):
            _logger.debug("Loading timezone %r from tzdata", key)
            with open(relpath, "rb") as f:
                return f.read()
        else:
            raise FileNotFoundError()
    # Several exceptions amount to "can't find the key"
    except (
        ImportError,
        FileNotFoundError,
        UnicodeEncodeError,
    ):
        raise TimeZoneNotFoundError.for_key(key)


def _load_tz(key: SafeTzId) -> ZoneInfo:
    tzif = _try_tzif_from_path(key) or _tzif_from_tzdata(key)
    if not tzif.startswith(b"TZif"):
        # We've found a file, but doesn't look like a TZif file.
        # Stop here instead of getting a cryptic error later.
        raise TimeZoneNotFoundError.for_key(key)

    return ZoneInfo.from_file(BytesIO(tzif), key=key)


class TimeZoneNotFoundError(ValueError):
    """A timezone with the given ID was not found"""

    @classmethod
    def for_key(cls, key: str) -> TimeZoneNotFoundError:
        return cls(f"No time zone found for key: {key!r}")


class RepeatedTime(ValueError):
    """A datetime is repeated in a timezone, e.g. because of DST"""

    @classmethod
    def _for_tz(cls, d: object, key: str | None) -> RepeatedTime:
        return cls(f"{d} is repeated in timezone {key!r}")


class SkippedTime(ValueError):
    """A datetime is skipped in a timezone, e.g. because of DST"""

    @classmethod
    def _for_tz(cls, d: object, key: str | None) -> SkippedTime:
        return cls(f"{d} is skipped in timezone {key!r}")


def _offset_secs(dt: _datetime, zone: ZoneInfo, fold: int) -> int:
    offset = dt.replace(tzinfo=zone, fold=fold).utcoffset()
    assert offset is not None
    return offset.days * 86_400 + offset.seconds


def resolve_ambiguity(
    dt: _datetime, display: object, zone: ZoneInfo, disambiguate: str
) -> tuple[int, int]:
    """Find the UTC offset for a naive local datetime in a zone.

    Returns the offset and the number of seconds the local time must be
    shifted by to get out of a gap (zero otherwise). ``display`` is only
    used in error messages.
    """
    assert dt.tzinfo is None, "dt must be naive"
    if disambiguate not in ("compatible", "earlier", "later", "raise"):
        raise ValueError(
            "disambiguate must be 'compatible', 'earlier', 'later', or 'raise'"
        )

    # Per PEP 495, fold=0 gives the offset from before a transition
    # and fold=1 the one after it, both in gaps and in folds.
    before = _offset_secs(dt, zone, 0)
    after = _offset_secs(dt, zone, 1)
    if before == after:
        return before, 0
    elif before > after:  # fold: the local time occurs twice
        if disambiguate == "raise":
            raise RepeatedTime._for_tz(display, zone.key)
        return (after if disambiguate == "later" else before), 0
    else:  # gap: the local time is skipped
        if disambiguate == "raise":
            raise SkippedTime._for_tz(display, zone.key)
        elif disambiguate == "earlier":
            return before, before - after
        # shift the datetime out of the gap
        return after, after - before
