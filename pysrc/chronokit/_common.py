from datetime import timedelta as _timedelta, timezone as _timezone
from functools import lru_cache

Nanos = int  # 0-999_999_999, or up to 1_999_999_999 within a leap second

NS_PER_SEC = 1_000_000_000
SECS_PER_DAY = 86_400

# Bounds of the fixed-width integer domains used in signatures
I32_MIN = -(1 << 31)
I32_MAX = (1 << 31) - 1
I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1
U8_MAX = (1 << 8) - 1
U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1


class OutOfRange(ValueError):
    """A value or the result of an operation is outside the supported range"""


class InvalidArgument(ValueError):
    """An argument is structurally invalid, e.g. month 13 or hour 24"""


def check_int(value: int, lo: int, hi: int, what: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {type(value)!r}")
    if not lo <= value <= hi:
        raise OutOfRange(f"{what} out of range")
    return value


def div_trunc(a: int, b: int) -> int:
    """Integer division rounding toward zero"""
    q = a // b
    if q < 0 and q * b != a:
        q += 1
    return q


# We cache fixed-offset tzinfo objects to avoid creating multiple identical ones.
# It's very common to only have whole-hour offsets, so this helps a lot.
@lru_cache
def mk_fixed_tzinfo(secs: int, /) -> _timezone:
    return _timezone(_timedelta(seconds=secs))
