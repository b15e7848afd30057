# The MIT License (MIT)
#
# Copyright (c) Arie Bovenberg
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

# Maintainer's notes:
#
# - Why is everything in one file?
#   - Flat is better than nested
#   - It prevents circular imports since the classes 'know' about each other
# - Each fallible operation is implemented once, as a ``checked_*`` method
#   returning ``None`` on failure. The operators wrap these and raise
#   ``OutOfRange`` with a message naming the operation.
# - Python ints are unbounded, so the fixed-width argument domains
#   (i32, u64, ...) are checked explicitly with ``check_int``.
from __future__ import annotations

__version__ = "0.1.0"

from datetime import (
    date as _date,
    datetime as _datetime,
    time as _time,
    timedelta as _timedelta,
)
from struct import pack, unpack
from typing import (
    TYPE_CHECKING,
    ClassVar,
    TypeVar,
    no_type_check,
    overload,
)

from ._common import (
    I32_MAX,
    I32_MIN,
    I64_MAX,
    I64_MIN,
    NS_PER_SEC,
    SECS_PER_DAY,
    U8_MAX,
    U32_MAX,
    U64_MAX,
    InvalidArgument,
    OutOfRange,
    check_int,
    div_trunc,
    mk_fixed_tzinfo,
)
from ._math import (
    add_months,
    days_before_month,
    days_before_year,
    days_in_month,
    days_in_year,
    ord_to_ymd,
    ymd_to_ord,
)
from ._parse import (
    date_from_iso,
    datetime_from_iso,
    parse_err,
    tdelta_from_iso,
    time_from_iso,
)
from ._tz import (
    Disambiguate,
    RepeatedTime,
    SkippedTime,
    TimeZoneNotFoundError,
    get_tz,
    resolve_ambiguity,
)

__all__ = [
    # Date and time
    "NaiveDate",
    "NaiveTime",
    "NaiveDateTime",
    "DateTime",
    "FixedOffset",
    # Durations
    "TimeDelta",
    "CalendarDuration",
    "Months",
    "Days",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "microseconds",
    "nanoseconds",
    # Exceptions
    "OutOfRange",
    "InvalidArgument",
    "SkippedTime",
    "RepeatedTime",
    "TimeZoneNotFoundError",
]

# Helpers that pre-compute/lookup as much as possible
_object_new = object.__new__
_T = TypeVar("_T")


class _ImmutableBase:
    __slots__ = ()

    # Immutable classes don't need to be copied
    @no_type_check
    def __copy__(self):
        return self

    @no_type_check
    def __deepcopy__(self, _):
        return self


if TYPE_CHECKING:
    from typing import final
else:

    def final(cls):

        def init_subclass_not_allowed(cls, **kwargs):  # pragma: no cover
            raise TypeError("Subclassing not allowed")

        cls.__init_subclass__ = init_subclass_not_allowed
        return cls


def _or_raise(result: _T | None, msg: str) -> _T:
    if result is None:
        raise OutOfRange(msg)
    return result


def _split_millis(ms: int) -> tuple[int, int]:
    secs, ms = divmod(ms, 1_000)
    return secs, ms * 1_000_000


# The range is symmetric: exactly i64::MAX milliseconds either way.
# This way, negating a delta can never overflow.
_TDELTA_MAX = _split_millis(I64_MAX)
_TDELTA_MIN = _split_millis(-I64_MAX)
_STD_RANGE_MSG = "Source duration value is out of range for the target type"


@final
class TimeDelta(_ImmutableBase):
    """A signed, exact duration with nanosecond precision

    Internally, the duration is whole seconds plus a non-negative
    nanosecond remainder, so -1.5 seconds is stored as
    ``(-2 seconds, 500_000_000 nanos)``.
    The accessors hide this, and truncate toward zero.

    Examples
    --------
    >>> d = TimeDelta(90, 500_000_000)
    TimeDelta(PT90.5S)
    >>> TimeDelta.milliseconds(-1_500).num_seconds()
    -1

    Note
    ----
    A shorter way to instantiate a timedelta is to use the helper functions
    :func:`~chronokit.hours`, :func:`~chronokit.minutes`, etc.
    """

    __slots__ = ("_secs", "_nanos")

    ZERO: ClassVar[TimeDelta]
    """A delta of zero"""
    MAX: ClassVar[TimeDelta]
    """The maximum possible delta: ``i64::MAX`` milliseconds"""
    MIN: ClassVar[TimeDelta]
    """The minimum possible delta: ``-i64::MAX`` milliseconds"""

    def __init__(self, secs: int = 0, nanos: int = 0) -> None:
        check_int(secs, I64_MIN, I64_MAX, "secs")
        check_int(nanos, 0, U32_MAX, "nanos")
        if nanos >= NS_PER_SEC:
            raise InvalidArgument("nanos must be less than one second")
        if not _TDELTA_MIN <= (secs, nanos) <= _TDELTA_MAX:
            raise OutOfRange("TimeDelta out of range")
        self._secs = secs
        self._nanos = nanos

    @classmethod
    def weeks(cls, weeks: int, /) -> TimeDelta:
        """Create a delta of the given number of weeks (an ``i32``)

        Example
        -------
        >>> TimeDelta.weeks(2)
        TimeDelta(PT1209600S)
        """
        check_int(weeks, I32_MIN, I32_MAX, "weeks")
        return cls._from_parts_unchecked(weeks * 604_800, 0)

    @classmethod
    def days(cls, days: int, /) -> TimeDelta:
        """Create a delta of the given number of days (an ``i32``)"""
        check_int(days, I32_MIN, I32_MAX, "days")
        return cls._from_parts_unchecked(days * SECS_PER_DAY, 0)

    @classmethod
    def hours(cls, hours: int, /) -> TimeDelta:
        """Create a delta of the given number of hours (an ``i32``)"""
        check_int(hours, I32_MIN, I32_MAX, "hours")
        return cls._from_parts_unchecked(hours * 3_600, 0)

    @classmethod
    def minutes(cls, minutes: int, /) -> TimeDelta:
        """Create a delta of the given number of minutes (an ``i32``)"""
        check_int(minutes, I32_MIN, I32_MAX, "minutes")
        return cls._from_parts_unchecked(minutes * 60, 0)

    @classmethod
    def seconds(cls, seconds: int, /) -> TimeDelta:
        """Create a delta of the given number of seconds (an ``i32``)"""
        check_int(seconds, I32_MIN, I32_MAX, "seconds")
        return cls._from_parts_unchecked(seconds, 0)

    @classmethod
    def milliseconds(cls, milliseconds: int, /) -> TimeDelta:
        """Create a delta of the given number of milliseconds (an ``i64``)

        Only ``i64::MIN`` itself is out of range, since the delta's
        range is symmetric.

        Example
        -------
        >>> TimeDelta.milliseconds(-1_500)
        TimeDelta(-PT1.5S)
        """
        check_int(milliseconds, -I64_MAX, I64_MAX, "milliseconds")
        return cls._from_parts_unchecked(*_split_millis(milliseconds))

    @classmethod
    def microseconds(cls, microseconds: int, /) -> TimeDelta:
        """Create a delta of the given number of microseconds (an ``i64``)"""
        check_int(microseconds, I64_MIN, I64_MAX, "microseconds")
        secs, micros = divmod(microseconds, 1_000_000)
        return cls._from_parts_unchecked(secs, micros * 1_000)

    @classmethod
    def nanoseconds(cls, nanoseconds: int, /) -> TimeDelta:
        """Create a delta of the given number of nanoseconds (an ``i64``)"""
        check_int(nanoseconds, I64_MIN, I64_MAX, "nanoseconds")
        return cls._from_parts_unchecked(*divmod(nanoseconds, NS_PER_SEC))

    def num_weeks(self) -> int:
        """The number of whole weeks, truncated toward zero"""
        return div_trunc(self.num_days(), 7)

    def num_days(self) -> int:
        """The number of whole days, truncated toward zero"""
        return div_trunc(self.num_seconds(), SECS_PER_DAY)

    def num_hours(self) -> int:
        """The number of whole hours, truncated toward zero"""
        return div_trunc(self.num_seconds(), 3_600)

    def num_minutes(self) -> int:
        """The number of whole minutes, truncated toward zero"""
        return div_trunc(self.num_seconds(), 60)

    def num_seconds(self) -> int:
        """The number of whole seconds, truncated toward zero

        Example
        -------
        >>> TimeDelta.milliseconds(-1_500).num_seconds()
        -1
        """
        if self._secs < 0 and self._nanos > 0:
            return self._secs + 1
        return self._secs

    def subsec_nanos(self) -> int:
        """The fractional part in nanoseconds, with the sign of the delta

        Together with :meth:`num_seconds`, this gives the exact value:

        >>> d = TimeDelta.milliseconds(-1_500)
        >>> d.num_seconds(), d.subsec_nanos()
        (-1, -500000000)
        """
        if self._secs < 0 and self._nanos > 0:
            return self._nanos - NS_PER_SEC
        return self._nanos

    def num_milliseconds(self) -> int:
        """The number of whole milliseconds, truncated toward zero.
        Always fits in an ``i64``."""
        return self.num_seconds() * 1_000 + div_trunc(
            self.subsec_nanos(), 1_000_000
        )

    def num_microseconds(self) -> int:
        """The number of whole microseconds, truncated toward zero

        Raises
        ------
        OutOfRange
            If the result doesn't fit in an ``i64``
        """
        micros = self.num_seconds() * 1_000_000 + div_trunc(
            self.subsec_nanos(), 1_000
        )
        if not I64_MIN <= micros <= I64_MAX:
            raise OutOfRange("Number of microseconds out of range")
        return micros

    def num_nanoseconds(self) -> int:
        """The number of nanoseconds

        Raises
        ------
        OutOfRange
            If the result doesn't fit in an ``i64``
        """
        nanos = self._secs * NS_PER_SEC + self._nanos
        if not I64_MIN <= nanos <= I64_MAX:
            raise OutOfRange("Number of nanoseconds out of range")
        return nanos

    def is_zero(self) -> bool:
        return not (self._secs or self._nanos)

    def abs(self) -> TimeDelta:
        """The absolute value

        Example
        -------
        >>> TimeDelta.milliseconds(-1_500).abs()
        TimeDelta(PT1.5S)
        """
        return -self if self._secs < 0 else self

    def checked_add(self, rhs: TimeDelta, /) -> TimeDelta | None:
        """Add two deltas, returning ``None`` if the result is out of range"""
        secs = self._secs + rhs._secs
        nanos = self._nanos + rhs._nanos
        if nanos >= NS_PER_SEC:
            nanos -= NS_PER_SEC
            secs += 1
        return TimeDelta._checked(secs, nanos)

    def checked_sub(self, rhs: TimeDelta, /) -> TimeDelta | None:
        """Subtract two deltas, returning ``None`` if the result is out of range"""
        secs = self._secs - rhs._secs
        nanos = self._nanos - rhs._nanos
        if nanos < 0:
            nanos += NS_PER_SEC
            secs -= 1
        return TimeDelta._checked(secs, nanos)

    def checked_mul(self, rhs: int, /) -> TimeDelta | None:
        """Multiply by an ``i32``, returning ``None`` on overflow"""
        check_int(rhs, I32_MIN, I32_MAX, "multiplier")
        extra_secs, nanos = divmod(self._nanos * rhs, NS_PER_SEC)
        return TimeDelta._checked(self._secs * rhs + extra_secs, nanos)

    def checked_div(self, rhs: int, /) -> TimeDelta | None:
        """Divide by an ``i32``, truncating toward zero.
        Returns ``None`` when dividing by zero.

        Example
        -------
        >>> TimeDelta.seconds(-4).checked_div(3)
        TimeDelta(-PT1.333333333S)
        """
        check_int(rhs, I32_MIN, I32_MAX, "divisor")
        if rhs == 0:
            return None
        secs = div_trunc(self._secs, rhs)
        carry = self._secs - secs * rhs
        nanos = div_trunc(self._nanos, rhs) + div_trunc(
            carry * NS_PER_SEC, rhs
        )
        # each term is below one second in magnitude, so their sum
        # needs at most one correction
        if nanos < 0:
            nanos += NS_PER_SEC
            secs -= 1
        elif nanos >= NS_PER_SEC:
            nanos -= NS_PER_SEC
            secs += 1
        return TimeDelta._checked(secs, nanos)

    def py_timedelta(self) -> _timedelta:
        """Convert to a :class:`~datetime.timedelta`

        Inverse of :meth:`from_py_timedelta`.
        Only non-negative deltas can be converted.

        Note
        ----
        Nanoseconds are truncated to microseconds.

        Raises
        ------
        OutOfRange
            If the delta is negative or too large for :class:`~datetime.timedelta`
        """
        if self._secs < 0:
            raise OutOfRange(_STD_RANGE_MSG)
        try:
            return _timedelta(
                seconds=self._secs, microseconds=self._nanos // 1_000
            )
        except OverflowError:
            raise OutOfRange(_STD_RANGE_MSG) from None

    @classmethod
    def from_py_timedelta(cls, td: _timedelta, /) -> TimeDelta:
        """Create from a non-negative :class:`~datetime.timedelta`

        Inverse of :meth:`py_timedelta`

        Example
        -------
        >>> TimeDelta.from_py_timedelta(timedelta(seconds=5400))
        TimeDelta(PT5400S)
        """
        if not isinstance(td, _timedelta):
            raise TypeError(f"Expected datetime.timedelta, got {type(td)!r}")
        if td.days < 0:
            raise OutOfRange(_STD_RANGE_MSG)
        return _or_raise(
            cls._checked(
                td.days * SECS_PER_DAY + td.seconds, td.microseconds * 1_000
            ),
            _STD_RANGE_MSG,
        )

    def format_iso(self) -> str:
        """Format as an ISO 8601 duration in seconds

        The zero delta is written ``P0D``.

        Inverse of :meth:`parse_iso`.

        Example
        -------
        >>> TimeDelta.days(7).checked_add(TimeDelta.milliseconds(6_543)).format_iso()
        'PT604806.543S'
        >>> TimeDelta.nanoseconds(-1).format_iso()
        '-PT0.000000001S'
        """
        if self.is_zero():
            return "P0D"
        magnitude = self.abs()
        frac = (
            f".{magnitude._nanos:09}".rstrip("0") if magnitude._nanos else ""
        )
        return f"{(self._secs < 0) * '-'}PT{magnitude._secs}{frac}S"

    @classmethod
    def parse_iso(cls, s: str, /) -> TimeDelta:
        """Parse the format produced by :meth:`format_iso`

        Example
        -------
        >>> TimeDelta.parse_iso("-PT1.5S")
        TimeDelta(-PT1.5S)
        """
        negative, secs, nanos = tdelta_from_iso(s)
        parsed = _or_raise(cls._checked(secs, nanos), "TimeDelta out of range")
        return -parsed if negative else parsed

    def __bool__(self) -> bool:
        """True if the delta is non-zero"""
        return bool(self._secs or self._nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return self._secs == other._secs and self._nanos == other._nanos

    def __hash__(self) -> int:
        return hash((self._secs, self._nanos))

    def __lt__(self, other: TimeDelta) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return (self._secs, self._nanos) < (other._secs, other._nanos)

    def __le__(self, other: TimeDelta) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return (self._secs, self._nanos) <= (other._secs, other._nanos)

    def __gt__(self, other: TimeDelta) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return (self._secs, self._nanos) > (other._secs, other._nanos)

    def __ge__(self, other: TimeDelta) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return (self._secs, self._nanos) >= (other._secs, other._nanos)

    def __add__(self, other: TimeDelta) -> TimeDelta:
        """Add two deltas together

        Example
        -------
        >>> TimeDelta.hours(1) + TimeDelta.minutes(30)
        TimeDelta(PT5400S)
        """
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return _or_raise(
            self.checked_add(other), "`TimeDelta + TimeDelta` overflowed"
        )

    def __sub__(self, other: TimeDelta) -> TimeDelta:
        """Subtract two deltas"""
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return _or_raise(
            self.checked_sub(other), "`TimeDelta - TimeDelta` overflowed"
        )

    def __mul__(self, other: int) -> TimeDelta:
        """Multiply by an integer

        Example
        -------
        >>> TimeDelta.milliseconds(1_500) * 3
        TimeDelta(PT4.5S)
        """
        if not isinstance(other, int):
            return NotImplemented
        return _or_raise(self.checked_mul(other), "`TimeDelta * i32` overflowed")

    __rmul__ = __mul__

    def __truediv__(self, other: int) -> TimeDelta:
        """Divide by an integer, truncating toward zero

        Example
        -------
        >>> TimeDelta.seconds(-4) / 3
        TimeDelta(-PT1.333333333S)
        """
        if not isinstance(other, int):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("TimeDelta divided by zero")
        return _or_raise(self.checked_div(other), "`TimeDelta / i32` overflowed")

    def __neg__(self) -> TimeDelta:
        """Negate the value

        Example
        -------
        >>> -TimeDelta.milliseconds(1_500)
        TimeDelta(-PT1.5S)
        """
        if self._nanos:
            return TimeDelta._from_parts_unchecked(
                -self._secs - 1, NS_PER_SEC - self._nanos
            )
        return TimeDelta._from_parts_unchecked(-self._secs, 0)

    def __pos__(self) -> TimeDelta:
        """Return the value unchanged"""
        return self

    def __abs__(self) -> TimeDelta:
        return self.abs()

    __str__ = format_iso

    def __repr__(self) -> str:
        return f"TimeDelta({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_tdelta, (pack("<qI", self._secs, self._nanos),)

    @classmethod
    def _from_parts_unchecked(cls, secs: int, nanos: int) -> TimeDelta:
        new = _object_new(cls)
        new._secs = secs
        new._nanos = nanos
        return new

    @classmethod
    def _checked(cls, secs: int, nanos: int) -> TimeDelta | None:
        if _TDELTA_MIN <= (secs, nanos) <= _TDELTA_MAX:
            return cls._from_parts_unchecked(secs, nanos)
        return None


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_tdelta(data: bytes) -> TimeDelta:
    return TimeDelta(*unpack("<qI", data))


TimeDelta.ZERO = TimeDelta._from_parts_unchecked(0, 0)
TimeDelta.MAX = TimeDelta._from_parts_unchecked(*_TDELTA_MAX)
TimeDelta.MIN = TimeDelta._from_parts_unchecked(*_TDELTA_MIN)


# The accurate part of a CalendarDuration is packed into a single word.
# Bit 1 is always set, so the word is never zero. Bit 0 distinguishes
# the two encodings:
# - seconds only:                       ``secs << 2 | 0b10``
# - minutes and at most 60 seconds:     ``mins << 8 | secs << 2 | 0b11``
# A value without minutes encodes the same as the seconds-only form.
_MAX_PACKED_SECS = 1 << 62
_MAX_PACKED_MINS = 1 << 56


def _pack_seconds(secs: int) -> int:
    if secs >= _MAX_PACKED_SECS:
        raise OutOfRange("seconds out of range")
    return secs << 2 | 0b10


def _pack_mins_and_secs(mins: int, secs: int) -> int:
    if mins >= _MAX_PACKED_MINS:
        raise OutOfRange("minutes out of range")
    if secs > 60:
        raise InvalidArgument("seconds must be at most 60 when minutes are set")
    return mins << 8 | secs << 2 | (mins > 0) | 0b10


def _unpack_mins_and_secs(word: int) -> tuple[int, int]:
    if word & 0b01 == 0:
        return 0, word >> 2
    return word >> 8, (word >> 2) & 0b11_1111


def _is_valid_packed(word: int) -> bool:
    # only words produced by the two packing functions above
    if word & 0b10 == 0:
        return False
    if word & 0b01 == 0:
        return True
    mins, secs = _unpack_mins_and_secs(word)
    return mins > 0 and secs <= 60


_PACKED_ZERO = _pack_seconds(0)


@final
class CalendarDuration(_ImmutableBase):
    """A duration made of calendar components: months, days,
    and an accurate part of minutes, seconds and nanoseconds.

    Months and days are *nominal*: their length depends on where in the
    calendar they're applied. Years and weeks are expressed with them.
    Hours are expressed as minutes.

    The accurate part is either a (large) number of seconds, or a
    number of minutes with up to 60 seconds. The two forms can't be mixed.

    Examples
    --------
    >>> CalendarDuration().with_months(18)
    CalendarDuration(months=18)
    >>> CalendarDuration().with_days(5).with_hms(3, 0, 0)
    CalendarDuration(days=5, minutes=180)
    """

    __slots__ = ("_months", "_days", "_mins_and_secs", "_nanos")

    def __init__(self) -> None:
        self._months = 0
        self._days = 0
        self._mins_and_secs = _PACKED_ZERO
        self._nanos = 0

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def nanos(self) -> int:
        return self._nanos

    def mins_and_secs(self) -> tuple[int, int]:
        """The minutes and seconds components

        Example
        -------
        >>> CalendarDuration().with_hms(3, 4, 5).mins_and_secs()
        (184, 5)
        >>> CalendarDuration().with_seconds(123_456).mins_and_secs()
        (0, 123456)
        """
        return _unpack_mins_and_secs(self._mins_and_secs)

    def with_months(self, months: int, /) -> CalendarDuration:
        """Set the months component (a ``u32``)"""
        check_int(months, 0, U32_MAX, "months")
        return self._replace(months=months)

    def with_days(self, days: int, /) -> CalendarDuration:
        """Set the days component (a ``u32``)"""
        check_int(days, 0, U32_MAX, "days")
        return self._replace(days=days)

    def with_hms(
        self, hours: int, minutes: int, seconds: int
    ) -> CalendarDuration:
        """Set the accurate part to hours, minutes and at most 60 seconds.

        Hours are stored as minutes. A minute isn't exactly 60 seconds
        in the presence of leap seconds, which is why ``seconds`` may be 60.

        Raises
        ------
        OutOfRange
            If the total number of minutes is out of range
        InvalidArgument
            If ``seconds`` exceeds 60
        """
        check_int(hours, 0, U64_MAX, "hours")
        check_int(minutes, 0, U64_MAX, "minutes")
        check_int(seconds, 0, U8_MAX, "seconds")
        total_mins = hours * 60 + minutes
        if total_mins > U64_MAX:
            raise OutOfRange("minutes out of range")
        return self._replace(
            mins_and_secs=_pack_mins_and_secs(total_mins, seconds)
        )

    def with_seconds(self, seconds: int, /) -> CalendarDuration:
        """Set the accurate part to a number of seconds.
        The minutes component becomes zero."""
        check_int(seconds, 0, U64_MAX, "seconds")
        return self._replace(mins_and_secs=_pack_seconds(seconds))

    def with_nanos(self, nanos: int, /) -> CalendarDuration:
        """Set the nanoseconds component

        Raises
        ------
        InvalidArgument
            If ``nanos`` is one second or more
        """
        check_int(nanos, 0, U32_MAX, "nanos")
        if nanos >= NS_PER_SEC:
            raise InvalidArgument("nanos must be less than one second")
        return self._replace(nanos=nanos)

    def is_zero(self) -> bool:
        return not (
            self._months
            or self._days
            or self.mins_and_secs() != (0, 0)
            or self._nanos
        )

    def __bool__(self) -> bool:
        """True if the duration is non-zero"""
        return not self.is_zero()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDuration):
            return NotImplemented
        return (
            self._months == other._months
            and self._days == other._days
            and self._mins_and_secs == other._mins_and_secs
            and self._nanos == other._nanos
        )

    def __hash__(self) -> int:
        return hash(
            (self._months, self._days, self._mins_and_secs, self._nanos)
        )

    def __repr__(self) -> str:
        mins, secs = self.mins_and_secs()
        fields = (
            ("months", self._months),
            ("days", self._days),
            ("minutes", mins),
            ("seconds", secs),
            ("nanos", self._nanos),
        )
        return "CalendarDuration({})".format(
            ", ".join(f"{name}={value}" for name, value in fields if value)
        )

    @no_type_check
    def __reduce__(self):
        return _unpkl_caldelta, (
            pack(
                "<IIQI",
                self._months,
                self._days,
                self._mins_and_secs,
                self._nanos,
            ),
        )

    def _replace(
        self,
        *,
        months: int | None = None,
        days: int | None = None,
        mins_and_secs: int | None = None,
        nanos: int | None = None,
    ) -> CalendarDuration:
        return CalendarDuration._from_fields_unchecked(
            self._months if months is None else months,
            self._days if days is None else days,
            self._mins_and_secs if mins_and_secs is None else mins_and_secs,
            self._nanos if nanos is None else nanos,
        )

    @classmethod
    def _from_fields_unchecked(
        cls, months: int, days: int, mins_and_secs: int, nanos: int
    ) -> CalendarDuration:
        new = _object_new(cls)
        new._months = months
        new._days = days
        new._mins_and_secs = mins_and_secs
        new._nanos = nanos
        return new


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_caldelta(data: bytes) -> CalendarDuration:
    months, days, mins_and_secs, nanos = unpack("<IIQI", data)
    if not (_is_valid_packed(mins_and_secs) and nanos < NS_PER_SEC):
        raise InvalidArgument("Invalid CalendarDuration pickle data")
    return CalendarDuration._from_fields_unchecked(
        months, days, mins_and_secs, nanos
    )


def _format_offset(secs: int) -> str:
    hrs, rem = divmod(abs(secs), 3_600)
    mins, rem = divmod(rem, 60)
    return f"{'-' if secs < 0 else '+'}{hrs:02}:{mins:02}" + (
        f":{rem:02}" if rem else ""
    )


@final
class FixedOffset(_ImmutableBase):
    """A fixed offset from UTC, stored as "local minus UTC" in seconds

    Example
    -------
    >>> FixedOffset.east(5 * 3_600 + 1_800)
    FixedOffset(+05:30)
    >>> FixedOffset.west(3_600).local_minus_utc()
    -3600
    """

    __slots__ = ("_secs",)

    UTC: ClassVar[FixedOffset]
    """The offset of UTC itself"""

    def __init__(self, seconds: int = 0) -> None:
        self._secs = check_int(seconds, -86_399, 86_399, "offset")

    @classmethod
    def east(cls, secs: int, /) -> FixedOffset:
        """An offset east of UTC: local time is ahead of UTC"""
        return cls(secs)

    @classmethod
    def west(cls, secs: int, /) -> FixedOffset:
        """An offset west of UTC: local time is behind UTC"""
        return cls(-check_int(secs, -86_399, 86_399, "offset"))

    def local_minus_utc(self) -> int:
        return self._secs

    def utc_minus_local(self) -> int:
        return -self._secs

    def __str__(self) -> str:
        return _format_offset(self._secs)

    def __repr__(self) -> str:
        return f"FixedOffset({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedOffset):
            return NotImplemented
        return self._secs == other._secs

    def __hash__(self) -> int:
        return hash(self._secs)

    def __lt__(self, other: FixedOffset) -> bool:
        if not isinstance(other, FixedOffset):
            return NotImplemented
        return self._secs < other._secs

    def __le__(self, other: FixedOffset) -> bool:
        if not isinstance(other, FixedOffset):
            return NotImplemented
        return self._secs <= other._secs

    def __gt__(self, other: FixedOffset) -> bool:
        if not isinstance(other, FixedOffset):
            return NotImplemented
        return self._secs > other._secs

    def __ge__(self, other: FixedOffset) -> bool:
        if not isinstance(other, FixedOffset):
            return NotImplemented
        return self._secs >= other._secs

    @no_type_check
    def __reduce__(self):
        return _unpkl_fixed, (pack("<i", self._secs),)

    @classmethod
    def _from_secs_unchecked(cls, secs: int) -> FixedOffset:
        new = _object_new(cls)
        new._secs = secs
        return new


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_fixed(data: bytes) -> FixedOffset:
    return FixedOffset(*unpack("<i", data))


FixedOffset.UTC = FixedOffset._from_secs_unchecked(0)


@final
class Months(_ImmutableBase):
    """A number of calendar months, to add to or subtract from a date

    Example
    -------
    >>> NaiveDate(2024, 1, 31) + Months(1)
    NaiveDate(2024-02-29)
    """

    __slots__ = ("_count",)

    def __init__(self, count: int) -> None:
        self._count = check_int(count, 0, U32_MAX, "months")

    @property
    def count(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"Months({self._count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Months):
            return NotImplemented
        return self._count == other._count

    def __hash__(self) -> int:
        return hash((Months, self._count))

    def __lt__(self, other: Months) -> bool:
        if not isinstance(other, Months):
            return NotImplemented
        return self._count < other._count

    def __le__(self, other: Months) -> bool:
        if not isinstance(other, Months):
            return NotImplemented
        return self._count <= other._count

    def __gt__(self, other: Months) -> bool:
        if not isinstance(other, Months):
            return NotImplemented
        return self._count > other._count

    def __ge__(self, other: Months) -> bool:
        if not isinstance(other, Months):
            return NotImplemented
        return self._count >= other._count

    @no_type_check
    def __reduce__(self):
        return _unpkl_months, (self._count,)


@no_type_check
def _unpkl_months(count: int) -> Months:
    return Months(count)


@final
class Days(_ImmutableBase):
    """A number of calendar days, to add to or subtract from a date

    Example
    -------
    >>> NaiveDate(2024, 2, 28) + Days(2)
    NaiveDate(2024-03-01)
    """

    __slots__ = ("_count",)

    def __init__(self, count: int) -> None:
        self._count = check_int(count, 0, U64_MAX, "days")

    @property
    def count(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"Days({self._count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Days):
            return NotImplemented
        return self._count == other._count

    def __hash__(self) -> int:
        return hash((Days, self._count))

    def __lt__(self, other: Days) -> bool:
        if not isinstance(other, Days):
            return NotImplemented
        return self._count < other._count

    def __le__(self, other: Days) -> bool:
        if not isinstance(other, Days):
            return NotImplemented
        return self._count <= other._count

    def __gt__(self, other: Days) -> bool:
        if not isinstance(other, Days):
            return NotImplemented
        return self._count > other._count

    def __ge__(self, other: Days) -> bool:
        if not isinstance(other, Days):
            return NotImplemented
        return self._count >= other._count

    @no_type_check
    def __reduce__(self):
        return _unpkl_days, (self._count,)


@no_type_check
def _unpkl_days(count: int) -> Days:
    return Days(count)


_MIN_YEAR = -262_143
_MAX_YEAR = 262_142
_MIN_ORD = ymd_to_ord(_MIN_YEAR, 1, 1)
_MAX_ORD = ymd_to_ord(_MAX_YEAR, 12, 31)


def _format_year(year: int) -> str:
    # years outside 0-9999 get an explicit sign and at least 4 digits
    return f"{year:04}" if 0 <= year <= 9_999 else f"{year:+05}"


def _check_ints(*values: int) -> None:
    for v in values:
        if not isinstance(v, int):
            raise TypeError(f"Expected an integer, got {type(v)!r}")


@final
class NaiveDate(_ImmutableBase):
    """A date in the proleptic Gregorian calendar, without a timezone

    Years range from -262143 to 262142.
    Year 0 is 1 BCE, year -1 is 2 BCE, and so on.

    Example
    -------
    >>> d = NaiveDate(2021, 1, 2)
    NaiveDate(2021-01-02)
    >>> NaiveDate(-1, 12, 31)
    NaiveDate(-0001-12-31)
    """

    __slots__ = ("_year", "_month", "_day")

    MIN: ClassVar[NaiveDate]
    """The minimum possible date"""
    MAX: ClassVar[NaiveDate]
    """The maximum possible date"""
    _BEFORE_MIN: ClassVar[NaiveDate]
    _AFTER_MAX: ClassVar[NaiveDate]

    def __init__(self, year: int, month: int, day: int) -> None:
        _check_ints(year, month, day)
        if not _MIN_YEAR <= year <= _MAX_YEAR:
            raise OutOfRange("Year out of range")
        if not 1 <= month <= 12:
            raise InvalidArgument("Month must be in 1..12")
        if not 1 <= day <= days_in_month(year, month):
            raise InvalidArgument("Day is out of range for month")
        self._year = year
        self._month = month
        self._day = day

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def ordinal(self) -> int:
        """The day of the year, starting at 1

        Example
        -------
        >>> NaiveDate(2024, 3, 1).ordinal
        61
        """
        return days_before_month(self._year, self._month) + self._day

    def pred(self) -> NaiveDate | None:
        """The previous day, or ``None`` if this is :attr:`MIN`"""
        return self._add_days(-1)

    def succ(self) -> NaiveDate | None:
        """The next day, or ``None`` if this is :attr:`MAX`"""
        return self._add_days(1)

    def checked_add_signed(self, rhs: TimeDelta, /) -> NaiveDate | None:
        """Add the whole days of a delta. The rest is ignored.

        Example
        -------
        >>> NaiveDate(2024, 1, 1).checked_add_signed(TimeDelta.hours(47))
        NaiveDate(2024-01-02)
        """
        return self._add_days(rhs.num_days())

    def checked_sub_signed(self, rhs: TimeDelta, /) -> NaiveDate | None:
        """Subtract the whole days of a delta. The rest is ignored."""
        return self._add_days(-rhs.num_days())

    def checked_add_days(self, days: Days, /) -> NaiveDate | None:
        return self._add_days(days._count)

    def checked_sub_days(self, days: Days, /) -> NaiveDate | None:
        return self._add_days(-days._count)

    def checked_add_months(self, months: Months, /) -> NaiveDate | None:
        """Add months, clamping the day to the end of the resulting month

        Example
        -------
        >>> NaiveDate(2022, 1, 31).checked_add_months(Months(1))
        NaiveDate(2022-02-28)
        """
        if months._count == 0:
            return self
        if months._count > I32_MAX:
            return None
        return self._add_months(months._count)

    def checked_sub_months(self, months: Months, /) -> NaiveDate | None:
        """Subtract months, clamping the day to the end of the resulting month"""
        if months._count == 0:
            return self
        if months._count > I32_MAX:
            return None
        return self._add_months(-months._count)

    def with_year(self, year: int, /) -> NaiveDate:
        """Replace the year. February 29th can't move to a non-leap year."""
        return NaiveDate(year, self._month, self._day)

    def with_month(self, month: int, /) -> NaiveDate:
        return NaiveDate(self._year, month, self._day)

    def with_day(self, day: int, /) -> NaiveDate:
        return NaiveDate(self._year, self._month, day)

    def with_ordinal(self, ordinal: int, /) -> NaiveDate:
        """Replace the day of the year

        Example
        -------
        >>> NaiveDate(2024, 12, 25).with_ordinal(60)
        NaiveDate(2024-02-29)
        """
        _check_ints(ordinal)
        if not 1 <= ordinal <= days_in_year(self._year):
            raise InvalidArgument("Ordinal is out of range for year")
        return NaiveDate._from_ymd_unchecked(
            *ord_to_ymd(days_before_year(self._year) + ordinal)
        )

    def signed_duration_since(self, other: NaiveDate, /) -> TimeDelta:
        """The number of days between two dates, as a delta

        Example
        -------
        >>> NaiveDate(2024, 3, 1).signed_duration_since(NaiveDate(2024, 2, 1))
        TimeDelta(PT2505600S)
        """
        return TimeDelta._from_parts_unchecked(
            (self._toordinal() - other._toordinal()) * SECS_PER_DAY, 0
        )

    def and_time(self, t: NaiveTime, /) -> NaiveDateTime:
        """Combine with a time to create a datetime

        Example
        -------
        >>> NaiveDate(2021, 1, 2).and_time(NaiveTime(12, 30))
        NaiveDateTime(2021-01-02T12:30:00)
        """
        return NaiveDateTime._from_parts_unchecked(self, t)

    def and_hms(self, hour: int, minute: int, second: int) -> NaiveDateTime:
        return NaiveDateTime._from_parts_unchecked(
            self, NaiveTime(hour, minute, second)
        )

    def and_hms_milli(
        self, hour: int, minute: int, second: int, milli: int
    ) -> NaiveDateTime:
        """Combine with a time. A millisecond value of 1000 or more
        denotes a leap second."""
        _check_ints(milli)
        return NaiveDateTime._from_parts_unchecked(
            self, NaiveTime(hour, minute, second, nanosecond=milli * 1_000_000)
        )

    def and_hms_micro(
        self, hour: int, minute: int, second: int, micro: int
    ) -> NaiveDateTime:
        _check_ints(micro)
        return NaiveDateTime._from_parts_unchecked(
            self, NaiveTime(hour, minute, second, nanosecond=micro * 1_000)
        )

    def and_hms_nano(
        self, hour: int, minute: int, second: int, nano: int
    ) -> NaiveDateTime:
        return NaiveDateTime._from_parts_unchecked(
            self, NaiveTime(hour, minute, second, nanosecond=nano)
        )

    def py_date(self) -> _date:
        """Convert to a standard library :class:`~datetime.date`

        Raises
        ------
        OutOfRange
            If the year is outside the 1-9999 range of the standard library
        """
        if not 1 <= self._year <= 9_999:
            raise OutOfRange("Date out of range for datetime.date")
        return _date(self._year, self._month, self._day)

    @classmethod
    def from_py_date(cls, d: _date, /) -> NaiveDate:
        """Create from a :class:`~datetime.date`

        Example
        -------
        >>> NaiveDate.from_py_date(date(2021, 1, 2))
        NaiveDate(2021-01-02)
        """
        if isinstance(d, _datetime) or not isinstance(d, _date):
            raise TypeError(f"Expected datetime.date, got {type(d)!r}")
        return cls._from_ymd_unchecked(d.year, d.month, d.day)

    def format_iso(self) -> str:
        """Format as ``YYYY-MM-DD``. Years outside 0-9999 get a sign.

        Inverse of :meth:`parse_iso`

        Example
        -------
        >>> NaiveDate(2021, 1, 2).format_iso()
        '2021-01-02'
        >>> NaiveDate(262_142, 12, 31).format_iso()
        '+262142-12-31'
        """
        return f"{_format_year(self._year)}-{self._month:02}-{self._day:02}"

    @classmethod
    def parse_iso(cls, s: str, /) -> NaiveDate:
        """Parse a date in the format ``[+-]Y-M-D``

        Example
        -------
        >>> NaiveDate.parse_iso("2021-01-02")
        NaiveDate(2021-01-02)
        >>> NaiveDate.parse_iso("-0001-12-31")
        NaiveDate(-0001-12-31)
        """
        try:
            return cls(*date_from_iso(s))
        except ValueError:
            parse_err(s)

    @overload
    def __add__(self, other: TimeDelta) -> NaiveDate: ...

    @overload
    def __add__(self, other: Days) -> NaiveDate: ...

    @overload
    def __add__(self, other: Months) -> NaiveDate: ...

    def __add__(self, other: TimeDelta | Days | Months) -> NaiveDate:
        """Add whole days of a delta, or a number of days or months

        Example
        -------
        >>> NaiveDate(2021, 1, 31) + Months(1)
        NaiveDate(2021-02-28)
        """
        if isinstance(other, TimeDelta):
            return _or_raise(
                self.checked_add_signed(other),
                "`NaiveDate + TimeDelta` overflowed",
            )
        elif isinstance(other, Days):
            return _or_raise(
                self.checked_add_days(other), "`NaiveDate + Days` out of range"
            )
        elif isinstance(other, Months):
            return _or_raise(
                self.checked_add_months(other),
                "`NaiveDate + Months` out of range",
            )
        return NotImplemented

    @overload
    def __sub__(self, other: NaiveDate) -> TimeDelta: ...

    @overload
    def __sub__(self, other: TimeDelta | Days | Months) -> NaiveDate: ...

    def __sub__(
        self, other: NaiveDate | TimeDelta | Days | Months
    ) -> NaiveDate | TimeDelta:
        """Subtract a delta, days or months, or subtract two dates

        Example
        -------
        >>> NaiveDate(2021, 1, 2) - NaiveDate(2021, 1, 1)
        TimeDelta(PT86400S)
        """
        if isinstance(other, NaiveDate):
            return self.signed_duration_since(other)
        elif isinstance(other, TimeDelta):
            return _or_raise(
                self.checked_sub_signed(other),
                "`NaiveDate - TimeDelta` overflowed",
            )
        elif isinstance(other, Days):
            return _or_raise(
                self.checked_sub_days(other), "`NaiveDate - Days` out of range"
            )
        elif isinstance(other, Months):
            return _or_raise(
                self.checked_sub_months(other),
                "`NaiveDate - Months` out of range",
            )
        return NotImplemented

    __str__ = format_iso

    def __repr__(self) -> str:
        return f"NaiveDate({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NaiveDate):
            return NotImplemented
        return self._ymd() == other._ymd()

    def __hash__(self) -> int:
        return hash(self._ymd())

    def __lt__(self, other: NaiveDate) -> bool:
        if not isinstance(other, NaiveDate):
            return NotImplemented
        return self._ymd() < other._ymd()

    def __le__(self, other: NaiveDate) -> bool:
        if not isinstance(other, NaiveDate):
            return NotImplemented
        return self._ymd() <= other._ymd()

    def __gt__(self, other: NaiveDate) -> bool:
        if not isinstance(other, NaiveDate):
            return NotImplemented
        return self._ymd() > other._ymd()

    def __ge__(self, other: NaiveDate) -> bool:
        if not isinstance(other, NaiveDate):
            return NotImplemented
        return self._ymd() >= other._ymd()

    def _ymd(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def _toordinal(self) -> int:
        return ymd_to_ord(self._year, self._month, self._day)

    def _add_days(self, days: int) -> NaiveDate | None:
        if days == 0:
            return self
        n = self._toordinal() + days
        if not _MIN_ORD <= n <= _MAX_ORD:
            return None
        return NaiveDate._from_ymd_unchecked(*ord_to_ymd(n))

    def _add_months(self, months: int) -> NaiveDate | None:
        year, month, day = add_months(
            self._year, self._month, self._day, months
        )
        if not _MIN_YEAR <= year <= _MAX_YEAR:
            return None
        return NaiveDate._from_ymd_unchecked(year, month, day)

    @classmethod
    def _from_ymd_unchecked(cls, year: int, month: int, day: int) -> NaiveDate:
        new = _object_new(cls)
        new._year = year
        new._month = month
        new._day = day
        return new

    @no_type_check
    def __reduce__(self):
        return _unpkl_date, (pack("<iBB", *self._ymd()),)


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_date(data: bytes) -> NaiveDate:
    return NaiveDate(*unpack("<iBB", data))


NaiveDate.MIN = NaiveDate._from_ymd_unchecked(_MIN_YEAR, 1, 1)
NaiveDate.MAX = NaiveDate._from_ymd_unchecked(_MAX_YEAR, 12, 31)
# Out-of-range sentinels, for local times that are only used internally
NaiveDate._BEFORE_MIN = NaiveDate._from_ymd_unchecked(_MIN_YEAR - 1, 12, 31)
NaiveDate._AFTER_MAX = NaiveDate._from_ymd_unchecked(_MAX_YEAR + 1, 1, 1)


@final
class NaiveTime(_ImmutableBase):
    """Time of day without a date or timezone, with leap second support

    A leap second is represented by a nanosecond value of one second or
    more, and is only allowed at second 59. It's displayed as second 60.

    Example
    -------
    >>> t = NaiveTime(12, 30, 0)
    NaiveTime(12:30:00)
    >>> NaiveTime(23, 59, 59, nanosecond=1_500_000_000)
    NaiveTime(23:59:60.500)
    """

    __slots__ = ("_secs", "_frac")

    MIN: ClassVar[NaiveTime]
    """The time at midnight"""
    MAX: ClassVar[NaiveTime]
    """The maximum time: the end of a leap second just before midnight"""

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> None:
        _check_ints(hour, minute, second, nanosecond)
        if not (0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60):
            raise InvalidArgument("Time out of range")
        if not 0 <= nanosecond < 2 * NS_PER_SEC:
            raise InvalidArgument("Nanosecond out of range")
        if nanosecond >= NS_PER_SEC and second != 59:
            raise InvalidArgument("A leap second is only allowed at second 59")
        self._secs = hour * 3_600 + minute * 60 + second
        self._frac = nanosecond

    @property
    def hour(self) -> int:
        return self._secs // 3_600

    @property
    def minute(self) -> int:
        return self._secs // 60 % 60

    @property
    def second(self) -> int:
        return self._secs % 60

    @property
    def nanosecond(self) -> int:
        """The nanoseconds within the second.
        A value of one second or more indicates a leap second."""
        return self._frac

    def num_seconds_from_midnight(self) -> int:
        """The number of whole seconds since midnight, ignoring leap seconds"""
        return self._secs

    def overflowing_add_signed(
        self, rhs: TimeDelta, /
    ) -> tuple[NaiveTime, int]:
        """Add a delta, wrapping around midnight.

        Returns the new time, and the number of seconds that didn't fit
        in the day: always a multiple of 86 400.

        Leap seconds are taken into account: adding whole seconds leaves the
        leap second, while adding only a fraction stays in it if possible.

        Example
        -------
        >>> NaiveTime(3, 5, 59, nanosecond=300_000_000).overflowing_add_signed(
        ...     TimeDelta.days(1)
        ... )
        (NaiveTime(03:05:59.300), 86400)
        """
        secs = self._secs
        frac = self._frac
        secs_to_add = rhs.num_seconds()
        frac_to_add = rhs.subsec_nanos()

        if frac >= NS_PER_SEC:
            # We're in a leap second. The leap second doesn't count
            # toward the seconds we add or subtract.
            if secs_to_add > 0 or (
                frac_to_add > 0 and frac >= 2 * NS_PER_SEC - frac_to_add
            ):
                frac -= NS_PER_SEC
            elif secs_to_add < 0:
                frac -= NS_PER_SEC
                secs += 1
            else:
                return (
                    NaiveTime._from_parts_unchecked(secs, frac + frac_to_add),
                    0,
                )

        secs += secs_to_add
        frac += frac_to_add
        if frac < 0:
            frac += NS_PER_SEC
            secs -= 1
        elif frac >= NS_PER_SEC:
            frac -= NS_PER_SEC
            secs += 1

        secs_in_day = secs % SECS_PER_DAY
        return (
            NaiveTime._from_parts_unchecked(secs_in_day, frac),
            secs - secs_in_day,
        )

    def overflowing_sub_signed(
        self, rhs: TimeDelta, /
    ) -> tuple[NaiveTime, int]:
        """Subtract a delta, wrapping around midnight.

        Returns the new time and the (negated) overflow in seconds,
        which is a multiple of 86 400.
        """
        time, overflow = self.overflowing_add_signed(-rhs)
        return time, -overflow

    def overflowing_add_offset(
        self, offset: FixedOffset, /
    ) -> tuple[NaiveTime, int]:
        """Add an offset, returning the new time and a day carry
        of -1, 0, or 1. A leap second is kept."""
        days, secs = divmod(self._secs + offset._secs, SECS_PER_DAY)
        return NaiveTime._from_parts_unchecked(secs, self._frac), days

    def overflowing_sub_offset(
        self, offset: FixedOffset, /
    ) -> tuple[NaiveTime, int]:
        """Subtract an offset, returning the new time and a day carry
        of -1, 0, or 1. A leap second is kept."""
        days, secs = divmod(self._secs - offset._secs, SECS_PER_DAY)
        return NaiveTime._from_parts_unchecked(secs, self._frac), days

    def signed_duration_since(self, other: NaiveTime, /) -> TimeDelta:
        """The delta between two times, counting leap seconds

        Example
        -------
        >>> NaiveTime(3, 0, 7, nanosecond=900_000_000).signed_duration_since(
        ...     NaiveTime(2, 59, 59, nanosecond=1_000_000_000)
        ... )
        TimeDelta(PT8.9S)
        """
        secs = self._secs - other._secs
        frac = self._frac - other._frac
        # A leap second between the two times adds an extra second
        if self._secs > other._secs and other._frac >= NS_PER_SEC:
            secs += 1
        elif self._secs < other._secs and self._frac >= NS_PER_SEC:
            secs -= 1
        extra_secs, frac = divmod(frac, NS_PER_SEC)
        return TimeDelta._from_parts_unchecked(secs + extra_secs, frac)

    def with_hour(self, hour: int, /) -> NaiveTime:
        _check_ints(hour)
        if not 0 <= hour < 24:
            raise InvalidArgument("Hour out of range")
        return NaiveTime._from_parts_unchecked(
            hour * 3_600 + self._secs % 3_600, self._frac
        )

    def with_minute(self, minute: int, /) -> NaiveTime:
        _check_ints(minute)
        if not 0 <= minute < 60:
            raise InvalidArgument("Minute out of range")
        return NaiveTime._from_parts_unchecked(
            self._secs - self._secs % 3_600 + minute * 60 + self._secs % 60,
            self._frac,
        )

    def with_second(self, second: int, /) -> NaiveTime:
        """Replace the second. Fails if this would move a leap second
        away from second 59."""
        _check_ints(second)
        if not 0 <= second < 60:
            raise InvalidArgument("Second out of range")
        if self._frac >= NS_PER_SEC and second != 59:
            raise InvalidArgument("A leap second is only allowed at second 59")
        return NaiveTime._from_parts_unchecked(
            self._secs - self._secs % 60 + second, self._frac
        )

    def with_nanosecond(self, nanosecond: int, /) -> NaiveTime:
        """Replace the nanoseconds. Values of one second or more
        create a leap second, which requires second 59."""
        _check_ints(nanosecond)
        if not 0 <= nanosecond < 2 * NS_PER_SEC:
            raise InvalidArgument("Nanosecond out of range")
        if nanosecond >= NS_PER_SEC and self._secs % 60 != 59:
            raise InvalidArgument("A leap second is only allowed at second 59")
        return NaiveTime._from_parts_unchecked(self._secs, nanosecond)

    def py_time(self) -> _time:
        """Convert to a standard library :class:`~datetime.time`

        Note
        ----
        Nanoseconds are truncated to microseconds.
        A leap second is folded into second 59,
        as the standard library does when converting timestamps.
        """
        hour, rem = divmod(self._secs, 3_600)
        minute, second = divmod(rem, 60)
        return _time(hour, minute, second, self._frac % NS_PER_SEC // 1_000)

    @classmethod
    def from_py_time(cls, t: _time, /) -> NaiveTime:
        """Create from a naive :class:`~datetime.time`

        Example
        -------
        >>> NaiveTime.from_py_time(time(12, 30, 0))
        NaiveTime(12:30:00)

        `fold` value is ignored.
        """
        if not isinstance(t, _time):
            raise TypeError(f"Expected datetime.time, got {type(t)!r}")
        if t.tzinfo is not None:
            raise ValueError("Time must be naive")
        return cls._from_parts_unchecked(
            t.hour * 3_600 + t.minute * 60 + t.second, t.microsecond * 1_000
        )

    def format_iso(self) -> str:
        """Format as ``HH:MM:SS``, with a fraction of 3, 6 or 9 digits
        if needed. A leap second is shown as second 60.

        Inverse of :meth:`parse_iso`.

        Example
        -------
        >>> NaiveTime(12, 30, 0).format_iso()
        '12:30:00'
        >>> NaiveTime(8, 59, 59, nanosecond=1_123_000_000).format_iso()
        '08:59:60.123'
        """
        hour, rem = divmod(self._secs, 3_600)
        minute, second = divmod(rem, 60)
        nanos = self._frac
        if nanos >= NS_PER_SEC:
            second += 1
            nanos -= NS_PER_SEC

        if nanos == 0:
            frac = ""
        elif nanos % 1_000_000 == 0:
            frac = f".{nanos // 1_000_000:03}"
        elif nanos % 1_000 == 0:
            frac = f".{nanos // 1_000:06}"
        else:
            frac = f".{nanos:09}"
        return f"{hour:02}:{minute:02}:{second:02}{frac}"

    @classmethod
    def parse_iso(cls, s: str, /) -> NaiveTime:
        """Parse a time in the format ``H:M:S[.fff]``.
        Second 60 denotes a leap second.

        Example
        -------
        >>> NaiveTime.parse_iso("08:59:60.123")
        NaiveTime(08:59:60.123)
        """
        try:
            hour, minute, second, nanos = time_from_iso(s)
            return cls(hour, minute, second, nanosecond=nanos)
        except ValueError:
            parse_err(s)

    def __add__(self, other: TimeDelta) -> NaiveTime:
        """Add a delta, wrapping around midnight

        Example
        -------
        >>> NaiveTime(23, 0) + TimeDelta.hours(2)
        NaiveTime(01:00:00)
        """
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return self.overflowing_add_signed(other)[0]

    @overload
    def __sub__(self, other: NaiveTime) -> TimeDelta: ...

    @overload
    def __sub__(self, other: TimeDelta) -> NaiveTime: ...

    def __sub__(self, other: NaiveTime | TimeDelta) -> TimeDelta | NaiveTime:
        """Subtract a delta (wrapping around midnight), or subtract two times"""
        if isinstance(other, NaiveTime):
            return self.signed_duration_since(other)
        elif isinstance(other, TimeDelta):
            return self.overflowing_sub_signed(other)[0]
        return NotImplemented

    __str__ = format_iso

    def __repr__(self) -> str:
        return f"NaiveTime({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NaiveTime):
            return NotImplemented
        return self._secs == other._secs and self._frac == other._frac

    def __hash__(self) -> int:
        return hash((self._secs, self._frac))

    def __lt__(self, other: NaiveTime) -> bool:
        if not isinstance(other, NaiveTime):
            return NotImplemented
        return (self._secs, self._frac) < (other._secs, other._frac)

    def __le__(self, other: NaiveTime) -> bool:
        if not isinstance(other, NaiveTime):
            return NotImplemented
        return (self._secs, self._frac) <= (other._secs, other._frac)

    def __gt__(self, other: NaiveTime) -> bool:
        if not isinstance(other, NaiveTime):
            return NotImplemented
        return (self._secs, self._frac) > (other._secs, other._frac)

    def __ge__(self, other: NaiveTime) -> bool:
        if not isinstance(other, NaiveTime):
            return NotImplemented
        return (self._secs, self._frac) >= (other._secs, other._frac)

    @classmethod
    def _from_parts_unchecked(cls, secs: int, frac: int) -> NaiveTime:
        new = _object_new(cls)
        new._secs = secs
        new._frac = frac
        return new

    @no_type_check
    def __reduce__(self):
        return _unpkl_time, (pack("<II", self._secs, self._frac),)


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_time(data: bytes) -> NaiveTime:
    return NaiveTime._from_parts_unchecked(*unpack("<II", data))


NaiveTime.MIN = NaiveTime._from_parts_unchecked(0, 0)
NaiveTime.MAX = NaiveTime._from_parts_unchecked(
    SECS_PER_DAY - 1, 2 * NS_PER_SEC - 1
)


@final
class NaiveDateTime(_ImmutableBase):
    """A date and time without a timezone, like on a wall clock

    It's the combination of a :class:`NaiveDate` and a :class:`NaiveTime`,
    and shares their range and leap second handling.

    Examples
    --------
    >>> dt = NaiveDateTime(2016, 7, 8, 9, 10, 11)
    NaiveDateTime(2016-07-08T09:10:11)
    >>> dt + TimeDelta.seconds(3_660)
    NaiveDateTime(2016-07-08T10:11:11)
    >>> dt + Months(1)
    NaiveDateTime(2016-08-08T09:10:11)

    Note
    ----
    The default value is :attr:`UNIX_EPOCH`.
    """

    __slots__ = ("_date", "_time")

    MIN: ClassVar[NaiveDateTime]
    """The minimum possible datetime"""
    MAX: ClassVar[NaiveDateTime]
    """The maximum possible datetime"""
    UNIX_EPOCH: ClassVar[NaiveDateTime]
    """1970-01-01 00:00:00"""

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> None:
        self._date = NaiveDate(year, month, day)
        self._time = NaiveTime(hour, minute, second, nanosecond=nanosecond)

    @classmethod
    def new(cls, date: NaiveDate, time: NaiveTime, /) -> NaiveDateTime:
        """Combine a date and a time"""
        if not (isinstance(date, NaiveDate) and isinstance(time, NaiveTime)):
            raise TypeError("Expected a NaiveDate and a NaiveTime")
        return cls._from_parts_unchecked(date, time)

    @classmethod
    def from_date(cls, date: NaiveDate, /) -> NaiveDateTime:
        """The datetime at midnight on the given date"""
        return cls.new(date, NaiveTime.MIN)

    def date(self) -> NaiveDate:
        return self._date

    def time(self) -> NaiveTime:
        return self._time

    @property
    def year(self) -> int:
        return self._date._year

    @property
    def month(self) -> int:
        return self._date._month

    @property
    def day(self) -> int:
        return self._date._day

    @property
    def ordinal(self) -> int:
        return self._date.ordinal

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nanosecond(self) -> int:
        return self._time._frac

    def checked_add_signed(self, rhs: TimeDelta, /) -> NaiveDateTime | None:
        """Add a delta, returning ``None`` if the result is out of range

        Leap seconds are handled as in
        :meth:`NaiveTime.overflowing_add_signed`: the result can only
        land in a leap second when starting in one.

        Example
        -------
        >>> dt = NaiveDateTime(2016, 7, 8, 3, 5, 59, nanosecond=1_300_000_000)
        >>> dt.checked_add_signed(TimeDelta.milliseconds(800))
        NaiveDateTime(2016-07-08T03:06:00.100)
        >>> dt.checked_add_signed(TimeDelta.days(1))
        NaiveDateTime(2016-07-09T03:05:59.300)
        """
        time, overflow = self._time.overflowing_add_signed(rhs)
        date = self._date._add_days(overflow // SECS_PER_DAY)
        if date is None:
            return None
        return NaiveDateTime._from_parts_unchecked(date, time)

    def checked_sub_signed(self, rhs: TimeDelta, /) -> NaiveDateTime | None:
        """Subtract a delta, returning ``None`` if the result is out of range"""
        time, overflow = self._time.overflowing_sub_signed(rhs)
        date = self._date._add_days(-(overflow // SECS_PER_DAY))
        if date is None:
            return None
        return NaiveDateTime._from_parts_unchecked(date, time)

    def checked_add_months(self, months: Months, /) -> NaiveDateTime | None:
        """Add months, clamping the day to the end of the resulting month

        Example
        -------
        >>> NaiveDateTime(2014, 1, 31, 1).checked_add_months(Months(1))
        NaiveDateTime(2014-02-28T01:00:00)
        """
        date = self._date.checked_add_months(months)
        if date is None:
            return None
        return NaiveDateTime._from_parts_unchecked(date, self._time)

    def checked_sub_months(self, months: Months, /) -> NaiveDateTime | None:
        """Subtract months, clamping the day to the end of the resulting month"""
        date = self._date.checked_sub_months(months)
        if date is None:
            return None
        return NaiveDateTime._from_parts_unchecked(date, self._time)

    def checked_add_days(self, days: Days, /) -> NaiveDateTime | None:
        date = self._date.checked_add_days(days)
        if date is None:
            return None
        return NaiveDateTime._from_parts_unchecked(date, self._time)

    def checked_sub_days(self, days: Days, /) -> NaiveDateTime | None:
        date = self._date.checked_sub_days(days)
        if date is None:
            return None
        return NaiveDateTime._from_parts_unchecked(date, self._time)

    def checked_add_offset(
        self, offset: FixedOffset, /
    ) -> NaiveDateTime | None:
        """Add an offset, e.g. to convert from UTC to local time.
        A leap second is kept."""
        time, days = self._time.overflowing_add_offset(offset)
        date = self._date_with_carry(days)
        if date is None:
            return None
        return NaiveDateTime._from_parts_unchecked(date, time)

    def checked_sub_offset(
        self, offset: FixedOffset, /
    ) -> NaiveDateTime | None:
        """Subtract an offset, e.g. to convert from local time to UTC.
        A leap second is kept."""
        time, days = self._time.overflowing_sub_offset(offset)
        date = self._date_with_carry(days)
        if date is None:
            return None
        return NaiveDateTime._from_parts_unchecked(date, time)

    def _overflowing_add_offset(self, offset: FixedOffset) -> NaiveDateTime:
        # Local times may fall just outside the supported range.
        # These are clamped to a sentinel date instead of failing.
        time, days = self._time.overflowing_add_offset(offset)
        date = self._date_with_carry(days)
        if date is None:
            date = NaiveDate._BEFORE_MIN if days < 0 else NaiveDate._AFTER_MAX
        return NaiveDateTime._from_parts_unchecked(date, time)

    def _overflowing_sub_offset(self, offset: FixedOffset) -> NaiveDateTime:
        time, days = self._time.overflowing_sub_offset(offset)
        date = self._date_with_carry(days)
        if date is None:
            date = NaiveDate._BEFORE_MIN if days < 0 else NaiveDate._AFTER_MAX
        return NaiveDateTime._from_parts_unchecked(date, time)

    def _date_with_carry(self, days: int) -> NaiveDate | None:
        if days == 1:
            return self._date.succ()
        elif days == -1:
            return self._date.pred()
        return self._date

    def signed_duration_since(self, other: NaiveDateTime, /) -> TimeDelta:
        """The delta between two datetimes. This never fails.

        A leap second is counted when the interval crosses one
        of the datetimes in a leap second.

        Example
        -------
        >>> NaiveDateTime(2016, 7, 8, 10).signed_duration_since(
        ...     NaiveDateTime(2016, 7, 8, 9, 30)
        ... )
        TimeDelta(PT1800S)
        """
        delta = self._date.signed_duration_since(other._date).checked_add(
            self._time.signed_duration_since(other._time)
        )
        assert delta is not None, "the range of dates fits in a TimeDelta"
        return delta

    def with_year(self, year: int, /) -> NaiveDateTime:
        return NaiveDateTime._from_parts_unchecked(
            self._date.with_year(year), self._time
        )

    def with_month(self, month: int, /) -> NaiveDateTime:
        return NaiveDateTime._from_parts_unchecked(
            self._date.with_month(month), self._time
        )

    def with_day(self, day: int, /) -> NaiveDateTime:
        return NaiveDateTime._from_parts_unchecked(
            self._date.with_day(day), self._time
        )

    def with_ordinal(self, ordinal: int, /) -> NaiveDateTime:
        return NaiveDateTime._from_parts_unchecked(
            self._date.with_ordinal(ordinal), self._time
        )

    def with_hour(self, hour: int, /) -> NaiveDateTime:
        return NaiveDateTime._from_parts_unchecked(
            self._date, self._time.with_hour(hour)
        )

    def with_minute(self, minute: int, /) -> NaiveDateTime:
        return NaiveDateTime._from_parts_unchecked(
            self._date, self._time.with_minute(minute)
        )

    def with_second(self, second: int, /) -> NaiveDateTime:
        return NaiveDateTime._from_parts_unchecked(
            self._date, self._time.with_second(second)
        )

    def with_nanosecond(self, nanosecond: int, /) -> NaiveDateTime:
        return NaiveDateTime._from_parts_unchecked(
            self._date, self._time.with_nanosecond(nanosecond)
        )

    def and_utc(self) -> DateTime:
        """Assume the datetime is in UTC

        Example
        -------
        >>> NaiveDateTime(2020, 8, 15, 23, 12).and_utc()
        DateTime(2020-08-15T23:12:00Z)
        """
        return DateTime._from_parts_unchecked(self, FixedOffset.UTC)

    def and_local_timezone(
        self,
        tz: FixedOffset | str,
        /,
        disambiguate: Disambiguate = "compatible",
    ) -> DateTime:
        """Assume the datetime is local time in the given offset or
        IANA timezone.

        Note
        ----
        The local datetime may be ambiguous in the given timezone
        (e.g. during a DST transition). The ``disambiguate`` argument
        determines how this is handled:

        - ``"compatible"``: the earlier offset for repeated times,
          and shift forward for skipped times
        - ``"earlier"`` or ``"later"``: pick the earlier or later instant
        - ``"raise"``: raise :class:`RepeatedTime` or :class:`SkippedTime`

        Example
        -------
        >>> d = NaiveDateTime(2020, 8, 15, 23, 12)
        >>> d.and_local_timezone("Europe/Amsterdam", disambiguate="raise")
        DateTime(2020-08-15T23:12:00+02:00)
        >>> d.and_local_timezone(FixedOffset.west(4 * 3_600))
        DateTime(2020-08-15T23:12:00-04:00)
        """
        if isinstance(tz, FixedOffset):
            offset, local = tz, self
        elif isinstance(tz, str):
            zone = get_tz(tz)
            if not 1 <= self._date._year <= 9_999:
                raise OutOfRange("Datetime out of range for timezone lookup")
            offset_secs, shift = resolve_ambiguity(
                _datetime(
                    self._date._year,
                    self._date._month,
                    self._date._day,
                    *divmod(self._time._secs // 60, 60),
                    self._time._secs % 60,
                ),
                self,
                zone,
                disambiguate,
            )
            offset = FixedOffset._from_secs_unchecked(offset_secs)
            local = _or_raise(
                self.checked_add_offset(FixedOffset._from_secs_unchecked(shift)),
                "Datetime out of range",
            )
        else:
            raise TypeError(f"Expected FixedOffset or str, got {type(tz)!r}")
        return DateTime._from_parts_unchecked(
            _or_raise(local.checked_sub_offset(offset), "Datetime out of range"),
            offset,
        )

    def py_datetime(self) -> _datetime:
        """Convert to a naive standard library :class:`~datetime.datetime`

        Note
        ----
        Nanoseconds are truncated to microseconds.
        A leap second is folded into second 59.

        Raises
        ------
        OutOfRange
            If the year is outside the 1-9999 range of the standard library
        """
        return _datetime.combine(self._date.py_date(), self._time.py_time())

    @classmethod
    def from_py_datetime(cls, d: _datetime, /) -> NaiveDateTime:
        """Create from a naive :class:`~datetime.datetime`

        Example
        -------
        >>> NaiveDateTime.from_py_datetime(datetime(2020, 8, 15, 23, 12))
        NaiveDateTime(2020-08-15T23:12:00)
        """
        if not isinstance(d, _datetime):
            raise TypeError(f"Expected datetime.datetime, got {type(d)!r}")
        if d.tzinfo is not None:
            raise ValueError(
                "Can only create NaiveDateTime from a naive datetime, "
                f"got datetime with tzinfo={d.tzinfo!r}"
            )
        return cls._from_parts_unchecked(
            NaiveDate.from_py_date(d.date()), NaiveTime.from_py_time(d.time())
        )

    def format_iso(self) -> str:
        """Format as ``YYYY-MM-DDTHH:MM:SS[.fff]``

        Inverse of :meth:`parse_iso`

        Example
        -------
        >>> NaiveDateTime(2016, 7, 8, 9, 10, 48, nanosecond=90_000_000).format_iso()
        '2016-07-08T09:10:48.090'
        """
        return f"{self._date}T{self._time}"

    @classmethod
    def parse_iso(cls, s: str, /) -> NaiveDateTime:
        """Parse the format ``Y-M-DTH:M:S[.fff]``

        The fields don't need to be zero-padded, whitespace is allowed
        after each number, and second 60 denotes a leap second.

        Example
        -------
        >>> NaiveDateTime.parse_iso("2016-7-8T9:10:48.09")
        NaiveDateTime(2016-07-08T09:10:48.090)
        >>> NaiveDateTime.parse_iso("2015-07-01T08:59:60.123")
        NaiveDateTime(2015-07-01T08:59:60.123)
        """
        try:
            year, month, day, hour, minute, second, nanos = datetime_from_iso(
                s
            )
            return cls(year, month, day, hour, minute, second, nanosecond=nanos)
        except ValueError:
            parse_err(s)

    @overload
    def __add__(self, other: TimeDelta | _timedelta) -> NaiveDateTime: ...

    @overload
    def __add__(self, other: FixedOffset) -> NaiveDateTime: ...

    @overload
    def __add__(self, other: Months | Days) -> NaiveDateTime: ...

    def __add__(
        self, other: TimeDelta | _timedelta | FixedOffset | Months | Days
    ) -> NaiveDateTime:
        """Add a delta, offset, months, or days

        Example
        -------
        >>> NaiveDateTime(2016, 7, 8, 3, 5, 7) + TimeDelta.seconds(3_660)
        NaiveDateTime(2016-07-08T04:06:07)
        """
        if isinstance(other, TimeDelta):
            return _or_raise(
                self.checked_add_signed(other),
                "`NaiveDateTime + TimeDelta` overflowed",
            )
        elif isinstance(other, _timedelta):
            return _or_raise(
                self.checked_add_signed(_tdelta_from_std(other)),
                "`NaiveDateTime + TimeDelta` overflowed",
            )
        elif isinstance(other, FixedOffset):
            return _or_raise(
                self.checked_add_offset(other),
                "`NaiveDateTime + FixedOffset` out of range",
            )
        elif isinstance(other, Months):
            return _or_raise(
                self.checked_add_months(other),
                "`NaiveDateTime + Months` out of range",
            )
        elif isinstance(other, Days):
            return _or_raise(
                self.checked_add_days(other),
                "`NaiveDateTime + Days` out of range",
            )
        return NotImplemented

    @overload
    def __sub__(self, other: NaiveDateTime) -> TimeDelta: ...

    @overload
    def __sub__(
        self, other: TimeDelta | _timedelta | FixedOffset | Months | Days
    ) -> NaiveDateTime: ...

    def __sub__(
        self,
        other: NaiveDateTime | TimeDelta | _timedelta | FixedOffset | Months | Days,
    ) -> NaiveDateTime | TimeDelta:
        """Subtract a delta, offset, months, or days.
        Subtracting two datetimes gives the delta between them.

        Example
        -------
        >>> NaiveDateTime(2016, 7, 8, 10) - NaiveDateTime(2016, 7, 8, 9, 30)
        TimeDelta(PT1800S)
        """
        if isinstance(other, NaiveDateTime):
            return self.signed_duration_since(other)
        elif isinstance(other, TimeDelta):
            return _or_raise(
                self.checked_sub_signed(other),
                "`NaiveDateTime - TimeDelta` overflowed",
            )
        elif isinstance(other, _timedelta):
            return _or_raise(
                self.checked_sub_signed(_tdelta_from_std(other)),
                "`NaiveDateTime - TimeDelta` overflowed",
            )
        elif isinstance(other, FixedOffset):
            return _or_raise(
                self.checked_sub_offset(other),
                "`NaiveDateTime - FixedOffset` out of range",
            )
        elif isinstance(other, Months):
            return _or_raise(
                self.checked_sub_months(other),
                "`NaiveDateTime - Months` out of range",
            )
        elif isinstance(other, Days):
            return _or_raise(
                self.checked_sub_days(other),
                "`NaiveDateTime - Days` out of range",
            )
        return NotImplemented

    def __str__(self) -> str:
        return f"{self._date} {self._time}"

    def __repr__(self) -> str:
        return f"NaiveDateTime({self.format_iso()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __hash__(self) -> int:
        return hash((self._date, self._time))

    def __lt__(self, other: NaiveDateTime) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return (self._date, self._time) < (other._date, other._time)

    def __le__(self, other: NaiveDateTime) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return (self._date, self._time) <= (other._date, other._time)

    def __gt__(self, other: NaiveDateTime) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return (self._date, self._time) > (other._date, other._time)

    def __ge__(self, other: NaiveDateTime) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return (self._date, self._time) >= (other._date, other._time)

    @classmethod
    def _from_parts_unchecked(
        cls, date: NaiveDate, time: NaiveTime
    ) -> NaiveDateTime:
        new = _object_new(cls)
        new._date = date
        new._time = time
        return new

    def _pack(self) -> bytes:
        return pack(
            "<iBBII",
            *self._date._ymd(),
            self._time._secs,
            self._time._frac,
        )

    @no_type_check
    def __reduce__(self):
        return _unpkl_naive, (self._pack(),)


def _naive_from_packed(data: bytes) -> NaiveDateTime:
    year, month, day, secs, frac = unpack("<iBBII", data)
    return NaiveDateTime._from_parts_unchecked(
        NaiveDate._from_ymd_unchecked(year, month, day),
        NaiveTime._from_parts_unchecked(secs, frac),
    )


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_naive(data: bytes) -> NaiveDateTime:
    return _naive_from_packed(data)


def _tdelta_from_std(td: _timedelta) -> TimeDelta:
    try:
        return TimeDelta.from_py_timedelta(td)
    except OutOfRange:
        raise OutOfRange(
            "overflow converting from datetime.timedelta to TimeDelta"
        ) from None


NaiveDateTime.MIN = NaiveDateTime._from_parts_unchecked(
    NaiveDate.MIN, NaiveTime.MIN
)
NaiveDateTime.MAX = NaiveDateTime._from_parts_unchecked(
    NaiveDate.MAX, NaiveTime.MAX
)
NaiveDateTime.UNIX_EPOCH = NaiveDateTime._from_parts_unchecked(
    NaiveDate._from_ymd_unchecked(1970, 1, 1), NaiveTime.MIN
)


_UNIX_EPOCH_ORD = ymd_to_ord(1970, 1, 1)


@final
class DateTime(_ImmutableBase):
    """An exact moment in time, with a fixed UTC offset

    It's stored as the datetime in UTC, plus the offset.
    Equality and ordering only consider the moment in time.

    Example
    -------
    >>> dt = NaiveDateTime(2020, 8, 15, 21, 12).and_utc()
    DateTime(2020-08-15T21:12:00Z)
    >>> dt.naive_local()
    NaiveDateTime(2020-08-15T21:12:00)
    >>> NaiveDateTime(2020, 8, 15, 23, 12).and_local_timezone(
    ...     FixedOffset(7_200)
    ... ) == dt
    True
    """

    __slots__ = ("_utc", "_offset")

    def __init__(self, utc: NaiveDateTime, offset: FixedOffset) -> None:
        if not (
            isinstance(utc, NaiveDateTime) and isinstance(offset, FixedOffset)
        ):
            raise TypeError("Expected a NaiveDateTime and a FixedOffset")
        self._utc = utc
        self._offset = offset

    @classmethod
    def from_naive_utc_and_offset(
        cls, utc: NaiveDateTime, offset: FixedOffset, /
    ) -> DateTime:
        """Create from a datetime in UTC and the offset to display it in"""
        return cls(utc, offset)

    def naive_utc(self) -> NaiveDateTime:
        return self._utc

    def naive_local(self) -> NaiveDateTime:
        """The local datetime. Near the edges of the supported range,
        this may be a (clamped) date just outside of it."""
        return self._utc._overflowing_add_offset(self._offset)

    def offset(self) -> FixedOffset:
        return self._offset

    def timestamp(self) -> int:
        """Seconds since the UNIX epoch, ignoring leap seconds

        Example
        -------
        >>> NaiveDateTime(1970, 1, 2).and_utc().timestamp()
        86400
        """
        return (
            self._utc._date._toordinal() - _UNIX_EPOCH_ORD
        ) * SECS_PER_DAY + self._utc._time._secs

    def timestamp_subsec_nanos(self) -> int:
        """The nanoseconds past the :meth:`timestamp`.
        This exceeds one second during a leap second."""
        return self._utc._time._frac

    def checked_add_signed(self, rhs: TimeDelta, /) -> DateTime | None:
        utc = self._utc.checked_add_signed(rhs)
        if utc is None:
            return None
        return DateTime._from_parts_unchecked(utc, self._offset)

    def checked_sub_signed(self, rhs: TimeDelta, /) -> DateTime | None:
        utc = self._utc.checked_sub_signed(rhs)
        if utc is None:
            return None
        return DateTime._from_parts_unchecked(utc, self._offset)

    def py_datetime(self) -> _datetime:
        """Convert to an aware :class:`~datetime.datetime` with a fixed offset

        Note
        ----
        Nanoseconds are truncated to microseconds.
        """
        return self.naive_local().py_datetime().replace(
            tzinfo=mk_fixed_tzinfo(self._offset._secs)
        )

    def format_iso(self) -> str:
        """Format the local datetime with its offset. UTC is written ``Z``.

        Example
        -------
        >>> NaiveDateTime(2020, 8, 15, 23, 12).and_utc().format_iso()
        '2020-08-15T23:12:00Z'
        """
        return self.naive_local().format_iso() + (
            str(self._offset) if self._offset._secs else "Z"
        )

    def __add__(self, other: TimeDelta) -> DateTime:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return _or_raise(
            self.checked_add_signed(other), "`DateTime + TimeDelta` overflowed"
        )

    @overload
    def __sub__(self, other: DateTime) -> TimeDelta: ...

    @overload
    def __sub__(self, other: TimeDelta) -> DateTime: ...

    def __sub__(self, other: DateTime | TimeDelta) -> TimeDelta | DateTime:
        """Subtract a delta, or calculate the delta between two moments

        Example
        -------
        >>> a = NaiveDateTime(2020, 8, 15, 23, 12).and_utc()
        >>> b = NaiveDateTime(2020, 8, 15, 23, 12).and_local_timezone(
        ...     FixedOffset(3_600)
        ... )
        >>> a - b
        TimeDelta(PT3600S)
        """
        if isinstance(other, DateTime):
            return self._utc.signed_duration_since(other._utc)
        elif isinstance(other, TimeDelta):
            return _or_raise(
                self.checked_sub_signed(other),
                "`DateTime - TimeDelta` overflowed",
            )
        return NotImplemented

    __str__ = format_iso

    def __repr__(self) -> str:
        return f"DateTime({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._utc == other._utc

    def __hash__(self) -> int:
        return hash(self._utc)

    def __lt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._utc < other._utc

    def __le__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._utc <= other._utc

    def __gt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._utc > other._utc

    def __ge__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._utc >= other._utc

    @classmethod
    def _from_parts_unchecked(
        cls, utc: NaiveDateTime, offset: FixedOffset
    ) -> DateTime:
        new = _object_new(cls)
        new._utc = utc
        new._offset = offset
        return new

    @no_type_check
    def __reduce__(self):
        return _unpkl_dt, (
            self._utc._pack() + pack("<i", self._offset._secs),
        )


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_dt(data: bytes) -> DateTime:
    (offset_secs,) = unpack("<i", data[-4:])
    return DateTime._from_parts_unchecked(
        _naive_from_packed(data[:-4]),
        FixedOffset._from_secs_unchecked(offset_secs),
    )


def weeks(i: int, /) -> TimeDelta:
    """Create a :class:`~TimeDelta` with the given number of weeks.
    ``weeks(1) == TimeDelta.weeks(1)``
    """
    return TimeDelta.weeks(i)


def days(i: int, /) -> TimeDelta:
    """Create a :class:`~TimeDelta` with the given number of days.
    ``days(1) == TimeDelta.days(1)``
    """
    return TimeDelta.days(i)


def hours(i: int, /) -> TimeDelta:
    """Create a :class:`~TimeDelta` with the given number of hours.
    ``hours(1) == TimeDelta.hours(1)``
    """
    return TimeDelta.hours(i)


def minutes(i: int, /) -> TimeDelta:
    """Create a :class:`TimeDelta` with the given number of minutes.
    ``minutes(1) == TimeDelta.minutes(1)``
    """
    return TimeDelta.minutes(i)


def seconds(i: int, /) -> TimeDelta:
    """Create a :class:`TimeDelta` with the given number of seconds.
    ``seconds(1) == TimeDelta.seconds(1)``
    """
    return TimeDelta.seconds(i)


def milliseconds(i: int, /) -> TimeDelta:
    """Create a :class:`TimeDelta` with the given number of milliseconds.
    ``milliseconds(1) == TimeDelta.milliseconds(1)``
    """
    return TimeDelta.milliseconds(i)


def microseconds(i: int, /) -> TimeDelta:
    """Create a :class:`TimeDelta` with the given number of microseconds.
    ``microseconds(1) == TimeDelta.microseconds(1)``
    """
    return TimeDelta.microseconds(i)


def nanoseconds(i: int, /) -> TimeDelta:
    """Create a :class:`TimeDelta` with the given number of nanoseconds.
    ``nanoseconds(1) == TimeDelta.nanoseconds(1)``
    """
    return TimeDelta.nanoseconds(i)


# We expose the public members in the root of the module.
# For clarity, we remove the "_core" part from the names,
# since this is an implementation detail.
for name in __all__:
    member = locals()[name]
    if getattr(member, "__module__", "").startswith(
        "chronokit."
    ):  # pragma: no branch
        member.__module__ = "chronokit"

# clear up loop variables so they don't leak into the namespace
del name
del member

for _unpkl in (
    _unpkl_tdelta,
    _unpkl_caldelta,
    _unpkl_fixed,
    _unpkl_months,
    _unpkl_days,
    _unpkl_date,
    _unpkl_time,
    _unpkl_naive,
    _unpkl_dt,
):
    _unpkl.__module__ = "chronokit"


# disable further subclassing
final(_ImmutableBase)
