import pickle
import re
from copy import copy, deepcopy
from datetime import datetime as py_datetime, timedelta, timezone

import pytest
from hypothesis import given
from hypothesis.strategies import composite, integers, text

from chronokit import (
    DateTime,
    Days,
    FixedOffset,
    InvalidArgument,
    Months,
    NaiveDate,
    NaiveDateTime,
    NaiveTime,
    OutOfRange,
    RepeatedTime,
    SkippedTime,
    TimeDelta,
    TimeZoneNotFoundError,
    days,
    hours,
    milliseconds,
    minutes,
    nanoseconds,
    seconds,
)

from .common import AlwaysEqual, AlwaysLarger, AlwaysSmaller, NeverEqual


@composite
def naive_datetimes(draw):
    year = draw(integers(-262_143, 262_142))
    month = draw(integers(1, 12))
    day = draw(integers(1, 28))
    secs = draw(integers(0, 86_399))
    frac = draw(integers(0, 1_999_999_999))
    if frac >= 1_000_000_000:
        secs = secs - secs % 60 + 59
    return NaiveDateTime(
        year,
        month,
        day,
        secs // 3_600,
        secs // 60 % 60,
        secs % 60,
        nanosecond=frac,
    )


class TestInit:

    def test_defaults(self):
        d = NaiveDateTime(2020, 8, 15)
        assert d.date() == NaiveDate(2020, 8, 15)
        assert d.time() == NaiveTime.MIN

    def test_all_fields(self):
        d = NaiveDateTime(2020, 8, 15, 5, 12, 30, nanosecond=450)
        assert d.year == 2020
        assert d.month == 8
        assert d.day == 15
        assert d.ordinal == 228
        assert d.hour == 5
        assert d.minute == 12
        assert d.second == 30
        assert d.nanosecond == 450

    def test_invalid(self):
        with pytest.raises(InvalidArgument):
            NaiveDateTime(2020, 2, 30)
        with pytest.raises(InvalidArgument):
            NaiveDateTime(2020, 2, 3, 24)
        with pytest.raises(OutOfRange):
            NaiveDateTime(300_000, 2, 3)

    def test_nanosecond_is_keyword_only(self):
        with pytest.raises(TypeError):
            NaiveDateTime(2020, 8, 15, 5, 12, 30, 450)  # type: ignore[misc]

    def test_new(self):
        d = NaiveDateTime.new(NaiveDate(2020, 8, 15), NaiveTime(5, 12))
        assert d == NaiveDateTime(2020, 8, 15, 5, 12)
        with pytest.raises(TypeError):
            NaiveDateTime.new(NaiveTime(5, 12), NaiveDate(2020, 8, 15))  # type: ignore[arg-type]

    def test_from_date(self):
        assert NaiveDateTime.from_date(NaiveDate(2020, 8, 15)) == (
            NaiveDateTime(2020, 8, 15)
        )

    def test_constants(self):
        assert NaiveDateTime.UNIX_EPOCH == NaiveDateTime(1970, 1, 1)
        assert NaiveDateTime.MIN == NaiveDateTime(-262_143, 1, 1)
        assert NaiveDateTime.MAX == NaiveDateTime(
            262_142, 12, 31, 23, 59, 59, nanosecond=1_999_999_999
        )


class TestAddSigned:

    def test_scenario(self):
        start = NaiveDate(2016, 7, 8).and_hms(3, 5, 7)
        assert start + seconds(3_600 + 60) == NaiveDate(2016, 7, 8).and_hms(
            4, 6, 7
        )

    @pytest.mark.parametrize(
        "delta, expect",
        [
            (seconds(0), NaiveDateTime(2014, 5, 6, 7, 8, 9)),
            (seconds(1), NaiveDateTime(2014, 5, 6, 7, 8, 10)),
            (seconds(-1), NaiveDateTime(2014, 5, 6, 7, 8, 8)),
            (seconds(3_600 + 60), NaiveDateTime(2014, 5, 6, 8, 9, 9)),
            (seconds(86_399), NaiveDateTime(2014, 5, 7, 7, 8, 8)),
            (seconds(86_400 * 10), NaiveDateTime(2014, 5, 16, 7, 8, 9)),
            (seconds(-86_400 * 10), NaiveDateTime(2014, 4, 26, 7, 8, 9)),
            (
                days(365 * 10),
                NaiveDateTime(2024, 5, 3, 7, 8, 9),
            ),
        ],
    )
    def test_examples(self, delta, expect):
        start = NaiveDateTime(2014, 5, 6, 7, 8, 9)
        assert start.checked_add_signed(delta) == expect
        assert start + delta == expect
        assert expect.checked_sub_signed(delta) == start
        assert expect - delta == start

    def test_leap_second(self):
        dt = NaiveDate(2016, 7, 8).and_hms_milli(3, 5, 59, 1_300)
        assert dt.checked_add_signed(TimeDelta.ZERO) == dt
        assert dt + milliseconds(800) == NaiveDate(2016, 7, 8).and_hms_milli(
            3, 6, 0, 100
        )
        assert dt + days(1) == NaiveDate(2016, 7, 9).and_hms_milli(
            3, 5, 59, 300
        )
        assert dt - days(1) == NaiveDate(2016, 7, 7).and_hms_milli(
            3, 6, 0, 300
        )

    def test_bounds(self):
        assert NaiveDateTime.MAX.checked_add_signed(nanoseconds(1)) is None
        assert NaiveDateTime.MIN.checked_sub_signed(nanoseconds(1)) is None
        assert NaiveDateTime.MIN.checked_add_signed(TimeDelta.MAX) is None
        assert NaiveDateTime.MAX.checked_add_signed(TimeDelta.MIN) is None
        assert (
            NaiveDateTime(262_142, 12, 31, 23, 59, 59).checked_add_signed(
                seconds(1)
            )
            is None
        )
        assert NaiveDateTime(262_142, 12, 31, 23, 59, 58).checked_add_signed(
            seconds(1)
        ) == NaiveDateTime(262_142, 12, 31, 23, 59, 59)

    def test_full_range(self):
        end = NaiveDateTime.MAX.with_nanosecond(999_999_999)
        delta = end - NaiveDateTime.MIN
        assert NaiveDateTime.MIN + delta == end
        assert NaiveDateTime.MIN.checked_add_signed(
            delta + nanoseconds(1)
        ) is None

    def test_overflow_messages(self):
        with pytest.raises(
            OutOfRange, match=re.escape("`NaiveDateTime + TimeDelta` overflowed")
        ):
            NaiveDateTime.MAX + seconds(1)
        with pytest.raises(
            OutOfRange, match=re.escape("`NaiveDateTime - TimeDelta` overflowed")
        ):
            NaiveDateTime.MIN - seconds(1)

    def test_compound_assignment(self):
        d = NaiveDateTime(2020, 1, 1)
        d += hours(25)
        assert d == NaiveDateTime(2020, 1, 2, 1)
        d -= minutes(61)
        assert d == NaiveDateTime(2020, 1, 1, 23, 59)


class TestStdDuration:

    def test_add_and_sub(self):
        d = NaiveDateTime(2020, 1, 1, 12)
        assert d + timedelta(hours=1, microseconds=5) == NaiveDateTime(
            2020, 1, 1, 13, nanosecond=5_000
        )
        assert d - timedelta(days=1) == NaiveDateTime(2019, 12, 31, 12)

    def test_negative(self):
        with pytest.raises(
            OutOfRange,
            match="overflow converting from datetime.timedelta to TimeDelta",
        ):
            NaiveDateTime(2020, 1, 1) + timedelta(seconds=-1)
        with pytest.raises(OutOfRange, match="overflow converting"):
            NaiveDateTime(2020, 1, 1) - timedelta(seconds=-1)

    def test_out_of_range(self):
        with pytest.raises(
            OutOfRange, match=re.escape("`NaiveDateTime + TimeDelta`")
        ):
            NaiveDateTime.MAX + timedelta(seconds=1)


class TestMonths:

    def test_clamping(self):
        assert NaiveDateTime(2020, 1, 31, 6) + Months(1) == NaiveDateTime(
            2020, 2, 29, 6
        )
        assert NaiveDateTime(2020, 3, 31) - Months(1) == NaiveDateTime(
            2020, 2, 29
        )
        assert NaiveDateTime(2020, 3, 31) - Months(2) == NaiveDateTime(
            2020, 1, 31
        )
        assert NaiveDateTime(2014, 1, 31, 1).checked_add_months(
            Months(1)
        ) == NaiveDateTime(2014, 2, 28, 1)

    def test_time_kept(self):
        d = NaiveDate(2016, 6, 30).and_hms_milli(23, 59, 59, 1_500)
        assert d + Months(1) == NaiveDate(2016, 7, 30).and_hms_milli(
            23, 59, 59, 1_500
        )

    def test_out_of_range(self):
        assert NaiveDateTime.MAX.checked_add_months(Months(1)) is None
        assert NaiveDateTime.MIN.checked_sub_months(Months(1)) is None
        assert (
            NaiveDateTime(2020, 1, 1).checked_add_months(Months(1 << 31))
            is None
        )
        with pytest.raises(
            OutOfRange, match=re.escape("`NaiveDateTime + Months` out of range")
        ):
            NaiveDateTime.MAX + Months(1)
        with pytest.raises(
            OutOfRange, match=re.escape("`NaiveDateTime - Months` out of range")
        ):
            NaiveDateTime.MIN - Months(1)


class TestDays:

    def test_add_and_sub(self):
        d = NaiveDateTime(2020, 2, 28, 12, 30)
        assert d + Days(2) == NaiveDateTime(2020, 3, 1, 12, 30)
        assert d.checked_sub_days(Days(59)) == NaiveDateTime(
            2019, 12, 31, 12, 30
        )

    def test_out_of_range(self):
        assert NaiveDateTime.MAX.checked_add_days(Days(1)) is None
        with pytest.raises(
            OutOfRange, match=re.escape("`NaiveDateTime + Days` out of range")
        ):
            NaiveDateTime.MAX + Days(1)
        with pytest.raises(
            OutOfRange, match=re.escape("`NaiveDateTime - Days` out of range")
        ):
            NaiveDateTime.MIN - Days(1)


class TestOffset:

    def test_add_and_sub(self):
        d = NaiveDateTime(2020, 1, 1, 0, 30)
        assert d + FixedOffset(3_600) == NaiveDateTime(2020, 1, 1, 1, 30)
        assert d - FixedOffset(3_600) == NaiveDateTime(2019, 12, 31, 23, 30)
        assert d.checked_add_offset(FixedOffset.west(3_600)) == (
            NaiveDateTime(2019, 12, 31, 23, 30)
        )

    def test_leap_second_kept(self):
        d = NaiveDate(2016, 12, 31).and_hms_milli(23, 59, 59, 1_500)
        assert d.checked_add_offset(FixedOffset(3_600)) == NaiveDate(
            2017, 1, 1
        ).and_hms_milli(0, 59, 59, 1_500)

    def test_out_of_range(self):
        assert NaiveDateTime.MAX.checked_add_offset(FixedOffset(1)) is None
        assert NaiveDateTime.MIN.checked_sub_offset(FixedOffset(1)) is None
        assert NaiveDateTime.MIN.checked_add_offset(FixedOffset(1)) == (
            NaiveDateTime(-262_143, 1, 1, 0, 0, 1)
        )
        with pytest.raises(
            OutOfRange,
            match=re.escape("`NaiveDateTime + FixedOffset` out of range"),
        ):
            NaiveDateTime.MAX + FixedOffset(1)
        with pytest.raises(
            OutOfRange,
            match=re.escape("`NaiveDateTime - FixedOffset` out of range"),
        ):
            NaiveDateTime.MIN - FixedOffset(1)

    def test_overflowing_sub_clamps_below_min(self):
        d = NaiveDateTime.MIN._overflowing_sub_offset(FixedOffset(3_600))
        assert d.date() is NaiveDate._BEFORE_MIN
        assert d.time() == NaiveTime(23, 0)
        assert str(d) == "-262144-12-31 23:00:00"

    def test_overflowing_sub_clamps_above_max(self):
        d = NaiveDateTime.MAX._overflowing_sub_offset(FixedOffset.west(3_600))
        assert d.date() is NaiveDate._AFTER_MAX
        assert d.time() == NaiveTime(0, 59, 59, nanosecond=1_999_999_999)
        assert str(d) == "+262143-01-01 00:59:60.999999999"

    @given(naive_datetimes(), integers(-86_399, 86_399))
    def test_overflowing_sub_in_range(self, d, secs):
        offset = FixedOffset(secs)
        expect = d.checked_sub_offset(offset)
        if expect is not None:
            assert d._overflowing_sub_offset(offset) == expect

    def test_overflowing_add_and_sub_mirror(self):
        d = NaiveDateTime(2020, 8, 15, 23, 12)
        offset = FixedOffset(19_800)
        assert d._overflowing_sub_offset(offset) == (
            d._overflowing_add_offset(FixedOffset.west(19_800))
        )
        assert d._overflowing_sub_offset(offset) == NaiveDateTime(
            2020, 8, 15, 17, 42
        )


class TestDurationSince:

    def test_examples(self):
        assert NaiveDateTime(2016, 7, 8, 10).signed_duration_since(
            NaiveDateTime(2016, 7, 8, 9, 30)
        ) == minutes(30)
        assert NaiveDateTime(2016, 7, 8, 9, 30) - NaiveDateTime(
            2016, 7, 9, 10
        ) == -(days(1) + minutes(30))

    def test_leap_second(self):
        leap = NaiveDate(2015, 6, 30).and_hms_milli(23, 59, 59, 1_500)
        assert leap - NaiveDateTime(2015, 6, 30, 23) == seconds(
            3_600
        ) + milliseconds(500)
        assert NaiveDateTime(2015, 7, 1, 1) - leap == seconds(
            3_600
        ) - milliseconds(500)
        # the leap second itself is only counted from within it
        assert leap - NaiveDateTime(2015, 6, 30, 23, 59, 59) == (
            milliseconds(1_500)
        )

    def test_full_range(self):
        d = NaiveDateTime.MAX - NaiveDateTime.MIN
        assert d == -(NaiveDateTime.MIN - NaiveDateTime.MAX)
        assert d > TimeDelta.ZERO

    @given(naive_datetimes(), naive_datetimes())
    def test_antisymmetric(self, a, b):
        assert a.signed_duration_since(b) == -b.signed_duration_since(a)

    @given(naive_datetimes(), integers(-(10**12), 10**12))
    def test_inverse_of_add(self, d, ns):
        delta = TimeDelta.nanoseconds(ns)
        if d.nanosecond >= 1_000_000_000:
            return  # leap seconds aren't preserved by addition
        shifted = d.checked_add_signed(delta)
        if shifted is not None:
            assert shifted - d == delta


class TestReplace:

    def test_date_fields(self):
        d = NaiveDateTime(2020, 2, 29, 12)
        assert d.with_year(2024) == NaiveDateTime(2024, 2, 29, 12)
        assert d.with_month(3) == NaiveDateTime(2020, 3, 29, 12)
        assert d.with_day(1) == NaiveDateTime(2020, 2, 1, 12)
        assert d.with_ordinal(1) == NaiveDateTime(2020, 1, 1, 12)
        with pytest.raises(InvalidArgument):
            d.with_year(2021)
        with pytest.raises(InvalidArgument):
            d.with_ordinal(367)

    def test_time_fields(self):
        d = NaiveDateTime(2020, 2, 29, 12, 30, 59)
        assert d.with_hour(1) == NaiveDateTime(2020, 2, 29, 1, 30, 59)
        assert d.with_minute(1) == NaiveDateTime(2020, 2, 29, 12, 1, 59)
        assert d.with_second(1) == NaiveDateTime(2020, 2, 29, 12, 30, 1)
        assert d.with_nanosecond(1_000_000_000).nanosecond == 1_000_000_000
        with pytest.raises(InvalidArgument):
            d.with_hour(24)
        with pytest.raises(InvalidArgument):
            d.with_second(1).with_nanosecond(1_000_000_000)


class TestAndTimezone:

    def test_and_utc(self):
        d = NaiveDateTime(2020, 8, 15, 23, 12).and_utc()
        assert d.offset() == FixedOffset.UTC
        assert d.naive_utc() == NaiveDateTime(2020, 8, 15, 23, 12)
        assert str(d) == "2020-08-15T23:12:00Z"

    def test_fixed_offset(self):
        d = NaiveDateTime(2020, 8, 15, 23, 12).and_local_timezone(
            FixedOffset.west(4 * 3_600)
        )
        assert d.naive_utc() == NaiveDateTime(2020, 8, 16, 3, 12)
        assert d.naive_local() == NaiveDateTime(2020, 8, 15, 23, 12)
        assert str(d) == "2020-08-15T23:12:00-04:00"

    def test_fixed_offset_out_of_range(self):
        with pytest.raises(OutOfRange):
            NaiveDateTime.MAX.and_local_timezone(FixedOffset.west(3_600))

    def test_zone_unambiguous(self):
        d = NaiveDateTime(2020, 8, 15, 23, 12).and_local_timezone(
            "Europe/Amsterdam", disambiguate="raise"
        )
        assert d.offset() == FixedOffset(7_200)
        assert d.naive_utc() == NaiveDateTime(2020, 8, 15, 21, 12)

    @pytest.mark.parametrize(
        "disambiguate, expect",
        [
            ("compatible", "2023-03-26T03:30:00+02:00"),
            ("later", "2023-03-26T03:30:00+02:00"),
            ("earlier", "2023-03-26T01:30:00+01:00"),
        ],
    )
    def test_skipped_time(self, disambiguate, expect):
        d = NaiveDateTime(2023, 3, 26, 2, 30).and_local_timezone(
            "Europe/Amsterdam", disambiguate=disambiguate
        )
        assert str(d) == expect

    def test_skipped_time_raises(self):
        with pytest.raises(
            SkippedTime,
            match=re.escape(
                "2023-03-26 02:30:00 is skipped in timezone 'Europe/Amsterdam'"
            ),
        ):
            NaiveDateTime(2023, 3, 26, 2, 30).and_local_timezone(
                "Europe/Amsterdam", disambiguate="raise"
            )

    @pytest.mark.parametrize(
        "disambiguate, expect",
        [
            ("compatible", "2023-10-29T02:30:00+02:00"),
            ("earlier", "2023-10-29T02:30:00+02:00"),
            ("later", "2023-10-29T02:30:00+01:00"),
        ],
    )
    def test_repeated_time(self, disambiguate, expect):
        d = NaiveDateTime(2023, 10, 29, 2, 30).and_local_timezone(
            "Europe/Amsterdam", disambiguate=disambiguate
        )
        assert str(d) == expect

    def test_repeated_time_raises(self):
        with pytest.raises(RepeatedTime, match="is repeated in timezone"):
            NaiveDateTime(2023, 10, 29, 2, 30).and_local_timezone(
                "Europe/Amsterdam", disambiguate="raise"
            )

    def test_leap_second_kept(self):
        d = NaiveDate(2016, 12, 31).and_hms_milli(23, 59, 59, 1_500)
        utc = d.and_local_timezone("Europe/Amsterdam").naive_utc()
        assert utc == NaiveDate(2016, 12, 31).and_hms_milli(22, 59, 59, 1_500)

    def test_invalid_disambiguate(self):
        with pytest.raises(ValueError, match="disambiguate"):
            NaiveDateTime(2020, 8, 15).and_local_timezone(
                "Europe/Amsterdam", disambiguate="foo"  # type: ignore[arg-type]
            )

    def test_unknown_zone(self):
        with pytest.raises(TimeZoneNotFoundError):
            NaiveDateTime(2020, 8, 15).and_local_timezone("Europe/Nowhere")

    def test_zone_out_of_range(self):
        with pytest.raises(OutOfRange):
            NaiveDateTime(10_000, 1, 1).and_local_timezone("Europe/Amsterdam")

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            NaiveDateTime(2020, 8, 15).and_local_timezone(3_600)  # type: ignore[arg-type]


class TestStdlib:

    def test_py_datetime(self):
        d = NaiveDateTime(2016, 7, 8, 9, 10, 11, nanosecond=123_456_789)
        assert d.py_datetime() == py_datetime(2016, 7, 8, 9, 10, 11, 123_456)

    def test_py_datetime_leap_second(self):
        d = NaiveDate(2016, 12, 31).and_hms_milli(23, 59, 59, 1_500)
        assert d.py_datetime() == py_datetime(2016, 12, 31, 23, 59, 59, 500_000)

    def test_py_datetime_out_of_range(self):
        with pytest.raises(OutOfRange):
            NaiveDateTime(0, 1, 1).py_datetime()

    def test_from_py_datetime(self):
        assert NaiveDateTime.from_py_datetime(
            py_datetime(2020, 8, 15, 23, 12, 1, 5)
        ) == NaiveDateTime(2020, 8, 15, 23, 12, 1, nanosecond=5_000)

    def test_from_aware(self):
        with pytest.raises(ValueError, match="naive"):
            NaiveDateTime.from_py_datetime(
                py_datetime(2020, 8, 15, tzinfo=timezone.utc)
            )

    def test_from_wrong_type(self):
        with pytest.raises(TypeError):
            NaiveDateTime.from_py_datetime(NaiveDateTime(2020, 8, 15))  # type: ignore[arg-type]


class TestFormatting:

    @pytest.mark.parametrize(
        "d, iso, display",
        [
            (
                NaiveDateTime(2016, 7, 8, 9, 10, 11),
                "2016-07-08T09:10:11",
                "2016-07-08 09:10:11",
            ),
            (
                NaiveDateTime(2016, 7, 8, 9, 10, 48, nanosecond=90_000_000),
                "2016-07-08T09:10:48.090",
                "2016-07-08 09:10:48.090",
            ),
            (
                NaiveDate(2015, 6, 30).and_hms_milli(23, 59, 59, 1_500),
                "2015-06-30T23:59:60.500",
                "2015-06-30 23:59:60.500",
            ),
            (
                NaiveDateTime(-1, 1, 1),
                "-0001-01-01T00:00:00",
                "-0001-01-01 00:00:00",
            ),
            (
                NaiveDateTime.MAX,
                "+262142-12-31T23:59:60.999999999",
                "+262142-12-31 23:59:60.999999999",
            ),
        ],
    )
    def test_examples(self, d, iso, display):
        assert d.format_iso() == iso
        assert str(d) == display
        assert repr(d) == f"NaiveDateTime({iso})"


class TestParseIso:

    @pytest.mark.parametrize(
        "s, expect",
        [
            ("2015-01-20T17:35:20", NaiveDateTime(2015, 1, 20, 17, 35, 20)),
            (
                "2015-01-20T17:35:20.001",
                NaiveDateTime(2015, 1, 20, 17, 35, 20, nanosecond=1_000_000),
            ),
            (
                "2015-01-20T17:35:20.000031",
                NaiveDateTime(2015, 1, 20, 17, 35, 20, nanosecond=31_000),
            ),
            (
                "2015-01-20T17:35:20.000000004",
                NaiveDateTime(2015, 1, 20, 17, 35, 20, nanosecond=4),
            ),
            (
                "2015-01-20T17:35:20.000000000452",
                NaiveDateTime(2015, 1, 20, 17, 35, 20),
            ),
            (
                "2015-02-18T23:59:60.234567",
                NaiveDate(2015, 2, 18).and_hms_micro(23, 59, 59, 1_234_567),
            ),
            (
                "+12345-6-7T7:59:60.6",
                NaiveDate(12_345, 6, 7).and_hms_milli(7, 59, 59, 1_600),
            ),
            (
                "2015-2-18T23:16:9.15",
                NaiveDate(2015, 2, 18).and_hms_milli(23, 16, 9, 150),
            ),
            (
                "2015 -2 -18 T23 :16 :9.15 ",
                NaiveDate(2015, 2, 18).and_hms_milli(23, 16, 9, 150),
            ),
            ("-0001-12-31T00:00:00", NaiveDateTime(-1, 12, 31)),
        ],
    )
    def test_valid(self, s, expect):
        assert NaiveDateTime.parse_iso(s) == expect

    @pytest.mark.parametrize(
        "s",
        [
            "",
            "x",
            "15",
            "15:8:9",
            "15-8-9",
            "2015-15-15T15:15:15",
            "2012-12-12T12:12:12x",
            "2012-123-12T12:12:12",
            "2012-12-12T12:12:12.",
            "2012-12-12 12:12:12",
            "2012-12-12t12:12:12",
            "2012-12-12T12:12",
            "2012-12-12T24:00:00",
            "2015-02-18T23:59:60.234567Z",
            "12345-6-7T7:59:60.6",
            " 2015-01-20T17:35:20",
        ],
    )
    def test_invalid(self, s):
        with pytest.raises(ValueError, match=re.escape(repr(s))):
            NaiveDateTime.parse_iso(s)

    @given(text())
    def test_fuzzing(self, s: str):
        with pytest.raises(ValueError, match=re.escape(repr(s + "x"))):
            NaiveDateTime.parse_iso(s + "x")

    @given(naive_datetimes())
    def test_roundtrip(self, d):
        assert NaiveDateTime.parse_iso(d.format_iso()) == d


def test_equality():
    d = NaiveDateTime(2020, 8, 15, 23, 12, 9, nanosecond=987_654)
    same = NaiveDateTime(2020, 8, 15, 23, 12, 9, nanosecond=987_654)
    different = NaiveDateTime(2020, 8, 15, 23, 12, 9, nanosecond=987_655)
    assert d == same
    assert not d == different
    assert d != different
    assert not d == NeverEqual()
    assert d == AlwaysEqual()
    assert d != py_datetime(2020, 8, 15, 23, 12, 9)
    assert hash(d) == hash(same)


def test_comparison():
    d = NaiveDateTime(2020, 8, 15, 23, 12, 9)
    same = NaiveDateTime(2020, 8, 15, 23, 12, 9)
    bigger = NaiveDateTime(2020, 8, 16)
    smaller = NaiveDateTime(2020, 8, 15, 23, 12, 8, nanosecond=999_999_999)

    assert d <= same
    assert d <= bigger
    assert not d <= smaller
    assert d <= AlwaysLarger()
    assert not d <= AlwaysSmaller()

    assert not d < same
    assert d < bigger
    assert not d < smaller
    assert d < AlwaysLarger()
    assert not d < AlwaysSmaller()

    assert d >= same
    assert not d >= bigger
    assert d >= smaller
    assert not d >= AlwaysLarger()
    assert d >= AlwaysSmaller()

    assert not d > same
    assert not d > bigger
    assert d > smaller
    assert not d > AlwaysLarger()
    assert d > AlwaysSmaller()


def test_unsupported_operators():
    d = NaiveDateTime(2020, 8, 15)
    with pytest.raises(TypeError, match="unsupported operand"):
        d + 1  # type: ignore[operator]
    with pytest.raises(TypeError, match="unsupported operand"):
        d + d  # type: ignore[operator]
    with pytest.raises(TypeError, match="unsupported operand"):
        d - NaiveDate(2020, 8, 15)  # type: ignore[operator]
    with pytest.raises(TypeError, match="unsupported operand"):
        d - d.and_utc()  # type: ignore[operator]


def test_copy():
    d = NaiveDateTime(2020, 8, 15, 23, 12)
    assert copy(d) is d
    assert deepcopy(d) is d


@pytest.mark.parametrize(
    "d",
    [
        NaiveDateTime(2020, 8, 15, 23, 12, 9, nanosecond=987_654_321),
        NaiveDateTime.MIN,
        NaiveDateTime.MAX,
    ],
)
def test_pickling(d):
    dumped = pickle.dumps(d)
    assert b"_unpkl_naive" in dumped
    assert pickle.loads(dumped) == d


def test_cannot_subclass():
    with pytest.raises(TypeError):

        class Subclass(NaiveDateTime):  # type: ignore[misc]
            pass


def test_datetime_is_exported():
    assert NaiveDateTime(2020, 1, 1).and_utc().__class__ is DateTime
