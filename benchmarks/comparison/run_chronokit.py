# Run with: python benchmarks/comparison/run_chronokit.py -o chronokit.json
import pyperf

runner = pyperf.Runner()

runner.timeit(
    "various operations",
    "d = NaiveDateTime.parse_iso('2020-04-05T22:04:00')"
    ".and_local_timezone(FixedOffset.west(4 * 3600));"
    "d - NaiveDateTime(2020, 1, 1).and_utc();"
    "(d.naive_utc() + TimeDelta.minutes(270))"
    ".and_local_timezone('Europe/Amsterdam')",
    setup="from chronokit import NaiveDateTime, FixedOffset, TimeDelta",
)

runner.timeit(
    "new date",
    "NaiveDate(2020, 2, 29)",
    setup="from chronokit import NaiveDate",
)

runner.timeit(
    "date add months",
    "d + Months(59)",
    setup="from chronokit import NaiveDate, Months; d = NaiveDate(1987, 3, 31)",
)

runner.timeit(
    "date diff",
    "d1 - d2",
    setup="from chronokit import NaiveDate; "
    "d1 = NaiveDate(2020, 2, 29); d2 = NaiveDate(2025, 2, 28)",
)

runner.timeit(
    "parse date",
    "f('2020-02-29')",
    setup="from chronokit import NaiveDate; f = NaiveDate.parse_iso",
)

runner.timeit(
    "datetime add delta",
    "d + delta",
    setup="from chronokit import NaiveDateTime, TimeDelta; "
    "d = NaiveDateTime(2020, 3, 20, 12, 30, 45); "
    "delta = TimeDelta.seconds(3_888_061)",
)

runner.timeit(
    "delta multiply",
    "delta * 7",
    setup="from chronokit import TimeDelta; delta = TimeDelta.milliseconds(1500)",
)
