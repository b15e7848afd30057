# Run with: python benchmarks/comparison/run_stdlib.py -o stdlib.json
import pyperf

runner = pyperf.Runner()

runner.timeit(
    "various operations",
    "d = datetime.fromisoformat('2020-04-05T22:04:00')"
    ".replace(tzinfo=timezone(timedelta(hours=-4)));"
    "d - datetime(2020, 1, 1, tzinfo=timezone.utc);"
    "(d + timedelta(minutes=270))"
    ".astimezone(ZoneInfo('Europe/Amsterdam'))",
    setup="from datetime import datetime, timedelta, timezone; "
    "from zoneinfo import ZoneInfo",
)

runner.timeit(
    "new date",
    "date(2020, 2, 29)",
    setup="from datetime import date",
)

runner.timeit(
    "date diff",
    "d1 - d2",
    setup="from datetime import date; "
    "d1 = date(2020, 2, 29); d2 = date(2025, 2, 28)",
)

runner.timeit(
    "parse date",
    "f('2020-02-29')",
    setup="from datetime import date; f = date.fromisoformat",
)

runner.timeit(
    "datetime add delta",
    "d + delta",
    setup="from datetime import datetime, timedelta; "
    "d = datetime(2020, 3, 20, 12, 30, 45); "
    "delta = timedelta(seconds=3_888_061)",
)

runner.timeit(
    "delta multiply",
    "delta * 7",
    setup="from datetime import timedelta; delta = timedelta(milliseconds=1500)",
)
