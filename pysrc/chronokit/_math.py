"""Proleptic Gregorian calendar helpers.

Day numbers count from 0001-01-01 (day 1) and extend to negative years,
which is why floor division is used throughout.
"""


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# 1-indexed days per month
_MONTHDAYS = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

_DAYS_BEFORE_MONTH = [-1]  # -1 is a placeholder for indexing purposes
_dbm = 0
for _dim in _MONTHDAYS[1:]:
    _DAYS_BEFORE_MONTH.append(_dbm)
    _dbm += _dim
del _dbm, _dim

_DI400Y = 146_097  # days in 400 years
_DI100Y = 36_524  # days in 100 years
_DI4Y = 1_461  # days in 4 years


def days_in_month(year: int, month: int) -> int:
    return _MONTHDAYS[month] + (month == 2 and is_leap(year))


def days_in_year(year: int) -> int:
    return 366 if is_leap(year) else 365


def days_before_year(year: int) -> int:
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def days_before_month(year: int, month: int) -> int:
    return _DAYS_BEFORE_MONTH[month] + (month > 2 and is_leap(year))


def ymd_to_ord(year: int, month: int, day: int) -> int:
    return days_before_year(year) + days_before_month(year, month) + day


def ord_to_ymd(n: int) -> tuple[int, int, int]:
    # n is a 1-based day number. Work with the 0-based offset within
    # 400-year cycles, which floor division keeps valid for negative years.
    n400, n = divmod(n - 1, _DI400Y)
    year = n400 * 400 + 1

    n100, n = divmod(n, _DI100Y)
    n4, n = divmod(n, _DI4Y)
    n1, n = divmod(n, 365)

    year += n100 * 100 + n4 * 4 + n1
    if n1 == 4 or n100 == 4:
        # last day of a leap year that ends a 4- or 400-year cycle
        return year - 1, 12, 31

    leapyear = n1 == 3 and (n4 != 24 or n100 == 3)
    month = (n + 50) >> 5
    preceding = _DAYS_BEFORE_MONTH[month] + (month > 2 and leapyear)
    if preceding > n:
        month -= 1
        preceding -= _MONTHDAYS[month] + (month == 2 and leapyear)
    return year, month, n - preceding + 1


def add_months(
    year: int, month: int, day: int, months: int
) -> tuple[int, int, int]:
    """Shift a date by a number of months, clamping the day to the
    length of the resulting month."""
    year_delta, month0_new = divmod(month - 1 + months, 12)
    year_new = year + year_delta
    month_new = month0_new + 1
    return (
        year_new,
        month_new,
        min(day, days_in_month(year_new, month_new)),
    )
