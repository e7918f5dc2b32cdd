from __future__ import annotations

from typing import Tuple

# Seconds in a day.
JULIAN_DAY = 86400.0

# Day counts are kept relative to 1970-01-01 ("epoch day") internally.
J2000_EPOCH_DAY = 10957       # 2000-01-01
MJD_EPOCH_DAY = -40587        # 1858-11-17, MJD 0

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def to_epoch_day(year: int, month: int, day: int) -> int:
    """
    Proleptic Gregorian date -> days since 1970-01-01.

    Era-based count (400-year cycles of 146097 days), valid for any integer year;
    floor division keeps negative years consistent.
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = month - 3 if month > 2 else month + 9
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def from_epoch_day(n: int) -> Tuple[int, int, int]:
    """Inverse of to_epoch_day: days since 1970-01-01 -> (year, month, day)."""
    z = n + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def day_of_year(year: int, month: int, day: int) -> int:
    return to_epoch_day(year, month, day) - to_epoch_day(year, 1, 1) + 1


def two_sum(a: float, b: float) -> Tuple[float, float]:
    """
    Møller-Knuth TwoSum without branching.

    Returns (s, r) where s is the rounded sum and s + r == a + b exactly.
    The statements must NOT be simplified: they rely on IEEE rounding.
    """
    s = a + b
    a_prime = s - b
    b_prime = s - a_prime
    delta_a = a - a_prime
    delta_b = b - b_prime
    return s, delta_a + delta_b
