"""
leaptime.core.components
------------------------
Calendar and clock components: the human-readable side of an instant.

DateComponents is a proleptic Gregorian date, TimeComponents a clock reading
(possibly inside a leap second, so seconds may reach 60), DateTimeComponents
the pair. None of them know about time scales: a scale turns an AbsoluteDate
into components and back.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from .errors import OutOfRangeError, ParseError, UnsupportedFieldError
from .time import (
    J2000_EPOCH_DAY,
    JULIAN_DAY,
    MJD_EPOCH_DAY,
    day_of_year,
    days_in_month,
    from_epoch_day,
    to_epoch_day,
)
from ..fields.chrono import ChronoField, TemporalField


_CALENDAR_RE = re.compile(r"^([-+]?\d{4,})-?(\d\d)-?(\d\d)$")
_ORDINAL_RE = re.compile(r"^([-+]?\d{4,})-?(\d\d\d)$")
_TIME_RE = re.compile(
    r"^(\d\d):?(\d\d):?(\d\d(?:[.,]\d+)?)"
    r"(?:(Z)|([-+])(\d\d)(?::?(\d\d))?)?$"
)


@dataclass(frozen=True, order=True)
class DateComponents:
    """A proleptic Gregorian calendar date. Also a read-only accessor for date fields."""
    year: int
    month: int
    day: int

    J2000_EPOCH: ClassVar["DateComponents"]
    MODIFIED_JULIAN_EPOCH: ClassVar["DateComponents"]
    MIN_EPOCH: ClassVar["DateComponents"]
    MAX_EPOCH: ClassVar["DateComponents"]

    def __post_init__(self):
        if not (1 <= self.month <= 12):
            raise OutOfRangeError(f"non-existent date {self.year}-{self.month}-{self.day}")
        if not (1 <= self.day <= days_in_month(self.year, self.month)):
            raise OutOfRangeError(f"non-existent date {self.year}-{self.month:02d}-{self.day}")

    # ---------------------------------------------------------
    # Day counts
    # ---------------------------------------------------------
    @classmethod
    def from_epoch_day(cls, n: int) -> "DateComponents":
        return cls(*from_epoch_day(n))

    @classmethod
    def from_j2000_day(cls, n: int) -> "DateComponents":
        """Date n days after 2000-01-01."""
        return cls.from_epoch_day(n + J2000_EPOCH_DAY)

    @classmethod
    def from_mjd(cls, mjd: int) -> "DateComponents":
        return cls.from_epoch_day(mjd + MJD_EPOCH_DAY)

    @classmethod
    def from_day_of_year(cls, year: int, doy: int) -> "DateComponents":
        n_days = 366 if days_in_month(year, 2) == 29 else 365
        if not (1 <= doy <= n_days):
            raise OutOfRangeError(f"non-existent day number {doy} in year {year}")
        return cls.from_epoch_day(to_epoch_day(year, 1, 1) + doy - 1)

    @property
    def epoch_day(self) -> int:
        return to_epoch_day(self.year, self.month, self.day)

    @property
    def j2000_day(self) -> int:
        return self.epoch_day - J2000_EPOCH_DAY

    @property
    def mjd(self) -> int:
        return self.epoch_day - MJD_EPOCH_DAY

    @property
    def day_of_year(self) -> int:
        return day_of_year(self.year, self.month, self.day)

    @property
    def day_of_week(self) -> int:
        """ISO day of week: 1 = Monday .. 7 = Sunday."""
        # 1970-01-01 was a Thursday
        return (self.epoch_day + 3) % 7 + 1

    # ---------------------------------------------------------
    # Field protocol
    # ---------------------------------------------------------
    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            return field.is_date_based()
        return field.is_supported_by(self)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            if not field.is_date_based():
                raise UnsupportedFieldError(f"Unsupported field: {field}")
            return date_field(self, field)
        return field.get_from(self)

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------
    @classmethod
    def parse(cls, text: str) -> "DateComponents":
        """Reads YYYY-MM-DD, YYYYMMDD or the ordinal form YYYY-DDD."""
        s = text.strip()
        m = _CALENDAR_RE.match(s)
        try:
            if m:
                return cls(int(m.group(1)), int(m.group(2)), int(m.group(3)))
            m = _ORDINAL_RE.match(s)
            if m:
                return cls.from_day_of_year(int(m.group(1)), int(m.group(2)))
        except OutOfRangeError as e:
            raise ParseError(f"unable to parse date {text!r}: {e}") from e
        raise ParseError(f"unable to parse date {text!r}")

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def date_field(d: DateComponents, field: ChronoField) -> int:
    F = ChronoField
    if field is F.DAY_OF_WEEK:
        return d.day_of_week
    if field is F.ALIGNED_DAY_OF_WEEK_IN_MONTH:
        return (d.day - 1) % 7 + 1
    if field is F.ALIGNED_DAY_OF_WEEK_IN_YEAR:
        return (d.day_of_year - 1) % 7 + 1
    if field is F.DAY_OF_MONTH:
        return d.day
    if field is F.DAY_OF_YEAR:
        return d.day_of_year
    if field is F.EPOCH_DAY:
        return d.epoch_day
    if field is F.ALIGNED_WEEK_OF_MONTH:
        return (d.day - 1) // 7 + 1
    if field is F.ALIGNED_WEEK_OF_YEAR:
        return (d.day_of_year - 1) // 7 + 1
    if field is F.MONTH_OF_YEAR:
        return d.month
    if field is F.PROLEPTIC_MONTH:
        return d.year * 12 + d.month - 1
    if field is F.YEAR_OF_ERA:
        return d.year if d.year >= 1 else 1 - d.year
    if field is F.YEAR:
        return d.year
    if field is F.ERA:
        return 1 if d.year >= 1 else 0
    raise UnsupportedFieldError(f"Unsupported field: {field}")


DateComponents.J2000_EPOCH = DateComponents(2000, 1, 1)
DateComponents.MODIFIED_JULIAN_EPOCH = DateComponents(1858, 11, 17)
DateComponents.MIN_EPOCH = DateComponents.from_j2000_day(-(2**31))
DateComponents.MAX_EPOCH = DateComponents.from_j2000_day(2**31 - 1)


@dataclass(frozen=True)
class TimeComponents:
    """
    A clock reading: hour, minute, second and the local offset from UTC (minutes).

    second is a float in [0, 62); values >= 60 only happen inside a leap second,
    and values >= 61 only inside the 1.4228 s step that opened UTC in 1961.
    """
    hour: int
    minute: int
    second: float
    minutes_from_utc: int = 0

    H00: ClassVar["TimeComponents"]
    H12: ClassVar["TimeComponents"]

    def __post_init__(self):
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59 and 0.0 <= self.second < 62.0):
            raise OutOfRangeError(
                f"non-existent time {self.hour}:{self.minute}:{self.second}")

    @classmethod
    def _unchecked(cls, hour: int, minute: int, second: float, minutes_from_utc: int = 0) -> "TimeComponents":
        # callers have already range-checked the reading
        tc = object.__new__(cls)
        object.__setattr__(tc, "hour", hour)
        object.__setattr__(tc, "minute", minute)
        object.__setattr__(tc, "second", second)
        object.__setattr__(tc, "minutes_from_utc", minutes_from_utc)
        return tc

    @classmethod
    def from_seconds_in_day(cls, seconds: float) -> "TimeComponents":
        return cls.from_seconds(0, seconds, 0.0, 60)

    @classmethod
    def from_seconds(cls, second_in_day_a: int, second_in_day_b: float,
                     leap: float = 0.0, minute_duration: int = 60) -> "TimeComponents":
        """
        Build a clock reading from a split second-of-day.

        second_in_day_a + second_in_day_b is the number of seconds elapsed since
        the start of the day, excluding any leap already inserted; leap is the
        part of the current leap second already elapsed (0 outside a leap) and
        minute_duration the length of the current minute (61 around a leap).
        """
        carry = math.floor(second_in_day_b)
        whole = second_in_day_a + carry
        fractional = second_in_day_b - carry

        if whole < 0 or whole > JULIAN_DAY:
            raise OutOfRangeError(
                f"out of range seconds number: {second_in_day_a + second_in_day_b} "
                f"not in [0, {JULIAN_DAY}]")
        max_extra = minute_duration - 60
        if leap * max_extra < 0 or abs(leap) > abs(max_extra):
            raise OutOfRangeError(f"out of range seconds number: leap {leap} not in [0, {max_extra}]")

        hour = whole // 3600
        whole -= 3600 * hour
        minute = whole // 60
        whole -= 60 * minute

        # rounding may push the sum up to minute_duration itself; step back one ulp
        # to stay inside the minute
        naive = whole + (leap + fractional)
        if naive < 0:
            raise OutOfRangeError(f"out of range seconds number: {naive} not in [0, {minute_duration}]")
        second = naive if naive < minute_duration else math.nextafter(float(minute_duration), 0.0)
        return cls._unchecked(int(hour), int(minute), second, 0)

    @property
    def seconds_in_local_day(self) -> float:
        return self.second + 60 * self.minute + 3600 * self.hour

    @property
    def seconds_in_utc_day(self) -> float:
        return self.seconds_in_local_day - 60 * self.minutes_from_utc

    @classmethod
    def parse(cls, text: str) -> "TimeComponents":
        """Reads HH:MM:SS[.fff][Z|±HH[:MM]] (or the basic form without colons)."""
        m = _TIME_RE.match(text.strip())
        if not m:
            raise ParseError(f"unable to parse time {text!r}")
        hour, minute = int(m.group(1)), int(m.group(2))
        second = float(m.group(3).replace(",", "."))
        offset = 0
        if m.group(5):
            offset = 60 * int(m.group(6)) + int(m.group(7) or 0)
            if m.group(5) == "-":
                offset = -offset
        try:
            return cls(hour, minute, second, offset)
        except OutOfRangeError as e:
            raise ParseError(f"unable to parse time {text!r}: {e}") from e

    def __str__(self) -> str:
        s = f"{self.hour:02d}:{self.minute:02d}:{self.second:06.3f}"
        if self.minutes_from_utc == 0:
            return s
        sign = "+" if self.minutes_from_utc > 0 else "-"
        h, m = divmod(abs(self.minutes_from_utc), 60)
        return f"{s}{sign}{h:02d}:{m:02d}"


TimeComponents.H00 = TimeComponents(0, 0, 0.0)
TimeComponents.H12 = TimeComponents(12, 0, 0.0)


@dataclass(frozen=True)
class DateTimeComponents:
    date: DateComponents
    time: TimeComponents

    @classmethod
    def shifted(cls, reference: "DateTimeComponents", offset: float) -> "DateTimeComponents":
        """Components `offset` seconds after reference, ignoring leap seconds."""
        day = reference.date.j2000_day
        seconds = reference.time.seconds_in_local_day + offset
        day_shift = math.floor(seconds / JULIAN_DAY)
        seconds -= JULIAN_DAY * day_shift
        day += day_shift
        tmp = TimeComponents.from_seconds_in_day(seconds)
        return cls(DateComponents.from_j2000_day(day),
                   TimeComponents._unchecked(tmp.hour, tmp.minute, tmp.second,
                                             reference.time.minutes_from_utc))

    @classmethod
    def parse(cls, text: str) -> "DateTimeComponents":
        """Reads an ISO-8601 date, optionally followed by 'T' and a time."""
        s = text.strip()
        if "T" in s:
            date_part, time_part = s.split("T", 1)
            return cls(DateComponents.parse(date_part), TimeComponents.parse(time_part))
        return cls(DateComponents.parse(s), TimeComponents.H00)

    def to_string(self, minute_duration: int = 60, fraction_digits: int = 3) -> str:
        """
        ISO-8601 rendering with the seconds rounded to fraction_digits.

        Rounding only carries into the next minute when the rounded second reaches
        minute_duration, so 23:59:59.9999 prints as 23:59:60.000 in a 61 s minute.
        """
        comps = self
        unit = 10 ** fraction_digits
        second = comps.time.second
        whole = math.floor(second)
        frac_units = math.floor((second - whole) * unit + 0.5)
        if frac_units >= unit:
            whole += 1
            frac_units -= unit
        if whole >= minute_duration:
            start_of_minute = DateTimeComponents(
                comps.date,
                TimeComponents(comps.time.hour, comps.time.minute, 0.0, comps.time.minutes_from_utc))
            comps = DateTimeComponents.shifted(start_of_minute, 60.0)
            whole, frac_units = 0, 0
        t = comps.time
        text = f"{comps.date}T{t.hour:02d}:{t.minute:02d}:{int(whole):02d}"
        if fraction_digits > 0:
            text += f".{frac_units:0{fraction_digits}d}"
        if t.minutes_from_utc != 0:
            sign = "+" if t.minutes_from_utc > 0 else "-"
            h, m = divmod(abs(t.minutes_from_utc), 60)
            text += f"{sign}{h:02d}:{m:02d}"
        return text

    def __str__(self) -> str:
        # without a scale, a reading past 60 s is taken to sit in a long minute
        return self.to_string(max(60, math.floor(self.time.second) + 1))
