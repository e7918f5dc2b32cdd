"""
leaptime.fields.chrono
----------------------
Vocabulary of the generic field protocol: units, value ranges, the standard
calendar/clock fields and the Julian day-count fields.

A *field* names a quantity ("second of day", "month of year"); a *temporal
accessor* holds a decomposed instant and answers field queries against itself.
Fields know how to read themselves from any accessor that supports them, so new
fields can be added without touching the accessors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from ..core.errors import OutOfRangeError

MAX_LONG = 2**63 - 1
MIN_LONG = -(2**63)


class TemporalUnit(Enum):
    """Units with their nominal duration in seconds (metadata only)."""
    NANOS = ("Nanos", 1e-9)
    MICROS = ("Micros", 1e-6)
    MILLIS = ("Millis", 1e-3)
    SECONDS = ("Seconds", 1.0)
    MINUTES = ("Minutes", 60.0)
    HOURS = ("Hours", 3600.0)
    HALF_DAYS = ("HalfDays", 43200.0)
    DAYS = ("Days", 86400.0)
    WEEKS = ("Weeks", 7 * 86400.0)
    MONTHS = ("Months", 31556952.0 / 12)
    YEARS = ("Years", 31556952.0)
    DECADES = ("Decades", 31556952.0 * 10)
    CENTURIES = ("Centuries", 31556952.0 * 100)
    MILLENNIA = ("Millennia", 31556952.0 * 1000)
    ERAS = ("Eras", 31556952.0 * 1e9)
    FOREVER = ("Forever", float("inf"))

    def __init__(self, display: str, seconds: float):
        self.display = display
        self.seconds = seconds

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class ValueRange:
    """
    Valid values of a field: [minimum, maximum], where the maximum may depend on
    context; smallest_maximum is the lowest maximum over all contexts.
    """
    minimum: int
    smallest_maximum: int
    maximum: int

    @classmethod
    def of(cls, minimum: int, maximum: int, largest: int | None = None) -> "ValueRange":
        """of(min, max) is a fixed range; of(min, smallest_max, max) a variable one."""
        if largest is None:
            return cls(minimum, maximum, maximum)
        return cls(minimum, maximum, largest)

    def __post_init__(self):
        if self.minimum > self.smallest_maximum or self.smallest_maximum > self.maximum:
            raise OutOfRangeError(
                f"invalid range [{self.minimum}, {self.smallest_maximum}/{self.maximum}]")

    def is_fixed(self) -> bool:
        return self.smallest_maximum == self.maximum

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def check_valid_value(self, value: int, field: Any) -> int:
        if not self.is_valid_value(value):
            raise OutOfRangeError(f"invalid value for {field} (valid values {self}): {value}")
        return value

    def __str__(self) -> str:
        if self.is_fixed():
            return f"{self.minimum} - {self.maximum}"
        return f"{self.minimum} - {self.smallest_maximum}/{self.maximum}"


@runtime_checkable
class TemporalAccessor(Protocol):
    """Read-only access to the fields of a decomposed instant."""
    def is_supported(self, field: "TemporalField") -> bool: ...
    def get_long(self, field: "TemporalField") -> int: ...


@runtime_checkable
class TemporalField(Protocol):
    """
    A named quantity that can be read from a TemporalAccessor.

    Third parties implement this to define new queryable fields; accessors fall
    back to field.is_supported_by / field.get_from for fields they do not know.
    """
    @property
    def base_unit(self) -> TemporalUnit: ...

    @property
    def range_unit(self) -> TemporalUnit: ...

    def range(self) -> ValueRange: ...
    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange: ...
    def is_date_based(self) -> bool: ...
    def is_time_based(self) -> bool: ...
    def is_supported_by(self, temporal: TemporalAccessor) -> bool: ...
    def get_from(self, temporal: TemporalAccessor) -> int: ...


_U = TemporalUnit


class ChronoField(Enum):
    """Standard ISO calendar/clock fields. Their semantics ignore leap seconds."""
    NANO_OF_SECOND = ("NanoOfSecond", _U.NANOS, _U.SECONDS, ValueRange.of(0, 999_999_999))
    NANO_OF_DAY = ("NanoOfDay", _U.NANOS, _U.DAYS, ValueRange.of(0, 86400 * 1_000_000_000 - 1))
    MICRO_OF_SECOND = ("MicroOfSecond", _U.MICROS, _U.SECONDS, ValueRange.of(0, 999_999))
    MICRO_OF_DAY = ("MicroOfDay", _U.MICROS, _U.DAYS, ValueRange.of(0, 86400 * 1_000_000 - 1))
    MILLI_OF_SECOND = ("MilliOfSecond", _U.MILLIS, _U.SECONDS, ValueRange.of(0, 999))
    MILLI_OF_DAY = ("MilliOfDay", _U.MILLIS, _U.DAYS, ValueRange.of(0, 86400 * 1000 - 1))
    SECOND_OF_MINUTE = ("SecondOfMinute", _U.SECONDS, _U.MINUTES, ValueRange.of(0, 59))
    SECOND_OF_DAY = ("SecondOfDay", _U.SECONDS, _U.DAYS, ValueRange.of(0, 86400 - 1))
    MINUTE_OF_HOUR = ("MinuteOfHour", _U.MINUTES, _U.HOURS, ValueRange.of(0, 59))
    MINUTE_OF_DAY = ("MinuteOfDay", _U.MINUTES, _U.DAYS, ValueRange.of(0, 24 * 60 - 1))
    HOUR_OF_AMPM = ("HourOfAmPm", _U.HOURS, _U.HALF_DAYS, ValueRange.of(0, 11))
    CLOCK_HOUR_OF_AMPM = ("ClockHourOfAmPm", _U.HOURS, _U.HALF_DAYS, ValueRange.of(1, 12))
    HOUR_OF_DAY = ("HourOfDay", _U.HOURS, _U.DAYS, ValueRange.of(0, 23))
    CLOCK_HOUR_OF_DAY = ("ClockHourOfDay", _U.HOURS, _U.DAYS, ValueRange.of(1, 24))
    AMPM_OF_DAY = ("AmPmOfDay", _U.HALF_DAYS, _U.DAYS, ValueRange.of(0, 1))
    DAY_OF_WEEK = ("DayOfWeek", _U.DAYS, _U.WEEKS, ValueRange.of(1, 7))
    ALIGNED_DAY_OF_WEEK_IN_MONTH = ("AlignedDayOfWeekInMonth", _U.DAYS, _U.WEEKS, ValueRange.of(1, 7))
    ALIGNED_DAY_OF_WEEK_IN_YEAR = ("AlignedDayOfWeekInYear", _U.DAYS, _U.WEEKS, ValueRange.of(1, 7))
    DAY_OF_MONTH = ("DayOfMonth", _U.DAYS, _U.MONTHS, ValueRange.of(1, 28, 31))
    DAY_OF_YEAR = ("DayOfYear", _U.DAYS, _U.YEARS, ValueRange.of(1, 365, 366))
    EPOCH_DAY = ("EpochDay", _U.DAYS, _U.FOREVER, ValueRange.of(-365243219162, 365241780471))
    ALIGNED_WEEK_OF_MONTH = ("AlignedWeekOfMonth", _U.WEEKS, _U.MONTHS, ValueRange.of(1, 4, 5))
    ALIGNED_WEEK_OF_YEAR = ("AlignedWeekOfYear", _U.WEEKS, _U.YEARS, ValueRange.of(1, 53))
    MONTH_OF_YEAR = ("MonthOfYear", _U.MONTHS, _U.YEARS, ValueRange.of(1, 12))
    PROLEPTIC_MONTH = ("ProlepticMonth", _U.MONTHS, _U.FOREVER,
                       ValueRange.of(-999_999_999 * 12, 999_999_999 * 12 + 11))
    YEAR_OF_ERA = ("YearOfEra", _U.YEARS, _U.ERAS, ValueRange.of(1, 999_999_999, 1_000_000_000))
    YEAR = ("Year", _U.YEARS, _U.FOREVER, ValueRange.of(-999_999_999, 999_999_999))
    ERA = ("Era", _U.ERAS, _U.FOREVER, ValueRange.of(0, 1))
    INSTANT_SECONDS = ("InstantSeconds", _U.SECONDS, _U.FOREVER, ValueRange.of(MIN_LONG, MAX_LONG))
    OFFSET_SECONDS = ("OffsetSeconds", _U.SECONDS, _U.FOREVER, ValueRange.of(-18 * 3600, 18 * 3600))

    def __init__(self, display: str, base_unit: TemporalUnit, range_unit: TemporalUnit, value_range: ValueRange):
        self.display = display
        self.base_unit = base_unit
        self.range_unit = range_unit
        self._range = value_range

    def range(self) -> ValueRange:
        return self._range

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        return self._range

    def is_date_based(self) -> bool:
        return self in _DATE_FIELDS

    def is_time_based(self) -> bool:
        return self in _TIME_FIELDS

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(self)

    def get_from(self, temporal: TemporalAccessor) -> int:
        return temporal.get_long(self)

    def check_valid_value(self, value: int) -> int:
        return self._range.check_valid_value(value, self)

    def __str__(self) -> str:
        return self.display


_TIME_FIELDS = frozenset(f for f in ChronoField if f.base_unit.seconds < 86400.0
                         and f not in (ChronoField.INSTANT_SECONDS, ChronoField.OFFSET_SECONDS))
_DATE_FIELDS = frozenset(f for f in ChronoField if f.base_unit.seconds >= 86400.0)


class JulianField(Enum):
    """Day counts derived from EPOCH_DAY; supported by anything that supports EPOCH_DAY."""
    JULIAN_DAY = ("JulianDay", 2440588, ValueRange.of(-365243219162 + 2440588, 365241780471 + 2440588))
    MODIFIED_JULIAN_DAY = ("ModifiedJulianDay", 40587, ValueRange.of(-365243219162 + 40587, 365241780471 + 40587))
    RATA_DIE = ("RataDie", 719163, ValueRange.of(-365243219162 + 719163, 365241780471 + 719163))

    def __init__(self, display: str, offset: int, value_range: ValueRange):
        self.display = display
        self.offset = offset
        self._range = value_range

    @property
    def base_unit(self) -> TemporalUnit:
        return TemporalUnit.DAYS

    @property
    def range_unit(self) -> TemporalUnit:
        return TemporalUnit.FOREVER

    def range(self) -> ValueRange:
        return self._range

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        return self._range

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(ChronoField.EPOCH_DAY)

    def get_from(self, temporal: TemporalAccessor) -> int:
        return temporal.get_long(ChronoField.EPOCH_DAY) + self.offset

    def __str__(self) -> str:
        return self.display
