"""
leaptime.fields.temporal
------------------------
LocalDateTime: a leap-second-free calendar/clock reading with nanosecond
resolution, answering the standard ChronoField queries.

Unlike datetime.datetime it is not limited to years 1..9999, so the past/future
infinity sentinels of the continuous scales have a representation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..core.components import DateComponents, date_field
from ..core.errors import OutOfRangeError, UnsupportedFieldError
from .chrono import ChronoField, TemporalAccessor, TemporalField

NANOS_PER_SECOND = 1_000_000_000
SECONDS_PER_DAY = 86400

# 2000-01-01T12:00:00 as seconds from 2000-01-01T00:00:00
_J2000_NOON = 43200


def date_of(temporal: TemporalAccessor) -> DateComponents:
    """Calendar date held by an accessor (epoch day, or year/month/day)."""
    F = ChronoField
    if isinstance(temporal, DateComponents):
        return temporal
    if temporal.is_supported(F.EPOCH_DAY):
        return DateComponents.from_epoch_day(temporal.get_long(F.EPOCH_DAY))
    return DateComponents(temporal.get_long(F.YEAR), temporal.get_long(F.MONTH_OF_YEAR),
                          temporal.get_long(F.DAY_OF_MONTH))


@dataclass(frozen=True, order=True)
class LocalDateTime:
    date: DateComponents
    hour: int = 0
    minute: int = 0
    second: int = 0
    nano: int = 0

    MIN: ClassVar["LocalDateTime"]
    MAX: ClassVar["LocalDateTime"]

    def __post_init__(self):
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59 and 0 <= self.second <= 59
                and 0 <= self.nano < NANOS_PER_SECOND):
            raise OutOfRangeError(
                f"invalid local time {self.hour}:{self.minute}:{self.second}.{self.nano:09d}")

    @classmethod
    def of(cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0,
           second: int = 0, nano: int = 0) -> "LocalDateTime":
        return cls(DateComponents(year, month, day), hour, minute, second, nano)

    @classmethod
    def from_j2000_seconds(cls, seconds: int, nanos: int = 0) -> "LocalDateTime":
        """Reading `seconds` + `nanos`*1e-9 after 2000-01-01T12:00:00 (nanos may be negative)."""
        extra, nano = divmod(nanos, NANOS_PER_SECOND)
        total = seconds + extra + _J2000_NOON
        day, sod = divmod(total, SECONDS_PER_DAY)
        hour, rem = divmod(sod, 3600)
        minute, second = divmod(rem, 60)
        return cls(DateComponents.from_j2000_day(day), hour, minute, second, nano)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> "LocalDateTime":
        """Read the date and time of day out of any accessor that has them."""
        F = ChronoField
        date = date_of(temporal)
        if temporal.is_supported(F.NANO_OF_DAY):
            sod, nano = divmod(temporal.get_long(F.NANO_OF_DAY), NANOS_PER_SECOND)
            hour, rem = divmod(sod, 3600)
            minute, second = divmod(rem, 60)
            return cls(date, hour, minute, second, nano)
        nano = temporal.get_long(F.NANO_OF_SECOND) if temporal.is_supported(F.NANO_OF_SECOND) else 0
        return cls(date, temporal.get_long(F.HOUR_OF_DAY), temporal.get_long(F.MINUTE_OF_HOUR),
                   temporal.get_long(F.SECOND_OF_MINUTE), nano)

    @property
    def second_of_day(self) -> int:
        return 3600 * self.hour + 60 * self.minute + self.second

    @property
    def nano_of_day(self) -> int:
        return self.second_of_day * NANOS_PER_SECOND + self.nano

    # ---------------------------------------------------------
    # Field protocol
    # ---------------------------------------------------------
    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            return field.is_date_based() or field.is_time_based()
        return field.is_supported_by(self)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            if field.is_date_based():
                return date_field(self.date, field)
            if field.is_time_based():
                return self._time_field(field)
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        return field.get_from(self)

    def _time_field(self, field: ChronoField) -> int:
        F = ChronoField
        h = self.hour
        if field is F.NANO_OF_SECOND:
            return self.nano
        if field is F.NANO_OF_DAY:
            return self.nano_of_day
        if field is F.MICRO_OF_SECOND:
            return self.nano // 1000
        if field is F.MICRO_OF_DAY:
            return self.nano_of_day // 1000
        if field is F.MILLI_OF_SECOND:
            return self.nano // 1_000_000
        if field is F.MILLI_OF_DAY:
            return self.nano_of_day // 1_000_000
        if field is F.SECOND_OF_MINUTE:
            return self.second
        if field is F.SECOND_OF_DAY:
            return self.second_of_day
        if field is F.MINUTE_OF_HOUR:
            return self.minute
        if field is F.MINUTE_OF_DAY:
            return 60 * h + self.minute
        if field is F.HOUR_OF_AMPM:
            return h % 12
        if field is F.CLOCK_HOUR_OF_AMPM:
            return h % 12 or 12
        if field is F.HOUR_OF_DAY:
            return h
        if field is F.CLOCK_HOUR_OF_DAY:
            return h or 24
        if field is F.AMPM_OF_DAY:
            return h // 12
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def __str__(self) -> str:
        text = f"{self.date}T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.nano:
            text += f".{self.nano:09d}".rstrip("0")
        return text


LocalDateTime.MIN = LocalDateTime.of(-999_999_999, 1, 1)
LocalDateTime.MAX = LocalDateTime.of(999_999_999, 12, 31, 23, 59, 59, 999_999_999)
