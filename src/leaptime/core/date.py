"""
leaptime.core.date
------------------
AbsoluteDate: an instant on the continuous (TAI) timeline.

The instant is stored in two parts, an integer number of seconds since J2000.0
(2000-01-01T12:00:00 TAI) and a float residual, so that adding irregular scale
offsets (tens of seconds) to sub-nanosecond residuals stays exact.
"""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from .components import DateComponents, DateTimeComponents, TimeComponents
from .errors import OutOfRangeError
from .time import JULIAN_DAY, two_sum

if TYPE_CHECKING:
    from ..scales.base import TimeScale

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class AbsoluteDate:
    epoch: int
    offset: float

    J2000_EPOCH: ClassVar["AbsoluteDate"]
    ARBITRARY_EPOCH: ClassVar["AbsoluteDate"]
    PAST_INFINITY: ClassVar["AbsoluteDate"]
    FUTURE_INFINITY: ClassVar["AbsoluteDate"]

    def __post_init__(self):
        # keep offset in [0, 1) so equal instants have equal fields
        if math.isfinite(self.offset) and not 0.0 <= self.offset < 1.0:
            dl = math.floor(self.offset)
            offset = self.offset - dl
            if offset >= 1.0:
                # a tiny negative offset rounds up to a whole second
                dl, offset = dl + 1, 0.0
            object.__setattr__(self, "epoch", self.epoch + dl)
            object.__setattr__(self, "offset", offset)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------
    @classmethod
    def from_components(cls, date: DateComponents, time: TimeComponents,
                        scale: "TimeScale") -> "AbsoluteDate":
        """Instant whose reading in `scale` is (date, time)."""
        seconds = time.second
        ts_offset = scale.offset_to_tai(date, time)
        s, residual = two_sum(seconds, ts_offset)
        dl = math.floor(s)
        offset = (s - dl) + residual
        epoch = 60 * ((date.j2000_day * 24 + time.hour) * 60
                      + time.minute - time.minutes_from_utc - 720) + dl
        return cls(epoch, offset)

    @classmethod
    def from_date_time(cls, components: DateTimeComponents, scale: "TimeScale") -> "AbsoluteDate":
        return cls.from_components(components.date, components.time, scale)

    @classmethod
    def of(cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0,
           second: float = 0.0, scale: "TimeScale" = None) -> "AbsoluteDate":
        if scale is None:
            raise TypeError("a time scale is required")
        return cls.from_components(DateComponents(year, month, day),
                                   TimeComponents(hour, minute, second), scale)

    @classmethod
    def from_string(cls, text: str, scale: "TimeScale") -> "AbsoluteDate":
        """ISO-8601 text (seconds may read 60, optional Z or ±HH:MM suffix)."""
        return cls.from_date_time(DateTimeComponents.parse(text), scale)

    @classmethod
    def create_mjd_date(cls, mjd: int, seconds_in_day: float, scale: "TimeScale") -> "AbsoluteDate":
        """
        Instant from a Modified Julian Day and seconds in that day.

        seconds_in_day may reach or exceed 86400 only on a day whose last minute
        is long enough in `scale` (a leap second day in UTC).
        """
        dc = DateComponents.from_mjd(mjd)
        if seconds_in_day >= JULIAN_DAY:
            # 23:59:59 is always valid, check the last minute can hold the rest
            seconds_a = 86399
            seconds_b = seconds_in_day - seconds_a
            safe_date = cls.from_components(dc, TimeComponents.from_seconds(seconds_a, 0.0), scale)
            if scale.minute_duration(safe_date) > 59 + seconds_b:
                return safe_date.shifted_by(seconds_b)
            raise OutOfRangeError(
                f"out of range seconds number: {seconds_in_day} on MJD {mjd} in {scale.name}")
        return cls.from_components(dc, TimeComponents.from_seconds_in_day(seconds_in_day), scale)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------
    def shifted_by(self, dt: float) -> "AbsoluteDate":
        s = self.offset + dt
        if math.isinf(s):
            return AbsoluteDate(_LONG_MIN if s < 0 else _LONG_MAX, s)
        s, residual = two_sum(self.offset, dt)
        dl = math.floor(s)
        return AbsoluteDate(self.epoch + dl, (s - dl) + residual)

    def duration_from(self, other: "AbsoluteDate") -> float:
        """Elapsed SI seconds from `other` to this instant."""
        return float(self.epoch - other.epoch) + (self.offset - other.offset)

    def offset_from(self, other: "AbsoluteDate", scale: "TimeScale") -> float:
        """Elapsed seconds as counted by the clock of `scale` (leaps removed)."""
        elapsed = self.duration_from(other)
        return elapsed + scale.offset_from_tai(self) - scale.offset_from_tai(other)

    # ---------------------------------------------------------
    # Scale views
    # ---------------------------------------------------------
    def get_components(self, scale: "TimeScale") -> DateTimeComponents:
        return scale.get_components(self)

    def to_string(self, scale: "TimeScale", fraction_digits: int = 3) -> str:
        comps = scale.get_components(self)
        return comps.to_string(scale.minute_duration(self), fraction_digits)

    # ---------------------------------------------------------
    # Ordering
    # ---------------------------------------------------------
    def compare_to(self, other: "AbsoluteDate") -> int:
        duration = self.duration_from(other)
        if math.isnan(duration):
            # infinities on both sides
            a, b = self.offset, other.offset
        else:
            a, b = duration, 0.0
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbsoluteDate):
            return NotImplemented
        return self.epoch == other.epoch and (
            self.offset == other.offset
            or (math.isnan(self.offset) and math.isnan(other.offset)))

    def __lt__(self, other: "AbsoluteDate") -> bool:
        if not isinstance(other, AbsoluteDate):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash((self.epoch, self.offset))

    def __repr__(self) -> str:
        return f"AbsoluteDate(epoch={self.epoch}, offset={self.offset!r})"


AbsoluteDate.J2000_EPOCH = AbsoluteDate(0, 0.0)
AbsoluteDate.ARBITRARY_EPOCH = AbsoluteDate.J2000_EPOCH
AbsoluteDate.PAST_INFINITY = AbsoluteDate(_LONG_MIN, -math.inf)
AbsoluteDate.FUTURE_INFINITY = AbsoluteDate(_LONG_MAX, math.inf)
