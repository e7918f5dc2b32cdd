"""
leaptime.scales.continuous
--------------------------
Leap-second-free scales: every day lasts exactly 86400 SI seconds and the
offset from TAI is constant.

    TAI     0
    TT      +32.184 s
    GPS     -19 s     (also Galileo GST, QZSS, IRNSS)
    BDT     -33 s
"""

from __future__ import annotations

import math

from ..core.components import DateComponents, TimeComponents
from ..core.date import AbsoluteDate
from ..core.time import two_sum
from ..fields.chrono import JulianField, TemporalAccessor
from ..fields.temporal import LocalDateTime
from .base import TimeScale


class ContinuousTimeScale(TimeScale):
    """Base of the scales without leap seconds."""

    def __init__(self, abbreviation: str):
        if not abbreviation:
            raise ValueError("time scale abbreviation must not be empty")
        self._abbreviation = abbreviation
        self._formatter = None

    @property
    def name(self) -> str:
        return self._abbreviation

    def date_to_temporal(self, date: AbsoluteDate) -> TemporalAccessor:
        """Local date-time view, truncated to the nanosecond."""
        epoch, offset_1 = date.epoch, date.offset
        if math.isinf(offset_1):
            return LocalDateTime.MIN if offset_1 < 0 else LocalDateTime.MAX
        s, residual = two_sum(offset_1, self.offset_from_tai(date))
        seconds = math.floor(s + 0.5)
        fractional = (s - seconds) + residual
        nanos = math.floor(1_000_000_000.0 * fractional)  # truncate, not round
        return LocalDateTime.from_j2000_seconds(epoch + seconds, nanos)

    def temporal_to_date(self, temporal: TemporalAccessor) -> AbsoluteDate:
        local = LocalDateTime.from_temporal(temporal)
        mjd = local.get_long(JulianField.MODIFIED_JULIAN_DAY)
        seconds_in_day = local.nano_of_day / 1_000_000_000.0
        return AbsoluteDate.create_mjd_date(mjd, seconds_in_day, self)

    def default_formatter(self):
        if self._formatter is None:
            from ..fields.format import iso_local_date_time
            self._formatter = iso_local_date_time()
        return self._formatter

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._abbreviation!r})"


class FixedOffsetScale(ContinuousTimeScale):
    """A continuous scale at a constant offset from TAI."""

    def __init__(self, abbreviation: str, offset: float):
        super().__init__(abbreviation)
        self._offset = float(offset)

    @property
    def offset(self) -> float:
        return self._offset

    def offset_from_tai(self, date: AbsoluteDate) -> float:
        return self._offset

    def offset_to_tai(self, date: DateComponents, time: TimeComponents) -> float:
        return -self._offset


TAI = FixedOffsetScale("TAI", 0.0)


def tt_scale() -> FixedOffsetScale:
    return FixedOffsetScale("TT", 32.184)


def gps_scale() -> FixedOffsetScale:
    return FixedOffsetScale("GPS", -19.0)


def galileo_scale() -> FixedOffsetScale:
    return FixedOffsetScale("GST", -19.0)


def qzss_scale() -> FixedOffsetScale:
    return FixedOffsetScale("QZSS", -19.0)


def irnss_scale() -> FixedOffsetScale:
    return FixedOffsetScale("IRNSS", -19.0)


def beidou_scale() -> FixedOffsetScale:
    return FixedOffsetScale("BDT", -33.0)
