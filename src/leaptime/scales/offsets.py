"""
leaptime.scales.offsets
-----------------------
The TAI-UTC offset law, one segment at a time.

OffsetModel is one row of the published UTC-TAI history:

    TAI - UTC = offset + (MJD - mjd_ref) * slope      (slope in s/day)

UTCTAIOffset is the resolved form used by UTCScale: the same law anchored on
the continuous timeline, plus the leap that opens the segment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..core.components import DateComponents, TimeComponents
from ..core.date import AbsoluteDate
from ..core.time import JULIAN_DAY

# MJD of 1972-01-01, reference of all whole-second offsets
MJD_1972 = 41317


@dataclass(frozen=True)
class OffsetModel:
    start: DateComponents
    mjd_ref: int = MJD_1972
    offset: float = 0.0
    slope: float = 0.0

    @classmethod
    def constant(cls, start: DateComponents, offset: float) -> "OffsetModel":
        """Whole-second offset valid from `start` (post-1972 style, no drift)."""
        return cls(start, MJD_1972, float(offset), 0.0)


# Excerpt of the UTC-TAI.history file, 1961-01-01 .. 1972-01-01:
#   1961 Jan. 1 - 1961 Aug. 1   1.422 818 0s + (MJD - 37 300) x 0.001 296s
#   ...
#   1968 Feb. 1 - 1972 Jan. 1   4.213 170 0s + (MJD - 39 126) x 0.002 592s
PRE_1972_OFFSETS: Tuple[OffsetModel, ...] = (
    OffsetModel(DateComponents(1961, 1, 1), 37300, 1.4228180, 0.0012960),
    OffsetModel(DateComponents(1961, 8, 1), 37300, 1.3728180, 0.0012960),
    OffsetModel(DateComponents(1962, 1, 1), 37665, 1.8458580, 0.0011232),
    OffsetModel(DateComponents(1963, 11, 1), 37665, 1.9458580, 0.0011232),
    OffsetModel(DateComponents(1964, 1, 1), 38761, 3.2401300, 0.0012960),
    OffsetModel(DateComponents(1964, 4, 1), 38761, 3.3401300, 0.0012960),
    OffsetModel(DateComponents(1964, 9, 1), 38761, 3.4401300, 0.0012960),
    OffsetModel(DateComponents(1965, 1, 1), 38761, 3.5401300, 0.0012960),
    OffsetModel(DateComponents(1965, 3, 1), 38761, 3.6401300, 0.0012960),
    OffsetModel(DateComponents(1965, 7, 1), 38761, 3.7401300, 0.0012960),
    OffsetModel(DateComponents(1965, 9, 1), 38761, 3.8401300, 0.0012960),
    OffsetModel(DateComponents(1966, 1, 1), 39126, 4.3131700, 0.0025920),
    OffsetModel(DateComponents(1968, 2, 1), 39126, 4.2131700, 0.0025920),
)


@dataclass(frozen=True)
class UTCTAIOffset:
    """
    One linked segment of the UTC-TAI table.

    date           instant (TAI timeline) at which the leap opening this segment starts
    mjd            day of the leap
    leap           leap magnitude, in UTC seconds
    offset         constant term of the law
    mjd_ref        reference day of the law
    slope_utc      drift in seconds per UTC second
    reference      mjd_ref at 0h UTC, on the TAI timeline
    """
    date: AbsoluteDate
    mjd: int
    leap: float
    offset: float
    mjd_ref: int
    slope_utc: float
    reference: AbsoluteDate
    slope_tai: float = field(init=False)
    validity_start: AbsoluteDate = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "slope_tai", self.slope_utc / (1 + self.slope_utc))
        object.__setattr__(self, "validity_start", self.date.shifted_by(self.leap))

    def offset_at(self, date: AbsoluteDate) -> float:
        """TAI - UTC at an instant."""
        if self.slope_tai == 0:
            # avoids inf * 0 at the infinity sentinels
            return self.offset
        return self.offset + date.duration_from(self.reference) * self.slope_tai

    def offset_at_components(self, date: DateComponents, time: TimeComponents) -> float:
        """TAI - UTC at a UTC calendar reading."""
        days = date.mjd - self.mjd_ref
        fraction = time.seconds_in_utc_day
        return self.offset + days * (self.slope_utc * JULIAN_DAY) + fraction * self.slope_utc

    def offset_at_mjd(self, mjd: int, seconds: float) -> float:
        return self.offset + (mjd - self.mjd_ref) * (self.slope_utc * JULIAN_DAY) + seconds * self.slope_utc
