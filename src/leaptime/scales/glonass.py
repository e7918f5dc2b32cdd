"""
leaptime.scales.glonass
-----------------------
GLONASS system time: UTC(SU) + 3 h, leap seconds included.
"""

from __future__ import annotations

from ..core.components import DateComponents, DateTimeComponents, TimeComponents
from ..core.date import AbsoluteDate
from .base import TimeScale
from .utc import UTCScale

OFFSET = 10800.0


class GLONASSScale(TimeScale):

    def __init__(self, utc: UTCScale):
        self._utc = utc

    @property
    def name(self) -> str:
        return "GLONASS"

    @property
    def utc(self) -> UTCScale:
        return self._utc

    def offset_from_tai(self, date: AbsoluteDate) -> float:
        return OFFSET + self._utc.offset_from_tai(date)

    def offset_to_tai(self, date: DateComponents, time: TimeComponents) -> float:
        utc_components = DateTimeComponents.shifted(DateTimeComponents(date, time), -OFFSET)
        return self._utc.offset_to_tai(utc_components.date, utc_components.time) - OFFSET

    def inside_leap(self, date: AbsoluteDate) -> bool:
        return self._utc.inside_leap(date)

    def minute_duration(self, date: AbsoluteDate) -> int:
        return self._utc.minute_duration(date)

    def get_leap(self, date: AbsoluteDate) -> float:
        return self._utc.get_leap(date)
