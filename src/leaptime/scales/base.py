"""
leaptime.scales.base
--------------------
TimeScale: the contract shared by every scale, and the component split.

A scale is fully described by its offset from TAI at each instant; the split of
an AbsoluteDate into calendar/clock components (with room for 23:59:60) is the
same for all scales and lives here.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..core.components import DateComponents, DateTimeComponents, TimeComponents
from ..core.date import AbsoluteDate
from ..core.errors import UnsupportedOperationError
from ..core.time import two_sum
from ..fields.chrono import TemporalAccessor

if TYPE_CHECKING:
    from ..fields.format import DateTimeFormatter


class TimeScale(ABC):

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def offset_from_tai(self, date: AbsoluteDate) -> float:
        """Seconds to add to TAI to read this scale at `date`."""

    def offset_to_tai(self, date: DateComponents, time: TimeComponents) -> float:
        """
        Seconds to add to a reading of this scale to get TAI.

        Generic fixed-point inversion of offset_from_tai; scales with a closed
        form override it.
        """
        from .continuous import TAI

        reference = AbsoluteDate.from_components(date, time, TAI)
        offset = 0.0
        for _ in range(8):
            offset = -self.offset_from_tai(reference.shifted_by(offset))
        return offset

    def inside_leap(self, date: AbsoluteDate) -> bool:
        return False

    def minute_duration(self, date: AbsoluteDate) -> int:
        return 60

    def get_leap(self, date: AbsoluteDate) -> float:
        return 0.0

    def get_components(self, date: AbsoluteDate) -> DateTimeComponents:
        """Split `date` into (date, time) as read in this scale."""
        epoch, offset = date.epoch, date.offset
        if math.isinf(offset):
            if offset < 0:
                return DateTimeComponents(DateComponents.MIN_EPOCH, TimeComponents.H00)
            return DateTimeComponents(DateComponents.MAX_EPOCH, TimeComponents(23, 59, 59.999))

        # offset + tai_offset computed exactly as s + residual
        tai_offset = self.offset_from_tai(date)
        s, residual = two_sum(offset, tai_offset)

        carry = math.floor(s)
        offset_b = (s - carry) + residual
        # seconds from 2000-01-01T00:00:00 in this scale
        offset_a = epoch + carry + 43200
        if offset_b < 0:
            offset_a -= 1
            offset_b += 1
        time = offset_a % 86400
        day = (offset_a - time) // 86400

        leap = self.get_leap(date) if self.inside_leap(date) else 0.0
        time_components = TimeComponents.from_seconds(time, offset_b, leap, self.minute_duration(date))
        return DateTimeComponents(DateComponents.from_j2000_day(day), time_components)

    def date_to_temporal(self, date: AbsoluteDate) -> TemporalAccessor:
        raise UnsupportedOperationError(f"{self.name} has no temporal view")

    def temporal_to_date(self, temporal: TemporalAccessor) -> AbsoluteDate:
        raise UnsupportedOperationError(f"{self.name} has no temporal view")

    def default_formatter(self) -> "DateTimeFormatter":
        raise UnsupportedOperationError(f"{self.name} has no default formatter")

    def __str__(self) -> str:
        return self.name
