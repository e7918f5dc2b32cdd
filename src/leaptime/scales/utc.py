"""
leaptime.scales.utc
-------------------
UTCScale: TAI minus a piecewise law, linear drift before 1972 and whole-second
leaps after.

The table of UTCTAIOffset segments is built once in the constructor and never
mutated, so one instance can be shared freely between threads. Scale identity
is referential: two UTCScale objects built from the same data are still
different scales for the UTC fields bound to them.
"""

from __future__ import annotations

import bisect
import logging
import math
from typing import Iterable, List, Optional

from ..core.components import DateComponents, TimeComponents
from ..core.date import AbsoluteDate
from ..core.errors import ConfigurationError
from ..core.time import JULIAN_DAY
from ..fields.chrono import ChronoField, TemporalAccessor
from .base import TimeScale
from .offsets import PRE_1972_OFFSETS, OffsetModel, UTCTAIOffset

log = logging.getLogger(__name__)


class UTCScale(TimeScale):

    def __init__(self, tai: TimeScale, offsets: Iterable[OffsetModel]):
        models: List[OffsetModel] = sorted(offsets, key=lambda m: m.start)
        if not models:
            raise ConfigurationError("no UTC-TAI offsets loaded")

        if models[0].start.year > 1968:
            log.debug("UTC-TAI table starts in %d, adding pre-1972 linear segments",
                      models[0].start.year)
            models = list(PRE_1972_OFFSETS) + models

        table: List[UTCTAIOffset] = []
        previous: Optional[UTCTAIOffset] = None
        for model in models:
            start = model.start
            midnight = AbsoluteDate.from_components(start, TimeComponents.H00, tai)

            # start of the leap, under the previous law
            previous_offset = 0.0 if previous is None else previous.offset_at_components(start, TimeComponents.H00)
            leap_start = midnight.shifted_by(previous_offset)

            # end of the leap, under this segment's law
            start_offset = model.offset + model.slope * (start.mjd - model.mjd_ref)
            leap_end = midnight.shifted_by(start_offset)

            # leap measured in UTC seconds
            normalized_slope = model.slope / JULIAN_DAY
            leap = leap_end.duration_from(leap_start) / (1 + normalized_slope)

            reference = AbsoluteDate.create_mjd_date(model.mjd_ref, 0.0, tai).shifted_by(model.offset)
            previous = UTCTAIOffset(leap_start, start.mjd, leap, model.offset, model.mjd_ref,
                                    normalized_slope, reference)
            table.append(previous)

        self._offsets = tuple(table)
        self._dates = [o.date for o in table]
        self._mjds = [o.mjd for o in table]
        self._formatter = None
        log.debug("UTC scale built with %d offsets, last leap on MJD %d", len(table), table[-1].mjd)

    @property
    def name(self) -> str:
        return "UTC"

    # ---------------------------------------------------------
    # Table
    # ---------------------------------------------------------
    @property
    def utctai_offsets(self) -> List[UTCTAIOffset]:
        """Copy of the linked offset table."""
        return list(self._offsets)

    @property
    def first_known_leap_second(self) -> AbsoluteDate:
        return self._offsets[0].date

    @property
    def last_known_leap_second(self) -> AbsoluteDate:
        return self._offsets[-1].date

    def _find_offset_index(self, date: AbsoluteDate) -> int:
        # -1 before the first known leap
        return bisect.bisect_right(self._dates, date) - 1

    def _find_offset(self, mjd: int) -> Optional[UTCTAIOffset]:
        i = bisect.bisect_right(self._mjds, mjd) - 1
        return None if i < 0 else self._offsets[i]

    # ---------------------------------------------------------
    # Offsets
    # ---------------------------------------------------------
    def offset_from_tai(self, date: AbsoluteDate) -> float:
        i = self._find_offset_index(date)
        if i < 0:
            # UTC == TAI before the table
            return 0.0
        return -self._offsets[i].offset_at(date)

    def offset_to_tai(self, date: DateComponents, time: TimeComponents) -> float:
        # seconds are ignored so that 23:59:60.5 does not jump to the next day
        minute_in_day = time.hour * 60 + time.minute - time.minutes_from_utc
        correction = minute_in_day // 1440

        # TAI-side search: an earlier day than the real UTC day is never wrong
        offset = self._find_offset(date.mjd + correction)
        if offset is None:
            return 0.0
        return offset.offset_at_components(date, time)

    def tai_minus_utc_adjustment(self, mjd: int) -> float:
        """
        Step of TAI - UTC made at the beginning of day `mjd` (0 if none).

        Linear scan from the end: queries are mostly for recent dates.
        """
        for i in range(len(self._offsets) - 1, -1, -1):
            entry = self._offsets[i]
            if mjd == entry.mjd:
                new = entry.offset_at_mjd(mjd, 0.0)
                old = self._offsets[i - 1].offset_at_mjd(mjd, 0.0) if i > 0 else 0.0
                return new - old
            if mjd > entry.mjd:
                break
        return 0.0

    # ---------------------------------------------------------
    # Leaps
    # ---------------------------------------------------------
    def inside_leap(self, date: AbsoluteDate) -> bool:
        i = self._find_offset_index(date)
        if i < 0:
            return False
        return date < self._offsets[i].validity_start

    def minute_duration(self, date: AbsoluteDate) -> int:
        i = self._find_offset_index(date)
        if i >= 0 and date < self._offsets[i].validity_start:
            # during the leap itself
            offset = self._offsets[i]
        elif i + 1 < len(self._offsets) and self._offsets[i + 1].date.duration_from(date) <= 60.0:
            # the next leap starts within a minute and extends the current one
            offset = self._offsets[i + 1]
        else:
            return 60
        # an int can only bound multi-second or fractional leaps
        return 60 + math.ceil(offset.leap)

    def get_leap(self, date: AbsoluteDate) -> float:
        i = self._find_offset_index(date)
        if i < 0:
            return 0.0
        return self._offsets[i].leap

    # ---------------------------------------------------------
    # Temporal views
    # ---------------------------------------------------------
    def date_to_temporal(self, date: AbsoluteDate) -> TemporalAccessor:
        from ..fields.accessor import UTCTemporalAccessor
        return UTCTemporalAccessor(date, self)

    def temporal_to_date(self, temporal: TemporalAccessor) -> AbsoluteDate:
        from ..fields.utc_fields import UTCSecondOfMinute

        F = ChronoField
        second_of_minute = temporal.get_long(UTCSecondOfMinute(self))
        nano_of_second = temporal.get_long(F.NANO_OF_SECOND)
        second = second_of_minute + nano_of_second / 1_000_000_000.0
        date = DateComponents(temporal.get_long(F.YEAR), temporal.get_long(F.MONTH_OF_YEAR),
                              temporal.get_long(F.DAY_OF_MONTH))
        time = TimeComponents(temporal.get_long(F.HOUR_OF_DAY), temporal.get_long(F.MINUTE_OF_HOUR), second)
        return AbsoluteDate.from_components(date, time, self)

    def default_formatter(self):
        if self._formatter is None:
            from ..fields.format import iso_utc_date_time
            self._formatter = iso_utc_date_time(self)
        return self._formatter

    def __repr__(self) -> str:
        return f"UTCScale(<{len(self._offsets)} offsets>)"
