"""
leaptime.fields.utc_fields
--------------------------
Leap-second-aware clock fields, each bound to one UTCScale.

The standard ChronoField clock fields assume 86400 s days and 60 s minutes.
These replacements read the clock of a UTC-decomposed instant, where the last
minute of a leap day holds 61 seconds (and, before 1972, a day may end with a
fractional step). Their precise range depends on the day and comes from the
scale's table through range_refined_by.

The five built-in kinds are a closed set (UTCFieldKind); the accessor matches
on the kind. Third-party fields implement the TemporalField protocol instead.
"""

from __future__ import annotations

import math
from abc import ABC
from enum import Enum
from typing import TYPE_CHECKING

from ..core.errors import UnsupportedFieldError, UnsupportedOperationError
from .chrono import MAX_LONG, JulianField, TemporalAccessor, TemporalUnit, ValueRange
from .temporal import date_of

if TYPE_CHECKING:
    from ..scales.utc import UTCScale


class UTCFieldKind(Enum):
    """(display, base unit, range unit, maximum on an ordinary day, units per second)"""
    SECOND_OF_MINUTE = ("UTCSecondOfMinute", TemporalUnit.SECONDS, TemporalUnit.MINUTES, 59, 1)
    SECOND_OF_DAY = ("UTCSecondOfDay", TemporalUnit.SECONDS, TemporalUnit.DAYS, 86399, 1)
    MILLI_OF_DAY = ("UTCMilliOfDay", TemporalUnit.MILLIS, TemporalUnit.DAYS, 86_399_999, 1_000)
    MICRO_OF_DAY = ("UTCMicroOfDay", TemporalUnit.MICROS, TemporalUnit.DAYS, 86_399_999_999, 1_000_000)
    NANO_OF_DAY = ("UTCNanoOfDay", TemporalUnit.NANOS, TemporalUnit.DAYS, 86_399_999_999_999, 1_000_000_000)

    def __init__(self, display, base_unit, range_unit, base_maximum, per_second):
        self.display = display
        self.base_unit = base_unit
        self.range_unit = range_unit
        self.base_maximum = base_maximum
        self.per_second = per_second


_RANGE = ValueRange.of(0, 0, MAX_LONG)


class AbstractUTCField(ABC):
    """A read-only clock field evaluated against the decomposition made by one UTCScale."""

    kind: UTCFieldKind

    def __init__(self, utc_scale: "UTCScale"):
        if utc_scale is None:
            raise TypeError("utc_scale must not be None")
        self._utc_scale = utc_scale

    @property
    def utc_scale(self) -> "UTCScale":
        return self._utc_scale

    @property
    def base_unit(self) -> TemporalUnit:
        return self.kind.base_unit

    @property
    def range_unit(self) -> TemporalUnit:
        return self.kind.range_unit

    def range(self) -> ValueRange:
        """Coarse bound; use range_refined_by for a given day."""
        return _RANGE

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        adjustment = self.get_adjustment(temporal)
        maximum = self.kind.base_maximum + math.ceil(self.kind.per_second * adjustment)
        return ValueRange.of(0, maximum)

    def get_adjustment(self, temporal: TemporalAccessor) -> float:
        """TAI - UTC step made at the end of the day `temporal` falls on."""
        mjd = JulianField.MODIFIED_JULIAN_DAY.get_from(date_of(temporal))
        return self._utc_scale.tai_minus_utc_adjustment(mjd + 1)

    def is_date_based(self) -> bool:
        return False

    def is_time_based(self) -> bool:
        return True

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        from .accessor import UTCTemporalAccessor
        return isinstance(temporal, UTCTemporalAccessor)

    def get_from(self, temporal: TemporalAccessor) -> int:
        from .accessor import UTCTemporalAccessor
        if isinstance(temporal, UTCTemporalAccessor):
            return temporal.get_long(self)
        raise UnsupportedFieldError(f"Unsupported type: {temporal!r}")

    def adjust_into(self, temporal, new_value: int):
        raise UnsupportedOperationError(f"{self} is read-only")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbstractUTCField):
            return NotImplemented
        return type(self) is type(other) and self._utc_scale is other._utc_scale

    def __hash__(self) -> int:
        return hash((type(self), id(self._utc_scale)))

    def __str__(self) -> str:
        return self.kind.display

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._utc_scale!r})"


class UTCSecondOfMinute(AbstractUTCField):
    kind = UTCFieldKind.SECOND_OF_MINUTE


class UTCSecondOfDay(AbstractUTCField):
    kind = UTCFieldKind.SECOND_OF_DAY


class UTCMilliOfDay(AbstractUTCField):
    kind = UTCFieldKind.MILLI_OF_DAY


class UTCMicroOfDay(AbstractUTCField):
    kind = UTCFieldKind.MICRO_OF_DAY


class UTCNanoOfDay(AbstractUTCField):
    kind = UTCFieldKind.NANO_OF_DAY


def utc_fields(utc_scale: "UTCScale"):
    """One instance of each built-in UTC field, bound to `utc_scale`."""
    return (UTCSecondOfMinute(utc_scale), UTCSecondOfDay(utc_scale), UTCMilliOfDay(utc_scale),
            UTCMicroOfDay(utc_scale), UTCNanoOfDay(utc_scale))
