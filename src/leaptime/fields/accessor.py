"""
leaptime.fields.accessor
------------------------
UTCTemporalAccessor: an instant decomposed in UTC, answering field queries.

Calendar and hour/minute fields are delegated to a LocalDateTime whose second
is forced to 0 (a 60th second cannot be represented there); the real second
and nanosecond are kept aside and only exposed through the UTC fields.

The five ChronoFields whose meaning breaks during a leap second
(second-of-minute, second-of-day, milli/micro/nano-of-day) are rejected: use
the corresponding UTC field.

Queries come in two forms: query(field) returns a FieldResult value that can
be matched on, get_long(field) unwraps it and raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from ..core.date import AbsoluteDate
from ..core.errors import ScaleMismatchError, UnsupportedFieldError
from .chrono import ChronoField, TemporalField
from .temporal import LocalDateTime
from .utc_fields import AbstractUTCField, UTCFieldKind

if TYPE_CHECKING:
    from ..scales.utc import UTCScale


SHADOWED_FIELDS = frozenset({
    ChronoField.NANO_OF_DAY,
    ChronoField.MICRO_OF_DAY,
    ChronoField.MILLI_OF_DAY,
    ChronoField.SECOND_OF_MINUTE,
    ChronoField.SECOND_OF_DAY,
})


@dataclass(frozen=True)
class FieldValue:
    value: int


@dataclass(frozen=True)
class UnsupportedField:
    field: object
    reason: str


@dataclass(frozen=True)
class ScaleMismatch:
    field: object


FieldResult = Union[FieldValue, UnsupportedField, ScaleMismatch]


class UTCTemporalAccessor:

    def __init__(self, date: AbsoluteDate, utc_scale: "UTCScale"):
        if utc_scale is None:
            raise TypeError("utc_scale must not be None")
        self._utc_scale = utc_scale
        components = utc_scale.get_components(date)
        d, t = components.date, components.time
        self._hour = t.hour
        self._minute = t.minute
        second = t.second
        self._second_of_minute = int(second)
        self._nano_of_second = int(1_000_000_000.0 * (second - self._second_of_minute))  # truncate, not round
        self._local = LocalDateTime(d, t.hour, t.minute, 0, self._nano_of_second)

    @property
    def utc_scale(self) -> "UTCScale":
        return self._utc_scale

    @property
    def second_of_minute(self) -> int:
        return self._second_of_minute

    @property
    def nano_of_second(self) -> int:
        return self._nano_of_second

    @property
    def local_date_time(self) -> LocalDateTime:
        """Calendar view, with second-of-minute set to 0."""
        return self._local

    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            if field in SHADOWED_FIELDS:
                return False
            if field is ChronoField.OFFSET_SECONDS:
                return True
            return self._local.is_supported(field)
        if isinstance(field, AbstractUTCField):
            return isinstance(field.kind, UTCFieldKind)
        return field.is_supported_by(self)

    def query(self, field: TemporalField) -> FieldResult:
        if isinstance(field, ChronoField):
            if field in SHADOWED_FIELDS:
                return UnsupportedField(field, f"Unsupported field: {field}, use corresponding UTC field instead")
            if field is ChronoField.OFFSET_SECONDS:
                return FieldValue(0)
            if not self._local.is_supported(field):
                return UnsupportedField(field, f"Unsupported field: {field}")
            return FieldValue(self._local.get_long(field))
        if isinstance(field, AbstractUTCField):
            if field.utc_scale is not self._utc_scale:
                return ScaleMismatch(field)
            return self._utc_value(field)
        return FieldValue(field.get_from(self))

    def get_long(self, field: TemporalField) -> int:
        result = self.query(field)
        if isinstance(result, FieldValue):
            return result.value
        if isinstance(result, ScaleMismatch):
            raise ScaleMismatchError("UTC scale of UTC field must match UTC scale of UTCTemporalAccessor")
        raise UnsupportedFieldError(result.reason)

    def _utc_value(self, field: AbstractUTCField) -> FieldResult:
        kind = field.kind
        h, m, s, nano = self._hour, self._minute, self._second_of_minute, self._nano_of_second
        if kind is UTCFieldKind.SECOND_OF_MINUTE:
            return FieldValue(s)
        if kind is UTCFieldKind.SECOND_OF_DAY:
            return FieldValue(3600 * h + 60 * m + s)
        if kind is UTCFieldKind.NANO_OF_DAY:
            return FieldValue(3_600_000_000_000 * h + 60_000_000_000 * m + 1_000_000_000 * s + nano)
        if kind is UTCFieldKind.MICRO_OF_DAY:
            return FieldValue(3_600_000_000 * h + 60_000_000 * m + 1_000_000 * s + nano // 1000)
        if kind is UTCFieldKind.MILLI_OF_DAY:
            return FieldValue(3_600_000 * h + 60_000 * m + 1000 * s + nano // 1_000_000)
        return UnsupportedField(field, f"Unsupported field: {field}")

    def __repr__(self) -> str:
        return (f"UTCTemporalAccessor({self._local.date}T{self._hour:02d}:{self._minute:02d}:"
                f"{self._second_of_minute:02d}.{self._nano_of_second:09d})")
