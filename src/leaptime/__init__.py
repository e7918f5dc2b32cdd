"""leaptime public API.

Time scales (TAI, TT, GPS, UTC with leap seconds, GLONASS, ...), two-part
absolute dates, and a field-query protocol that understands 23:59:60.
"""

from .api import (
    set_time_scales,
    get_time_scales,
    get_utc,
    get_tai,
    get_tt,
    get_gps,
    get_glonass,
    get_scale,
    list_scales,
    parse_date,
    convert,
    tai_minus_utc,
)
from .core.components import DateComponents, DateTimeComponents, TimeComponents
from .core.date import AbsoluteDate
from .core.errors import (
    ConfigurationError,
    LeaptimeError,
    OutOfRangeError,
    ParseError,
    ScaleMismatchError,
    UnsupportedFieldError,
    UnsupportedOperationError,
)
from .fields.accessor import FieldValue, ScaleMismatch, UnsupportedField, UTCTemporalAccessor
from .fields.chrono import ChronoField, JulianField, ValueRange
from .fields.utc_fields import (
    UTCMicroOfDay,
    UTCMilliOfDay,
    UTCNanoOfDay,
    UTCSecondOfDay,
    UTCSecondOfMinute,
)
from .scales.base import TimeScale
from .scales.factory import TimeScales
from .scales.offsets import OffsetModel, UTCTAIOffset
from .scales.utc import UTCScale

__all__ = [
    "set_time_scales",
    "get_time_scales",
    "get_utc",
    "get_tai",
    "get_tt",
    "get_gps",
    "get_glonass",
    "get_scale",
    "list_scales",
    "parse_date",
    "convert",
    "tai_minus_utc",
    "AbsoluteDate",
    "DateComponents",
    "TimeComponents",
    "DateTimeComponents",
    "ChronoField",
    "JulianField",
    "ValueRange",
    "UTCSecondOfMinute",
    "UTCSecondOfDay",
    "UTCMilliOfDay",
    "UTCMicroOfDay",
    "UTCNanoOfDay",
    "UTCTemporalAccessor",
    "FieldValue",
    "UnsupportedField",
    "ScaleMismatch",
    "TimeScale",
    "TimeScales",
    "UTCScale",
    "OffsetModel",
    "UTCTAIOffset",
    "LeaptimeError",
    "ConfigurationError",
    "OutOfRangeError",
    "ParseError",
    "ScaleMismatchError",
    "UnsupportedFieldError",
    "UnsupportedOperationError",
]
