from __future__ import annotations

import threading
from typing import List, Optional

from .core.date import AbsoluteDate
from .core.components import DateTimeComponents
from .scales.base import TimeScale
from .scales.continuous import FixedOffsetScale
from .scales.factory import TimeScales
from .scales.glonass import GLONASSScale
from .scales.utc import UTCScale

_time_scales: Optional[TimeScales] = None
_lock = threading.Lock()


def set_time_scales(scales: Optional[TimeScales]) -> None:
    """Replace the process-wide scales (None resets to the default on next use)."""
    global _time_scales
    with _lock:
        _time_scales = scales


def get_time_scales() -> TimeScales:
    global _time_scales
    scales = _time_scales
    if scales is None:
        with _lock:
            if _time_scales is None:
                _time_scales = TimeScales.default()
            scales = _time_scales
    return scales


def get_utc() -> UTCScale:
    return get_time_scales().get_utc()

def get_tai() -> FixedOffsetScale:
    return get_time_scales().get_tai()

def get_tt() -> FixedOffsetScale:
    return get_time_scales().get_tt()

def get_gps() -> FixedOffsetScale:
    return get_time_scales().get_gps()

def get_glonass() -> GLONASSScale:
    return get_time_scales().get_glonass()

def get_scale(name: str) -> TimeScale:
    return get_time_scales().get(name)

def list_scales() -> List[str]:
    return get_time_scales().names()

# ============================================================
# Conveniences
# ============================================================

def parse_date(text: str, scale: str = "UTC") -> AbsoluteDate:
    """ISO-8601 text read in the named scale."""
    return AbsoluteDate.from_string(text, get_scale(scale))

def convert(text: str, source: str = "UTC", target: str = "TAI") -> DateTimeComponents:
    """Reading of `text` (in `source`) on the clock of `target`."""
    date = parse_date(text, source)
    return get_scale(target).get_components(date)

def tai_minus_utc(text: str) -> float:
    """TAI - UTC in seconds at a UTC date/time."""
    utc = get_utc()
    return -utc.offset_from_tai(AbsoluteDate.from_string(text, utc))
