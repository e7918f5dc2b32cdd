"""
leaptime.scales.factory
-----------------------
TimeScales: the context object that owns one consistent set of scales.

Continuous scales are cheap and built eagerly. UTC (and GLONASS, which sits on
top of it) needs the offset table, so it is built on first use, exactly once,
under a lock; readers never see a half-built table.

Independent TimeScales instances never share their UTC scale, which is what
tests need to exercise scale identity.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Iterable, List, Optional

from .offsets import OffsetModel
from .base import TimeScale
from .continuous import (
    TAI,
    FixedOffsetScale,
    beidou_scale,
    galileo_scale,
    gps_scale,
    irnss_scale,
    qzss_scale,
    tt_scale,
)
from .glonass import GLONASSScale
from .utc import UTCScale

log = logging.getLogger(__name__)

OffsetLoader = Callable[[], Iterable[OffsetModel]]


class TimeScales:

    def __init__(self, loader: OffsetLoader):
        self._loader = loader
        self._lock = threading.Lock()
        self._utc: Optional[UTCScale] = None
        self._glonass: Optional[GLONASSScale] = None
        self._continuous: Dict[str, FixedOffsetScale] = {
            s.name: s for s in (TAI, tt_scale(), gps_scale(), galileo_scale(),
                                qzss_scale(), irnss_scale(), beidou_scale())
        }

    @classmethod
    def default(cls) -> "TimeScales":
        """Scales backed by the packaged table and the LEAPTIME_* environment."""
        from ..data.leap_seconds import load_offsets
        return cls(load_offsets)

    @classmethod
    def of(cls, offsets: Iterable[OffsetModel]) -> "TimeScales":
        """Scales backed by an explicit offset table."""
        table = list(offsets)
        return cls(lambda: table)

    # ---------------------------------------------------------
    # Continuous scales
    # ---------------------------------------------------------
    def get_tai(self) -> FixedOffsetScale:
        return self._continuous["TAI"]

    def get_tt(self) -> FixedOffsetScale:
        return self._continuous["TT"]

    def get_gps(self) -> FixedOffsetScale:
        return self._continuous["GPS"]

    def get_gst(self) -> FixedOffsetScale:
        return self._continuous["GST"]

    def get_qzss(self) -> FixedOffsetScale:
        return self._continuous["QZSS"]

    def get_irnss(self) -> FixedOffsetScale:
        return self._continuous["IRNSS"]

    def get_bdt(self) -> FixedOffsetScale:
        return self._continuous["BDT"]

    # ---------------------------------------------------------
    # Leap-second scales
    # ---------------------------------------------------------
    def get_utc(self) -> UTCScale:
        utc = self._utc
        if utc is None:
            with self._lock:
                if self._utc is None:
                    models = list(self._loader())
                    log.debug("building UTC scale from %d offset models", len(models))
                    self._utc = UTCScale(self.get_tai(), models)
                utc = self._utc
        return utc

    def get_glonass(self) -> GLONASSScale:
        glonass = self._glonass
        if glonass is None:
            utc = self.get_utc()
            with self._lock:
                if self._glonass is None:
                    self._glonass = GLONASSScale(utc)
                glonass = self._glonass
        return glonass

    # ---------------------------------------------------------
    # Lookup
    # ---------------------------------------------------------
    def names(self) -> List[str]:
        return sorted(list(self._continuous) + ["UTC", "GLONASS"])

    def get(self, name: str) -> TimeScale:
        key = name.upper()
        if key in self._continuous:
            return self._continuous[key]
        if key == "UTC":
            return self.get_utc()
        if key == "GLONASS":
            return self.get_glonass()
        raise KeyError(f"Unknown time scale '{name}'. Available: {self.names()}")
