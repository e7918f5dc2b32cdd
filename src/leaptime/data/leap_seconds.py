"""
leaptime.data.leap_seconds
--------------------------
Loaders for the TAI-UTC offset table.

A loader is any callable returning OffsetModel rows. The default one reads,
in order:
  1) LEAPTIME_LEAP_TABLE environment variable (path to a CSV file)
  2) packaged data (leaptime/data/utc_tai.csv, post-1972 whole seconds)
then appends the announcements listed in LEAPTIME_EXTRA_LEAPS.

CSV columns:
  start (YYYY-MM-DD), offset [, mjd_ref, slope]
Rows without mjd_ref/slope are whole-second offsets.

LEAPTIME_EXTRA_LEAPS holds comma separated "YYYY-MM-DD:offset" pairs, e.g.
  LEAPTIME_EXTRA_LEAPS="2035-01-01:38"
"""

from __future__ import annotations

import csv
import importlib.resources
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from ..core.components import DateComponents
from ..core.errors import ConfigurationError, ParseError
from ..scales.offsets import OffsetModel

log = logging.getLogger(__name__)

LEAP_TABLE_ENV = "LEAPTIME_LEAP_TABLE"
EXTRA_LEAPS_ENV = "LEAPTIME_EXTRA_LEAPS"

def read_offsets_csv(f: TextIO) -> List[OffsetModel]:
    reader = csv.DictReader(f)
    if reader.fieldnames is None or not {"start", "offset"} <= set(reader.fieldnames):
        raise ConfigurationError("UTC-TAI table needs 'start' and 'offset' columns")
    models = []
    for line, row in enumerate(reader, start=2):
        try:
            start = DateComponents.parse(row["start"])
            offset = float(row["offset"])
            if row.get("mjd_ref") and row.get("slope"):
                models.append(OffsetModel(start, int(row["mjd_ref"]), offset, float(row["slope"])))
            else:
                models.append(OffsetModel.constant(start, offset))
        except (ParseError, TypeError, ValueError) as e:
            raise ConfigurationError(f"bad UTC-TAI table row {line}: {e}") from e
    return models


@lru_cache(maxsize=1)
def _packaged_offsets() -> Tuple[OffsetModel, ...]:
    path = importlib.resources.files("leaptime").joinpath("data/utc_tai.csv")
    with path.open("r", encoding="utf-8", newline="") as f:
        return tuple(read_offsets_csv(f))


def builtin_offsets() -> List[OffsetModel]:
    """Post-1972 whole-second offsets shipped with the package."""
    return list(_packaged_offsets())


def parse_extra_leaps(text: str) -> List[OffsetModel]:
    """Parse "YYYY-MM-DD:offset[,YYYY-MM-DD:offset...]"."""
    models = []
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        day, sep, offset = item.partition(":")
        if not sep:
            raise ConfigurationError(f"{EXTRA_LEAPS_ENV}: expected YYYY-MM-DD:offset, got {item!r}")
        try:
            models.append(OffsetModel.constant(DateComponents.parse(day), float(int(offset))))
        except (ParseError, ValueError) as e:
            raise ConfigurationError(f"{EXTRA_LEAPS_ENV}: bad entry {item!r}: {e}") from e
    return models


def load_offsets(environ: Optional[dict] = None) -> List[OffsetModel]:
    """Default loader: table file or packaged data, plus extra announcements."""
    env = os.environ if environ is None else environ

    p = env.get(LEAP_TABLE_ENV, "").strip()
    if p:
        path = Path(p).expanduser()
        if not path.is_file():
            raise ConfigurationError(f"{LEAP_TABLE_ENV}: no such file {path}")
        with path.open("r", encoding="utf-8", newline="") as f:
            models = read_offsets_csv(f)
        log.debug("read %d UTC-TAI offsets from %s", len(models), path)
    else:
        models = builtin_offsets()

    extra = env.get(EXTRA_LEAPS_ENV, "").strip()
    if extra:
        extra_models = parse_extra_leaps(extra)
        known = {m.start for m in models}
        for m in extra_models:
            if m.start in known:
                raise ConfigurationError(f"{EXTRA_LEAPS_ENV}: {m.start} is already in the table")
        log.info("adding %d UTC-TAI offsets from %s", len(extra_models), EXTRA_LEAPS_ENV)
        models = models + extra_models
    return models
