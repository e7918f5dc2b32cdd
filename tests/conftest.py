# tests/conftest.py

import pytest

import leaptime
from leaptime.data.leap_seconds import builtin_offsets
from leaptime.scales.factory import TimeScales


@pytest.fixture
def scales():
    """Scales on the packaged table only, whatever the LEAPTIME_* environment says."""
    return TimeScales(builtin_offsets)


@pytest.fixture
def utc(scales):
    return scales.get_utc()


@pytest.fixture
def tai(scales):
    return scales.get_tai()


@pytest.fixture
def default_scales(scales):
    """Installs `scales` as the process default for the duration of a test."""
    leaptime.set_time_scales(scales)
    yield scales
    leaptime.set_time_scales(None)
