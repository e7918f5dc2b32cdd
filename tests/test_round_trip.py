# tests/test_round_trip.py

import random

import pytest

from leaptime import AbsoluteDate

# nanosecond truncation of the temporal view plus the split residual
TOLERANCE = 1e-8
# inside the 1.4228 s step of 1961-01-01 the split loses a few tens of ns
LEAP_WINDOW_TOLERANCE = 5e-8

STEPS = (-61.0, -1.5, -0.5, -1e-6, 0.0, 1e-6, 0.05, 0.1, 0.5, 1.0, 1.2, 1.4, 2.0, 61.0)


def _round_trip(utc, date):
    return utc.temporal_to_date(utc.date_to_temporal(date))


def test_random_dates(utc):
    rng = random.Random(19970630)
    for _ in range(2000):
        d = AbsoluteDate.J2000_EPOCH.shifted_by(rng.uniform(-45 * 365.25 * 86400, 30 * 365.25 * 86400))
        back = _round_trip(utc, d)
        assert abs(back.duration_from(d)) <= TOLERANCE, d.to_string(utc, 9)


def test_every_leap_window(utc):
    # covers the drift era, the 1961 and 1972 fractional steps and every whole leap
    for entry in utc.utctai_offsets:
        for dt in STEPS:
            d = entry.date.shifted_by(dt)
            back = _round_trip(utc, d)
            assert abs(back.duration_from(d)) <= LEAP_WINDOW_TOLERANCE, (entry.mjd, dt)


def test_first_step_reads_past_61(utc):
    first = utc.utctai_offsets[0]
    assert first.mjd == 37300
    d = first.date.shifted_by(1.2)
    assert utc.inside_leap(d)
    assert utc.minute_duration(d) == 62
    assert d.to_string(utc) == "1960-12-31T23:59:61.200"

    back = _round_trip(utc, d)
    assert back.duration_from(d) == pytest.approx(0.0, abs=LEAP_WINDOW_TOLERANCE)

    parsed = utc.temporal_to_date(utc.default_formatter().parse("1960-12-31T23:59:61.2"))
    assert parsed.duration_from(d) == pytest.approx(0.0, abs=LEAP_WINDOW_TOLERANCE)
    from_text = AbsoluteDate.from_string("1960-12-31T23:59:61.2", utc)
    assert from_text.duration_from(d) == pytest.approx(0.0, abs=LEAP_WINDOW_TOLERANCE)
