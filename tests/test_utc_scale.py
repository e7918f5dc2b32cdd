# tests/test_utc_scale.py

import logging

import pytest

from leaptime import AbsoluteDate, ConfigurationError, DateComponents, TimeComponents, TimeScales, UTCScale
from leaptime.data.leap_seconds import builtin_offsets
from leaptime.scales.continuous import TAI


def test_minute_duration_around_1983_leap(utc):
    d = AbsoluteDate.from_string("1983-06-30T23:59:59", utc)
    expected = [
        (-60.0, "1983-06-30T23:58:59.000", 60, False),
        (0.000, "1983-06-30T23:59:59.000", 61, False),
        (0.251, "1983-06-30T23:59:59.251", 61, False),
        (0.502, "1983-06-30T23:59:59.502", 61, False),
        (0.753, "1983-06-30T23:59:59.753", 61, False),
        (1.004, "1983-06-30T23:59:60.004", 61, True),
        (1.255, "1983-06-30T23:59:60.255", 61, True),
        (1.506, "1983-06-30T23:59:60.506", 61, True),
        (1.757, "1983-06-30T23:59:60.757", 61, True),
        (2.008, "1983-07-01T00:00:00.008", 60, False),
    ]
    for dt, text, duration, inside in expected:
        t = d.shifted_by(dt)
        assert t.to_string(utc) == text
        assert utc.minute_duration(t) == duration, text
        assert utc.inside_leap(t) is inside, text


def test_minute_duration_sweep(utc):
    t0 = AbsoluteDate.from_string("1983-06-30T23:58:59.000", utc)
    for i in range(210):
        dt = 0.3 * i
        if dt < 1.0:
            # before the minute of the leap
            assert utc.minute_duration(t0.shifted_by(dt)) == 60
        elif dt < 62.0:
            # during the minute of the leap
            assert utc.minute_duration(t0.shifted_by(dt)) == 61
        else:
            assert utc.minute_duration(t0.shifted_by(dt)) == 60


def test_get_leap(utc):
    inside = AbsoluteDate.from_string("1997-06-30T23:59:60.5", utc)
    assert utc.inside_leap(inside)
    assert utc.get_leap(inside) == 1.0
    assert utc.get_leap(AbsoluteDate.of(1950, 1, 1, scale=utc)) == 0.0


def test_display_during_leap(utc):
    t0 = utc.last_known_leap_second.shifted_by(-1.0)
    for i in range(8):
        dt = 0.375 * i
        seconds = t0.shifted_by(dt).get_components(utc).time.second
        if dt < 2.0:
            assert seconds == pytest.approx(dt + 59.0, abs=1e-12)
        else:
            assert seconds == pytest.approx(dt - 2.0, abs=1e-12)


def test_whole_second_steps(utc):
    assert utc.offset_from_tai(AbsoluteDate.from_string("1972-06-30T23:59:59", utc)) == -10.0
    assert utc.offset_from_tai(AbsoluteDate.from_string("1972-07-01T00:00:00", utc)) == -11.0
    assert utc.offset_from_tai(AbsoluteDate.from_string("1997-06-30T23:59:59", utc)) == -30.0
    assert utc.offset_from_tai(AbsoluteDate.from_string("1997-07-01T00:00:00", utc)) == -31.0


def test_post_1972_leaps_match_offset_steps(utc):
    table = [o for o in utc.utctai_offsets if o.mjd >= 41317]
    assert len(table) == 28
    for previous, current in zip(table, table[1:]):
        assert current.leap == current.offset - previous.offset
        assert current.leap == 1.0


def test_offsets():
    utc = TimeScales(builtin_offsets).get_utc()

    def check(year, month, day, offset):
        date = AbsoluteDate.of(year, month, day, scale=utc)
        assert utc.offset_from_tai(date) == pytest.approx(offset, abs=1e-10)

    # UTC == TAI before 1961-01-01
    check(1950, 1, 1, 0)

    check(1961, 1, 2, -(1.422818 + 1 * 0.001296))     # MJD 37300 +   1
    check(1961, 8, 2, -(1.372818 + 213 * 0.001296))   # MJD 37300 + 213
    check(1962, 1, 2, -(1.845858 + 1 * 0.0011232))    # MJD 37665 +   1
    check(1963, 11, 2, -(1.945858 + 670 * 0.0011232))  # MJD 37665 + 670
    check(1964, 1, 2, -(3.240130 - 365 * 0.001296))   # MJD 38761 - 365
    check(1964, 4, 2, -(3.340130 - 274 * 0.001296))   # MJD 38761 - 274
    check(1964, 9, 2, -(3.440130 - 121 * 0.001296))   # MJD 38761 - 121
    check(1965, 1, 2, -(3.540130 + 1 * 0.001296))     # MJD 38761 +   1
    check(1965, 3, 2, -(3.640130 + 60 * 0.001296))    # MJD 38761 +  60
    check(1965, 7, 2, -(3.740130 + 182 * 0.001296))   # MJD 38761 + 182
    check(1965, 9, 2, -(3.840130 + 244 * 0.001296))   # MJD 38761 + 244
    check(1966, 1, 2, -(4.313170 + 1 * 0.002592))     # MJD 39126 +   1
    check(1968, 2, 2, -(4.213170 + 762 * 0.002592))   # MJD 39126 + 762

    # whole seconds since 1972-01-01
    check(1972, 3, 5, -10)
    check(1972, 7, 14, -11)
    check(1979, 12, 31, -18)
    check(1980, 1, 22, -19)
    check(2006, 7, 7, -33)


def test_symmetry(utc):
    for year in range(1961, 2021, 3):
        for month in (1, 4, 7, 10):
            date = AbsoluteDate.of(year, month, 15, 12, 0, 0.0, scale=utc)
            comps = utc.get_components(date)
            total = utc.offset_from_tai(date) + utc.offset_to_tai(comps.date, comps.time)
            assert total == pytest.approx(0.0, abs=1e-10)


def test_offset_to_tai_before_first_leap(utc):
    assert utc.offset_to_tai(DateComponents(1950, 1, 1), TimeComponents.H00) == pytest.approx(0.0, abs=1e-10)


def test_infinities(utc):
    # the packaged table ends with the 2017-01-01 leap
    assert utc.offset_from_tai(AbsoluteDate.FUTURE_INFINITY) == -37.0
    assert utc.offset_from_tai(AbsoluteDate.PAST_INFINITY) == 0.0


def test_table(utc):
    offsets = utc.utctai_offsets
    assert len(offsets) == 41
    assert offsets[0].mjd == 37300
    assert offsets[-1].mjd == 57754
    assert utc.first_known_leap_second == offsets[0].date
    assert utc.last_known_leap_second == offsets[-1].date
    # a copy: callers cannot alter the scale
    offsets.clear()
    assert len(utc.utctai_offsets) == 41


def test_last_leap_round_trips_through_text(utc):
    d = utc.last_known_leap_second.shifted_by(10)
    parsed = AbsoluteDate.from_string(d.to_string(utc), utc)
    assert parsed.duration_from(d) == pytest.approx(0.0, abs=1e-12)


def test_tai_minus_utc_adjustment(utc):
    assert utc.tai_minus_utc_adjustment(57204) == 1.0   # 2015-07-01
    assert utc.tai_minus_utc_adjustment(57203) == 0.0
    assert utc.tai_minus_utc_adjustment(49169) == 1.0   # 1993-07-01
    assert utc.tai_minus_utc_adjustment(49168) == 0.0
    assert utc.tai_minus_utc_adjustment(41499) == 1.0   # 1972-07-01
    assert utc.tai_minus_utc_adjustment(41498) == 0.0
    assert utc.tai_minus_utc_adjustment(41317) == pytest.approx(0.107758, abs=1e-12)
    assert utc.tai_minus_utc_adjustment(41316) == 0.0
    assert utc.tai_minus_utc_adjustment(38639) == pytest.approx(0.1, abs=1e-12)
    assert utc.tai_minus_utc_adjustment(38638) == 0.0
    assert utc.tai_minus_utc_adjustment(37300) == pytest.approx(1.422818, abs=1e-12)
    assert utc.tai_minus_utc_adjustment(37299) == 0.0


def test_fractional_leap_before_1972(utc):
    # TAI - UTC jumped from 9.892242 s to 10 s at 1972-01-01
    end_of_1971 = AbsoluteDate.from_string("1971-12-31T23:59:59", utc)
    assert utc.minute_duration(end_of_1971) == 61
    offset = utc.utctai_offsets[13]
    assert offset.mjd == 41317
    assert offset.leap == pytest.approx(0.107758, abs=1e-12)


def test_short_table_gets_pre_1972_history(caplog):
    caplog.set_level(logging.DEBUG, logger="leaptime")
    utc = UTCScale(TAI, builtin_offsets())
    assert len(utc.utctai_offsets) == 41
    assert any("pre-1972" in r.getMessage() for r in caplog.records)


def test_unsorted_input_is_sorted():
    utc = UTCScale(TAI, list(reversed(builtin_offsets())))
    assert [o.mjd for o in utc.utctai_offsets] == sorted(o.mjd for o in utc.utctai_offsets)


def test_empty_offsets():
    with pytest.raises(ConfigurationError):
        UTCScale(TAI, [])
    with pytest.raises(ConfigurationError):
        TimeScales.of([]).get_utc()


def test_name(utc):
    assert utc.name == "UTC"
    assert str(utc) == "UTC"
