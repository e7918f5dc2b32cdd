# tests/test_components.py

import pytest

from leaptime import AbsoluteDate, DateComponents, DateTimeComponents, OutOfRangeError, ParseError, TimeComponents
from leaptime.fields.chrono import ChronoField, JulianField


def test_known_day_numbers():
    j2000 = DateComponents(2000, 1, 1)
    assert j2000.j2000_day == 0
    assert j2000.epoch_day == 10957
    assert j2000.mjd == 51544
    assert j2000.day_of_week == 6  # Saturday
    assert DateComponents.from_mjd(41317) == DateComponents(1972, 1, 1)
    assert DateComponents.from_j2000_day(-1) == DateComponents(1999, 12, 31)
    assert DateComponents.MODIFIED_JULIAN_EPOCH.mjd == 0


def test_day_of_year():
    assert DateComponents(2008, 12, 31).day_of_year == 366
    assert DateComponents(1997, 6, 30).day_of_year == 181
    assert DateComponents.from_day_of_year(1997, 181) == DateComponents(1997, 6, 30)
    with pytest.raises(OutOfRangeError):
        DateComponents.from_day_of_year(1997, 366)


def test_invalid_dates_are_rejected():
    with pytest.raises(OutOfRangeError):
        DateComponents(2001, 2, 29)
    with pytest.raises(OutOfRangeError):
        DateComponents(2000, 13, 1)
    assert DateComponents(2000, 2, 29).day == 29
    # OutOfRangeError is also a ValueError
    with pytest.raises(ValueError):
        DateComponents(1900, 2, 29)


def test_parse_date_forms():
    expected = DateComponents(2008, 12, 31)
    assert DateComponents.parse("2008-12-31") == expected
    assert DateComponents.parse("20081231") == expected
    assert DateComponents.parse("2008-366") == expected
    with pytest.raises(ParseError):
        DateComponents.parse("2008-02-30")
    with pytest.raises(ParseError):
        DateComponents.parse("not a date")


def test_date_components_answer_date_fields():
    d = DateComponents(1997, 6, 30)
    assert d.get_long(ChronoField.EPOCH_DAY) == 10042
    assert d.get_long(ChronoField.PROLEPTIC_MONTH) == 23969
    assert d.get_long(JulianField.MODIFIED_JULIAN_DAY) == 50629
    assert d.is_supported(ChronoField.DAY_OF_MONTH)
    assert not d.is_supported(ChronoField.HOUR_OF_DAY)


def test_ordering():
    assert DateComponents(1999, 12, 31) < DateComponents(2000, 1, 1)
    assert DateComponents.MIN_EPOCH < DateComponents.J2000_EPOCH < DateComponents.MAX_EPOCH


def test_time_components_validation():
    assert TimeComponents(23, 59, 60.5).second == 60.5
    # the 1961 step reads up to 23:59:61.4228
    assert TimeComponents(23, 59, 61.2).second == 61.2
    with pytest.raises(OutOfRangeError):
        TimeComponents(23, 59, 62.0)
    with pytest.raises(OutOfRangeError):
        TimeComponents(24, 0, 0.0)
    with pytest.raises(OutOfRangeError):
        TimeComponents(0, 0, -0.5)


def test_parse_time_with_offsets():
    t = TimeComponents.parse("21:59:60-50:00")
    assert (t.hour, t.minute, t.second) == (21, 59, 60.0)
    assert t.minutes_from_utc == -3000
    assert TimeComponents.parse("01:59:60+50:00").minutes_from_utc == 3000
    assert TimeComponents.parse("12:00:00Z").minutes_from_utc == 0
    assert TimeComponents.parse("12:30:15.25").seconds_in_local_day == 45015.25
    with pytest.raises(ParseError):
        TimeComponents.parse("12:00:62")


def test_seconds_in_utc_day():
    t = TimeComponents(1, 0, 0.0, 60)
    assert t.seconds_in_local_day == 3600.0
    assert t.seconds_in_utc_day == 0.0


def test_from_seconds_inside_leap():
    t = TimeComponents.from_seconds(86399, 0.5, 1.0, 61)
    assert (t.hour, t.minute) == (23, 59)
    assert t.second == 60.5


def test_from_seconds_never_reaches_minute_duration():
    # 1.0 + 0.9999999999999999 rounds to 2.0, which would read 23:59:61
    t = TimeComponents.from_seconds(86399, 0.9999999999999999, 1.0, 61)
    assert t.second < 61.0
    assert t.second > 60.99


def test_from_seconds_range_checks():
    with pytest.raises(OutOfRangeError):
        TimeComponents.from_seconds(86401, 0.0)
    with pytest.raises(OutOfRangeError):
        TimeComponents.from_seconds(-1, 0.0)
    with pytest.raises(OutOfRangeError):
        # a leap needs a long minute
        TimeComponents.from_seconds(86399, 0.5, 1.0, 60)


def test_shifted_rolls_over_days():
    midnight = DateTimeComponents(DateComponents(2000, 1, 1), TimeComponents.H00)
    before = DateTimeComponents.shifted(midnight, -1.0)
    assert before.date == DateComponents(1999, 12, 31)
    assert (before.time.hour, before.time.minute, before.time.second) == (23, 59, 59.0)
    after = DateTimeComponents.shifted(midnight, 2 * 86400 + 90.0)
    assert str(after) == "2000-01-03T00:01:30.000"


def test_parse_date_time():
    dtc = DateTimeComponents.parse("2008-12-31T23:59:60")
    assert dtc.date == DateComponents(2008, 12, 31)
    assert dtc.time.second == 60.0
    assert DateTimeComponents.parse("2008-12-31").time == TimeComponents.H00


def test_to_string_rounding_carries_by_minute_duration():
    dtc = DateTimeComponents(DateComponents(2015, 6, 30), TimeComponents(23, 59, 59.9999))
    assert dtc.to_string(60) == "2015-07-01T00:00:00.000"
    assert dtc.to_string(61) == "2015-06-30T23:59:60.000"
    assert dtc.to_string(61, 4) == "2015-06-30T23:59:59.9999"


def test_to_string_keeps_local_offset():
    dtc = DateTimeComponents(DateComponents(2008, 12, 29), TimeComponents(21, 59, 30.0, -3000))
    assert dtc.to_string(60, 0) == "2008-12-29T21:59:30-50:00"


def test_str_keeps_leap_second_readings():
    leap = DateTimeComponents(DateComponents(1997, 6, 30), TimeComponents(23, 59, 60.5))
    assert str(leap) == "1997-06-30T23:59:60.500"
    late = DateTimeComponents(DateComponents(1997, 6, 30), TimeComponents(23, 59, 60.9999))
    assert str(late) == "1997-07-01T00:00:00.000"
    plain = DateTimeComponents(DateComponents(2015, 6, 30), TimeComponents(23, 59, 59.9999))
    assert str(plain) == "2015-07-01T00:00:00.000"


def test_str_of_leap_components(utc):
    d = AbsoluteDate.from_string("1997-06-30T23:59:60.5", utc)
    assert str(utc.get_components(d)) == "1997-06-30T23:59:60.500"
