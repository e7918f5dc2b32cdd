# tests/test_cli.py

from leaptime.cli import main


def test_leaps(default_scales, capsys):
    assert main(["leaps"]) == 0
    out = capsys.readouterr().out
    lines = out.strip().splitlines()
    assert len(lines) == 1 + 41
    assert "57754" in lines[-1]
    assert "37300" in lines[1]


def test_offset(default_scales, capsys):
    assert main(["offset", "2017-01-01"]) == 0
    out = capsys.readouterr().out
    assert "TAI - UTC = 37.000000000 s" in out
    assert "inside leap" not in out

    assert main(["offset", "1997-06-30T23:59:60.5"]) == 0
    out = capsys.readouterr().out
    assert "TAI - UTC = 31.000000000 s" in out
    assert "minute    = 61 s  (inside leap)" in out


def test_components(default_scales, capsys):
    assert main(["components", "2008-12-31T23:59:60", "--scale", "TAI", "--digits", "3"]) == 0
    assert capsys.readouterr().out.strip() == "2009-01-01T00:00:33.000 TAI"

    assert main(["components", "2000-01-01T12:00:00", "--from", "TAI", "--scale", "glonass", "--digits", "0"]) == 0
    assert capsys.readouterr().out.strip() == "2000-01-01T14:59:28 GLONASS"


def test_fields(default_scales, capsys):
    assert main(["fields", "1997-06-30T23:59:60.5"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "1997-06-30T23:59:60.5"
    assert "(max 86400)" in out
    assert "ModifiedJulianDay" in out and "50629" in out

    assert main(["fields", "--tai", "1997-07-01T00:00:31.5"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "1997-07-01T00:00:00.5"


def test_errors_exit_with_2(default_scales, capsys):
    assert main(["components", "not-a-date"]) == 2
    assert "leaptime: error:" in capsys.readouterr().err
    assert main(["components", "2000-01-01", "--scale", "XYZ"]) == 2
    assert "Unknown time scale" in capsys.readouterr().err
