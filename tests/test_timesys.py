import pytest

from gnssrtk.timesys import (
    common_to_gps,
    common_to_mjd,
    gps_to_common,
    gps_to_mjd,
    mjd_to_common,
    mjd_to_gps,
)
from gnssrtk.types import CommonTime, GpsTime, MjdTime


def _seconds_of_day(ct):
    return ct.hour * 3600 + ct.minute * 60 + ct.second


def test_gps_epoch_is_week_zero():
    gps = common_to_gps(CommonTime(1980, 1, 6, 0, 0, 0.0))
    assert gps.week == 0
    assert gps.sec_of_week == pytest.approx(0.0, abs=1e-6)


def test_gps_epoch_mjd():
    mjd = gps_to_mjd(GpsTime(0, 0.0))
    assert mjd.days == 44244
    assert mjd.frac_day == 0.0


def test_j2000_noon():
    mjd = common_to_mjd(CommonTime(2000, 1, 1, 12, 0, 0.0))
    assert mjd.days == 51544
    assert mjd.frac_day == pytest.approx(0.5)


@pytest.mark.parametrize(
    "ctime",
    [
        CommonTime(2024, 2, 29, 6, 15, 30.0),
        CommonTime(2025, 3, 3, 23, 59, 10.0),
        CommonTime(1999, 12, 31, 0, 0, 1.0),
        CommonTime(2010, 7, 15, 13, 45, 0.0),
    ],
)
def test_common_mjd_round_trip(ctime):
    back = mjd_to_common(common_to_mjd(ctime))
    assert (back.year, back.month, back.day) == (ctime.year, ctime.month, ctime.day)
    assert _seconds_of_day(back) == pytest.approx(_seconds_of_day(ctime), abs=1e-3)


@pytest.mark.parametrize(
    "gps",
    [GpsTime(2100, 0.0), GpsTime(2345, 345600.0), GpsTime(1042, 561600.0), GpsTime(0, 86400.0)],
)
def test_gps_mjd_round_trip(gps):
    back = mjd_to_gps(gps_to_mjd(gps))
    assert back.week == gps.week
    assert back.sec_of_week == pytest.approx(gps.sec_of_week, abs=1e-3)


@pytest.mark.parametrize(
    "ctime",
    [
        CommonTime(2025, 5, 8, 10, 20, 30.0),
        CommonTime(2019, 4, 7, 0, 0, 0.0),
        CommonTime(2001, 1, 1, 18, 0, 0.0),
    ],
)
def test_common_gps_round_trip(ctime):
    back = gps_to_common(common_to_gps(ctime))
    assert (back.year, back.month, back.day) == (ctime.year, ctime.month, ctime.day)
    assert _seconds_of_day(back) == pytest.approx(_seconds_of_day(ctime), abs=1e-3)


def test_one_day_later_adds_a_day_of_seconds():
    a = common_to_gps(CommonTime(2024, 11, 19, 8, 0, 0.0))
    b = common_to_gps(CommonTime(2024, 11, 20, 8, 0, 0.0))
    assert b.seconds_since(a) == pytest.approx(86400.0, abs=1e-3)


def test_fraction_of_day_matches_time_of_day():
    mjd = common_to_mjd(CommonTime(2024, 6, 1, 6, 0, 0.0))
    assert mjd.frac_day == pytest.approx(0.25)
    assert mjd_to_common(MjdTime(mjd.days, 0.0)).hour == 0