"""Conversions between calendar time, Modified Julian Date and GPS time."""

from __future__ import annotations

from .types import CommonTime, GpsTime, MjdTime

_GPS_EPOCH_MJD = 44244
_SECONDS_PER_DAY = 86400


def common_to_mjd(ctime: CommonTime) -> MjdTime:
    """Convert a calendar time to Modified Julian Date."""
    year, month = ctime.year, ctime.month
    if month <= 2:
        month += 12
        year -= 1
    ut = (ctime.hour + ctime.minute / 60 + ctime.second / 3600) / 24
    jd = int(365.25 * year) + int(30.6001 * (month + 1)) + ctime.day + ut + 1720981.5
    return MjdTime(days=int(jd - 2400000.5), frac_day=ut - int(ut))


def mjd_to_common(mjd: MjdTime) -> CommonTime:
    """Convert a Modified Julian Date to calendar time."""
    jd = mjd.days + mjd.frac_day + 2400000.5
    a = int(jd + 0.5)
    b = a + 1537
    c = int((b - 122.1) / 365.25)
    d = int(365.25 * c)
    e = int((b - d) / 30.6001)
    frac_day = jd + 0.5 - int(jd + 0.5)
    day = b - d - int(30.6001 * e)
    month = e - 1 - 12 * (e // 14)
    year = c - 4715 - (7 + month) // 10
    hours = frac_day * 24
    hour = int(hours)
    minutes = (hours - hour) * 60
    minute = int(minutes)
    second = (minutes - minute) * 60
    return CommonTime(year, month, day, hour, minute, second)


def mjd_to_gps(mjd: MjdTime) -> GpsTime:
    """Convert a Modified Julian Date to GPS week and seconds of week."""
    value = mjd.days + mjd.frac_day
    week = int((value - _GPS_EPOCH_MJD) / 7)
    sec_of_week = (value - _GPS_EPOCH_MJD - week * 7) * _SECONDS_PER_DAY
    return GpsTime(week, sec_of_week)


def gps_to_mjd(gps_time: GpsTime) -> MjdTime:
    """Convert GPS week and seconds of week to Modified Julian Date."""
    value = _GPS_EPOCH_MJD + gps_time.week * 7 + gps_time.sec_of_week / _SECONDS_PER_DAY
    days = int(value)
    return MjdTime(days, value - days)


def common_to_gps(ctime: CommonTime) -> GpsTime:
    """Convert a calendar time to GPS time."""
    return mjd_to_gps(common_to_mjd(ctime))


def gps_to_common(gps_time: GpsTime) -> CommonTime:
    """Convert GPS time to a calendar time."""
    return mjd_to_common(gps_to_mjd(gps_time))