"""Hopfield tropospheric delay and single-station outlier screening."""

from __future__ import annotations

import math

from .types import PI, EpochObservation, GnssSystem, MwGf

_H0 = 0.0
_T0 = 15 + 273.16
_P0 = 1013.25
_RH0 = 0.5
_HW = 11000.0

DELTA_GF = 0.05
DELTA_MW = 3.0
_FRESH_LIMIT = 10e-6


def hopfield(height: float, elevation: float) -> float:
    """Return the Hopfield tropospheric delay in metres.

    ``height`` is the station height in metres and ``elevation`` the satellite
    elevation in degrees. Heights outside [-100, 1e5] m give no correction.
    """
    if height > 10e4 or height < -100:
        return 0.0
    dh = height - _H0
    pressure = _P0 * math.pow(1 - 0.0000226 * dh, 5.225)
    temperature = _T0 - 0.0065 * dh
    humidity = _RH0 * math.exp(-0.0006396 * dh)
    vapour = humidity * math.exp(
        -37.2465 + 0.213166 * temperature - 0.000256908 * temperature * temperature
    )
    hd = 40136 + 148.72 * (_T0 - 273.16)
    kw = 155.2e-7 * 4810 / (temperature * temperature) * vapour * (_HW - height)
    kd = 155.2e-7 * pressure / temperature * (hd - height)
    return kd / math.sin(math.sqrt(elevation * elevation + 6.25) * PI / 180.0) + kw / math.sin(
        math.sqrt(elevation * elevation + 2.25) * PI / 180.0
    )


def _screen(com: MwGf, mw: float, gf: float) -> bool:
    """Compare new MW/GF values with the stored ones and update the state."""
    d_mw = abs(mw - com.mw)
    d_gf = abs(gf - com.gf)
    if abs(com.mw) < _FRESH_LIMIT and abs(com.gf) < _FRESH_LIMIT:
        d_mw = d_gf = 0.0
    if d_gf < DELTA_GF and d_mw < DELTA_MW:
        com.mw = (com.n * com.mw + mw) / (com.n + 1)
        com.gf = gf
        com.n += 1
        return True
    com.n = 0
    com.mw = mw
    com.gf = gf
    return False


def detect_outliers(epoch: EpochObservation) -> None:
    """Screen each satellite of an epoch with MW and GF combinations.

    Sets ``valid`` on every observation and updates the matching entry of
    ``epoch.com_obs``, including the ionosphere-free pseudorange.
    """
    for obs, com in zip(epoch.sat_obs, epoch.com_obs):
        obs.valid = all(value != 0 for value in (*obs.p[:2], *obs.l[:2]))
        if not obs.valid:
            continue
        com.prn = obs.prn
        com.sys = obs.system
        if obs.system not in (GnssSystem.GPS, GnssSystem.BDS):
            continue
        f1, f2 = obs.system.frequencies()
        mw = (1 / (f1 - f2)) * (f1 * obs.l[0] - f2 * obs.l[1]) - (1 / (f1 + f2)) * (
            f1 * obs.p[0] + f2 * obs.p[1]
        )
        gf = obs.l[0] - obs.l[1]
        obs.valid = _screen(com, mw, gf)
        if obs.valid:
            com.pif = (1 / (f1 * f1 - f2 * f2)) * (f1 * f1 * obs.p[0] - f2 * f2 * obs.p[1])