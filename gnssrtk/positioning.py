"""Single point positioning (SPP) and velocity determination (SPV)."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

import numpy as np

from .troposphere import detect_outliers
from .types import (
    C_LIGHT,
    FG1_BDS,
    FG3_BDS,
    EpochObservation,
    Ephemeris,
    GnssSystem,
    GpsTime,
    PositionResult,
    PPResult,
    SatMidResult,
    Xyz,
)

_INITIAL_POSITION = (-2267335.4037, 5008650.0645, 3222376.0801)
_MAX_ITERATIONS = 10
_CONVERGENCE = 10e-6
_NO_REDUNDANCY_SIGMA = 999.0
_BDS_TGD_FACTOR = FG1_BDS * FG1_BDS / (FG1_BDS * FG1_BDS - FG3_BDS * FG3_BDS)

SatPvtFunction = Callable[
    [EpochObservation, Sequence[Ephemeris], Sequence[Ephemeris], Xyz],
    Sequence[SatMidResult],
]


class PositioningError(Exception):
    """Raised when a position or velocity cannot be solved."""


def _sigma(residuals: np.ndarray, count: int) -> float:
    dof = count - 5
    if dof == 0:
        return _NO_REDUNDANCY_SIGMA
    vtpv = float(residuals @ residuals)
    if dof < 0:
        return math.nan
    return math.sqrt(vtpv / dof)


def _normal_inverse(design: np.ndarray) -> np.ndarray:
    try:
        return np.linalg.inv(design.T @ design)
    except np.linalg.LinAlgError as exc:
        raise PositioningError("normal matrix is singular") from exc


def _position_dop(cofactor: np.ndarray) -> float:
    return math.sqrt(float(sum(cofactor[axis, axis] for axis in range(3))))


def spp(
    epoch: EpochObservation,
    gps_eph: Sequence[Ephemeris],
    bds_eph: Sequence[Ephemeris],
    compute_sat_pvt: SatPvtFunction,
) -> tuple[PositionResult, PPResult]:
    """Solve the receiver position of an epoch by iterated least squares.

    ``compute_sat_pvt(epoch, gps_eph, bds_eph, position)`` must return one
    satellite result per observation for signals received at ``position``.
    ``bds_eph`` is indexed by PRN - 1. Raises PositioningError when too few
    satellites are usable or the iteration does not converge.
    """
    detect_outliers(epoch)
    state = np.array([*_INITIAL_POSITION, 0.0, 0.0])

    for _ in range(_MAX_ITERATIONS - 1):
        pvts = list(compute_sat_pvt(epoch, gps_eph, bds_eph, Xyz(*map(float, state[:3]))))
        if len(pvts) != epoch.sat_num:
            raise ValueError("satellite results do not match the observations")
        epoch.sat_pvt = pvts

        rows: list[list[float]] = []
        misclosures: list[float] = []
        n_gps = n_bds = 0
        for obs, pvt, com in zip(epoch.sat_obs, epoch.sat_pvt, epoch.com_obs):
            if not (pvt.valid and obs.valid):
                continue
            if obs.system is GnssSystem.GPS:
                tgd = 0.0
                clock = state[3]
                clock_columns = [1.0, 0.0]
                n_gps += 1
            elif obs.system is GnssSystem.BDS:
                tgd = _BDS_TGD_FACTOR * bds_eph[obs.prn - 1].tgd1 * C_LIGHT
                clock = state[4]
                clock_columns = [0.0, 1.0]
                n_bds += 1
            else:
                continue
            delta = state[:3] - np.asarray(pvt.sat_pos, dtype=float)
            rho = float(np.linalg.norm(delta))
            rows.append([*(delta / rho), *clock_columns])
            misclosures.append(
                com.pif - (rho + clock - C_LIGHT * pvt.clk_offset + pvt.trop_corr + tgd)
            )

        n_sats = len(rows)
        dim = 5 if n_gps and n_bds else 4
        if n_sats < dim:
            raise PositioningError(f"{n_sats} usable satellites, {dim} needed")

        if n_gps == 0:
            keep = [0, 1, 2, 4]
        elif n_bds == 0:
            keep = [0, 1, 2, 3]
        else:
            keep = [0, 1, 2, 3, 4]
        design = np.array(rows)[:, keep]
        misclosure = np.array(misclosures)
        cofactor = _normal_inverse(design)
        correction = cofactor @ design.T @ misclosure
        state[keep] += correction

        if np.linalg.norm(correction) <= _CONVERGENCE:
            break
    else:
        raise PositioningError("least-squares iteration did not converge")

    residuals = design @ correction - misclosure
    sigma_pos = _sigma(residuals, n_sats)
    pdop = _position_dop(cofactor)
    position = [float(v) for v in state[:3]]

    result = PositionResult(
        time=GpsTime(epoch.time.week, epoch.time.sec_of_week),
        pos=list(position),
        pdop=pdop,
        sigma_pos=sigma_pos,
        sat_num=n_sats,
    )
    summary = PPResult(
        time=GpsTime(epoch.time.week, epoch.time.sec_of_week),
        position=list(position),
        pdop=pdop,
        sigma_pos=sigma_pos,
        gps_sat_num=n_gps,
        bds_sat_num=n_bds,
        all_sat_num=n_gps + n_bds,
        is_success=True,
    )
    return result, summary


def spv(epoch: EpochObservation, position: Sequence[float]) -> tuple[list[float], float]:
    """Solve the receiver velocity from Doppler observations.

    ``position`` is the receiver position (x, y, z) in metres; satellite
    positions, velocities and clock drifts are taken from ``epoch.sat_pvt``.
    Returns the velocity in m/s and its standard deviation.
    """
    receiver = np.asarray(position, dtype=float)[:3]
    rows: list[list[float]] = []
    misclosures: list[float] = []
    for obs, pvt in zip(epoch.sat_obs, epoch.sat_pvt):
        if not (pvt.valid and obs.valid):
            continue
        delta = receiver - np.asarray(pvt.sat_pos, dtype=float)
        rho = float(np.linalg.norm(delta))
        rate = -float(delta @ np.asarray(pvt.sat_vel, dtype=float)) / rho
        rows.append([*(delta / rho), 1.0])
        misclosures.append(obs.d[0] - (rate - C_LIGHT * pvt.clk_drift))

    if len(rows) < 4:
        raise PositioningError(f"{len(rows)} usable satellites, 4 needed")

    design = np.array(rows)
    misclosure = np.array(misclosures)
    solution = _normal_inverse(design) @ design.T @ misclosure
    residuals = design @ solution - misclosure
    return [float(v) for v in solution[:3]], _sigma(residuals, len(rows))