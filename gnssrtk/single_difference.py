"""Between-station single differences and cycle-slip detection."""

from __future__ import annotations

import dataclasses

from .types import (
    EpochObservation,
    GnssSystem,
    GpsTime,
    MwGf,
    SatMidResult,
    SatObservation,
    SdEpochObservation,
    SdSatObservation,
)

DELTA_GF = 0.05
DELTA_MW = 3.0
_FRESH_LIMIT = 10e-6


def _usable(obs: SatObservation, pvt: SatMidResult) -> bool:
    return bool(obs.valid and pvt.valid and obs.half[0] != 0 and obs.half[1] != 0)


def form_sd_epoch_obs(
    base: EpochObservation,
    rover: EpochObservation,
    previous: SdEpochObservation | None = None,
) -> SdEpochObservation:
    """Difference rover minus base observations of the satellites both track.

    Combination state (MW/GF smoothing) of satellites present in ``previous``
    is carried over so that cycle-slip detection can continue across epochs.
    """
    carried: dict[tuple[GnssSystem, int], MwGf] = {}
    if previous is not None:
        carried = {
            (com.sys, com.prn): com
            for com in previous.sd_c_obs
            if com.sys is not GnssSystem.UNKS
        }

    sats: list[SdSatObservation] = []
    combos: list[MwGf] = []
    for i, (b_obs, b_pvt) in enumerate(zip(base.sat_obs, base.sat_pvt)):
        for j, (r_obs, r_pvt) in enumerate(zip(rover.sat_obs, rover.sat_pvt)):
            if b_obs.system != r_obs.system or b_obs.prn != r_obs.prn:
                continue
            if not (_usable(b_obs, b_pvt) and _usable(r_obs, r_pvt)):
                continue
            sats.append(
                SdSatObservation(
                    prn=b_obs.prn,
                    system=b_obs.system,
                    dl=[rv - bv for rv, bv in zip(r_obs.l, b_obs.l)],
                    dp=[rv - bv for rv, bv in zip(r_obs.p, b_obs.p)],
                    n_bas=i,
                    n_rov=j,
                )
            )
            state = carried.get((b_obs.system, b_obs.prn))
            combos.append(dataclasses.replace(state) if state is not None else MwGf())

    return SdEpochObservation(
        time=GpsTime(rover.time.week, rover.time.sec_of_week),
        sd_sat_obs=sats,
        sd_c_obs=combos,
    )


def _screen(com: MwGf, mw: float, gf: float) -> bool:
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


def detect_cycle_slips(sd_obs: SdEpochObservation) -> None:
    """Flag cycle slips in single-difference observations with MW and GF.

    Sets ``valid`` of each GPS or BDS satellite and updates its combination
    state; satellites of other systems keep ``valid`` unset.
    """
    for sat, com in zip(sd_obs.sd_sat_obs, sd_obs.sd_c_obs):
        if any(value == 0 for value in (*sat.dp[:2], *sat.dl[:2])):
            sat.valid = False
            continue
        if sat.valid is False:
            continue
        com.prn = sat.prn
        com.sys = sat.system
        if sat.system not in (GnssSystem.GPS, GnssSystem.BDS):
            continue
        f1, f2 = sat.system.frequencies()
        mw = (1 / (f1 - f2)) * (f1 * sat.dl[0] - f2 * sat.dl[1]) - (1 / (f1 + f2)) * (
            f1 * sat.dp[0] + f2 * sat.dp[1]
        )
        gf = sat.dl[0] - sat.dl[1]
        sat.valid = _screen(com, mw, gf)
        if sat.valid:
            com.pif = (1 / (f1 * f1 - f2 * f2)) * (f1 * f1 * sat.dp[0] - f2 * f2 * sat.dp[1])