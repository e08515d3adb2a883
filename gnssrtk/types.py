"""Core data types and physical constants for GNSS positioning."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

PI = 3.1415926535898
GM_GPS = 3.986005e14
OMEGA_E_GPS = 7.2921151467e-5
GM_BDS = 3.986004418e14
OMEGA_E_BDS = 7.2921150e-5
GPS_EPH_MAX_AGE = 7500
BDS_EPH_MAX_AGE = 4100
C_LIGHT = 299792458.0
F_RELATIVITY = -4.442807633e-10

MAXCHANNUM = 36
MAXRAWLEN = 20480
MAXGPSNUM = 32
MAXBDSNUM = 63

SECONDS_PER_WEEK = 604800

FG1_GPS = 1575.42e6
FG2_GPS = 1227.60e6
WL1_GPS = C_LIGHT / FG1_GPS
WL2_GPS = C_LIGHT / FG2_GPS

FG1_BDS = 1561.098e6
FG2_BDS = 1207.140e6
FG3_BDS = 1268.520e6
WL1_BDS = C_LIGHT / FG1_BDS
WL2_BDS = C_LIGHT / FG2_BDS
WL3_BDS = C_LIGHT / FG3_BDS


class GnssSystem(enum.IntEnum):
    """Satellite navigation system."""

    UNKS = 0
    GPS = 1
    BDS = 2
    GLONASS = 3
    GALILEO = 4
    QZSS = 5

    def frequencies(self) -> tuple[float, float]:
        """Return the two carrier frequencies (Hz) used for dual-frequency combinations."""
        if self is GnssSystem.GPS:
            return FG1_GPS, FG2_GPS
        if self is GnssSystem.BDS:
            return FG1_BDS, FG3_BDS
        raise ValueError(f"no dual-frequency pair defined for {self.name}")


def _pair() -> list[float]:
    return [0.0, 0.0]


def _triple() -> list[float]:
    return [0.0, 0.0, 0.0]


@dataclass
class Xyz:
    """Earth-centred Cartesian coordinates in metres."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class CommonTime:
    """Calendar date and time of day."""

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: float = 0.0


@dataclass
class GpsTime:
    """GPS week number and seconds of week."""

    week: int = 0
    sec_of_week: float = 0.0

    def seconds_since(self, other: GpsTime) -> float:
        """Return the time in seconds from ``other`` to this time."""
        return (self.week - other.week) * SECONDS_PER_WEEK + (
            self.sec_of_week - other.sec_of_week
        )


@dataclass
class MjdTime:
    """Modified Julian Date split into whole days and day fraction."""

    days: int = 0
    frac_day: float = 0.0


@dataclass
class SatMidResult:
    """Intermediate satellite position, velocity and clock results."""

    sat_pos: list[float] = field(default_factory=_triple)
    sat_vel: list[float] = field(default_factory=_triple)
    clk_offset: float = 0.0
    clk_drift: float = 0.0
    elevation: float = PI / 2.0
    azimuth: float = 0.0
    trop_corr: float = 0.0
    tgd1: float = 0.0
    tgd2: float = 0.0
    valid: bool = False


@dataclass
class SatObservation:
    """Dual-frequency observations of one satellite."""

    prn: int = 0
    system: GnssSystem = GnssSystem.UNKS
    p: list[float] = field(default_factory=_pair)
    l: list[float] = field(default_factory=_pair)  # noqa: E741
    d: list[float] = field(default_factory=_pair)
    valid: bool = True
    cn0: list[float] = field(default_factory=_pair)
    lock_time: list[float] = field(default_factory=_pair)
    code_lock: list[float] = field(default_factory=_pair)
    half: list[int] = field(default_factory=lambda: [0, 0])


@dataclass
class MwGf:
    """Melbourne-Wuebbena, geometry-free and ionosphere-free combinations."""

    prn: int = 0
    sys: GnssSystem = GnssSystem.UNKS
    mw: float = 0.0
    gf: float = 0.0
    pif: float = 0.0
    n: int = 0


@dataclass
class EpochObservation:
    """All observations of one epoch; per-satellite lists share their index."""

    time: GpsTime = field(default_factory=GpsTime)
    sat_obs: list[SatObservation] = field(default_factory=list)
    sat_pvt: list[SatMidResult] = field(default_factory=list)
    com_obs: list[MwGf] = field(default_factory=list)
    best_pos: list[float] = field(default_factory=_triple)

    def __post_init__(self) -> None:
        missing = len(self.sat_obs) - len(self.sat_pvt)
        self.sat_pvt.extend(SatMidResult() for _ in range(max(missing, 0)))
        missing = len(self.sat_obs) - len(self.com_obs)
        self.com_obs.extend(MwGf() for _ in range(max(missing, 0)))

    @property
    def sat_num(self) -> int:
        return len(self.sat_obs)


@dataclass
class Ephemeris:
    """Broadcast ephemeris of a GPS or BDS satellite."""

    prn: int = 0
    sys: GnssSystem = GnssSystem.UNKS
    toc: GpsTime = field(default_factory=GpsTime)
    toe: GpsTime = field(default_factory=GpsTime)
    clk_bias: float = 0.0
    clk_drift: float = 0.0
    clk_drift_rate: float = 0.0
    iode: float = 0.0
    iodc: float = 0.0
    sqrt_a: float = 0.0
    m0: float = 0.0
    e: float = 0.0
    omega0: float = 0.0
    i0: float = 0.0
    omega: float = 0.0
    crs: float = 0.0
    cuc: float = 0.0
    cus: float = 0.0
    cic: float = 0.0
    cis: float = 0.0
    crc: float = 0.0
    delta_n: float = 0.0
    omega_dot: float = 0.0
    i_dot: float = 0.0
    sv_health: int = 0
    sv_accuracy: float = 0.0
    tgd1: float = 0.0
    tgd2: float = 0.0


@dataclass
class SdSatObservation:
    """Between-station single-difference observations of one satellite.

    ``valid`` is None until cycle-slip detection has judged the satellite.
    """

    prn: int = 0
    system: GnssSystem = GnssSystem.UNKS
    valid: bool | None = None
    dp: list[float] = field(default_factory=_pair)
    dl: list[float] = field(default_factory=_pair)
    n_bas: int = 0
    n_rov: int = 0


@dataclass
class SdEpochObservation:
    """Single-difference observations of one epoch."""

    time: GpsTime = field(default_factory=GpsTime)
    sd_sat_obs: list[SdSatObservation] = field(default_factory=list)
    sd_c_obs: list[MwGf] = field(default_factory=list)

    def __post_init__(self) -> None:
        missing = len(self.sd_sat_obs) - len(self.sd_c_obs)
        self.sd_c_obs.extend(MwGf() for _ in range(max(missing, 0)))

    @property
    def sat_num(self) -> int:
        return len(self.sd_sat_obs)


@dataclass
class PositionResult:
    """Position and velocity of one epoch."""

    time: GpsTime = field(default_factory=GpsTime)
    pos: list[float] = field(default_factory=_triple)
    vel: list[float] = field(default_factory=_triple)
    pdop: float = 0.0
    sigma_pos: float = 0.0
    sigma_vel: float = 0.0
    sat_num: int = 0


@dataclass
class PPResult:
    """Point positioning and velocity result with precision indicators."""

    time: GpsTime = field(default_factory=GpsTime)
    position: list[float] = field(default_factory=_triple)
    velocity: list[float] = field(default_factory=_triple)
    rcv_clk_oft: list[float] = field(default_factory=_pair)
    rcv_clk_sft: float = 0.0
    pdop: float = 999.9
    sigma_pos: float = 999.9
    sigma_vel: float = 999.9
    gps_sat_num: int = 0
    bds_sat_num: int = 0
    all_sat_num: int = 0
    is_success: bool = False