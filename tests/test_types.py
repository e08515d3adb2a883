import pytest

from gnssrtk.types import (
    FG1_BDS,
    FG1_GPS,
    FG2_GPS,
    FG3_BDS,
    PI,
    SECONDS_PER_WEEK,
    EpochObservation,
    GnssSystem,
    GpsTime,
    MwGf,
    PPResult,
    SatMidResult,
    SatObservation,
    SdEpochObservation,
    SdSatObservation,
)


def test_gps_frequencies():
    f1, f2 = GnssSystem.GPS.frequencies()
    assert f1 == 1575.42e6
    assert (f1, f2) == (FG1_GPS, FG2_GPS)


def test_bds_frequencies_use_b1_and_b3():
    assert GnssSystem.BDS.frequencies() == (FG1_BDS, FG3_BDS)
    assert FG3_BDS == 1268.520e6


@pytest.mark.parametrize(
    "system",
    [GnssSystem.UNKS, GnssSystem.GLONASS, GnssSystem.GALILEO, GnssSystem.QZSS],
)
def test_unsupported_system_frequencies(system):
    with pytest.raises(ValueError):
        system.frequencies()


def test_seconds_since_one_week():
    assert GpsTime(1, 0.0).seconds_since(GpsTime(0, 0.0)) == SECONDS_PER_WEEK


def test_seconds_since_is_antisymmetric():
    a = GpsTime(2100, 345600.5)
    b = GpsTime(2099, 604799.0)
    assert a.seconds_since(b) == pytest.approx(-b.seconds_since(a))
    assert a.seconds_since(a) == 0


def test_epoch_pads_parallel_lists():
    epoch = EpochObservation(sat_obs=[SatObservation(prn=k) for k in (3, 7, 12)])
    assert epoch.sat_num == 3
    assert len(epoch.sat_pvt) == 3
    assert len(epoch.com_obs) == 3
    assert all(not pvt.valid for pvt in epoch.sat_pvt)
    assert all(c.n == 0 for c in epoch.com_obs)


def test_epoch_keeps_given_combinations():
    combo = MwGf(prn=5, mw=1.5)
    epoch = EpochObservation(sat_obs=[SatObservation(), SatObservation()], com_obs=[combo])
    assert epoch.com_obs[0] is combo
    assert len(epoch.com_obs) == 2


def test_sd_epoch_pads_combinations():
    sd = SdEpochObservation(sd_sat_obs=[SdSatObservation(), SdSatObservation()])
    assert sd.sat_num == 2
    assert len(sd.sd_c_obs) == 2


def test_defaults():
    assert SatMidResult().elevation == PI / 2.0
    assert SatObservation().valid is True
    assert SdSatObservation().valid is None
    result = PPResult()
    assert result.pdop == 999.9
    assert result.sigma_pos == 999.9
    assert result.is_success is False


def test_default_lists_are_independent():
    a = SatObservation()
    b = SatObservation()
    a.p[0] = 20000000.0
    assert b.p == [0.0, 0.0]