# gnssrtk

Building blocks for GPS and BDS positioning. The package covers time-system
conversions, small vector helpers and the Hopfield troposphere model. It also
provides dual-frequency outlier and cycle-slip detection, between-station
single differences, and least-squares single-point positioning (SPP) and
velocity (SPV).

## Installation

```
pip install .
```

To run the test suite, install the test extra first:

```
pip install ".[test]"
pytest
```

## Modules

### `gnssrtk.types`

The data model and physical constants:

- `GnssSystem` is an integer enum with the members `UNKS`, `GPS`, `BDS`,
  `GLONASS`, `GALILEO` and `QZSS`. `frequencies()` returns the two carrier
  frequencies used for dual-frequency combinations: L1/L2 for GPS and B1/B3
  for BDS. Any other system raises `ValueError`.
- `GpsTime` holds `week` and `sec_of_week`. `seconds_since(other)` gives the
  difference in seconds.
- `Xyz`, `CommonTime` and `MjdTime` are the other coordinate and time
  records.
- `SatObservation`, `SatMidResult`, `MwGf` and `EpochObservation` describe
  one epoch of observations.
  - `EpochObservation` pads `sat_pvt` and `com_obs` so that they have one
    entry per observation.
  - `sat_num` counts the observations.
- `Ephemeris` is a broadcast ephemeris record.
- `SdSatObservation` and `SdEpochObservation` hold single-difference data.
- `PositionResult` and `PPResult` hold solution results.

### `gnssrtk.timesys`

Conversions between calendar time, Modified Julian Date and GPS time:

- `common_to_mjd` and `mjd_to_common`
- `mjd_to_gps` and `gps_to_mjd`
- `common_to_gps` and `gps_to_common`

### `gnssrtk.vectors`

`vector_add`, `vector_sub`, `dot` and `cross` work on plain sequences of
floats. Mismatched dimensions raise `ValueError`, and so do inputs to `cross`
that are not 3-vectors.

### `gnssrtk.troposphere`

- `hopfield(height, elevation)` gives the tropospheric delay in metres.
  `height` is in metres and `elevation` is in degrees. Heights outside
  [-100 m, 100 km] give 0.
- `detect_outliers(epoch)` does the following for each observation:
  - It marks the observation invalid when a dual-frequency pseudorange or
    phase is missing.
  - For GPS and BDS it screens the observation against the stored
    Melbourne-Wübbena and geometry-free values.
  - It updates the matching `MwGf` entry and sets the ionosphere-free
    pseudorange `pif` for valid satellites.

### `gnssrtk.single_difference`

- `form_sd_epoch_obs(base, rover, previous=None)` pairs the satellites that
  both stations track and returns rover-minus-base differences.
  - Each paired satellite must have valid observations and valid satellite
    results at both stations.
  - Its half-cycle flags must be non-zero.
  - When `previous` is given, the MW/GF combination state of each satellite
    is carried over from it.
- `detect_cycle_slips(sd_obs)` screens the single differences in the same
  way, and sets `valid` for each satellite. Satellites of systems other than
  GPS and BDS keep `valid` as `None`.

### `gnssrtk.positioning`

- `spp(epoch, gps_eph, bds_eph, compute_sat_pvt)` runs `detect_outliers` and
  then iterates a least-squares solution for position and receiver clock.
  - It solves one clock per system in use.
  - It returns a `(PositionResult, PPResult)` pair.
  - `compute_sat_pvt(epoch, gps_eph, bds_eph, position)` must return one
    `SatMidResult` per observation for the receiver position given as an
    `Xyz`. `spp` stores these results in `epoch.sat_pvt`.
  - `bds_eph` is indexed by PRN - 1 and supplies the BDS group delay.
- `spv(epoch, position)` solves the receiver velocity from Doppler
  observations, using the satellite results already in `epoch.sat_pvt`. It
  returns `(velocity, sigma)`.
- Both functions raise `PositioningError` in these cases:
  - too few usable satellites;
  - a singular normal matrix;
  - for `spp`, an iteration that does not converge.

## Example

```python
from gnssrtk.types import CommonTime
from gnssrtk.timesys import common_to_gps, gps_to_common

t = common_to_gps(CommonTime(2024, 9, 23, 12, 0, 0.0))
print(t.week, t.sec_of_week)
print(gps_to_common(t))
```

## What the package does not do

- It does not decode receiver binary data streams or files.
- It does not read observations from network connections.
- It does not compute satellite orbits and clocks from broadcast ephemerides.
  The caller supplies that computation to `spp` as `compute_sat_pvt`.
- It does not form double differences.
- It does not compute RTK float solutions or resolve integer ambiguities.
- It has no command-line program.