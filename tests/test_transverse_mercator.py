import numpy as np
import pytest

from conftest import dms
from common.constants import GridConstants
from geospatial.transverse_mercator import (
    geographic_to_tm,
    geographic_to_tm_sphere,
    geographic_to_tm_with_convergence_and_scale,
    tm_convergence_and_scale_sphere,
    tm_to_geographic,
    tm_to_geographic_sphere,
)

K0 = 0.9996
FE = 500000.0


def cm(zone):
    return GridConstants.central_meridian(zone)


@pytest.mark.parametrize(
    "zone, lat, lon, northing, easting",
    [
        # DMA TM 8358.2 Table 2-11
        (38, dms(73), dms(45), 8100702.90, 500000.00),
        (12, dms(72, 4, 32.110), dms(-113, 54, 43.321), 8000000.00, 400000.00),
        (11, dms(72, 4, 32.110), dms(-113, 54, 43.321), 8000301.04, 606036.97),
    ],
)
def test_forward_reproduces_dma_table(int24, zone, lat, lon, northing, easting):
    n, e = geographic_to_tm(int24.a, int24.e2, K0, cm(zone), 0.0, FE, lat, lon)
    assert n == pytest.approx(northing, abs=0.02)
    assert e == pytest.approx(easting, abs=0.02)


def test_inverse_on_central_meridian(int24):
    lat, lon = tm_to_geographic(int24.a, int24.e2, K0, cm(43), 0.0, FE, 9000000.0, 500000.0)
    assert np.degrees(lat) == pytest.approx(81.058468479, abs=1e-8)
    assert np.degrees(lon) == pytest.approx(75.0, abs=1e-12)


@pytest.mark.parametrize(
    "fn, zone_a, n_a, e_a, zone_b, n_b, e_b",
    [
        # Same point expressed in two adjacent zones (Table 2-11)
        (0.0, 48, 3322824.35, 210577.93, 47, 3322824.08, 789411.59),
        (0.0, 31, 1000000.00, 200000.00, 30, 1000491.75, 859739.88),
        (10000000.0, 30, 4000000.00, 700000.00, 31, 4000329.42, 307758.89),
    ],
)
def test_zone_to_zone_transfer(int24, fn, zone_a, n_a, e_a, zone_b, n_b, e_b):
    lat, lon = tm_to_geographic(int24.a, int24.e2, K0, cm(zone_a), fn, FE, n_a, e_a)
    n, e = geographic_to_tm(int24.a, int24.e2, K0, cm(zone_b), fn, FE, lat, lon)
    assert n == pytest.approx(n_b, abs=0.02)
    assert e == pytest.approx(e_b, abs=0.02)


def test_round_trip_wgs84_within_zone():
    a, e2 = GridConstants.WGS84_SEMI_MAJOR_AXIS.value, 0.00669437999014
    lon_mer = cm(33)
    for lat_deg in (-79.5, -45.0, -0.5, 0.0, 12.0, 60.0, 83.9):
        for dlon_deg in (-3.5, -1.0, 0.0, 2.0, 3.5):
            lat = np.radians(lat_deg)
            lon = lon_mer + np.radians(dlon_deg)
            n, e = geographic_to_tm(a, e2, K0, lon_mer, 0.0, FE, lat, lon)
            lat2, lon2 = tm_to_geographic(a, e2, K0, lon_mer, 0.0, FE, n, e)
            assert lat2 == pytest.approx(lat, abs=1e-11)
            assert lon2 == pytest.approx(lon, abs=1e-11)


def test_forward_accepts_arrays(int24):
    lats = np.radians([10.0, 30.0, 50.0])
    lons = np.radians([100.0, 102.0, 104.0])
    n, e = geographic_to_tm(int24.a, int24.e2, K0, cm(48), 0.0, FE, lats, lons)
    assert n.shape == (3,)
    for i in range(3):
        n_i, e_i = geographic_to_tm(int24.a, int24.e2, K0, cm(48), 0.0, FE, lats[i], lons[i])
        assert n[i] == pytest.approx(n_i, abs=1e-9)
        assert e[i] == pytest.approx(e_i, abs=1e-9)


def test_scalar_input_gives_python_floats(int24):
    n, e = geographic_to_tm(int24.a, int24.e2, K0, cm(38), 0.0, FE, 0.5, 0.8)
    assert isinstance(n, float) and isinstance(e, float)


def test_zero_eccentricity_matches_sphere_formulas():
    R = 6371000.0
    lat, lon = np.radians(41.0), np.radians(14.0)
    lon_mer = np.radians(15.0)
    assert geographic_to_tm(R, 0.0, K0, lon_mer, 0.0, FE, lat, lon) == pytest.approx(
        geographic_to_tm_sphere(R, K0, lon_mer, 0.0, FE, lat, lon), abs=1e-6
    )


def test_sphere_round_trip_is_exact():
    R = 6371000.0
    lon_mer = np.radians(-75.0)
    for lat_deg, lon_deg in [(0.0, -75.0), (45.0, -70.0), (-60.0, -85.0), (89.0, -30.0)]:
        lat, lon = np.radians(lat_deg), np.radians(lon_deg)
        n, e = geographic_to_tm_sphere(R, 1.0, lon_mer, 0.0, 0.0, lat, lon)
        lat2, lon2 = tm_to_geographic_sphere(R, 1.0, lon_mer, 0.0, 0.0, n, e)
        assert lat2 == pytest.approx(lat, abs=1e-13)
        assert lon2 == pytest.approx(lon, abs=1e-13)


def test_convergence_and_scale_on_central_meridian(int24):
    lat = np.radians(40.0)
    n, e, gamma, k = geographic_to_tm_with_convergence_and_scale(
        int24.a, int24.e2, K0, cm(38), 0.0, FE, lat, cm(38)
    )
    plain_n, plain_e = geographic_to_tm(int24.a, int24.e2, K0, cm(38), 0.0, FE, lat, cm(38))
    assert (n, e) == pytest.approx((plain_n, plain_e), abs=1e-9)
    assert gamma == pytest.approx(0.0, abs=1e-15)
    assert k == pytest.approx(K0, rel=1e-12)


def test_convergence_and_scale_off_meridian(int24):
    lat = np.radians(50.0)
    lon = cm(32) + np.radians(3.0)
    _, _, gamma, k = geographic_to_tm_with_convergence_and_scale(
        int24.a, int24.e2, K0, cm(32), 0.0, FE, lat, lon
    )
    gamma_sphere, k_sphere = tm_convergence_and_scale_sphere(K0, cm(32), lat, lon)

    # East of the meridian in the north: grid north lies east of true north
    assert gamma > 0
    assert gamma == pytest.approx(gamma_sphere, abs=1e-4)
    assert k > K0
    assert k == pytest.approx(k_sphere, abs=2e-5)


def test_singular_line_is_not_finite(int24):
    lon_mer = cm(31)
    n, e = geographic_to_tm(int24.a, int24.e2, K0, lon_mer, 0.0, FE, 0.0, lon_mer + np.pi / 2)
    assert not np.isfinite(e)
