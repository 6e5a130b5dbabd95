import numpy as np
import pytest

from conftest import dms
from common.types import Hemisphere
from geospatial.polar_stereographic import (
    geographic_to_ps,
    geographic_to_ps_sphere,
    geographic_to_ps_with_convergence_and_scale,
    ps_convergence_and_scale_sphere,
    ps_to_geographic,
    ps_to_geographic_sphere,
)

K0 = 0.994
FN = FE = 2000000.0
NORTH, SOUTH = Hemisphere.NORTH, Hemisphere.SOUTH


@pytest.mark.parametrize(
    "hemi, lat, lon, northing, easting",
    [
        # DMA TM 8358.2 Table 3-7
        (NORTH, dms(84, 17, 14.042), dms(-132, 14, 52.761), 2426773.60, 1530125.78),
        (NORTH, dms(73), dms(44), 632668.43, 3320416.75),
        (SOUTH, dms(-87, 17, 14.400), dms(132, 14, 52.303), 1797474.90, 2222979.47),
    ],
)
def test_forward_reproduces_dma_table(wgs84_dma, hemi, lat, lon, northing, easting):
    n, e = geographic_to_ps(wgs84_dma.a, wgs84_dma.e2, K0, hemi, FN, FE, lat, lon)
    assert n == pytest.approx(northing, abs=0.01)
    assert e == pytest.approx(easting, abs=0.01)


@pytest.mark.parametrize(
    "hemi, northing, easting, lat_deg, lon_deg",
    [
        (SOUTH, 1500000.0, 2500000.0, -83.637317561, 135.0),
        (NORTH, 2426773.60, 1530125.78, 84.287233859, -132.247989447),
        (NORTH, 632668.43, 3320416.75, 72.999999976, 44.000000031),
    ],
)
def test_inverse_reproduces_dma_table(wgs84_dma, hemi, northing, easting, lat_deg, lon_deg):
    lat, lon = ps_to_geographic(wgs84_dma.a, wgs84_dma.e2, K0, hemi, FN, FE, northing, easting)
    assert np.degrees(lat) == pytest.approx(lat_deg, abs=1e-8)
    assert np.degrees(lon) == pytest.approx(lon_deg, abs=1e-8)


@pytest.mark.parametrize("hemi, pole", [(NORTH, np.pi / 2), (SOUTH, -np.pi / 2)])
def test_pole_maps_to_false_origin(wgs84_dma, hemi, pole):
    n, e = geographic_to_ps(wgs84_dma.a, wgs84_dma.e2, K0, hemi, FN, FE, pole, 1.0)
    assert n == pytest.approx(FN, abs=1e-6)
    assert e == pytest.approx(FE, abs=1e-6)

    lat, lon = ps_to_geographic(wgs84_dma.a, wgs84_dma.e2, K0, hemi, FN, FE, FN, FE)
    assert lat == pole
    assert lon == 0.0


def test_inverse_on_grid_axes(wgs84_dma):
    a, e2 = wgs84_dma.a, wgs84_dma.e2

    # Straight down the grid y axis from the north pole is the 0° meridian
    lat, lon = ps_to_geographic(a, e2, K0, NORTH, FN, FE, FN - 100000.0, FE)
    assert lon == pytest.approx(0.0, abs=1e-15)
    n, e = geographic_to_ps(a, e2, K0, NORTH, FN, FE, lat, lon)
    assert n == pytest.approx(FN - 100000.0, abs=1e-4)

    # Along the grid x axis is 90°E
    lat, lon = ps_to_geographic(a, e2, K0, NORTH, FN, FE, FN, FE + 100000.0)
    assert lon == pytest.approx(np.pi / 2, abs=1e-15)
    n, e = geographic_to_ps(a, e2, K0, NORTH, FN, FE, lat, lon)
    assert e == pytest.approx(FE + 100000.0, abs=1e-4)


def test_ellipsoid_round_trip(wgs84_dma):
    a, e2 = wgs84_dma.a, wgs84_dma.e2
    for hemi, lats in ((NORTH, (84.0, 86.5, 89.9)), (SOUTH, (-80.5, -85.0, -89.0))):
        for lat_deg in lats:
            for lon_deg in (-179.0, -90.0, -12.5, 0.5, 45.0, 170.0):
                lat, lon = np.radians(lat_deg), np.radians(lon_deg)
                n, e = geographic_to_ps(a, e2, K0, hemi, FN, FE, lat, lon)
                lat2, lon2 = ps_to_geographic(a, e2, K0, hemi, FN, FE, n, e)
                assert lat2 == pytest.approx(lat, abs=1e-10)
                assert lon2 == pytest.approx(lon, abs=1e-10)


def test_sphere_round_trip():
    R = 6371000.0
    for hemi, lat_deg in ((NORTH, 70.0), (SOUTH, -65.0)):
        lat, lon = np.radians(lat_deg), np.radians(-37.0)
        n, e = geographic_to_ps_sphere(R, K0, hemi, FN, FE, lat, lon)
        lat2, lon2 = ps_to_geographic_sphere(R, K0, hemi, FN, FE, n, e)
        assert lat2 == pytest.approx(lat, abs=1e-13)
        assert lon2 == pytest.approx(lon, abs=1e-13)


def test_zero_eccentricity_matches_sphere():
    R = 6371000.0
    lat, lon = np.radians(-82.0), np.radians(120.0)
    assert geographic_to_ps(R, 0.0, K0, SOUTH, FN, FE, lat, lon) == pytest.approx(
        geographic_to_ps_sphere(R, K0, SOUTH, FN, FE, lat, lon), abs=1e-6
    )


def test_convergence_and_scale(wgs84_dma):
    a, e2 = wgs84_dma.a, wgs84_dma.e2
    lon = np.radians(30.0)

    *_, gamma_n, k_pole = geographic_to_ps_with_convergence_and_scale(
        a, e2, K0, NORTH, FN, FE, np.pi / 2, lon
    )
    assert gamma_n == pytest.approx(lon)
    assert k_pole == K0

    n, e, gamma_s, k = geographic_to_ps_with_convergence_and_scale(
        a, e2, K0, SOUTH, FN, FE, np.radians(-81.0), lon
    )
    assert (n, e) == pytest.approx(
        geographic_to_ps(a, e2, K0, SOUTH, FN, FE, np.radians(-81.0), lon), abs=1e-9
    )
    assert gamma_s == pytest.approx(-lon)
    # Scale grows away from the pole and stays close to the spherical value
    _, k_sphere = ps_convergence_and_scale_sphere(K0, SOUTH, np.radians(-81.0), lon)
    assert K0 < k < 1.001
    assert k == pytest.approx(k_sphere, abs=1e-4)


def test_rejects_non_hemisphere():
    with pytest.raises(ValueError):
        geographic_to_ps(6378137.0, 0.0066943799901, K0, "N", FN, FE, 1.5, 0.0)
    with pytest.raises(ValueError):
        ps_to_geographic_sphere(6371000.0, K0, None, FN, FE, FN, FE)
