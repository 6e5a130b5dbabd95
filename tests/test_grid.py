import numpy as np
import pytest

from conftest import dms
from common.types import GeographicPosition, GridZone, Hemisphere
from geospatial.coordinate_models import EllipsoidModel
from geospatial.grid import (
    GridConversionError,
    GridCoordinateMapper,
    geographic_to_grid,
    grid_to_geographic,
)
from geospatial.transverse_mercator import geographic_to_tm_sphere

INT24 = (6378388.0, 0.006722670022)
WGS84_DMA = (6378137.0, 0.006694379990)


@pytest.mark.parametrize(
    "lat, lon, label, northing, easting",
    [
        (dms(73), dms(45), "38N", 8100702.90, 500000.00),
        (dms(72, 4, 32.110), dms(-113, 54, 43.321), "12N", 8000000.00, 400000.00),
    ],
)
def test_utm_forward_fixtures(lat, lon, label, northing, easting):
    coord = geographic_to_grid(*INT24, lat, lon)
    assert coord.label == label
    assert coord.northing == pytest.approx(northing, abs=0.02)
    assert coord.easting == pytest.approx(easting, abs=0.02)


def test_utm_forward_into_requested_zone():
    coord = geographic_to_grid(*INT24, dms(72, 4, 32.110), dms(-113, 54, 43.321), zone=11)
    assert coord.label == "11N"
    assert coord.northing == pytest.approx(8000301.04, abs=0.02)
    assert coord.easting == pytest.approx(606036.97, abs=0.02)


@pytest.mark.parametrize(
    "lat, lon, zone, label, northing, easting",
    [
        (dms(84, 17, 14.042), dms(-132, 14, 52.761), None, "NP", 2426773.60, 1530125.78),
        (dms(73), dms(44), GridZone.UPS_NORTH, "NP", 632668.43, 3320416.75),
        (dms(-87, 17, 14.400), dms(132, 14, 52.303), None, "SP", 1797474.90, 2222979.47),
    ],
)
def test_ups_forward_fixtures(lat, lon, zone, label, northing, easting):
    coord = geographic_to_grid(*WGS84_DMA, lat, lon, zone=zone)
    assert coord.label == label
    assert coord.northing == pytest.approx(northing, abs=0.01)
    assert coord.easting == pytest.approx(easting, abs=0.01)


@pytest.mark.parametrize(
    "ellipsoid, zone, hemisphere, northing, easting, lat_deg, lon_deg",
    [
        (INT24, 47, Hemisphere.NORTH, 3322824.08, 789411.59, 30.001802441, 101.999945686),
        (INT24, 30, Hemisphere.SOUTH, 4000000.00, 700000.00, -54.108053260, 0.059359731),
        (WGS84_DMA, GridZone.UPS_SOUTH, None, 1500000.0, 2500000.0, -83.637317561, 135.0),
    ],
)
def test_inverse_fixtures(ellipsoid, zone, hemisphere, northing, easting, lat_deg, lon_deg):
    position = grid_to_geographic(*ellipsoid, zone, hemisphere, northing, easting)
    lat, lon = position.to_degrees()
    assert lat == pytest.approx(lat_deg, abs=1e-8)
    assert lon == pytest.approx(lon_deg, abs=1e-8)


def test_invalid_latitude_fails():
    assert geographic_to_grid(*WGS84_DMA, np.radians(95.0), 0.0) is None


@pytest.mark.parametrize(
    "zone, hemisphere",
    [(0, Hemisphere.NORTH), (61, Hemisphere.SOUTH), (12, None), (None, Hemisphere.NORTH)],
)
def test_invalid_inverse_zone_fails(zone, hemisphere):
    assert grid_to_geographic(*WGS84_DMA, zone, hemisphere, 5000000.0, 500000.0) is None


def test_non_finite_result_fails():
    mapper = GridCoordinateMapper()
    zone = GridZone.utm(31)
    position = GeographicPosition(0.0, zone.central_meridian + np.pi / 2)
    assert mapper.geographic_to_grid(position, zone=zone) is None


def test_forced_utm_zone_at_pole_fails():
    mapper = GridCoordinateMapper()
    pole = GeographicPosition(np.pi / 2, 0.0)
    assert mapper.geographic_to_grid(pole, zone=31) is None
    assert mapper.geographic_to_grid(pole, utm_only=True) is None
    # The cap itself is fine
    assert mapper.geographic_to_grid(pole).label == "NP"


@pytest.mark.parametrize("lon", [float("inf"), float("nan")])
def test_non_finite_longitude_fails(lon):
    assert geographic_to_grid(*WGS84_DMA, 0.1, lon) is None
    with pytest.raises(GridConversionError):
        GridCoordinateMapper(strict_mode=True).geographic_to_grid(GeographicPosition(0.1, lon))


def test_strict_mode_raises():
    mapper = GridCoordinateMapper(strict_mode=True)
    with pytest.raises(GridConversionError):
        mapper.geographic_to_grid(GeographicPosition.from_degrees(95.0, 0.0))
    with pytest.raises(ValueError):
        mapper.grid_to_geographic(0, Hemisphere.NORTH, 0.0, 500000.0)


def test_convergence_and_scale_are_populated():
    mapper = GridCoordinateMapper()
    utm = mapper.geographic_to_grid(GeographicPosition.from_degrees(52.0, 14.0))
    ups = mapper.geographic_to_grid(GeographicPosition.from_degrees(-88.0, 60.0))
    for coord in (utm, ups):
        assert coord.grid_convergence_rad is not None
        assert coord.point_scale is not None
    assert utm.grid_convergence_rad < 0  # west of the zone 33 meridian
    assert utm.point_scale == pytest.approx(0.9996, abs=1e-3)
    assert ups.grid_convergence_rad == pytest.approx(-np.radians(60.0))


def test_hemisphere_override_moves_false_northing():
    mapper = GridCoordinateMapper()
    position = GeographicPosition.from_degrees(1.0, 9.0)
    north = mapper.geographic_to_grid(position)
    south = mapper.geographic_to_grid(position, hemisphere=Hemisphere.SOUTH)
    assert south.label == "32S"
    assert south.northing - north.northing == pytest.approx(10000000.0)
    assert south.easting == north.easting


def test_random_round_trip():
    mapper = GridCoordinateMapper()
    rng = np.random.default_rng(20240611)
    lats = rng.uniform(-90.0, 90.0, 500)
    lons = rng.uniform(-180.0, 180.0, 500)
    for lat_deg, lon_deg in zip(lats, lons):
        position = GeographicPosition.from_degrees(lat_deg, lon_deg)
        back = mapper.to_geographic(mapper.geographic_to_grid(position))
        assert back.latitude == pytest.approx(position.latitude, abs=1e-9)
        assert back.longitude == pytest.approx(position.longitude, abs=1e-9)


def test_sphere_branch():
    sphere = EllipsoidModel.sphere(6371000.0)
    mapper = GridCoordinateMapper(sphere)
    lat, lon = np.radians(52.0), np.radians(13.0)
    coord = mapper.geographic_to_grid(GeographicPosition(lat, lon))
    assert coord.label == "33N"
    assert (coord.northing, coord.easting) == pytest.approx(
        geographic_to_tm_sphere(6371000.0, 0.9996, np.radians(15.0), 0.0, 500000.0, lat, lon)
    )
    back = mapper.to_geographic(coord)
    assert back.latitude == pytest.approx(lat, abs=1e-12)
    assert back.longitude == pytest.approx(lon, abs=1e-12)

    polar = mapper.geographic_to_grid(GeographicPosition.from_degrees(89.0, 45.0))
    assert polar.label == "NP"
    assert mapper.to_geographic(polar).to_degrees() == pytest.approx((89.0, 45.0))


def test_inverse_longitude_is_not_wrapped():
    mapper = GridCoordinateMapper()
    # Far east of zone 60's meridian, past the antimeridian
    position = mapper.grid_to_geographic(60, Hemisphere.NORTH, 0.0, 900000.0)
    assert np.degrees(position.longitude) > 180.0
