import numpy as np
import pytest

from common.types import GridZone, Hemisphere, normalize_longitude
from geospatial.zones import auto_zone_kind, select_zone, utm_zone_number, validate_zone


def rad(*values):
    return [float(np.radians(v)) for v in values]


@pytest.mark.parametrize(
    "lat_deg, lon_deg, zone",
    [
        (0.0, -177.0, 1),
        (0.0, -173.0, 2),
        (52.0, 13.0, 33),
        (0.0, 179.9, 60),
        # Norway
        (60.0, 5.0, 32),
        (56.0, 3.0, 32),
        (64.0, 5.0, 31),
        (60.0, 2.9, 31),
        # Svalbard
        (75.0, 10.0, 33),
        (75.0, 8.9, 31),
        (75.0, 20.0, 33),
        (75.0, 25.0, 35),
        (75.0, 40.0, 37),
        (75.0, 42.5, 38),
        (71.9, 10.0, 32),
        (75.0, -1.0, 30),
    ],
)
def test_utm_zone_number(lat_deg, lon_deg, zone):
    lat, lon = rad(lat_deg, lon_deg)
    assert utm_zone_number(lat, normalize_longitude(lon)) == zone


def test_ups_boundaries():
    assert select_zone(*rad(84.0, 10.0)).zone == GridZone.UPS_NORTH
    assert select_zone(*rad(83.999, 10.0)).zone.is_utm
    assert select_zone(*rad(-80.0, 10.0)).zone.is_utm
    assert select_zone(*rad(-80.001, 10.0)).zone == GridZone.UPS_SOUTH
    assert auto_zone_kind(np.pi / 2) is GridZone.UPS_NORTH.kind


def test_ups_forces_hemisphere():
    selection = select_zone(*rad(-85.0, 10.0), hemisphere=Hemisphere.NORTH)
    assert selection.zone == GridZone.UPS_SOUTH
    assert selection.hemisphere is Hemisphere.SOUTH


def test_utm_only_in_polar_cap():
    selection = select_zone(*rad(86.0, 10.0), utm_only=True)
    assert selection.zone == GridZone.utm(32)
    assert selection.hemisphere is Hemisphere.NORTH


def test_hemisphere_from_latitude_sign():
    assert select_zone(*rad(-0.001, 10.0)).hemisphere is Hemisphere.SOUTH
    assert select_zone(*rad(0.0, 10.0)).hemisphere is Hemisphere.NORTH


def test_caller_zone_and_hemisphere_are_kept():
    # A valid zone overrides the exceptions and the latitude sign
    selection = select_zone(*rad(60.0, 5.0), zone=31, hemisphere=Hemisphere.SOUTH)
    assert selection.zone == GridZone.utm(31)
    assert selection.hemisphere is Hemisphere.SOUTH

    selection = select_zone(*rad(88.0, 5.0), zone=GridZone.utm(31))
    assert selection.zone == GridZone.utm(31)


@pytest.mark.parametrize("bad_zone", [0, 61, -4])
def test_out_of_range_zone_request_computes_utm_zone(bad_zone):
    assert select_zone(*rad(52.0, 13.0), zone=bad_zone).zone == GridZone.utm(33)
    # Even inside a polar cap
    assert select_zone(*rad(88.0, 13.0), zone=bad_zone).zone == GridZone.utm(33)


def test_longitude_wrap():
    wrapped = select_zone(*rad(60.0, 190.0))
    direct = select_zone(*rad(60.0, -170.0))
    assert wrapped.zone == direct.zone == GridZone.utm(2)
    assert wrapped.longitude == pytest.approx(np.radians(-170.0), abs=1e-12)

    assert normalize_longitude(-np.pi) == pytest.approx(np.pi)
    assert normalize_longitude(np.pi) == np.pi
    assert normalize_longitude(1.5 * np.pi) == pytest.approx(-0.5 * np.pi)
    assert normalize_longitude(0.25) == 0.25


@pytest.mark.parametrize("lat_deg", [95.0, -90.0001, float("nan")])
def test_invalid_latitude(lat_deg):
    assert select_zone(*rad(lat_deg, 0.0)) is None


def test_poles_are_valid():
    assert select_zone(np.pi / 2, 0.0).zone == GridZone.UPS_NORTH
    assert select_zone(-np.pi / 2, 0.0).zone == GridZone.UPS_SOUTH


def test_validate_zone():
    assert validate_zone(17, Hemisphere.SOUTH) == (GridZone.utm(17), Hemisphere.SOUTH)
    assert validate_zone(GridZone.utm(60), Hemisphere.NORTH) == (GridZone.utm(60), Hemisphere.NORTH)
    assert validate_zone(GridZone.UPS_NORTH, None) == (GridZone.UPS_NORTH, Hemisphere.NORTH)
    assert validate_zone(GridZone.UPS_SOUTH, Hemisphere.NORTH) == (GridZone.UPS_SOUTH, Hemisphere.SOUTH)


@pytest.mark.parametrize(
    "zone, hemisphere",
    [
        (0, Hemisphere.NORTH),
        (61, Hemisphere.NORTH),
        (None, Hemisphere.NORTH),
        ("zone", Hemisphere.NORTH),
        (12, None),
        (12, "N"),
    ],
)
def test_validate_zone_rejects(zone, hemisphere):
    assert validate_zone(zone, hemisphere) is None


def test_grid_zone_construction():
    with pytest.raises(ValueError):
        GridZone.utm(0)
    with pytest.raises(ValueError):
        GridZone.utm(61)
    assert str(GridZone.utm(7)) == "7"
    assert str(GridZone.UPS_NORTH) == "NP"
    assert GridZone.utm(33).central_meridian == pytest.approx(np.radians(15.0))


def test_antimeridian_belongs_to_zone_60():
    assert utm_zone_number(0.0, np.pi) == 60
    # -180° wraps to +180°
    assert select_zone(0.0, -np.pi).zone == GridZone.utm(60)


@pytest.mark.parametrize("k", range(60))
def test_zone_edge_meridian_starts_next_zone(k):
    lon = float(np.radians(-180.0 + 6.0 * k))
    assert utm_zone_number(0.0, lon) == k + 1
    assert utm_zone_number(float(np.radians(-45.0)), lon) == k + 1


@pytest.mark.parametrize(
    "lat_deg, lon_deg, zone",
    [
        (60.0, 12.0, 33),
        (60.0, 3.0, 32),
        (56.0, 12.0, 33),
        (72.0, 10.0, 33),
        (75.0, 0.0, 31),
        (75.0, 9.0, 33),
        (75.0, 21.0, 35),
        (75.0, 33.0, 37),
        (75.0, 42.0, 38),
    ],
)
def test_exception_area_edges(lat_deg, lon_deg, zone):
    assert utm_zone_number(*rad(lat_deg, lon_deg)) == zone


@pytest.mark.parametrize("bad_zone", ["abc", "", object()])
def test_non_numeric_zone_request_computes_utm_zone(bad_zone):
    assert select_zone(*rad(52.0, 13.0), zone=bad_zone).zone == GridZone.utm(33)
    assert select_zone(*rad(-85.0, 13.0), zone=bad_zone).zone == GridZone.utm(33)


@pytest.mark.parametrize("lon", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_longitude(lon):
    assert select_zone(0.1, lon) is None
