"""
UTM/UPS Grid Coordinate Mapper.

Converts between geodetic positions and Universal Transverse Mercator /
Universal Polar Stereographic grid coordinates.

Failure Model
-------------
Invalid input (latitude outside ±90°, a non-finite longitude, an unknown
zone, a UTM zone without a hemisphere) and non-finite projection results,
convergence and scale included, are reported as ``None``.
A mapper created with ``strict_mode=True`` raises `GridConversionError`
instead. No partial output is ever returned.

Grid Parameters
---------------
UTM: k0 = 0.9996, FE = 500 000 m, FN = 0 (north) or 10 000 000 m (south).
UPS: k0 = 0.994, FN = FE = 2 000 000 m.

Examples
--------
>>> mapper = GridCoordinateMapper()
>>> coord = mapper.geographic_to_grid(GeographicPosition.from_degrees(52.0, 13.0))
>>> coord.label
'33N'
"""

from typing import Optional, Tuple
import numpy as np

from common.constants import GridConstants
from common.logging_config import get_logger
from common.types import GeographicPosition, GridCoordinate, GridZone, Hemisphere
from geospatial.coordinate_models import EllipsoidModel, WGS84Ellipsoid
from geospatial.polar_stereographic import (
    geographic_to_ps_sphere,
    geographic_to_ps_with_convergence_and_scale,
    ps_convergence_and_scale_sphere,
    ps_to_geographic,
    ps_to_geographic_sphere,
)
from geospatial.transverse_mercator import (
    geographic_to_tm_sphere,
    geographic_to_tm_with_convergence_and_scale,
    tm_convergence_and_scale_sphere,
    tm_to_geographic,
    tm_to_geographic_sphere,
)
from geospatial.zones import ZoneRequest, ZoneSelection, select_zone, validate_zone

logger = get_logger(__name__)


class GridConversionError(ValueError):
    """Raised by a strict mapper when a conversion cannot be performed."""


def _utm_parameters(zone: GridZone, hemisphere: Hemisphere) -> Tuple[float, float, float, float]:
    """(k0, central meridian, FN, FE) of a UTM zone."""
    return (
        GridConstants.UTM_SCALE_FACTOR.value,
        zone.central_meridian,
        GridConstants.utm_false_northing(hemisphere is Hemisphere.NORTH),
        GridConstants.UTM_FALSE_EASTING.value,
    )


def _ups_parameters() -> Tuple[float, float, float]:
    """(k0, FN, FE) of both UPS caps."""
    return (
        GridConstants.UPS_SCALE_FACTOR.value,
        GridConstants.UPS_FALSE_NORTHING.value,
        GridConstants.UPS_FALSE_EASTING.value,
    )


class GridCoordinateMapper:
    """Forward and inverse UTM/UPS conversion on one ellipsoid.

    An ellipsoid with ``e2 == 0`` is treated as a sphere and uses the
    closed-form spherical projections.

    Parameters
    ----------
    ellipsoid : EllipsoidModel
        Reference surface (default: WGS84).
    strict_mode : bool
        If True, raise `GridConversionError` instead of returning None.
    """

    def __init__(
        self,
        ellipsoid: EllipsoidModel = WGS84Ellipsoid,
        strict_mode: bool = False
    ):
        self.ellipsoid = ellipsoid
        self.strict_mode = strict_mode
        self._logger = get_logger("GridCoordinateMapper")

    def _fail(self, reason: str) -> None:
        if self.strict_mode:
            self._logger.warning(reason)
            raise GridConversionError(reason)
        self._logger.debug(reason)
        return None

    def geographic_to_grid(
        self,
        position: GeographicPosition,
        zone: ZoneRequest = None,
        hemisphere: Optional[Hemisphere] = None,
        utm_only: bool = False
    ) -> Optional[GridCoordinate]:
        """Convert a geodetic position to grid coordinates.

        Parameters
        ----------
        position : GeographicPosition
            Latitude and longitude in radians. Longitude is wrapped.
        zone : GridZone, int or None
            Zone to project into. None selects UTM or UPS by latitude.
        hemisphere : Hemisphere or None
            UTM hemisphere. None uses the sign of the latitude.
        utm_only : bool
            With ``zone=None``, force a UTM zone even inside the UPS caps.

        Returns
        -------
        GridCoordinate or None
            The grid coordinate with resolved zone and hemisphere, grid
            convergence and point scale; None on failure.
        """
        selection = select_zone(position.latitude, position.longitude, zone, hemisphere, utm_only)
        if selection is None:
            return self._fail(
                f"Position ({position.latitude}, {position.longitude}) rad is not a valid "
                f"geodetic position"
            )

        northing, easting, gamma, k = self._project(selection, position.latitude)

        # Convergence is undefined where a UTM zone is forced at a pole
        if not np.all(np.isfinite([northing, easting, gamma, k])):
            return self._fail(
                f"Position ({position.latitude}, {position.longitude}) rad has no finite "
                f"image in zone {selection.zone}"
            )

        return GridCoordinate(
            northing=northing,
            easting=easting,
            zone=selection.zone,
            hemisphere=selection.hemisphere,
            grid_convergence_rad=gamma,
            point_scale=k,
        )

    def _project(self, selection: ZoneSelection, lat: float) -> Tuple[float, float, float, float]:
        ell = self.ellipsoid
        lon = selection.longitude

        if selection.zone.is_ups:
            k0, fn, fe = _ups_parameters()
            hemi = selection.hemisphere
            if ell.is_sphere:
                northing, easting = geographic_to_ps_sphere(ell.a, k0, hemi, fn, fe, lat, lon)
                gamma, k = ps_convergence_and_scale_sphere(k0, hemi, lat, lon)
                return northing, easting, gamma, k
            return geographic_to_ps_with_convergence_and_scale(ell.a, ell.e2, k0, hemi, fn, fe, lat, lon)

        k0, lon_mer, fn, fe = _utm_parameters(selection.zone, selection.hemisphere)
        if ell.is_sphere:
            northing, easting = geographic_to_tm_sphere(ell.a, k0, lon_mer, fn, fe, lat, lon)
            gamma, k = tm_convergence_and_scale_sphere(k0, lon_mer, lat, lon)
            return northing, easting, gamma, k
        return geographic_to_tm_with_convergence_and_scale(ell.a, ell.e2, k0, lon_mer, fn, fe, lat, lon)

    def grid_to_geographic(
        self,
        zone: ZoneRequest,
        hemisphere: Optional[Hemisphere],
        northing: float,
        easting: float
    ) -> Optional[GeographicPosition]:
        """Convert grid coordinates back to a geodetic position.

        Parameters
        ----------
        zone : GridZone or int
            Explicit zone: a UPS cap or a UTM zone 1..60.
        hemisphere : Hemisphere or None
            Required for UTM zones; ignored for UPS caps.
        northing, easting : float
            Grid coordinates in meters.

        Returns
        -------
        GeographicPosition or None
            Latitude and longitude in radians; None on failure.
        """
        resolved = validate_zone(zone, hemisphere)
        if resolved is None:
            return self._fail(f"Invalid zone {zone!r} / hemisphere {hemisphere!r} for inverse conversion")
        grid_zone, hemi = resolved

        ell = self.ellipsoid
        if grid_zone.is_ups:
            k0, fn, fe = _ups_parameters()
            if ell.is_sphere:
                lat, lon = ps_to_geographic_sphere(ell.a, k0, hemi, fn, fe, northing, easting)
            else:
                lat, lon = ps_to_geographic(ell.a, ell.e2, k0, hemi, fn, fe, northing, easting)
        else:
            k0, lon_mer, fn, fe = _utm_parameters(grid_zone, hemi)
            if ell.is_sphere:
                lat, lon = tm_to_geographic_sphere(ell.a, k0, lon_mer, fn, fe, northing, easting)
            else:
                lat, lon = tm_to_geographic(ell.a, ell.e2, k0, lon_mer, fn, fe, northing, easting)

        if not np.all(np.isfinite([lat, lon])):
            return self._fail(
                f"Grid coordinate N={northing}, E={easting} in zone {grid_zone} has no "
                f"finite geodetic position"
            )
        return GeographicPosition(latitude=float(lat), longitude=float(lon))

    def to_geographic(self, coordinate: GridCoordinate) -> Optional[GeographicPosition]:
        """Inverse conversion of a `GridCoordinate`."""
        return self.grid_to_geographic(
            coordinate.zone, coordinate.hemisphere, coordinate.northing, coordinate.easting
        )


def geographic_to_grid(
    a: float,
    e2: float,
    lat_rad: float,
    lon_rad: float,
    zone: ZoneRequest = None,
    hemisphere: Optional[Hemisphere] = None,
    utm_only: bool = False
) -> Optional[GridCoordinate]:
    """Convert geodetic coordinates to UTM/UPS on the ellipsoid (a, e2).

    See `GridCoordinateMapper.geographic_to_grid`. Returns None on failure.
    """
    mapper = GridCoordinateMapper(EllipsoidModel(a=a, e2=e2))
    return mapper.geographic_to_grid(
        GeographicPosition(latitude=lat_rad, longitude=lon_rad), zone, hemisphere, utm_only
    )


def grid_to_geographic(
    a: float,
    e2: float,
    zone: ZoneRequest,
    hemisphere: Optional[Hemisphere],
    northing: float,
    easting: float
) -> Optional[GeographicPosition]:
    """Convert UTM/UPS coordinates on the ellipsoid (a, e2) to geodetic.

    See `GridCoordinateMapper.grid_to_geographic`. Returns None on failure.
    """
    mapper = GridCoordinateMapper(EllipsoidModel(a=a, e2=e2))
    return mapper.grid_to_geographic(zone, hemisphere, northing, easting)
