"""
Projection Adapters with Distortion Tracking.

Object wrappers around the Transverse Mercator and Polar Stereographic
formulas, so a projection can be configured once and then used for many
points, compared against PROJ, and analysed for distortion.

Scientific Context
------------------
Domain: Cartography, mathematical geodesy
Model: Conformal projections (TM, PS)

Both projections are conformal, so their Tissot indicatrix is a circle
whose radius is the point scale factor. `compute_tissot_indicatrix`
recovers it numerically from any adapter, which is a useful independent
check on the closed-form scale factors.

Implementation
--------------
Coordinates are computed with this package's own formulas. Each adapter
also describes itself as a PROJ string so that `pyproj` can reproduce the
same projection for interoperability and cross-checking.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
- Tissot, A. (1859). Mémoire sur la représentation des surfaces.
- DMA TM 8358.2 (UTM and UPS grid definitions).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np
from numpy.typing import NDArray

from pyproj import CRS, Transformer

from common.constants import GridConstants
from common.logging_config import get_logger
from common.types import GeographicPosition, GridZone, Hemisphere
from common.units import LengthLike, to_meters, validate_units
from geospatial.coordinate_models import (
    EllipsoidModel,
    WGS84Ellipsoid,
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical
)
from geospatial.polar_stereographic import (
    geographic_to_ps,
    geographic_to_ps_sphere,
    geographic_to_ps_with_convergence_and_scale,
    ps_convergence_and_scale_sphere,
    ps_to_geographic,
    ps_to_geographic_sphere,
)
from geospatial.transverse_mercator import (
    geographic_to_tm,
    geographic_to_tm_sphere,
    geographic_to_tm_with_convergence_and_scale,
    tm_convergence_and_scale_sphere,
    tm_to_geographic,
    tm_to_geographic_sphere,
)
from geospatial.zones import select_zone

logger = get_logger(__name__)


@dataclass
class TissotIndicatrix:
    """Tissot's indicatrix describing local distortion at a point.

    The Tissot indicatrix shows how an infinitesimally small circle
    on the Earth's surface is distorted into an ellipse on the map.

    Attributes
    ----------
    semi_major : float
        Semi-major axis of the distortion ellipse (scale factor).
    semi_minor : float
        Semi-minor axis of the distortion ellipse (scale factor).
    orientation_rad : float
        Orientation of the major axis in radians (from east).
    area_scale : float
        Area distortion factor (h * k where h, k are principal scale factors).
    angular_distortion_rad : float
        Maximum angular distortion in radians.

    Notes
    -----
    For a conformal projection semi_major == semi_minor == point scale.
    """
    semi_major: float  # h: scale along meridian
    semi_minor: float  # k: scale along parallel
    orientation_rad: float
    area_scale: float
    angular_distortion_rad: float

    @property
    def is_conformal(self) -> bool:
        """Check if projection is locally conformal (circle, no angular distortion)."""
        return bool(np.abs(self.semi_major - self.semi_minor) < 1e-6)

    @property
    def is_equal_area(self) -> bool:
        """Check if projection is locally equal-area."""
        return bool(np.abs(self.area_scale - 1.0) < 1e-6)

    @classmethod
    def conformal(cls, k: float) -> 'TissotIndicatrix':
        """Indicatrix of a conformal projection with point scale k."""
        return cls(
            semi_major=k,
            semi_minor=k,
            orientation_rad=0.0,
            area_scale=k * k,
            angular_distortion_rad=0.0
        )


def _is_wgs84(ellipsoid: EllipsoidModel) -> bool:
    return bool(
        ellipsoid.a == WGS84Ellipsoid.a and np.isclose(ellipsoid.e2, WGS84Ellipsoid.e2, rtol=1e-12, atol=0.0)
    )


def ellipsoid_proj4(ellipsoid: EllipsoidModel) -> str:
    """PROJ parameters describing an ellipsoid (or sphere)."""
    if ellipsoid.is_sphere:
        return f"+R={ellipsoid.a!r}"
    return f"+a={ellipsoid.a!r} +es={ellipsoid.e2!r}"


class ProjectionAdapter(ABC):
    """Abstract base class for map projection adapters.

    Projected coordinates are (x, y) = (easting, northing) in meters,
    including any false origin.
    """

    ellipsoid: EllipsoidModel

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the projection."""
        pass

    @property
    @abstractmethod
    def proj4_string(self) -> str:
        """PROJ.4 definition string."""
        pass

    @property
    def preserves_angles(self) -> bool:
        """Whether this is a conformal projection."""
        return True

    @property
    def preserves_area(self) -> bool:
        """Whether this is an equal-area projection."""
        return False

    @abstractmethod
    def to_projected(
        self,
        lat_rad: float,
        lon_rad: float
    ) -> Tuple[float, float]:
        """Transform geodetic coordinates to projected coordinates.

        Parameters
        ----------
        lat_rad, lon_rad : float
            Geodetic coordinates in radians.

        Returns
        -------
        Tuple[float, float]
            (x, y) projected coordinates in meters.
        """
        pass

    @abstractmethod
    def to_geodetic(
        self,
        x: float,
        y: float
    ) -> Tuple[float, float]:
        """Transform projected coordinates to geodetic.

        Parameters
        ----------
        x, y : float
            Projected coordinates in meters.

        Returns
        -------
        Tuple[float, float]
            (lat_rad, lon_rad) geodetic coordinates in radians.
        """
        pass

    @abstractmethod
    def convergence_and_scale(
        self,
        lat_rad: float,
        lon_rad: float
    ) -> Tuple[float, float]:
        """Grid convergence (radians) and point scale factor at a point."""
        pass

    def compute_distortion(
        self,
        lat_rad: float,
        lon_rad: float
    ) -> TissotIndicatrix:
        """Compute local distortion at a point from the exact point scale.

        Parameters
        ----------
        lat_rad, lon_rad : float
            Location in geodetic coordinates (radians).

        Returns
        -------
        TissotIndicatrix
            Local distortion characteristics.
        """
        _, k = self.convergence_and_scale(lat_rad, lon_rad)
        return TissotIndicatrix.conformal(k)

    def to_projected_many(
        self,
        lats_rad: NDArray[np.float64],
        lons_rad: NDArray[np.float64]
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Project arrays point by point. Subclasses may vectorise."""
        lats = np.asarray(lats_rad, dtype=float)
        lons = np.asarray(lons_rad, dtype=float)
        x = np.empty(np.broadcast(lats, lons).shape)
        y = np.empty_like(x)
        for index, (lat, lon) in enumerate(np.broadcast(lats, lons)):
            x.flat[index], y.flat[index] = self.to_projected(lat, lon)
        return x, y

    def to_crs(self) -> CRS:
        """The equivalent pyproj CRS."""
        return CRS.from_proj4(self.proj4_string)

    def geographic_crs(self) -> CRS:
        """Geographic (longitude, latitude) CRS on the same ellipsoid."""
        return CRS.from_proj4(f"+proj=longlat {ellipsoid_proj4(self.ellipsoid)} +no_defs")

    def transformer(self) -> Transformer:
        """pyproj transformer from geographic degrees (lon, lat) to (x, y)."""
        return Transformer.from_crs(self.geographic_crs(), self.to_crs(), always_xy=True)


class TransverseMercator(ProjectionAdapter):
    """Transverse Mercator projection.

    A conformal (angle-preserving) projection suitable for regions
    that extend primarily north-south. This is the basis for UTM.

    Parameters
    ----------
    central_meridian_deg : float
        Central meridian longitude in degrees.
    scale_factor : float
        Scale factor at central meridian (default: 0.9996 for UTM).
    false_easting : float
        False easting in meters (default: 500000 for UTM).
    false_northing : float
        False northing in meters (default: 0 for northern hemisphere).
    ellipsoid : EllipsoidModel
        Reference surface (default: WGS84). A sphere uses the exact
        spherical formulas.

    Notes
    -----
    Distortion increases with distance from the central meridian.
    The series is accurate to about 1 mm within 4° of the central
    meridian. Points 90° from it have no finite image.
    """

    def __init__(
        self,
        central_meridian_deg: float,
        scale_factor: float = GridConstants.UTM_SCALE_FACTOR.value,
        false_easting: float = GridConstants.UTM_FALSE_EASTING.value,
        false_northing: float = 0.0,
        ellipsoid: EllipsoidModel = WGS84Ellipsoid
    ):
        self._central_meridian = central_meridian_deg
        self._lon_mer = float(np.radians(central_meridian_deg))
        self._scale_factor = scale_factor
        self._false_easting = false_easting
        self._false_northing = false_northing
        self.ellipsoid = ellipsoid

        self._proj4 = (
            f"+proj=tmerc +lat_0=0 +lon_0={central_meridian_deg!r} "
            f"+k={scale_factor!r} +x_0={false_easting!r} +y_0={false_northing!r} "
            f"{ellipsoid_proj4(ellipsoid)} +units=m +no_defs"
        )

    @property
    def name(self) -> str:
        return f"Transverse Mercator (CM={self._central_meridian}°)"

    @property
    def proj4_string(self) -> str:
        return self._proj4

    @property
    def central_meridian_rad(self) -> float:
        return self._lon_mer

    def to_projected(self, lat_rad, lon_rad):
        ell = self.ellipsoid
        if ell.is_sphere:
            northing, easting = geographic_to_tm_sphere(
                ell.a, self._scale_factor, self._lon_mer,
                self._false_northing, self._false_easting, lat_rad, lon_rad
            )
        else:
            northing, easting = geographic_to_tm(
                ell.a, ell.e2, self._scale_factor, self._lon_mer,
                self._false_northing, self._false_easting, lat_rad, lon_rad
            )
        return easting, northing

    def to_geodetic(self, x, y):
        ell = self.ellipsoid
        if ell.is_sphere:
            return tm_to_geographic_sphere(
                ell.a, self._scale_factor, self._lon_mer,
                self._false_northing, self._false_easting, y, x
            )
        return tm_to_geographic(
            ell.a, ell.e2, self._scale_factor, self._lon_mer,
            self._false_northing, self._false_easting, y, x
        )

    def convergence_and_scale(self, lat_rad, lon_rad):
        ell = self.ellipsoid
        if ell.is_sphere:
            return tm_convergence_and_scale_sphere(self._scale_factor, self._lon_mer, lat_rad, lon_rad)
        _, _, gamma, k = geographic_to_tm_with_convergence_and_scale(
            ell.a, ell.e2, self._scale_factor, self._lon_mer,
            self._false_northing, self._false_easting, lat_rad, lon_rad
        )
        return gamma, k

    def to_projected_many(self, lats_rad, lons_rad):
        # The TM formulas are ufunc expressions and take arrays directly.
        x, y = self.to_projected(np.asarray(lats_rad, dtype=float), np.asarray(lons_rad, dtype=float))
        return np.asarray(x), np.asarray(y)


class PolarStereographic(ProjectionAdapter):
    """Polar Stereographic projection about the north or south pole.

    Parameters
    ----------
    hemisphere : Hemisphere
        Pole of the projection.
    scale_factor : float
        Scale factor at the pole (default: 0.994 for UPS).
    false_easting, false_northing : float
        Coordinates of the pole in meters (default: 2 000 000 for UPS).
    ellipsoid : EllipsoidModel
        Reference surface (default: WGS84).
    """

    def __init__(
        self,
        hemisphere: Hemisphere,
        scale_factor: float = GridConstants.UPS_SCALE_FACTOR.value,
        false_easting: float = GridConstants.UPS_FALSE_EASTING.value,
        false_northing: float = GridConstants.UPS_FALSE_NORTHING.value,
        ellipsoid: EllipsoidModel = WGS84Ellipsoid
    ):
        if not isinstance(hemisphere, Hemisphere):
            raise ValueError(f"hemisphere must be a Hemisphere, got {hemisphere!r}")
        self._hemisphere = hemisphere
        self._scale_factor = scale_factor
        self._false_easting = false_easting
        self._false_northing = false_northing
        self.ellipsoid = ellipsoid

        lat_0 = 90 if hemisphere is Hemisphere.NORTH else -90
        self._proj4 = (
            f"+proj=stere +lat_0={lat_0} +lon_0=0 +k={scale_factor!r} "
            f"+x_0={false_easting!r} +y_0={false_northing!r} "
            f"{ellipsoid_proj4(ellipsoid)} +units=m +no_defs"
        )

    @property
    def name(self) -> str:
        pole = "North" if self._hemisphere is Hemisphere.NORTH else "South"
        return f"Polar Stereographic ({pole})"

    @property
    def proj4_string(self) -> str:
        return self._proj4

    @property
    def hemisphere(self) -> Hemisphere:
        return self._hemisphere

    def to_projected(self, lat_rad, lon_rad):
        ell = self.ellipsoid
        if ell.is_sphere:
            northing, easting = geographic_to_ps_sphere(
                ell.a, self._scale_factor, self._hemisphere,
                self._false_northing, self._false_easting, lat_rad, lon_rad
            )
        else:
            northing, easting = geographic_to_ps(
                ell.a, ell.e2, self._scale_factor, self._hemisphere,
                self._false_northing, self._false_easting, lat_rad, lon_rad
            )
        return easting, northing

    def to_geodetic(self, x, y):
        ell = self.ellipsoid
        if ell.is_sphere:
            return ps_to_geographic_sphere(
                ell.a, self._scale_factor, self._hemisphere,
                self._false_northing, self._false_easting, y, x
            )
        return ps_to_geographic(
            ell.a, ell.e2, self._scale_factor, self._hemisphere,
            self._false_northing, self._false_easting, y, x
        )

    def convergence_and_scale(self, lat_rad, lon_rad):
        ell = self.ellipsoid
        if ell.is_sphere:
            return ps_convergence_and_scale_sphere(self._scale_factor, self._hemisphere, lat_rad, lon_rad)
        _, _, gamma, k = geographic_to_ps_with_convergence_and_scale(
            ell.a, ell.e2, self._scale_factor, self._hemisphere,
            self._false_northing, self._false_easting, lat_rad, lon_rad
        )
        return gamma, k


class UTMZoneProjection(TransverseMercator):
    """One UTM zone as a Transverse Mercator adapter.

    Parameters
    ----------
    zone_number : int
        UTM zone, 1 to 60.
    hemisphere : Hemisphere
        Selects the false northing.
    ellipsoid : EllipsoidModel
        Reference surface (default: WGS84).
    """

    def __init__(
        self,
        zone_number: int,
        hemisphere: Hemisphere = Hemisphere.NORTH,
        ellipsoid: EllipsoidModel = WGS84Ellipsoid
    ):
        self.zone = GridZone.utm(zone_number)
        self.hemisphere = hemisphere
        super().__init__(
            central_meridian_deg=float(np.degrees(self.zone.central_meridian)),
            false_northing=GridConstants.utm_false_northing(hemisphere is Hemisphere.NORTH),
            ellipsoid=ellipsoid,
        )

    @property
    def name(self) -> str:
        return f"UTM zone {self.zone.number}{self.hemisphere.value}"

    @property
    def epsg_code(self) -> Optional[int]:
        """EPSG code of the WGS84 zone (326xx north, 327xx south)."""
        if not _is_wgs84(self.ellipsoid):
            return None
        base = 32600 if self.hemisphere is Hemisphere.NORTH else 32700
        return base + self.zone.number


class UPSProjection(PolarStereographic):
    """One UPS cap as a Polar Stereographic adapter."""

    def __init__(
        self,
        hemisphere: Hemisphere,
        ellipsoid: EllipsoidModel = WGS84Ellipsoid
    ):
        super().__init__(hemisphere, ellipsoid=ellipsoid)
        self.zone = GridZone.UPS_NORTH if hemisphere is Hemisphere.NORTH else GridZone.UPS_SOUTH

    @property
    def name(self) -> str:
        return "UPS North" if self.hemisphere is Hemisphere.NORTH else "UPS South"

    @property
    def epsg_code(self) -> Optional[int]:
        """EPSG code of the WGS84 cap (32661 north, 32761 south)."""
        if not _is_wgs84(self.ellipsoid):
            return None
        return 32661 if self.hemisphere is Hemisphere.NORTH else 32761


class LocalTangentTM(TransverseMercator):
    """Transverse Mercator centred on a surveyed reference point.

    Uses k0 = 1 on the meridian through the reference point, so distances
    along that meridian are true, and a false origin chosen so that the
    reference point itself projects to (0, 0). Local survey offsets
    (east, north) in meters can then be converted straight to geodetic
    coordinates.

    Parameters
    ----------
    reference : GeographicPosition
        The reference point.
    ellipsoid : EllipsoidModel
        Reference surface (default: WGS84).

    Examples
    --------
    >>> local = LocalTangentTM(GeographicPosition.from_degrees(32.0, -120.0))
    >>> lat, lon = local.to_geodetic(300.50, 150.22)
    """

    def __init__(
        self,
        reference: GeographicPosition,
        ellipsoid: EllipsoidModel = WGS84Ellipsoid
    ):
        self.reference = reference.normalized()
        probe = TransverseMercator(
            central_meridian_deg=float(np.degrees(self.reference.longitude)),
            scale_factor=1.0,
            false_easting=0.0,
            false_northing=0.0,
            ellipsoid=ellipsoid,
        )
        easting_ref, northing_ref = probe.to_projected(self.reference.latitude, self.reference.longitude)
        super().__init__(
            central_meridian_deg=float(np.degrees(self.reference.longitude)),
            scale_factor=1.0,
            false_easting=-float(easting_ref),
            false_northing=-float(northing_ref),
            ellipsoid=ellipsoid,
        )

    @property
    def name(self) -> str:
        lat_deg, lon_deg = self.reference.to_degrees()
        return f"Local TM at ({lat_deg:.6f}°, {lon_deg:.6f}°)"

    @validate_units({"east": "meter", "north": "meter"})
    def offset_to_position(self, east: LengthLike, north: LengthLike) -> GeographicPosition:
        """Geodetic position of a point surveyed relative to the reference.

        Offsets may be pint lengths (feet, kilometers); bare numbers are meters.
        """
        lat, lon = self.to_geodetic(to_meters(east), to_meters(north))
        return GeographicPosition(latitude=float(lat), longitude=float(lon))

    def position_to_offset(self, position: GeographicPosition) -> Tuple[float, float]:
        """(east, north) offset in meters of a position from the reference."""
        x, y = self.to_projected(position.latitude, position.longitude)
        return float(x), float(y)


def compute_tissot_indicatrix(
    projection: ProjectionAdapter,
    lat_rad: float,
    lon_rad: float,
    delta: float = 1e-5
) -> TissotIndicatrix:
    """Compute Tissot's indicatrix numerically.

    This method computes the distortion ellipse by projecting a small
    circle and analyzing the resulting ellipse. Works for any projection.

    Parameters
    ----------
    projection : ProjectionAdapter
        The projection to analyze.
    lat_rad, lon_rad : float
        Location in geodetic coordinates (radians).
    delta : float
        Small angular offset for numerical differentiation.

    Returns
    -------
    TissotIndicatrix
        Local distortion characteristics.
    """
    # Central differences
    x_e, y_e = projection.to_projected(lat_rad, lon_rad + delta)
    x_w, y_w = projection.to_projected(lat_rad, lon_rad - delta)
    dxdl = (x_e - x_w) / (2 * delta)
    dydl = (y_e - y_w) / (2 * delta)

    x_n, y_n = projection.to_projected(lat_rad + delta, lon_rad)
    x_s, y_s = projection.to_projected(lat_rad - delta, lon_rad)
    dxdp = (x_n - x_s) / (2 * delta)
    dydp = (y_n - y_s) / (2 * delta)

    # Scale factors on the projection's own ellipsoid
    M = radius_of_curvature_meridian(lat_rad, projection.ellipsoid)
    N = radius_of_curvature_prime_vertical(lat_rad, projection.ellipsoid)

    # Scale along meridian (h) and parallel (k)
    h = np.sqrt(dxdp**2 + dydp**2) / M
    k = np.sqrt(dxdl**2 + dydl**2) / (N * np.cos(lat_rad))

    # Angle between the projected meridian and parallel
    sin_theta_prime = np.abs(dxdp * dydl - dydp * dxdl) / (h * M * k * N * np.cos(lat_rad))
    sin_theta_prime = np.clip(sin_theta_prime, -1, 1)

    area_scale = h * k * sin_theta_prime

    # Principal semi-axes from h, k and the intersection angle
    a_plus_b = np.sqrt(h**2 + k**2 + 2 * h * k * sin_theta_prime)
    a_minus_b = np.sqrt(max(h**2 + k**2 - 2 * h * k * sin_theta_prime, 0.0))
    semi_major = (a_plus_b + a_minus_b) / 2
    semi_minor = (a_plus_b - a_minus_b) / 2

    theta = 0.5 * np.arctan2(2 * (dxdp * dxdl + dydp * dydl),
                             dxdp**2 + dydp**2 - dxdl**2 - dydl**2)

    return TissotIndicatrix(
        semi_major=float(semi_major),
        semi_minor=float(semi_minor),
        orientation_rad=float(theta),
        area_scale=float(area_scale),
        angular_distortion_rad=float(2 * np.arcsin(a_minus_b / a_plus_b))
    )


def grid_projection_for(
    position: GeographicPosition,
    ellipsoid: EllipsoidModel = WGS84Ellipsoid,
    utm_only: bool = False
) -> ProjectionAdapter:
    """Select the UTM zone or UPS cap adapter covering a position.

    Parameters
    ----------
    position : GeographicPosition
        Position of interest (radians).
    ellipsoid : EllipsoidModel
        Reference surface.
    utm_only : bool
        Always return a UTM zone, even inside the polar caps.

    Returns
    -------
    ProjectionAdapter
        A `UTMZoneProjection` or `UPSProjection`.

    Raises
    ------
    ValueError
        If the latitude is outside [-90°, 90°].
    """
    selection = select_zone(position.latitude, position.longitude, utm_only=utm_only)
    if selection is None:
        raise ValueError(f"Latitude {position.latitude} rad is outside [-pi/2, pi/2]")
    logger.debug(f"Position {position} is covered by grid zone {selection.zone}")
    if selection.zone.is_ups:
        return UPSProjection(selection.hemisphere, ellipsoid=ellipsoid)
    return UTMZoneProjection(selection.zone.number, selection.hemisphere, ellipsoid=ellipsoid)


def batch_project(
    projection: ProjectionAdapter,
    lats_rad: NDArray[np.float64],
    lons_rad: NDArray[np.float64],
    use_pyproj: bool = False
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Project arrays of coordinates.

    Parameters
    ----------
    projection : ProjectionAdapter
        Projection to use.
    lats_rad, lons_rad : ndarray
        Coordinates in radians.
    use_pyproj : bool
        Project through PROJ instead of the native formulas.

    Returns
    -------
    Tuple[ndarray, ndarray]
        (x, y) projected coordinates in meters.
    """
    if use_pyproj:
        lats_deg = np.degrees(lats_rad)
        lons_deg = np.degrees(lons_rad)
        x, y = projection.transformer().transform(lons_deg, lats_deg)
        return np.asarray(x), np.asarray(y)

    return projection.to_projected_many(lats_rad, lons_rad)
