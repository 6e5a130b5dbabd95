"""
Type Definitions for Geodetic and Grid Coordinates.

This module defines the value types exchanged between the projection engine
and its callers. Angles are stored in RADIANS and lengths in METERS.

Design Rationale
----------------
The grid zone is a small tagged value (a UTM zone number or one of the two
UPS caps). "Please determine the zone for me" is not a zone, so it is not a
member of this type: callers request automatic selection by passing
``None`` to the conversion functions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple
import numpy as np

from common.constants import GridConstants
from common.units import AngleLike, to_radians


def normalize_longitude(longitude_rad: float) -> float:
    """Wrap a longitude into (-π, π].

    Values already inside the interval are returned unchanged; anything else
    is reduced modulo 2π. Wrapping never fails.
    """
    if -np.pi < longitude_rad <= np.pi:
        return float(longitude_rad)
    two_pi = 2.0 * np.pi
    wrapped = np.fmod(np.fmod(longitude_rad, two_pi) + two_pi, two_pi)
    if wrapped > np.pi:
        wrapped -= two_pi
    return float(wrapped)


@dataclass(frozen=True)
class GeographicPosition:
    """A geodetic position on the reference surface.

    Attributes
    ----------
    latitude : float
        Geodetic latitude in RADIANS. Valid range: [-π/2, π/2].
    longitude : float
        Geodetic longitude in RADIANS. Any value is accepted and wrapped
        into (-π, π] before use.

    Notes
    -----
    An out-of-range latitude is not rejected here; the grid conversion
    reports it as a failed conversion instead.

    Examples
    --------
    >>> pos = GeographicPosition.from_degrees(60.0, 190.0)
    >>> round(pos.normalized().to_degrees()[1], 6)
    -170.0
    """
    latitude: float  # radians
    longitude: float  # radians

    @property
    def has_valid_latitude(self) -> bool:
        """Whether the latitude lies within [-π/2, π/2]."""
        return bool(-np.pi / 2 <= self.latitude <= np.pi / 2)

    def normalized(self) -> 'GeographicPosition':
        """Return a copy with the longitude wrapped into (-π, π]."""
        return GeographicPosition(self.latitude, normalize_longitude(self.longitude))

    def to_degrees(self) -> Tuple[float, float]:
        """Return (latitude_degrees, longitude_degrees)."""
        return float(np.degrees(self.latitude)), float(np.degrees(self.longitude))

    @classmethod
    def from_degrees(cls, lat_deg: float, lon_deg: float) -> 'GeographicPosition':
        """Create a position from degrees."""
        return cls(latitude=float(np.radians(lat_deg)), longitude=float(np.radians(lon_deg)))

    @classmethod
    def from_quantities(cls, latitude: AngleLike, longitude: AngleLike) -> 'GeographicPosition':
        """Create a position from pint angle quantities (bare numbers are radians)."""
        return cls(latitude=to_radians(latitude), longitude=to_radians(longitude))


class Hemisphere(Enum):
    """Hemisphere of a grid coordinate."""
    NORTH = "N"
    SOUTH = "S"

    @classmethod
    def from_latitude(cls, latitude_rad: float) -> 'Hemisphere':
        """Northern for latitude >= 0, southern otherwise."""
        return cls.NORTH if latitude_rad >= 0 else cls.SOUTH


class ZoneKind(Enum):
    """Which grid a zone belongs to."""
    UTM = "utm"
    UPS_NORTH = "ups_north"
    UPS_SOUTH = "ups_south"


@dataclass(frozen=True)
class GridZone:
    """A UTM zone (1..60) or one of the two UPS caps.

    Use ``GridZone.utm(n)``, ``GridZone.UPS_NORTH`` or ``GridZone.UPS_SOUTH``
    to construct one.

    Raises
    ------
    ValueError
        If a UTM zone number is outside 1..60, or a UPS cap carries a number.
    """
    kind: ZoneKind
    number: Optional[int] = None

    UPS_NORTH: ClassVar['GridZone']
    UPS_SOUTH: ClassVar['GridZone']

    def __post_init__(self):
        if self.kind is ZoneKind.UTM:
            if self.number is None or not 1 <= self.number <= GridConstants.UTM_ZONE_COUNT:
                raise ValueError(
                    f"UTM zone number must be in 1..{GridConstants.UTM_ZONE_COUNT}, "
                    f"got {self.number}"
                )
        elif self.number is not None:
            raise ValueError(f"{self.kind.name} does not take a zone number")

    @classmethod
    def utm(cls, number: int) -> 'GridZone':
        """Create a UTM zone."""
        return cls(ZoneKind.UTM, int(number))

    @property
    def is_utm(self) -> bool:
        return self.kind is ZoneKind.UTM

    @property
    def is_ups(self) -> bool:
        return self.kind is not ZoneKind.UTM

    @property
    def ups_hemisphere(self) -> Optional[Hemisphere]:
        """The hemisphere forced by a UPS cap, None for UTM zones."""
        if self.kind is ZoneKind.UPS_NORTH:
            return Hemisphere.NORTH
        if self.kind is ZoneKind.UPS_SOUTH:
            return Hemisphere.SOUTH
        return None

    @property
    def central_meridian(self) -> float:
        """Central meridian in radians (UTM only; UPS caps use 0)."""
        if self.is_utm:
            return GridConstants.central_meridian(self.number)
        return 0.0

    def __str__(self) -> str:
        if self.kind is ZoneKind.UPS_NORTH:
            return "NP"
        if self.kind is ZoneKind.UPS_SOUTH:
            return "SP"
        return str(self.number)


GridZone.UPS_NORTH = GridZone(ZoneKind.UPS_NORTH)
GridZone.UPS_SOUTH = GridZone(ZoneKind.UPS_SOUTH)


@dataclass(frozen=True)
class GridCoordinate:
    """A position on the UTM/UPS grid.

    Attributes
    ----------
    northing : float
        Grid northing in METERS, including the false northing.
    easting : float
        Grid easting in METERS, including the false easting.
    zone : GridZone
        The zone the coordinate is expressed in.
    hemisphere : Hemisphere
        The hemisphere (selects the UTM false northing).
    grid_convergence_rad : float, optional
        Angle from true north to grid north, in RADIANS.
    point_scale : float, optional
        Point scale factor (grid distance / ellipsoid distance).
    """
    northing: float  # m
    easting: float  # m
    zone: GridZone
    hemisphere: Hemisphere
    grid_convergence_rad: Optional[float] = None
    point_scale: Optional[float] = None

    @property
    def label(self) -> str:
        """Short zone label: '38N', '21S', 'NP' or 'SP'."""
        if self.zone.is_ups:
            return str(self.zone)
        return f"{self.zone.number}{self.hemisphere.value}"
