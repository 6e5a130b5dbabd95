"""
Grid Zone Selection.

Chooses the UTM zone or UPS cap, and the hemisphere, for a geodetic
position, and validates zones supplied by callers.

Zone Rules
----------
- φ ≥ 84°N uses the UPS north cap; φ < 80°S uses the UPS south cap.
- Elsewhere the UTM zone is floor((λ + 180°) / 6°) + 1, with two
  exceptions:
  * Norway: 56° ≤ φ < 64° and 3° ≤ λ < 12° is zone 32.
  * Svalbard: 72° ≤ φ < 84° and λ ≥ 0° uses zones 31, 33, 35 and 37 only
    (boundaries at 9°, 21°, 33° and 42°E).
- Longitude is wrapped into (-π, π] first; λ = 180° belongs to zone 60.

References
----------
- DMA TM 8358.2, Sections 2-2 and 2-3.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union
import numpy as np

from common.constants import GridConstants
from common.logging_config import get_logger
from common.types import GridZone, Hemisphere, ZoneKind, normalize_longitude

logger = get_logger(__name__)

ZoneRequest = Union[GridZone, int, None]

_UPS_NORTH_LIMIT = np.radians(GridConstants.UPS_NORTH_LIMIT_DEG.value)
_UPS_SOUTH_LIMIT = np.radians(GridConstants.UPS_SOUTH_LIMIT_DEG.value)
_ZONE_WIDTH_DEG = GridConstants.UTM_ZONE_WIDTH_DEG.value

# Zone edges are tested in degrees rounded to this many decimals, so an
# edge meridian given in radians lands in the zone to its east.
_EDGE_DECIMALS = 9

_NORWAY_LAT = (56.0, 64.0)
_NORWAY_LON = (3.0, 12.0)
_SVALBARD_LAT = (72.0, 84.0)
_SVALBARD_ZONES = (
    (9.0, 31),
    (21.0, 33),
    (33.0, 35),
    (42.0, 37),
)


@dataclass(frozen=True)
class ZoneSelection:
    """Resolved zone for a position.

    Attributes
    ----------
    zone : GridZone
        The UTM zone or UPS cap.
    hemisphere : Hemisphere
        The hemisphere; forced by the cap for UPS.
    longitude : float
        The input longitude wrapped into (-π, π], in radians.
    """
    zone: GridZone
    hemisphere: Hemisphere
    longitude: float


def is_valid_latitude(lat_rad: float) -> bool:
    """Whether lat_rad lies within [-π/2, π/2]."""
    return bool(-np.pi / 2 <= lat_rad <= np.pi / 2)


def utm_zone_number(lat_rad: float, lon_rad: float) -> int:
    """Compute the UTM zone number for a position, applying the exceptions.

    Parameters
    ----------
    lat_rad : float
        Geodetic latitude in radians.
    lon_rad : float
        Geodetic longitude in radians, already wrapped into (-π, π].

    Returns
    -------
    int
        Zone number, 1 to 60.
    """
    lat_deg = float(np.round(np.degrees(lat_rad), _EDGE_DECIMALS))
    lon_deg = float(np.round(np.degrees(lon_rad), _EDGE_DECIMALS))

    number = int(np.floor((lon_deg + 180.0) / _ZONE_WIDTH_DEG)) + 1
    number = min(max(number, 1), GridConstants.UTM_ZONE_COUNT)

    if _NORWAY_LAT[0] <= lat_deg < _NORWAY_LAT[1] and _NORWAY_LON[0] <= lon_deg < _NORWAY_LON[1]:
        return 32

    if _SVALBARD_LAT[0] <= lat_deg < _SVALBARD_LAT[1] and lon_deg >= 0.0:
        for upper, zone in _SVALBARD_ZONES:
            if lon_deg < upper:
                return zone

    return number


def auto_zone_kind(lat_rad: float) -> ZoneKind:
    """Pick the grid (UTM or a UPS cap) for a latitude."""
    if lat_rad >= _UPS_NORTH_LIMIT:
        return ZoneKind.UPS_NORTH
    if lat_rad < _UPS_SOUTH_LIMIT:
        return ZoneKind.UPS_SOUTH
    return ZoneKind.UTM


def _requested_zone(zone: ZoneRequest) -> Tuple[Optional[GridZone], bool]:
    """Turn a caller's zone request into (zone, force_utm).

    A zone of None means "compute it". An int outside 1..60, or anything
    that is not a zone number, asks for a computed UTM zone.
    """
    if zone is None or isinstance(zone, GridZone):
        return zone, False
    try:
        number = int(zone)
    except (TypeError, ValueError):
        number = 0
    if 1 <= number <= GridConstants.UTM_ZONE_COUNT:
        return GridZone.utm(number), False
    logger.debug(f"Zone request {zone!r} is not a UTM zone; computing a UTM zone instead")
    return None, True


def select_zone(
    lat_rad: float,
    lon_rad: float,
    zone: ZoneRequest = None,
    hemisphere: Optional[Hemisphere] = None,
    utm_only: bool = False
) -> Optional[ZoneSelection]:
    """Resolve zone and hemisphere for a forward conversion.

    Parameters
    ----------
    lat_rad, lon_rad : float
        Geodetic coordinates in radians. Longitude may be out of range.
    zone : GridZone, int or None
        Requested zone. None selects automatically (UTM or UPS by
        latitude). An int outside 1..60 requests automatic UTM selection.
    hemisphere : Hemisphere or None
        Requested hemisphere for UTM. None uses the sign of the latitude.
        Ignored for UPS caps.
    utm_only : bool
        With ``zone=None``, always select a UTM zone, even in the caps.

    Returns
    -------
    ZoneSelection or None
        None if the latitude is outside [-π/2, π/2] or the longitude is
        not finite.
    """
    if not is_valid_latitude(lat_rad):
        logger.debug(f"Latitude {lat_rad} rad is outside [-pi/2, pi/2]")
        return None
    if not np.isfinite(lon_rad):
        logger.debug(f"Longitude {lon_rad} rad is not finite")
        return None

    lon = normalize_longitude(lon_rad)
    resolved, force_utm = _requested_zone(zone)

    if resolved is None:
        kind = ZoneKind.UTM if utm_only or force_utm else auto_zone_kind(lat_rad)
        if kind is ZoneKind.UTM:
            resolved = GridZone.utm(utm_zone_number(lat_rad, lon))
        else:
            resolved = GridZone(kind)

    if resolved.is_ups:
        return ZoneSelection(resolved, resolved.ups_hemisphere, lon)

    if not isinstance(hemisphere, Hemisphere):
        hemisphere = Hemisphere.from_latitude(lat_rad)
    return ZoneSelection(resolved, hemisphere, lon)


def validate_zone(
    zone: ZoneRequest,
    hemisphere: Optional[Hemisphere]
) -> Optional[Tuple[GridZone, Hemisphere]]:
    """Validate an explicit zone and hemisphere for an inverse conversion.

    Parameters
    ----------
    zone : GridZone or int
        Must be a UPS cap or a UTM zone 1..60. None is rejected.
    hemisphere : Hemisphere or None
        Required for UTM zones; derived from the cap for UPS.

    Returns
    -------
    Tuple[GridZone, Hemisphere] or None
        None if the zone or (for UTM) the hemisphere is missing or invalid.
    """
    if zone is None:
        logger.debug("Inverse conversion needs an explicit zone")
        return None

    if not isinstance(zone, GridZone):
        try:
            number = int(zone)
        except (TypeError, ValueError):
            logger.debug(f"Zone {zone!r} is not a zone number")
            return None
        if not 1 <= number <= GridConstants.UTM_ZONE_COUNT:
            logger.debug(f"UTM zone {number} is outside 1..{GridConstants.UTM_ZONE_COUNT}")
            return None
        zone = GridZone.utm(number)

    if zone.is_ups:
        return zone, zone.ups_hemisphere

    if not isinstance(hemisphere, Hemisphere):
        logger.debug(f"UTM zone {zone} needs an explicit hemisphere, got {hemisphere!r}")
        return None
    return zone, hemisphere
