"""
Common utilities and infrastructure for the UTM/UPS grid conversion system.

This package provides foundational components used across all modules:
- Grid constants with provenance
- Unit handling at the API boundary
- Coordinate and grid value types
- Logging infrastructure
"""

from common.constants import Constant, GridConstants
from common.units import ureg, Q_, to_radians, to_degrees, to_meters, validate_units
from common.types import (
    GeographicPosition,
    GridCoordinate,
    GridZone,
    Hemisphere,
    ZoneKind,
    normalize_longitude,
)
from common.logging_config import get_logger, set_package_level

__all__ = [
    "Constant",
    "GridConstants",
    "ureg",
    "Q_",
    "to_radians",
    "to_degrees",
    "to_meters",
    "validate_units",
    "GeographicPosition",
    "GridCoordinate",
    "GridZone",
    "Hemisphere",
    "ZoneKind",
    "normalize_longitude",
    "get_logger",
    "set_package_level",
]
