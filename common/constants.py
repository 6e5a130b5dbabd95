"""
Grid Constants for UTM/UPS Coordinate Conversion.

This module provides the defining constants of the Universal Transverse
Mercator (UTM) and Universal Polar Stereographic (UPS) grids, together with
their sources. All constants are defined in SI units (meters, radians where
angular) unless stated otherwise.

References
----------
- DMA TM 8358.2: The Universal Grids: Universal Transverse Mercator (UTM)
  and Universal Polar Stereographic (UPS), 1989.
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
"""

from dataclasses import dataclass
from typing import Final
import numpy as np


@dataclass(frozen=True)
class Constant:
    """A defining constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GridConstants:
    """Registry of constants that define the UTM and UPS grids.

    All constants are class attributes with full metadata. Grid constants
    are defined exactly by convention, so their uncertainty is zero.

    Reference Ellipsoid (WGS84)
    ---------------------------
    Default ellipsoid used when a caller does not supply one.

    UTM Grid
    --------
    Sixty 6°-wide zones between 80°S and 84°N, each a Transverse Mercator
    projection about the zone's central meridian.

    UPS Grid
    --------
    Two Polar Stereographic caps covering the regions poleward of the UTM
    grid.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    WGS84_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    WGS84_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Inverse flattening of WGS84 ellipsoid: 1/f = a / (a - b)"
    )

    # =========================================================================
    # UTM Grid
    # Reference: DMA TM 8358.2, Chapter 2
    # =========================================================================

    UTM_SCALE_FACTOR: Final[Constant] = Constant(
        value=0.9996,
        uncertainty=0.0,
        unit="dimensionless",
        source="DMA TM 8358.2",
        description="Scale factor k0 on the central meridian of a UTM zone"
    )

    UTM_FALSE_EASTING: Final[Constant] = Constant(
        value=500_000.0,
        uncertainty=0.0,
        unit="m",
        source="DMA TM 8358.2",
        description="False easting assigned to the central meridian of a UTM zone"
    )

    UTM_FALSE_NORTHING_NORTH: Final[Constant] = Constant(
        value=0.0,
        uncertainty=0.0,
        unit="m",
        source="DMA TM 8358.2",
        description="False northing of the equator, northern hemisphere"
    )

    UTM_FALSE_NORTHING_SOUTH: Final[Constant] = Constant(
        value=10_000_000.0,
        uncertainty=0.0,
        unit="m",
        source="DMA TM 8358.2",
        description="False northing of the equator, southern hemisphere"
    )

    UTM_ZONE_WIDTH_DEG: Final[Constant] = Constant(
        value=6.0,
        uncertainty=0.0,
        unit="degree",
        source="DMA TM 8358.2",
        description="Longitudinal width of a UTM zone"
    )

    UTM_ZONE_COUNT: Final[int] = 60

    # =========================================================================
    # UPS Grid
    # Reference: DMA TM 8358.2, Chapter 3
    # =========================================================================

    UPS_SCALE_FACTOR: Final[Constant] = Constant(
        value=0.994,
        uncertainty=0.0,
        unit="dimensionless",
        source="DMA TM 8358.2",
        description="Scale factor k0 at the pole of a UPS cap"
    )

    UPS_FALSE_EASTING: Final[Constant] = Constant(
        value=2_000_000.0,
        uncertainty=0.0,
        unit="m",
        source="DMA TM 8358.2",
        description="False easting assigned to the pole"
    )

    UPS_FALSE_NORTHING: Final[Constant] = Constant(
        value=2_000_000.0,
        uncertainty=0.0,
        unit="m",
        source="DMA TM 8358.2",
        description="False northing assigned to the pole"
    )

    UPS_NORTH_LIMIT_DEG: Final[Constant] = Constant(
        value=84.0,
        uncertainty=0.0,
        unit="degree",
        source="DMA TM 8358.2",
        description="Latitudes at or north of this use the UPS north cap"
    )

    UPS_SOUTH_LIMIT_DEG: Final[Constant] = Constant(
        value=-80.0,
        uncertainty=0.0,
        unit="degree",
        source="DMA TM 8358.2",
        description="Latitudes strictly south of this use the UPS south cap"
    )

    # =========================================================================
    # Legacy DMA series inverse
    # =========================================================================

    LEGACY_TM_TOLERANCE_M: Final[Constant] = Constant(
        value=0.001,
        uncertainty=0.0,
        unit="m",
        source="DMA TM 8358.2 (series accuracy)",
        description="Convergence tolerance of the meridian-arc iteration"
    )

    LEGACY_MAX_ITERATIONS: Final[int] = 50

    @staticmethod
    def central_meridian(zone_number: int) -> float:
        """Compute the central meridian of a UTM zone.

        Parameters
        ----------
        zone_number : int
            UTM zone number, 1 to 60.

        Returns
        -------
        float
            Central meridian longitude in radians.

        Notes
        -----
        λ0 = (zone - 1) * 6° - 180° + 3°
        """
        width = GridConstants.UTM_ZONE_WIDTH_DEG.value
        return np.radians((zone_number - 1) * width - 180.0 + width / 2.0)

    @staticmethod
    def utm_false_northing(north: bool) -> float:
        """Return the UTM false northing for a hemisphere."""
        if north:
            return GridConstants.UTM_FALSE_NORTHING_NORTH.value
        return GridConstants.UTM_FALSE_NORTHING_SOUTH.value
