"""
Consistency Checks for Grid Conversions.

This module verifies that grid conversions behave the way the grid
definitions require, over arbitrary sets of positions.

Check Categories
----------------
1. Round trip (forward then inverse reproduces the input)
2. Zone continuity (easting is smooth across a zone boundary when one
   zone's formulas are used on both sides)
3. Cross-validation against the legacy DMA series
4. Point scale bounds within the UTM zones
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import numpy as np
from numpy.typing import NDArray

from common.constants import GridConstants
from common.logging_config import get_logger
from common.types import GeographicPosition, GridZone, Hemisphere, normalize_longitude
from geospatial.grid import GridCoordinateMapper
from validation.legacy_dma import dma_geographic_to_tm

logger = get_logger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the test.
    passed : bool
        Whether the test passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class GridConsistencyChecker:
    """Checker for the internal consistency of a grid mapper.

    Parameters
    ----------
    mapper : GridCoordinateMapper
        The mapper under test. Its own strict mode is left untouched.
    strict_mode : bool
        If True, raise ValueError on the first failed check.
    log_violations : bool
        Whether to log failed checks.
    """

    def __init__(
        self,
        mapper: Optional[GridCoordinateMapper] = None,
        strict_mode: bool = False,
        log_violations: bool = True
    ):
        self.mapper = mapper if mapper is not None else GridCoordinateMapper()
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self._logger = get_logger("GridConsistencyChecker")

    def _report(self, result: ValidationResult) -> ValidationResult:
        if not result.passed:
            if self.log_violations:
                self._logger.warning(f"{result.test_name}: {result.message}")
            if self.strict_mode:
                raise ValueError(f"{result.test_name} failed: {result.message}")
        return result

    def check_all(
        self,
        lats_deg: NDArray[np.float64],
        lons_deg: NDArray[np.float64]
    ) -> List[ValidationResult]:
        """Run the point-set checks on a set of positions.

        Parameters
        ----------
        lats_deg, lons_deg : ndarray
            Positions in degrees.

        Returns
        -------
        List[ValidationResult]
            Results of all checks.
        """
        results = []

        # 1. Round trip
        results.append(self.check_round_trip(lats_deg, lons_deg))

        # 2. Point scale
        results.append(self.check_point_scale(lats_deg, lons_deg))

        # 3. Legacy series agreement
        results.append(self.check_against_legacy(lats_deg, lons_deg))

        return results

    def check_round_trip(
        self,
        lats_deg: NDArray[np.float64],
        lons_deg: NDArray[np.float64],
        tolerance_rad: float = 1e-9
    ) -> ValidationResult:
        """Check that inverse(forward(p)) reproduces p."""
        worst = 0.0
        failures = 0
        for lat_deg, lon_deg in zip(np.atleast_1d(lats_deg), np.atleast_1d(lons_deg)):
            position = GeographicPosition.from_degrees(lat_deg, lon_deg).normalized()
            coord = self.mapper.geographic_to_grid(position)
            back = self.mapper.to_geographic(coord) if coord is not None else None
            if back is None:
                failures += 1
                continue
            d_lon = normalize_longitude(back.longitude - position.longitude)
            error = max(abs(back.latitude - position.latitude), abs(d_lon))
            worst = max(worst, float(error))

        passed = failures == 0 and worst < tolerance_rad
        return self._report(ValidationResult(
            test_name="round_trip",
            passed=passed,
            message=f"Round trip: max error {worst:.3e} rad, {failures} failed conversions",
            details={
                'max_error_rad': worst,
                'failed_conversions': failures,
                'tolerance_rad': tolerance_rad,
            }
        ))

    def check_zone_continuity(
        self,
        lat_deg: float,
        zone_number: int,
        span_deg: float = 1.0,
        samples: int = 41
    ) -> ValidationResult:
        """Check that easting is smooth across the eastern edge of a zone.

        Longitudes on both sides of the boundary are projected into the
        same zone. The easting must change by nearly the same step between
        equally spaced samples (no jump).
        """
        zone = GridZone.utm(zone_number)
        boundary = np.degrees(zone.central_meridian) + GridConstants.UTM_ZONE_WIDTH_DEG.value / 2
        lons = np.linspace(boundary - span_deg, boundary + span_deg, samples)
        hemisphere = Hemisphere.NORTH if lat_deg >= 0 else Hemisphere.SOUTH

        eastings = []
        for lon_deg in lons:
            coord = self.mapper.geographic_to_grid(
                GeographicPosition.from_degrees(lat_deg, lon_deg), zone=zone, hemisphere=hemisphere
            )
            eastings.append(np.nan if coord is None else coord.easting)
        eastings = np.asarray(eastings)

        steps = np.diff(eastings)
        # Second differences stay small for a smooth curve.
        jump = float(np.nanmax(np.abs(np.diff(steps)))) if np.all(np.isfinite(steps)) else np.inf
        typical_step = float(np.nanmean(np.abs(steps)))
        passed = bool(np.isfinite(jump) and jump < 1e-3 * typical_step)

        return self._report(ValidationResult(
            test_name="zone_continuity",
            passed=passed,
            message=f"Zone {zone_number} continuity at {lat_deg}°: max step change {jump:.3f} m",
            details={
                'boundary_lon_deg': float(boundary),
                'max_step_change_m': jump,
                'typical_step_m': typical_step,
            }
        ))

    def check_point_scale(
        self,
        lats_deg: NDArray[np.float64],
        lons_deg: NDArray[np.float64]
    ) -> ValidationResult:
        """Check that UTM point scale stays within k0 and the zone-edge value."""
        k0 = GridConstants.UTM_SCALE_FACTOR.value
        # Widest zone (32 at 56°N) reaches about 1.0014.
        upper = 1.002
        scales = []
        for lat_deg, lon_deg in zip(np.atleast_1d(lats_deg), np.atleast_1d(lons_deg)):
            coord = self.mapper.geographic_to_grid(GeographicPosition.from_degrees(lat_deg, lon_deg))
            if coord is not None and coord.zone.is_utm:
                scales.append(coord.point_scale)

        if not scales:
            return self._report(ValidationResult(
                test_name="point_scale",
                passed=True,
                message="No UTM points to check",
            ))

        scales = np.asarray(scales)
        violations = int(np.sum((scales < k0 - 1e-12) | (scales > upper)))
        return self._report(ValidationResult(
            test_name="point_scale",
            passed=violations == 0,
            message=f"Point scale check: {violations} violations",
            details={
                'min_scale': float(np.min(scales)),
                'max_scale': float(np.max(scales)),
                'bounds': (k0, upper),
            }
        ))

    def check_against_legacy(
        self,
        lats_deg: NDArray[np.float64],
        lons_deg: NDArray[np.float64],
        tolerance_m: float = 0.05
    ) -> ValidationResult:
        """Compare UTM coordinates with the legacy DMA series."""
        ell = self.mapper.ellipsoid
        if ell.is_sphere:
            return self._report(ValidationResult(
                test_name="legacy_agreement",
                passed=True,
                message="Legacy series does not apply to a sphere",
            ))

        worst = 0.0
        compared = 0
        for lat_deg, lon_deg in zip(np.atleast_1d(lats_deg), np.atleast_1d(lons_deg)):
            position = GeographicPosition.from_degrees(lat_deg, lon_deg).normalized()
            coord = self.mapper.geographic_to_grid(position)
            if coord is None or not coord.zone.is_utm:
                continue
            legacy_n, legacy_e = dma_geographic_to_tm(
                ell.a, ell.e2, GridConstants.UTM_SCALE_FACTOR.value, coord.zone.central_meridian,
                GridConstants.utm_false_northing(coord.hemisphere is Hemisphere.NORTH),
                GridConstants.UTM_FALSE_EASTING.value,
                position.latitude, position.longitude
            )
            worst = max(worst, abs(legacy_n - coord.northing), abs(legacy_e - coord.easting))
            compared += 1

        return self._report(ValidationResult(
            test_name="legacy_agreement",
            passed=worst < tolerance_m,
            message=f"Legacy DMA agreement: max difference {worst:.4f} m over {compared} points",
            details={
                'max_difference_m': float(worst),
                'points_compared': compared,
                'tolerance_m': tolerance_m,
            }
        ))
