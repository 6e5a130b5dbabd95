"""
Geospatial Module for UTM/UPS Grid Conversion.

All projection mathematics in the system lives in this package:
- Reference ellipsoid models and standard ellipsoid/datum tables
- Krüger series Transverse Mercator and Polar Stereographic projections
- UTM/UPS zone selection and grid coordinate mapping
- Projection adapters with distortion tracking and PROJ interop
"""

from geospatial.coordinate_models import (
    EllipsoidModel,
    WGS84Ellipsoid,
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical,
)

from geospatial.transverse_mercator import (
    geographic_to_tm,
    geographic_to_tm_with_convergence_and_scale,
    tm_to_geographic,
    geographic_to_tm_sphere,
    tm_to_geographic_sphere,
    tm_convergence_and_scale_sphere,
)

from geospatial.polar_stereographic import (
    geographic_to_ps,
    geographic_to_ps_with_convergence_and_scale,
    ps_to_geographic,
    geographic_to_ps_sphere,
    ps_to_geographic_sphere,
    ps_convergence_and_scale_sphere,
)

from geospatial.zones import (
    ZoneSelection,
    select_zone,
    utm_zone_number,
    validate_zone,
)

from geospatial.grid import (
    GridConversionError,
    GridCoordinateMapper,
    geographic_to_grid,
    grid_to_geographic,
)

from geospatial.reference_data import (
    DATUM_SHIFTS,
    STANDARD_ELLIPSOIDS,
    DatumShift,
    EllipsoidID,
    StandardEllipsoid,
    find_datums_by_name,
    lookup_datum_shift,
    lookup_standard_ellipsoid,
)

from geospatial.projections import (
    ProjectionAdapter,
    TissotIndicatrix,
    TransverseMercator,
    PolarStereographic,
    UTMZoneProjection,
    UPSProjection,
    LocalTangentTM,
    batch_project,
    compute_tissot_indicatrix,
    grid_projection_for,
)

__all__ = [
    # Ellipsoids
    "EllipsoidModel",
    "WGS84Ellipsoid",
    "radius_of_curvature_meridian",
    "radius_of_curvature_prime_vertical",
    # Transverse Mercator
    "geographic_to_tm",
    "geographic_to_tm_with_convergence_and_scale",
    "tm_to_geographic",
    "geographic_to_tm_sphere",
    "tm_to_geographic_sphere",
    "tm_convergence_and_scale_sphere",
    # Polar Stereographic
    "geographic_to_ps",
    "geographic_to_ps_with_convergence_and_scale",
    "ps_to_geographic",
    "geographic_to_ps_sphere",
    "ps_to_geographic_sphere",
    "ps_convergence_and_scale_sphere",
    # Zones and grid
    "ZoneSelection",
    "select_zone",
    "utm_zone_number",
    "validate_zone",
    "GridConversionError",
    "GridCoordinateMapper",
    "geographic_to_grid",
    "grid_to_geographic",
    # Reference data
    "DATUM_SHIFTS",
    "STANDARD_ELLIPSOIDS",
    "DatumShift",
    "EllipsoidID",
    "StandardEllipsoid",
    "find_datums_by_name",
    "lookup_datum_shift",
    "lookup_standard_ellipsoid",
    # Projections
    "ProjectionAdapter",
    "TissotIndicatrix",
    "TransverseMercator",
    "PolarStereographic",
    "UTMZoneProjection",
    "UPSProjection",
    "LocalTangentTM",
    "batch_project",
    "compute_tissot_indicatrix",
    "grid_projection_for",
]
