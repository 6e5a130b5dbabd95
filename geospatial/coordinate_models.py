"""
Reference Surface Models.

This module defines the reference ellipsoid consumed by the projection
engine. An ellipsoid is described by its semi-major axis `a` and squared
first eccentricity `e2`; every other shape parameter is derived.

A squared eccentricity of exactly zero denotes a sphere of radius `a`. The
projections branch on this explicitly and use their closed-form spherical
formulas, which also lets callers project onto a sphere of any radius.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Karney, C.F.F. (2011). Transverse Mercator with an accuracy of a few
  nanometers. J. Geodesy 85(8), 475-485.
"""

from dataclasses import dataclass
import numpy as np

from common.constants import GridConstants


@dataclass(frozen=True)
class EllipsoidModel:
    """A reference ellipsoid (or sphere).

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters. For a sphere, the
        radius.
    e2 : float
        First eccentricity squared, in [0, 1). Zero selects the spherical
        formulas.
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    f : float
        Flattening: f = 1 - sqrt(1 - e²)
    n : float
        Third flattening: n = f / (2 - f)
    b : float
        Semi-minor axis in meters.

    Raises
    ------
    ValueError
        If `a` is not positive or `e2` is outside [0, 1).
    """
    a: float
    e2: float
    name: str = ""

    def __post_init__(self):
        if not self.a > 0:
            raise ValueError(f"Semi-major axis must be positive, got {self.a}")
        if not 0.0 <= self.e2 < 1.0:
            raise ValueError(f"Squared eccentricity must be in [0, 1), got {self.e2}")

    @property
    def is_sphere(self) -> bool:
        """True when e2 == 0 (spherical formulas apply)."""
        return self.e2 == 0.0

    @property
    def e(self) -> float:
        """First eccentricity."""
        return float(np.sqrt(self.e2))

    @property
    def f(self) -> float:
        """Flattening."""
        return float(1.0 - np.sqrt(1.0 - self.e2))

    @property
    def n(self) -> float:
        """Third flattening."""
        f = self.f
        return f / (2.0 - f)

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1.0 - self.f)

    @property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (1.0 - self.e2)

    @classmethod
    def from_inverse_flattening(cls, a: float, inverse_flattening: float, name: str = "") -> 'EllipsoidModel':
        """Build an ellipsoid from its published inverse flattening.

        Notes
        -----
        e² = 2/f⁻¹ - 1/f⁻²
        """
        return cls(a=a, e2=2.0 / inverse_flattening - 1.0 / inverse_flattening**2, name=name)

    @classmethod
    def sphere(cls, radius: float, name: str = "sphere") -> 'EllipsoidModel':
        """A sphere of the given radius."""
        return cls(a=radius, e2=0.0, name=name)


# WGS84 ellipsoid - the default reference surface
WGS84Ellipsoid = EllipsoidModel.from_inverse_flattening(
    GridConstants.WGS84_SEMI_MAJOR_AXIS.value,
    GridConstants.WGS84_INVERSE_FLATTENING.value,
    name="WGS84",
)


def radius_of_curvature_meridian(
    latitude_rad: float,
    ellipsoid: EllipsoidModel = WGS84Ellipsoid
) -> float:
    """Compute the radius of curvature in the meridian plane.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidModel
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    float
        Radius of curvature M in meters.

    Notes
    -----
    M = a(1 - e²) / (1 - e² sin²φ)^(3/2)
    """
    sin_lat = np.sin(latitude_rad)
    denominator = (1 - ellipsoid.e2 * sin_lat**2) ** 1.5
    return ellipsoid.a * (1 - ellipsoid.e2) / denominator


def radius_of_curvature_prime_vertical(
    latitude_rad: float,
    ellipsoid: EllipsoidModel = WGS84Ellipsoid
) -> float:
    """Compute the radius of curvature in the prime vertical.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidModel
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    float
        Radius of curvature N in meters.

    Notes
    -----
    N = a / (1 - e² sin²φ)^(1/2)
    """
    sin_lat = np.sin(latitude_rad)
    denominator = np.sqrt(1 - ellipsoid.e2 * sin_lat**2)
    return ellipsoid.a / denominator
