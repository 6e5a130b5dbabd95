"""
Polar Stereographic Projection.

Forward and inverse Polar Stereographic about the north or south pole, for
an ellipsoid and for a sphere. These are the projections behind the two UPS
caps.

Conventions
-----------
- North cap: the grid y axis points along the 180° meridian direction
  reversed, i.e. E = FE + R sin λ, N = FN - R cos λ.
- South cap: mirrored, N = FN + R cos λ.
- At the pole itself the longitude is undefined and reported as 0.

References
----------
- DMA TM 8358.2, Chapter 3: Universal Polar Stereographic.
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof.
  Paper 1395, pp. 154-163.
"""

from typing import Tuple
import numpy as np

from common.types import Hemisphere
from geospatial.series import conformal_latitude_inverse_coefficients


def _check_hemisphere(hemi: Hemisphere) -> bool:
    if not isinstance(hemi, Hemisphere):
        raise ValueError(f"Polar stereographic needs NORTH or SOUTH, got {hemi!r}")
    return hemi is Hemisphere.NORTH


def _polar_constant(a: float, e2: float) -> float:
    """C0 = 2a/√(1-e²) · ((1-e)/(1+e))^(e/2)."""
    e = np.sqrt(e2)
    return float(2.0 * a / np.sqrt(1.0 - e2) * ((1.0 - e) / (1.0 + e)) ** (e / 2.0))


def _polar_radius(a: float, e2: float, k0: float, north: bool, lat_rad: float) -> float:
    e = np.sqrt(e2)
    s_lat = np.sin(lat_rad)
    if north:
        tan_half_z = ((1 + e * s_lat) / (1 - e * s_lat)) ** (e / 2) * np.tan(np.pi / 4 - lat_rad / 2)
    else:
        tan_half_z = ((1 - e * s_lat) / (1 + e * s_lat)) ** (e / 2) * np.tan(np.pi / 4 + lat_rad / 2)
    return float(k0 * _polar_constant(a, e2) * tan_half_z)


def geographic_to_ps(
    a: float,
    e2: float,
    k0: float,
    hemi: Hemisphere,
    fn: float,
    fe: float,
    lat_rad: float,
    lon_rad: float
) -> Tuple[float, float]:
    """Project geodetic coordinates with the ellipsoidal Polar Stereographic.

    Parameters
    ----------
    a : float
        Semi-major axis in meters.
    e2 : float
        First eccentricity squared.
    k0 : float
        Scale factor at the pole.
    hemi : Hemisphere
        Which pole the projection is centred on.
    fn, fe : float
        False northing and easting of the pole, in meters.
    lat_rad, lon_rad : float
        Geodetic coordinates in radians.

    Returns
    -------
    Tuple[float, float]
        (northing, easting) in meters.
    """
    north = _check_hemisphere(hemi)
    R = _polar_radius(a, e2, k0, north, lat_rad)
    easting = fe + R * np.sin(lon_rad)
    if north:
        northing = fn - R * np.cos(lon_rad)
    else:
        northing = fn + R * np.cos(lon_rad)
    return float(northing), float(easting)


def geographic_to_ps_with_convergence_and_scale(
    a: float,
    e2: float,
    k0: float,
    hemi: Hemisphere,
    fn: float,
    fe: float,
    lat_rad: float,
    lon_rad: float
) -> Tuple[float, float, float, float]:
    """Ellipsoidal Polar Stereographic, also returning convergence and scale.

    Returns
    -------
    Tuple[float, float, float, float]
        (northing, easting, grid_convergence_rad, point_scale).

    Notes
    -----
    γ = λ on the north cap and -λ on the south cap.
    k = R / (a m) with m = cos φ / √(1 - e² sin²φ); k = k0 at the pole.
    """
    north = _check_hemisphere(hemi)
    R = _polar_radius(a, e2, k0, north, lat_rad)
    easting = fe + R * np.sin(lon_rad)
    northing = fn - R * np.cos(lon_rad) if north else fn + R * np.cos(lon_rad)

    gamma = lon_rad if north else -lon_rad
    if R == 0.0:
        k = k0
    else:
        s_lat = np.sin(lat_rad)
        m = np.cos(lat_rad) / np.sqrt(1.0 - e2 * s_lat * s_lat)
        k = R / (a * m)
    return float(northing), float(easting), float(gamma), float(k)


def ps_to_geographic(
    a: float,
    e2: float,
    k0: float,
    hemi: Hemisphere,
    fn: float,
    fe: float,
    northing: float,
    easting: float
) -> Tuple[float, float]:
    """Invert the ellipsoidal Polar Stereographic.

    Parameters
    ----------
    a, e2, k0, hemi, fn, fe
        As for `geographic_to_ps`.
    northing, easting : float
        Grid coordinates in meters.

    Returns
    -------
    Tuple[float, float]
        (lat_rad, lon_rad). At the pole, longitude is reported as 0.
    """
    north = _check_hemisphere(hemi)
    x = easting - fe
    y = northing - fn

    if x == 0 and y == 0:
        return (np.pi / 2 if north else -np.pi / 2), 0.0

    lon = float(np.arctan2(x, -y) if north else np.arctan2(x, y))

    # Distance from the pole; x / sin λ degenerates when either axis is zero.
    if y == 0:
        R = abs(x)
    elif x == 0:
        R = abs(y)
    else:
        R = abs(x / np.sin(lon))

    tan_half_z = R / (k0 * _polar_constant(a, e2))
    chi = np.pi / 2 - 2 * np.arctan(tan_half_z)

    a_bar, b_bar, c_bar, d_bar = conformal_latitude_inverse_coefficients(e2)
    s2chi = np.sin(2.0 * chi)
    c2chi = np.cos(2.0 * chi)
    s4chi = 2.0 * s2chi * c2chi
    c4chi = c2chi * c2chi - s2chi * s2chi
    s6chi = s4chi * c2chi + s2chi * c4chi
    s8chi = 2.0 * s4chi * c4chi
    phi = chi + a_bar * s2chi + b_bar * s4chi + c_bar * s6chi + d_bar * s8chi

    return float(phi if north else -phi), lon


def geographic_to_ps_sphere(
    R: float,
    k0: float,
    hemi: Hemisphere,
    fn: float,
    fe: float,
    lat_rad: float,
    lon_rad: float
) -> Tuple[float, float]:
    """Exact Polar Stereographic for a sphere of radius R.

    Returns
    -------
    Tuple[float, float]
        (northing, easting) in meters.
    """
    north = _check_hemisphere(hemi)
    rk0 = R * k0
    if north:
        rho = 2 * rk0 * np.tan(np.pi / 4 - lat_rad / 2)
        return float(fn - rho * np.cos(lon_rad)), float(fe + rho * np.sin(lon_rad))
    rho = 2 * rk0 * np.tan(np.pi / 4 + lat_rad / 2)
    return float(fn + rho * np.cos(lon_rad)), float(fe + rho * np.sin(lon_rad))


def ps_to_geographic_sphere(
    R: float,
    k0: float,
    hemi: Hemisphere,
    fn: float,
    fe: float,
    northing: float,
    easting: float
) -> Tuple[float, float]:
    """Invert the spherical Polar Stereographic.

    Returns
    -------
    Tuple[float, float]
        (lat_rad, lon_rad). At the pole, longitude is reported as 0.
    """
    north = _check_hemisphere(hemi)
    rk0 = R * k0
    x = easting - fe
    y = northing - fn

    if x == 0 and y == 0:
        return (np.pi / 2 if north else -np.pi / 2), 0.0

    rho = np.sqrt(x * x + y * y)
    c = 2 * np.arctan(rho / (2 * rk0))
    if north:
        return float(np.arcsin(np.cos(c))), float(np.arctan2(x, -y))
    return float(-np.arcsin(np.cos(c))), float(np.arctan2(x, y))


def ps_convergence_and_scale_sphere(
    k0: float,
    hemi: Hemisphere,
    lat_rad: float,
    lon_rad: float
) -> Tuple[float, float]:
    """Grid convergence and point scale of the spherical Polar Stereographic.

    Notes
    -----
    k = 2 k0 / (1 ± sin φ), equal to k0 at the pole.
    """
    north = _check_hemisphere(hemi)
    if north:
        return float(lon_rad), float(2 * k0 / (1 + np.sin(lat_rad)))
    return float(-lon_rad), float(2 * k0 / (1 - np.sin(lat_rad)))
