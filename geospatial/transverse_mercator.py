"""
Transverse Mercator Projection.

Forward and inverse Transverse Mercator for an ellipsoid (Krüger series,
4th order in the third flattening) and for a sphere (exact closed form).

Scientific Context
------------------
Domain: Mathematical geodesy, conformal mapping
Model: Gauss-Krüger Transverse Mercator

Method (ellipsoid)
------------------
1. Map geodetic latitude to the conformal sphere: t = tan χ, where χ is the
   conformal latitude.
2. Apply the spherical TM on the conformal sphere, giving Gauss-Schreiber
   coordinates (ξ', η').
3. Apply Krüger's α series to reach the ellipsoidal TM (ξ, η), then scale
   by k0·A and add the false origin.
The inverse runs the β series, then the δ series from conformal to geodetic
latitude. Neither direction iterates.

Singularity
-----------
Points 90° of longitude from the central meridian have no finite image. The
functions here do not clamp the longitude difference: at that line (and
beyond it) they return inf/NaN. Callers that need a status result (the
UTM/UPS grid layer) check for non-finite output.

Every function accepts NumPy arrays as well as scalars.

References
----------
- Karney, C.F.F. (2011). arXiv:1002.1417
- Kawase, K. (2011, 2013). Bulletin of the GSI of Japan 59, 60.
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof.
  Paper 1395, pp. 58-60 (sphere).
"""

from typing import Tuple, Union
import numpy as np
from numpy.typing import NDArray

from geospatial.series import krueger_coefficients

FloatOrArray = Union[float, NDArray[np.float64]]


def _out(value):
    value = np.asarray(value, dtype=float)
    return float(value) if value.ndim == 0 else value


def _third_flattening(e2: float) -> float:
    f = 1.0 - float(np.sqrt(1.0 - e2))
    return f / (2.0 - f)


def _conformal_tangent(lat_rad: FloatOrArray, n: float) -> FloatOrArray:
    """t = tan χ, the tangent of the conformal latitude."""
    sin_phi = np.sin(lat_rad)
    t_factor = 2.0 * np.sqrt(n) / (1.0 + n)
    return np.sinh(np.arctanh(sin_phi) - t_factor * np.arctanh(t_factor * sin_phi))


def _gauss_schreiber(t: FloatOrArray, dlon: FloatOrArray) -> Tuple[FloatOrArray, FloatOrArray]:
    xi = np.arctan(t / np.cos(dlon))
    eta = np.arctanh(np.sin(dlon) / np.sqrt(1.0 + t * t))
    return xi, eta


def geographic_to_tm(
    a: float,
    e2: float,
    k0: float,
    lon_mer: float,
    fn: float,
    fe: float,
    lat_rad: FloatOrArray,
    lon_rad: FloatOrArray
) -> Tuple[FloatOrArray, FloatOrArray]:
    """Project geodetic coordinates with the ellipsoidal Transverse Mercator.

    Parameters
    ----------
    a : float
        Semi-major axis in meters.
    e2 : float
        First eccentricity squared.
    k0 : float
        Scale factor on the central meridian.
    lon_mer : float
        Central meridian in radians.
    fn, fe : float
        False northing and false easting in meters.
    lat_rad, lon_rad : float or ndarray
        Geodetic coordinates in radians.

    Returns
    -------
    Tuple
        (northing, easting) in meters.
    """
    coeffs = krueger_coefficients(a, _third_flattening(e2))
    with np.errstate(divide='ignore', invalid='ignore'):
        t = _conformal_tangent(lat_rad, coeffs.n)
        xi, eta = _gauss_schreiber(t, lon_rad - lon_mer)

        easting = eta
        northing = xi
        for j, alpha in enumerate(coeffs.alpha, start=1):
            easting = easting + alpha * np.cos(2 * j * xi) * np.sinh(2 * j * eta)
            northing = northing + alpha * np.sin(2 * j * xi) * np.cosh(2 * j * eta)

    scale = k0 * coeffs.A
    return _out(fn + scale * northing), _out(fe + scale * easting)


def geographic_to_tm_with_convergence_and_scale(
    a: float,
    e2: float,
    k0: float,
    lon_mer: float,
    fn: float,
    fe: float,
    lat_rad: FloatOrArray,
    lon_rad: FloatOrArray
) -> Tuple[FloatOrArray, FloatOrArray, FloatOrArray, FloatOrArray]:
    """Ellipsoidal Transverse Mercator, also returning convergence and scale.

    Parameters are as for `geographic_to_tm`.

    Returns
    -------
    Tuple
        (northing, easting, grid_convergence_rad, point_scale).

    Notes
    -----
    σ = 1 + 2 Σ j αj cos(2jξ) cosh(2jη)
    τ = 2 Σ j αj sin(2jξ) sinh(2jη)
    γ = atan((τ√(1+t²) + σ t tan Δλ) / (σ√(1+t²) - τ t tan Δλ))
    k = k0 (A/a) √((1 + ((1-n)/(1+n) tan φ)²)(σ² + τ²) / (t² + cos² Δλ))
    """
    coeffs = krueger_coefficients(a, _third_flattening(e2))
    n = coeffs.n
    dlon = lon_rad - lon_mer
    with np.errstate(divide='ignore', invalid='ignore'):
        t = _conformal_tangent(lat_rad, n)
        xi, eta = _gauss_schreiber(t, dlon)

        easting = eta
        northing = xi
        sigma = 1.0
        tau = 0.0
        for j, alpha in enumerate(coeffs.alpha, start=1):
            c2jxi = np.cos(2 * j * xi)
            s2jxi = np.sin(2 * j * xi)
            sh2jeta = np.sinh(2 * j * eta)
            ch2jeta = np.cosh(2 * j * eta)
            easting = easting + alpha * c2jxi * sh2jeta
            northing = northing + alpha * s2jxi * ch2jeta
            sigma = sigma + 2 * j * alpha * c2jxi * ch2jeta
            tau = tau + 2 * j * alpha * s2jxi * sh2jeta

        root = np.sqrt(1.0 + t * t)
        tan_dlon = np.tan(dlon)
        gamma = np.arctan(
            (tau * root + sigma * t * tan_dlon) / (sigma * root - tau * t * tan_dlon)
        )
        ratio = (1.0 - n) / (1.0 + n) * np.tan(lat_rad)
        k = k0 * coeffs.A / a * np.sqrt(
            (1.0 + ratio * ratio) * (sigma * sigma + tau * tau)
            / (t * t + np.cos(dlon) ** 2)
        )

    scale = k0 * coeffs.A
    return (
        _out(fn + scale * northing),
        _out(fe + scale * easting),
        _out(gamma),
        _out(k),
    )


def tm_to_geographic(
    a: float,
    e2: float,
    k0: float,
    lon_mer: float,
    fn: float,
    fe: float,
    northing: FloatOrArray,
    easting: FloatOrArray
) -> Tuple[FloatOrArray, FloatOrArray]:
    """Invert the ellipsoidal Transverse Mercator.

    Parameters
    ----------
    a, e2, k0, lon_mer, fn, fe : float
        As for `geographic_to_tm`.
    northing, easting : float or ndarray
        Grid coordinates in meters.

    Returns
    -------
    Tuple
        (lat_rad, lon_rad) geodetic coordinates in radians.
    """
    coeffs = krueger_coefficients(a, _third_flattening(e2))
    scale = k0 * coeffs.A
    xi = (northing - fn) / scale
    eta = (easting - fe) / scale

    xi_prime = xi
    eta_prime = eta
    for j, beta in enumerate(coeffs.beta, start=1):
        xi_prime = xi_prime - beta * np.sin(2 * j * xi) * np.cosh(2 * j * eta)
        eta_prime = eta_prime - beta * np.cos(2 * j * xi) * np.sinh(2 * j * eta)

    with np.errstate(divide='ignore', invalid='ignore'):
        chi = np.arcsin(np.sin(xi_prime) / np.cosh(eta_prime))
        lat = chi
        for j, delta in enumerate(coeffs.delta, start=1):
            lat = lat + delta * np.sin(2 * j * chi)
        lon = lon_mer + np.arctan(np.sinh(eta_prime) / np.cos(xi_prime))

    return _out(lat), _out(lon)


def geographic_to_tm_sphere(
    R: float,
    k0: float,
    lon_mer: float,
    fn: float,
    fe: float,
    lat_rad: FloatOrArray,
    lon_rad: FloatOrArray
) -> Tuple[FloatOrArray, FloatOrArray]:
    """Exact Transverse Mercator for a sphere of radius R.

    Returns
    -------
    Tuple
        (northing, easting) in meters.

    Notes
    -----
    E = FE + R k0 atanh(cos φ sin Δλ)
    N = FN + R k0 atan(tan φ / cos Δλ)
    """
    rk0 = R * k0
    dlon = lon_rad - lon_mer
    with np.errstate(divide='ignore', invalid='ignore'):
        b = np.cos(lat_rad) * np.sin(dlon)
        easting = fe + rk0 * np.arctanh(b)
        northing = fn + rk0 * np.arctan(np.tan(lat_rad) / np.cos(dlon))
    return _out(northing), _out(easting)


def tm_to_geographic_sphere(
    R: float,
    k0: float,
    lon_mer: float,
    fn: float,
    fe: float,
    northing: FloatOrArray,
    easting: FloatOrArray
) -> Tuple[FloatOrArray, FloatOrArray]:
    """Invert the spherical Transverse Mercator.

    Returns
    -------
    Tuple
        (lat_rad, lon_rad) in radians.
    """
    rk0 = R * k0
    d = (northing - fn) / rk0
    x = (easting - fe) / rk0
    with np.errstate(divide='ignore', invalid='ignore'):
        lon = lon_mer + np.arctan(np.sinh(x) / np.cos(d))
        lat = np.arcsin(np.sin(d) / np.cosh(x))
    return _out(lat), _out(lon)


def tm_convergence_and_scale_sphere(
    k0: float,
    lon_mer: float,
    lat_rad: FloatOrArray,
    lon_rad: FloatOrArray
) -> Tuple[FloatOrArray, FloatOrArray]:
    """Grid convergence and point scale of the spherical Transverse Mercator.

    Notes
    -----
    γ = atan(tan Δλ sin φ)
    k = k0 / √(1 - cos²φ sin²Δλ)
    """
    dlon = lon_rad - lon_mer
    with np.errstate(divide='ignore', invalid='ignore'):
        b = np.cos(lat_rad) * np.sin(dlon)
        gamma = np.arctan(np.tan(dlon) * np.sin(lat_rad))
        k = k0 / np.sqrt(1.0 - b * b)
    return _out(gamma), _out(k)
