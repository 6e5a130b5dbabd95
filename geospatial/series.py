"""
Series Coefficients for the Ellipsoidal Projections.

The exact ellipsoidal Transverse Mercator is evaluated through Krüger's
series in the third flattening n, truncated at 4th order (about 1 mm
accuracy world-wide within a UTM zone). This module holds those
coefficients and the conformal-to-geodetic latitude series used by the
Polar Stereographic inverse.

All polynomials are evaluated with Horner's scheme.

References
----------
- Karney, C.F.F. (2011). Transverse Mercator with an accuracy of a few
  nanometers. J. Geodesy 85(8), 475-485. arXiv:1002.1417
- Kawase, K. (2011, 2013). A general formula for calculating meridian arc
  length and its application to coordinate conversion in the Gauss-Krüger
  projection. Bulletin of the GSI of Japan 59, 60.
- DMA TM 8358.2, Chapter 3 (Polar Stereographic inverse series).
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


def poly4(x: float, c0: float, c1: float, c2: float, c3: float, c4: float) -> float:
    """Evaluate c0 + c1 x + c2 x² + c3 x³ + c4 x⁴ with Horner's scheme."""
    return c0 + x * (c1 + x * (c2 + x * (c3 + x * c4)))


@dataclass(frozen=True)
class KruegerCoefficients:
    """Krüger series coefficients for one ellipsoid.

    Attributes
    ----------
    n : float
        Third flattening.
    A : float
        Rectifying radius in meters (meridian arc per radian of
        rectifying latitude). Multiplies every output coordinate.
    alpha : tuple of float
        α1..α4, forward series (conformal sphere to ellipsoid TM).
    beta : tuple of float
        β1..β4, inverse series (ellipsoid TM to conformal sphere).
    delta : tuple of float
        δ1..δ4, conformal latitude χ to geodetic latitude φ.
    """
    n: float
    A: float
    alpha: Tuple[float, float, float, float]
    beta: Tuple[float, float, float, float]
    delta: Tuple[float, float, float, float]


def rectifying_radius(a: float, n: float) -> float:
    """A = a/(1+n) · (1 + n²/4 + n⁴/64 + n⁶/256 + 25n⁸/16384)."""
    return a / (1.0 + n) * poly4(n * n, 1.0, 1.0 / 4, 1.0 / 64, 1.0 / 256, 25.0 / 16384)


def alpha_coefficients(n: float) -> Tuple[float, float, float, float]:
    return (
        poly4(n, 0.0, 1.0 / 2, -2.0 / 3, 5.0 / 16, 41.0 / 180),
        poly4(n, 0.0, 0.0, 13.0 / 48, -3.0 / 5, 557.0 / 1440),
        poly4(n, 0.0, 0.0, 0.0, 61.0 / 240, -103.0 / 140),
        poly4(n, 0.0, 0.0, 0.0, 0.0, 49561.0 / 161280),
    )


def beta_coefficients(n: float) -> Tuple[float, float, float, float]:
    return (
        poly4(n, 0.0, 1.0 / 2, -2.0 / 3, 37.0 / 96, -1.0 / 360),
        poly4(n, 0.0, 0.0, 1.0 / 48, 1.0 / 15, -437.0 / 1440),
        poly4(n, 0.0, 0.0, 0.0, 17.0 / 480, -37.0 / 840),
        poly4(n, 0.0, 0.0, 0.0, 0.0, 4397.0 / 161280),
    )


def delta_coefficients(n: float) -> Tuple[float, float, float, float]:
    return (
        poly4(n, 0.0, 2.0, -2.0 / 3, -2.0, 116.0 / 45),
        poly4(n, 0.0, 0.0, 7.0 / 3, -8.0 / 5, -227.0 / 45),
        poly4(n, 0.0, 0.0, 0.0, 56.0 / 15, -136.0 / 35),
        poly4(n, 0.0, 0.0, 0.0, 0.0, 4279.0 / 630),
    )


@lru_cache(maxsize=64)
def krueger_coefficients(a: float, n: float) -> KruegerCoefficients:
    """Compute the full coefficient set for an ellipsoid.

    Parameters
    ----------
    a : float
        Semi-major axis in meters.
    n : float
        Third flattening.

    Returns
    -------
    KruegerCoefficients
        Immutable coefficient set. Results are memoised per (a, n); the
        cache only ever holds immutable values.
    """
    return KruegerCoefficients(
        n=n,
        A=rectifying_radius(a, n),
        alpha=alpha_coefficients(n),
        beta=beta_coefficients(n),
        delta=delta_coefficients(n),
    )


def conformal_latitude_inverse_coefficients(e2: float) -> Tuple[float, float, float, float]:
    """Coefficients Ā, B̄, C̄, D̄ of φ = χ + Ā sin2χ + B̄ sin4χ + C̄ sin6χ + D̄ sin8χ.

    Parameters
    ----------
    e2 : float
        First eccentricity squared.

    Returns
    -------
    tuple of float
        (Ā, B̄, C̄, D̄).
    """
    return (
        poly4(e2, 0.0, 1.0 / 2, 5.0 / 24, 1.0 / 12, 13.0 / 360),
        poly4(e2, 0.0, 0.0, 7.0 / 48, 29.0 / 240, 811.0 / 11520),
        poly4(e2, 0.0, 0.0, 0.0, 7.0 / 120, 81.0 / 1120),
        poly4(e2, 0.0, 0.0, 0.0, 0.0, 4279.0 / 161280),
    )
