"""
Legacy DMA TM 8358.2 Transverse Mercator Series.

The DMA series in powers of the longitude difference (forward) and of the
easting (inverse), kept only to cross-validate the Krüger implementation.
The series is accurate to about 0.01 m within a UTM zone and degrades
quickly away from the central meridian; the Krüger series should be used
for all production conversions.

The inverse finds the footpoint latitude (the latitude on the central
meridian with the same northing) by fixed-point iteration on the meridian
arc length. The iteration is capped at
``GridConstants.LEGACY_MAX_ITERATIONS``.

References
----------
- DMA TM 8358.2, Sections 2-6 to 2-9.
"""

from typing import Tuple
import numpy as np

from common.constants import GridConstants
from common.logging_config import get_logger

logger = get_logger(__name__)


def _multiple_angle_sines(phi: float) -> Tuple[float, float, float, float]:
    """sin 2φ, sin 4φ, sin 6φ, sin 8φ from sin φ and cos φ."""
    s = np.sin(phi)
    c = np.cos(phi)
    s2 = 2.0 * s * c
    c2 = c * c - s * s
    s4 = 2.0 * s2 * c2
    c4 = c2 * c2 - s2 * s2
    s6 = s4 * c2 + s2 * c4
    s8 = 2.0 * s4 * c4
    return s2, s4, s6, s8


def meridian_arc(a: float, n: float, phi: float) -> float:
    """True meridional distance from the equator to latitude φ, in meters.

    Notes
    -----
    S = A'φ - B' sin2φ + C' sin4φ - D' sin6φ + E' sin8φ
    """
    n2 = n * n
    n3 = n2 * n
    n4 = n3 * n
    n5 = n4 * n

    a_p = a * (1 - n + 5 * (n2 - n3) / 4 + 81 * (n4 - n5) / 64)
    b_p = 3 * a * (n - n2 + 7 * (n3 - n4) / 8 + 55 * n5 / 64) / 2
    c_p = 15 * a * (n2 - n3 + 3 * (n4 - n5) / 4) / 16
    d_p = 35 * a * (n3 - n4 + 11 * n5 / 16) / 48
    e_p = 315 * a * (n4 - n5) / 512

    s2, s4, s6, s8 = _multiple_angle_sines(phi)
    return float(a_p * phi - b_p * s2 + c_p * s4 - d_p * s6 + e_p * s8)


def _third_flattening(e2: float) -> float:
    f = 1.0 - np.sqrt(1.0 - e2)
    return float(f / (2.0 - f))


def dma_geographic_to_tm(
    a: float,
    e2: float,
    k0: float,
    lon_mer: float,
    fn: float,
    fe: float,
    lat_rad: float,
    lon_rad: float
) -> Tuple[float, float]:
    """Forward Transverse Mercator by the DMA series.

    Parameters
    ----------
    a, e2 : float
        Ellipsoid semi-major axis (m) and first eccentricity squared.
    k0 : float
        Central scale factor.
    lon_mer : float
        Central meridian in radians.
    fn, fe : float
        False northing and easting in meters.
    lat_rad, lon_rad : float
        Geodetic coordinates in radians.

    Returns
    -------
    Tuple[float, float]
        (northing, easting) in meters.
    """
    ep2 = e2 / (1 - e2)
    phi = lat_rad

    s = np.sin(phi)
    c = np.cos(phi)
    s2 = s * s
    c2 = c * c
    c4 = c2 * c2
    c6 = c4 * c2

    nu = a / np.sqrt(1 - e2 * s2)
    S = meridian_arc(a, _third_flattening(e2), phi)

    nuck0 = nu * c * k0
    nusck0 = nu * s * c * k0

    t2 = (s / c) ** 2
    t4 = t2 * t2
    t6 = t4 * t2

    epc2 = ep2 * c2
    epc4 = epc2 * epc2
    epc6 = epc4 * epc2
    epc8 = epc6 * epc2

    T1 = S * k0
    T2 = nusck0 / 2
    T3 = nusck0 * c2 * (5 - t2 + 9 * epc2 + 4 * epc4) / 24
    T4 = nusck0 * c4 * (61 - 58 * t2 + t4 + 270 * epc2 - 330 * t2 * epc2
                        + 445 * epc4 + 324 * epc6 - 680 * t2 * epc4
                        + 88 * epc8 - 660 * t2 * epc6 - 192 * t2 * epc8) / 720
    T5 = nusck0 * c6 * (1385 - 3111 * t2 + 543 * t4 - t6) / 40320

    T6 = nuck0
    T7 = nuck0 * c2 * (1 - t2 + epc2) / 6
    T8 = nuck0 * c4 * (5 - 18 * t2 + t4 + 14 * epc2 - 58 * t2 * epc2 + 13 * epc4
                       + 4 * epc6 - 64 * t2 * epc4 - 24 * t2 * epc6) / 120
    T9 = nuck0 * c6 * (61 - 479 * t2 + 179 * t4 - t6) / 5040

    dl = lon_rad - lon_mer
    dl2 = dl * dl
    dl4 = dl2 * dl2
    dl6 = dl4 * dl2
    dl8 = dl6 * dl2

    northing = fn + T1 + dl2 * T2 + dl4 * T3 + dl6 * T4 + dl8 * T5
    easting = fe + dl * (T6 + dl2 * T7 + dl4 * T8 + dl6 * T9)
    return float(northing), float(easting)


def footpoint_latitude(
    a: float,
    e2: float,
    k0: float,
    y: float,
    tolerance_m: float = GridConstants.LEGACY_TM_TOLERANCE_M.value,
    max_iterations: int = GridConstants.LEGACY_MAX_ITERATIONS
) -> float:
    """Latitude on the central meridian whose scaled arc length is y.

    Raises
    ------
    RuntimeError
        If the iteration has not converged after `max_iterations` steps.
    """
    n = _third_flattening(e2)
    b = a * np.sqrt(1.0 - e2)
    phi = y / b / k0

    for iteration in range(max_iterations):
        arc = meridian_arc(a, n, phi) * k0
        if abs(arc - y) < tolerance_m:
            logger.debug(f"Footpoint latitude converged after {iteration + 1} iterations")
            return float(phi)
        phi *= y / arc

    raise RuntimeError(
        f"Footpoint latitude did not converge to {tolerance_m} m within "
        f"{max_iterations} iterations (y={y} m)"
    )


def dma_tm_to_geographic(
    a: float,
    e2: float,
    k0: float,
    lon_mer: float,
    fn: float,
    fe: float,
    northing: float,
    easting: float,
    max_iterations: int = GridConstants.LEGACY_MAX_ITERATIONS
) -> Tuple[float, float]:
    """Inverse Transverse Mercator by the DMA series.

    Parameters
    ----------
    a, e2, k0, lon_mer, fn, fe : float
        As for `dma_geographic_to_tm`.
    northing, easting : float
        Grid coordinates in meters.
    max_iterations : int
        Cap on the footpoint-latitude iteration.

    Returns
    -------
    Tuple[float, float]
        (lat_rad, lon_rad).

    Raises
    ------
    RuntimeError
        If the footpoint latitude does not converge.
    """
    ep2 = e2 / (1 - e2)
    x = easting - fe
    y = northing - fn

    phi = footpoint_latitude(a, e2, k0, y, max_iterations=max_iterations)

    s = np.sin(phi)
    c = np.cos(phi)
    s2 = s * s
    c2 = c * c

    nu = a / np.sqrt(1 - e2 * s2)
    rho = nu / (1 - e2 * s2) * (1 - e2)

    t = s / c
    t2 = t * t
    t4 = t2 * t2
    t6 = t4 * t2

    nuk0 = nu * k0
    nuk02 = nuk0 * nuk0
    nuk04 = nuk02 * nuk02
    nuk06 = nuk04 * nuk02

    t_rhonuk0k0 = t / (rho * nuk0 * k0)
    inv_nuck0 = 1 / (nu * c * k0)

    epc2 = ep2 * c2
    epc4 = epc2 * epc2
    epc6 = epc4 * epc2
    epc8 = epc6 * epc2

    T10 = t_rhonuk0k0 / 2
    T11 = t_rhonuk0k0 / nuk02 * (5 + 3 * t2 + epc2 - 4 * epc4 - 9 * t2 * epc2) / 24
    T12 = t_rhonuk0k0 / nuk04 * (61 + 90 * t2 + 46 * epc2 + 45 * t4 - 252 * t2 * epc2
                                 - 3 * epc4 + 100 * epc6 - 66 * t2 * epc4
                                 - 90 * t4 * epc2 + 88 * epc8 + 225 * t4 * epc4
                                 + 84 * t2 * epc6 - 192 * t2 * epc8) / 720
    T13 = t_rhonuk0k0 / nuk06 * (1385 + 3633 * t2 + 4095 * t4 + 1575 * t6) / 40320

    T14 = inv_nuck0
    T15 = inv_nuck0 / nuk02 * (1 + 2 * t2 + epc2) / 6
    T16 = inv_nuck0 / nuk04 * (5 + 6 * epc2 + 28 * t2 - 3 * epc4 + 8 * t2 * epc2
                               + 24 * t4 - 4 * epc6 + 4 * t2 * epc4 + 24 * t2 * epc6) / 120
    T17 = inv_nuck0 / nuk06 * (61 + 662 * t2 + 1320 * t4 + 720 * t6) / 5040

    x2 = x * x
    x4 = x2 * x2
    x6 = x4 * x2
    x8 = x6 * x2

    lat = phi - x2 * T10 + x4 * T11 - x6 * T12 + x8 * T13
    lon = lon_mer + x * (T14 - x2 * T15 + x4 * T16 - x6 * T17)
    return float(lat), float(lon)
