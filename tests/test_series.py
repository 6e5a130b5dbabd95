import pytest

from geospatial.coordinate_models import WGS84Ellipsoid
from geospatial.series import (
    conformal_latitude_inverse_coefficients,
    krueger_coefficients,
    poly4,
    rectifying_radius,
)


def test_poly4_matches_expanded_polynomial():
    x = 0.37
    expected = 1.5 - 2.0 * x + 0.25 * x**2 + 3.0 * x**3 - 0.5 * x**4
    assert poly4(x, 1.5, -2.0, 0.25, 3.0, -0.5) == pytest.approx(expected, rel=1e-15)


def test_rectifying_radius_of_sphere_is_radius():
    assert rectifying_radius(6371000.0, 0.0) == 6371000.0


def test_wgs84_coefficients_match_published_values():
    coeffs = krueger_coefficients(WGS84Ellipsoid.a, WGS84Ellipsoid.n)

    # Karney (2011), Table 1 and eq. (14) for WGS84
    assert coeffs.A == pytest.approx(6367449.14577, abs=1e-3)
    assert coeffs.alpha[0] == pytest.approx(8.377318206244698e-4, rel=1e-9)
    assert coeffs.beta[0] == pytest.approx(8.377321640579486e-4, rel=1e-9)
    assert coeffs.delta[0] == pytest.approx(3.356551485597e-3, rel=1e-6)


def test_sphere_has_no_series_terms():
    coeffs = krueger_coefficients(6371000.0, 0.0)
    assert coeffs.alpha == (0.0, 0.0, 0.0, 0.0)
    assert coeffs.beta == (0.0, 0.0, 0.0, 0.0)
    assert coeffs.delta == (0.0, 0.0, 0.0, 0.0)
    assert conformal_latitude_inverse_coefficients(0.0) == (0.0, 0.0, 0.0, 0.0)


def test_coefficients_are_memoised():
    first = krueger_coefficients(WGS84Ellipsoid.a, WGS84Ellipsoid.n)
    second = krueger_coefficients(WGS84Ellipsoid.a, WGS84Ellipsoid.n)
    assert first is second


def test_conformal_inverse_leading_term():
    e2 = WGS84Ellipsoid.e2
    a_bar, b_bar, c_bar, d_bar = conformal_latitude_inverse_coefficients(e2)
    assert a_bar == pytest.approx(e2 / 2 + 5 * e2**2 / 24 + e2**3 / 12 + 13 * e2**4 / 360)
    assert abs(b_bar) < abs(a_bar) * 1e-2
    assert abs(d_bar) < abs(c_bar)
