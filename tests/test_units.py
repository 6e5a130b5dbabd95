import numpy as np
import pytest

from common.types import GeographicPosition
from common.units import Q_, to_degrees, to_meters, to_radians, validate_units


def test_to_radians():
    assert to_radians(Q_(180.0, "degree")) == pytest.approx(np.pi)
    assert to_radians(Q_(3600.0, "arcsecond")) == pytest.approx(np.radians(1.0))
    assert to_radians(0.5) == 0.5
    assert to_radians(30.0, default_unit="degree") == pytest.approx(np.pi / 6)


def test_to_degrees_and_meters():
    assert to_degrees(np.pi / 2) == pytest.approx(90.0)
    assert to_meters(Q_(2.5, "kilometer")) == pytest.approx(2500.0)
    assert to_meters(Q_(1.0, "foot")) == pytest.approx(0.3048)
    assert to_meters(12.0) == 12.0


def test_incompatible_quantity_raises():
    with pytest.raises(ValueError):
        to_radians(Q_(1.0, "meter"))
    with pytest.raises(ValueError):
        to_meters(Q_(1.0, "degree"))


def test_validate_units_decorator():
    @validate_units({"distance": "meter"})
    def passthrough(distance):
        return distance

    assert passthrough(5.0) == 5.0
    assert passthrough(Q_(5.0, "mile")).magnitude == 5.0
    with pytest.raises(ValueError):
        passthrough(Q_(5.0, "second"))


def test_position_from_quantities():
    position = GeographicPosition.from_quantities(Q_(45.0, "degree"), Q_(-90.0, "degree"))
    assert position.to_degrees() == pytest.approx((45.0, -90.0))
    assert position.has_valid_latitude
    assert not GeographicPosition.from_degrees(90.5, 0.0).has_valid_latitude
