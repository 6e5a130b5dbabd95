"""
Unit Handling at the Public API Boundary.

The conversion core works on bare floats: latitudes and longitudes in
RADIANS, grid coordinates in METERS. This module uses the `pint` library to
let callers hand in explicit quantities (degrees, arc-seconds, kilometers,
feet) and have them converted to the core's units exactly once, at the edge.

Example Usage
-------------
>>> from common.units import Q_, to_radians
>>> to_radians(Q_(45, 'degree'))
0.7853981633974483
>>> to_radians(30.0, default_unit='degree')
0.5235987755982988
"""

from functools import wraps
from typing import Callable, Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

AngleLike = Union[float, pint.Quantity]
LengthLike = Union[float, pint.Quantity]


def _magnitude_in(value: Union[float, pint.Quantity], unit: str, default_unit: str) -> float:
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(unit).magnitude)
        except pint.DimensionalityError as e:
            raise ValueError(
                f"Incompatible units: expected something convertible to {unit}, "
                f"got {value.units}"
            ) from e
    if default_unit == unit:
        return float(value)
    return float(ureg.Quantity(value, default_unit).to(unit).magnitude)


def to_radians(value: AngleLike, default_unit: str = "radian") -> float:
    """Convert an angle to radians.

    Parameters
    ----------
    value : float or pint.Quantity
        The angle. A bare number is interpreted in `default_unit`.
    default_unit : str
        Unit applied to bare numbers (default: radian).

    Returns
    -------
    float
        The angle in radians.

    Raises
    ------
    ValueError
        If `value` is a quantity that is not an angle.
    """
    return _magnitude_in(value, "radian", default_unit)


def to_degrees(value: AngleLike, default_unit: str = "radian") -> float:
    """Convert an angle to degrees (bare numbers default to radians)."""
    return _magnitude_in(value, "degree", default_unit)


def to_meters(value: LengthLike, default_unit: str = "meter") -> float:
    """Convert a length to meters.

    Parameters
    ----------
    value : float or pint.Quantity
        The length. A bare number is interpreted in `default_unit`.
    default_unit : str
        Unit applied to bare numbers (default: meter).

    Returns
    -------
    float
        The length in meters.
    """
    return _magnitude_in(value, "meter", default_unit)


def validate_units(expected_units: dict[str, str]):
    """Decorator to validate units of quantity arguments.

    Arguments passed as pint quantities must be convertible to the expected
    unit; bare numbers pass through untouched.

    Parameters
    ----------
    expected_units : dict[str, str]
        Mapping from argument names to expected unit strings.

    Examples
    --------
    >>> @validate_units({'lat': 'radian'})
    ... def northing(lat):
    ...     return lat
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            import inspect
            sig = inspect.signature(func)
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, expected_unit in expected_units.items():
                value = bound.arguments.get(param_name)
                if isinstance(value, pint.Quantity):
                    try:
                        value.to(expected_unit)
                    except pint.DimensionalityError as e:
                        raise ValueError(
                            f"Parameter '{param_name}' has incompatible units. "
                            f"Expected {expected_unit}, got {value.units}"
                        ) from e

            return func(*args, **kwargs)
        return wrapper
    return decorator

