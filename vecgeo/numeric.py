"""Scalar helpers shared by the algorithms and their callers.

The algorithms accept bearings and distances either as plain scalars or as
typed quantities from :mod:`vecgeo.unit`. The coercion helpers below turn
both into the SI value the trigonometry needs while leaving plain scalars
untouched, so a ``numpy.float32`` bearing stays ``float32``.
"""

from __future__ import annotations

import numpy as np

from vecgeo.config import DEFAULT_EPSILON, Scalar
from vecgeo.unit import Meter, Quantity, Radian


def within_epsilon(x: Scalar, y: Scalar, epsilon: Scalar = DEFAULT_EPSILON) -> bool:
    """Return True if ``x`` and ``y`` differ by less than ``epsilon``.

    Identical values always compare equal, which also covers matching
    infinities. NaN never compares equal. Arrays are compared element-wise
    and must agree everywhere.

    Args:
        x: First value or array.
        y: Second value or array.
        epsilon: Absolute tolerance. Defaults to ``float64`` machine epsilon.

    Returns:
        bool: Whether every pair of values is within tolerance.

    Example:
        >>> within_epsilon(0.1 + 0.2, 0.3)
        True
        >>> within_epsilon(1.0, 1.1, 0.01)
        False
    """
    with np.errstate(invalid="ignore"):
        close = np.equal(x, y) | (np.abs(np.subtract(x, y)) < epsilon)
    return bool(np.all(close))


def bearing_to_radians(bearing: Scalar) -> Scalar:
    """Convert a bearing to radians.

    Angle quantities (:class:`~vecgeo.unit.Degree`, :class:`~vecgeo.unit.Radian`)
    are read by their unit. Any other value is taken to be in degrees.

    Raises:
        TypeError: If ``bearing`` is a quantity of another family.
    """
    if isinstance(bearing, Quantity):
        return bearing.to(Radian)
    return np.radians(bearing)


def distance_to_meters(distance: Scalar) -> Scalar:
    """Convert a travel distance to meters.

    Length quantities (:class:`~vecgeo.unit.Meter`, :class:`~vecgeo.unit.Kilometer`)
    are read by their unit. Any other value is taken to be in meters.

    Raises:
        TypeError: If ``distance`` is a quantity of another family.
    """
    if isinstance(distance, Quantity):
        return distance.to(Meter)
    return distance
