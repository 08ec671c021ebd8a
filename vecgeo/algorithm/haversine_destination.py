"""Destination point on a sphere given a start, a bearing and a distance.

This module solves the direct problem of spherical navigation: starting at a
longitude/latitude position and travelling a ground distance along a great
circle with a given initial bearing, where do we arrive? The Earth is
modelled as a sphere of radius :data:`vecgeo.config.MEAN_EARTH_RADIUS`, which
is accurate to a few tenths of a percent for everyday distances.

With ``δ = distance / R`` the angular distance and ``θ`` the bearing:

    lat2 = asin(sin(lat1)·cos(δ) + cos(lat1)·sin(δ)·cos(θ))
    lon2 = lon1 + atan2(sin(θ)·sin(δ)·cos(lat1), cos(δ) − sin(lat1)·sin(lat2))

All trigonometry goes through NumPy ufuncs, so the floating type of the
inputs (``float``, ``numpy.float32``, ``numpy.float64``) is carried through to
the result. Non-finite inputs are not checked and propagate as NaN.

Functions:
    haversine_destination: Compute the destination of a point.

Classes:
    HaversineDestination: Mixin adding the operation to point-like classes.

Example:
    >>> from vecgeo import Point
    >>> from vecgeo.unit import Degree, Kilometer
    >>> stuttgart = Point(9.177789688110352, 48.776781529534965)
    >>> p = stuttgart.haversine_destination(Degree(45), Kilometer(10))
    >>> print(f"{p.x:.6f} {p.y:.6f}")
    9.274410 48.840333
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from vecgeo.config import MEAN_EARTH_RADIUS, Scalar
from vecgeo.numeric import bearing_to_radians, distance_to_meters
from vecgeo.protocols import PointLike

if TYPE_CHECKING:
    from vecgeo.types import Point


def haversine_destination(origin: PointLike, bearing: Scalar, distance: Scalar) -> Point:
    """Return the point reached from ``origin`` along a great circle.

    Args:
        origin: Start position, ``x`` = longitude and ``y`` = latitude in
            degrees.
        bearing: Initial direction of travel, clockwise from true north.
            Plain numbers are degrees; :class:`~vecgeo.unit.Degree` and
            :class:`~vecgeo.unit.Radian` quantities are read by their unit.
        distance: Ground distance along the sphere's surface. Plain numbers
            are meters; :class:`~vecgeo.unit.Meter` and
            :class:`~vecgeo.unit.Kilometer` quantities are read by their unit.

    Returns:
        Point: A new point, ``x`` = longitude and ``y`` = latitude in degrees.
        ``origin`` is not modified.

    Raises:
        TypeError: If ``bearing`` or ``distance`` is a quantity of the wrong
            unit family.
    """
    from vecgeo.types import Point

    center_lng = np.radians(origin.x)
    center_lat = np.radians(origin.y)
    bearing_rad = bearing_to_radians(bearing)

    rad = distance_to_meters(distance) / MEAN_EARTH_RADIUS

    lat = np.arcsin(
        np.sin(center_lat) * np.cos(rad)
        + np.cos(center_lat) * np.sin(rad) * np.cos(bearing_rad)
    )
    lng = center_lng + np.arctan2(
        np.sin(bearing_rad) * np.sin(rad) * np.cos(center_lat),
        np.cos(rad) - np.sin(center_lat) * np.sin(lat),
    )

    return Point(np.degrees(lng), np.degrees(lat))


class HaversineDestination:
    """Mixin adding :meth:`haversine_destination` to classes exposing ``x``/``y``."""

    __slots__ = ()

    def haversine_destination(self, bearing: Scalar, distance: Scalar) -> Point:
        """Destination reached from this point; see the module function."""
        return haversine_destination(self, bearing, distance)
