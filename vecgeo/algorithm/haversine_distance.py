"""Great-circle distance between two points on the spherical Earth.

Inverse of :mod:`vecgeo.algorithm.haversine_destination`: travelling the
returned distance from ``a`` along the initial bearing towards ``b`` arrives
at ``b``. Uses the haversine formulation, which stays well conditioned for
small separations:

    h = sin²(Δlat/2) + cos(lat1)·cos(lat2)·sin²(Δlon/2)
    d = 2·R·asin(√h)
"""

from __future__ import annotations

import numpy as np

from vecgeo.config import MEAN_EARTH_RADIUS, Scalar
from vecgeo.protocols import PointLike


def haversine_distance(a: PointLike, b: PointLike) -> Scalar:
    """Return the great-circle distance in meters between ``a`` and ``b``.

    Both points are longitude (``x``) / latitude (``y``) in degrees.
    """
    theta1 = np.radians(a.y)
    theta2 = np.radians(b.y)
    delta_theta = np.radians(b.y - a.y)
    delta_lambda = np.radians(b.x - a.x)

    h = np.sin(delta_theta / 2) ** 2 + np.cos(theta1) * np.cos(theta2) * np.sin(delta_lambda / 2) ** 2
    c = 2 * np.arcsin(np.sqrt(h))
    return MEAN_EARTH_RADIUS * c


class HaversineDistance:
    """Mixin adding :meth:`haversine_distance` to classes exposing ``x``/``y``."""

    __slots__ = ()

    def haversine_distance(self, other: PointLike) -> Scalar:
        return haversine_distance(self, other)
