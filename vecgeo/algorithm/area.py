"""Signed planar area of rings and polygons.

The area of a ring is computed with the shoelace formula (the discrete form of
Green's theorem): for every consecutive pair of vertices ``(p1, p2)`` the
cross term ``p1.x * p2.y - p2.x * p1.y`` is accumulated, and the total is
halved. The result is signed, positive for counter-clockwise rings and
negative for clockwise ones.

A polygon's area is the area of its outer ring minus the area of each hole.
Ring orientation is taken as given and never normalised, so holes are
expected to carry a sign consistent with the outer ring.

Functions:
    ring_area: Signed area of a single ring.
    area: Net area of a polygon.

Classes:
    Area: Mixin giving any polygon-like class an ``area()`` method.

Example:
    >>> from vecgeo import LineString, Polygon
    >>> outer = LineString.from_coords([(0, 0), (5, 0), (5, 6), (0, 6), (0, 0)])
    >>> Polygon(outer).area()
    30.0
"""

from __future__ import annotations

import logging

from vecgeo.config import Scalar
from vecgeo.errors import MissingOuterRingError
from vecgeo.protocols import PolygonLike, RingLike

logger = logging.getLogger(__name__)


def ring_area(ring: RingLike) -> Scalar:
    """Return the signed shoelace area of ``ring``.

    Pairs are taken exactly as the ring yields them; no closing edge from the
    last point back to the first is added. The magnitude is the enclosed
    planar area only when the caller closes the ring explicitly.

    Args:
        ring: Any value whose ``points()`` yields point-like values.

    Returns:
        Scalar: Signed area. Exactly ``0.0`` for rings with fewer than two
        points.
    """
    points = ring.points()
    p1 = next(points, None)
    if p1 is None:
        return 0.0

    total = 0.0
    for p2 in points:
        total = total + (p1.x * p2.y - p2.x * p1.y)
        p1 = p2
    return total / 2


def area(polygon: PolygonLike) -> Scalar:
    """Return the net area of ``polygon``.

    The first ring produced by ``polygon.rings()`` is the outer boundary.
    Every later ring is a hole whose signed area is subtracted.

    Args:
        polygon: Any value whose ``rings()`` yields ring-like values,
            outer ring first.

    Returns:
        Scalar: Outer-ring area minus the area of every hole.

    Raises:
        MissingOuterRingError: If ``polygon.rings()`` yields nothing.
    """
    rings = polygon.rings()
    outer = next(rings, None)
    if outer is None:
        logger.debug("Cannot compute area of %r: polygon has no rings", polygon)
        raise MissingOuterRingError(polygon)

    total = ring_area(outer)
    holes = 0
    for hole in rings:
        total = total - ring_area(hole)
        holes += 1

    logger.debug("Polygon area %s after subtracting %d hole(s)", total, holes)
    return total


class Area:
    """Mixin adding :meth:`area` to classes that implement ``rings()``."""

    __slots__ = ()

    def area(self) -> Scalar:
        """Net planar area; see :func:`vecgeo.algorithm.area.area`."""
        return area(self)
