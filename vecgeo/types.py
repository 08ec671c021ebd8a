"""Concrete immutable geometry values.

These dataclasses are the reference implementation of the capability
protocols in :mod:`vecgeo.protocols`. They are frozen value types: two
geometries with the same coordinates compare equal, and nothing in
:mod:`vecgeo.algorithm` ever mutates them.

Coordinates are stored as given, so a polygon built from ``numpy.float32``
values is measured in ``float32``.

Example:
    >>> outer = LineString.from_coords([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])
    >>> hole = LineString.from_coords([(1, 1), (2, 1), (2, 2), (1, 2), (1, 1)])
    >>> Polygon(outer, [hole]).area()
    99.0
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from vecgeo.algorithm import Area, HaversineDestination, HaversineDistance
from vecgeo.config import Scalar


@dataclass(frozen=True, slots=True)
class Point(HaversineDestination, HaversineDistance):
    """A single position.

    Attributes:
        x: Longitude in degrees, or easting in a planar system.
        y: Latitude in degrees, or northing in a planar system.
    """

    x: Scalar
    y: Scalar

    @classmethod
    def from_lonlat(cls, lon: Scalar, lat: Scalar) -> Point:
        """Create a point from longitude then latitude, in decimal degrees."""
        return cls(lon, lat)

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y


def _as_point(value: Point | Iterable[Scalar]) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


@dataclass(frozen=True, slots=True)
class LineString:
    """An ordered sequence of points.

    Used both as an open path and, when the first and last points coincide,
    as a polygon ring.

    Attributes:
        coords: The vertices in order. Any iterable of :class:`Point` or
            ``(x, y)`` pairs is accepted and stored as a tuple of points.
    """

    coords: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", tuple(_as_point(c) for c in self.coords))

    @classmethod
    def from_coords(cls, coords: Iterable[Iterable[Scalar]]) -> LineString:
        """Create a line string from ``(x, y)`` pairs."""
        return cls(tuple(coords))

    def points(self) -> Iterator[Point]:
        """Return a new iterator over the vertices."""
        return iter(self.coords)

    @property
    def is_closed(self) -> bool:
        """True when the line string has points and ends where it starts."""
        return bool(self.coords) and self.coords[0] == self.coords[-1]

    def __len__(self) -> int:
        return len(self.coords)


@dataclass(frozen=True, slots=True)
class Polygon(Area):
    """An outer ring with zero or more holes.

    Attributes:
        exterior: Outer boundary.
        interiors: Hole rings, subtracted from the exterior when measuring.
    """

    exterior: LineString
    interiors: tuple[LineString, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "interiors", tuple(self.interiors))

    def rings(self) -> Iterator[LineString]:
        """Yield the exterior, then each interior in order."""
        yield self.exterior
        yield from self.interiors


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    """A collection of polygons.

    No area is defined for a multipolygon: summing member areas double counts
    overlaps, and there is no agreed policy for resolving them.
    """

    members: tuple[Polygon, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))

    def polygons(self) -> Iterator[Polygon]:
        """Return a new iterator over the member polygons."""
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)
