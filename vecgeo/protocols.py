"""Structural capability interfaces for geometry values.

The algorithms in :mod:`vecgeo.algorithm` never depend on a concrete geometry
class. They read coordinates and iterate rings through the protocols below,
so any representation that exposes the same attributes and methods (the
built-in :mod:`vecgeo.types`, a thin wrapper around another
library's shapes, a database row adapter) can be measured without copying.

All protocols are runtime-checkable, meaning ``isinstance()`` can be used to
verify that a value provides the required members. As with any runtime
protocol check, only presence is verified, not signatures.

Iteration contract:
    ``points()``, ``rings()`` and ``polygons()`` must return a fresh iterator
    on every call, starting from the beginning. Implementations must not hand
    out a shared cursor, otherwise a second pass over the same geometry would
    see an exhausted sequence.

Example:
    >>> class Vertex:
    ...     def __init__(self, x, y):
    ...         self.x, self.y = x, y
    >>> isinstance(Vertex(1.0, 2.0), PointLike)
    True
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from vecgeo.config import Scalar


@runtime_checkable
class PointLike(Protocol):
    """A position with two scalar coordinates.

    ``x`` is the longitude (or easting) and ``y`` the latitude (or
    northing), depending on the coordinate system in use.
    """

    @property
    def x(self) -> Scalar: ...

    @property
    def y(self) -> Scalar: ...


@runtime_checkable
class RingLike(Protocol):
    """An ordered sequence of points, conventionally closed."""

    def points(self) -> Iterator[PointLike]: ...


@runtime_checkable
class PolygonLike(Protocol):
    """An outer ring followed by zero or more hole rings."""

    def rings(self) -> Iterator[RingLike]: ...


@runtime_checkable
class MultiPolygonLike(Protocol):
    """A collection of polygons."""

    def polygons(self) -> Iterator[PolygonLike]: ...
