"""Generic vector-geometry algorithms over structural capability interfaces.

vecgeo measures geometries it does not own. The algorithms read coordinates
through small runtime-checkable protocols (a point exposes ``x``/``y``, a ring
exposes ``points()``, a polygon exposes ``rings()``), so the same code measures
the bundled value types, adapters around another library's shapes, or any
other representation that provides those members.

Package Layout:
    Capability Interfaces (vecgeo.protocols):
        • PointLike, RingLike, PolygonLike, MultiPolygonLike

    Algorithms (vecgeo.algorithm):
        • area / ring_area: Signed planar area, outer ring minus holes
        • haversine_destination: Great-circle destination from bearing and distance
        • haversine_distance: Great-circle distance between two points
        • Area, HaversineDestination, HaversineDistance: Mixins that give any
          implementing class method syntax for the operations above

    Value Types (vecgeo.types):
        • Point, LineString, Polygon, MultiPolygon: Frozen dataclasses
          implementing the capability interfaces

    Quantities (vecgeo.unit):
        • Degree, Radian, Meter, Kilometer: Typed bearings and distances

    Support:
        • vecgeo.config: Scalar type alias and Earth model constants
        • vecgeo.errors: GeometryError, MissingOuterRingError
        • vecgeo.numeric: within_epsilon and unit coercion helpers

Numeric Model:
    Every operation is generic over the floating type of its inputs. Python
    floats, ``numpy.float32`` and ``numpy.float64`` go in and the same type
    comes out. Non-finite inputs are not validated and propagate through the
    arithmetic as NaN or infinity.

Error Handling:
    The only failure mode is a polygon without rings, which has no outer
    boundary. ``area`` raises ``MissingOuterRingError`` for it instead of
    returning zero.

Usage:
    >>> from vecgeo import LineString, Point, Polygon
    >>> from vecgeo.unit import Degree, Meter
    >>>
    >>> rect = Polygon(LineString.from_coords([(0, 0), (5, 0), (5, 6), (0, 6), (0, 0)]))
    >>> rect.area()
    30.0
    >>>
    >>> origin = Point(9.177789688110352, 48.776781529534965)
    >>> dest = origin.haversine_destination(Degree(45), Meter(10_000))
    >>> print(f"{float(origin.haversine_distance(dest)):.3f}")
    10000.000
"""

from vecgeo.algorithm import (
    Area,
    HaversineDestination,
    HaversineDistance,
    area,
    haversine_destination,
    haversine_distance,
    ring_area,
)
from vecgeo.config import MEAN_EARTH_RADIUS
from vecgeo.errors import GeometryError, MissingOuterRingError
from vecgeo.numeric import within_epsilon
from vecgeo.protocols import MultiPolygonLike, PointLike, PolygonLike, RingLike
from vecgeo.types import LineString, MultiPolygon, Point, Polygon

__version__ = "0.1.0"

__all__ = [
    "Area",
    "HaversineDestination",
    "HaversineDistance",
    "area",
    "ring_area",
    "haversine_destination",
    "haversine_distance",
    "Point",
    "LineString",
    "Polygon",
    "MultiPolygon",
    "PointLike",
    "RingLike",
    "PolygonLike",
    "MultiPolygonLike",
    "GeometryError",
    "MissingOuterRingError",
    "MEAN_EARTH_RADIUS",
    "within_epsilon",
]
