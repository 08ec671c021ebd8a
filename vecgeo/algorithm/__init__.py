"""Geometric algorithms over the capability protocols.

Exports:
    area: Net planar area of a polygon (outer ring minus holes)
    ring_area: Signed shoelace area of a single ring
    haversine_destination: Point reached along a great circle
    haversine_distance: Great-circle distance between two points
    Area, HaversineDestination, HaversineDistance: Mixins giving the
        operations method syntax on any implementing class
"""

from .area import Area, area, ring_area
from .haversine_destination import HaversineDestination, haversine_destination
from .haversine_distance import HaversineDistance, haversine_distance

__all__ = [
    "Area",
    "area",
    "ring_area",
    "HaversineDestination",
    "haversine_destination",
    "HaversineDistance",
    "haversine_distance",
]
