"""Unit-tagged bearings and distances.

Unit Families:
    - Angle: Radian, Degree (stored in radians)
    - Length: Meter, Kilometer (stored in meters)

Example:
    >>> from vecgeo.unit import Degree, Kilometer, Meter
    >>> Kilometer(10).to(Meter)
    10000.0
    >>> Kilometer(10)
    Kilometer(10 km)
    >>> Kilometer(10).to(Degree)
    Traceback (most recent call last):
        ...
    TypeError: cannot express Kilometer in Degree
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Quantity
from .unit_distance import Kilometer, Length, Meter

__all__ = [
    "Quantity",
    "Angle",
    "Radian",
    "Degree",
    "Length",
    "Meter",
    "Kilometer",
]
