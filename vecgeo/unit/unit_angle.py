"""Bearings.

A plain number passed as a bearing is read as degrees clockwise from true
north. Wrap it in :class:`Radian` when it comes out of other trigonometry.
"""

from math import pi

from .unit_base import Quantity


class Angle(Quantity):
    """Angle family. Stored in radians."""

    __slots__ = ()


class Radian(Angle):
    __slots__ = ()
    SYMBOL = "rad"


class Degree(Angle):
    """Compass degrees: ``Degree(0)`` is north, ``Degree(90)`` is east."""

    __slots__ = ()
    SCALE_TO_SI = pi / 180
    SYMBOL = "°"
