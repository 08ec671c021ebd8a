"""Ground distances along the sphere, stored in meters like
:data:`vecgeo.config.MEAN_EARTH_RADIUS`."""

from .unit_base import Quantity


class Length(Quantity):
    """Length family. Stored in meters."""

    __slots__ = ()


class Meter(Length):
    __slots__ = ()
    SYMBOL = "m"


class Kilometer(Length):
    __slots__ = ()
    SCALE_TO_SI = 1000.0
    SYMBOL = "km"
