"""Exceptions raised by vecgeo."""


class GeometryError(Exception):
    """Base class for malformed geometry reported by the algorithms."""


class MissingOuterRingError(GeometryError, ValueError):
    """A polygon produced no rings, so it has no outer boundary.

    Attributes:
        geometry: The offending polygon-like value.
    """

    def __init__(self, geometry: object = None, msg: str = "missing outer ring in polygon"):
        super().__init__(msg)
        self.geometry = geometry
