"""Global constants and type definitions for vecgeo.

This module centralises the numeric type alias accepted by the algorithms and
the physical constants of the spherical Earth model, so every module agrees
on one radius and one notion of a scalar.

Type Definitions:
    Scalar: Union type of the numeric values the algorithms operate on.
            Python floats, NumPy floating scalars (``float32``, ``float64``)
            and NumPy arrays for element-wise evaluation. Results keep the
            floating type of their inputs.

Constants:
    MEAN_EARTH_RADIUS: Mean Earth radius in meters (spherical approximation,
                       not the WGS84 ellipsoid).
    DEFAULT_EPSILON: Machine epsilon of ``float64``, the tolerance used when
                     comparing areas for near-equality.

Example:
    >>> from vecgeo.config import MEAN_EARTH_RADIUS, Scalar
    >>> import numpy as np
    >>> lat: Scalar = np.float32(48.78)
    >>> MEAN_EARTH_RADIUS
    6371000.0
"""

from typing import Final

import numpy as np
from numpy import floating, ndarray

Scalar = int | float | floating | ndarray

MEAN_EARTH_RADIUS: Final[float] = 6_371_000.0

DEFAULT_EPSILON: Final[float] = float(np.finfo(np.float64).eps)
