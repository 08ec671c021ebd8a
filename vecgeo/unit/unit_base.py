"""Quantity base class: a float tagged with the unit it was given in.

A :class:`Quantity` exists so a caller can hand a bearing or a distance to the
algorithms without agreeing on a convention first. ``Degree(45)`` and
``Radian(pi / 4)`` are the same bearing; ``Kilometer(10)`` and
``Meter(10_000)`` are the same distance. The value is stored in the SI unit of
its family, so ``float()`` of any angle is radians and of any length is meters.

Quantities are inputs, not a dimensional-analysis system. Arithmetic is plain
``float`` arithmetic on the SI value and returns an untagged number, which
keeps NumPy scalars and arrays usable on either side of an operator.

Families are the direct subclasses of :class:`Quantity` (``Angle``,
``Length``). :meth:`Quantity.to` refuses to convert across families.
"""

from __future__ import annotations

from typing import ClassVar


def _family(unit_type: type) -> type | None:
    for base in unit_type.__mro__:
        if Quantity in base.__bases__:
            return base
    return None


class Quantity(float):
    """Float stored in the SI unit of its family.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor from this unit to the family's
            SI unit.
        SYMBOL (ClassVar[str]): Unit symbol used in ``repr``.
    """

    __slots__ = ()

    SCALE_TO_SI: ClassVar[float] = 1.0
    SYMBOL: ClassVar[str] = ""

    def __new__(cls, value: float):
        return super().__new__(cls, float(value) * cls.SCALE_TO_SI)

    def to(self, unit_type: type[Quantity]) -> float:
        """Return the plain value expressed in ``unit_type``.

        Raises:
            TypeError: If ``unit_type`` measures something else, e.g. asking
                a length for its value in degrees.
        """
        family = _family(type(self))
        if family is None or family is not _family(unit_type):
            msg = f"cannot express {type(self).__name__} in {unit_type.__name__}"
            raise TypeError(msg)
        return float(self) / unit_type.SCALE_TO_SI

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to(type(self)):g} {self.SYMBOL})"
