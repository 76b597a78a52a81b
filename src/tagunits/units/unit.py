from dataclasses import dataclass
from typing import Union

import numpy

from .dimension import Dimension


MIN_PRIORITY = int(numpy.iinfo(numpy.int64).min)
"""Priority given to synthesized units, so they never dominate a named unit."""

DERIVED = "none"


@dataclass(frozen=True)
class Unit:
    """A physical unit: a scale relative to SI base units over a dimension.

    ``name`` is informational; two units are compatible when their
    dimensions agree, whatever their names, scales or priorities.

    Examples:
        >>> foot = Unit("ft", 0.3048, 0, length=1)
        >>> second = Unit("s", 1.0, 1, time=1)
        >>> (foot / second).dims
        Dimension(length=1, mass=0, time=-1)
        >>> (foot / second).name
        'none'
        >>> (foot**2).compatible(foot * foot)
        True
    """

    name: str
    scale: float
    priority: int = 0
    length: float = 0
    mass: float = 0
    time: float = 0

    @classmethod
    def derived(cls, scale: float, dims: Dimension) -> "Unit":
        return cls(DERIVED, scale, MIN_PRIORITY, dims.length, dims.mass, dims.time)

    @property
    def dims(self) -> Dimension:
        return Dimension(self.length, self.mass, self.time)

    @property
    def is_derived(self) -> bool:
        return self.name == DERIVED

    def compatible(self, other: "Unit") -> bool:
        return self.dims == other.dims

    def __str__(self) -> str:
        if not self.is_derived:
            return self.name
        if self.dims.dimensionless:
            return "" if self.scale == 1 else "({:g})".format(self.scale)
        if self.scale == 1:
            return str(self.dims)
        return "({:g} {})".format(self.scale, self.dims)

    def __mul__(self, other: "Unit") -> "Unit":
        return Unit.derived(self.scale * other.scale, self.dims * other.dims)

    def __truediv__(self, other: "Unit") -> "Unit":
        return Unit.derived(self.scale / other.scale, self.dims / other.dims)

    def __pow__(self, exponent: Union[int, float]) -> "Unit":
        return Unit.derived(self.scale**exponent, self.dims**exponent)

    def root(self, exponent: int) -> "Unit":
        return self**(1 / exponent)

    def sqrt(self) -> "Unit":
        return self.root(2)

    def cbrt(self) -> "Unit":
        return self.root(3)


identity = Unit.derived(1.0, Dimension())
