from dataclasses import dataclass
from typing import Iterator, Tuple, Union


_SYMBOLS = ("m", "kg", "s")


@dataclass(frozen=True)
class Dimension:
    """Exponents of a unit over the base dimensions (length, mass, time)."""

    length: float = 0
    mass: float = 0
    time: float = 0

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.length, self.mass, self.time)

    def __str__(self) -> str:
        parts = []
        for symbol, exponent in zip(_SYMBOLS, self):
            if exponent == 0:
                continue
            if exponent == 1:
                parts.append(symbol)
            else:
                parts.append("{}^{:g}".format(symbol, exponent))
        if not parts:
            return "dimensionless"
        return " ".join(parts)

    def __mul__(self, other: "Dimension") -> "Dimension":
        return Dimension(
            self.length + other.length,
            self.mass + other.mass,
            self.time + other.time,
        )

    def __truediv__(self, other: "Dimension") -> "Dimension":
        return Dimension(
            self.length - other.length,
            self.mass - other.mass,
            self.time - other.time,
        )

    def __pow__(self, exponent: Union[int, float]) -> "Dimension":
        return Dimension(
            self.length * exponent,
            self.mass * exponent,
            self.time * exponent,
        )

    @property
    def dimensionless(self) -> bool:
        return self == Dimensionless


Dimensionless = Dimension()
Length = Dimension(length=1)
Mass = Dimension(mass=1)
Time = Dimension(time=1)
Force = Mass * Length / Time**2


class DimensionMismatch(ValueError):
    """Raised when an operation needs two quantities of the same dimension."""

    def __init__(self, first: Dimension, second: Dimension, operation: str = "combine") -> None:
        super().__init__(
            "Can't {} values: incompatible dimensions {} and {}"
            .format(operation, first.as_tuple(), second.as_tuple())
        )
        self.first = first
        self.second = second
        self.operation = operation
