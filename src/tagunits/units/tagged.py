import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Tuple, Union
import warnings

import numpy

from .dimension import Dimension, Dimensionless, DimensionMismatch
from .unit import Unit, identity


class UnitStrippedWarning(UserWarning):
    pass


def promote(value: Any) -> "TaggedNumber":
    """Treat a plain number as a dimensionless tagged number."""
    if isinstance(value, TaggedNumber):
        return value
    return TaggedNumber(value, identity)


def _exponent(exponent: Any) -> Any:
    if isinstance(exponent, TaggedNumber):
        if not exponent.dims.dimensionless:
            raise DimensionMismatch(exponent.dims, Dimensionless, "raise to the power of")
        return exponent.to_base()
    return exponent


@dataclass(frozen=True, eq=False, order=False)
class TaggedNumber:
    value: Any
    unit: Unit

    @property
    def dims(self) -> Dimension:
        return self.unit.dims

    def to_base(self) -> Any:
        return self.value * self.unit.scale

    def in_unit(self, unit: Union[Unit, "TaggedNumber"]) -> Any:
        if isinstance(unit, TaggedNumber):
            ratio = self / unit
            if not ratio.dims.dimensionless:
                raise DimensionMismatch(self.dims, unit.dims, "convert")
            return ratio.to_base()
        if not self.unit.compatible(unit):
            raise DimensionMismatch(self.dims, unit.dims, "convert")
        return self.value * self.unit.scale / unit.scale

    def to(self, unit: Unit) -> "TaggedNumber":
        return TaggedNumber(self.in_unit(unit), unit)

    def _align(self, other: "TaggedNumber", operation: str) -> Tuple[Any, Any, Unit]:
        """Express both operands in the dominant unit.

        The unit with the higher priority dominates; on a tie the left
        operand's unit is kept.
        """
        if self.unit == other.unit:
            return self.value, other.value, self.unit
        if not self.unit.compatible(other.unit):
            raise DimensionMismatch(self.dims, other.dims, operation)
        if self.unit.priority >= other.unit.priority:
            return self.value, other.in_unit(self.unit), self.unit
        return self.in_unit(other.unit), other.value, other.unit

    def _compare(self, other: Any, op: Callable[[Any, Any], Any]) -> Any:
        left, right, _ = self._align(promote(other), "compare")
        return op(left, right)

    def __str__(self) -> str:
        suffix = str(self.unit)
        if suffix != "":
            return "{} {}".format(self.value, suffix)
        else:
            return str(self.value)

    def __format__(self, format_str: str) -> str:
        suffix = str(self.unit)
        if suffix != "":
            return ("{:" + format_str + "} {}").format(self.value, suffix)
        else:
            return ("{:" + format_str + "}").format(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __getitem__(self, key: Any) -> "TaggedNumber":
        return TaggedNumber(self.value[key], self.unit)

    def __iter__(self) -> Iterator["TaggedNumber"]:
        for value in iter(self.value):
            yield TaggedNumber(value, self.unit)

    def __array__(self, dtype: Optional[Any] = None, copy: Optional[bool] = None) -> numpy.ndarray:
        warnings.warn(
            "The unit of the tagged number is stripped when downcasting to ndarray.",
            UnitStrippedWarning,
            stacklevel=2,
        )
        return numpy.asarray(self.value, dtype=dtype)

    def __eq__(self, other: Any) -> Any:  # type: ignore
        return self._compare(other, operator.eq)

    def __ne__(self, other: Any) -> Any:  # type: ignore
        return self._compare(other, operator.ne)

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def __neg__(self) -> "TaggedNumber":
        return TaggedNumber(-self.value, self.unit)

    def __pos__(self) -> "TaggedNumber":
        return self

    def __abs__(self) -> "TaggedNumber":
        return TaggedNumber(abs(self.value), self.unit)

    def __add__(self, other: Any) -> "TaggedNumber":
        left, right, unit = self._align(promote(other), "add")
        return TaggedNumber(left + right, unit)

    def __radd__(self, other: Any) -> "TaggedNumber":
        return promote(other) + self

    def __sub__(self, other: Any) -> "TaggedNumber":
        left, right, unit = self._align(-promote(other), "subtract")
        return TaggedNumber(left + right, unit)

    def __rsub__(self, other: Any) -> "TaggedNumber":
        return promote(other) - self

    def __mul__(self, other: Any) -> "TaggedNumber":
        other = promote(other)
        return TaggedNumber(
            self.value * other.value,
            self.unit * other.unit,
        )

    def __rmul__(self, other: Any) -> "TaggedNumber":
        return promote(other) * self

    def __truediv__(self, other: Any) -> "TaggedNumber":
        other = promote(other)
        return TaggedNumber(
            numpy.true_divide(self.value, other.value),
            self.unit / other.unit,
        )

    def __rtruediv__(self, other: Any) -> "TaggedNumber":
        return TaggedNumber(
            numpy.true_divide(other, self.value),
            identity / self.unit,
        )

    def __pow__(self, exponent: Any) -> "TaggedNumber":
        exponent = _exponent(exponent)
        return TaggedNumber(
            numpy.float_power(self.value, exponent),
            self.unit**exponent,
        )

    def root(self, exponent: int) -> "TaggedNumber":
        return self**(1 / exponent)

    def sqrt(self) -> "TaggedNumber":
        return self**0.5

    def cbrt(self) -> "TaggedNumber":
        return self**(1 / 3)

    __array_ufunc__ = None
    """Stops numpy from distributing across an array operand before the
    tagged number's reflected operator gets to unwrap it."""


def to_base(val: Any) -> Any:
    return promote(val).to_base()


def in_unit(val: Any, unit: Union[Unit, TaggedNumber]) -> Any:
    return promote(val).in_unit(unit)


def sqrt(val: Any) -> TaggedNumber:
    return promote(val).sqrt()


def cbrt(val: Any) -> TaggedNumber:
    return promote(val).cbrt()
