"""Conversion tables relative to a chosen set of base units.

Examples:
    >>> table = build_table("ft", "s", "lbm")
    >>> table["ft"]
    1.0
    >>> round(table["mi"])
    5280
    >>> round(table["lbf"], 5)
    32.17405
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Tuple

import pandas  # type: ignore

from .registry import REGISTRIES, UnknownUnit, family_of, registry_scale


logger = logging.getLogger(__name__)

BASE_FAMILIES = ("length", "time", "mass")


class ConversionTable(Mapping[str, float]):
    """Read-only mapping from unit symbol to its size in the table's base units."""

    def __init__(self, factors: Mapping[str, float], base: Tuple[str, str, str]) -> None:
        self._factors = MappingProxyType(dict(factors))
        self.base = base

    def __getitem__(self, symbol: str) -> float:
        return self._factors[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._factors)

    def __len__(self) -> int:
        return len(self._factors)

    def __repr__(self) -> str:
        length, time, mass = self.base
        return "ConversionTable(length={!r}, time={!r}, mass={!r})".format(length, time, mass)

    def convert(self, value: Any, symbol: str) -> Any:
        """Express ``value``, given in ``symbol``, in the table's base units."""
        try:
            factor = self._factors[symbol]
        except KeyError:
            raise UnknownUnit(None, symbol) from None
        return value * factor

    def to_frame(self) -> pandas.DataFrame:
        return pandas.DataFrame(
            {
                "family": [family_of(symbol) for symbol in self._factors],
                "factor": list(self._factors.values()),
            },
            index=pandas.Index(list(self._factors), name="symbol"),
        )


def build_table(length: str = "m", time: str = "s", mass: str = "kg") -> ConversionTable:
    base = dict(zip(BASE_FAMILIES, (length, time, mass)))
    base_scale = {family: registry_scale(family, symbol) for family, symbol in base.items()}

    factors: Dict[str, float] = {}
    for family in BASE_FAMILIES:
        for symbol, scale in REGISTRIES[family].items():
            factors[symbol] = scale / base_scale[family]

    force_base = base_scale["mass"] * base_scale["length"] / base_scale["time"]**2
    for symbol, scale in REGISTRIES["force"].items():
        factors[symbol] = scale / force_base

    logger.debug(
        "Built conversion table for base units %s/%s/%s with %d entries",
        length, time, mass, len(factors),
    )
    return ConversionTable(factors, (length, time, mass))
