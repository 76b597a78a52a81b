"""Static unit registries.

Each family maps a unit symbol to the size of one such unit in SI base units.
The tables are built once at import and only exposed through read-only
mapping proxies.

Examples:
    >>> registry_scale("length", "km")
    1000.0
    >>> unit("kg")
    Unit(name='kg', scale=1.0, priority=1, length=0, mass=1, time=0)
    >>> registry_scale("length", "parsec")
    Traceback (most recent call last):
        ...
    tagunits.units.registry.UnknownUnit: Unknown length unit 'parsec'
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .dimension import Dimension, Length, Mass, Time, Force
from .tagged import TaggedNumber
from .unit import Unit


logger = logging.getLogger(__name__)


class UnknownUnit(LookupError):
    """Raised when a unit symbol is not registered in the requested family."""

    def __init__(self, family: Optional[str], symbol: str) -> None:
        if family is None:
            message = "Unknown unit '{}'".format(symbol)
        else:
            message = "Unknown {} unit '{}'".format(family, symbol)
        super().__init__(message)
        self.family = family
        self.symbol = symbol


_INCH = 2.54 / 100
_FOOT = 12 * _INCH
_DAY = 86400.
_LBM = 0.4535924
_SLUG = 32.17405 * _LBM


def _frozen(table: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType(dict(table))


LENGTH = _frozen({
    "m": 1.,
    "km": 1e3,
    "cm": 1e-2,
    "mm": 1e-3,
    "in": _INCH,
    "ft": _FOOT,
    "yd": 3 * _FOOT,
    "mi": 5280 * _FOOT,
    "nmi": 1852.,
})

TIME = _frozen({
    "s": 1.,
    "min": 60.,
    "hr": 3600.,  # not 360: an hour is sixty minutes
    "day": _DAY,
    "year": 365.25 * _DAY,
})

MASS = _frozen({
    "kg": 1.,
    "g": 1e-3,
    "lbm": _LBM,
    "slug": _SLUG,
})

# Force has no base unit of its own; scales are fixed against the newton.
FORCE = _frozen({
    "N": 1.,
    "kN": 1e3,
    "dyn": 1e-5,
    "pdl": _LBM * _FOOT,
    "lbf": _SLUG * _FOOT,
})

REGISTRIES: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "length": LENGTH,
    "time": TIME,
    "mass": MASS,
    "force": FORCE,
})

DIMENSIONS: Mapping[str, Dimension] = MappingProxyType({
    "length": Length,
    "time": Time,
    "mass": Mass,
    "force": Force,
})

# Coherent SI units win addition tie-breaks against other registry units.
PRIORITIES: Mapping[str, int] = MappingProxyType({
    "m": 1,
    "s": 1,
    "kg": 1,
    "N": 1,
})

_FAMILIES: Mapping[str, str] = MappingProxyType({
    symbol: family
    for family, table in REGISTRIES.items()
    for symbol in table
})

logger.debug(
    "Unit registries initialized: %s",
    ", ".join("{} ({} units)".format(f, len(t)) for f, t in REGISTRIES.items()),
)


def registry_scale(family: str, symbol: str) -> float:
    try:
        return REGISTRIES[family][symbol]
    except KeyError:
        raise UnknownUnit(family, symbol) from None


def family_of(symbol: str) -> str:
    try:
        return _FAMILIES[symbol]
    except KeyError:
        raise UnknownUnit(None, symbol) from None


def unit(symbol: str, priority: Optional[int] = None) -> Unit:
    family = family_of(symbol)
    dims = DIMENSIONS[family]
    if priority is None:
        priority = PRIORITIES.get(symbol, 0)
    return Unit(
        symbol,
        REGISTRIES[family][symbol],
        priority,
        dims.length,
        dims.mass,
        dims.time,
    )


def quantity(value: Any, symbol: str, priority: Optional[int] = None) -> TaggedNumber:
    """Tag ``value`` with the registered unit ``symbol``.

    Unlike ``value * units.ft``, which synthesizes an unnamed unit, the
    result keeps the registry unit's name and priority.
    """
    return TaggedNumber(value, unit(symbol, priority))
