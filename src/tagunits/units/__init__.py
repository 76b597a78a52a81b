"""Dimensional analysis over length, mass and time.

New quantities can be constructed by multiplying a float, numpy array, or
other raw value by one of the provided units (i.e. ``units.m``, ``units.ft``,
``units.s``, ``units.kg``, ``units.lbf``). The raw value is treated as a
dimensionless number, so the product carries a synthesized unit with the
scale and dimension of the named one but no name of its own. Use
``quantity`` to tag a value with the registered unit itself.

Examples:
    >>> str(3 * ft)
    '3.0 (0.3048 m)'
    >>> str(quantity(3, "ft"))
    '3 ft'
    >>> str((2 * m) * (3 * kg) / (1 * s)**2)
    '6.0 m kg s^-2'
    >>> str(sqrt(9 * m**2))
    '3.0 m'


Quantities of the same dimension can be added and subtracted even when they
are expressed in different units. The result takes the unit with the higher
priority, and the left operand's unit when the priorities are equal.

Examples:
    >>> str(2 * kg + 500 * g)
    '2.5 kg'
    >>> str(quantity(1.0, "km") + quantity(200.0, "m"))
    '1200.0 m'
    >>> 1 * m + 1 * s
    Traceback (most recent call last):
        ...
    tagunits.units.dimension.DimensionMismatch: Can't add values: incompatible dimensions (1, 0, 0) and (0, 0, 1)


Conversion tables give the size of every registered unit in a chosen set of
base units.

Example:
    >>> build_table("m", "s", "kg")["km"]
    1000.0
"""

from .dimension import Dimension, DimensionMismatch, Dimensionless, Length, Mass, Time, Force
from .unit import Unit, MIN_PRIORITY, identity
from .tagged import TaggedNumber, UnitStrippedWarning, promote, to_base, in_unit, sqrt, cbrt
from .registry import UnknownUnit, registry_scale, family_of, unit, quantity
from .table import ConversionTable, build_table

m = quantity(1.0, "m")
km = quantity(1.0, "km")
cm = quantity(1.0, "cm")
mm = quantity(1.0, "mm")
inch = quantity(1.0, "in")
ft = quantity(1.0, "ft")
yd = quantity(1.0, "yd")
mi = quantity(1.0, "mi")
nmi = quantity(1.0, "nmi")

s = quantity(1.0, "s")
minute = quantity(1.0, "min")
hr = quantity(1.0, "hr")
day = quantity(1.0, "day")
year = quantity(1.0, "year")

kg = quantity(1.0, "kg")
g = quantity(1.0, "g")
lbm = quantity(1.0, "lbm")
slug = quantity(1.0, "slug")

N = quantity(1.0, "N")
kN = quantity(1.0, "kN")
dyn = quantity(1.0, "dyn")
pdl = quantity(1.0, "pdl")
lbf = quantity(1.0, "lbf")

one = TaggedNumber(1.0, identity)

__all__ = [
    'Dimension', 'DimensionMismatch', 'Dimensionless', 'Length', 'Mass', 'Time', 'Force',
    'Unit', 'MIN_PRIORITY', 'identity',
    'TaggedNumber', 'UnitStrippedWarning', 'promote', 'to_base', 'in_unit', 'sqrt', 'cbrt',
    'UnknownUnit', 'registry_scale', 'family_of', 'unit', 'quantity',
    'ConversionTable', 'build_table',
    'm', 'km', 'cm', 'mm', 'inch', 'ft', 'yd', 'mi', 'nmi',
    's', 'minute', 'hr', 'day', 'year',
    'kg', 'g', 'lbm', 'slug',
    'N', 'kN', 'dyn', 'pdl', 'lbf',
    'one',
]
