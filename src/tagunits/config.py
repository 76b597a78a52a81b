import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .units.registry import registry_scale
from .units.table import ConversionTable, build_table


logger = logging.getLogger(__name__)

ENVIRON_PREFIX = "TAGUNITS_"


@dataclass(frozen=True)
class BaseSystem:
    """The base unit chosen for each of length, time and mass."""

    length: str = "m"
    time: str = "s"
    mass: str = "kg"

    def validate(self) -> "BaseSystem":
        registry_scale("length", self.length)
        registry_scale("time", self.time)
        registry_scale("mass", self.mass)
        return self

    def table(self) -> ConversionTable:
        return build_table(self.length, self.time, self.mass)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "BaseSystem":
        """Read base units from ``TAGUNITS_LENGTH``, ``TAGUNITS_TIME`` and
        ``TAGUNITS_MASS``, keeping the defaults for any that are unset."""
        if environ is None:
            environ = os.environ
        overrides = {}
        for family in ("length", "time", "mass"):
            value = environ.get(ENVIRON_PREFIX + family.upper(), "").strip()
            if value:
                logger.debug("Base %s unit overridden from environment: %s", family, value)
                overrides[family] = value
        return cls(**overrides).validate()


def conversion_table(system: Optional[BaseSystem] = None) -> ConversionTable:
    if system is None:
        system = BaseSystem.from_environ()
    return system.table()
