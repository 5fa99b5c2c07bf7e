"""Physical dimensions, units and measurement systems.

The core is the dimension algebra in :mod:`dimensionkit.dimensions`: base
dimensions, derived dimensions built from their components, and the
``combine_components`` routine that multiplies, divides and raises
component sets to powers. Units, prefixes and quantities sit on top of it,
and :mod:`dimensionkit.system` ties them together into registries loaded
from JSON definitions.
"""

from dimensionkit.dimensions import (
    BaseDimension,
    DerivedDimension,
    Dimension,
    DimensionComponent,
    DimensionError,
    combine_components,
)
from dimensionkit.system import InheritanceRule, MeasurementSystem, get_si_instance
from dimensionkit.units import OffsetUnits, Prefix, Quantity, Units

__version__ = "0.1.0"

__all__ = [
    "BaseDimension",
    "DerivedDimension",
    "Dimension",
    "DimensionComponent",
    "DimensionError",
    "InheritanceRule",
    "MeasurementSystem",
    "OffsetUnits",
    "Prefix",
    "Quantity",
    "Units",
    "combine_components",
    "get_si_instance",
]
