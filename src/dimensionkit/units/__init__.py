"""Units, prefixes and quantities built on the dimension algebra."""

from dimensionkit.units.prefix import Prefix
from dimensionkit.units.quantity import Quantity
from dimensionkit.units.units import OffsetUnits, Units, compute_factor

__all__ = ["OffsetUnits", "Prefix", "Quantity", "Units", "compute_factor"]
