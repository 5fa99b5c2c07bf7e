"""Dimension algebra: components, base and derived dimensions."""

from dimensionkit.dimensions.base import BaseDimension
from dimensionkit.dimensions.combine import (
    combine_components,
    divide_components,
    multiply_components,
    normalize_components,
    power_components,
)
from dimensionkit.dimensions.component import ComponentIterable, DimensionComponent
from dimensionkit.dimensions.derived import DerivedDimension
from dimensionkit.dimensions.dimension import (
    Dimension,
    canonical_key,
    canonical_order,
    compare_components,
    shape_key,
    shape_order,
)
from dimensionkit.dimensions.errors import (
    DefinitionError,
    DimensionError,
    EmptyResultError,
    IncompatibleDimensionsError,
    InvalidArgumentError,
    NullComparisonError,
    UnknownEntryError,
)

__all__ = [
    "BaseDimension",
    "ComponentIterable",
    "DefinitionError",
    "DerivedDimension",
    "Dimension",
    "DimensionComponent",
    "DimensionError",
    "EmptyResultError",
    "IncompatibleDimensionsError",
    "InvalidArgumentError",
    "NullComparisonError",
    "UnknownEntryError",
    "canonical_key",
    "canonical_order",
    "combine_components",
    "compare_components",
    "divide_components",
    "multiply_components",
    "normalize_components",
    "power_components",
    "shape_key",
    "shape_order",
]
