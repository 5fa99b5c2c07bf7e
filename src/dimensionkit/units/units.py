from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from dimensionkit.dimensions.base import BaseDimension
from dimensionkit.dimensions.combine import Accumulator, combine_components, normalize_components
from dimensionkit.dimensions.component import DimensionComponent, format_exponent
from dimensionkit.dimensions.derived import DerivedDimension
from dimensionkit.dimensions.dimension import Dimension
from dimensionkit.dimensions.errors import IncompatibleDimensionsError, InvalidArgumentError
from dimensionkit.units.prefix import Prefix

if TYPE_CHECKING:
    from dimensionkit.system.measurement_system import MeasurementSystem
    from dimensionkit.units.quantity import Quantity


def _as_factor(value: float, label: str) -> float:
    try:
        factor = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{label} must be a number", path=label) from exc
    if not math.isfinite(factor) or factor == 0.0:
        raise InvalidArgumentError(f"{label} must be finite and non-zero", path=label)
    return factor


class Units:
    """Units lying along a dimension.

    ``factor`` converts a value in these units into the base units of the
    dimension. Units iterate over their dimension's components, so they can
    be combined with dimensions and with each other.
    """

    __slots__ = ("_name", "_abbreviation", "_factor", "_null_factor", "_dimension")

    def __init__(
        self,
        name: str,
        abbreviation: str | None,
        dimension: Dimension,
        factor: float = 1.0,
    ) -> None:
        if not name:
            raise InvalidArgumentError("Units name required")
        if dimension is None:
            raise InvalidArgumentError("Units dimension required", path=name)
        self._name = name
        self._abbreviation = abbreviation
        self._factor = _as_factor(factor, name)
        self._dimension = dimension
        if isinstance(dimension, BaseDimension) and dimension.is_null():
            self._null_factor = self._factor
        else:
            self._null_factor = 1.0

    @classmethod
    def scaled(cls, name: str, abbreviation: str | None, factor: float, units: Units) -> Units:
        if units is None:
            raise InvalidArgumentError("Reference units required", path=name)
        return cls(name, abbreviation, units.dimension, _as_factor(factor, name) * units.factor)

    @classmethod
    def prefixed(cls, prefix: Prefix, units: Units) -> Units:
        abbreviation = None
        if prefix.abbreviation is not None and units.abbreviation is not None:
            abbreviation = prefix.abbreviation + units.abbreviation
        return cls(
            prefix.long_form + units.name,
            abbreviation,
            units.dimension,
            prefix.factor * units.factor,
        )

    @classmethod
    def compose(
        cls,
        name: str,
        abbreviation: str | None,
        numerator: Sequence[Units],
        denominator: Sequence[Units] = (),
        factor: float = 1.0,
        system: MeasurementSystem | None = None,
    ) -> Units:
        """Build units from products and quotients of other units.

        The dimension is the normalized combination of the numerator and the
        reciprocal denominator. When ``system`` registers a dimension with the
        same components, that dimension is used instead of a temporary one.
        """
        numerator = tuple(numerator or ())
        denominator = tuple(denominator or ())
        accumulator: Accumulator = {}
        for units in numerator:
            combine_components(accumulator, units, 1.0)
        for units in denominator:
            combine_components(accumulator, units, -1.0)

        dimension = DerivedDimension(
            f"{name} Dimension",
            normalize_components(accumulator),
            f"Temporary dimension for {name} units",
        )
        if system is not None:
            dimension = system.find_dimension(dimension) or dimension
        total = _as_factor(factor, name) * compute_factor(numerator, denominator)
        return cls(name, abbreviation, dimension, total)

    @property
    def name(self) -> str:
        return self._name

    @property
    def abbreviation(self) -> str | None:
        return self._abbreviation

    @property
    def factor(self) -> float:
        return self._factor

    @property
    def null_factor(self) -> float:
        return self._null_factor

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    def __iter__(self) -> Iterator[DimensionComponent]:
        return iter(self._dimension)

    def component_count(self) -> int:
        return self._dimension.component_count()

    def to_base(self, value: float) -> float:
        return value * self._factor

    def from_base(self, value: float) -> float:
        return value / self._factor

    def is_compatible(self, other: Units) -> bool:
        return self._dimension.compare_components(other) == 0

    def convert(self, value: float, target: Units) -> float:
        if target is None:
            raise InvalidArgumentError("Target units required", path=self._name)
        if not self.is_compatible(target):
            raise IncompatibleDimensionsError(
                f"Cannot convert {self._name} ({self._dimension.name}) "
                f"to {target.name} ({target.dimension.name})"
            )
        return target.from_base(self.to_base(value))

    def __mul__(self, other: object) -> Units:
        if not isinstance(other, Units):
            return NotImplemented
        return Units.compose(
            f"{self._name}*{other.name}",
            f"{self.symbol}*{other.symbol}",
            [self, other],
        )

    def __rmul__(self, other: object) -> Quantity:
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            from dimensionkit.units.quantity import Quantity

            return Quantity(float(other), self)
        return NotImplemented

    def __truediv__(self, other: object) -> Units:
        if not isinstance(other, Units):
            return NotImplemented
        return Units.compose(
            f"{self._name}/{other.name}",
            f"{self.symbol}/{other.symbol}",
            [self],
            [other],
        )

    def __pow__(self, power: float) -> Units:
        if power == 0:
            raise InvalidArgumentError(f"Cannot raise {self._name} to the power 0", path=self._name)
        label = format_exponent(float(power))
        dimension = DerivedDimension(
            f"{self._name}^{label} Dimension",
            normalize_components(combine_components(None, self, power)),
            f"Temporary dimension for {self._name}^{label} units",
        )
        return Units(
            f"{self._name}^{label}",
            f"{self.symbol}^{label}",
            dimension,
            self._factor**power,
        )

    @property
    def symbol(self) -> str:
        return self._abbreviation or self._name

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._name!r}, {self._abbreviation!r}, "
            f"dimension={self._dimension.name!r}, factor={self._factor!r})"
        )


class OffsetUnits(Units):
    """Affine units defined against a parent, such as temperature scales.

    ``convert_to_parent(q) = (q + offset) * scale``.
    """

    __slots__ = ("_parent", "_scale", "_offset")

    def __init__(
        self,
        name: str,
        abbreviation: str | None,
        parent: Units,
        offset: float,
        scale: float = 1.0,
    ) -> None:
        if parent is None:
            raise InvalidArgumentError("Parent units required", path=name)
        scale = _as_factor(scale, name)
        super().__init__(name, abbreviation, parent.dimension, scale * parent.factor)
        self._parent = parent
        self._scale = scale
        self._offset = float(offset)

    @property
    def parent(self) -> Units:
        return self._parent

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def offset(self) -> float:
        return self._offset

    def convert_to_parent(self, value: float) -> float:
        return (value + self._offset) * self._scale

    def convert_from_parent(self, value: float) -> float:
        return value / self._scale - self._offset

    def to_base(self, value: float) -> float:
        return self._parent.to_base(self.convert_to_parent(value))

    def from_base(self, value: float) -> float:
        return self.convert_from_parent(self._parent.from_base(value))


def compute_factor(numerator: Sequence[Units], denominator: Sequence[Units]) -> float:
    factor = 1.0
    for units in numerator:
        factor *= units.factor
    for units in denominator:
        factor /= units.factor
    return factor


__all__ = ["OffsetUnits", "Units", "compute_factor"]
