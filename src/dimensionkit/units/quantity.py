"""Scalar quantities and the arithmetic rules between them.

Addition and subtraction need component-equal dimensions. Null base
dimensions (e.g. Angle) are not ignored for that check; callers who want
the relaxed rule can test it with ``Quantity.compatible(ignore_null=True)``
and convert explicitly.
"""

from __future__ import annotations

from dimensionkit.dimensions.combine import combine_components
from dimensionkit.dimensions.component import DimensionComponent
from dimensionkit.dimensions.dimension import compare_components
from dimensionkit.dimensions.errors import IncompatibleDimensionsError, InvalidArgumentError
from dimensionkit.units.units import Units


def _non_null(units: Units) -> list[DimensionComponent]:
    return [component for component in units if not component.dimension.is_null()]


class _Components:
    """Adapter giving a plain component list the component-iterable contract."""

    def __init__(self, components: list[DimensionComponent]) -> None:
        self._components = components

    def __iter__(self):
        return iter(self._components)

    def component_count(self) -> int:
        return len(self._components)


class Quantity:
    __slots__ = ("_value", "_units")

    def __init__(self, value: float, units: Units) -> None:
        if units is None:
            raise InvalidArgumentError("Quantity units required")
        self._value = float(value)
        self._units = units

    @property
    def value(self) -> float:
        return self._value

    @property
    def units(self) -> Units:
        return self._units

    def to(self, units: Units) -> Quantity:
        return Quantity(self._units.convert(self._value, units), units)

    def compatible(self, other: Quantity, *, ignore_null: bool = False) -> bool:
        if not ignore_null:
            return self._units.is_compatible(other.units)
        mine = _Components(_non_null(self._units))
        theirs = _Components(_non_null(other.units))
        return compare_components(mine, theirs) == 0

    def _require_compatible(self, other: Quantity, op: str) -> None:
        if not self.compatible(other):
            raise IncompatibleDimensionsError(
                f"{op} requires equal dimensions, got {self._units.dimension.name} "
                f"and {other.units.dimension.name}"
            )

    def __add__(self, other: object) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_compatible(other, "Addition")
        return Quantity(self._value + other.to(self._units).value, self._units)

    def __sub__(self, other: object) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_compatible(other, "Subtraction")
        return Quantity(self._value - other.to(self._units).value, self._units)

    def __neg__(self) -> Quantity:
        return Quantity(-self._value, self._units)

    def __mul__(self, other: object) -> Quantity | float:
        if isinstance(other, Quantity):
            return self._combine(other, 1.0)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Quantity(self._value * other, self._units)
        return NotImplemented

    def __rmul__(self, other: object) -> Quantity:
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Quantity(other * self._value, self._units)
        return NotImplemented

    def __truediv__(self, other: object) -> Quantity | float:
        if isinstance(other, Quantity):
            return self._combine(other, -1.0)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Quantity(self._value / other, self._units)
        return NotImplemented

    def __rtruediv__(self, other: object) -> Quantity:
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Quantity(other / self._value, self._units**-1)
        return NotImplemented

    def _combine(self, other: Quantity, exponent_factor: float) -> Quantity | float:
        # fully cancelled dimensions are not representable, return a plain number
        accumulator = combine_components(None, self._units, 1.0)
        combine_components(accumulator, other.units, exponent_factor)
        if exponent_factor > 0:
            value = self._value * other.value
            if not accumulator:
                return value * self._units.factor * other.units.factor
            return Quantity(value, self._units * other.units)
        value = self._value / other.value
        if not accumulator:
            return value * self._units.factor / other.units.factor
        return Quantity(value, self._units / other.units)

    def __repr__(self) -> str:
        return f"Quantity({self._value!r}, {self._units.symbol!r})"

    def __str__(self) -> str:
        return f"{self._value:g} {self._units.symbol}"


__all__ = ["Quantity"]
