from __future__ import annotations

from collections.abc import Iterable, Iterator

from dimensionkit.dimensions.base import BaseDimension
from dimensionkit.dimensions.combine import Accumulator, combine_components, normalize_components
from dimensionkit.dimensions.component import ComponentIterable, DimensionComponent
from dimensionkit.dimensions.dimension import Dimension
from dimensionkit.dimensions.errors import EmptyResultError, InvalidArgumentError


class DerivedDimension(Dimension):
    """A dimension combined from the components of other dimensions or units.

    Inputs are normalized once at construction: one component per base
    dimension with exponents summed, zero exponents dropped, sorted in
    component order. At least one component must survive.
    """

    __slots__ = ("_components",)

    def __init__(
        self,
        name: str,
        components: Iterable[ComponentIterable],
        description: str | None = None,
    ) -> None:
        super().__init__(name, description)
        if components is None:
            raise InvalidArgumentError("Components required", path=name)
        self._components = _normalize(name, components)

    @classmethod
    def linear(cls, name: str, base: BaseDimension, description: str | None = None) -> DerivedDimension:
        """Wrap a single base dimension under a new name."""
        if base is None:
            raise InvalidArgumentError("Base dimension required", path=name)
        return cls(name, [base], description)

    @property
    def components(self) -> tuple[DimensionComponent, ...]:
        return self._components

    def component_count(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[DimensionComponent]:
        return iter(self._components)

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is not True:
            return result
        return self.compare_components(other) == 0

    def __hash__(self) -> int:
        # equality compares base dimensions by name, not identity
        shape = tuple(
            (component.exponent, component.dimension.name, component.dimension.description)
            for component in self._components
        )
        return hash((self._name, self._description, shape))

    def __str__(self) -> str:
        terms = " ".join(str(component) for component in self._components)
        return f"{super().__str__()} [{terms}]"


def _normalize(name: str, components: Iterable[ComponentIterable]) -> tuple[DimensionComponent, ...]:
    accumulator: Accumulator = {}
    for index, iterable in enumerate(components):
        if iterable is None:
            raise InvalidArgumentError("Null component iterable", path=f"{name}[{index}]")
        combine_components(accumulator, iterable, 1.0)

    if not accumulator:
        raise EmptyResultError("Missing valid dimension components", path=name)
    return normalize_components(accumulator)


__all__ = ["DerivedDimension"]
