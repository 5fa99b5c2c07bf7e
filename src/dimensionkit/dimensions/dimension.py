"""Common contract of base and derived dimensions.

Dimensions carry two distinct orders, exposed as separate comparators:

* ``canonical_order`` compares name, then description (a missing description
  sorts after any present one), then the fully qualified class name. It is
  consistent with ``==`` and is what ``<`` on a dimension uses.
* ``shape_order`` compares components first and falls back to the canonical
  order. Registries use it to find dimensions by their components.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from functools import cmp_to_key
from typing import Any

from dimensionkit.dimensions.combine import Accumulator, combine_components
from dimensionkit.dimensions.component import ComponentIterable, DimensionComponent
from dimensionkit.dimensions.errors import InvalidArgumentError, NullComparisonError


def _compare(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _compare_optional(left: str | None, right: str | None) -> int:
    if left is None:
        return 0 if right is None else 1
    if right is None:
        return -1
    return _compare(left, right)


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def compare_components(left: ComponentIterable, right: ComponentIterable) -> int:
    """Compare two component iterables element by element.

    Returns the first non-zero component comparison. When one sequence runs
    out first it is the smaller one.
    """
    if left is None or right is None:
        raise NullComparisonError("Cannot compare components against None")
    for mine, theirs in zip(left, right):
        comp = mine.compare_to(theirs)
        if comp != 0:
            return comp
    return left.component_count() - right.component_count()


class Dimension(ABC):
    """A named dimension. All units lie along a dimension.

    Equality requires the same concrete class, name and description.
    Components are deliberately left out of base equality; use
    :meth:`compare_components` to test shape.
    """

    __slots__ = ("_name", "_description")

    def __init__(self, name: str, description: str | None = None) -> None:
        if not name or not isinstance(name, str):
            raise InvalidArgumentError("Dimension name required")
        self._name = name
        self._description = description

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str | None:
        return self._description

    @abstractmethod
    def component_count(self) -> int:
        """Number of components yielded by iteration."""

    @abstractmethod
    def __iter__(self) -> Iterator[DimensionComponent]:
        """Components sorted by exponent descending, then base dimension."""

    def compare_components(self, other: ComponentIterable) -> int:
        return compare_components(self, other)

    @staticmethod
    def combine_components(
        accumulator: Accumulator | None,
        components: ComponentIterable,
        exponent_factor: float = 1.0,
    ) -> Accumulator:
        return combine_components(accumulator, components, exponent_factor)

    def compare_to(self, other: Dimension) -> int:
        if other is None:
            raise NullComparisonError("Cannot compare a dimension against None")
        comp = _compare(self._name, other.name)
        if comp != 0:
            return comp
        comp = _compare_optional(self._description, other.description)
        if comp != 0:
            return comp
        return _compare(_qualified_name(type(self)), _qualified_name(type(other)))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.compare_to(other) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return self._name == other._name and self._description == other._description

    def __hash__(self) -> int:
        return hash((self._name, self._description))

    def __str__(self) -> str:
        if self._description is not None:
            return f"{self._name} ({self._description})"
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


def canonical_order(left: Dimension, right: Dimension) -> int:
    if left is None or right is None:
        raise NullComparisonError("Cannot order a dimension against None")
    return left.compare_to(right)


def shape_order(left: Dimension, right: Dimension) -> int:
    comp = compare_components(left, right)
    if comp != 0:
        return comp
    return left.compare_to(right)


canonical_key = cmp_to_key(canonical_order)
shape_key = cmp_to_key(shape_order)
components_key = cmp_to_key(compare_components)


__all__ = [
    "Dimension",
    "canonical_key",
    "canonical_order",
    "compare_components",
    "components_key",
    "shape_key",
    "shape_order",
]
