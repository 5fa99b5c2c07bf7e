from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from dimensionkit.dimensions.errors import InvalidArgumentError, NullComparisonError

if TYPE_CHECKING:
    from dimensionkit.dimensions.base import BaseDimension


@runtime_checkable
class ComponentIterable(Protocol):
    """Anything exposing a sorted, restartable sequence of components and its length.

    Iteration must follow the natural order of :class:`DimensionComponent` and
    ``component_count()`` must equal the number of yielded components.
    """

    def __iter__(self) -> Iterator[DimensionComponent]: ...

    def component_count(self) -> int: ...


def as_exponent(value: float) -> float:
    """Round ``value`` to single precision, rejecting non-finite results."""
    try:
        with np.errstate(over="ignore"):
            exponent = float(np.float32(value))
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Exponent must be a number, got {value!r}") from exc
    if not math.isfinite(exponent):
        raise InvalidArgumentError(f"Exponent must be finite, got {value!r}")
    return exponent


def format_exponent(exponent: float) -> str:
    if exponent.is_integer():
        return str(int(exponent))
    return f"{exponent:g}"


@dataclass(frozen=True)
class DimensionComponent:
    """An immutable (base dimension, exponent) pair.

    Components sort by exponent descending, then by base dimension ascending.
    A component is also a one-element component iterable over itself.
    """

    dimension: BaseDimension
    exponent: float = 1.0

    def __post_init__(self) -> None:
        if self.dimension is None:
            raise InvalidArgumentError("null dimension")
        object.__setattr__(self, "exponent", as_exponent(self.exponent))

    def compare_to(self, other: DimensionComponent) -> int:
        if other is None:
            raise NullComparisonError("Cannot compare a component against None")
        if self.exponent > other.exponent:
            return -1
        if self.exponent < other.exponent:
            return 1
        return self.dimension.compare_to(other.dimension)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DimensionComponent):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DimensionComponent):
            return NotImplemented
        return self.compare_to(other) > 0

    def __iter__(self) -> Iterator[DimensionComponent]:
        return iter((self,))

    def component_count(self) -> int:
        return 1

    def __str__(self) -> str:
        if self.exponent == 1.0:
            return self.dimension.name
        return f"{self.dimension.name}^{format_exponent(self.exponent)}"


__all__ = ["ComponentIterable", "DimensionComponent", "as_exponent", "format_exponent"]
