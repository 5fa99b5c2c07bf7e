from __future__ import annotations

from collections.abc import Iterator

from dimensionkit.dimensions.component import DimensionComponent
from dimensionkit.dimensions.dimension import Dimension


class BaseDimension(Dimension):
    """A dimension orthogonal to every other base dimension of its system.

    Base dimensions behave like enum constants of a measurement system: two
    instances are equal only when they are the same object, whatever their
    name, description or null flag. A null base dimension (e.g. Angle) is
    conceptually dimensionless.
    """

    __slots__ = ("_is_null", "_component")

    def __init__(self, name: str, description: str | None = None, is_null: bool = False) -> None:
        super().__init__(name, description)
        self._is_null = bool(is_null)
        self._component = DimensionComponent(self)

    def is_null(self) -> bool:
        return self._is_null

    def component_count(self) -> int:
        return 1

    def __iter__(self) -> Iterator[DimensionComponent]:
        return iter(self._component)

    __eq__ = object.__eq__
    __hash__ = object.__hash__


__all__ = ["BaseDimension"]
