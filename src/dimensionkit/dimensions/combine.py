"""Exponent accumulation shared by dimensions, units and quantities.

``combine_components`` is the single routine behind derived-dimension
normalization and behind multiplying, dividing and raising to powers any
component iterable. The accumulator maps each base dimension to the
component holding its running exponent. Arithmetic is done in single
precision and an entry is dropped only when its exponent becomes exactly
zero.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from dimensionkit.dimensions.component import ComponentIterable, DimensionComponent, as_exponent
from dimensionkit.dimensions.errors import InvalidArgumentError

if TYPE_CHECKING:
    from dimensionkit.dimensions.base import BaseDimension

Accumulator = dict["BaseDimension", DimensionComponent]


def combine_components(
    accumulator: Accumulator | None,
    components: Iterable[DimensionComponent],
    exponent_factor: float = 1.0,
) -> Accumulator:
    if components is None:
        raise InvalidArgumentError("Components required")
    if accumulator is None:
        accumulator = {}
    factor = np.float32(as_exponent(exponent_factor))

    for component in components:
        dimension = component.dimension
        previous = accumulator.get(dimension)
        if previous is None:
            exponent = factor * np.float32(component.exponent)
            if exponent == 0.0:
                continue
            if factor == 1.0:
                # the incoming component already carries the right exponent
                accumulator[dimension] = component
            else:
                accumulator[dimension] = DimensionComponent(dimension, float(exponent))
        else:
            exponent = np.float32(previous.exponent) + factor * np.float32(component.exponent)
            if exponent == 0.0:
                del accumulator[dimension]
            else:
                accumulator[dimension] = DimensionComponent(dimension, float(exponent))

    return accumulator


def normalize_components(accumulator: Accumulator) -> tuple[DimensionComponent, ...]:
    return tuple(sorted(accumulator.values()))


def multiply_components(*iterables: ComponentIterable) -> tuple[DimensionComponent, ...]:
    accumulator: Accumulator = {}
    for iterable in iterables:
        combine_components(accumulator, iterable, 1.0)
    return normalize_components(accumulator)


def divide_components(
    numerator: ComponentIterable, denominator: ComponentIterable
) -> tuple[DimensionComponent, ...]:
    accumulator = combine_components(None, numerator, 1.0)
    combine_components(accumulator, denominator, -1.0)
    return normalize_components(accumulator)


def power_components(iterable: ComponentIterable, power: float) -> tuple[DimensionComponent, ...]:
    return normalize_components(combine_components(None, iterable, power))


__all__ = [
    "Accumulator",
    "combine_components",
    "divide_components",
    "multiply_components",
    "normalize_components",
    "power_components",
]
