import math
import warnings

import numpy as np
import pytest

from dimensionkit.dimensions import BaseDimension, DimensionComponent
from dimensionkit.dimensions.errors import InvalidArgumentError, NullComparisonError


def test_component_iterates_over_itself() -> None:
    length = BaseDimension("Length")
    component = DimensionComponent(length, 2.0)

    assert list(component) == [component]
    assert next(iter(component)) is component
    assert component.component_count() == 1


def test_exponent_defaults_to_one() -> None:
    length = BaseDimension("Length")

    assert DimensionComponent(length).exponent == 1.0


def test_exponent_is_rounded_to_single_precision() -> None:
    length = BaseDimension("Length")

    component = DimensionComponent(length, 0.1)

    assert component.exponent == float(np.float32(0.1))
    assert component.exponent != 0.1


def test_null_dimension_rejected() -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        DimensionComponent(None)

    assert excinfo.value.code == "E_INVALID_ARGUMENT"


@pytest.mark.parametrize("exponent", [math.inf, -math.inf, math.nan, 1e40, "two"])
def test_unusable_exponent_rejected(exponent: object) -> None:
    length = BaseDimension("Length")

    with pytest.raises(InvalidArgumentError):
        DimensionComponent(length, exponent)


def test_overflowing_exponent_raises_without_numpy_warning() -> None:
    length = BaseDimension("Length")

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        with pytest.raises(InvalidArgumentError) as excinfo:
            DimensionComponent(length, 1e40)

    assert excinfo.value.code == "E_INVALID_ARGUMENT"


def test_higher_exponent_sorts_first() -> None:
    length = BaseDimension("Length")

    squared = DimensionComponent(length, 2.0)
    inverse = DimensionComponent(length, -1.0)

    assert squared.compare_to(inverse) < 0
    assert inverse.compare_to(squared) > 0
    assert sorted([inverse, squared]) == [squared, inverse]


def test_equal_exponents_sort_by_dimension() -> None:
    length = BaseDimension("Length")
    time = BaseDimension("Time")

    by_length = DimensionComponent(length, -1.0)
    by_time = DimensionComponent(time, -1.0)

    assert by_length.compare_to(by_time) < 0
    assert sorted([by_time, by_length]) == [by_length, by_time]


def test_compare_against_none_raises() -> None:
    component = DimensionComponent(BaseDimension("Length"))

    with pytest.raises(NullComparisonError) as excinfo:
        component.compare_to(None)

    assert excinfo.value.code == "E_NULL_COMPARISON"


def test_equality_follows_base_dimension_identity() -> None:
    length = BaseDimension("Length")
    other_length = BaseDimension("Length")

    assert DimensionComponent(length, 2) == DimensionComponent(length, 2.0)
    assert hash(DimensionComponent(length, 2)) == hash(DimensionComponent(length, 2.0))
    assert DimensionComponent(length) != DimensionComponent(other_length)
    assert DimensionComponent(length, 1.0) != DimensionComponent(length, 2.0)


def test_component_is_immutable() -> None:
    component = DimensionComponent(BaseDimension("Length"))

    with pytest.raises(AttributeError):
        component.exponent = 3.0


def test_str_renders_exponent() -> None:
    time = BaseDimension("Time")

    assert str(DimensionComponent(time)) == "Time"
    assert str(DimensionComponent(time, -1)) == "Time^-1"
    assert str(DimensionComponent(time, 0.5)) == "Time^0.5"
