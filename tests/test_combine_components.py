import numpy as np
import pytest

from dimensionkit.dimensions import (
    BaseDimension,
    DerivedDimension,
    Dimension,
    DimensionComponent,
    combine_components,
    multiply_components,
    normalize_components,
)
from dimensionkit.dimensions.combine import divide_components, power_components
from dimensionkit.dimensions.errors import InvalidArgumentError

LENGTH = BaseDimension("Length")
TIME = BaseDimension("Time")
ANGLE = BaseDimension("Angle", is_null=True)


def _fixture_components() -> list[DimensionComponent]:
    return [
        DimensionComponent(LENGTH, 1.0),
        DimensionComponent(TIME, -1.0),
        DimensionComponent(ANGLE, 2.0),
    ]


def test_repeated_dimension_is_merged() -> None:
    components = [LENGTH, DimensionComponent(TIME, -1), LENGTH]

    accumulator = {}
    for iterable in components:
        combine_components(accumulator, iterable)

    assert normalize_components(accumulator) == (
        DimensionComponent(LENGTH, 2.0),
        DimensionComponent(TIME, -1.0),
    )


def test_opposite_exponents_cancel() -> None:
    accumulator = combine_components(None, [DimensionComponent(LENGTH, 1.0)])

    combine_components(accumulator, [DimensionComponent(LENGTH, -1.0)])

    assert accumulator == {}


def test_dividing_by_itself_cancels() -> None:
    accumulator = combine_components(None, _fixture_components())

    combine_components(accumulator, _fixture_components(), -1.0)

    assert accumulator == {}


@pytest.mark.parametrize("factor", [float(f) for f in np.arange(-2.0, 2.5, 0.5)])
def test_factor_then_negated_factor_restores_accumulator(factor: float) -> None:
    accumulator = combine_components(None, _fixture_components())
    expected = dict(accumulator)

    combine_components(accumulator, _fixture_components(), factor)
    combine_components(accumulator, _fixture_components(), -factor)

    assert accumulator == expected


def test_unit_factor_stores_incoming_component() -> None:
    component = DimensionComponent(LENGTH, 3.0)

    accumulator = combine_components(None, component)

    assert accumulator[LENGTH] is component


def test_zero_exponent_is_never_stored() -> None:
    assert combine_components(None, [DimensionComponent(LENGTH, 0.0)]) == {}
    assert combine_components(None, _fixture_components(), 0.0) == {}


def test_power_scales_exponents() -> None:
    accumulator = combine_components(None, _fixture_components(), 0.5)

    assert accumulator[LENGTH].exponent == 0.5
    assert accumulator[TIME].exponent == -0.5
    assert accumulator[ANGLE].exponent == 1.0


def test_accumulator_is_returned() -> None:
    accumulator = {}

    assert combine_components(accumulator, LENGTH) is accumulator


def test_missing_components_rejected() -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        combine_components({}, None)

    assert excinfo.value.code == "E_INVALID_ARGUMENT"


def test_component_helpers() -> None:
    velocity = DerivedDimension("Velocity", [LENGTH, DimensionComponent(TIME, -1)])

    assert multiply_components(velocity, TIME) == (DimensionComponent(LENGTH, 1.0),)
    assert divide_components(LENGTH, TIME) == velocity.components
    assert power_components(velocity, 2) == (
        DimensionComponent(LENGTH, 2.0),
        DimensionComponent(TIME, -2.0),
    )


def test_dimension_exposes_combine_components() -> None:
    accumulator = Dimension.combine_components(None, LENGTH, 2.0)

    assert accumulator == {LENGTH: DimensionComponent(LENGTH, 2.0)}
