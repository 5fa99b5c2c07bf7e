import pytest

from dimensionkit.dimensions import (
    BaseDimension,
    DerivedDimension,
    DimensionComponent,
    combine_components,
    normalize_components,
)
from dimensionkit.dimensions.errors import EmptyResultError, InvalidArgumentError


def test_velocity_and_acceleration() -> None:
    length = BaseDimension("Length")
    time = BaseDimension("Time")

    velocity = DerivedDimension("Velocity", [DimensionComponent(length, 1), DimensionComponent(time, -1)])
    acceleration = DerivedDimension(
        "Acceleration", [DimensionComponent(length, 1), DimensionComponent(time, -2)]
    )

    assert velocity.compare_components(acceleration) != 0
    assert velocity != acceleration

    accumulator = combine_components(None, velocity)
    combine_components(accumulator, time, 1.0)
    assert normalize_components(accumulator) == tuple(length)


def test_components_are_normalized() -> None:
    length = BaseDimension("Length")
    time = BaseDimension("Time")

    dimension = DerivedDimension("X", [length, DimensionComponent(time, -1), length])

    assert dimension.components == (DimensionComponent(length, 2.0), DimensionComponent(time, -1.0))
    assert list(dimension) == list(dimension.components)
    assert dimension.component_count() == 2


def test_components_accept_dimensions() -> None:
    length = BaseDimension("Length")
    mass = BaseDimension("Mass")
    time = BaseDimension("Time")
    acceleration = DerivedDimension("Acceleration", [length, DimensionComponent(time, -2)])

    force = DerivedDimension("Force", [mass, acceleration])

    assert force.components == (
        DimensionComponent(length, 1.0),
        DimensionComponent(mass, 1.0),
        DimensionComponent(time, -2.0),
    )


def test_empty_components_rejected() -> None:
    with pytest.raises(EmptyResultError) as excinfo:
        DerivedDimension("X", [])

    assert excinfo.value.code == "E_EMPTY_RESULT"
    assert excinfo.value.path == "X"


def test_cancelling_components_rejected() -> None:
    length = BaseDimension("Length")

    with pytest.raises(EmptyResultError):
        DerivedDimension("X", [length, DimensionComponent(length, -1.0)])


def test_missing_components_rejected() -> None:
    length = BaseDimension("Length")

    with pytest.raises(InvalidArgumentError):
        DerivedDimension("X", None)

    with pytest.raises(InvalidArgumentError) as excinfo:
        DerivedDimension("X", [length, None])
    assert excinfo.value.path == "X[1]"


def test_linear_dimension() -> None:
    length = BaseDimension("Length")

    distance = DerivedDimension.linear("Distance", length, "How far")

    assert distance.components == (DimensionComponent(length, 1.0),)
    assert distance.compare_components(length) == 0
    assert distance.description == "How far"


def test_equality_includes_components() -> None:
    length = BaseDimension("Length")
    time = BaseDimension("Time")

    first = DerivedDimension("Rate", [length, DimensionComponent(time, -1)])
    same = DerivedDimension("Rate", [DimensionComponent(time, -1), length])
    other = DerivedDimension("Rate", [length, DimensionComponent(time, -2)])

    assert first == same
    assert hash(first) == hash(same)
    assert first != other


def test_str_lists_components() -> None:
    length = BaseDimension("Length")
    time = BaseDimension("Time")

    velocity = DerivedDimension("Velocity", [length, DimensionComponent(time, -1)], "Speed with direction")

    assert str(velocity) == "Velocity (Speed with direction) [Length Time^-1]"


def test_equal_dimensions_over_distinct_bases_hash_alike() -> None:
    time = BaseDimension("Time")
    first = DerivedDimension("Velocity", [BaseDimension("Length"), DimensionComponent(time, -1)])
    second = DerivedDimension("Velocity", [BaseDimension("Length"), DimensionComponent(time, -1)])

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
