import pytest

from dimensionkit.dimensions import BaseDimension, DimensionComponent
from dimensionkit.dimensions.errors import InvalidArgumentError


def test_base_dimension_yields_single_unit_component() -> None:
    length = BaseDimension("Length", "Distance in space")

    components = list(length)

    assert len(components) == 1
    assert components[0].dimension is length
    assert components[0].exponent == 1.0
    assert length.component_count() == 1


def test_component_is_built_once() -> None:
    length = BaseDimension("Length")

    assert next(iter(length)) is next(iter(length))
    assert next(iter(length)) == DimensionComponent(length, 1.0)


def test_same_named_base_dimensions_are_distinct() -> None:
    first = BaseDimension("Length", "Distance")
    second = BaseDimension("Length", "Distance")

    assert first != second
    assert first == first
    assert len({first, second}) == 2
    assert first.compare_to(second) == 0


def test_null_flag() -> None:
    angle = BaseDimension("Angle", "Plane angle", is_null=True)
    length = BaseDimension("Length")

    assert angle.is_null()
    assert not length.is_null()


@pytest.mark.parametrize("name", [None, ""])
def test_missing_name_rejected(name: object) -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        BaseDimension(name)

    assert excinfo.value.code == "E_INVALID_ARGUMENT"


def test_str_includes_description() -> None:
    assert str(BaseDimension("Angle", "Plane angle", True)) == "Angle (Plane angle)"
    assert str(BaseDimension("Length")) == "Length"
