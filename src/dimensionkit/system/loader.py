"""Load and dump measurement system definition documents.

A definition is a JSON object validated against
``measurement_system.schema.json``. Entries may only reference prefixes,
dimensions and units defined earlier in the same document or visible in
the parent system.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from fractions import Fraction
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Iterator, Mapping

import jsonschema

from dimensionkit.common.canonical_json import canonicalize
from dimensionkit.common.schema_validate import validate_json
from dimensionkit.dimensions.base import BaseDimension
from dimensionkit.dimensions.combine import Accumulator, combine_components, normalize_components
from dimensionkit.dimensions.derived import DerivedDimension
from dimensionkit.dimensions.dimension import Dimension
from dimensionkit.dimensions.errors import DefinitionError, DimensionError
from dimensionkit.system.measurement_system import InheritanceRule, MeasurementSystem
from dimensionkit.units.prefix import Prefix
from dimensionkit.units.units import OffsetUnits, Units

logger = logging.getLogger(__name__)

SCHEMA_NAME = "measurement_system.schema.json"
SI_DEFINITION = "si.json"


@contextmanager
def _at(path: str) -> Iterator[None]:
    try:
        yield
    except DefinitionError:
        raise
    except DimensionError as exc:
        raise DefinitionError(exc.message, path=path) from exc


def _parse_factor(value: Any, path: str) -> float:
    if isinstance(value, str):
        try:
            return float(Fraction(value))
        except (ValueError, ZeroDivisionError) as exc:
            raise DefinitionError(f"Invalid factor {value!r}", path=path) from exc
    return float(value)


def _require_added(added: bool, kind: str, name: str, path: str) -> None:
    if not added:
        raise DefinitionError(f"Duplicate {kind} '{name}'", path=path)


def _build_units(system: MeasurementSystem, entry: Mapping[str, Any], path: str) -> Units:
    kind = entry["kind"]
    name = entry["name"]
    abbreviation = entry.get("abbreviation")
    if kind == "base":
        with _at(f"{path}.dimension"):
            dimension = system.get_dimension(entry["dimension"])
        factor = _parse_factor(entry.get("factor", 1), f"{path}.factor")
        return Units(name, abbreviation, dimension, factor)
    if kind == "scaled":
        with _at(f"{path}.of"):
            reference = system.get_units(entry["of"])
        return Units.scaled(name, abbreviation, _parse_factor(entry["factor"], f"{path}.factor"), reference)
    if kind == "composite":
        with _at(f"{path}.numerator"):
            numerator = [system.get_units(ref) for ref in entry.get("numerator", [])]
        with _at(f"{path}.denominator"):
            denominator = [system.get_units(ref) for ref in entry.get("denominator", [])]
        factor = _parse_factor(entry.get("factor", 1), f"{path}.factor")
        return Units.compose(name, abbreviation, numerator, denominator, factor, system=system)
    # offset
    with _at(f"{path}.parent"):
        parent = system.get_units(entry["parent"])
    return OffsetUnits(
        name,
        abbreviation,
        parent,
        _parse_factor(entry["offset"], f"{path}.offset"),
        _parse_factor(entry.get("scale", 1), f"{path}.scale"),
    )


def load_measurement_system_payload(
    payload: Any,
    parent: MeasurementSystem | None = None,
    name: str | None = None,
) -> MeasurementSystem:
    """Build a :class:`MeasurementSystem` from an already decoded definition."""
    try:
        validate_json(payload, SCHEMA_NAME)
    except jsonschema.ValidationError as exc:
        raise DefinitionError(exc.message, path=exc.json_path) from exc

    system = MeasurementSystem(
        name or payload.get("name"),
        parent,
        InheritanceRule(payload.get("inheritance_rule", InheritanceRule.MERGE.value)),
    )

    for i, entry in enumerate(payload.get("prefixes", [])):
        path = f"$.prefixes[{i}]"
        with _at(path):
            prefix = Prefix(
                entry["long_form"],
                _parse_factor(entry["factor"], f"{path}.factor"),
                entry.get("abbreviation"),
            )
            _require_added(system.add_prefix(prefix), "prefix", prefix.long_form, path)

    for i, entry in enumerate(payload.get("base_dimensions", [])):
        path = f"$.base_dimensions[{i}]"
        with _at(path):
            dimension = BaseDimension(entry["name"], entry.get("description"), entry.get("is_null", False))
            _require_added(system.add_dimension(dimension), "dimension", dimension.name, path)

    for i, entry in enumerate(payload.get("derived_dimensions", [])):
        path = f"$.derived_dimensions[{i}]"
        accumulator: Accumulator = {}
        for j, component in enumerate(entry["components"]):
            with _at(f"{path}.components[{j}]"):
                referenced = system.get_dimension(component["dimension"])
                combine_components(accumulator, referenced, component.get("exponent", 1.0))
        with _at(path):
            dimension = DerivedDimension(
                entry["name"], normalize_components(accumulator), entry.get("description")
            )
            _require_added(system.add_dimension(dimension), "dimension", dimension.name, path)

    for i, entry in enumerate(payload.get("units", [])):
        path = f"$.units[{i}]"
        with _at(path):
            units = _build_units(system, entry, path)
            _require_added(system.add_units(units), "units", units.name, path)

    for alias, target in payload.get("aliases", {}).items():
        path = f"$.aliases.{alias}"
        with _at(path):
            _require_added(system.add_alias(alias, target), "alias", alias, path)

    logger.debug(
        "Built measurement system %r: %d prefixes, %d dimensions, %d units",
        system.name,
        len(system.local_prefixes()),
        len(system.local_dimensions()),
        len(system.local_units()),
    )
    return system


def load_measurement_system(
    path: str | Path,
    parent: MeasurementSystem | None = None,
    name: str | None = None,
) -> MeasurementSystem:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as exc:
        raise DefinitionError(f"Invalid JSON: {exc.msg}", path=f"{path}:{exc.lineno}") from exc
    except OSError as exc:
        raise DefinitionError(f"Cannot read definition: {exc.strerror}", path=str(path)) from exc
    system = load_measurement_system_payload(payload, parent=parent, name=name)
    logger.info("Loaded measurement system %r from %s", system.name, path)
    return system


@lru_cache(maxsize=1)
def get_si_instance() -> MeasurementSystem:
    """The bundled SI system, loaded on first use and shared afterwards."""
    text = resources.files("dimensionkit.data").joinpath(SI_DEFINITION).read_text(encoding="utf-8")
    return load_measurement_system_payload(json.loads(text))


def _dump_derived(dimension: Dimension) -> dict[str, Any]:
    return {
        "name": dimension.name,
        "description": dimension.description,
        "components": [
            {"dimension": component.dimension.name, "exponent": component.exponent}
            for component in dimension
        ],
    }


def _is_visible(system: MeasurementSystem, dimension: Dimension) -> bool:
    try:
        return system.get_dimension(dimension.name) is dimension
    except DimensionError:
        return False


def dump_measurement_system(system: MeasurementSystem) -> dict[str, Any]:
    """Render the local entries of ``system`` as a definition document.

    Composite units are written as ``base`` units of their dimension. A
    dimension that is not registered under its name (such as the temporary
    dimension of composed units) is written into ``derived_dimensions``.
    """
    base_dimensions: list[dict[str, Any]] = []
    derived_dimensions: list[dict[str, Any]] = []
    for dimension in system.local_dimensions():
        if isinstance(dimension, BaseDimension):
            base_dimensions.append(
                {"name": dimension.name, "description": dimension.description, "is_null": dimension.is_null()}
            )
        else:
            derived_dimensions.append(_dump_derived(dimension))

    written = {dimension.name for dimension in system.local_dimensions()}
    units: list[dict[str, Any]] = []
    for entry in system.local_units():
        if isinstance(entry, OffsetUnits):
            units.append(
                {
                    "kind": "offset",
                    "name": entry.name,
                    "abbreviation": entry.abbreviation,
                    "parent": entry.parent.name,
                    "offset": entry.offset,
                    "scale": entry.scale,
                }
            )
            continue
        dimension = entry.dimension
        if dimension.name not in written and not _is_visible(system, dimension):
            if isinstance(dimension, BaseDimension):
                base_dimensions.append(
                    {"name": dimension.name, "description": dimension.description, "is_null": dimension.is_null()}
                )
            else:
                derived_dimensions.append(_dump_derived(dimension))
            written.add(dimension.name)
        units.append(
            {
                "kind": "base",
                "name": entry.name,
                "abbreviation": entry.abbreviation,
                "dimension": dimension.name,
                "factor": entry.factor,
            }
        )

    return canonicalize(
        {
            "name": system.name,
            "inheritance_rule": system.inheritance_rule,
            "prefixes": [
                {"long_form": prefix.long_form, "abbreviation": prefix.abbreviation, "factor": prefix.factor}
                for prefix in system.local_prefixes()
            ],
            "base_dimensions": base_dimensions,
            "derived_dimensions": derived_dimensions,
            "units": units,
            "aliases": {alias: target.name for alias, target in system.local_aliases().items()},
        }
    )


__all__ = [
    "dump_measurement_system",
    "get_si_instance",
    "load_measurement_system",
    "load_measurement_system_payload",
]
