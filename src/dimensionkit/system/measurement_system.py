"""Registry of prefixes, dimensions and units.

A measurement system may have a chain of parents. Single-result lookups
that miss in a system continue in its parent. Multi-result lookups follow
the system's :class:`InheritanceRule`. Parents are never modified; every
registration goes to the system it is called on, and local entries hide
parent entries of the same name.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterable
from enum import Enum

from dimensionkit.dimensions.component import ComponentIterable
from dimensionkit.dimensions.dimension import (
    Dimension,
    canonical_key,
    compare_components,
    components_key,
    shape_key,
)
from dimensionkit.dimensions.errors import InvalidArgumentError, UnknownEntryError
from dimensionkit.units.prefix import Prefix
from dimensionkit.units.units import OffsetUnits, Units

logger = logging.getLogger(__name__)


class InheritanceRule(str, Enum):
    # include parent results not hidden by name in the child
    MERGE = "MERGE"
    # consult the parent only when the child has no result at all
    OVERRIDE = "OVERRIDE"


_UNITS_KEYS = ("name", "abbreviation", "alias")


class MeasurementSystem:
    def __init__(
        self,
        name: str | None = None,
        parent: MeasurementSystem | None = None,
        inheritance_rule: InheritanceRule = InheritanceRule.MERGE,
    ) -> None:
        self._name = name
        self._parent = parent
        self._inheritance_rule = InheritanceRule(inheritance_rule)

        self._dimensions: dict[str, Dimension] = {}
        # kept sorted by shape order so lookups by components can bisect
        self._dimensions_by_components: list[Dimension] = []

        self._prefixes: dict[str, Prefix] = {}
        self._prefix_abbreviations: dict[str, Prefix] = {}

        self._units: dict[str, Units] = {}
        self._units_by_abbreviation: dict[str, Units] = {}
        self._aliases: dict[str, Units] = {}

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def parent(self) -> MeasurementSystem | None:
        return self._parent

    @property
    def inheritance_rule(self) -> InheritanceRule:
        return self._inheritance_rule

    def _include_parent(self, local_found: bool) -> bool:
        if self._parent is None:
            return False
        return self._inheritance_rule is InheritanceRule.MERGE or not local_found

    # Dimensions

    def add_dimension(self, dimension: Dimension) -> bool:
        """Register ``dimension`` unless its name is already taken locally."""
        if dimension is None:
            raise InvalidArgumentError("Dimension required")
        if dimension.name in self._dimensions:
            return False
        self._dimensions[dimension.name] = dimension
        bisect.insort(self._dimensions_by_components, dimension, key=shape_key)
        logger.debug("Registered dimension %r in system %r", dimension.name, self._name)
        return True

    def remove_dimension(self, dimension: Dimension | str) -> bool:
        name = dimension if isinstance(dimension, str) else dimension.name
        existing = self._dimensions.pop(name, None)
        if existing is None:
            return False
        for index, candidate in enumerate(self._dimensions_by_components):
            if candidate is existing:
                del self._dimensions_by_components[index]
                break
        logger.debug("Removed dimension %r from system %r", name, self._name)
        return True

    def replace_dimension(self, dimension: Dimension) -> bool:
        """Register ``dimension``, returning True if it replaced a local one."""
        existed = self.remove_dimension(dimension)
        self.add_dimension(dimension)
        return existed

    def get_dimension(self, name: str) -> Dimension:
        system: MeasurementSystem | None = self
        while system is not None:
            dimension = system._dimensions.get(name)
            if dimension is not None:
                return dimension
            system = system._parent
        raise UnknownEntryError(f"Dimension '{name}' is not registered", path=name)

    def find_dimension(self, components: ComponentIterable) -> Dimension | None:
        """Return the first registered dimension with the same components, if any."""
        if components is None:
            raise InvalidArgumentError("Components required")
        table = self._dimensions_by_components
        index = bisect.bisect_left(table, components_key(components), key=components_key)
        if index < len(table) and compare_components(table[index], components) == 0:
            return table[index]
        if self._parent is not None:
            return self._parent.find_dimension(components)
        return None

    def dimensions(self) -> list[Dimension]:
        found = dict(self._dimensions)
        if self._include_parent(bool(found)):
            for dimension in self._parent.dimensions():
                found.setdefault(dimension.name, dimension)
        return sorted(found.values(), key=canonical_key)

    def local_dimensions(self) -> tuple[Dimension, ...]:
        return tuple(self._dimensions.values())

    # Prefixes

    def add_prefix(self, prefix: Prefix) -> bool:
        if prefix is None:
            raise InvalidArgumentError("Prefix required")
        if prefix.long_form in self._prefixes:
            return False
        self._prefixes[prefix.long_form] = prefix
        if prefix.abbreviation is not None:
            self._prefix_abbreviations.setdefault(prefix.abbreviation, prefix)
        logger.debug("Registered prefix %r in system %r", prefix.long_form, self._name)
        return True

    def get_prefix(self, key: str) -> Prefix:
        system: MeasurementSystem | None = self
        while system is not None:
            prefix = system._prefixes.get(key) or system._prefix_abbreviations.get(key)
            if prefix is not None:
                return prefix
            system = system._parent
        raise UnknownEntryError(f"Prefix '{key}' is not registered", path=key)

    def prefixes(self) -> list[Prefix]:
        found = dict(self._prefixes)
        if self._include_parent(bool(found)):
            for prefix in self._parent.prefixes():
                found.setdefault(prefix.long_form, prefix)
        return sorted(found.values())

    def local_prefixes(self) -> tuple[Prefix, ...]:
        return tuple(self._prefixes.values())

    # Units

    def add_units(self, units: Units) -> bool:
        if units is None:
            raise InvalidArgumentError("Units required")
        if units.name in self._units:
            return False
        self._units[units.name] = units
        if units.abbreviation is not None:
            if units.abbreviation in self._units_by_abbreviation:
                logger.warning(
                    "Abbreviation %r of %r already used by %r in system %r",
                    units.abbreviation,
                    units.name,
                    self._units_by_abbreviation[units.abbreviation].name,
                    self._name,
                )
            else:
                self._units_by_abbreviation[units.abbreviation] = units
        logger.debug("Registered units %r in system %r", units.name, self._name)
        return True

    def add_alias(self, alias: str, target: Units | str) -> bool:
        if not alias:
            raise InvalidArgumentError("Alias required")
        if alias in self._aliases or alias in self._units:
            return False
        units = self.get_units(target) if isinstance(target, str) else target
        self._aliases[alias] = units
        logger.debug("Registered alias %r -> %r in system %r", alias, units.name, self._name)
        return True

    def get_units(self, name: str) -> Units:
        """Look up units by name, abbreviation or alias.

        Names that are not registered directly are tried as a prefix followed
        by registered units, e.g. ``kilometer`` or ``km``.
        """
        units = self._find_units(name, _UNITS_KEYS)
        if units is None:
            units = self._find_prefixed_units(name)
        if units is None:
            raise UnknownEntryError(f"Units '{name}' are not registered", path=name)
        return units

    def _find_units(self, name: str, keys: Iterable[str]) -> Units | None:
        tables = {
            "name": self._units,
            "abbreviation": self._units_by_abbreviation,
            "alias": self._aliases,
        }
        for key in keys:
            units = tables[key].get(name)
            if units is not None:
                return units
        if self._parent is not None:
            return self._parent._find_units(name, keys)
        return None

    def _find_prefixed_units(self, name: str) -> Units | None:
        candidates: list[tuple[int, Prefix, str, tuple[str, ...]]] = []
        for prefix in self.prefixes():
            if name.startswith(prefix.long_form) and len(name) > len(prefix.long_form):
                candidates.append(
                    (len(prefix.long_form), prefix, name[len(prefix.long_form):], ("name", "alias"))
                )
            abbreviation = prefix.abbreviation
            if abbreviation and name.startswith(abbreviation) and len(name) > len(abbreviation):
                candidates.append(
                    (len(abbreviation), prefix, name[len(abbreviation):], ("abbreviation",))
                )

        candidates.sort(key=lambda candidate: candidate[0], reverse=True)
        for _, prefix, rest, keys in candidates:
            units = self._find_units(rest, keys)
            if units is not None and not isinstance(units, OffsetUnits):
                return Units.prefixed(prefix, units)
        return None

    def units(self) -> list[Units]:
        found = dict(self._units)
        if self._include_parent(bool(found)):
            for units in self._parent.units():
                found.setdefault(units.name, units)
        return sorted(found.values(), key=lambda units: units.name)

    def units_for(self, components: ComponentIterable) -> list[Units]:
        """All visible units whose dimension has the same components."""
        found = {
            name: units
            for name, units in self._units.items()
            if compare_components(units, components) == 0
        }
        if self._include_parent(bool(found)):
            for units in self._parent.units_for(components):
                if units.name not in self._units:
                    found[units.name] = units
        return sorted(found.values(), key=lambda units: (units.factor, units.name))

    def local_units(self) -> tuple[Units, ...]:
        return tuple(self._units.values())

    def local_aliases(self) -> dict[str, Units]:
        return dict(self._aliases)

    @staticmethod
    def get_si_instance() -> MeasurementSystem:
        from dimensionkit.system.loader import get_si_instance

        return get_si_instance()

    def __repr__(self) -> str:
        return f"MeasurementSystem({self._name!r})"


__all__ = ["InheritanceRule", "MeasurementSystem"]
