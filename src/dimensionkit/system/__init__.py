"""Measurement systems: registries of prefixes, dimensions and units."""

from dimensionkit.system.loader import (
    dump_measurement_system,
    get_si_instance,
    load_measurement_system,
    load_measurement_system_payload,
)
from dimensionkit.system.measurement_system import InheritanceRule, MeasurementSystem

__all__ = [
    "InheritanceRule",
    "MeasurementSystem",
    "dump_measurement_system",
    "get_si_instance",
    "load_measurement_system",
    "load_measurement_system_payload",
]
