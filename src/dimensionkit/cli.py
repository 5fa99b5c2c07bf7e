from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dimensionkit.common.canonical_json import canonical_dumps_str
from dimensionkit.dimensions.errors import DimensionError
from dimensionkit.system.loader import (
    dump_measurement_system,
    get_si_instance,
    load_measurement_system,
)
from dimensionkit.system.measurement_system import MeasurementSystem
from dimensionkit.units.units import OffsetUnits

logger = logging.getLogger(__name__)

TEMPERATURE_SCALES = (
    "celsius",
    "fahrenheit",
    "kelvin",
    "rankine",
    "delisle",
    "newton degree",
    "réaumur",
    "rømer",
)


def _system_from_args(args: argparse.Namespace) -> MeasurementSystem:
    si = get_si_instance()
    if getattr(args, "definition", None):
        return load_measurement_system(Path(args.definition), parent=si)
    return si


def _cmd_system_show(args: argparse.Namespace) -> int:
    system = _system_from_args(args)
    if args.json:
        print(canonical_dumps_str(dump_measurement_system(system), indent=2))
        return 0
    print(f"System: {system.name or '<unnamed>'}")
    print("Prefixes:")
    for prefix in system.prefixes():
        print(f"  {prefix.long_form} ({prefix.abbreviation or '-'}) = {prefix.factor:g}")
    print("Dimensions:")
    for dimension in system.dimensions():
        print(f"  {dimension}")
    print("Units:")
    for units in system.units():
        print(f"  {units.name} ({units.symbol}) [{units.dimension.name}] x{units.factor:g}")
    return 0


def _cmd_system_validate(args: argparse.Namespace) -> int:
    system = load_measurement_system(Path(args.path), parent=get_si_instance())
    print(
        f"OK: {system.name or args.path} defines {len(system.local_prefixes())} prefixes, "
        f"{len(system.local_dimensions())} dimensions, {len(system.local_units())} units"
    )
    return 0


def _cmd_convert(args: argparse.Namespace) -> int:
    system = _system_from_args(args)
    source = system.get_units(args.source)
    target = system.get_units(args.target)
    result = source.convert(args.value, target)
    print(f"{args.value:g} {source.symbol} = {result:g} {target.symbol}")
    return 0


def _cmd_temperatures(args: argparse.Namespace) -> int:
    system = get_si_instance()
    for name in TEMPERATURE_SCALES:
        units = system.get_units(name)
        if not isinstance(units, OffsetUnits):
            celsius = system.get_units("celsius")
            for value in (0.0, 100.0):
                print(f"{value:g} {units.symbol} = {units.convert(value, celsius):g} {celsius.symbol}")
            continue
        parent = units.parent
        for value in (0.0, 100.0):
            print(f"{value:g} {units.symbol} = {units.convert_to_parent(value):g} {parent.symbol}")
        for value in (0.0, 100.0):
            print(f"{value:g} {parent.symbol} = {units.convert_from_parent(value):g} {units.symbol}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dimensionkit")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    system = sub.add_parser("system", help="Measurement system utilities")
    system_sub = system.add_subparsers(dest="system_cmd", required=True)

    system_show = system_sub.add_parser("show", help="List prefixes, dimensions and units")
    system_show.add_argument("--definition", default=None, help="Definition file layered on SI")
    system_show.add_argument("--json", action="store_true", help="Dump the local definition as JSON")
    system_show.set_defaults(func=_cmd_system_show)

    system_validate = system_sub.add_parser("validate", help="Validate a definition file")
    system_validate.add_argument("path")
    system_validate.set_defaults(func=_cmd_system_validate)

    convert = sub.add_parser("convert", help="Convert a value between units")
    convert.add_argument("value", type=float)
    convert.add_argument("source")
    convert.add_argument("target")
    convert.add_argument("--definition", default=None, help="Definition file layered on SI")
    convert.set_defaults(func=_cmd_convert)

    temperatures = sub.add_parser("temperatures", help="Show the temperature scale conversions")
    temperatures.set_defaults(func=_cmd_temperatures)

    return p


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        rc = args.func(args)
    except DimensionError as exc:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(str(exc), file=sys.stderr)
        rc = 1
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
