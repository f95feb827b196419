"""
greatcircle CLI entrypoint.

Quick distance lookups from the shell. All math is delegated to
`greatcircle.calculator.haversine.compute_distance`.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from greatcircle.calculator.haversine import compute_distance
from greatcircle.core.geo import GeoPoint
from greatcircle.core.logging import configure_logging
from greatcircle.core.units import UNIT_COEFFICIENTS
from greatcircle.domain.errors import GreatCircleError


def _parse_point(text: str) -> GeoPoint:
    """Parse a `LAT,LON` CLI argument."""
    if "," not in text:
        raise argparse.ArgumentTypeError(f"Invalid point '{text}', expected LAT,LON")
    lat, lon = text.split(",", 1)
    try:
        return GeoPoint(latitude=float(lat), longitude=float(lon))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid point '{text}', expected LAT,LON") from exc


def _cmd_distance(args: argparse.Namespace) -> int:
    """Handle the `distance` subcommand."""
    options: dict[str, Any] = {"radians": bool(args.radians)}
    if args.units is not None:
        options["units"] = args.units
    if args.radius is not None:
        options["radius"] = float(args.radius)
    if args.precision is not None:
        options["precision"] = int(args.precision)
    if args.within is not None:
        options["within"] = float(args.within)

    result = compute_distance(args.origin, args.destination, options)

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
        return 0

    if result.within is not None:
        print("true" if result.within else "false")
    else:
        print(f"{result.distance} {result.units}")
    return 0


def _cmd_units(args: argparse.Namespace) -> int:
    table = {unit.value: coefficient for unit, coefficient in UNIT_COEFFICIENTS.items()}
    if args.json:
        print(json.dumps(table, indent=2))
        return 0
    for name, coefficient in table.items():
        print(f"{name:>3}  {coefficient!r}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the greatcircle CLI."""
    parser = argparse.ArgumentParser(prog="greatcircle")
    sub = parser.add_subparsers(dest="command", required=True)

    dist = sub.add_parser("distance", help="Great-circle distance between two points.")
    # Negative latitudes need the `--from=-33.9,151.2` form so argparse does not read them as flags.
    dist.add_argument("--from", dest="origin", required=True, type=_parse_point, help="LAT,LON")
    dist.add_argument("--to", dest="destination", required=True, type=_parse_point, help="LAT,LON")
    dist.add_argument("--units", type=str, default=None, help="km | m | mi | yd | ft (default km)")
    dist.add_argument(
        "--radius", type=float, default=None, help="Sphere radius, already expressed in --units"
    )
    dist.add_argument("--radians", action="store_true", help="Coordinates are given in radians")
    dist.add_argument("--precision", type=int, default=None, help="Significant digits to keep")
    dist.add_argument("--within", type=float, default=None, help="Print true/false for distance <= WITHIN")
    dist.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    dist.set_defaults(func=_cmd_distance)

    units = sub.add_parser("units", help="List supported units and their radius coefficients.")
    units.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    units.set_defaults(func=_cmd_units)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m greatcircle.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except GreatCircleError as exc:
        print(f"greatcircle: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
