"""
Great-circle distance between two points.

`haversine()` is the main entrypoint of the library:
- validates that both points expose `latitude` / `longitude`
- resolves the effective radius from the caller's options (see `calculator.radius`)
- merges the caller's options over fresh defaults
- computes the angular distance and post-processes it (`within` / `precision`)

Points can be mappings (`{"latitude": ..., "longitude": ...}`) or any object with
`latitude` / `longitude` attributes (e.g. `greatcircle.core.geo.GeoPoint`).
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from greatcircle.calculator.formatting import format_result
from greatcircle.calculator.radius import resolve_radius
from greatcircle.config.settings import get_settings
from greatcircle.core.geo import angular_distance
from greatcircle.domain.errors import InvalidInputError
from greatcircle.domain.models import DistanceOptions, DistanceResult

logger = logging.getLogger(__name__)

OptionsLike = DistanceOptions | Mapping[str, Any] | None


def default_options() -> DistanceOptions:
    """Return a freshly built set of default options."""
    return DistanceOptions()


def _is_point(pt: Any) -> bool:
    if isinstance(pt, Mapping):
        return "latitude" in pt and "longitude" in pt
    if pt is None or isinstance(pt, (str, bytes, int, float)):
        return False
    return hasattr(pt, "latitude") and hasattr(pt, "longitude")


def _caller_options(options: OptionsLike, overrides: Mapping[str, Any]) -> DistanceOptions:
    """Validate what the caller passed; `model_fields_set` keeps track of the keys they set."""
    if options is None:
        supplied: dict[str, Any] = {}
    elif isinstance(options, DistanceOptions):
        supplied = options.model_dump(include=set(options.model_fields_set))
    elif isinstance(options, Mapping):
        supplied = dict(options)
    else:
        raise InvalidInputError(
            f"options must be a mapping or DistanceOptions, got {type(options).__name__}"
        )
    supplied.update(overrides)
    try:
        return DistanceOptions.model_validate(supplied)
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid distance options: {exc}") from exc


def _explicit(options: DistanceOptions) -> dict[str, Any]:
    # Falsy values were normalized to None and count as not supplied.
    return options.model_dump(include=set(options.model_fields_set), exclude_none=True)


def _compute(pt1: Any, pt2: Any, options: OptionsLike, overrides: Mapping[str, Any]):
    if not (_is_point(pt1) and _is_point(pt2)):
        raise InvalidInputError("haversine requires two points with latitude and longitude")

    explicit = _explicit(_caller_options(options, overrides))
    radius = resolve_radius(explicit)
    merged = default_options().model_copy(update=explicit)

    formula = get_settings().distance.formula
    distance = angular_distance(pt1, pt2, radius, merged.radians, formula=formula)
    logger.debug(
        "distance=%s radius=%s units=%s radians=%s formula=%s",
        distance,
        radius,
        merged.units,
        merged.radians,
        formula,
    )
    return format_result(distance, merged), merged, radius


def haversine(
    pt1: Any = None,
    pt2: Any = None,
    options: OptionsLike = None,
    **overrides: Any,
) -> float | bool:
    """Compute the great-circle distance between `pt1` and `pt2`.

    Options (in `options` or as keyword arguments; keyword arguments win):
    - `units`: km | m | mi | yd | ft (default km)
    - `radius`: sphere radius; when given, it is assumed to already be in `units`
    - `radians`: coordinates are already in radians (default False)
    - `precision`: round to this many significant digits
    - `within`: return `distance <= within` instead of the distance

    Raises:
        InvalidInputError: If a point is missing or lacks latitude/longitude,
            or the options do not validate.
    """
    result, _, _ = _compute(pt1, pt2, options, overrides)
    return result


def compute_distance(
    pt1: Any,
    pt2: Any,
    options: OptionsLike = None,
    **overrides: Any,
) -> DistanceResult:
    """Like `haversine()`, but returns a `DistanceResult` (units + effective radius)."""
    result, merged, radius = _compute(pt1, pt2, options, overrides)
    if isinstance(result, bool):
        return DistanceResult(within=result, units=merged.units, radius=radius)
    return DistanceResult(distance=result, units=merged.units, radius=radius)
