"""
Effective radius resolution.

Precedence:
1. an explicit (truthy) `radius` is used as-is; it is assumed to already be in `units`
2. otherwise the default radius (kilometers) is scaled by the coefficient for `units`
3. an unrecognized unit leaves the radius unscaled (or raises when strict units are on)
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from greatcircle.config.settings import get_settings
from greatcircle.core.units import unit_coefficient
from greatcircle.domain.errors import UnknownUnitError

logger = logging.getLogger(__name__)


def resolve_radius(
    options: Mapping[str, Any] | None,
    *,
    default_radius: float | None = None,
    strict_units: bool | None = None,
) -> float:
    """Return the sphere radius to compute with, given the caller-supplied options."""
    settings = get_settings().distance
    if default_radius is None:
        default_radius = settings.default_radius
    if strict_units is None:
        strict_units = settings.strict_units

    options = options or {}
    explicit_radius = options.get("radius")
    radius = explicit_radius or default_radius

    units = options.get("units")
    if units and not explicit_radius:
        coefficient = unit_coefficient(units)
        if coefficient is None:
            if strict_units:
                raise UnknownUnitError(units)
            logger.warning("Unknown distance unit %r; radius left unconverted.", units)
        else:
            radius *= coefficient

    return radius
