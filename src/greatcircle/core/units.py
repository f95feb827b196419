"""
Distance units.

Coefficients scale a radius expressed in kilometers into the target unit, so a distance
computed with the scaled radius comes out in that unit directly.
"""

from __future__ import annotations

from enum import Enum


class Unit(str, Enum):
    KILOMETERS = "km"
    METERS = "m"
    MILES = "mi"
    YARDS = "yd"
    FEET = "ft"


KM_PER_MILE = 1.609269392

_MI = 1 / KM_PER_MILE
_YD = _MI * 1760

UNIT_COEFFICIENTS: dict[Unit, float] = {
    Unit.KILOMETERS: 1,
    Unit.METERS: 1000,
    Unit.MILES: _MI,
    Unit.YARDS: _YD,
    Unit.FEET: _YD * 3,
}


def unit_coefficient(name: Unit | str | None) -> float | None:
    """Return the radius coefficient for a unit name, or None when it is not recognized."""
    if name is None:
        return None
    try:
        unit = Unit(name)
    except ValueError:
        return None
    return UNIT_COEFFICIENTS[unit]
