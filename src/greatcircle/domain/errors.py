"""Exceptions raised by the distance calculator."""

from __future__ import annotations


class GreatCircleError(ValueError):
    """Base class for caller errors (bad points, bad options)."""


class InvalidInputError(GreatCircleError):
    """A point argument is missing, is not a structured object, or lacks latitude/longitude."""


class UnknownUnitError(InvalidInputError):
    """An unrecognized unit name was given while strict unit checking is enabled."""

    def __init__(self, unit: object):
        self.unit = unit
        super().__init__(f"Unknown distance unit {unit!r}; expected one of km, m, mi, yd, ft")
