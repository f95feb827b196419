"""Great-circle distance on a sphere, with unit conversion, precision and threshold modes."""

from greatcircle.calculator.haversine import compute_distance, default_options, haversine
from greatcircle.core.geo import GeoPoint
from greatcircle.core.units import Unit
from greatcircle.domain.errors import GreatCircleError, InvalidInputError, UnknownUnitError
from greatcircle.domain.models import DistanceOptions, DistanceResult

__version__ = "1.0.0"

__all__ = [
    "DistanceOptions",
    "DistanceResult",
    "GeoPoint",
    "GreatCircleError",
    "InvalidInputError",
    "Unit",
    "UnknownUnitError",
    "compute_distance",
    "default_options",
    "haversine",
]
