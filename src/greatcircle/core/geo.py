"""
Spherical geometry.

A tiny geometry layer: great-circle distance on a sphere of a given radius, no
ellipsoid and no GIS dependencies. The result is in whatever unit the radius is in.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import acos, asin, cos, isnan, pi, sin, sqrt
from typing import Any, Literal, Mapping

RADIAN = pi / 180

Formula = Literal["law_of_cosines", "haversine"]


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair (degrees unless the caller says otherwise)."""

    latitude: float
    longitude: float


def deg_to_rad(deg: float) -> float:
    return deg * RADIAN


def coordinates(pt: Any) -> tuple[Any, Any]:
    """Return `(latitude, longitude)` from a mapping or an attribute-style object."""
    if isinstance(pt, Mapping):
        return pt["latitude"], pt["longitude"]
    return pt.latitude, pt.longitude


def angular_distance(
    pt1: Any,
    pt2: Any,
    radius: float,
    in_radians: bool = False,
    formula: Formula = "law_of_cosines",
) -> float:
    """Compute the great-circle distance between two points on a sphere of `radius`."""
    lat1, lng1 = coordinates(pt1)
    lat2, lng2 = coordinates(pt2)

    if not in_radians:
        lat1 = deg_to_rad(lat1)
        lng1 = deg_to_rad(lng1)
        lat2 = deg_to_rad(lat2)
        lng2 = deg_to_rad(lng2)

    # Identical points: exactly zero, and keeps acos away from arguments just above 1.
    if lat1 == lat2 and lng1 == lng2:
        return 0

    if formula == "haversine":
        h = sin((lat2 - lat1) / 2) ** 2 + cos(lat1) * cos(lat2) * sin((lng2 - lng1) / 2) ** 2
        if isnan(h):
            return h
        return 2 * radius * asin(sqrt(min(1.0, h)))

    c = sin(lat1) * sin(lat2) + cos(lat1) * cos(lat2) * cos(lng2 - lng1)
    if isnan(c):
        return c
    # Rounding can push the cosine just outside [-1, 1].
    return acos(max(-1.0, min(1.0, c))) * radius
