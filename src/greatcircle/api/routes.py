"""
API routes.

Endpoints:
- GET `/api/health`: liveness + package version.
- GET `/api/units`: supported units and their radius coefficients.
- GET `/api/distance`: great-circle distance between two points.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Query

from greatcircle import __version__
from greatcircle.calculator.haversine import compute_distance
from greatcircle.core.geo import GeoPoint
from greatcircle.core.units import UNIT_COEFFICIENTS
from greatcircle.domain.errors import GreatCircleError
from greatcircle.domain.models import DistanceResult

router = APIRouter()


@router.get("/api/health")
def get_health() -> dict:
    return {"status": "ok", "version": __version__}


@router.get("/api/units")
def get_units() -> dict:
    """Return the unit table (coefficients relative to kilometers)."""
    return {"units": {unit.value: coefficient for unit, coefficient in UNIT_COEFFICIENTS.items()}}


@router.get("/api/distance", response_model=DistanceResult)
def get_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    units: str | None = None,
    radius: float | None = Query(default=None, gt=0),
    radians: bool = False,
    precision: int | None = Query(default=None, ge=1, le=100),
    within: float | None = None,
) -> DistanceResult:
    """Compute the distance between (lat1, lon1) and (lat2, lon2)."""
    # Only forward what the client sent, so an explicit radius keeps its precedence over units.
    options: dict[str, Any] = {"radians": radians}
    for key, value in (("units", units), ("radius", radius), ("precision", precision), ("within", within)):
        if value is not None:
            options[key] = value

    try:
        return compute_distance(
            GeoPoint(latitude=lat1, longitude=lon1),
            GeoPoint(latitude=lat2, longitude=lon2),
            options,
        )
    except GreatCircleError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
