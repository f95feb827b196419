"""
Domain models (Pydantic).

These types are the contract shared by the calculator, the CLI and the API:
- `DistanceOptions`: caller options, resolved against fresh defaults per call
- `DistanceResult`: JSON-friendly output for the CLI and the API
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from greatcircle.config.settings import get_settings
from greatcircle.core.units import Unit


def _default_radius() -> float:
    return get_settings().distance.default_radius


class DistanceOptions(BaseModel):
    """Options for one distance computation.

    `precision` and `within` accept `False` (or any falsy value) to mean "disabled";
    a falsy `radius` means "not supplied". The default radius comes from settings.
    Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    units: str = Unit.KILOMETERS.value
    radius: float | None = Field(default_factory=_default_radius, gt=0)
    radians: bool = False
    precision: int | None = Field(default=None, ge=1, le=100)
    within: float | None = None

    @field_validator("units", mode="before")
    @classmethod
    def _unit_value(cls, v: Any) -> Any:
        if isinstance(v, Unit):
            return v.value
        return v

    @field_validator("radius", "precision", "within", mode="before")
    @classmethod
    def _falsy_disables(cls, v: Any) -> Any:
        if not v:
            return None
        return v


class DistanceResult(BaseModel):
    """A computed distance, or the outcome of a threshold check."""

    distance: float | None = None
    within: bool | None = None
    units: str
    radius: float
