# src/greatcircle/config/settings.py
"""
Library settings (Pydantic).

Settings are loaded from `src/greatcircle/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GREATCIRCLE_CONFIG_PATH`
- environment variables (e.g., `GREATCIRCLE_LOG_LEVEL`, `GREATCIRCLE_DISTANCE_FORMULA`)

Design rule:
- Calculation knobs (default radius, formula, strict units) live in YAML, not in the math.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from greatcircle.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `greatcircle.config`."""
    text = resources.files("greatcircle.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "greatcircle"
    log_level: str = "INFO"


class DistanceSettings(BaseModel):
    default_radius: float = Field(6371, gt=0)
    formula: Literal["law_of_cosines", "haversine"] = "law_of_cosines"
    strict_units: bool = False


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    distance: DistanceSettings = Field(default_factory=DistanceSettings)


_TRUTHY = {"1", "true", "yes", "y", "on"}


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Only a small whitelist is read; everything else comes from YAML.
    """
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("GREATCIRCLE_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    formula = os.getenv("GREATCIRCLE_DISTANCE_FORMULA")
    if formula:
        data.setdefault("distance", {})["formula"] = formula.strip().lower()

    strict_units = os.getenv("GREATCIRCLE_STRICT_UNITS")
    if strict_units:
        data.setdefault("distance", {})["strict_units"] = strict_units.strip().lower() in _TRUTHY

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GREATCIRCLE_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
