"""
Result post-processing: threshold checks and significant-digit rounding.
"""

from __future__ import annotations

import math

from greatcircle.domain.models import DistanceOptions


def round_significant(value: float, digits: int) -> float:
    """Round `value` to `digits` significant digits (not decimal places)."""
    if digits < 1:
        raise ValueError("digits must be >= 1")
    if value == 0 or not math.isfinite(value):
        return value
    return float(f"{value:.{digits}g}")


def format_result(distance: float, options: DistanceOptions) -> float | bool:
    """Apply `within` (boolean result) or `precision` to a raw distance."""
    if options.within:
        return distance <= options.within
    if options.precision:
        return round_significant(distance, options.precision)
    return distance
