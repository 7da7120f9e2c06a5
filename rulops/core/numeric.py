"""Rounding and clamping helpers shared by the estimators."""

import math


def round_half_up(value: float, decimals: int = 0) -> float:
    """
    Round halves away from zero for positive values (2.5 -> 3, 0.05 -> 0.1).
    Built-in round() uses banker's rounding, which is not what reports show.
    """
    if not math.isfinite(value):
        return value
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
