"""Rounding and clamping shared by the scorers."""
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's round() uses banker's rounding (round(2.5) == 2), which would
    shift stored scores by one point against historical values.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp value into [low, high]; NaN collapses to low."""
    if math.isnan(value):
        return low
    return max(low, min(high, value))
