"""Numeric helpers shared by the screening and assessment engines."""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 always rounding up.

    Python's round() uses banker's rounding (round(72.5) == 72); scores here must
    round 72.5 to 73 so repeated runs and reports agree on boundary values.

    Examples:
        >>> round_half_up(72.5)
        73
        >>> round_half_up(2.4999)
        2
    """
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Round a score half-up and clamp it into [low, high]."""
    return max(low, min(high, round_half_up(value)))
