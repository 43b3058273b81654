# insight_api/run_rate.py
from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP

BALLS_PER_OVER = 6


def required_run_rate(runs: int, balls: int) -> float:
    """
    Runs needed per over to get `runs` off `balls`.

    Computed as (runs / balls) * 6 so exact band edges (e.g. 65 off 26 = 15.0)
    stay exact. With no balls left the ask is unbounded, so this returns
    math.inf rather than raising.
    """
    if balls <= 0:
        return math.inf
    return (runs / balls) * BALLS_PER_OVER


def format_rate(rate: float) -> str:
    """
    One decimal place, ties rounded up on the exact float value
    (8.25 -> "8.3"). Unbounded rates render as "Infinity".
    """
    if math.isinf(rate):
        return "Infinity"
    return str(Decimal(rate).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
