"""Rounding helpers.

Prescriptions round half away from zero for positive values (2.5 -> 3),
which is what lifters expect from a "rounded" load or set count. Python's
built-in round() uses banker's rounding and would turn 2.5 into 2.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up."""
    return math.floor(value + 0.5)


def round_to(value: float, places: int = 1) -> float:
    """Round to ``places`` decimals, ties going up."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor
