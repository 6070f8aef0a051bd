"""Strength math: estimated 1RM and block-level e1RM projections.

References:
    Epley (1985). Poundage Chart. Boyd Epley Workout.
"""

from __future__ import annotations

import numpy as np

from program_engine.math.rounding import round_half_up
from program_engine.models.block import LiftProjection
from program_engine.models.enums import E1RM_WEEKLY_GAIN, Experience


def calculate_e1rm(weight: float, reps: int) -> int:
    """Estimated one-rep max using the Epley formula, rounded.

    e1RM = weight × (1 + reps / 30). A single is its own max.

    Args:
        weight: Load lifted.
        reps: Repetitions completed at that load.

    Returns:
        Estimated 1RM in the same unit as ``weight``; 0 for empty sets.
    """
    if reps == 1:
        return round_half_up(weight)
    if reps <= 0 or weight <= 0:
        return 0
    return round_half_up(weight * (1 + reps / 30))


def project_lift(
    exercise_name: str,
    current_e1rm: float | None,
    experience: Experience,
    duration_weeks: int,
) -> LiftProjection:
    """Project a lift's e1RM linearly across a block.

    Gain per week depends on training age (2.5% / 1% / 0.5%). The
    trajectory holds the projected e1RM at the end of each week; a lift
    with no known max projects to 0 but still reports the percentage.

    Args:
        exercise_name: Display name of the lift.
        current_e1rm: Best known e1RM, or None.
        experience: Lifter classification.
        duration_weeks: Block length in weeks.

    Returns:
        LiftProjection with trajectory, final e1RM, and percent increase.
    """
    weekly_gain = E1RM_WEEKLY_GAIN[experience]
    weeks = np.arange(1, duration_weeks + 1, dtype=np.float64)
    factors = 1.0 + weekly_gain * weeks
    final_factor = 1.0 + weekly_gain * duration_weeks

    if current_e1rm:
        trajectory = np.floor(current_e1rm * factors + 0.5)
        projected = round_half_up(current_e1rm * final_factor)
    else:
        trajectory = np.zeros_like(factors)
        projected = 0

    return LiftProjection(
        exercise_name=exercise_name,
        current_e1rm=current_e1rm,
        projected_e1rm=float(projected),
        percent_increase=round_half_up((final_factor - 1.0) * 100),
        trajectory=tuple(float(v) for v in trajectory),
    )


def weekly_means(ranges: list[tuple[float, float]]) -> tuple[float, ...]:
    """Midpoint of each (min, max) pair, e.g. weekly RPE ranges."""
    if not ranges:
        return ()
    arr = np.asarray(ranges, dtype=np.float64)
    return tuple(float(v) for v in arr.mean(axis=1))
