"""Situational adjusters: short on time, or training around pain.

Both follow the readiness engine's shape: compute an adjustment from the
planned sets, then apply it to the same set list.
"""

from __future__ import annotations

import math
from typing import Sequence

from program_engine.math.rounding import round_half_up
from program_engine.models.enums import (
    GENERAL_WARMUP_MIN,
    LIGHT_REST_S,
    MAJOR_MUSCLE_GROUPS,
    PAIN_LOAD_MODIFIER,
    TIME_CUT_ALL_ISOLATION_RATIO,
    TIME_CUT_HALF_ISOLATION_RATIO,
    WARMUP_SET_MIN,
    WORKING_SET_MIN,
    PainSeverity,
)
from program_engine.models.readiness import (
    AdjustedSet,
    PainReportAdjustment,
    PlannedSet,
    TimeConstraintAdjustment,
)

# Body part → muscle groups whose exercises load it
PAIN_AFFECTED_GROUPS: dict[str, tuple[str, ...]] = {
    "shoulder": ("Shoulders", "Chest", "Back"),
    "back": ("Back", "Legs"),
    "knee": ("Legs",),
    "elbow": ("Arms", "Chest", "Back"),
    "wrist": ("Arms", "Chest"),
    "hip": ("Legs", "Core"),
    "neck": ("Shoulders", "Back"),
}

_PAIN_MESSAGES = {
    PainSeverity.MILD: "Noted {part} discomfort. We'll use lighter loads and stop if it worsens.",
    PainSeverity.MODERATE: (
        "{part} needs attention. Switching to pain-free alternatives for affected exercises."
    ),
    PainSeverity.SEVERE: (
        "Skip exercises involving {part} today. Consider seeing a professional if pain persists."
    ),
}


def _exercise_groups(sets: Sequence[PlannedSet]) -> dict[str, str | None]:
    """exercise_id → muscle group, in first-appearance order."""
    groups: dict[str, str | None] = {}
    for s in sets:
        groups.setdefault(s.exercise_id, s.muscle_group)
    return groups


def estimate_planned_duration(sets: Sequence[PlannedSet]) -> int:
    """Session length in minutes, timed the same way as generated workouts."""
    total = GENERAL_WARMUP_MIN
    for s in sets:
        per_set = WARMUP_SET_MIN if s.is_warmup else WORKING_SET_MIN
        rest = s.rest_seconds if s.rest_seconds is not None else LIGHT_REST_S
        total += per_set + rest / 60
    return round_half_up(total)


def generate_time_constraint_adjustments(
    sets: Sequence[PlannedSet],
    available_minutes: float,
    estimated_minutes: float,
) -> TimeConstraintAdjustment:
    """Decide what to cut when the session will not fit.

    Exercises for a major muscle group (or with no recorded group) are
    treated as compound and kept. Below 70% of the planned time all
    isolation work is cut; below 85% the first half (rounded up) is.
    """
    if available_minutes >= estimated_minutes:
        return TimeConstraintAdjustment(
            available_minutes=available_minutes,
            original_minutes=estimated_minutes,
            priority_exercises=(),
            skip_exercises=(),
            message="You have enough time for the full workout.",
        )

    ratio = available_minutes / estimated_minutes
    compound: list[str] = []
    isolation: list[str] = []
    for exercise_id, group in _exercise_groups(sets).items():
        if group is None or group in MAJOR_MUSCLE_GROUPS:
            compound.append(exercise_id)
        else:
            isolation.append(exercise_id)

    if ratio < TIME_CUT_ALL_ISOLATION_RATIO:
        skip = isolation
    elif ratio < TIME_CUT_HALF_ISOLATION_RATIO:
        skip = isolation[: math.ceil(len(isolation) / 2)]
    else:
        skip = []

    return TimeConstraintAdjustment(
        available_minutes=available_minutes,
        original_minutes=estimated_minutes,
        priority_exercises=tuple(compound),
        skip_exercises=tuple(skip),
        message=f"Short on time. Focus on {len(compound)} key movements, skip accessories.",
    )


def generate_pain_adjustments(
    body_part: str,
    severity: PainSeverity,
    sets: Sequence[PlannedSet],
) -> PainReportAdjustment:
    """Find exercises that load a painful body part and scale the response.

    Unknown body parts affect nothing but still produce the message.
    """
    groups = PAIN_AFFECTED_GROUPS.get(body_part.lower(), ())
    affected = tuple(
        exercise_id
        for exercise_id, group in _exercise_groups(sets).items()
        if group is not None and group in groups
    )
    return PainReportAdjustment(
        body_part=body_part,
        severity=severity,
        affected_exercises=affected,
        load_modifier=PAIN_LOAD_MODIFIER[severity],
        message=_PAIN_MESSAGES[severity].format(part=body_part),
    )


def apply_time_constraint(
    sets: Sequence[PlannedSet],
    adjustment: TimeConstraintAdjustment,
) -> tuple[AdjustedSet, ...]:
    """Flag sets of cut exercises as skipped; everything else passes through."""
    skip = set(adjustment.skip_exercises)
    return tuple(
        AdjustedSet(
            s, s.target_load, s.target_rpe, s.rest_seconds,
            is_skipped=s.exercise_id in skip and not s.is_warmup,
        )
        for s in sets
    )


def apply_pain_adjustment(
    sets: Sequence[PlannedSet],
    adjustment: PainReportAdjustment,
) -> tuple[AdjustedSet, ...]:
    """Lighten (mild / moderate) or skip (severe) the affected exercises.

    Warmups and unaffected exercises pass through untouched.
    """
    affected = set(adjustment.affected_exercises)
    severe = adjustment.severity == PainSeverity.SEVERE
    result: list[AdjustedSet] = []

    for s in sets:
        if s.is_warmup or s.exercise_id not in affected:
            result.append(AdjustedSet(s, s.target_load, s.target_rpe, s.rest_seconds))
        elif severe:
            result.append(AdjustedSet(
                s, s.target_load, s.target_rpe, s.rest_seconds, is_skipped=True,
            ))
        else:
            load = (
                round_half_up(s.target_load * adjustment.load_modifier)
                if s.target_load else s.target_load
            )
            result.append(AdjustedSet(s, load, s.target_rpe, s.rest_seconds, is_adjusted=True))

    return tuple(result)
