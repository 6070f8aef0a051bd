"""Readiness adjustment engine — level → modifiers → adjusted set list.

The adjustment level is a total order (FULL < MODERATE < LIGHT < REST).
Base modifiers are non-increasing in severity for intensity and volume and
non-decreasing for rest, so a more severe level never prescribes more work.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from program_engine.exceptions import ConfigurationError
from program_engine.math.rounding import round_half_up
from program_engine.models.enums import (
    RPE_CEILING,
    RPE_FLOOR,
    SLEEP_INTENSITY_CAP,
    ChangeType,
    Impact,
    ReadinessAdjustment,
)
from program_engine.models.readiness import (
    AdjustedSet,
    AdjustmentChange,
    AdjustmentDetails,
    AdjustmentSummary,
    ExerciseSwap,
    PlannedSet,
    ReadinessAnalysis,
    WorkoutAdjustments,
)


@dataclass(frozen=True)
class LevelModifiers:
    intensity: float
    volume: float
    rpe_adjustment: float
    rest: float
    changes: tuple[AdjustmentChange, ...] = ()


_BASE_MODIFIERS: dict[ReadinessAdjustment, LevelModifiers] = {
    ReadinessAdjustment.FULL: LevelModifiers(1.0, 1.0, 0.0, 1.0),
    ReadinessAdjustment.MODERATE: LevelModifiers(
        0.95, 0.90, -0.5, 1.10,
        (
            AdjustmentChange(
                ChangeType.INTENSITY,
                "Slight intensity reduction to account for recovery status",
                "100%", "95%",
            ),
            AdjustmentChange(
                ChangeType.VOLUME, "Drop 1 set per exercise to manage fatigue", "100%", "90%",
            ),
        ),
    ),
    ReadinessAdjustment.LIGHT: LevelModifiers(
        0.85, 0.70, -1.0, 1.25,
        (
            AdjustmentChange(
                ChangeType.INTENSITY,
                "Reduced intensity to prioritize movement quality",
                "100%", "85%",
            ),
            AdjustmentChange(
                ChangeType.VOLUME,
                "Significantly reduced volume - focus on key movements",
                "100%", "70%",
            ),
            AdjustmentChange(
                ChangeType.REST,
                "Extended rest periods for better recovery between sets",
                "100%", "125%",
            ),
        ),
    ),
    ReadinessAdjustment.REST: LevelModifiers(
        0.60, 0.50, -2.0, 1.50,
        (
            AdjustmentChange(
                ChangeType.INTENSITY,
                "Active recovery intensity - movement without stress",
                "100%", "60%",
            ),
            AdjustmentChange(
                ChangeType.VOLUME, "Minimal volume - just enough to stay active", "100%", "50%",
            ),
        ),
    ),
}

_LEVEL_MESSAGES: dict[ReadinessAdjustment, tuple[str, ...]] = {
    ReadinessAdjustment.FULL: (
        "You're primed for a great session. Let's make it count!",
        "All systems go. Time to push your limits.",
        "Green light on all fronts. Let's build some strength.",
    ),
    ReadinessAdjustment.MODERATE: (
        "Solid day ahead. We'll keep the intensity smart.",
        "Good foundation to work with. Training smart today.",
        "Not peak but not bad. Let's be strategic.",
    ),
    ReadinessAdjustment.LIGHT: (
        "Recovery mode activated. Quality over quantity today.",
        "Dialing it back to protect your gains.",
        "Light day, but we're still making progress.",
    ),
    ReadinessAdjustment.REST: (
        "Your body needs a break. Active recovery or rest today.",
        "Sometimes rest is the best training. Honor that today.",
        "Taking it easy is part of the program. Recover well.",
    ),
}

for _table in (_BASE_MODIFIERS, _LEVEL_MESSAGES):
    if set(_table) != set(ReadinessAdjustment):
        raise ConfigurationError("Readiness tables must cover every adjustment level")

SORENESS_NOTE = "Consider lighter variations for sore muscle groups"
SLEEP_NOTE = "Avoid max attempts - coordination may be impaired"


def base_modifiers(level: ReadinessAdjustment) -> LevelModifiers:
    return _BASE_MODIFIERS[level]


def adjustment_message(level: ReadinessAdjustment, score: int) -> str:
    """Encouragement line for a level; the score picks among the variants."""
    options = _LEVEL_MESSAGES[level]
    return options[score % len(options)]


def generate_readiness_adjustments(
    analysis: ReadinessAnalysis,
    level: ReadinessAdjustment,
) -> WorkoutAdjustments:
    """Convert a readiness analysis and a chosen level into session modifiers.

    The level is chosen by the caller (usually ``analysis.suggestion``, but
    the lifter may override it). Negative soreness adds an advisory note;
    negative sleep also caps intensity at 90%.

    Args:
        analysis: Result of analyze_readiness().
        level: Adjustment level the lifter accepted.

    Returns:
        WorkoutAdjustments. ``exercise_swaps`` is always empty.
    """
    base = base_modifiers(level)
    changes = list(base.changes)
    intensity = base.intensity

    if analysis.details.soreness_impact == Impact.NEGATIVE:
        changes.append(AdjustmentChange(ChangeType.EXERCISE, SORENESS_NOTE))

    if analysis.details.sleep_impact == Impact.NEGATIVE:
        changes.append(AdjustmentChange(ChangeType.INTENSITY, SLEEP_NOTE))
        intensity = min(intensity, SLEEP_INTENSITY_CAP)

    message = adjustment_message(level, analysis.score)
    swaps: tuple[ExerciseSwap, ...] = ()  # swap selection not implemented
    return WorkoutAdjustments(
        level=level,
        intensity_modifier=intensity,
        volume_modifier=base.volume,
        rpe_adjustment=base.rpe_adjustment,
        rest_modifier=base.rest,
        message=message,
        details=AdjustmentDetails(message=message, changes=tuple(changes)),
        exercise_swaps=swaps,
        skip_exercises=(),
    )


def apply_adjustments_to_sets(
    sets: Sequence[PlannedSet],
    adjustments: WorkoutAdjustments,
) -> tuple[AdjustedSet, ...]:
    """Map session modifiers onto concrete planned sets.

    Warmups pass through untouched. Sets of skipped exercises are flagged
    and otherwise untouched. Every other set gets load × intensity
    (rounded half-up), RPE + adjustment clamped to [5, 10], and rest ×
    rest modifier. The planned set stays attached for audit.

    Args:
        sets: Planned sets in session order.
        adjustments: Modifiers to apply.

    Returns:
        Tuple of AdjustedSet in the same order as ``sets``.
    """
    skipped = set(adjustments.skip_exercises)
    adjusted: list[AdjustedSet] = []

    for s in sets:
        if s.is_warmup:
            adjusted.append(AdjustedSet(s, s.target_load, s.target_rpe, s.rest_seconds))
            continue
        if s.exercise_id in skipped:
            adjusted.append(AdjustedSet(
                s, s.target_load, s.target_rpe, s.rest_seconds, is_skipped=True,
            ))
            continue

        load = (
            round_half_up(s.target_load * adjustments.intensity_modifier)
            if s.target_load else s.target_load
        )
        rpe = (
            max(RPE_FLOOR, min(RPE_CEILING, s.target_rpe + adjustments.rpe_adjustment))
            if s.target_rpe else s.target_rpe
        )
        rest = (
            round_half_up(s.rest_seconds * adjustments.rest_modifier)
            if s.rest_seconds else s.rest_seconds
        )
        adjusted.append(AdjustedSet(s, load, rpe, rest, is_adjusted=True))

    return tuple(adjusted)


def calculate_adjusted_volume(
    sets: Sequence[PlannedSet],
    volume_modifier: float,
) -> list[PlannedSet]:
    """Trim working sets per exercise to round(n × modifier), minimum 1.

    Warmups are always kept; the earliest working sets survive. The result
    is ordered by ``set_order``.
    """
    if volume_modifier >= 1:
        return list(sets)

    by_exercise: dict[str, list[PlannedSet]] = defaultdict(list)
    for s in sets:
        by_exercise[s.exercise_id].append(s)

    kept: list[PlannedSet] = []
    for exercise_sets in by_exercise.values():
        working = [s for s in exercise_sets if not s.is_warmup]
        keep_n = max(1, round_half_up(len(working) * volume_modifier))
        kept.extend(s for s in exercise_sets if s.is_warmup)
        kept.extend(working[:keep_n])

    return sorted(kept, key=lambda s: s.set_order)


def adjust_session(
    sets: Sequence[PlannedSet],
    adjustments: WorkoutAdjustments,
) -> tuple[AdjustedSet, ...]:
    """Trim volume, then apply load / RPE / rest modifiers."""
    return apply_adjustments_to_sets(
        calculate_adjusted_volume(sets, adjustments.volume_modifier), adjustments,
    )


def summarize_adjustments(adjustments: WorkoutAdjustments) -> AdjustmentSummary:
    """Human-readable summary of a session's modifiers."""
    intensity = adjustments.intensity_modifier
    volume = adjustments.volume_modifier

    key_changes: list[str] = []
    if intensity < 1:
        key_changes.append(f"Intensity at {round_half_up(intensity * 100)}%")
    if volume < 1:
        key_changes.append(f"Volume reduced to {round_half_up(volume * 100)}%")
    if adjustments.rpe_adjustment != 0:
        key_changes.append(f"Target RPE adjusted by {adjustments.rpe_adjustment:g}")
    if adjustments.exercise_swaps:
        key_changes.append(f"{len(adjustments.exercise_swaps)} exercise substitutions")
    if adjustments.skip_exercises:
        key_changes.append(f"Skipping {len(adjustments.skip_exercises)} exercises")

    return AdjustmentSummary(
        has_adjustments=(
            intensity < 1 or volume < 1
            or bool(adjustments.exercise_swaps) or bool(adjustments.skip_exercises)
        ),
        adjustment_level=adjustments.level,
        intensity_change="Normal" if intensity >= 1 else f"{round_half_up(intensity * 100)}%",
        volume_change="Normal" if volume >= 1 else f"{round_half_up(volume * 100)}%",
        key_changes=tuple(key_changes),
    )


def with_skips(adjustments: WorkoutAdjustments, skip: Iterable[str]) -> WorkoutAdjustments:
    """Copy of ``adjustments`` with extra exercises marked as skipped."""
    merged = tuple(dict.fromkeys((*adjustments.skip_exercises, *skip)))
    return replace(adjustments, skip_exercises=merged)
