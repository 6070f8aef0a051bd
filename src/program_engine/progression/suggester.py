"""Progression suggester — next-session target for one exercise.

Branches in priority order:
    poor recovery → 90% load, same reps and RPE (deload)
    deload phase  → 80% load, RPE − 1 (deload)
    maintenance   → repeat the last set exactly (maintain)
    building      → by last RPE: < 7 add a rep, 7-8.5 add load, ≥ 9 hold
"""

from __future__ import annotations

from typing import Sequence

from program_engine.math.rounding import round_half_up
from program_engine.models.enums import (
    DEFAULT_LAST_RPE,
    DELOAD_LOAD_FRACTION,
    FIXED_LOAD_INCREMENT_LB,
    HOLD_RPE,
    LOAD_PROGRESSION_RPE,
    MAX_REP_PROGRESSION_REPS,
    PERCENT_INCREMENT_THRESHOLD_LB,
    PERCENT_LOAD_INCREMENT,
    POOR_RECOVERY_LOAD_FRACTION,
    REP_PROGRESSION_RPE,
    ProgressionType,
    RecoveryStatus,
    TrainingPhase,
)
from program_engine.models.history import LoggedSet
from program_engine.models.progression import ProgressionSuggestion


def load_increment(weight: float) -> int:
    """+5 lb, or 2.5% (rounded) once the load is above 200 lb."""
    if weight > PERCENT_INCREMENT_THRESHOLD_LB:
        return round_half_up(weight * PERCENT_LOAD_INCREMENT)
    return FIXED_LOAD_INCREMENT_LB


def last_working_set(history: Sequence[LoggedSet]) -> LoggedSet | None:
    """First non-warmup set with both weight and reps (history is newest first)."""
    return next((s for s in history if s.has_performance and not s.is_warmup), None)


def suggest_progression(
    history: Sequence[LoggedSet],
    block_phase: TrainingPhase | None = None,
    recovery_status: RecoveryStatus | None = None,
) -> ProgressionSuggestion | None:
    """Suggest the next target for an exercise from its recent sets.

    Args:
        history: Logged sets for one exercise, most recent first.
        block_phase: Phase of the active block, if any.
        recovery_status: Lifter's current recovery, if known.

    Returns:
        ProgressionSuggestion, or None when no usable working set exists.
    """
    last = last_working_set(history)
    if last is None:
        return None

    weight = float(last.weight)  # type: ignore[arg-type]
    reps = int(last.reps)  # type: ignore[arg-type]
    rpe = last.rpe or DEFAULT_LAST_RPE

    if recovery_status == RecoveryStatus.POOR:
        return ProgressionSuggestion(
            ProgressionType.DELOAD, "Hold or reduce (poor recovery)",
            target_weight=weight * POOR_RECOVERY_LOAD_FRACTION,
            target_reps=reps, target_rpe=rpe,
        )

    if block_phase == TrainingPhase.DELOAD:
        return ProgressionSuggestion(
            ProgressionType.DELOAD, "Deload: -20% volume",
            target_weight=weight * DELOAD_LOAD_FRACTION,
            target_reps=reps, target_rpe=rpe - 1,
        )

    if block_phase == TrainingPhase.MAINTENANCE:
        return ProgressionSuggestion(
            ProgressionType.MAINTAIN, "Maintain previous load",
            target_weight=weight, target_reps=reps, target_rpe=rpe,
        )

    if rpe < REP_PROGRESSION_RPE and reps < MAX_REP_PROGRESSION_REPS:
        return ProgressionSuggestion(
            ProgressionType.REPS, f"+1 rep ({weight:g} lb)",
            target_weight=weight, target_reps=reps + 1, target_rpe=rpe + 0.5,
        )

    if REP_PROGRESSION_RPE <= rpe <= LOAD_PROGRESSION_RPE:
        increment = load_increment(weight)
        return ProgressionSuggestion(
            ProgressionType.WEIGHT, f"+{increment} lb",
            target_weight=weight + increment, target_reps=reps, target_rpe=rpe + 0.5,
        )

    if rpe >= HOLD_RPE:
        return ProgressionSuggestion(
            ProgressionType.MAINTAIN, "Maintain (high RPE last session)",
            target_weight=weight, target_reps=reps, target_rpe=rpe,
        )

    # RPE between 8.5 and 9, or a high-rep set below RPE 7
    increment = load_increment(weight)
    return ProgressionSuggestion(
        ProgressionType.WEIGHT, f"+{increment} lb",
        target_weight=weight + increment, target_reps=reps, target_rpe=rpe,
    )
