"""Classify a logged set against the previous comparable set.

Checks run in order and the first match wins: weight increase, rep
increase, volume increase, e1RM increase (above 1% noise), RPE decrease,
matched, regressed. Missing RPE is treated as 10.
"""

from __future__ import annotations

from typing import Sequence

from program_engine.math.rounding import round_half_up
from program_engine.math.strength import calculate_e1rm
from program_engine.models.enums import E1RM_NOISE_THRESHOLD, ProgressionEvent
from program_engine.models.history import LoggedSet
from program_engine.models.progression import ProgressionResult

_MATCHED_MESSAGE = "Stimulus matched, not progressed"


def _plural_reps(n: int) -> str:
    return f"{n} rep{'s' if n > 1 else ''}"


def detect_progression(current: LoggedSet, previous: LoggedSet | None) -> ProgressionResult | None:
    """Compare two working sets of the same exercise.

    Returns:
        ProgressionResult, or None when either set is a warmup, lacks
        weight or reps, or there is no previous set.
    """
    if previous is None or current.is_warmup or previous.is_warmup:
        return None
    if not current.has_performance or not previous.has_performance:
        return None

    weight, reps = float(current.weight), int(current.reps)  # type: ignore[arg-type]
    prev_weight, prev_reps = float(previous.weight), int(previous.reps)  # type: ignore[arg-type]
    rpe = current.rpe or 10.0
    prev_rpe = previous.rpe or 10.0

    if weight > prev_weight and reps >= prev_reps:
        delta = weight - prev_weight
        return ProgressionResult(ProgressionEvent.WEIGHT_INCREASE, f"+{delta:g} lb", delta)

    if reps > prev_reps and weight >= prev_weight:
        delta = reps - prev_reps
        return ProgressionResult(ProgressionEvent.REP_INCREASE, f"+{_plural_reps(delta)}", delta)

    volume, prev_volume = current.volume, previous.volume
    if volume > prev_volume:
        delta = volume - prev_volume
        percent = round_half_up(delta / prev_volume * 100)
        return ProgressionResult(ProgressionEvent.VOLUME_INCREASE, f"+{percent}% volume", delta)

    e1rm = calculate_e1rm(weight, reps)
    prev_e1rm = calculate_e1rm(prev_weight, prev_reps)
    if e1rm > prev_e1rm * E1RM_NOISE_THRESHOLD:
        delta = e1rm - prev_e1rm
        return ProgressionResult(ProgressionEvent.E1RM_INCREASE, f"+{delta} lb E1RM", delta)

    same_load = weight == prev_weight and reps == prev_reps
    if same_load and rpe < prev_rpe:
        return ProgressionResult(
            ProgressionEvent.RPE_DECREASE, f"RPE {prev_rpe:g} → {rpe:g}", prev_rpe - rpe,
        )

    if same_load and abs(rpe - prev_rpe) <= 0.5:
        return ProgressionResult(ProgressionEvent.MATCHED, _MATCHED_MESSAGE)

    if weight < prev_weight or reps < prev_reps:
        reasons = []
        if prev_weight > weight:
            reasons.append(f"{round_half_up(prev_weight - weight)} lb")
        if prev_reps > reps:
            reasons.append(_plural_reps(prev_reps - reps))
        reason = ", ".join(reasons)
        return ProgressionResult(
            ProgressionEvent.REGRESSED, f"Regressed: -{reason}", reason=reason,
        )

    return ProgressionResult(ProgressionEvent.MATCHED, _MATCHED_MESSAGE)


def find_best_previous_set(current: LoggedSet, previous_sets: Sequence[LoggedSet]) -> LoggedSet | None:
    """Previous working set with the same set order, else the most recent one."""
    working = [s for s in previous_sets if not s.is_warmup]
    if not working:
        return None
    return next((s for s in working if s.set_order == current.set_order), working[0])
