"""Rotation detector — which split of a recurring rotation to train next.

Selection order:
    1. A split never logged wins immediately (pattern order breaks ties).
    2. Among splits rested at least 48 h, the one rested longest.
    3. If every split was trained within 48 h, the least recently trained.

Readiness never changes the chosen split; merge_readiness() only annotates
the reason.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Sequence

from program_engine import config
from program_engine.models.enums import (
    HIGH_PATTERN_CONFIDENCE,
    MEDIUM_PATTERN_CONFIDENCE,
    MIN_PATTERN_CONFIDENCE,
    MIN_RECOVERY_DAYS,
    ReadinessAdjustment,
    RotationConfidence,
)
from program_engine.models.history import LoggedSet, LoggedWorkout
from program_engine.models.readiness import ReadinessAnalysis
from program_engine.models.rotation import (
    ExerciseSummary,
    LastSessionSummary,
    ReadinessContext,
    RotationSuggestion,
    SplitPattern,
)
from program_engine.rotation.matching import matches_split

logger = logging.getLogger(__name__)

_READINESS_SUFFIX = {
    ReadinessAdjustment.REST: ". Consider rest or light activity based on your readiness.",
    ReadinessAdjustment.LIGHT: ". Go lighter today based on your readiness check-in.",
}


def _most_recent_first(history: Sequence[LoggedWorkout]) -> list[LoggedWorkout]:
    return sorted(history, key=lambda w: w.completed_on, reverse=True)


def days_since_by_split(
    history: Sequence[LoggedWorkout],
    splits: Sequence[str],
    today: date,
) -> dict[str, int]:
    """Days since each split was last trained; untrained splits are absent.

    Each workout is credited to the first split (in pattern order) it
    matches, and only the most recent matching workout counts.
    """
    last: dict[str, int] = {}
    for workout in _most_recent_first(history):
        for split in splits:
            if matches_split(workout.focus, split):
                if split not in last:
                    last[split] = (today - workout.completed_on).days
                break
    return last


def _plural_days(n: int) -> str:
    return f"{n} day{'s' if n != 1 else ''}"


def _derive_confidence(pattern: SplitPattern, known: int) -> RotationConfidence:
    if pattern.confidence >= HIGH_PATTERN_CONFIDENCE and known >= len(pattern.splits) - 1:
        return RotationConfidence.HIGH
    if pattern.confidence >= MEDIUM_PATTERN_CONFIDENCE:
        return RotationConfidence.MEDIUM
    return RotationConfidence.LOW


def next_in_rotation(
    history: Sequence[LoggedWorkout],
    split_pattern: SplitPattern | None,
    *,
    today: date | None = None,
    history_limit: int | None = None,
) -> RotationSuggestion | None:
    """Suggest the next split to train.

    Args:
        history: Completed workouts (any order; sorted internally).
        split_pattern: Detected rotation, or None.
        today: Reference date for day counts; defaults to date.today().
        history_limit: Most recent workouts considered; defaults to
            PROGRAM_ENGINE_HISTORY_LIMIT.

    Returns:
        RotationSuggestion, or None when there is no pattern, it has no
        splits, or its confidence is below 0.5.
    """
    if split_pattern is None or not split_pattern.splits:
        return None
    if split_pattern.confidence < MIN_PATTERN_CONFIDENCE:
        logger.debug(
            "Pattern %s confidence %.2f below %.2f; no suggestion",
            split_pattern.name, split_pattern.confidence, MIN_PATTERN_CONFIDENCE,
        )
        return None

    today = today or date.today()
    limit = history_limit if history_limit is not None else config.HISTORY_LIMIT
    recent = _most_recent_first(history)[:limit]
    splits = split_pattern.splits
    last = days_since_by_split(recent, splits, today)

    next_focus: str | None = None
    reason = ""

    for split in splits:
        if split not in last:
            next_focus = split
            reason = f"You haven't logged a {split} session yet"
            break

    if next_focus is None:
        rested = [s for s in splits if last[s] >= MIN_RECOVERY_DAYS]
        if rested:
            # max() keeps the first of equal values, preserving pattern order
            next_focus = max(rested, key=lambda s: last[s])
            reason = f"Last {next_focus} was {last[next_focus]} days ago"
        else:
            next_focus = max(splits, key=lambda s: last[s])
            reason = (
                f"{next_focus} was your least recent session "
                f"({_plural_days(last[next_focus])} ago)"
            )

    return RotationSuggestion(
        next_focus=next_focus,
        reason=reason,
        days_since_last=last.get(next_focus),
        confidence=_derive_confidence(split_pattern, len(last)),
        rotation_position=splits.index(next_focus) + 1,
        rotation_total=len(splits),
        split_name=split_pattern.name,
    )


def merge_readiness(
    suggestion: RotationSuggestion,
    analysis: ReadinessAnalysis | None,
) -> RotationSuggestion:
    """Attach today's readiness to a suggestion.

    A REST or LIGHT suggestion appends advice to the reason; ``next_focus``
    is never changed.
    """
    if analysis is None:
        return suggestion

    context = ReadinessContext(
        score=analysis.score,
        adjustment=analysis.suggestion,
        message=analysis.message,
        has_checked_in=True,
    )
    suffix = _READINESS_SUFFIX.get(analysis.suggestion, "")
    return replace(suggestion, reason=suggestion.reason + suffix, readiness=context)


# ---------------------------------------------------------------------------
# Last session summary
# ---------------------------------------------------------------------------


def extract_exercise_summaries(sets: Sequence[LoggedSet]) -> tuple[ExerciseSummary, ...]:
    """Per-exercise summary of working sets, keeping the heaviest set.

    Sorted by set count, most sets first (stable for ties).
    """
    summaries: dict[str, dict] = {}
    for s in sets:
        if s.is_warmup:
            continue
        entry = summaries.get(s.exercise_id)
        if entry is None:
            summaries[s.exercise_id] = {
                "exercise_name": s.exercise_name,
                "muscle_group": s.muscle_group or "Other",
                "sets": 1,
                "last_weight": s.weight,
                "last_reps": s.reps,
                "last_rpe": s.rpe,
            }
            continue
        entry["sets"] += 1
        if s.weight and (not entry["last_weight"] or s.weight > entry["last_weight"]):
            entry["last_weight"] = s.weight
            entry["last_reps"] = s.reps
            entry["last_rpe"] = s.rpe

    ordered = sorted(summaries.items(), key=lambda kv: kv[1]["sets"], reverse=True)
    return tuple(ExerciseSummary(exercise_id=eid, **fields) for eid, fields in ordered)


def last_session_for_focus(
    history: Sequence[LoggedWorkout],
    focus: str,
) -> LastSessionSummary | None:
    """Summarize the most recent workout matching a split label."""
    workout = next(
        (w for w in _most_recent_first(history) if matches_split(w.focus, focus)),
        None,
    )
    if workout is None:
        return None

    working = [s for s in workout.sets if not s.is_warmup]
    return LastSessionSummary(
        workout_id=workout.workout_id,
        completed_on=workout.completed_on,
        focus=workout.focus or focus,
        exercises=extract_exercise_summaries(workout.sets),
        total_volume=sum(s.volume for s in working),
        total_sets=sum(1 for s in working if s.weight or s.reps),
        duration_minutes=workout.duration_minutes,
    )
