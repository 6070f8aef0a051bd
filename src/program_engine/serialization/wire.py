"""camelCase JSON serialization for engine outputs.

Converts generated blocks, rotation suggestions, adjusted sets, and the
other result types into plain dicts whose keys follow the boundary data
contracts. Enum values are written as lower-case names.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Sequence

from program_engine.models.block import (
    GeneratedBlock,
    GeneratedExercise,
    GeneratedSet,
    GeneratedWeek,
    GeneratedWorkout,
    LiftProjection,
)
from program_engine.models.journey import JourneyScores
from program_engine.models.progression import ProgressionResult, ProgressionSuggestion
from program_engine.models.readiness import (
    AdjustedSet,
    AdjustmentChange,
    AdjustmentSummary,
    ReadinessAnalysis,
    WorkoutAdjustments,
)
from program_engine.models.recommendation import BlockRecommendation
from program_engine.models.rotation import LastSessionSummary, RotationSuggestion


def enum_value(member: Enum | None) -> str | None:
    """Wire name of an enum member ("strength", "horizontal_push")."""
    return member.name.lower() if member is not None else None


def block_to_dict(block: GeneratedBlock) -> dict:
    """Convert a GeneratedBlock to the nested block JSON tree."""
    progress = block.projected_progress
    return {
        "name": block.name,
        "description": block.description,
        "goal": enum_value(block.goal),
        "durationWeeks": block.duration_weeks,
        "phase": enum_value(block.phase),
        "templateId": block.template_id,
        "splitId": block.split_id,
        "weeks": [_week_to_dict(w) for w in block.weeks],
        "projectedProgress": {
            "mainLifts": [_lift_to_dict(p) for p in progress.main_lifts],
            "volumeProgression": list(progress.volume_progression),
            "intensityProgression": list(progress.intensity_progression),
        },
    }


def block_to_json(block: GeneratedBlock, indent: int = 2) -> str:
    return json.dumps(block_to_dict(block), indent=indent)


def suggestion_to_dict(suggestion: RotationSuggestion) -> dict:
    """Convert a RotationSuggestion, including readiness and last session."""
    readiness = suggestion.readiness
    return {
        "nextFocus": suggestion.next_focus,
        "reason": suggestion.reason,
        "daysSinceLast": suggestion.days_since_last,
        "confidence": enum_value(suggestion.confidence),
        "rotationPosition": suggestion.rotation_position,
        "rotationTotal": suggestion.rotation_total,
        "splitName": suggestion.split_name,
        "readiness": {
            "score": readiness.score,
            "adjustment": enum_value(readiness.adjustment),
            "message": readiness.message,
            "hasCheckedIn": readiness.has_checked_in,
        },
        "lastSession": (
            _last_session_to_dict(suggestion.last_session)
            if suggestion.last_session is not None else None
        ),
    }


def adjusted_sets_to_dict(sets: Sequence[AdjustedSet]) -> list[dict]:
    """Adjusted sets with their original targets kept alongside."""
    return [
        {
            "exerciseId": s.exercise_id,
            "exerciseName": s.planned.exercise_name,
            "setOrder": s.set_order,
            "isWarmup": s.is_warmup,
            "targetLoad": s.target_load,
            "targetReps": s.planned.target_reps,
            "targetRpe": s.target_rpe,
            "restSeconds": s.rest_seconds,
            "originalLoad": s.original_load,
            "originalRpe": s.original_rpe,
            "isAdjusted": s.is_adjusted,
            "isSkipped": s.is_skipped,
        }
        for s in sets
    ]


def adjustments_to_dict(adjustments: WorkoutAdjustments) -> dict:
    return {
        "level": enum_value(adjustments.level),
        "intensityModifier": adjustments.intensity_modifier,
        "volumeModifier": adjustments.volume_modifier,
        "rpeAdjustment": adjustments.rpe_adjustment,
        "restModifier": adjustments.rest_modifier,
        "message": adjustments.message,
        "changes": [_change_to_dict(c) for c in adjustments.details.changes],
        "exerciseSwaps": [
            {
                "originalExerciseId": swap.original_exercise_id,
                "suggestedExerciseId": swap.suggested_exercise_id,
                "reason": swap.reason,
            }
            for swap in adjustments.exercise_swaps
        ],
        "skipExercises": list(adjustments.skip_exercises),
    }


def summary_to_dict(summary: AdjustmentSummary) -> dict:
    return {
        "hasAdjustments": summary.has_adjustments,
        "adjustmentLevel": enum_value(summary.adjustment_level),
        "intensityChange": summary.intensity_change,
        "volumeChange": summary.volume_change,
        "keyChanges": list(summary.key_changes),
    }


def analysis_to_dict(analysis: ReadinessAnalysis) -> dict:
    details = analysis.details
    return {
        "score": analysis.score,
        "suggestion": enum_value(analysis.suggestion),
        "message": analysis.message,
        "details": {
            "sleepImpact": enum_value(details.sleep_impact),
            "sorenessImpact": enum_value(details.soreness_impact),
            "stressImpact": enum_value(details.stress_impact),
        },
        "recommendations": list(analysis.recommendations),
    }


def progression_to_dict(suggestion: ProgressionSuggestion) -> dict:
    return {
        "progressionType": enum_value(suggestion.progression_type),
        "message": suggestion.message,
        "targetWeight": suggestion.target_weight,
        "targetReps": suggestion.target_reps,
        "targetRpe": suggestion.target_rpe,
    }


def progression_result_to_dict(result: ProgressionResult) -> dict:
    return {
        "type": enum_value(result.event),
        "message": result.message,
        "delta": result.delta,
        "reason": result.reason,
    }


def scores_to_dict(scores: JourneyScores) -> dict:
    return {
        "freestyler": scores.freestyler,
        "planner": scores.planner,
        "guided": scores.guided,
        "dominant": enum_value(scores.dominant),
    }


def recommendations_to_dict(recommendations: Sequence[BlockRecommendation]) -> list[dict]:
    return [
        {
            "blockType": enum_value(r.block_type),
            "durationWeeks": r.duration_weeks,
            "reasoning": r.reasoning,
            "confidence": r.confidence,
            "volumeLevel": enum_value(r.volume_level),
            "intensityLevel": enum_value(r.intensity_level),
            "primaryFocus": r.primary_focus,
        }
        for r in recommendations
    ]


def to_json_string(payload: Any, indent: int = 2) -> str:
    return json.dumps(payload, indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _week_to_dict(week: GeneratedWeek) -> dict:
    return {
        "weekNumber": week.week_number,
        "phase": enum_value(week.phase),
        "weekInPhase": week.week_in_phase,
        "theme": week.theme,
        "workouts": [_workout_to_dict(w) for w in week.workouts],
        "totalVolume": week.total_volume,
        "intensityRange": {"min": week.intensity_range.min, "max": week.intensity_range.max},
    }


def _workout_to_dict(workout: GeneratedWorkout) -> dict:
    return {
        "dayNumber": workout.day_number,
        "name": workout.name,
        "focus": workout.focus,
        "exercises": [_exercise_to_dict(e) for e in workout.exercises],
        "estimatedDuration": workout.estimated_duration,
    }


def _exercise_to_dict(exercise: GeneratedExercise) -> dict:
    result = {
        "exerciseId": exercise.exercise_id,
        "exerciseName": exercise.exercise_name,
        "muscleGroup": exercise.muscle_group,
        "isCompound": exercise.is_compound,
        "sets": [_set_to_dict(s) for s in exercise.sets],
        "alternatives": list(exercise.alternatives),
    }
    if exercise.movement_pattern is not None:
        result["movementPattern"] = enum_value(exercise.movement_pattern)
    if exercise.notes:
        result["notes"] = exercise.notes
    return result


def _set_to_dict(s: GeneratedSet) -> dict:
    result = {
        "setNumber": s.set_number,
        "targetReps": s.target_reps,
        "targetRpe": s.target_rpe,
        "isWarmup": s.is_warmup,
        "restSeconds": s.rest_seconds,
    }
    if s.percent_of_1rm is not None:
        result["percentOf1rm"] = s.percent_of_1rm
    return result


def _lift_to_dict(projection: LiftProjection) -> dict:
    return {
        "exerciseName": projection.exercise_name,
        "currentE1rm": projection.current_e1rm,
        "projectedE1rm": projection.projected_e1rm,
        "percentIncrease": projection.percent_increase,
        "trajectory": list(projection.trajectory),
    }


def _change_to_dict(change: AdjustmentChange) -> dict:
    return {
        "type": enum_value(change.change_type),
        "reason": change.reason,
        "original": change.original,
        "suggested": change.suggested,
    }


def _last_session_to_dict(session: LastSessionSummary) -> dict:
    return {
        "workoutId": session.workout_id,
        "completedOn": session.completed_on.isoformat(),
        "focus": session.focus,
        "totalVolume": session.total_volume,
        "totalSets": session.total_sets,
        "durationMinutes": session.duration_minutes,
        "exercises": [
            {
                "exerciseId": e.exercise_id,
                "exerciseName": e.exercise_name,
                "muscleGroup": e.muscle_group,
                "sets": e.sets,
                "lastWeight": e.last_weight,
                "lastReps": e.last_reps,
                "lastRpe": e.last_rpe,
            }
            for e in session.exercises
        ],
    }
