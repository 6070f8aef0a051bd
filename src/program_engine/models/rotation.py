"""Rotation models: detected split patterns and next-session suggestions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from program_engine.models.enums import ReadinessAdjustment, RotationConfidence


@dataclass(frozen=True)
class SplitPattern:
    """A recurring split inferred from history by the pattern detector."""

    name: str
    splits: tuple[str, ...]
    confidence: float  # 0.0-1.0
    pattern_type: str = "training_split"
    days_per_week: float | None = None
    focus_distribution: tuple[tuple[str, int], ...] = ()


@dataclass(frozen=True)
class ReadinessContext:
    score: int | None = None
    adjustment: ReadinessAdjustment | None = None
    message: str | None = None
    has_checked_in: bool = False


@dataclass(frozen=True)
class RotationSuggestion:
    next_focus: str
    reason: str
    days_since_last: int | None
    confidence: RotationConfidence
    rotation_position: int  # 1-indexed
    rotation_total: int
    split_name: str | None = None
    readiness: ReadinessContext = field(default_factory=ReadinessContext)
    last_session: LastSessionSummary | None = None


@dataclass(frozen=True)
class ExerciseSummary:
    exercise_id: str
    exercise_name: str
    muscle_group: str
    sets: int
    last_weight: float | None
    last_reps: int | None
    last_rpe: float | None


@dataclass(frozen=True)
class LastSessionSummary:
    workout_id: str
    completed_on: date
    focus: str
    exercises: tuple[ExerciseSummary, ...]
    total_volume: float
    total_sets: int
    duration_minutes: int | None = None
