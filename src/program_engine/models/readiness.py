"""Readiness models: check-ins, analyses, adjustments, and adjusted sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from program_engine.models.enums import (
    ChangeType,
    Impact,
    PainSeverity,
    ReadinessAdjustment,
)


@dataclass(frozen=True)
class ReadinessCheckIn:
    """A daily self-report as stored by the readiness store (1-5 scales)."""

    check_in_date: date
    sleep_quality: int
    muscle_soreness: int
    stress_level: int
    readiness_score: int | None = None
    suggested_adjustment: ReadinessAdjustment | None = None


@dataclass(frozen=True)
class ReadinessFactors:
    sleep_impact: Impact = Impact.NEUTRAL
    soreness_impact: Impact = Impact.NEUTRAL
    stress_impact: Impact = Impact.NEUTRAL


@dataclass(frozen=True)
class ReadinessAnalysis:
    score: int  # 0-100
    suggestion: ReadinessAdjustment
    message: str
    details: ReadinessFactors = field(default_factory=ReadinessFactors)
    recommendations: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AdjustmentChange:
    """Audit entry describing one modification made to a session."""

    change_type: ChangeType
    reason: str
    original: str | None = None
    suggested: str | None = None


@dataclass(frozen=True)
class AdjustmentDetails:
    message: str
    changes: tuple[AdjustmentChange, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ExerciseSwap:
    original_exercise_id: str
    original_exercise_name: str
    suggested_exercise_id: str
    suggested_exercise_name: str
    reason: str


@dataclass(frozen=True)
class WorkoutAdjustments:
    """Numeric modifiers for one session plus their explanation."""

    level: ReadinessAdjustment
    intensity_modifier: float  # multiplies target load, 0.5-1.0
    volume_modifier: float  # multiplies working-set count, 0.5-1.0
    rpe_adjustment: float  # added to target RPE, -2-0
    rest_modifier: float  # multiplies rest periods, 1.0-1.5
    message: str
    details: AdjustmentDetails
    exercise_swaps: tuple[ExerciseSwap, ...] = field(default_factory=tuple)
    skip_exercises: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PlannedSet:
    """A set from a planned session, before any adjustment."""

    exercise_id: str
    set_order: int
    target_load: float | None = None
    target_reps: int | None = None
    target_rpe: float | None = None
    is_warmup: bool = False
    rest_seconds: int | None = None
    exercise_name: str = ""
    muscle_group: str | None = None


@dataclass(frozen=True)
class AdjustedSet:
    """A planned set after adjustment; the original stays attached for audit."""

    planned: PlannedSet
    target_load: float | None
    target_rpe: float | None
    rest_seconds: int | None
    is_adjusted: bool = False
    is_skipped: bool = False

    @property
    def exercise_id(self) -> str:
        return self.planned.exercise_id

    @property
    def set_order(self) -> int:
        return self.planned.set_order

    @property
    def is_warmup(self) -> bool:
        return self.planned.is_warmup

    @property
    def original_load(self) -> float | None:
        return self.planned.target_load

    @property
    def original_rpe(self) -> float | None:
        return self.planned.target_rpe


@dataclass(frozen=True)
class TimeConstraintAdjustment:
    available_minutes: float
    original_minutes: float
    priority_exercises: tuple[str, ...]
    skip_exercises: tuple[str, ...]
    message: str


@dataclass(frozen=True)
class PainReportAdjustment:
    body_part: str
    severity: PainSeverity
    affected_exercises: tuple[str, ...]
    load_modifier: float
    message: str
    substitutions: tuple[ExerciseSwap, ...] = field(default_factory=tuple)

    @property
    def skip_exercises(self) -> tuple[str, ...]:
        if self.severity == PainSeverity.SEVERE:
            return self.affected_exercises
        return ()


@dataclass(frozen=True)
class AdjustmentSummary:
    has_adjustments: bool
    adjustment_level: ReadinessAdjustment
    intensity_change: str
    volume_change: str
    key_changes: tuple[str, ...] = field(default_factory=tuple)
