"""Block models: configuration input, catalog entries, and the generated tree.

The generated tree is GeneratedBlock → GeneratedWeek → GeneratedWorkout →
GeneratedExercise → GeneratedSet. All nodes are frozen; the assembler builds
them bottom-up and never mutates a node after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from program_engine.exceptions import ConfigurationError, InvalidConfigError
from program_engine.models.enums import (
    Experience,
    MovementPattern,
    TrainingGoal,
    TrainingPhase,
)


@dataclass(frozen=True)
class BlockConfig:
    """Caller request for a new training block.

    ``equipment`` of None means "everything available"; an empty tuple means
    bodyweight only.
    """

    goal: TrainingGoal
    duration_weeks: int
    days_per_week: int
    experience: Experience
    phase: TrainingPhase | None = None
    focus_lifts: tuple[str, ...] = field(default_factory=tuple)
    equipment: tuple[str, ...] | None = None
    session_minutes: int | None = None

    def __post_init__(self) -> None:
        if self.duration_weeks < 1:
            raise InvalidConfigError(
                f"duration_weeks must be >= 1, got {self.duration_weeks}",
                field="duration_weeks",
            )
        if not 1 <= self.days_per_week <= 7:
            raise InvalidConfigError(
                f"days_per_week must be 1-7, got {self.days_per_week}",
                field="days_per_week",
            )
        if self.session_minutes is not None and self.session_minutes <= 0:
            raise InvalidConfigError(
                f"session_minutes must be positive, got {self.session_minutes}",
                field="session_minutes",
            )


@dataclass(frozen=True)
class RpeRange:
    min: float
    max: float

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


@dataclass(frozen=True)
class PhaseConfig:
    """One phase of a periodization template."""

    phase: TrainingPhase
    weeks: int
    volume_multiplier: float
    intensity_multiplier: float
    rep_range_min: int
    rep_range_max: int
    rpe_range: RpeRange

    def __post_init__(self) -> None:
        if self.weeks < 1:
            raise ConfigurationError(f"{self.phase.name} phase must last >= 1 week")
        if self.rep_range_min > self.rep_range_max:
            raise ConfigurationError(
                f"{self.phase.name} rep range {self.rep_range_min}-{self.rep_range_max} is inverted"
            )
        if self.rpe_range.min > self.rpe_range.max:
            raise ConfigurationError(f"{self.phase.name} RPE range is inverted")


@dataclass(frozen=True)
class PeriodizationTemplate:
    id: str
    name: str
    description: str
    goal: TrainingGoal
    duration_weeks: int
    suitable_for: tuple[Experience, ...]
    phases: tuple[PhaseConfig, ...]

    @property
    def total_phase_weeks(self) -> int:
        return sum(p.weeks for p in self.phases)


@dataclass(frozen=True)
class SplitDay:
    day_number: int
    name: str
    focus: str
    muscle_groups: tuple[str, ...]
    primary_movements: tuple[MovementPattern, ...]
    accessory_slots: int


@dataclass(frozen=True)
class TrainingSplit:
    id: str
    name: str
    days_per_week: int
    days: tuple[SplitDay, ...]
    suitable_for: tuple[TrainingGoal, ...]

    def __post_init__(self) -> None:
        if self.days_per_week != len(self.days):
            raise ConfigurationError(
                f"Split {self.id} declares {self.days_per_week} days "
                f"but defines {len(self.days)}"
            )


# ---------------------------------------------------------------------------
# Generated tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GeneratedSet:
    set_number: int
    target_reps: int
    target_rpe: float
    is_warmup: bool
    rest_seconds: int
    percent_of_1rm: int | None = None


@dataclass(frozen=True)
class GeneratedExercise:
    exercise_id: str
    exercise_name: str
    muscle_group: str
    is_compound: bool
    sets: tuple[GeneratedSet, ...]
    movement_pattern: MovementPattern | None = None
    notes: str = ""
    alternatives: tuple[str, ...] = field(default_factory=tuple)

    @property
    def working_sets(self) -> tuple[GeneratedSet, ...]:
        return tuple(s for s in self.sets if not s.is_warmup)


@dataclass(frozen=True)
class GeneratedWorkout:
    day_number: int
    name: str
    focus: str
    exercises: tuple[GeneratedExercise, ...]
    estimated_duration: int  # minutes

    @property
    def working_set_count(self) -> int:
        return sum(len(e.working_sets) for e in self.exercises)


@dataclass(frozen=True)
class GeneratedWeek:
    week_number: int  # 1-indexed across the block
    phase: TrainingPhase
    week_in_phase: int
    theme: str
    workouts: tuple[GeneratedWorkout, ...]
    total_volume: int  # working sets
    intensity_range: RpeRange


@dataclass(frozen=True)
class LiftProjection:
    """Projected e1RM trajectory for one main lift across the block."""

    exercise_name: str
    current_e1rm: float | None
    projected_e1rm: float
    percent_increase: int
    trajectory: tuple[float, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ProgressProjection:
    main_lifts: tuple[LiftProjection, ...] = field(default_factory=tuple)
    volume_progression: tuple[int, ...] = field(default_factory=tuple)
    intensity_progression: tuple[float, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GeneratedBlock:
    name: str
    description: str
    goal: TrainingGoal
    duration_weeks: int
    phase: TrainingPhase
    template_id: str
    split_id: str
    weeks: tuple[GeneratedWeek, ...]
    projected_progress: ProgressProjection

    @property
    def total_weeks(self) -> int:
        return len(self.weeks)


@dataclass(frozen=True)
class BlockDifficulty:
    rating: int  # 1-5
    label: str
