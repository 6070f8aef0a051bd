"""Logged training history — the validated shape every consumer shares.

Raw rows from the history provider are converted once, at the boundary
(see program_engine.history), into these frozen types. The rotation
detector, progression suggester, and readiness engine only ever see these.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class LoggedSet:
    """One completed (or attempted) set."""

    exercise_id: str
    exercise_name: str = ""
    muscle_group: str = "Other"
    weight: float | None = None
    reps: int | None = None
    rpe: float | None = None
    is_warmup: bool = False
    set_order: int = 0
    completed_on: date | None = None

    @property
    def has_performance(self) -> bool:
        """True when both weight and reps were recorded (and non-zero)."""
        return bool(self.weight) and bool(self.reps)

    @property
    def volume(self) -> float:
        if not self.has_performance:
            return 0.0
        return float(self.weight) * int(self.reps)  # type: ignore[arg-type]


@dataclass(frozen=True)
class LoggedWorkout:
    workout_id: str
    focus: str
    completed_on: date
    sets: tuple[LoggedSet, ...] = field(default_factory=tuple)
    duration_minutes: int | None = None


@dataclass(frozen=True)
class LiftRecord:
    """Best known estimated 1RM for a main lift (input to projections)."""

    exercise_name: str
    e1rm: float | None = None
