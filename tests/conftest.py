"""Shared test fixtures: block configs, workout histories, planned sessions."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable

import pytest

from program_engine.models.block import BlockConfig
from program_engine.models.enums import Experience, TrainingGoal
from program_engine.models.history import LoggedSet, LoggedWorkout
from program_engine.models.readiness import PlannedSet
from program_engine.models.rotation import SplitPattern

TODAY = date(2024, 6, 10)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def strength_config() -> BlockConfig:
    """Intermediate lifter, 6-week strength block, 4 days a week."""
    return BlockConfig(
        goal=TrainingGoal.STRENGTH,
        duration_weeks=6,
        days_per_week=4,
        experience=Experience.INTERMEDIATE,
    )


@pytest.fixture
def ppl_pattern() -> SplitPattern:
    return SplitPattern(name="Push/Pull/Legs", splits=("Push", "Pull", "Legs"), confidence=0.8)


@pytest.fixture
def make_workout() -> Callable[..., LoggedWorkout]:
    """Factory: make_workout("Push", days_ago=1, sets=(...))."""

    def _make(focus: str, days_ago: int, sets: tuple[LoggedSet, ...] = (), **kwargs) -> LoggedWorkout:
        completed = TODAY - timedelta(days=days_ago)
        return LoggedWorkout(
            workout_id=kwargs.pop("workout_id", f"{focus.lower()}-{days_ago}"),
            focus=focus,
            completed_on=completed,
            sets=sets,
            **kwargs,
        )

    return _make


@pytest.fixture
def push_pull_history(make_workout) -> list[LoggedWorkout]:
    """Push 1 day ago, Pull 3 days ago, Legs never logged."""
    return [make_workout("Push", 1), make_workout("Pull", 3)]


@pytest.fixture
def planned_session() -> list[PlannedSet]:
    """Bench (2 warmups + 3 working) followed by 3 sets of curls."""
    return [
        PlannedSet("barbell-bench-press", 1, 95, 10, 4.0, True, 60, "Barbell Bench Press", "Chest"),
        PlannedSet("barbell-bench-press", 2, 135, 5, 5.0, True, 60, "Barbell Bench Press", "Chest"),
        PlannedSet("barbell-bench-press", 3, 200, 5, 8.0, False, 180, "Barbell Bench Press", "Chest"),
        PlannedSet("barbell-bench-press", 4, 200, 5, 8.0, False, 180, "Barbell Bench Press", "Chest"),
        PlannedSet("barbell-bench-press", 5, 200, 5, 8.0, False, 180, "Barbell Bench Press", "Chest"),
        PlannedSet("barbell-curl", 6, 60, 12, 8.0, False, 90, "Barbell Curl", "Biceps"),
        PlannedSet("barbell-curl", 7, 60, 12, 8.0, False, 90, "Barbell Curl", "Biceps"),
        PlannedSet("barbell-curl", 8, 60, 12, 8.0, False, 90, "Barbell Curl", "Biceps"),
    ]
