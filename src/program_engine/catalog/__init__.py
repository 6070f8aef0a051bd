"""Template catalog — immutable reference data shared by every request.

Everything here is built once at import and never mutated: templates and
splits are tuples of frozen dataclasses, lookup tables are read-only
mappings.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from program_engine.catalog.blocks import BLOCK_CHARACTERISTICS, PHASE_SEQUENCES, PHASE_TO_BLOCK
from program_engine.catalog.exercises import (
    ACCESSORY_EXERCISES,
    EXERCISE_EQUIPMENT,
    MOVEMENT_PATTERN_EXERCISES,
    PatternExercises,
    exercise_slug,
    is_available,
)
from program_engine.catalog.splits import TRAINING_SPLITS
from program_engine.catalog.templates import PERIODIZATION_TEMPLATES
from program_engine.exceptions import ConfigurationError
from program_engine.models.block import PeriodizationTemplate, TrainingSplit
from program_engine.models.enums import TrainingGoal

GOAL_LABELS: Mapping[TrainingGoal, str] = MappingProxyType({
    TrainingGoal.STRENGTH: "Strength",
    TrainingGoal.HYPERTROPHY: "Hypertrophy",
    TrainingGoal.POWERLIFTING: "Powerlifting",
    TrainingGoal.BODYBUILDING: "Bodybuilding",
    TrainingGoal.ATHLETIC: "Athletic Performance",
    TrainingGoal.GENERAL: "General Fitness",
})


def templates_for_goal(goal: TrainingGoal) -> tuple[PeriodizationTemplate, ...]:
    return tuple(t for t in PERIODIZATION_TEMPLATES if t.goal == goal)


def splits_for_goal(goal: TrainingGoal) -> tuple[TrainingSplit, ...]:
    return tuple(s for s in TRAINING_SPLITS if goal in s.suitable_for)


def get_template(template_id: str) -> PeriodizationTemplate:
    """Look up a template by id.

    Raises:
        ConfigurationError: If no template has that id.
    """
    for template in PERIODIZATION_TEMPLATES:
        if template.id == template_id:
            return template
    raise ConfigurationError(f"Unknown periodization template: {template_id!r}")


def get_split(split_id: str) -> TrainingSplit:
    """Look up a split by id.

    Raises:
        ConfigurationError: If no split has that id.
    """
    for split in TRAINING_SPLITS:
        if split.id == split_id:
            return split
    raise ConfigurationError(f"Unknown training split: {split_id!r}")


__all__ = [
    "ACCESSORY_EXERCISES",
    "BLOCK_CHARACTERISTICS",
    "EXERCISE_EQUIPMENT",
    "GOAL_LABELS",
    "MOVEMENT_PATTERN_EXERCISES",
    "PERIODIZATION_TEMPLATES",
    "PHASE_SEQUENCES",
    "PHASE_TO_BLOCK",
    "PatternExercises",
    "TRAINING_SPLITS",
    "exercise_slug",
    "get_split",
    "get_template",
    "is_available",
    "splits_for_goal",
    "templates_for_goal",
]
