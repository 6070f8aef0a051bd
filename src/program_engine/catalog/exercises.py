"""Exercise reference data: movement-pattern families, accessories, equipment.

Exercises are identified by name; ``exercise_id`` values used in generated
blocks are slugs of these names (see :func:`exercise_slug`).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from program_engine.models.enums import MovementPattern


@dataclass(frozen=True)
class PatternExercises:
    """Muscle groups a pattern trains and its exercises in preference order."""

    muscle_groups: tuple[str, ...]
    preferred: tuple[str, ...]

    @property
    def primary_muscle(self) -> str:
        return self.muscle_groups[0]


MOVEMENT_PATTERN_EXERCISES: Mapping[MovementPattern, PatternExercises] = MappingProxyType({
    MovementPattern.SQUAT: PatternExercises(
        muscle_groups=("Legs", "Glutes"),
        preferred=(
            "Barbell Back Squat",
            "Barbell Front Squat",
            "Goblet Squat",
            "Leg Press",
            "Bulgarian Split Squat",
        ),
    ),
    MovementPattern.HINGE: PatternExercises(
        muscle_groups=("Back", "Legs", "Glutes"),
        preferred=(
            "Conventional Deadlift",
            "Romanian Deadlift",
            "Sumo Deadlift",
            "Trap Bar Deadlift",
            "Hip Thrust",
        ),
    ),
    MovementPattern.HORIZONTAL_PUSH: PatternExercises(
        muscle_groups=("Chest", "Shoulders", "Triceps"),
        preferred=(
            "Barbell Bench Press",
            "Dumbbell Bench Press",
            "Incline Bench Press",
            "Dumbbell Press",
            "Push-Up",
        ),
    ),
    MovementPattern.HORIZONTAL_PULL: PatternExercises(
        muscle_groups=("Back", "Biceps"),
        preferred=(
            "Barbell Row",
            "Dumbbell Row",
            "Cable Row",
            "T-Bar Row",
            "Chest Supported Row",
        ),
    ),
    MovementPattern.VERTICAL_PUSH: PatternExercises(
        muscle_groups=("Shoulders", "Triceps"),
        preferred=(
            "Overhead Press",
            "Dumbbell Shoulder Press",
            "Arnold Press",
            "Push Press",
            "Landmine Press",
        ),
    ),
    MovementPattern.VERTICAL_PULL: PatternExercises(
        muscle_groups=("Back", "Biceps"),
        preferred=(
            "Pull-Up",
            "Lat Pulldown",
            "Chin-Up",
            "Cable Pulldown",
            "Assisted Pull-Up",
        ),
    ),
    MovementPattern.CARRY: PatternExercises(
        muscle_groups=("Core", "Full Body"),
        preferred=(
            "Farmer's Walk",
            "Suitcase Carry",
            "Overhead Carry",
            "Trap Bar Carry",
        ),
    ),
    MovementPattern.CORE: PatternExercises(
        muscle_groups=("Core",),
        preferred=(
            "Plank",
            "Dead Bug",
            "Ab Wheel Rollout",
            "Hanging Leg Raise",
            "Cable Crunch",
            "Pallof Press",
        ),
    ),
})

# Isolation work used to fill accessory slots, keyed by muscle group
ACCESSORY_EXERCISES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Chest": ("Cable Fly", "Dumbbell Fly", "Pec Deck"),
    "Back": ("Straight Arm Pulldown", "Dumbbell Pullover", "Back Extension"),
    "Shoulders": ("Lateral Raise", "Cable Lateral Raise", "Front Raise"),
    "Rear Delts": ("Face Pull", "Reverse Fly", "Band Pull-Apart"),
    "Triceps": ("Tricep Pushdown", "Overhead Tricep Extension", "Skull Crusher"),
    "Biceps": ("Barbell Curl", "Hammer Curl", "Incline Dumbbell Curl"),
    "Arms": ("Dumbbell Curl", "Cable Tricep Extension", "Hammer Curl"),
    "Legs": ("Leg Extension", "Walking Lunge", "Step-Up"),
    "Hamstrings": ("Lying Leg Curl", "Nordic Curl", "Seated Leg Curl"),
    "Glutes": ("Glute Bridge", "Cable Kickback", "Hip Abduction"),
    "Calves": ("Standing Calf Raise", "Seated Calf Raise"),
    "Core": ("Hanging Knee Raise", "Side Plank", "Russian Twist"),
    "Full Body": ("Kettlebell Swing", "Sled Push", "Burpee"),
})

# Equipment an exercise needs; an exercise absent from the table needs nothing
EXERCISE_EQUIPMENT: Mapping[str, frozenset[str]] = MappingProxyType({
    "Barbell Back Squat": frozenset({"barbell", "rack"}),
    "Barbell Front Squat": frozenset({"barbell", "rack"}),
    "Goblet Squat": frozenset({"dumbbell"}),
    "Leg Press": frozenset({"machine"}),
    "Bulgarian Split Squat": frozenset({"dumbbell", "bench"}),
    "Conventional Deadlift": frozenset({"barbell"}),
    "Romanian Deadlift": frozenset({"barbell"}),
    "Sumo Deadlift": frozenset({"barbell"}),
    "Trap Bar Deadlift": frozenset({"trap_bar"}),
    "Hip Thrust": frozenset({"barbell", "bench"}),
    "Barbell Bench Press": frozenset({"barbell", "bench"}),
    "Dumbbell Bench Press": frozenset({"dumbbell", "bench"}),
    "Incline Bench Press": frozenset({"barbell", "bench"}),
    "Dumbbell Press": frozenset({"dumbbell"}),
    "Barbell Row": frozenset({"barbell"}),
    "Dumbbell Row": frozenset({"dumbbell"}),
    "Cable Row": frozenset({"cable"}),
    "T-Bar Row": frozenset({"barbell", "landmine"}),
    "Chest Supported Row": frozenset({"dumbbell", "bench"}),
    "Overhead Press": frozenset({"barbell"}),
    "Dumbbell Shoulder Press": frozenset({"dumbbell"}),
    "Arnold Press": frozenset({"dumbbell"}),
    "Push Press": frozenset({"barbell"}),
    "Landmine Press": frozenset({"barbell", "landmine"}),
    "Pull-Up": frozenset({"pull_up_bar"}),
    "Lat Pulldown": frozenset({"cable"}),
    "Chin-Up": frozenset({"pull_up_bar"}),
    "Cable Pulldown": frozenset({"cable"}),
    "Assisted Pull-Up": frozenset({"machine"}),
    "Farmer's Walk": frozenset({"dumbbell"}),
    "Suitcase Carry": frozenset({"dumbbell"}),
    "Overhead Carry": frozenset({"dumbbell"}),
    "Trap Bar Carry": frozenset({"trap_bar"}),
    "Ab Wheel Rollout": frozenset({"ab_wheel"}),
    "Hanging Leg Raise": frozenset({"pull_up_bar"}),
    "Cable Crunch": frozenset({"cable"}),
    "Pallof Press": frozenset({"cable"}),
    "Cable Fly": frozenset({"cable"}),
    "Dumbbell Fly": frozenset({"dumbbell", "bench"}),
    "Pec Deck": frozenset({"machine"}),
    "Straight Arm Pulldown": frozenset({"cable"}),
    "Dumbbell Pullover": frozenset({"dumbbell", "bench"}),
    "Back Extension": frozenset({"machine"}),
    "Lateral Raise": frozenset({"dumbbell"}),
    "Cable Lateral Raise": frozenset({"cable"}),
    "Front Raise": frozenset({"dumbbell"}),
    "Face Pull": frozenset({"cable"}),
    "Reverse Fly": frozenset({"dumbbell"}),
    "Band Pull-Apart": frozenset({"band"}),
    "Tricep Pushdown": frozenset({"cable"}),
    "Overhead Tricep Extension": frozenset({"dumbbell"}),
    "Skull Crusher": frozenset({"barbell", "bench"}),
    "Barbell Curl": frozenset({"barbell"}),
    "Hammer Curl": frozenset({"dumbbell"}),
    "Incline Dumbbell Curl": frozenset({"dumbbell", "bench"}),
    "Dumbbell Curl": frozenset({"dumbbell"}),
    "Cable Tricep Extension": frozenset({"cable"}),
    "Leg Extension": frozenset({"machine"}),
    "Walking Lunge": frozenset({"dumbbell"}),
    "Step-Up": frozenset({"dumbbell", "bench"}),
    "Lying Leg Curl": frozenset({"machine"}),
    "Seated Leg Curl": frozenset({"machine"}),
    "Cable Kickback": frozenset({"cable"}),
    "Hip Abduction": frozenset({"machine"}),
    "Standing Calf Raise": frozenset({"machine"}),
    "Seated Calf Raise": frozenset({"machine"}),
    "Hanging Knee Raise": frozenset({"pull_up_bar"}),
    "Kettlebell Swing": frozenset({"kettlebell"}),
    "Sled Push": frozenset({"sled"}),
})


def exercise_slug(name: str) -> str:
    """Stable id for an exercise name: "Farmer's Walk" -> "farmers-walk"."""
    cleaned = name.lower().replace("'", "")
    return re.sub(r"[^a-z0-9]+", "-", cleaned).strip("-")


def is_available(name: str, equipment: tuple[str, ...] | None) -> bool:
    """Whether an exercise can be performed with the given equipment.

    ``equipment`` of None means a fully equipped gym.
    """
    if equipment is None:
        return True
    needed = EXERCISE_EQUIPMENT.get(name, frozenset())
    return needed <= {e.lower() for e in equipment}

