"""Training splits — ordered day layouts with muscle groups and movement slots."""

from __future__ import annotations

from program_engine.models.block import SplitDay, TrainingSplit
from program_engine.models.enums import MovementPattern as MP
from program_engine.models.enums import TrainingGoal

TRAINING_SPLITS: tuple[TrainingSplit, ...] = (
    TrainingSplit(
        id="upper-lower-4",
        name="Upper/Lower (4 days)",
        days_per_week=4,
        suitable_for=(
            TrainingGoal.STRENGTH,
            TrainingGoal.HYPERTROPHY,
            TrainingGoal.GENERAL,
            TrainingGoal.POWERLIFTING,
        ),
        days=(
            SplitDay(1, "Upper A", "Upper Push Focus",
                     ("Chest", "Shoulders", "Triceps", "Back"),
                     (MP.HORIZONTAL_PUSH, MP.HORIZONTAL_PULL, MP.VERTICAL_PUSH), 2),
            SplitDay(2, "Lower A", "Squat Focus",
                     ("Legs", "Glutes", "Core"),
                     (MP.SQUAT, MP.HINGE, MP.CORE), 2),
            SplitDay(3, "Upper B", "Upper Pull Focus",
                     ("Back", "Biceps", "Shoulders", "Chest"),
                     (MP.HORIZONTAL_PULL, MP.VERTICAL_PULL, MP.HORIZONTAL_PUSH), 2),
            SplitDay(4, "Lower B", "Hinge Focus",
                     ("Legs", "Glutes", "Hamstrings", "Core"),
                     (MP.HINGE, MP.SQUAT, MP.CARRY), 2),
        ),
    ),
    TrainingSplit(
        id="push-pull-legs-6",
        name="Push/Pull/Legs (6 days)",
        days_per_week=6,
        suitable_for=(TrainingGoal.HYPERTROPHY, TrainingGoal.BODYBUILDING),
        days=(
            SplitDay(1, "Push A", "Chest Focus",
                     ("Chest", "Shoulders", "Triceps"),
                     (MP.HORIZONTAL_PUSH, MP.VERTICAL_PUSH), 3),
            SplitDay(2, "Pull A", "Back Width",
                     ("Back", "Biceps", "Rear Delts"),
                     (MP.VERTICAL_PULL, MP.HORIZONTAL_PULL), 3),
            SplitDay(3, "Legs A", "Quad Focus",
                     ("Legs", "Glutes", "Calves"),
                     (MP.SQUAT, MP.HINGE), 3),
            SplitDay(4, "Push B", "Shoulder Focus",
                     ("Shoulders", "Chest", "Triceps"),
                     (MP.VERTICAL_PUSH, MP.HORIZONTAL_PUSH), 3),
            SplitDay(5, "Pull B", "Back Thickness",
                     ("Back", "Biceps", "Rear Delts"),
                     (MP.HORIZONTAL_PULL, MP.VERTICAL_PULL), 3),
            SplitDay(6, "Legs B", "Hamstring Focus",
                     ("Legs", "Glutes", "Hamstrings", "Calves"),
                     (MP.HINGE, MP.SQUAT), 3),
        ),
    ),
    TrainingSplit(
        id="full-body-3",
        name="Full Body (3 days)",
        days_per_week=3,
        suitable_for=(TrainingGoal.STRENGTH, TrainingGoal.GENERAL, TrainingGoal.ATHLETIC),
        days=(
            SplitDay(1, "Full Body A", "Squat Day",
                     ("Legs", "Chest", "Back", "Core"),
                     (MP.SQUAT, MP.HORIZONTAL_PUSH, MP.HORIZONTAL_PULL), 2),
            SplitDay(2, "Full Body B", "Press Day",
                     ("Shoulders", "Back", "Legs", "Core"),
                     (MP.VERTICAL_PUSH, MP.VERTICAL_PULL, MP.HINGE), 2),
            SplitDay(3, "Full Body C", "Deadlift Day",
                     ("Legs", "Back", "Chest", "Core"),
                     (MP.HINGE, MP.HORIZONTAL_PUSH, MP.HORIZONTAL_PULL), 2),
        ),
    ),
    TrainingSplit(
        id="powerlifting-4",
        name="Powerlifting (4 days)",
        days_per_week=4,
        suitable_for=(TrainingGoal.POWERLIFTING, TrainingGoal.STRENGTH),
        days=(
            SplitDay(1, "Squat", "Competition Squat",
                     ("Legs", "Glutes", "Core"), (MP.SQUAT,), 3),
            SplitDay(2, "Bench", "Competition Bench",
                     ("Chest", "Shoulders", "Triceps"), (MP.HORIZONTAL_PUSH,), 3),
            SplitDay(3, "Deadlift", "Competition Deadlift",
                     ("Back", "Legs", "Glutes"), (MP.HINGE,), 3),
            SplitDay(4, "Accessories", "Weak Point Training",
                     ("Full Body",),
                     (MP.SQUAT, MP.HORIZONTAL_PUSH, MP.HORIZONTAL_PULL), 4),
        ),
    ),
    TrainingSplit(
        id="upper-lower-3",
        name="Upper/Lower (3 days)",
        days_per_week=3,
        suitable_for=(TrainingGoal.STRENGTH, TrainingGoal.HYPERTROPHY, TrainingGoal.GENERAL),
        days=(
            SplitDay(1, "Upper", "Upper Body",
                     ("Chest", "Back", "Shoulders", "Arms"),
                     (MP.HORIZONTAL_PUSH, MP.HORIZONTAL_PULL, MP.VERTICAL_PUSH, MP.VERTICAL_PULL), 2),
            SplitDay(2, "Lower", "Lower Body",
                     ("Legs", "Glutes", "Core"),
                     (MP.SQUAT, MP.HINGE, MP.CORE), 2),
            SplitDay(3, "Full Body", "Full Body",
                     ("Full Body",),
                     (MP.SQUAT, MP.HORIZONTAL_PUSH, MP.HORIZONTAL_PULL), 2),
        ),
    ),
)
