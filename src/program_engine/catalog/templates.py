"""Periodization templates — phase sequences with volume/intensity character.

Each template's phases sum to its ``duration_weeks``; the block assembler
walks phases in order, one generated week per phase week.
"""

from __future__ import annotations

from program_engine.models.block import PeriodizationTemplate, PhaseConfig, RpeRange
from program_engine.models.enums import Experience, TrainingGoal, TrainingPhase

_ALL_LEVELS = (Experience.BEGINNER, Experience.INTERMEDIATE, Experience.ADVANCED)

PERIODIZATION_TEMPLATES: tuple[PeriodizationTemplate, ...] = (
    PeriodizationTemplate(
        id="strength-6week",
        name="6-Week Strength Block",
        description=(
            "Classic strength periodization with volume accumulation, "
            "intensity peak, and deload."
        ),
        goal=TrainingGoal.STRENGTH,
        duration_weeks=6,
        suitable_for=(Experience.INTERMEDIATE, Experience.ADVANCED),
        phases=(
            PhaseConfig(TrainingPhase.ACCUMULATION, 3, 1.0, 0.75, 5, 8, RpeRange(7, 8)),
            PhaseConfig(TrainingPhase.INTENSIFICATION, 2, 0.85, 0.9, 3, 5, RpeRange(8, 9)),
            PhaseConfig(TrainingPhase.DELOAD, 1, 0.5, 0.7, 5, 8, RpeRange(6, 7)),
        ),
    ),
    PeriodizationTemplate(
        id="hypertrophy-8week",
        name="8-Week Hypertrophy Block",
        description=(
            "High volume muscle building with progressive overload and "
            "strategic deloads."
        ),
        goal=TrainingGoal.HYPERTROPHY,
        duration_weeks=8,
        suitable_for=_ALL_LEVELS,
        phases=(
            PhaseConfig(TrainingPhase.ACCUMULATION, 4, 1.1, 0.7, 8, 12, RpeRange(7, 8)),
            PhaseConfig(TrainingPhase.INTENSIFICATION, 3, 1.0, 0.8, 6, 10, RpeRange(8, 9)),
            PhaseConfig(TrainingPhase.DELOAD, 1, 0.5, 0.65, 10, 15, RpeRange(5, 6)),
        ),
    ),
    PeriodizationTemplate(
        id="powerlifting-12week",
        name="12-Week Powerlifting Prep",
        description=(
            "Competition preparation with peaking protocol for squat, bench, "
            "and deadlift."
        ),
        goal=TrainingGoal.POWERLIFTING,
        duration_weeks=12,
        suitable_for=(Experience.INTERMEDIATE, Experience.ADVANCED),
        phases=(
            PhaseConfig(TrainingPhase.ACCUMULATION, 5, 1.0, 0.7, 5, 8, RpeRange(7, 8)),
            PhaseConfig(TrainingPhase.INTENSIFICATION, 4, 0.8, 0.85, 3, 5, RpeRange(8, 9)),
            PhaseConfig(TrainingPhase.REALIZATION, 2, 0.6, 0.95, 1, 3, RpeRange(9, 10)),
            PhaseConfig(TrainingPhase.DELOAD, 1, 0.3, 0.6, 3, 5, RpeRange(5, 6)),
        ),
    ),
    PeriodizationTemplate(
        id="bodybuilding-8week",
        name="8-Week Bodybuilding Block",
        description=(
            "Pump-focused volume block with higher rep ranges and a closing "
            "deload."
        ),
        goal=TrainingGoal.BODYBUILDING,
        duration_weeks=8,
        suitable_for=_ALL_LEVELS,
        phases=(
            PhaseConfig(TrainingPhase.ACCUMULATION, 4, 1.2, 0.7, 10, 15, RpeRange(7, 8)),
            PhaseConfig(TrainingPhase.INTENSIFICATION, 3, 1.0, 0.8, 8, 12, RpeRange(8, 9)),
            PhaseConfig(TrainingPhase.DELOAD, 1, 0.5, 0.6, 12, 15, RpeRange(5, 6)),
        ),
    ),
    PeriodizationTemplate(
        id="athletic-4week",
        name="4-Week Athletic Block",
        description="Balanced strength and power development for athletic performance.",
        goal=TrainingGoal.ATHLETIC,
        duration_weeks=4,
        suitable_for=_ALL_LEVELS,
        phases=(
            PhaseConfig(TrainingPhase.ACCUMULATION, 2, 0.9, 0.75, 5, 8, RpeRange(7, 8)),
            PhaseConfig(TrainingPhase.INTENSIFICATION, 1, 0.8, 0.85, 3, 6, RpeRange(8, 9)),
            PhaseConfig(TrainingPhase.DELOAD, 1, 0.5, 0.7, 5, 8, RpeRange(6, 7)),
        ),
    ),
    PeriodizationTemplate(
        id="beginner-4week",
        name="4-Week Foundation Block",
        description="Perfect for beginners - learn movements and build base strength.",
        goal=TrainingGoal.GENERAL,
        duration_weeks=4,
        suitable_for=(Experience.BEGINNER,),
        phases=(
            PhaseConfig(TrainingPhase.ACCUMULATION, 3, 0.8, 0.65, 8, 12, RpeRange(6, 7)),
            PhaseConfig(TrainingPhase.DELOAD, 1, 0.5, 0.6, 10, 15, RpeRange(5, 6)),
        ),
    ),
)
