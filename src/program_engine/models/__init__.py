"""Data models for the program engine."""

from program_engine.models.block import (
    BlockConfig,
    BlockDifficulty,
    GeneratedBlock,
    GeneratedExercise,
    GeneratedSet,
    GeneratedWeek,
    GeneratedWorkout,
    LiftProjection,
    PeriodizationTemplate,
    PhaseConfig,
    ProgressProjection,
    RpeRange,
    SplitDay,
    TrainingSplit,
)
from program_engine.models.enums import (
    BlockType,
    Experience,
    Journey,
    MovementPattern,
    PainSeverity,
    ProgressionType,
    ReadinessAdjustment,
    RecoveryStatus,
    RotationConfidence,
    SignalType,
    TrainingGoal,
    TrainingPhase,
)
from program_engine.models.history import LiftRecord, LoggedSet, LoggedWorkout
from program_engine.models.journey import JourneyScores, JourneySignal
from program_engine.models.progression import ProgressionResult, ProgressionSuggestion
from program_engine.models.readiness import (
    AdjustedSet,
    AdjustmentSummary,
    PlannedSet,
    ReadinessAnalysis,
    ReadinessCheckIn,
    WorkoutAdjustments,
)
from program_engine.models.recommendation import BlockRecommendation
from program_engine.models.rotation import (
    LastSessionSummary,
    RotationSuggestion,
    SplitPattern,
)

__all__ = [
    "AdjustedSet",
    "AdjustmentSummary",
    "BlockConfig",
    "BlockDifficulty",
    "BlockRecommendation",
    "BlockType",
    "Experience",
    "GeneratedBlock",
    "GeneratedExercise",
    "GeneratedSet",
    "GeneratedWeek",
    "GeneratedWorkout",
    "Journey",
    "JourneyScores",
    "JourneySignal",
    "LastSessionSummary",
    "LiftProjection",
    "LiftRecord",
    "LoggedSet",
    "LoggedWorkout",
    "MovementPattern",
    "PainSeverity",
    "PeriodizationTemplate",
    "PhaseConfig",
    "PlannedSet",
    "ProgressProjection",
    "ProgressionResult",
    "ProgressionSuggestion",
    "ProgressionType",
    "ReadinessAdjustment",
    "ReadinessAnalysis",
    "ReadinessCheckIn",
    "RecoveryStatus",
    "RotationConfidence",
    "RotationSuggestion",
    "RpeRange",
    "SignalType",
    "SplitDay",
    "SplitPattern",
    "TrainingGoal",
    "TrainingPhase",
    "TrainingSplit",
    "WorkoutAdjustments",
]
