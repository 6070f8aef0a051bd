"""Enumerations and programming constants for the program engine.

Every lookup table in the engine is keyed by one of these enums, so an
unmapped value is a construction-time error rather than a silent miss.
"""

from enum import IntEnum, auto


class TrainingGoal(IntEnum):
    """What a training block is built to improve."""

    STRENGTH = auto()
    HYPERTROPHY = auto()
    POWERLIFTING = auto()
    BODYBUILDING = auto()
    ATHLETIC = auto()
    GENERAL = auto()


class Experience(IntEnum):
    """Lifter training age classification."""

    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()


class TrainingPhase(IntEnum):
    """Periodization phases within a block (mesocycle)."""

    ACCUMULATION = auto()
    INTENSIFICATION = auto()
    REALIZATION = auto()
    DELOAD = auto()
    MAINTENANCE = auto()


class BlockType(IntEnum):
    """Block archetypes used when recommending the next block."""

    ACCUMULATION = auto()
    INTENSIFICATION = auto()
    REALIZATION = auto()
    PEAKING = auto()
    DELOAD = auto()
    TRANSITION = auto()
    BASE_BUILDING = auto()
    HYPERTROPHY = auto()
    STRENGTH = auto()
    POWER = auto()


class LoadLevel(IntEnum):
    """Qualitative volume / intensity level of a block."""

    LOW = auto()
    MODERATE = auto()
    HIGH = auto()
    VERY_HIGH = auto()


class MovementPattern(IntEnum):
    """Categorical lift families used to pick interchangeable exercises."""

    SQUAT = auto()
    HINGE = auto()
    HORIZONTAL_PUSH = auto()
    HORIZONTAL_PULL = auto()
    VERTICAL_PUSH = auto()
    VERTICAL_PULL = auto()
    CARRY = auto()
    CORE = auto()


class ReadinessAdjustment(IntEnum):
    """Session adjustment level, ordered by severity (FULL = no change)."""

    FULL = auto()
    MODERATE = auto()
    LIGHT = auto()
    REST = auto()


class Impact(IntEnum):
    """Effect of one readiness factor on today's session."""

    POSITIVE = auto()
    NEUTRAL = auto()
    NEGATIVE = auto()


class ChangeType(IntEnum):
    """Kind of change recorded in an adjustment audit entry."""

    INTENSITY = auto()
    VOLUME = auto()
    REST = auto()
    EXERCISE = auto()


class PainSeverity(IntEnum):
    MILD = auto()
    MODERATE = auto()
    SEVERE = auto()


class RecoveryStatus(IntEnum):
    GOOD = auto()
    MODERATE = auto()
    POOR = auto()


class ProgressionType(IntEnum):
    """How the next session's target differs from the last one."""

    WEIGHT = auto()
    REPS = auto()
    VOLUME = auto()
    MAINTAIN = auto()
    DELOAD = auto()


class ProgressionEvent(IntEnum):
    """Classification of a logged set against the previous comparable set."""

    WEIGHT_INCREASE = auto()
    REP_INCREASE = auto()
    VOLUME_INCREASE = auto()
    E1RM_INCREASE = auto()
    RPE_DECREASE = auto()
    MATCHED = auto()
    REGRESSED = auto()


class RotationConfidence(IntEnum):
    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()


class Journey(IntEnum):
    """Training-style affinity inferred from behaviour."""

    FREESTYLER = auto()
    PLANNER = auto()
    GUIDED = auto()


class SignalType(IntEnum):
    """Behavioural signals appended to the journey log."""

    # Freestyler
    QUICK_START = auto()
    ADD_EXERCISE_MID_WORKOUT = auto()
    SKIP_SUGGESTION = auto()
    UNSTRUCTURED_WORKOUT = auto()
    # Planner
    CREATE_BLOCK = auto()
    FOLLOW_SCHEDULE = auto()
    COMPLETE_PLANNED_WORKOUT = auto()
    VIEW_CALENDAR = auto()
    # Guided
    CHECK_READINESS = auto()
    USE_COACH = auto()
    ACCEPT_SUGGESTION = auto()
    ADJUST_FOR_READINESS = auto()


# ---------------------------------------------------------------------------
# Overload calculator
# ---------------------------------------------------------------------------
MIN_WORKING_SETS = 2
MAX_WORKING_SETS = 6

# Base working sets per exercise before phase volume scaling
COMPOUND_BASE_SETS = {
    Experience.BEGINNER: 3,
    Experience.INTERMEDIATE: 4,
    Experience.ADVANCED: 5,
}
ISOLATION_BASE_SETS = {
    Experience.BEGINNER: 2,
    Experience.INTERMEDIATE: 3,
    Experience.ADVANCED: 3,
}

# Target RPE climbs this much per week inside a phase
RPE_WEEKLY_RAMP = 0.5

# Rest periods keyed on the top of the phase rep range
HEAVY_REP_CEILING = 5
MODERATE_REP_CEILING = 8
HEAVY_REST_S = 180
MODERATE_REST_S = 120
LIGHT_REST_S = 90

# Compound warmup ramp: (reps, rpe)
WARMUP_PROTOCOL = ((10, 4.0), (5, 5.0))
WARMUP_REST_S = 60

# Within-phase overload rate per week
PROGRESSION_RATE = {
    Experience.BEGINNER: 0.05,
    Experience.INTERMEDIATE: 0.025,
    Experience.ADVANCED: 0.015,
}
# Intensity climbs at this fraction of the volume rate
INTENSITY_RATE_FRACTION = 0.5

# ---------------------------------------------------------------------------
# Block assembler
# ---------------------------------------------------------------------------
GENERAL_WARMUP_MIN = 5.0
WORKING_SET_MIN = 1.0
WARMUP_SET_MIN = 0.5

# Weekly e1RM gain used by the progress projection
E1RM_WEEKLY_GAIN = {
    Experience.BEGINNER: 0.025,
    Experience.INTERMEDIATE: 0.01,
    Experience.ADVANCED: 0.005,
}

# ---------------------------------------------------------------------------
# Readiness
# ---------------------------------------------------------------------------
READINESS_FULL_THRESHOLD = 80
READINESS_MODERATE_THRESHOLD = 60
READINESS_LIGHT_THRESHOLD = 40

# Check-in answers (sleep, soreness, stress) are on a 1-5 scale
READINESS_SCALE_MIN = 1
READINESS_SCALE_MAX = 5

SLEEP_INTENSITY_CAP = 0.90
RPE_FLOOR = 5.0
RPE_CEILING = 10.0

# Time-constrained sessions: share of planned time available
TIME_CUT_ALL_ISOLATION_RATIO = 0.70
TIME_CUT_HALF_ISOLATION_RATIO = 0.85

MAJOR_MUSCLE_GROUPS = frozenset({"Chest", "Back", "Legs", "Shoulders", "Full Body"})

# Load multiplier on exercises touching a painful area
PAIN_LOAD_MODIFIER = {
    PainSeverity.MILD: 0.90,
    PainSeverity.MODERATE: 0.75,
    PainSeverity.SEVERE: 0.0,  # skipped entirely
}

# ---------------------------------------------------------------------------
# Rotation
# ---------------------------------------------------------------------------
MIN_PATTERN_CONFIDENCE = 0.5
HIGH_PATTERN_CONFIDENCE = 0.8
MEDIUM_PATTERN_CONFIDENCE = 0.6
MIN_RECOVERY_DAYS = 2  # 48 h between sessions of the same split

MIN_WORKOUTS_FOR_SPLIT = 6
SPLIT_DETECTION_WINDOW = 20

# ---------------------------------------------------------------------------
# Progression
# ---------------------------------------------------------------------------
DEFAULT_LAST_RPE = 8.0
POOR_RECOVERY_LOAD_FRACTION = 0.9
DELOAD_LOAD_FRACTION = 0.8
REP_PROGRESSION_RPE = 7.0
LOAD_PROGRESSION_RPE = 8.5
HOLD_RPE = 9.0
MAX_REP_PROGRESSION_REPS = 15
FIXED_LOAD_INCREMENT_LB = 5
PERCENT_INCREMENT_THRESHOLD_LB = 200
PERCENT_LOAD_INCREMENT = 0.025
E1RM_NOISE_THRESHOLD = 1.01

# ---------------------------------------------------------------------------
# Journey signals
# ---------------------------------------------------------------------------
SIGNAL_DECAY_WINDOW_DAYS = 30.0
SIGNAL_DECAY_FLOOR = 0.2
