"""Block assembler — composes selectors and the overload calculator into a block.

Iteration order is phases → weeks → split days → movement slots. Primary
movement patterns are filled first from the pattern's preferred exercises,
then accessory slots are filled with isolation work for muscle groups the
primaries did not cover.
"""

from __future__ import annotations

import logging
from typing import Iterable

from program_engine.catalog import (
    ACCESSORY_EXERCISES,
    GOAL_LABELS,
    MOVEMENT_PATTERN_EXERCISES,
    exercise_slug,
    is_available,
)
from program_engine.math.rounding import round_half_up
from program_engine.math.strength import project_lift, weekly_means
from program_engine.models.block import (
    BlockConfig,
    BlockDifficulty,
    GeneratedBlock,
    GeneratedExercise,
    GeneratedWeek,
    GeneratedWorkout,
    PhaseConfig,
    ProgressProjection,
    SplitDay,
)
from program_engine.models.enums import (
    GENERAL_WARMUP_MIN,
    WARMUP_SET_MIN,
    WORKING_SET_MIN,
    Experience,
    MovementPattern,
    TrainingPhase,
)
from program_engine.models.history import LiftRecord
from program_engine.planning.overload import (
    apply_overload,
    calculate_progressive_overload,
    generate_sets_for_exercise,
)
from program_engine.planning.selectors import (
    select_periodization_template,
    select_training_split,
)

logger = logging.getLogger(__name__)

_MAX_ALTERNATIVES = 3

# Difficulty score bands: (upper bound, rating, label)
_DIFFICULTY_BANDS = (
    (3.0, 1, "Easy"),
    (5.0, 2, "Moderate"),
    (7.0, 3, "Challenging"),
    (9.0, 4, "Hard"),
)


# ---------------------------------------------------------------------------
# Naming and estimates
# ---------------------------------------------------------------------------


def generate_block_name(config: BlockConfig) -> str:
    return f"{config.duration_weeks}-Week {GOAL_LABELS[config.goal]} Block"


def generate_week_theme(phase: TrainingPhase, week_in_phase: int, weeks_in_phase: int) -> str:
    """Theme for a week from its phase and position in that phase.

    The first week takes precedence over the last, so a one-week phase
    always gets its opening theme.
    """
    if phase == TrainingPhase.DELOAD:
        return "Recovery & Adaptation"
    if phase == TrainingPhase.MAINTENANCE:
        return "Maintaining Gains"

    first, middle, last = {
        TrainingPhase.ACCUMULATION: ("Volume Foundation", "Volume Building", "Volume Peak"),
        TrainingPhase.INTENSIFICATION: ("Intensity Introduction", "Intensity Ramp", "Intensity Peak"),
        TrainingPhase.REALIZATION: ("Peak Preparation", "Peak Performance", "Test Week"),
    }[phase]
    if week_in_phase == 1:
        return first
    if week_in_phase == weeks_in_phase:
        return last
    return middle


def estimate_workout_duration(exercises: Iterable[GeneratedExercise]) -> int:
    """Estimated session length in minutes.

    5 min general warmup, plus 1 min per working set and 0.5 min per
    warmup set, each followed by its prescribed rest.
    """
    total = GENERAL_WARMUP_MIN
    for exercise in exercises:
        for s in exercise.sets:
            per_set = WARMUP_SET_MIN if s.is_warmup else WORKING_SET_MIN
            total += per_set + s.rest_seconds / 60
    return round_half_up(total)


# ---------------------------------------------------------------------------
# Exercise selection
# ---------------------------------------------------------------------------


def _pattern_exercise(
    pattern: MovementPattern,
    config: BlockConfig,
) -> tuple[str, tuple[str, ...], bool]:
    """Pick the exercise for a pattern slot.

    Returns:
        (chosen name, alternatives, whether it came from the focus lifts).
    """
    entry = MOVEMENT_PATTERN_EXERCISES[pattern]
    permitted = [n for n in entry.preferred if is_available(n, config.equipment)]
    if not permitted:
        # Never leave a primary slot empty
        permitted = [entry.preferred[0]]

    focus = {exercise_slug(f) for f in config.focus_lifts}
    chosen = next((n for n in entry.preferred if exercise_slug(n) in focus), None)
    from_focus = chosen is not None
    if chosen is None:
        chosen = permitted[0]

    alternatives = tuple(n for n in permitted if n != chosen)[:_MAX_ALTERNATIVES]
    return chosen, alternatives, from_focus


def _accessory_candidates(day: SplitDay, covered: set[str]) -> list[str]:
    """Uncovered muscle groups first, then the rest of the day's groups."""
    uncovered = [g for g in day.muscle_groups if g not in covered]
    return uncovered + [g for g in day.muscle_groups if g in covered]


def build_exercises_for_day(
    day: SplitDay,
    phase: PhaseConfig,
    config: BlockConfig,
    week_in_phase: int,
) -> list[GeneratedExercise]:
    exercises: list[GeneratedExercise] = []
    used: set[str] = set()

    for pattern in day.primary_movements:
        name, alternatives, from_focus = _pattern_exercise(pattern, config)
        if name in used:
            continue
        used.add(name)
        exercises.append(GeneratedExercise(
            exercise_id=exercise_slug(name),
            exercise_name=name,
            muscle_group=MOVEMENT_PATTERN_EXERCISES[pattern].primary_muscle,
            is_compound=True,
            sets=generate_sets_for_exercise(phase, True, config.experience, week_in_phase),
            movement_pattern=pattern,
            notes="Focus lift" if from_focus else "",
            alternatives=alternatives,
        ))

    covered = {e.muscle_group for e in exercises}
    slots = day.accessory_slots
    for muscle in _accessory_candidates(day, covered):
        if slots == 0:
            break
        name = next(
            (
                n for n in ACCESSORY_EXERCISES.get(muscle, ())
                if n not in used and is_available(n, config.equipment)
            ),
            None,
        )
        if name is None:
            continue
        used.add(name)
        slots -= 1
        exercises.append(GeneratedExercise(
            exercise_id=exercise_slug(name),
            exercise_name=name,
            muscle_group=muscle,
            is_compound=False,
            sets=generate_sets_for_exercise(phase, False, config.experience, week_in_phase),
        ))

    return exercises


def fit_to_session(
    exercises: list[GeneratedExercise],
    session_minutes: int | None,
) -> list[GeneratedExercise]:
    """Drop accessories from the end until the session fits.

    Primary compound lifts are never dropped, so a session may still
    overrun when the primaries alone exceed the limit.
    """
    if session_minutes is None:
        return exercises
    fitted = list(exercises)
    while estimate_workout_duration(fitted) > session_minutes:
        accessory_idx = [i for i, e in enumerate(fitted) if not e.is_compound]
        if not accessory_idx:
            break
        fitted.pop(accessory_idx[-1])
    return fitted


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def build_projection(
    weeks: tuple[GeneratedWeek, ...],
    experience: Experience,
    duration_weeks: int,
    lift_records: Iterable[LiftRecord] = (),
) -> ProgressProjection:
    return ProgressProjection(
        main_lifts=tuple(
            project_lift(r.exercise_name, r.e1rm, experience, duration_weeks)
            for r in lift_records
        ),
        volume_progression=tuple(w.total_volume for w in weeks),
        intensity_progression=weekly_means(
            [(w.intensity_range.min, w.intensity_range.max) for w in weeks]
        ),
    )


def assemble_block(
    config: BlockConfig,
    *,
    name: str | None = None,
    lift_records: Iterable[LiftRecord] = (),
) -> GeneratedBlock:
    """Generate a complete periodized training block.

    Args:
        config: The block request.
        name: Optional block name; defaults to "{weeks}-Week {Goal} Block".
        lift_records: Best known e1RMs for main lifts, used for projections.

    Returns:
        GeneratedBlock with one GeneratedWeek per template phase week.

    Raises:
        ConfigurationError: If the catalog cannot serve the goal.
    """
    template = select_periodization_template(config)
    split = select_training_split(config)

    weeks: list[GeneratedWeek] = []
    for phase in template.phases:
        for week_in_phase in range(1, phase.weeks + 1):
            overload = calculate_progressive_overload(week_in_phase, config.experience)
            week_phase = apply_overload(phase, overload)

            workouts = []
            for day in split.days:
                exercises = build_exercises_for_day(day, week_phase, config, week_in_phase)
                exercises = fit_to_session(exercises, config.session_minutes)
                workouts.append(GeneratedWorkout(
                    day_number=day.day_number,
                    name=day.name,
                    focus=day.focus,
                    exercises=tuple(exercises),
                    estimated_duration=estimate_workout_duration(exercises),
                ))

            weeks.append(GeneratedWeek(
                week_number=len(weeks) + 1,
                phase=phase.phase,
                week_in_phase=week_in_phase,
                theme=generate_week_theme(phase.phase, week_in_phase, phase.weeks),
                workouts=tuple(workouts),
                total_volume=sum(w.working_set_count for w in workouts),
                intensity_range=phase.rpe_range,
            ))

    logger.info(
        "Assembled %d-week block from template=%s split=%s",
        len(weeks), template.id, split.id,
    )

    weeks_t = tuple(weeks)
    return GeneratedBlock(
        name=name or generate_block_name(config),
        description=template.description,
        goal=config.goal,
        duration_weeks=config.duration_weeks,
        phase=config.phase or template.phases[0].phase,
        template_id=template.id,
        split_id=split.id,
        weeks=weeks_t,
        projected_progress=build_projection(
            weeks_t, config.experience, config.duration_weeks, lift_records,
        ),
    )


def get_block_difficulty(block: GeneratedBlock) -> BlockDifficulty:
    """Rate a block 1-5 from its average RPE midpoint and weekly set volume."""
    n = len(block.weeks)
    avg_intensity = sum(w.intensity_range.midpoint for w in block.weeks) / n
    avg_volume = sum(w.total_volume for w in block.weeks) / n
    score = (avg_intensity - 6) * 2 + avg_volume / 30

    for bound, rating, label in _DIFFICULTY_BANDS:
        if score < bound:
            return BlockDifficulty(rating=rating, label=label)
    return BlockDifficulty(rating=5, label="Brutal")
