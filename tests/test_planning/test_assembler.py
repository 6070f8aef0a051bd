"""Tests for block assembly: week structure, exercise selection, projections."""

from __future__ import annotations

from dataclasses import replace

import pytest

from program_engine.models.enums import TrainingGoal, TrainingPhase
from program_engine.models.history import LiftRecord
from program_engine.planning.assembler import (
    assemble_block,
    estimate_workout_duration,
    generate_week_theme,
    get_block_difficulty,
)


@pytest.fixture
def strength_block(strength_config):
    return assemble_block(strength_config)


def _workout(block, week_number: int, name: str):
    week = block.weeks[week_number - 1]
    return next(w for w in week.workouts if w.name == name)


class TestBlockStructure:
    def test_scenario_strength_block(self, strength_block) -> None:
        assert strength_block.name == "6-Week Strength Block"
        assert strength_block.template_id == "strength-6week"
        assert strength_block.split_id == "upper-lower-4"
        assert strength_block.total_weeks == 6
        assert [len(w.workouts) for w in strength_block.weeks] == [4] * 6

    def test_phase_sequence(self, strength_block) -> None:
        assert [w.phase for w in strength_block.weeks] == [
            TrainingPhase.ACCUMULATION,
            TrainingPhase.ACCUMULATION,
            TrainingPhase.ACCUMULATION,
            TrainingPhase.INTENSIFICATION,
            TrainingPhase.INTENSIFICATION,
            TrainingPhase.DELOAD,
        ]
        assert [w.week_in_phase for w in strength_block.weeks] == [1, 2, 3, 1, 2, 1]

    def test_week_themes(self, strength_block) -> None:
        assert [w.theme for w in strength_block.weeks] == [
            "Volume Foundation",
            "Volume Building",
            "Volume Peak",
            "Intensity Introduction",
            "Intensity Peak",
            "Recovery & Adaptation",
        ]

    def test_block_phase_defaults_to_first_template_phase(self, strength_block) -> None:
        assert strength_block.phase == TrainingPhase.ACCUMULATION

    def test_name_override(self, strength_config) -> None:
        assert assemble_block(strength_config, name="Spring Block").name == "Spring Block"

    def test_week_numbers_sequential(self, strength_block) -> None:
        assert [w.week_number for w in strength_block.weeks] == [1, 2, 3, 4, 5, 6]


class TestBlockInvariants:
    def test_working_sets_in_bounds(self, strength_block) -> None:
        for week in strength_block.weeks:
            for workout in week.workouts:
                for exercise in workout.exercises:
                    assert 2 <= len(exercise.working_sets) <= 6

    def test_rpe_within_week_range(self, strength_block) -> None:
        for week in strength_block.weeks:
            for workout in week.workouts:
                for exercise in workout.exercises:
                    for s in exercise.working_sets:
                        assert week.intensity_range.min <= s.target_rpe <= week.intensity_range.max

    def test_warmups_precede_working_sets(self, strength_block) -> None:
        for workout in strength_block.weeks[0].workouts:
            for exercise in workout.exercises:
                flags = [s.is_warmup for s in exercise.sets]
                assert flags == sorted(flags, reverse=True)

    def test_no_duplicate_exercises_in_a_workout(self, strength_block) -> None:
        for week in strength_block.weeks:
            for workout in week.workouts:
                names = [e.exercise_name for e in workout.exercises]
                assert len(names) == len(set(names))

    def test_total_volume_counts_working_sets(self, strength_block) -> None:
        assert [w.total_volume for w in strength_block.weeks] == [72, 72, 72, 60, 60, 40]

    def test_deterministic(self, strength_config) -> None:
        assert assemble_block(strength_config) == assemble_block(strength_config)


class TestExerciseSelection:
    def test_primaries_then_uncovered_accessories(self, strength_block) -> None:
        upper_a = _workout(strength_block, 1, "Upper A")
        assert [e.exercise_name for e in upper_a.exercises] == [
            "Barbell Bench Press",
            "Barbell Row",
            "Overhead Press",
            "Tricep Pushdown",
            "Cable Fly",
        ]
        assert [e.is_compound for e in upper_a.exercises] == [True, True, True, False, False]

    def test_exercise_ids_are_slugs(self, strength_block) -> None:
        upper_a = _workout(strength_block, 1, "Upper A")
        assert upper_a.exercises[0].exercise_id == "barbell-bench-press"

    def test_alternatives_exclude_chosen(self, strength_block) -> None:
        bench = _workout(strength_block, 1, "Upper A").exercises[0]
        assert bench.exercise_name not in bench.alternatives
        assert len(bench.alternatives) <= 3

    def test_focus_lift_replaces_default(self, strength_config) -> None:
        config = replace(strength_config, focus_lifts=("Barbell Front Squat",))
        lower_a = _workout(assemble_block(config), 1, "Lower A")
        squat = lower_a.exercises[0]
        assert squat.exercise_name == "Barbell Front Squat"
        assert squat.notes == "Focus lift"

    def test_equipment_filter(self, strength_config) -> None:
        config = replace(strength_config, equipment=("dumbbell", "bench"))
        lower_a = _workout(assemble_block(config), 1, "Lower A")
        assert lower_a.exercises[0].exercise_name == "Goblet Squat"

    def test_primary_slot_never_empty(self, strength_config) -> None:
        config = replace(strength_config, equipment=())
        block = assemble_block(config)
        for workout in block.weeks[0].workouts:
            assert any(e.is_compound for e in workout.exercises)


class TestSessionLength:
    def test_duration_estimate(self, strength_block) -> None:
        # 5 warmup + 3 compounds at 15 min + 2 accessories at 9 min
        assert _workout(strength_block, 1, "Upper A").estimated_duration == 68

    def test_empty_session_is_general_warmup_only(self) -> None:
        assert estimate_workout_duration([]) == 5

    def test_session_limit_drops_last_accessory(self, strength_config) -> None:
        config = replace(strength_config, session_minutes=60)
        upper_a = _workout(assemble_block(config), 1, "Upper A")
        assert [e.exercise_name for e in upper_a.exercises][-1] == "Tricep Pushdown"
        assert upper_a.estimated_duration <= 60

    def test_primaries_kept_when_over_limit(self, strength_config) -> None:
        config = replace(strength_config, session_minutes=30)
        upper_a = _workout(assemble_block(config), 1, "Upper A")
        assert len(upper_a.exercises) == 3
        assert all(e.is_compound for e in upper_a.exercises)


class TestWeekTheme:
    def test_single_week_phase_gets_opening_theme(self) -> None:
        assert generate_week_theme(TrainingPhase.INTENSIFICATION, 1, 1) == "Intensity Introduction"

    def test_realization_themes(self) -> None:
        themes = [generate_week_theme(TrainingPhase.REALIZATION, w, 3) for w in (1, 2, 3)]
        assert themes == ["Peak Preparation", "Peak Performance", "Test Week"]

    def test_maintenance(self) -> None:
        assert generate_week_theme(TrainingPhase.MAINTENANCE, 2, 4) == "Maintaining Gains"


class TestProjection:
    def test_squat_projection(self, strength_config) -> None:
        block = assemble_block(
            strength_config, lift_records=[LiftRecord("Barbell Back Squat", 300)],
        )
        (squat,) = block.projected_progress.main_lifts
        assert squat.projected_e1rm == 318.0
        assert squat.percent_increase == 6
        assert squat.trajectory[0] == 303.0
        assert len(squat.trajectory) == 6

    def test_progressions_have_one_entry_per_week(self, strength_block) -> None:
        progress = strength_block.projected_progress
        assert progress.volume_progression == (72, 72, 72, 60, 60, 40)
        assert progress.intensity_progression == (7.5, 7.5, 7.5, 8.5, 8.5, 6.5)


class TestBlockDifficulty:
    def test_strength_block_is_challenging(self, strength_block) -> None:
        difficulty = get_block_difficulty(strength_block)
        assert (difficulty.rating, difficulty.label) == (3, "Challenging")

    def test_rating_in_range_for_every_goal(self, strength_config) -> None:
        for goal in TrainingGoal:
            block = assemble_block(replace(strength_config, goal=goal))
            assert 1 <= get_block_difficulty(block).rating <= 5
