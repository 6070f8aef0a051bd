"""Tests for the template catalog: integrity of the static reference data."""

from __future__ import annotations

import pytest

from program_engine.catalog import (
    ACCESSORY_EXERCISES,
    BLOCK_CHARACTERISTICS,
    MOVEMENT_PATTERN_EXERCISES,
    PERIODIZATION_TEMPLATES,
    PHASE_SEQUENCES,
    PHASE_TO_BLOCK,
    TRAINING_SPLITS,
    exercise_slug,
    get_split,
    get_template,
    is_available,
    splits_for_goal,
    templates_for_goal,
)
from program_engine.exceptions import ConfigurationError
from program_engine.models.enums import BlockType, MovementPattern, TrainingGoal, TrainingPhase


class TestPeriodizationTemplates:
    def test_phase_weeks_sum_to_duration(self) -> None:
        for template in PERIODIZATION_TEMPLATES:
            assert template.total_phase_weeks == template.duration_weeks, template.id

    def test_every_goal_has_a_template(self) -> None:
        for goal in TrainingGoal:
            assert templates_for_goal(goal), goal

    def test_template_ids_are_unique(self) -> None:
        ids = [t.id for t in PERIODIZATION_TEMPLATES]
        assert len(ids) == len(set(ids))

    def test_strength_template_shape(self) -> None:
        template = get_template("strength-6week")
        assert [p.phase for p in template.phases] == [
            TrainingPhase.ACCUMULATION,
            TrainingPhase.INTENSIFICATION,
            TrainingPhase.DELOAD,
        ]
        assert [p.weeks for p in template.phases] == [3, 2, 1]

    def test_unknown_template_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            get_template("does-not-exist")


class TestTrainingSplits:
    def test_day_counts_match(self) -> None:
        for split in TRAINING_SPLITS:
            assert len(split.days) == split.days_per_week

    def test_every_goal_has_a_split(self) -> None:
        for goal in TrainingGoal:
            assert splits_for_goal(goal), goal

    def test_day_numbers_are_sequential(self) -> None:
        for split in TRAINING_SPLITS:
            assert [d.day_number for d in split.days] == list(range(1, split.days_per_week + 1))

    def test_unknown_split_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            get_split("bro-split-9")

    def test_catalog_is_immutable(self) -> None:
        with pytest.raises(TypeError):
            MOVEMENT_PATTERN_EXERCISES[MovementPattern.SQUAT] = None  # type: ignore[index]


class TestExercises:
    def test_every_pattern_has_exercises(self) -> None:
        for pattern in MovementPattern:
            assert MOVEMENT_PATTERN_EXERCISES[pattern].preferred

    def test_split_muscle_groups_have_accessories(self) -> None:
        for split in TRAINING_SPLITS:
            for day in split.days:
                for muscle in day.muscle_groups:
                    assert muscle in ACCESSORY_EXERCISES, (split.id, muscle)

    def test_slug(self) -> None:
        assert exercise_slug("Barbell Back Squat") == "barbell-back-squat"
        assert exercise_slug("Farmer's Walk") == "farmers-walk"
        assert exercise_slug("T-Bar Row") == "t-bar-row"

    def test_full_gym_has_everything(self) -> None:
        assert is_available("Barbell Back Squat", None)

    def test_equipment_filter(self) -> None:
        assert not is_available("Barbell Back Squat", ("dumbbell",))
        assert is_available("Goblet Squat", ("Dumbbell",))
        assert is_available("Plank", ())


class TestBlockTables:
    def test_characteristics_cover_every_block_type(self) -> None:
        assert set(BLOCK_CHARACTERISTICS) == set(BlockType)

    def test_sequences_cover_every_goal(self) -> None:
        assert set(PHASE_SEQUENCES) == set(TrainingGoal)

    def test_every_phase_maps_to_a_block(self) -> None:
        assert set(PHASE_TO_BLOCK) == set(TrainingPhase)
