"""Tests for split and periodization template selection."""

from __future__ import annotations

import pytest

from program_engine.exceptions import ConfigurationError
from program_engine.models.block import BlockConfig
from program_engine.models.enums import Experience, TrainingGoal
from program_engine.planning.selectors import (
    select_periodization_template,
    select_training_split,
)


def _config(**overrides) -> BlockConfig:
    fields = dict(
        goal=TrainingGoal.STRENGTH,
        duration_weeks=6,
        days_per_week=4,
        experience=Experience.INTERMEDIATE,
    )
    fields.update(overrides)
    return BlockConfig(**fields)


class TestSelectTrainingSplit:
    def test_exact_day_match(self, strength_config) -> None:
        assert select_training_split(strength_config).id == "upper-lower-4"

    def test_catalog_order_breaks_exact_ties(self) -> None:
        # full-body-3 and upper-lower-3 both suit strength at 3 days
        assert select_training_split(_config(days_per_week=3)).id == "full-body-3"

    def test_nearest_day_count_fallback(self) -> None:
        split = select_training_split(_config(goal=TrainingGoal.HYPERTROPHY, days_per_week=5))
        assert split.id == "upper-lower-4"

    def test_fallback_prefers_catalog_order_on_equal_distance(self) -> None:
        # Bodybuilding only has push-pull-legs-6
        split = select_training_split(_config(goal=TrainingGoal.BODYBUILDING, days_per_week=2))
        assert split.id == "push-pull-legs-6"

    def test_selected_split_suits_goal(self) -> None:
        for goal in TrainingGoal:
            for days in range(1, 8):
                split = select_training_split(_config(goal=goal, days_per_week=days))
                assert goal in split.suitable_for


class TestSelectPeriodizationTemplate:
    def test_scenario_strength_six_weeks(self, strength_config) -> None:
        assert select_periodization_template(strength_config).id == "strength-6week"

    def test_duration_mismatch_falls_back_to_first_compatible(self) -> None:
        template = select_periodization_template(_config(duration_weeks=10))
        assert template.id == "strength-6week"

    def test_no_experience_match_uses_first_for_goal(self) -> None:
        template = select_periodization_template(
            _config(goal=TrainingGoal.POWERLIFTING, experience=Experience.BEGINNER, duration_weeks=12)
        )
        assert template.id == "powerlifting-12week"

    def test_general_beginner(self) -> None:
        template = select_periodization_template(
            _config(goal=TrainingGoal.GENERAL, experience=Experience.BEGINNER, duration_weeks=4)
        )
        assert template.id == "beginner-4week"

    def test_exact_match_sums_to_requested_weeks(self) -> None:
        for goal, weeks in [
            (TrainingGoal.STRENGTH, 6),
            (TrainingGoal.HYPERTROPHY, 8),
            (TrainingGoal.POWERLIFTING, 12),
            (TrainingGoal.BODYBUILDING, 8),
            (TrainingGoal.ATHLETIC, 4),
        ]:
            template = select_periodization_template(_config(goal=goal, duration_weeks=weeks))
            assert sum(p.weeks for p in template.phases) == weeks


class TestEmptyCatalog:
    def test_no_split_for_goal(self, monkeypatch, strength_config) -> None:
        monkeypatch.setattr("program_engine.planning.selectors.splits_for_goal", lambda goal: ())
        with pytest.raises(ConfigurationError, match="No training split defined for goal strength"):
            select_training_split(strength_config)

    def test_no_template_for_goal(self, monkeypatch, strength_config) -> None:
        monkeypatch.setattr("program_engine.planning.selectors.templates_for_goal", lambda goal: ())
        with pytest.raises(ConfigurationError, match="No periodization template defined"):
            select_periodization_template(strength_config)
