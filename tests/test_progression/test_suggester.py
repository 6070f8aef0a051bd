"""Tests for the next-session progression suggester."""

from __future__ import annotations

import pytest

from program_engine.models.enums import ProgressionType, RecoveryStatus, TrainingPhase
from program_engine.models.history import LoggedSet
from program_engine.progression.suggester import (
    last_working_set,
    load_increment,
    suggest_progression,
)


def _set(weight=None, reps=None, rpe=None, is_warmup=False) -> LoggedSet:
    return LoggedSet("back-squat", "Back Squat", "Legs", weight, reps, rpe, is_warmup)


class TestLoadIncrement:
    @pytest.mark.parametrize("weight,expected", [(135, 5), (200, 5), (225, 6), (250, 6), (400, 10)])
    def test_increment(self, weight: float, expected: int) -> None:
        assert load_increment(weight) == expected


class TestLastWorkingSet:
    def test_skips_warmups_and_empty_sets(self) -> None:
        history = [_set(95, 10, is_warmup=True), _set(None, 5), _set(225, 5, 8.0)]
        assert last_working_set(history).weight == 225

    def test_none_when_nothing_usable(self) -> None:
        assert last_working_set([_set(95, 10, is_warmup=True), _set(0, 5)]) is None


class TestSuggestProgression:
    def test_scenario_high_rpe_holds(self) -> None:
        suggestion = suggest_progression([_set(225, 5, 9.0)])
        assert suggestion.progression_type == ProgressionType.MAINTAIN
        assert suggestion.message == "Maintain (high RPE last session)"
        assert suggestion.target_weight == 225

    def test_moderate_rpe_adds_load(self) -> None:
        suggestion = suggest_progression([_set(225, 5, 8.0)])
        assert suggestion.progression_type == ProgressionType.WEIGHT
        assert suggestion.message == "+6 lb"
        assert suggestion.target_weight == 231
        assert suggestion.target_rpe == 8.5

    def test_low_rpe_adds_rep(self) -> None:
        suggestion = suggest_progression([_set(135, 8, 6.0)])
        assert suggestion.progression_type == ProgressionType.REPS
        assert suggestion.message == "+1 rep (135 lb)"
        assert (suggestion.target_weight, suggestion.target_reps, suggestion.target_rpe) == (135, 9, 6.5)

    def test_low_rpe_high_reps_adds_load(self) -> None:
        suggestion = suggest_progression([_set(100, 15, 6.0)])
        assert suggestion.progression_type == ProgressionType.WEIGHT
        assert suggestion.target_weight == 105
        assert suggestion.target_rpe == 6.0

    def test_rpe_between_load_band_and_hold(self) -> None:
        suggestion = suggest_progression([_set(185, 5, 8.7)])
        assert suggestion.progression_type == ProgressionType.WEIGHT
        assert suggestion.target_weight == 190

    def test_missing_rpe_defaults_to_eight(self) -> None:
        suggestion = suggest_progression([_set(185, 5)])
        assert suggestion.progression_type == ProgressionType.WEIGHT
        assert suggestion.target_rpe == 8.5

    def test_poor_recovery_wins(self) -> None:
        suggestion = suggest_progression(
            [_set(200, 5, 6.0)], TrainingPhase.DELOAD, RecoveryStatus.POOR,
        )
        assert suggestion.progression_type == ProgressionType.DELOAD
        assert suggestion.message == "Hold or reduce (poor recovery)"
        assert suggestion.target_weight == pytest.approx(180)
        assert suggestion.target_rpe == 6.0

    def test_deload_phase(self) -> None:
        suggestion = suggest_progression([_set(200, 5, 8.0)], TrainingPhase.DELOAD)
        assert suggestion.message == "Deload: -20% volume"
        assert suggestion.target_weight == pytest.approx(160)
        assert suggestion.target_rpe == 7.0

    def test_maintenance_phase(self) -> None:
        suggestion = suggest_progression([_set(200, 5, 6.0)], TrainingPhase.MAINTENANCE)
        assert suggestion.progression_type == ProgressionType.MAINTAIN
        assert (suggestion.target_weight, suggestion.target_reps) == (200, 5)

    def test_other_phases_build(self) -> None:
        suggestion = suggest_progression([_set(200, 5, 8.0)], TrainingPhase.ACCUMULATION)
        assert suggestion.progression_type == ProgressionType.WEIGHT

    def test_moderate_recovery_builds(self) -> None:
        suggestion = suggest_progression([_set(200, 5, 8.0)], recovery_status=RecoveryStatus.MODERATE)
        assert suggestion.progression_type == ProgressionType.WEIGHT

    def test_no_history(self) -> None:
        assert suggest_progression([]) is None
        assert suggest_progression([_set(95, 10, is_warmup=True)]) is None
