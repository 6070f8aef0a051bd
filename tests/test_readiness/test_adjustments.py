"""Tests for readiness-driven session adjustments."""

from __future__ import annotations

import pytest

from program_engine.models.enums import ChangeType, ReadinessAdjustment
from program_engine.models.readiness import PlannedSet
from program_engine.readiness.adjustments import (
    SLEEP_NOTE,
    SORENESS_NOTE,
    adjust_session,
    apply_adjustments_to_sets,
    base_modifiers,
    calculate_adjusted_volume,
    generate_readiness_adjustments,
    summarize_adjustments,
    with_skips,
)
from program_engine.readiness.analysis import analyze_readiness

_LEVELS = [
    ReadinessAdjustment.FULL,
    ReadinessAdjustment.MODERATE,
    ReadinessAdjustment.LIGHT,
    ReadinessAdjustment.REST,
]


@pytest.fixture
def light_adjustments():
    analysis = analyze_readiness(2, 4, 3)
    return generate_readiness_adjustments(analysis, analysis.suggestion)


class TestModifiers:
    def test_severity_never_adds_work(self) -> None:
        mods = [base_modifiers(level) for level in _LEVELS]
        for easier, harder in zip(mods, mods[1:]):
            assert harder.intensity <= easier.intensity
            assert harder.volume <= easier.volume
            assert harder.rpe_adjustment <= easier.rpe_adjustment
            assert harder.rest >= easier.rest

    def test_full_is_identity(self) -> None:
        adjustments = generate_readiness_adjustments(analyze_readiness(5, 1, 1), ReadinessAdjustment.FULL)
        assert adjustments.intensity_modifier == 1.0
        assert adjustments.volume_modifier == 1.0
        assert adjustments.details.changes == ()

    def test_light_level(self, light_adjustments) -> None:
        assert light_adjustments.level == ReadinessAdjustment.LIGHT
        assert light_adjustments.intensity_modifier == 0.85
        assert light_adjustments.rpe_adjustment == -1.0
        assert light_adjustments.rest_modifier == 1.25
        assert light_adjustments.exercise_swaps == ()

    def test_message_is_deterministic(self, light_adjustments) -> None:
        # score 46 picks the second LIGHT variant
        assert light_adjustments.message == "Dialing it back to protect your gains."

    def test_soreness_and_sleep_notes(self, light_adjustments) -> None:
        reasons = [c.reason for c in light_adjustments.details.changes]
        assert SORENESS_NOTE in reasons
        assert SLEEP_NOTE in reasons
        soreness = next(c for c in light_adjustments.details.changes if c.reason == SORENESS_NOTE)
        assert soreness.change_type == ChangeType.EXERCISE

    def test_poor_sleep_caps_intensity(self) -> None:
        analysis = analyze_readiness(2, 1, 1)
        adjustments = generate_readiness_adjustments(analysis, ReadinessAdjustment.FULL)
        assert adjustments.intensity_modifier == 0.9

    def test_user_can_override_level(self) -> None:
        analysis = analyze_readiness(5, 1, 1)
        adjustments = generate_readiness_adjustments(analysis, ReadinessAdjustment.REST)
        assert adjustments.volume_modifier == 0.5


class TestApplyToSets:
    def test_scenario_light_working_sets(self, planned_session, light_adjustments) -> None:
        adjusted = apply_adjustments_to_sets(planned_session, light_adjustments)
        bench = adjusted[2]
        assert bench.target_load == 170
        assert bench.target_rpe == 7.0
        assert bench.rest_seconds == 225
        assert bench.is_adjusted
        assert bench.original_load == 200

    def test_warmups_untouched(self, planned_session, light_adjustments) -> None:
        adjusted = apply_adjustments_to_sets(planned_session, light_adjustments)
        for a in adjusted[:2]:
            assert not a.is_adjusted
            assert a.target_load == a.original_load
            assert a.rest_seconds == a.planned.rest_seconds

    def test_rpe_clamped_to_floor(self) -> None:
        analysis = analyze_readiness(1, 5, 5)
        adjustments = generate_readiness_adjustments(analysis, ReadinessAdjustment.REST)
        (adjusted,) = apply_adjustments_to_sets(
            [PlannedSet("plank", 1, None, 1, 6.0, False, 60)], adjustments,
        )
        assert adjusted.target_rpe == 5.0
        assert adjusted.target_load is None

    def test_skipped_exercise_flagged(self, planned_session, light_adjustments) -> None:
        adjustments = with_skips(light_adjustments, ["barbell-curl"])
        adjusted = apply_adjustments_to_sets(planned_session, adjustments)
        curls = [a for a in adjusted if a.exercise_id == "barbell-curl"]
        assert all(a.is_skipped and not a.is_adjusted for a in curls)
        assert curls[0].target_load == 60


class TestVolume:
    def test_light_trims_three_sets_to_two(self, planned_session) -> None:
        kept = calculate_adjusted_volume(planned_session, 0.7)
        assert [s.set_order for s in kept] == [1, 2, 3, 4, 6, 7]

    def test_keeps_at_least_one_working_set(self, planned_session) -> None:
        kept = calculate_adjusted_volume(planned_session, 0.1)
        working = [s for s in kept if not s.is_warmup]
        assert [s.set_order for s in working] == [3, 6]

    def test_full_volume_unchanged(self, planned_session) -> None:
        assert calculate_adjusted_volume(planned_session, 1.0) == planned_session

    def test_adjust_session_combines_both(self, planned_session, light_adjustments) -> None:
        adjusted = adjust_session(planned_session, light_adjustments)
        assert len(adjusted) == 6
        assert [a.target_load for a in adjusted] == [95, 135, 170, 170, 51, 51]


class TestSummary:
    def test_light_summary(self, light_adjustments) -> None:
        summary = summarize_adjustments(light_adjustments)
        assert summary.has_adjustments
        assert summary.adjustment_level == ReadinessAdjustment.LIGHT
        assert summary.intensity_change == "85%"
        assert summary.volume_change == "70%"
        assert summary.key_changes == (
            "Intensity at 85%",
            "Volume reduced to 70%",
            "Target RPE adjusted by -1",
        )

    def test_full_summary(self) -> None:
        adjustments = generate_readiness_adjustments(analyze_readiness(5, 1, 1), ReadinessAdjustment.FULL)
        summary = summarize_adjustments(adjustments)
        assert not summary.has_adjustments
        assert summary.intensity_change == "Normal"
        assert summary.key_changes == ()

    def test_summary_keeps_accepted_level(self) -> None:
        # Poor sleep caps a full day at 90% intensity without changing its level
        adjustments = generate_readiness_adjustments(analyze_readiness(2, 1, 1), ReadinessAdjustment.FULL)
        summary = summarize_adjustments(adjustments)
        assert summary.adjustment_level == ReadinessAdjustment.FULL
        assert summary.intensity_change == "90%"

    def test_skips_counted(self, light_adjustments) -> None:
        summary = summarize_adjustments(with_skips(light_adjustments, ["a", "b", "a"]))
        assert summary.key_changes[-1] == "Skipping 2 exercises"
