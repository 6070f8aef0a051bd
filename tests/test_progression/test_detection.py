"""Tests for classifying a set against the previous comparable set."""

from __future__ import annotations

from program_engine.models.enums import ProgressionEvent
from program_engine.models.history import LoggedSet
from program_engine.progression.detection import detect_progression, find_best_previous_set


def _set(weight, reps, rpe=None, *, set_order=1, is_warmup=False) -> LoggedSet:
    return LoggedSet(
        "bench", "Bench Press", "Chest", weight, reps, rpe,
        is_warmup=is_warmup, set_order=set_order,
    )


class TestDetectProgression:
    def test_weight_increase(self) -> None:
        result = detect_progression(_set(205, 5, 8.0), _set(200, 5, 8.0))
        assert result.event == ProgressionEvent.WEIGHT_INCREASE
        assert result.message == "+5 lb"
        assert result.delta == 5

    def test_fractional_weight_increase(self) -> None:
        result = detect_progression(_set(202.5, 5), _set(200, 5))
        assert result.message == "+2.5 lb"

    def test_rep_increase(self) -> None:
        assert detect_progression(_set(200, 7), _set(200, 5)).message == "+2 reps"
        assert detect_progression(_set(200, 6), _set(200, 5)).message == "+1 rep"

    def test_volume_increase(self) -> None:
        result = detect_progression(_set(190, 6), _set(200, 5))
        assert result.event == ProgressionEvent.VOLUME_INCREASE
        assert result.message == "+14% volume"
        assert result.delta == 140

    def test_e1rm_increase(self) -> None:
        # 980 < 1000 volume, but 173 vs 133 estimated max
        result = detect_progression(_set(140, 7), _set(100, 10))
        assert result.event == ProgressionEvent.E1RM_INCREASE
        assert result.message == "+40 lb E1RM"

    def test_rpe_decrease(self) -> None:
        result = detect_progression(_set(200, 5, 8.0), _set(200, 5, 9.0))
        assert result.event == ProgressionEvent.RPE_DECREASE
        assert result.message == "RPE 9 → 8"
        assert result.delta == 1.0

    def test_missing_rpe_counts_as_ten(self) -> None:
        result = detect_progression(_set(200, 5, 9.0), _set(200, 5))
        assert result.event == ProgressionEvent.RPE_DECREASE

    def test_matched(self) -> None:
        result = detect_progression(_set(200, 5, 8.5), _set(200, 5, 8.0))
        assert result.event == ProgressionEvent.MATCHED
        assert result.message == "Stimulus matched, not progressed"

    def test_harder_same_set_is_matched(self) -> None:
        assert detect_progression(_set(200, 5, 9.5), _set(200, 5, 8.0)).event == ProgressionEvent.MATCHED

    def test_regressed(self) -> None:
        result = detect_progression(_set(190, 4, 8.0), _set(200, 5, 8.0))
        assert result.event == ProgressionEvent.REGRESSED
        assert result.message == "Regressed: -10 lb, 1 rep"
        assert result.reason == "10 lb, 1 rep"

    def test_not_comparable(self) -> None:
        assert detect_progression(_set(200, 5), None) is None
        assert detect_progression(_set(95, 10, is_warmup=True), _set(200, 5)) is None
        assert detect_progression(_set(None, 5), _set(200, 5)) is None


class TestFindBestPreviousSet:
    def test_same_set_order(self) -> None:
        previous = [_set(200, 5, set_order=1), _set(205, 5, set_order=2)]
        assert find_best_previous_set(_set(210, 5, set_order=2), previous).weight == 205

    def test_falls_back_to_first_working_set(self) -> None:
        previous = [_set(95, 10, set_order=1, is_warmup=True), _set(200, 5, set_order=2)]
        assert find_best_previous_set(_set(210, 5, set_order=5), previous).weight == 200

    def test_no_working_sets(self) -> None:
        assert find_best_previous_set(_set(200, 5), [_set(95, 10, is_warmup=True)]) is None
