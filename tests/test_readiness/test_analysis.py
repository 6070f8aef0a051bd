"""Tests for readiness scoring and level suggestion."""

from __future__ import annotations

from datetime import date

import pytest

from program_engine.exceptions import InvalidConfigError
from program_engine.models.enums import Impact, ReadinessAdjustment
from program_engine.models.readiness import ReadinessCheckIn
from program_engine.readiness.analysis import (
    analyze_check_in,
    analyze_readiness,
    readiness_score,
    suggestion_for_score,
)


class TestReadinessScore:
    def test_bounds(self) -> None:
        assert readiness_score(5, 1, 1) == 100
        assert readiness_score(1, 5, 5) == 20

    def test_weighting(self) -> None:
        # sleep 2 → 16, soreness 4 → 12, stress 3 → 18
        assert readiness_score(2, 4, 3) == 46

    @pytest.mark.parametrize(
        "score,expected",
        [
            (100, ReadinessAdjustment.FULL),
            (80, ReadinessAdjustment.FULL),
            (79, ReadinessAdjustment.MODERATE),
            (60, ReadinessAdjustment.MODERATE),
            (59, ReadinessAdjustment.LIGHT),
            (40, ReadinessAdjustment.LIGHT),
            (39, ReadinessAdjustment.REST),
            (20, ReadinessAdjustment.REST),
        ],
    )
    def test_thresholds(self, score: int, expected: ReadinessAdjustment) -> None:
        assert suggestion_for_score(score) == expected


class TestAnalyzeReadiness:
    def test_great_day(self) -> None:
        analysis = analyze_readiness(5, 1, 1)
        assert analysis.suggestion == ReadinessAdjustment.FULL
        assert analysis.details.sleep_impact == Impact.POSITIVE
        assert analysis.details.soreness_impact == Impact.POSITIVE
        assert "Great day to attempt PRs or push intensity." in analysis.recommendations

    def test_rough_day(self) -> None:
        analysis = analyze_readiness(2, 4, 3)
        assert analysis.score == 46
        assert analysis.suggestion == ReadinessAdjustment.LIGHT
        assert analysis.details.sleep_impact == Impact.NEGATIVE
        assert analysis.details.soreness_impact == Impact.NEGATIVE
        assert analysis.details.stress_impact == Impact.NEUTRAL
        assert len(analysis.recommendations) == 2

    def test_rest_day_recommends_recovery(self) -> None:
        analysis = analyze_readiness(1, 5, 5)
        assert analysis.suggestion == ReadinessAdjustment.REST
        assert analysis.recommendations[-1] == "Focus on mobility, light cardio, or complete rest."

    @pytest.mark.parametrize("sleep,soreness,stress", [(0, 3, 3), (3, 6, 3), (3, 3, -1)])
    def test_out_of_range_raises(self, sleep: int, soreness: int, stress: int) -> None:
        with pytest.raises(InvalidConfigError):
            analyze_readiness(sleep, soreness, stress)

    def test_error_names_the_field(self) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            analyze_readiness(3, 7, 3)
        assert exc_info.value.field == "muscle_soreness"


class TestAnalyzeCheckIn:
    def test_recomputes_when_nothing_stored(self) -> None:
        check_in = ReadinessCheckIn(date(2024, 6, 10), 3, 3, 3)
        assert analyze_check_in(check_in) == analyze_readiness(3, 3, 3)

    def test_stored_values_win(self) -> None:
        check_in = ReadinessCheckIn(
            date(2024, 6, 10), 4, 2, 2,
            readiness_score=55, suggested_adjustment=ReadinessAdjustment.LIGHT,
        )
        analysis = analyze_check_in(check_in)
        assert analysis.score == 55
        assert analysis.suggestion == ReadinessAdjustment.LIGHT
