"""Tests for camelCase JSON serialization of engine outputs."""

from __future__ import annotations

import json
from datetime import date

from program_engine.models.enums import (
    BlockType,
    Experience,
    LoadLevel,
    ProgressionEvent,
    ProgressionType,
    ReadinessAdjustment,
    RotationConfidence,
)
from program_engine.models.history import LiftRecord
from program_engine.models.journey import JourneyScores
from program_engine.models.progression import ProgressionResult, ProgressionSuggestion
from program_engine.models.recommendation import BlockRecommendation
from program_engine.models.rotation import (
    ExerciseSummary,
    LastSessionSummary,
    ReadinessContext,
    RotationSuggestion,
)
from program_engine.planning.assembler import assemble_block
from program_engine.readiness.adjustments import (
    adjust_session,
    generate_readiness_adjustments,
    summarize_adjustments,
)
from program_engine.readiness.analysis import analyze_readiness
from program_engine.serialization.wire import (
    adjusted_sets_to_dict,
    adjustments_to_dict,
    analysis_to_dict,
    block_to_dict,
    block_to_json,
    enum_value,
    progression_result_to_dict,
    progression_to_dict,
    recommendations_to_dict,
    scores_to_dict,
    suggestion_to_dict,
    summary_to_dict,
    to_json_string,
)


class TestEnumValue:
    def test_lower_case_name(self) -> None:
        assert enum_value(Experience.INTERMEDIATE) == "intermediate"
        assert enum_value(None) is None


class TestBlockToDict:
    def test_top_level_keys(self, strength_config) -> None:
        data = block_to_dict(assemble_block(strength_config))
        assert data["goal"] == "strength"
        assert data["durationWeeks"] == 6
        assert data["phase"] == "accumulation"
        assert data["templateId"] == "strength-6week"
        assert len(data["weeks"]) == 6

    def test_nested_tree(self, strength_config) -> None:
        data = block_to_dict(assemble_block(strength_config))
        week = data["weeks"][0]
        assert week["theme"] == "Volume Foundation"
        assert week["intensityRange"] == {"min": 7, "max": 8}
        exercise = week["workouts"][0]["exercises"][0]
        assert exercise["exerciseId"] == "barbell-bench-press"
        assert exercise["movementPattern"] == "horizontal_push"
        warmup, working = exercise["sets"][0], exercise["sets"][2]
        assert "percentOf1rm" not in warmup
        assert working["percentOf1rm"] == 75
        assert "notes" not in exercise

    def test_accessories_have_no_pattern(self, strength_config) -> None:
        data = block_to_dict(assemble_block(strength_config))
        accessory = data["weeks"][0]["workouts"][0]["exercises"][-1]
        assert not accessory["isCompound"]
        assert "movementPattern" not in accessory

    def test_projection(self, strength_config) -> None:
        block = assemble_block(strength_config, lift_records=[LiftRecord("Barbell Back Squat", 300)])
        progress = block_to_dict(block)["projectedProgress"]
        assert progress["mainLifts"][0]["projectedE1rm"] == 318.0
        assert progress["volumeProgression"][0] == 72

    def test_json_round_trips(self, strength_config) -> None:
        block = assemble_block(strength_config)
        assert json.loads(block_to_json(block)) == block_to_dict(block)


class TestReadinessOutputs:
    def test_adjustments_and_sets(self, planned_session) -> None:
        analysis = analyze_readiness(2, 4, 3)
        adjustments = generate_readiness_adjustments(analysis, analysis.suggestion)
        data = adjustments_to_dict(adjustments)
        assert data["level"] == "light"
        assert data["exerciseSwaps"] == []
        assert data["changes"][0]["type"] == "intensity"

        sets = adjusted_sets_to_dict(adjust_session(planned_session, adjustments))
        assert sets[2] == {
            "exerciseId": "barbell-bench-press",
            "exerciseName": "Barbell Bench Press",
            "setOrder": 3,
            "isWarmup": False,
            "targetLoad": 170,
            "targetReps": 5,
            "targetRpe": 7.0,
            "restSeconds": 225,
            "originalLoad": 200,
            "originalRpe": 8.0,
            "isAdjusted": True,
            "isSkipped": False,
        }

    def test_analysis_and_summary(self) -> None:
        analysis = analyze_readiness(2, 4, 3)
        data = analysis_to_dict(analysis)
        assert data["suggestion"] == "light"
        assert data["details"]["stressImpact"] == "neutral"

        adjustments = generate_readiness_adjustments(analysis, ReadinessAdjustment.LIGHT)
        summary = summary_to_dict(summarize_adjustments(adjustments))
        assert summary["adjustmentLevel"] == "light"
        assert summary["volumeChange"] == "70%"


class TestRotationOutputs:
    def test_suggestion_with_last_session(self) -> None:
        suggestion = RotationSuggestion(
            next_focus="Legs",
            reason="Last Legs was 4 days ago",
            days_since_last=4,
            confidence=RotationConfidence.HIGH,
            rotation_position=3,
            rotation_total=3,
            split_name="Push/Pull/Legs",
            readiness=ReadinessContext(72, ReadinessAdjustment.MODERATE, "ok", True),
            last_session=LastSessionSummary(
                workout_id="w9",
                completed_on=date(2024, 6, 6),
                focus="Legs",
                exercises=(ExerciseSummary("squat", "Squat", "Legs", 3, 225, 5, 8.0),),
                total_volume=3375,
                total_sets=3,
            ),
        )
        data = suggestion_to_dict(suggestion)
        assert data["confidence"] == "high"
        assert data["readiness"] == {
            "score": 72, "adjustment": "moderate", "message": "ok", "hasCheckedIn": True,
        }
        assert data["lastSession"]["completedOn"] == "2024-06-06"
        assert data["lastSession"]["exercises"][0]["lastWeight"] == 225

    def test_suggestion_without_context(self) -> None:
        suggestion = RotationSuggestion("Push", "r", None, RotationConfidence.LOW, 1, 3)
        data = suggestion_to_dict(suggestion)
        assert data["lastSession"] is None
        assert data["readiness"]["hasCheckedIn"] is False


class TestOtherOutputs:
    def test_progression(self) -> None:
        data = progression_to_dict(
            ProgressionSuggestion(ProgressionType.MAINTAIN, "Maintain", 225, 5, 9.0)
        )
        assert data == {
            "progressionType": "maintain",
            "message": "Maintain",
            "targetWeight": 225,
            "targetReps": 5,
            "targetRpe": 9.0,
        }

    def test_progression_result(self) -> None:
        data = progression_result_to_dict(
            ProgressionResult(ProgressionEvent.REGRESSED, "Regressed: -1 rep", reason="1 rep")
        )
        assert data["type"] == "regressed"
        assert data["reason"] == "1 rep"

    def test_scores(self) -> None:
        data = scores_to_dict(JourneyScores(freestyler=0.25, planner=1.0))
        assert data["dominant"] == "planner"
        assert scores_to_dict(JourneyScores())["dominant"] is None

    def test_recommendations(self) -> None:
        rec = BlockRecommendation(
            BlockType.DELOAD, 1, "Rest", 0.5, LoadLevel.LOW, LoadLevel.VERY_HIGH, "Recovery",
        )
        (data,) = recommendations_to_dict([rec])
        assert data["blockType"] == "deload"
        assert data["intensityLevel"] == "very_high"

    def test_to_json_string(self) -> None:
        assert json.loads(to_json_string(None)) is None
