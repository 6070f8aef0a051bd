"""Readiness analysis: sleep / soreness / stress check-in → 0-100 score.

score = sleep × 8 + (6 − soreness) × 6 + (6 − stress) × 6, so a perfect
check-in (5, 1, 1) scores 100 and the worst (1, 5, 5) scores 20.
"""

from __future__ import annotations

from program_engine.exceptions import InvalidConfigError
from program_engine.models.enums import (
    READINESS_FULL_THRESHOLD,
    READINESS_LIGHT_THRESHOLD,
    READINESS_MODERATE_THRESHOLD,
    READINESS_SCALE_MAX,
    READINESS_SCALE_MIN,
    Impact,
    ReadinessAdjustment,
)
from program_engine.models.readiness import (
    ReadinessAnalysis,
    ReadinessCheckIn,
    ReadinessFactors,
)

_LEVEL_MESSAGES = {
    ReadinessAdjustment.FULL: "You're primed for a great session. Let's push it!",
    ReadinessAdjustment.MODERATE: (
        "Solid foundation today. We'll keep intensity but watch for fatigue signals."
    ),
    ReadinessAdjustment.LIGHT: (
        "Recovery day vibes. Let's dial back intensity and focus on movement quality."
    ),
    ReadinessAdjustment.REST: (
        "Your body's asking for a break. Consider active recovery or rest today."
    ),
}


def _check_scale(name: str, value: int) -> None:
    if not READINESS_SCALE_MIN <= value <= READINESS_SCALE_MAX:
        raise InvalidConfigError(f"{name} must be 1-5, got {value}", field=name)


def readiness_score(sleep_quality: int, muscle_soreness: int, stress_level: int) -> int:
    return sleep_quality * 8 + (6 - muscle_soreness) * 6 + (6 - stress_level) * 6


def suggestion_for_score(score: int) -> ReadinessAdjustment:
    if score >= READINESS_FULL_THRESHOLD:
        return ReadinessAdjustment.FULL
    if score >= READINESS_MODERATE_THRESHOLD:
        return ReadinessAdjustment.MODERATE
    if score >= READINESS_LIGHT_THRESHOLD:
        return ReadinessAdjustment.LIGHT
    return ReadinessAdjustment.REST


def _higher_is_better(value: int) -> Impact:
    if value >= 4:
        return Impact.POSITIVE
    if value >= 3:
        return Impact.NEUTRAL
    return Impact.NEGATIVE


def _lower_is_better(value: int) -> Impact:
    if value <= 2:
        return Impact.POSITIVE
    if value <= 3:
        return Impact.NEUTRAL
    return Impact.NEGATIVE


def analyze_readiness(sleep_quality: int, muscle_soreness: int, stress_level: int) -> ReadinessAnalysis:
    """Score a daily check-in and suggest an adjustment level.

    Args:
        sleep_quality: 1 (terrible) to 5 (great).
        muscle_soreness: 1 (fresh) to 5 (wrecked).
        stress_level: 1 (calm) to 5 (chaos).

    Returns:
        ReadinessAnalysis with score, suggested level, per-factor impact,
        and recommendations.

    Raises:
        InvalidConfigError: If any input is outside 1-5.
    """
    _check_scale("sleep_quality", sleep_quality)
    _check_scale("muscle_soreness", muscle_soreness)
    _check_scale("stress_level", stress_level)

    score = readiness_score(sleep_quality, muscle_soreness, stress_level)
    suggestion = suggestion_for_score(score)

    recommendations: list[str] = []
    if sleep_quality <= 2:
        recommendations.append("Poor sleep detected. Consider limiting high-skill movements.")
    if muscle_soreness >= 4:
        recommendations.append("High soreness. We'll reduce volume on affected muscle groups.")
    if stress_level >= 4:
        recommendations.append("Elevated stress. Training can help, but we'll keep it controlled.")
    if score >= READINESS_FULL_THRESHOLD:
        recommendations.append("Great day to attempt PRs or push intensity.")
    elif score >= READINESS_MODERATE_THRESHOLD:
        recommendations.append("Stick to your planned weights and reps.")
    elif score < READINESS_LIGHT_THRESHOLD:
        recommendations.append("Focus on mobility, light cardio, or complete rest.")

    return ReadinessAnalysis(
        score=score,
        suggestion=suggestion,
        message=_LEVEL_MESSAGES[suggestion],
        details=ReadinessFactors(
            sleep_impact=_higher_is_better(sleep_quality),
            soreness_impact=_lower_is_better(muscle_soreness),
            stress_impact=_lower_is_better(stress_level),
        ),
        recommendations=tuple(recommendations),
    )


def analyze_check_in(check_in: ReadinessCheckIn) -> ReadinessAnalysis:
    """Analyze a stored check-in, keeping its stored score and suggestion if present."""
    analysis = analyze_readiness(
        check_in.sleep_quality, check_in.muscle_soreness, check_in.stress_level,
    )
    if check_in.readiness_score is None and check_in.suggested_adjustment is None:
        return analysis
    suggestion = check_in.suggested_adjustment or analysis.suggestion
    return ReadinessAnalysis(
        score=check_in.readiness_score if check_in.readiness_score is not None else analysis.score,
        suggestion=suggestion,
        message=_LEVEL_MESSAGES[suggestion],
        details=analysis.details,
        recommendations=analysis.recommendations,
    )
