"""Next-block recommendations from phase progression or competition timing."""

from __future__ import annotations

from program_engine.catalog import BLOCK_CHARACTERISTICS, PHASE_SEQUENCES, PHASE_TO_BLOCK
from program_engine.models.block import BlockConfig
from program_engine.models.enums import (
    BlockType,
    Experience,
    LoadLevel,
    TrainingGoal,
    TrainingPhase,
)
from program_engine.models.recommendation import BlockRecommendation

_MAX_RECOMMENDATIONS = 3

# Default block length when starting fresh
_DEFAULT_DURATION_WEEKS = {
    Experience.BEGINNER: 4,
    Experience.INTERMEDIATE: 6,
    Experience.ADVANCED: 8,
}


def _from_characteristics(
    block_type: BlockType,
    duration_weeks: int,
    reasoning: str,
    confidence: float,
) -> BlockRecommendation:
    info = BLOCK_CHARACTERISTICS[block_type]
    return BlockRecommendation(
        block_type=block_type,
        duration_weeks=duration_weeks,
        reasoning=reasoning,
        confidence=confidence,
        volume_level=info.volume_level,
        intensity_level=info.intensity_level,
        primary_focus=info.description,
    )


def competition_prep_recommendations(weeks_to_competition: int) -> list[BlockRecommendation]:
    """Single recommendation keyed to how far out the competition is."""
    w = weeks_to_competition
    if w <= 2:
        rec = BlockRecommendation(
            BlockType.PEAKING, w,
            f"Competition in {w} weeks - time for final peaking phase",
            0.95, LoadLevel.LOW, LoadLevel.VERY_HIGH, "Peak strength expression",
        )
    elif w <= 4:
        rec = BlockRecommendation(
            BlockType.REALIZATION, min(3, w - 1),
            f"{w} weeks out - realize your strength gains",
            0.9, LoadLevel.LOW, LoadLevel.VERY_HIGH, "Heavy singles and competition prep",
        )
    elif w <= 8:
        rec = BlockRecommendation(
            BlockType.INTENSIFICATION, 4,
            f"{w} weeks out - build intensity toward competition",
            0.85, LoadLevel.MODERATE, LoadLevel.HIGH, "Increase working weights",
        )
    elif w <= 12:
        rec = BlockRecommendation(
            BlockType.ACCUMULATION, 4,
            f"{w} weeks out - build volume base for competition prep",
            0.8, LoadLevel.HIGH, LoadLevel.MODERATE, "Build work capacity",
        )
    else:
        rec = BlockRecommendation(
            BlockType.HYPERTROPHY, 4,
            f"{w} weeks until competition - time to build muscle and work capacity",
            0.75, LoadLevel.HIGH, LoadLevel.MODERATE, "Build muscle mass and GPP",
        )
    return [rec]


def phase_progression_recommendations(
    goal: TrainingGoal,
    current_phase: TrainingPhase | None,
    weeks_in_phase: int,
) -> list[BlockRecommendation]:
    """Advance through the goal's standard sequence, or continue the current block."""
    sequence = PHASE_SEQUENCES[goal]
    current_block = PHASE_TO_BLOCK[current_phase] if current_phase is not None else None
    current_index = sequence.index(current_block) if current_block in sequence else -1
    next_block = sequence[(current_index + 1) % len(sequence)]

    typical = BLOCK_CHARACTERISTICS[current_block].typical_duration if current_block else 4
    if current_phase is None or weeks_in_phase >= typical:
        info = BLOCK_CHARACTERISTICS[next_block]
        if current_phase is None:
            reasoning = f"Start with {info.name} phase for {goal.name.lower()} goal"
        else:
            reasoning = (
                f"After {weeks_in_phase} weeks of {current_phase.name.lower()}, "
                f"progress to {info.name}"
            )
        return [_from_characteristics(next_block, info.typical_duration, reasoning, 0.85)]

    remaining = typical - weeks_in_phase
    info = BLOCK_CHARACTERISTICS[current_block]
    return [_from_characteristics(
        current_block,
        max(1, remaining),
        f"Continue {info.name} - {remaining} weeks remaining",
        0.7,
    )]


def alternative_recommendations(
    goal: TrainingGoal,
    current_phase: TrainingPhase | None,
) -> list[BlockRecommendation]:
    alternatives: list[BlockRecommendation] = []
    if current_phase != TrainingPhase.DELOAD:
        alternatives.append(BlockRecommendation(
            BlockType.DELOAD, 1, "Take a recovery week if feeling fatigued",
            0.5, LoadLevel.LOW, LoadLevel.LOW, "Recovery and regeneration",
        ))
    if goal in (TrainingGoal.STRENGTH, TrainingGoal.POWERLIFTING):
        alternatives.append(BlockRecommendation(
            BlockType.HYPERTROPHY, 4, "Build muscle mass to support future strength",
            0.4, LoadLevel.HIGH, LoadLevel.MODERATE, "Muscle growth",
        ))
    if goal in (TrainingGoal.HYPERTROPHY, TrainingGoal.BODYBUILDING):
        alternatives.append(BlockRecommendation(
            BlockType.STRENGTH, 4, "Build strength to lift heavier in future hypertrophy work",
            0.4, LoadLevel.MODERATE, LoadLevel.HIGH, "Neural adaptations",
        ))
    return alternatives


def recommend_next_blocks(
    goal: TrainingGoal,
    current_phase: TrainingPhase | None = None,
    weeks_in_phase: int = 0,
    weeks_to_competition: int | None = None,
) -> list[BlockRecommendation]:
    """Rank up to three candidate next blocks.

    A competition in the future drives the primary recommendation;
    otherwise the goal's standard phase sequence does. Alternatives fill
    the list when fewer than three candidates exist.

    Args:
        goal: The lifter's training goal.
        current_phase: Phase currently being trained, if any.
        weeks_in_phase: Weeks already completed in that phase.
        weeks_to_competition: Weeks until the next competition, if any.

    Returns:
        Recommendations sorted by descending confidence (stable on ties).
    """
    if weeks_to_competition is not None and weeks_to_competition > 0:
        recs = competition_prep_recommendations(weeks_to_competition)
    else:
        recs = phase_progression_recommendations(goal, current_phase, weeks_in_phase)

    if len(recs) < _MAX_RECOMMENDATIONS:
        recs.extend(alternative_recommendations(goal, current_phase))

    recs.sort(key=lambda r: r.confidence, reverse=True)
    return recs[:_MAX_RECOMMENDATIONS]


def recommended_config(
    experience: Experience | None = None,
    goal: TrainingGoal | None = None,
    days_per_week: int | None = None,
) -> BlockConfig:
    """Sensible block request for a lifter profile.

    With no profile at all this is a 4-week, 3-day general beginner block;
    otherwise duration scales with training age (4 / 6 / 8 weeks).
    """
    if experience is None and goal is None and days_per_week is None:
        return BlockConfig(
            goal=TrainingGoal.GENERAL,
            duration_weeks=4,
            days_per_week=3,
            experience=Experience.BEGINNER,
        )
    experience = experience or Experience.INTERMEDIATE
    return BlockConfig(
        goal=goal or TrainingGoal.GENERAL,
        duration_weeks=_DEFAULT_DURATION_WEEKS[experience],
        days_per_week=days_per_week or 4,
        experience=experience,
    )
