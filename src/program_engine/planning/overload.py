"""Overload calculator — per-exercise set prescriptions for a phase week.

Pure functions: identical inputs always produce identical sets, which the
block assembler and the test fixtures both rely on.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from program_engine.math.rounding import round_half_up, round_to
from program_engine.models.block import GeneratedSet, PhaseConfig
from program_engine.models.enums import (
    COMPOUND_BASE_SETS,
    HEAVY_REP_CEILING,
    HEAVY_REST_S,
    INTENSITY_RATE_FRACTION,
    ISOLATION_BASE_SETS,
    LIGHT_REST_S,
    MAX_WORKING_SETS,
    MIN_WORKING_SETS,
    MODERATE_REP_CEILING,
    MODERATE_REST_S,
    PROGRESSION_RATE,
    RPE_WEEKLY_RAMP,
    WARMUP_PROTOCOL,
    WARMUP_REST_S,
    Experience,
)


@dataclass(frozen=True)
class OverloadAdjustment:
    """Multiplicative nudges applied on top of a phase's base multipliers."""

    volume_adjustment: float
    intensity_adjustment: float


def calculate_progressive_overload(week_in_phase: int, experience: Experience) -> OverloadAdjustment:
    """Within-phase overload for a given week.

    Novices adapt faster, so the weekly rate is keyed to experience
    (5% / 2.5% / 1.5%). Intensity climbs at half the volume rate.

    Args:
        week_in_phase: 1-indexed week inside the current phase.
        experience: Lifter classification.

    Returns:
        OverloadAdjustment with volume and intensity factors (1.0 in week 1).
    """
    rate = PROGRESSION_RATE[experience]
    weeks_in = week_in_phase - 1
    return OverloadAdjustment(
        volume_adjustment=1 + weeks_in * rate,
        intensity_adjustment=1 + weeks_in * rate * INTENSITY_RATE_FRACTION,
    )


def apply_overload(phase: PhaseConfig, adjustment: OverloadAdjustment) -> PhaseConfig:
    """Scale a phase's multipliers by an overload adjustment.

    Intensity is capped at 1.0 (100% of the working max).
    """
    return replace(
        phase,
        volume_multiplier=phase.volume_multiplier * adjustment.volume_adjustment,
        intensity_multiplier=min(1.0, phase.intensity_multiplier * adjustment.intensity_adjustment),
    )


def working_set_count(phase: PhaseConfig, is_compound: bool, experience: Experience) -> int:
    table = COMPOUND_BASE_SETS if is_compound else ISOLATION_BASE_SETS
    scaled = round_half_up(table[experience] * phase.volume_multiplier)
    return max(MIN_WORKING_SETS, min(MAX_WORKING_SETS, scaled))


def target_reps(phase: PhaseConfig) -> int:
    """Middle of the phase rep range, rounded down."""
    return phase.rep_range_min + (phase.rep_range_max - phase.rep_range_min) // 2


def target_rpe(phase: PhaseConfig, week_in_phase: int) -> float:
    """RPE ramps 0.5 per week from the bottom of the range, capped at the top."""
    ramped = phase.rpe_range.min + RPE_WEEKLY_RAMP * (week_in_phase - 1)
    return round_to(min(phase.rpe_range.max, ramped), 1)


def rest_seconds(phase: PhaseConfig) -> int:
    if phase.rep_range_max <= HEAVY_REP_CEILING:
        return HEAVY_REST_S
    if phase.rep_range_max <= MODERATE_REP_CEILING:
        return MODERATE_REST_S
    return LIGHT_REST_S


def generate_sets_for_exercise(
    phase: PhaseConfig,
    is_compound: bool,
    experience: Experience,
    week_in_phase: int,
) -> tuple[GeneratedSet, ...]:
    """Generate the full set list for one exercise in one week.

    Compound lifts get the two-set warmup ramp (10 @ RPE 4, 5 @ RPE 5)
    before any working set; isolation lifts get none. Working sets of
    compound lifts carry a %1RM derived from the phase intensity.

    Args:
        phase: Phase configuration (already overload-adjusted if desired).
        is_compound: Whether the exercise is a primary compound movement.
        experience: Lifter classification.
        week_in_phase: 1-indexed week inside the phase.

    Returns:
        Tuple of GeneratedSet with strictly increasing set numbers.
    """
    sets: list[GeneratedSet] = []

    if is_compound:
        for reps, rpe in WARMUP_PROTOCOL:
            sets.append(GeneratedSet(
                set_number=len(sets) + 1,
                target_reps=reps,
                target_rpe=rpe,
                is_warmup=True,
                rest_seconds=WARMUP_REST_S,
            ))

    reps = target_reps(phase)
    rpe = target_rpe(phase, week_in_phase)
    rest = rest_seconds(phase)
    percent = min(100, round_half_up(phase.intensity_multiplier * 100)) if is_compound else None

    for _ in range(working_set_count(phase, is_compound, experience)):
        sets.append(GeneratedSet(
            set_number=len(sets) + 1,
            target_reps=reps,
            target_rpe=rpe,
            is_warmup=False,
            rest_seconds=rest,
            percent_of_1rm=percent,
        ))

    return tuple(sets)
