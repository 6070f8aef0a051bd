"""Readiness adjustment engine — check-in analysis and session modifiers."""

from program_engine.readiness.adjustments import (
    adjust_session,
    apply_adjustments_to_sets,
    base_modifiers,
    calculate_adjusted_volume,
    generate_readiness_adjustments,
    summarize_adjustments,
)
from program_engine.readiness.analysis import analyze_check_in, analyze_readiness
from program_engine.readiness.constraints import (
    apply_pain_adjustment,
    apply_time_constraint,
    generate_pain_adjustments,
    generate_time_constraint_adjustments,
)

__all__ = [
    "adjust_session",
    "analyze_check_in",
    "analyze_readiness",
    "apply_adjustments_to_sets",
    "apply_pain_adjustment",
    "apply_time_constraint",
    "base_modifiers",
    "calculate_adjusted_volume",
    "generate_pain_adjustments",
    "generate_readiness_adjustments",
    "generate_time_constraint_adjustments",
    "summarize_adjustments",
]
