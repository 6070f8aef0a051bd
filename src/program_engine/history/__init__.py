"""History provider boundary — upstream rows to validated domain types."""

from program_engine.history.provider import (
    MalformedRowError,
    parse_block_config,
    parse_planned_sets,
    parse_readiness_check_in,
    parse_set_row,
    parse_set_rows,
    parse_signal_rows,
    parse_split_pattern,
    parse_workout_rows,
)

__all__ = [
    "MalformedRowError",
    "parse_block_config",
    "parse_planned_sets",
    "parse_readiness_check_in",
    "parse_set_row",
    "parse_set_rows",
    "parse_signal_rows",
    "parse_split_pattern",
    "parse_workout_rows",
]
