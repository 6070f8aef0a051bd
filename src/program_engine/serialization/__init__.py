"""Serialization module — export engine results as camelCase JSON."""

from program_engine.serialization.wire import (
    adjusted_sets_to_dict,
    block_to_dict,
    block_to_json,
    suggestion_to_dict,
    to_json_string,
)

__all__ = [
    "adjusted_sets_to_dict",
    "block_to_dict",
    "block_to_json",
    "suggestion_to_dict",
    "to_json_string",
]
