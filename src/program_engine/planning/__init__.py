"""Block planning — split/template selection, overload, and block assembly."""

from program_engine.planning.assembler import assemble_block, get_block_difficulty
from program_engine.planning.recommendations import recommend_next_blocks, recommended_config
from program_engine.planning.selectors import (
    select_periodization_template,
    select_training_split,
)

__all__ = [
    "assemble_block",
    "get_block_difficulty",
    "recommend_next_blocks",
    "recommended_config",
    "select_periodization_template",
    "select_training_split",
]
