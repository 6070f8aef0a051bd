"""Next-block recommendation model."""

from __future__ import annotations

from dataclasses import dataclass

from program_engine.models.enums import BlockType, LoadLevel


@dataclass(frozen=True)
class BlockCharacteristics:
    """Reference description of a block archetype."""

    name: str
    description: str
    typical_duration: int  # weeks
    volume_level: LoadLevel
    intensity_level: LoadLevel
    rep_ranges: str
    rpe_range: str


@dataclass(frozen=True)
class BlockRecommendation:
    """A suggested next block with the reasoning behind it.

    Attributes:
        block_type: Archetype of the recommended block.
        duration_weeks: Suggested length.
        reasoning: Human-readable explanation.
        confidence: 0.0-1.0; recommendations are ranked by this.
        volume_level: Expected volume character.
        intensity_level: Expected intensity character.
        primary_focus: Short statement of what the block develops.
    """

    block_type: BlockType
    duration_weeks: int
    reasoning: str
    confidence: float
    volume_level: LoadLevel
    intensity_level: LoadLevel
    primary_focus: str
