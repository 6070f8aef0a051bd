"""Block archetypes and the standard block sequence for each goal."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from program_engine.models.enums import BlockType, LoadLevel, TrainingGoal, TrainingPhase
from program_engine.models.recommendation import BlockCharacteristics

# Standard block order per goal (wraps around after the last entry)
PHASE_SEQUENCES: Mapping[TrainingGoal, tuple[BlockType, ...]] = MappingProxyType({
    TrainingGoal.STRENGTH: (
        BlockType.ACCUMULATION,
        BlockType.INTENSIFICATION,
        BlockType.REALIZATION,
        BlockType.DELOAD,
    ),
    TrainingGoal.HYPERTROPHY: (
        BlockType.HYPERTROPHY,
        BlockType.HYPERTROPHY,
        BlockType.STRENGTH,
        BlockType.DELOAD,
    ),
    TrainingGoal.POWERLIFTING: (
        BlockType.ACCUMULATION,
        BlockType.INTENSIFICATION,
        BlockType.REALIZATION,
        BlockType.PEAKING,
        BlockType.TRANSITION,
    ),
    TrainingGoal.BODYBUILDING: (
        BlockType.HYPERTROPHY,
        BlockType.HYPERTROPHY,
        BlockType.HYPERTROPHY,
        BlockType.DELOAD,
    ),
    TrainingGoal.ATHLETIC: (
        BlockType.BASE_BUILDING,
        BlockType.STRENGTH,
        BlockType.POWER,
        BlockType.DELOAD,
    ),
    TrainingGoal.GENERAL: (
        BlockType.HYPERTROPHY,
        BlockType.STRENGTH,
        BlockType.DELOAD,
    ),
})

# The block type a training phase corresponds to
PHASE_TO_BLOCK: Mapping[TrainingPhase, BlockType] = MappingProxyType({
    TrainingPhase.ACCUMULATION: BlockType.ACCUMULATION,
    TrainingPhase.INTENSIFICATION: BlockType.INTENSIFICATION,
    TrainingPhase.REALIZATION: BlockType.REALIZATION,
    TrainingPhase.DELOAD: BlockType.DELOAD,
    TrainingPhase.MAINTENANCE: BlockType.BASE_BUILDING,
})

BLOCK_CHARACTERISTICS: Mapping[BlockType, BlockCharacteristics] = MappingProxyType({
    BlockType.ACCUMULATION: BlockCharacteristics(
        "Accumulation", "Build work capacity and muscle with higher volume",
        4, LoadLevel.HIGH, LoadLevel.MODERATE, "8-12", "6-8",
    ),
    BlockType.INTENSIFICATION: BlockCharacteristics(
        "Intensification", "Increase intensity while managing volume",
        4, LoadLevel.MODERATE, LoadLevel.HIGH, "4-6", "7-9",
    ),
    BlockType.REALIZATION: BlockCharacteristics(
        "Realization", "Express strength gains with heavy singles/doubles",
        3, LoadLevel.LOW, LoadLevel.VERY_HIGH, "1-3", "8-10",
    ),
    BlockType.PEAKING: BlockCharacteristics(
        "Peaking", "Final preparation for competition",
        2, LoadLevel.LOW, LoadLevel.VERY_HIGH, "1-2", "9-10",
    ),
    BlockType.DELOAD: BlockCharacteristics(
        "Deload", "Recovery week with reduced volume and intensity",
        1, LoadLevel.LOW, LoadLevel.LOW, "6-10", "5-6",
    ),
    BlockType.TRANSITION: BlockCharacteristics(
        "Transition", "Active recovery between training cycles",
        2, LoadLevel.LOW, LoadLevel.LOW, "8-15", "5-7",
    ),
    BlockType.BASE_BUILDING: BlockCharacteristics(
        "Base Building", "Establish movement patterns and general conditioning",
        4, LoadLevel.MODERATE, LoadLevel.LOW, "10-15", "5-7",
    ),
    BlockType.HYPERTROPHY: BlockCharacteristics(
        "Hypertrophy", "Maximize muscle growth with moderate-high volume",
        4, LoadLevel.VERY_HIGH, LoadLevel.MODERATE, "8-15", "7-9",
    ),
    BlockType.STRENGTH: BlockCharacteristics(
        "Strength", "Build maximal strength with heavy compounds",
        4, LoadLevel.MODERATE, LoadLevel.HIGH, "3-6", "7-9",
    ),
    BlockType.POWER: BlockCharacteristics(
        "Power", "Develop explosive strength and speed",
        3, LoadLevel.LOW, LoadLevel.MODERATE, "1-5", "7-8",
    ),
})
