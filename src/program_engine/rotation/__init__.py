"""Rotation detector — split detection and next-session suggestions."""

from program_engine.rotation.detector import (
    last_session_for_focus,
    merge_readiness,
    next_in_rotation,
)
from program_engine.rotation.matching import matches_split
from program_engine.rotation.patterns import detect_training_split

__all__ = [
    "detect_training_split",
    "last_session_for_focus",
    "matches_split",
    "merge_readiness",
    "next_in_rotation",
]
