"""Progression suggester and set-to-set progression detection."""

from program_engine.math.strength import calculate_e1rm
from program_engine.progression.detection import detect_progression, find_best_previous_set
from program_engine.progression.suggester import suggest_progression

__all__ = [
    "calculate_e1rm",
    "detect_progression",
    "find_best_previous_set",
    "suggest_progression",
]
