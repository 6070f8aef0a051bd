"""Journey signal scorer and tracker."""

from program_engine.journey.scorer import SIGNAL_WEIGHTS, calculate_signal_scores
from program_engine.journey.tracker import InMemorySignalStore, SignalStore, SignalTracker

__all__ = [
    "SIGNAL_WEIGHTS",
    "InMemorySignalStore",
    "SignalStore",
    "SignalTracker",
    "calculate_signal_scores",
]
