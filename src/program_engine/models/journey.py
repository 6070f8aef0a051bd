"""Journey signal models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from program_engine.models.enums import Journey, SignalType


@dataclass(frozen=True)
class JourneySignal:
    """One append-only behavioural event."""

    signal_type: SignalType
    created_at: datetime
    context: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class SignalWeight:
    journey: Journey
    weight: float


@dataclass(frozen=True)
class JourneyScores:
    """Relative affinity per journey; the dominant one scores exactly 1.0."""

    freestyler: float = 0.0
    planner: float = 0.0
    guided: float = 0.0

    def score_for(self, journey: Journey) -> float:
        return getattr(self, journey.name.lower())

    @property
    def dominant(self) -> Journey | None:
        """Highest-scoring journey, or None when no signal has been seen."""
        best = max(Journey, key=self.score_for)
        return best if self.score_for(best) > 0 else None


@dataclass(frozen=True)
class TrackResult:
    """Outcome of a track_signal() call (never raised to the caller)."""

    signal: JourneySignal
    stored: bool
    detail: str = ""
