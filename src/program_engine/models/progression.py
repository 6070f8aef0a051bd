"""Progression models — derived suggestions, never persisted by the engine."""

from __future__ import annotations

from dataclasses import dataclass

from program_engine.models.enums import ProgressionEvent, ProgressionType


@dataclass(frozen=True)
class ProgressionSuggestion:
    """Next-session target for a single exercise."""

    progression_type: ProgressionType
    message: str
    target_weight: float | None = None
    target_reps: int | None = None
    target_rpe: float | None = None


@dataclass(frozen=True)
class ProgressionResult:
    """How a logged set compares with the previous comparable set."""

    event: ProgressionEvent
    message: str
    delta: float = 0.0
    reason: str = ""
