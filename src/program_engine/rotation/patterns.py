"""Training split detection from logged workout focuses.

Counts normalized focus labels over the most recent workouts with pandas and
maps the most frequent ones onto a known split family:

    Push/Pull/Legs → Upper/Lower → Body Part Split → Full Body → Custom Split

Confidence is the share of recent workouts covered by the top focuses.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

import pandas as pd

from program_engine.math.rounding import round_to
from program_engine.models.enums import (
    MIN_PATTERN_CONFIDENCE,
    MIN_WORKOUTS_FOR_SPLIT,
    SPLIT_DETECTION_WINDOW,
)
from program_engine.models.history import LoggedWorkout
from program_engine.models.rotation import SplitPattern

logger = logging.getLogger(__name__)

TOP_FOCUS_COUNT = 6
BODY_PART_KEYWORDS = ("chest", "back", "shoulder", "arm", "leg")

_PARENTHETICAL = re.compile(r"\s*\([^)]*\)\s*")
_SEPARATOR = re.compile(r"\s*[+&]\s*")


def normalize_pattern_focus(focus: str) -> str:
    """Lower-case, drop parentheticals, and unify "+" / "&" separators."""
    text = _PARENTHETICAL.sub("", (focus or "").lower())
    return _SEPARATOR.sub(" + ", text).strip()


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def classify_split(focuses: Sequence[str]) -> tuple[str, tuple[str, ...]] | None:
    """Map the most frequent focus labels to a split name and its days.

    Returns:
        (name, splits) or None when fewer than two focuses and no known
        family matches.
    """
    def any_has(*needles: str) -> bool:
        return any(n in f for f in focuses for n in needles)

    if any_has("push") and any_has("pull") and any_has("leg"):
        return "Push/Pull/Legs", ("Push", "Pull", "Legs")

    if any_has("upper") and any_has("lower"):
        return "Upper/Lower", ("Upper", "Lower")

    parts = [p for p in BODY_PART_KEYWORDS if any_has(p)]
    if len(parts) >= 3:
        return "Body Part Split", tuple(_capitalize(p) for p in parts)

    if any_has("full body", "fullbody"):
        return "Full Body", ("Full Body",)

    if len(focuses) >= 2:
        return "Custom Split", tuple(_capitalize(f) for f in focuses[:4])

    return None


def estimate_days_per_week(workouts: Sequence[LoggedWorkout]) -> float:
    """Average sessions per week between the first and last logged workout."""
    if len(workouts) < 2:
        return 0.0
    dates = [w.completed_on for w in workouts]
    days = max(1, (max(dates) - min(dates)).days)
    return round_to(len(workouts) / (days / 7), 1)


def detect_training_split(workouts: Sequence[LoggedWorkout]) -> SplitPattern | None:
    """Infer the lifter's recurring split from their workout history.

    Args:
        workouts: Completed workouts in any order.

    Returns:
        SplitPattern, or None with fewer than six workouts, no recognizable
        split, or a confidence below 0.5.
    """
    if len(workouts) < MIN_WORKOUTS_FOR_SPLIT:
        return None

    ordered = sorted(workouts, key=lambda w: w.completed_on, reverse=True)
    recent = ordered[:SPLIT_DETECTION_WINDOW]

    focus = pd.Series([normalize_pattern_focus(w.focus) for w in recent], dtype="object")
    # First-seen order, then a stable sort so equal counts keep it
    counts = focus.value_counts(sort=False).sort_values(ascending=False, kind="stable")
    top = counts.head(TOP_FOCUS_COUNT)

    classified = classify_split(list(top.index))
    if classified is None:
        return None
    name, splits = classified

    confidence = min(1.0, int(top.sum()) / len(recent))
    if confidence < MIN_PATTERN_CONFIDENCE:
        logger.debug("Detected %s at confidence %.2f; below threshold", name, confidence)
        return None

    return SplitPattern(
        name=name,
        splits=splits,
        confidence=confidence,
        days_per_week=estimate_days_per_week(ordered),
        focus_distribution=tuple((str(k), int(v)) for k, v in counts.items()),
    )
