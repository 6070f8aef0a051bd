"""Fuzzy matching between free-text workout focuses and split labels.

This is the only place that decides whether "Chest & Triceps (A)" counts as
a Push day. Substring match first, then a static alias table.
"""

from __future__ import annotations

import re

SPLIT_ALIASES: dict[str, tuple[str, ...]] = {
    "push": ("chest", "shoulder", "tricep", "pressing"),
    "pull": ("back", "bicep", "pulling", "row"),
    "legs": ("leg", "lower", "squat", "quad", "hamstring", "glute"),
    "upper": ("upper", "chest", "back", "shoulder", "arm"),
    "lower": ("lower", "leg", "squat", "glute"),
}

_PARENTHETICAL = re.compile(r"\s*\([^)]*\)\s*")
_WHITESPACE = re.compile(r"\s+")


def normalize_focus(focus: str) -> str:
    """Lower-case, drop parentheticals like "(A)", collapse whitespace."""
    text = _PARENTHETICAL.sub(" ", focus.lower())
    return _WHITESPACE.sub(" ", text).strip()


def matches_split(text: str, label: str) -> bool:
    """Whether a workout focus belongs to a split label.

    Args:
        text: Free-text focus from a logged workout.
        label: Split label from the detected pattern, e.g. "Push".

    Returns:
        True on a substring match or an alias match.
    """
    focus = normalize_focus(text or "")
    split = label.lower()
    if split in focus:
        return True
    return any(alias in focus for alias in SPLIT_ALIASES.get(split, ()))
