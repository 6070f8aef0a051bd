"""Journey signal scorer — which training style a lifter gravitates to.

Each signal type belongs to one journey with a fixed weight. A signal's
contribution decays linearly over 30 days to a 20% floor:

    decay = max(0.2, 1 - age_days / 30)

Per-journey sums are normalized by the largest of the three, so the
dominant journey scores exactly 1.0.
"""

from __future__ import annotations

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Iterable, Mapping

from program_engine.exceptions import ConfigurationError
from program_engine.models.enums import (
    SIGNAL_DECAY_FLOOR,
    SIGNAL_DECAY_WINDOW_DAYS,
    Journey,
    SignalType,
)
from program_engine.models.journey import JourneyScores, JourneySignal, SignalWeight

_SECONDS_PER_DAY = 86_400.0

SIGNAL_WEIGHTS: Mapping[SignalType, SignalWeight] = MappingProxyType({
    # Freestyler
    SignalType.QUICK_START: SignalWeight(Journey.FREESTYLER, 0.8),
    SignalType.ADD_EXERCISE_MID_WORKOUT: SignalWeight(Journey.FREESTYLER, 0.6),
    SignalType.SKIP_SUGGESTION: SignalWeight(Journey.FREESTYLER, 0.5),
    SignalType.UNSTRUCTURED_WORKOUT: SignalWeight(Journey.FREESTYLER, 0.7),
    # Planner
    SignalType.CREATE_BLOCK: SignalWeight(Journey.PLANNER, 1.0),
    SignalType.FOLLOW_SCHEDULE: SignalWeight(Journey.PLANNER, 0.8),
    SignalType.COMPLETE_PLANNED_WORKOUT: SignalWeight(Journey.PLANNER, 0.7),
    SignalType.VIEW_CALENDAR: SignalWeight(Journey.PLANNER, 0.3),
    # Guided
    SignalType.CHECK_READINESS: SignalWeight(Journey.GUIDED, 0.9),
    SignalType.USE_COACH: SignalWeight(Journey.GUIDED, 0.7),
    SignalType.ACCEPT_SUGGESTION: SignalWeight(Journey.GUIDED, 0.8),
    SignalType.ADJUST_FOR_READINESS: SignalWeight(Journey.GUIDED, 0.6),
})

if set(SIGNAL_WEIGHTS) != set(SignalType):
    raise ConfigurationError("SIGNAL_WEIGHTS must cover every signal type")


def _as_aware(moment: datetime) -> datetime:
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)


def signal_decay(created_at: datetime, now: datetime) -> float:
    """Time-decay factor for a signal observed at ``now``.

    Signals dated after ``now`` count as fresh (factor 1.0).
    """
    age_days = (_as_aware(now) - _as_aware(created_at)).total_seconds() / _SECONDS_PER_DAY
    age_days = max(0.0, age_days)
    return max(SIGNAL_DECAY_FLOOR, 1 - age_days / SIGNAL_DECAY_WINDOW_DAYS)


def calculate_signal_scores(
    signals: Iterable[JourneySignal],
    *,
    now: datetime | None = None,
) -> JourneyScores:
    """Score the three journeys from a lifter's signal log.

    Args:
        signals: Signals in any order.
        now: Reference time for decay; defaults to the current UTC time.
            Naive datetimes are treated as UTC.

    Returns:
        JourneyScores with the maximum at 1.0, or all zeros when there
        are no signals.
    """
    now = now or datetime.now(timezone.utc)
    raw = {journey: 0.0 for journey in Journey}

    for signal in signals:
        weight = SIGNAL_WEIGHTS[signal.signal_type]
        raw[weight.journey] += weight.weight * signal_decay(signal.created_at, now)

    top = max(raw.values())
    if top <= 0:
        return JourneyScores()

    return JourneyScores(
        freestyler=raw[Journey.FREESTYLER] / top,
        planner=raw[Journey.PLANNER] / top,
        guided=raw[Journey.GUIDED] / top,
    )
