"""Journey signal ingestion.

Signals are appended fire-and-forget through a SignalStore. A store failure
(missing table, offline backend) is logged and the call degrades to a local
record; it never reaches the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Protocol, Sequence

from program_engine import config
from program_engine.exceptions import SignalStoreError
from program_engine.journey.scorer import calculate_signal_scores
from program_engine.models.enums import SignalType
from program_engine.models.journey import JourneyScores, JourneySignal, TrackResult

logger = logging.getLogger(__name__)

# Store error codes meaning "the signal table does not exist yet"
MISSING_TABLE_CODES = frozenset({"42P01", "PGRST204"})


class SignalStore(Protocol):
    """Append-only backing log for journey signals."""

    def append(self, signal: JourneySignal) -> None: ...

    def recent(self, limit: int) -> Sequence[JourneySignal]: ...


class InMemorySignalStore:
    """Process-local store, newest signals returned first."""

    def __init__(self) -> None:
        self._signals: list[JourneySignal] = []

    def append(self, signal: JourneySignal) -> None:
        self._signals.append(signal)

    def recent(self, limit: int) -> Sequence[JourneySignal]:
        ordered = sorted(self._signals, key=lambda s: s.created_at, reverse=True)
        return ordered[:limit]

    def __len__(self) -> int:
        return len(self._signals)


class SignalTracker:
    """Track behavioural signals and score journeys from them."""

    def __init__(self, store: SignalStore | None = None) -> None:
        self.store = store if store is not None else InMemorySignalStore()

    def track_signal(
        self,
        signal_type: SignalType,
        context: Mapping[str, Any] | None = None,
        *,
        now: datetime | None = None,
    ) -> TrackResult:
        """Append a signal; failures degrade to a local record."""
        signal = JourneySignal(
            signal_type=signal_type,
            created_at=now or datetime.now(timezone.utc),
            context=dict(context) if context else None,
        )
        try:
            self.store.append(signal)
        except SignalStoreError as exc:
            if exc.code in MISSING_TABLE_CODES:
                logger.debug("Signal table not found, signal logged locally: %s", signal_type.name.lower())
            else:
                logger.warning("Signal store rejected %s: %s", signal_type.name.lower(), exc)
            return TrackResult(signal, stored=False, detail="local")
        except Exception as exc:
            logger.warning("Signal %s logged locally: %s", signal_type.name.lower(), exc)
            return TrackResult(signal, stored=False, detail="local")
        return TrackResult(signal, stored=True)

    def recent_signals(self, limit: int | None = None) -> list[JourneySignal]:
        """Most recent signals, or [] if the store cannot be read."""
        try:
            return list(self.store.recent(limit if limit is not None else config.SIGNAL_FETCH_LIMIT))
        except Exception as exc:
            logger.warning("Could not read journey signals: %s", exc)
            return []

    def scores(self, *, now: datetime | None = None) -> JourneyScores:
        return calculate_signal_scores(self.recent_signals(), now=now)
