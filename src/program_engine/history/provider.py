"""Pure functions mapping upstream payload dicts to validated domain types.

No I/O — takes raw rows as returned by the history provider, pattern
detector, and readiness store and returns the frozen models every engine
component shares. Corrupt rows are logged and skipped; only a block config
is strict, because it is direct user input.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from enum import IntEnum
from typing import Any, Iterable, Mapping, Optional, TypeVar

from program_engine.catalog.exercises import exercise_slug
from program_engine.exceptions import InvalidConfigError
from program_engine.models.block import BlockConfig
from program_engine.models.enums import (
    READINESS_SCALE_MAX,
    READINESS_SCALE_MIN,
    Experience,
    ReadinessAdjustment,
    SignalType,
    TrainingGoal,
    TrainingPhase,
)
from program_engine.models.history import LoggedSet, LoggedWorkout
from program_engine.models.journey import JourneySignal
from program_engine.models.readiness import PlannedSet, ReadinessCheckIn
from program_engine.models.rotation import SplitPattern

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=IntEnum)


class MalformedRowError(ValueError):
    """An upstream row cannot be converted; callers skip it."""


def parse_enum(enum_cls: type[E], value: Any, field: str) -> E:
    """Parse a lower-case wire name ("strength", "light") into an enum member."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise InvalidConfigError(f"{field} must be a string, got {value!r}", field=field)
    try:
        return enum_cls[value.strip().upper().replace("-", "_")]
    except KeyError:
        allowed = ", ".join(m.name.lower() for m in enum_cls)
        raise InvalidConfigError(
            f"Unknown {field} {value!r} (expected one of: {allowed})", field=field,
        ) from None


def parse_date(value: Any) -> Optional[date]:
    """ISO date or datetime string (or date object) → date; None if absent."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return date.fromisoformat(text[:10])


# ---------------------------------------------------------------------------
# Value coercion; blank values read as None
# ---------------------------------------------------------------------------


def _opt_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def _opt_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(float(value))


def _exercise_fields(row: Mapping[str, Any]) -> tuple[str, str, Optional[str]]:
    """(exercise_id, name, muscle_group) from a flat or nested set row."""
    nested = row.get("exercise") if isinstance(row.get("exercise"), Mapping) else {}
    name = row.get("exercise_name") or nested.get("name") or ""
    exercise_id = row.get("exercise_id") or nested.get("id") or (exercise_slug(name) if name else "")
    if not exercise_id:
        raise MalformedRowError("set row has no exercise id or name")
    muscle_group = row.get("muscle_group") or nested.get("muscle_group")
    return str(exercise_id), str(name), muscle_group


def parse_set_row(row: Mapping[str, Any], completed_on: Optional[date] = None) -> LoggedSet:
    """One logged set row → LoggedSet.

    Raises:
        MalformedRowError: The row is not a mapping or a value does not parse.
    """
    if not isinstance(row, Mapping):
        raise MalformedRowError(f"set row must be an object, got {type(row).__name__}")
    try:
        exercise_id, name, muscle_group = _exercise_fields(row)
        return LoggedSet(
            exercise_id=exercise_id,
            exercise_name=name,
            muscle_group=muscle_group or "Other",
            weight=_opt_float(row.get("actual_weight", row.get("weight"))),
            reps=_opt_int(row.get("actual_reps", row.get("reps"))),
            rpe=_opt_float(row.get("actual_rpe", row.get("rpe"))),
            is_warmup=bool(row.get("is_warmup", False)),
            set_order=_opt_int(row.get("set_order")) or 0,
            completed_on=parse_date(row.get("completed_on")) or completed_on,
        )
    except (TypeError, ValueError) as exc:
        raise MalformedRowError(str(exc)) from exc


def parse_workout_row(row: Mapping[str, Any]) -> LoggedWorkout:
    """One completed workout with nested sets → LoggedWorkout.

    Corrupt set rows inside an otherwise valid workout are dropped.

    Raises:
        MalformedRowError: Missing completion date or unparseable fields.
    """
    if not isinstance(row, Mapping):
        raise MalformedRowError(f"workout row must be an object, got {type(row).__name__}")
    try:
        completed_on = parse_date(row.get("date_completed") or row.get("completed_on"))
        duration = _opt_int(row.get("duration_minutes"))
    except (TypeError, ValueError) as exc:
        raise MalformedRowError(str(exc)) from exc
    if completed_on is None:
        raise MalformedRowError("workout has no completion date")

    workout_id = str(row.get("id") or row.get("workout_id") or completed_on.isoformat())
    sets: list[LoggedSet] = []
    for set_row in row.get("workout_sets") or row.get("sets") or ():
        try:
            sets.append(parse_set_row(set_row, completed_on))
        except MalformedRowError as exc:
            logger.warning("Skipping malformed set in workout %s: %s", workout_id, exc)

    return LoggedWorkout(
        workout_id=workout_id,
        focus=str(row.get("focus") or ""),
        completed_on=completed_on,
        sets=tuple(sets),
        duration_minutes=duration,
    )


def parse_workout_rows(rows: Iterable[Mapping[str, Any]]) -> list[LoggedWorkout]:
    """Convert history rows, skipping corrupt ones, most recent first."""
    workouts: list[LoggedWorkout] = []
    for index, row in enumerate(rows):
        try:
            workouts.append(parse_workout_row(row))
        except MalformedRowError as exc:
            logger.warning("Skipping malformed workout row %d: %s", index, exc)
    return sorted(workouts, key=lambda w: w.completed_on, reverse=True)


def parse_set_rows(rows: Iterable[Mapping[str, Any]]) -> list[LoggedSet]:
    """Convert a flat list of logged sets (order preserved), skipping corrupt ones."""
    sets: list[LoggedSet] = []
    for index, row in enumerate(rows):
        try:
            sets.append(parse_set_row(row))
        except MalformedRowError as exc:
            logger.warning("Skipping malformed set row %d: %s", index, exc)
    return sets


def parse_planned_sets(rows: Iterable[Mapping[str, Any]]) -> list[PlannedSet]:
    """Convert planned set rows (targets, not actuals), skipping corrupt ones."""
    planned: list[PlannedSet] = []
    for index, row in enumerate(rows):
        try:
            if not isinstance(row, Mapping):
                raise MalformedRowError("planned set must be an object")
            exercise_id, name, muscle_group = _exercise_fields(row)
            planned.append(PlannedSet(
                exercise_id=exercise_id,
                set_order=_opt_int(row.get("set_order")) or index,
                target_load=_opt_float(row.get("target_load")),
                target_reps=_opt_int(row.get("target_reps")),
                target_rpe=_opt_float(row.get("target_rpe")),
                is_warmup=bool(row.get("is_warmup", False)),
                rest_seconds=_opt_int(row.get("rest_seconds")),
                exercise_name=name,
                muscle_group=muscle_group,
            ))
        except (MalformedRowError, TypeError, ValueError) as exc:
            logger.warning("Skipping malformed planned set %d: %s", index, exc)
    return planned


def parse_split_pattern(payload: Any) -> Optional[SplitPattern]:
    """Pattern detector payload ``{type, confidence, data: {splits}, name}``.

    Returns None (absent) for anything that does not parse.
    """
    if not payload:
        return None
    try:
        data = payload.get("data") or {}
        splits = tuple(str(s) for s in data.get("splits") or ())
        confidence = float(payload["confidence"])
        if not 0.0 <= confidence <= 1.0:
            raise ValueError(f"confidence must be 0-1, got {confidence}")
        distribution = data.get("focus_distribution") or {}
        return SplitPattern(
            name=str(payload.get("name") or ""),
            splits=splits,
            confidence=confidence,
            pattern_type=str(payload.get("type") or "training_split"),
            days_per_week=_opt_float(data.get("days_per_week")),
            focus_distribution=tuple((str(k), int(v)) for k, v in distribution.items()),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        logger.warning("Ignoring malformed split pattern: %s", exc)
        return None


def parse_readiness_check_in(row: Any) -> Optional[ReadinessCheckIn]:
    """Readiness store row → ReadinessCheckIn; None when absent or corrupt."""
    if not row:
        return None
    try:
        adjustment = row.get("suggested_adjustment")
        check_in = ReadinessCheckIn(
            check_in_date=parse_date(row.get("check_in_date")) or date.today(),
            sleep_quality=int(row["sleep_quality"]),
            muscle_soreness=int(row["muscle_soreness"]),
            stress_level=int(row["stress_level"]),
            readiness_score=_opt_int(row.get("readiness_score")),
            suggested_adjustment=(
                parse_enum(ReadinessAdjustment, adjustment, "suggested_adjustment")
                if adjustment else None
            ),
        )
        for name in ("sleep_quality", "muscle_soreness", "stress_level"):
            value = getattr(check_in, name)
            if not READINESS_SCALE_MIN <= value <= READINESS_SCALE_MAX:
                raise ValueError(f"{name} must be 1-5, got {value}")
        return check_in
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        logger.warning("Ignoring malformed readiness check-in: %s", exc)
        return None


def _require(payload: Mapping[str, Any], key: str) -> Any:
    if payload.get(key) is None:
        raise InvalidConfigError(f"Missing required field {key!r}", field=key)
    return payload[key]


def _config_int(payload: Mapping[str, Any], key: str) -> int:
    value = _require(payload, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value != int(value):
        raise InvalidConfigError(f"{key} must be an integer, got {value!r}", field=key)
    return int(value)


def parse_block_config(payload: Mapping[str, Any]) -> BlockConfig:
    """Block config JSON (camelCase keys) → BlockConfig.

    Raises:
        InvalidConfigError: Missing field, unknown enum value, or a value
            outside the input contract.
    """
    if not isinstance(payload, Mapping):
        raise InvalidConfigError("Block config must be a JSON object")

    phase = payload.get("phase")
    equipment = payload.get("equipment")
    minutes = payload.get("sessionDurationMinutes")
    return BlockConfig(
        goal=parse_enum(TrainingGoal, _require(payload, "goal"), "goal"),
        duration_weeks=_config_int(payload, "durationWeeks"),
        days_per_week=_config_int(payload, "daysPerWeek"),
        experience=parse_enum(Experience, _require(payload, "experience"), "experience"),
        phase=parse_enum(TrainingPhase, phase, "phase") if phase else None,
        focus_lifts=tuple(str(x) for x in payload.get("focusLifts") or ()),
        equipment=tuple(str(x) for x in equipment) if equipment is not None else None,
        session_minutes=(
            _config_int(payload, "sessionDurationMinutes") if minutes is not None else None
        ),
    )


def parse_signal_rows(rows: Iterable[Mapping[str, Any]]) -> list[JourneySignal]:
    """Journey signal log rows ``{signal_type, created_at, context}``, skipping corrupt ones."""
    signals: list[JourneySignal] = []
    for index, row in enumerate(rows):
        try:
            created_at = datetime.fromisoformat(str(row["created_at"]).replace("Z", "+00:00"))
            if created_at.tzinfo is None:
                created_at = created_at.replace(tzinfo=timezone.utc)
            context = row.get("context")
            signals.append(JourneySignal(
                signal_type=parse_enum(SignalType, row["signal_type"], "signal_type"),
                created_at=created_at,
                context=dict(context) if isinstance(context, Mapping) else None,
            ))
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping malformed signal row %d: %s", index, exc)
    return signals
