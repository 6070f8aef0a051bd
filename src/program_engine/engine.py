"""ProgramEngine — the facade that ties planning, rotation, readiness and progression together."""

from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from typing import Iterable, Sequence

from program_engine.exceptions import InvalidConfigError
from program_engine.journey.scorer import calculate_signal_scores
from program_engine.journey.tracker import SignalTracker
from program_engine.models.block import BlockConfig, GeneratedBlock
from program_engine.models.enums import (
    PainSeverity,
    ReadinessAdjustment,
    RecoveryStatus,
    SignalType,
    TrainingGoal,
    TrainingPhase,
)
from program_engine.models.history import LiftRecord, LoggedSet, LoggedWorkout
from program_engine.models.journey import JourneyScores, JourneySignal
from program_engine.models.progression import ProgressionResult, ProgressionSuggestion
from program_engine.models.readiness import (
    AdjustedSet,
    PainReportAdjustment,
    PlannedSet,
    ReadinessAnalysis,
    ReadinessCheckIn,
    WorkoutAdjustments,
)
from program_engine.models.recommendation import BlockRecommendation
from program_engine.models.rotation import RotationSuggestion, SplitPattern
from program_engine.planning.assembler import assemble_block
from program_engine.planning.recommendations import recommend_next_blocks
from program_engine.progression.detection import detect_progression, find_best_previous_set
from program_engine.progression.suggester import suggest_progression
from program_engine.readiness.adjustments import (
    adjust_session,
    generate_readiness_adjustments,
    with_skips,
)
from program_engine.readiness.analysis import analyze_check_in
from program_engine.readiness.constraints import (
    apply_pain_adjustment,
    estimate_planned_duration,
    generate_pain_adjustments,
    generate_time_constraint_adjustments,
)
from program_engine.rotation.detector import (
    last_session_for_focus,
    merge_readiness,
    next_in_rotation,
)
from program_engine.rotation.patterns import detect_training_split

logger = logging.getLogger(__name__)


class ProgramEngine:
    """Stateless entry point for every engine operation.

    The only state is an optional SignalTracker; when present, block
    generation and readiness adjustments are recorded as journey signals.

    Usage:
        engine = ProgramEngine()
        block = engine.generate_block(config)
        suggestion = engine.suggest_next_session(history, today=date.today())
    """

    def __init__(self, tracker: SignalTracker | None = None) -> None:
        self.tracker = tracker

    # -----------------------------------------------------------------------
    # Planning
    # -----------------------------------------------------------------------

    def generate_block(
        self,
        config: BlockConfig,
        *,
        name: str | None = None,
        lift_records: Iterable[LiftRecord] = (),
    ) -> GeneratedBlock:
        """Assemble a periodized block for ``config``.

        Raises:
            ConfigurationError: The catalog has no template or split for
                the requested goal.
        """
        block = assemble_block(config, name=name, lift_records=lift_records)
        self._track(
            SignalType.CREATE_BLOCK,
            {"template_id": block.template_id, "weeks": block.total_weeks},
        )
        return block

    def recommend_next_blocks(
        self,
        goal: TrainingGoal,
        current_phase: TrainingPhase | None = None,
        weeks_in_phase: int = 0,
        weeks_to_competition: int | None = None,
    ) -> list[BlockRecommendation]:
        return recommend_next_blocks(goal, current_phase, weeks_in_phase, weeks_to_competition)

    # -----------------------------------------------------------------------
    # Rotation
    # -----------------------------------------------------------------------

    def suggest_next_session(
        self,
        history: Sequence[LoggedWorkout],
        pattern: SplitPattern | None = None,
        check_in: ReadinessCheckIn | None = None,
        today: date | None = None,
    ) -> RotationSuggestion | None:
        """Suggest the next split, with its last session and today's readiness.

        Args:
            history: Completed workouts.
            pattern: Detected split; detected from ``history`` when omitted.
            check_in: Readiness check-in; only a same-day check-in with
                answers on the 1-5 scale is used.
            today: Reference date; defaults to date.today().

        Returns:
            RotationSuggestion, or None when no confident pattern exists.
        """
        today = today or date.today()
        if pattern is None:
            pattern = detect_training_split(history)

        suggestion = next_in_rotation(history, pattern, today=today)
        if suggestion is None:
            return None

        last_session = last_session_for_focus(history, suggestion.next_focus)
        if last_session is not None:
            suggestion = dataclasses.replace(suggestion, last_session=last_session)

        if check_in is not None and check_in.check_in_date == today:
            try:
                suggestion = merge_readiness(suggestion, analyze_check_in(check_in))
            except InvalidConfigError as exc:
                logger.warning("Ignoring invalid readiness check-in: %s", exc)
        elif check_in is not None:
            logger.debug("Ignoring readiness check-in from %s", check_in.check_in_date)
        return suggestion

    # -----------------------------------------------------------------------
    # Readiness
    # -----------------------------------------------------------------------

    def adjust_workout(
        self,
        sets: Sequence[PlannedSet],
        readiness: ReadinessCheckIn | ReadinessAnalysis,
        level: ReadinessAdjustment | None = None,
        *,
        available_minutes: float | None = None,
    ) -> tuple[WorkoutAdjustments, tuple[AdjustedSet, ...]]:
        """Adjust a planned session for today's readiness.

        Args:
            sets: Planned sets in session order.
            readiness: Today's check-in, or an analysis already computed.
            level: Level the lifter accepted; defaults to the suggested one.
            available_minutes: When the session will not fit, isolation
                work is cut before the readiness modifiers are applied.

        Returns:
            (WorkoutAdjustments, adjusted sets).
        """
        analysis = (
            analyze_check_in(readiness) if isinstance(readiness, ReadinessCheckIn) else readiness
        )
        level = level or analysis.suggestion
        adjustments = generate_readiness_adjustments(analysis, level)

        if available_minutes is not None:
            constraint = generate_time_constraint_adjustments(
                sets, available_minutes, estimate_planned_duration(sets),
            )
            adjustments = with_skips(adjustments, constraint.skip_exercises)

        if level != ReadinessAdjustment.FULL:
            self._track(
                SignalType.ADJUST_FOR_READINESS,
                {"score": analysis.score, "adjustment": level.name.lower()},
            )
        return adjustments, adjust_session(sets, adjustments)

    def adjust_for_pain(
        self,
        sets: Sequence[PlannedSet],
        body_part: str,
        severity: PainSeverity,
    ) -> tuple[PainReportAdjustment, tuple[AdjustedSet, ...]]:
        adjustment = generate_pain_adjustments(body_part, severity, sets)
        return adjustment, apply_pain_adjustment(sets, adjustment)

    # -----------------------------------------------------------------------
    # Progression and journeys
    # -----------------------------------------------------------------------

    def suggest_progression(
        self,
        history: Sequence[LoggedSet],
        block_phase: TrainingPhase | None = None,
        recovery_status: RecoveryStatus | None = None,
    ) -> ProgressionSuggestion | None:
        return suggest_progression(history, block_phase, recovery_status)

    def detect_progression(
        self,
        current: LoggedSet,
        previous_sets: Sequence[LoggedSet],
    ) -> ProgressionResult | None:
        """Classify a just-logged set against the best match from last session."""
        return detect_progression(current, find_best_previous_set(current, previous_sets))

    def journey_scores(
        self,
        signals: Iterable[JourneySignal] | None = None,
        *,
        now: datetime | None = None,
    ) -> JourneyScores:
        """Score journeys from ``signals``, or from the tracker's recent log."""
        if signals is None:
            if self.tracker is None:
                return JourneyScores()
            return self.tracker.scores(now=now)
        return calculate_signal_scores(signals, now=now)

    def _track(self, signal_type: SignalType, context: dict) -> None:
        if self.tracker is not None:
            self.tracker.track_signal(signal_type, context)
