"""Command-line entry point — run engine operations on JSON files.

Usage:
    program-engine generate --config block.json [--name NAME]
    program-engine adjust --sets sets.json --sleep 2 --soreness 4 --stress 3 [--level light]
    program-engine rotation --history history.json [--pattern pattern.json] [--readiness r.json]
    program-engine progression --history sets.json [--phase deload] [--recovery poor]
    program-engine recommend --goal strength [--phase accumulation] [--weeks-in-phase 4]
    program-engine journey --signals signals.json

Every command prints JSON to stdout. Unreadable or invalid input exits
with status 2.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any

from program_engine import config
from program_engine.engine import ProgramEngine
from program_engine.exceptions import ConfigurationError
from program_engine.history.provider import (
    parse_block_config,
    parse_enum,
    parse_planned_sets,
    parse_readiness_check_in,
    parse_set_rows,
    parse_signal_rows,
    parse_split_pattern,
    parse_workout_rows,
)
from program_engine.models.enums import (
    ReadinessAdjustment,
    RecoveryStatus,
    TrainingGoal,
    TrainingPhase,
)
from program_engine.readiness.adjustments import summarize_adjustments
from program_engine.readiness.analysis import analyze_readiness
from program_engine.serialization.wire import (
    adjusted_sets_to_dict,
    adjustments_to_dict,
    analysis_to_dict,
    block_to_dict,
    progression_to_dict,
    recommendations_to_dict,
    scores_to_dict,
    suggestion_to_dict,
    summary_to_dict,
    to_json_string,
)

logger = logging.getLogger(__name__)

EXIT_INPUT_ERROR = 2
EXIT_CATALOG_ERROR = 1


def _load_json(path: Path) -> Any:
    with open(path) as f:
        return json.load(f)


def _cmd_generate(engine: ProgramEngine, args: argparse.Namespace) -> Any:
    block_config = parse_block_config(_load_json(args.config))
    return block_to_dict(engine.generate_block(block_config, name=args.name))


def _cmd_adjust(engine: ProgramEngine, args: argparse.Namespace) -> Any:
    sets = parse_planned_sets(_load_json(args.sets))
    analysis = analyze_readiness(args.sleep, args.soreness, args.stress)
    level = parse_enum(ReadinessAdjustment, args.level, "level") if args.level else None
    adjustments, adjusted = engine.adjust_workout(
        sets, analysis, level, available_minutes=args.available_minutes,
    )
    return {
        "readiness": analysis_to_dict(analysis),
        "adjustments": adjustments_to_dict(adjustments),
        "summary": summary_to_dict(summarize_adjustments(adjustments)),
        "sets": adjusted_sets_to_dict(adjusted),
    }


def _cmd_rotation(engine: ProgramEngine, args: argparse.Namespace) -> Any:
    history = parse_workout_rows(_load_json(args.history))
    pattern = parse_split_pattern(_load_json(args.pattern)) if args.pattern else None
    check_in = parse_readiness_check_in(_load_json(args.readiness)) if args.readiness else None
    today = date.fromisoformat(args.today) if args.today else None
    suggestion = engine.suggest_next_session(history, pattern, check_in, today=today)
    return suggestion_to_dict(suggestion) if suggestion is not None else None


def _cmd_progression(engine: ProgramEngine, args: argparse.Namespace) -> Any:
    history = parse_set_rows(_load_json(args.history))
    phase = parse_enum(TrainingPhase, args.phase, "phase") if args.phase else None
    recovery = parse_enum(RecoveryStatus, args.recovery, "recovery") if args.recovery else None
    suggestion = engine.suggest_progression(history, phase, recovery)
    return progression_to_dict(suggestion) if suggestion is not None else None


def _cmd_recommend(engine: ProgramEngine, args: argparse.Namespace) -> Any:
    goal = parse_enum(TrainingGoal, args.goal, "goal")
    phase = parse_enum(TrainingPhase, args.phase, "phase") if args.phase else None
    return recommendations_to_dict(engine.recommend_next_blocks(
        goal, phase, args.weeks_in_phase, args.weeks_to_competition,
    ))


def _cmd_journey(engine: ProgramEngine, args: argparse.Namespace) -> Any:
    signals = parse_signal_rows(_load_json(args.signals))
    return scores_to_dict(engine.journey_scores(signals))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="program-engine", description="Strength program engine")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a training block")
    gen.add_argument("--config", type=Path, required=True, help="Block config JSON")
    gen.add_argument("--name", help="Block name override")
    gen.set_defaults(handler=_cmd_generate)

    adj = sub.add_parser("adjust", help="Adjust a planned session for readiness")
    adj.add_argument("--sets", type=Path, required=True, help="Planned sets JSON")
    adj.add_argument("--sleep", type=int, required=True, help="Sleep quality 1-5")
    adj.add_argument("--soreness", type=int, required=True, help="Muscle soreness 1-5")
    adj.add_argument("--stress", type=int, required=True, help="Stress level 1-5")
    adj.add_argument("--level", help="Override level: full, moderate, light, rest")
    adj.add_argument("--available-minutes", type=float, help="Time available for the session")
    adj.set_defaults(handler=_cmd_adjust)

    rot = sub.add_parser("rotation", help="Suggest the next split in the rotation")
    rot.add_argument("--history", type=Path, required=True, help="Workout history JSON")
    rot.add_argument("--pattern", type=Path, help="Detected pattern JSON")
    rot.add_argument("--readiness", type=Path, help="Readiness check-in JSON")
    rot.add_argument("--today", help="Reference date YYYY-MM-DD")
    rot.set_defaults(handler=_cmd_rotation)

    prog = sub.add_parser("progression", help="Suggest the next load for one exercise")
    prog.add_argument("--history", type=Path, required=True, help="Logged sets JSON, newest first")
    prog.add_argument("--phase", help="Current block phase")
    prog.add_argument("--recovery", help="Recovery status: good, moderate, poor")
    prog.set_defaults(handler=_cmd_progression)

    rec = sub.add_parser("recommend", help="Recommend the next training blocks")
    rec.add_argument("--goal", required=True, help="Training goal")
    rec.add_argument("--phase", help="Current phase")
    rec.add_argument("--weeks-in-phase", type=int, default=0)
    rec.add_argument("--weeks-to-competition", type=int)
    rec.set_defaults(handler=_cmd_recommend)

    jrn = sub.add_parser("journey", help="Score journeys from a signal log")
    jrn.add_argument("--signals", type=Path, required=True, help="Journey signals JSON")
    jrn.set_defaults(handler=_cmd_journey)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        result = args.handler(ProgramEngine(), args)
    except (OSError, ValueError) as exc:
        logger.error("Invalid input: %s", exc)
        return EXIT_INPUT_ERROR
    except ConfigurationError as exc:
        logger.error("Catalog error: %s", exc)
        return EXIT_CATALOG_ERROR

    print(to_json_string(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
