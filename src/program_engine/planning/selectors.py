"""Split and periodization selection: exact match first, nearest fallback."""

from __future__ import annotations

import logging

from program_engine.catalog import splits_for_goal, templates_for_goal
from program_engine.exceptions import ConfigurationError
from program_engine.models.block import BlockConfig, PeriodizationTemplate, TrainingSplit

logger = logging.getLogger(__name__)


def select_training_split(config: BlockConfig) -> TrainingSplit:
    """Choose the training split for a block request.

    Prefers a goal-suitable split with exactly ``days_per_week`` days;
    otherwise the goal-suitable split closest in day count (catalog order
    breaks ties).

    Args:
        config: The block request.

    Returns:
        The selected TrainingSplit.

    Raises:
        ConfigurationError: If the catalog has no split for the goal.
    """
    candidates = splits_for_goal(config.goal)
    if not candidates:
        raise ConfigurationError(f"No training split defined for goal {config.goal.name.lower()}")

    for split in candidates:
        if split.days_per_week == config.days_per_week:
            return split

    nearest = min(candidates, key=lambda s: abs(s.days_per_week - config.days_per_week))
    logger.debug(
        "No %d-day split for %s; using %s",
        config.days_per_week, config.goal.name.lower(), nearest.id,
    )
    return nearest


def select_periodization_template(config: BlockConfig) -> PeriodizationTemplate:
    """Choose the periodization template for a block request.

    Filters by goal and experience, preferring a template whose duration
    matches the request. If nothing suits the experience level, the first
    template for the goal is used.

    Args:
        config: The block request.

    Returns:
        The selected PeriodizationTemplate (never None).

    Raises:
        ConfigurationError: If the catalog has no template for the goal.
    """
    for_goal = templates_for_goal(config.goal)
    if not for_goal:
        raise ConfigurationError(
            f"No periodization template defined for goal {config.goal.name.lower()}"
        )

    compatible = [t for t in for_goal if config.experience in t.suitable_for]
    if not compatible:
        logger.debug(
            "No %s template suits %s lifters; using %s",
            config.goal.name.lower(), config.experience.name.lower(), for_goal[0].id,
        )
        return for_goal[0]

    for template in compatible:
        if template.duration_weeks == config.duration_weeks:
            return template
    return compatible[0]
