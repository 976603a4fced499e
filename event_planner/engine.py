"""
Request/response boundary of the event planner.

One call validates a catalog, scores it, optimizes and rebuilds the
schedule. Nothing is shared between calls: bounds, tables and the venue
index all belong to the call that built them.
"""

import logging
from typing import Iterable

from .dependency_validator import validate_catalog
from .errors import InvalidObjective, SchedulingError
from .models import Event, EventCatalog, Objective
from .optimizer import optimize
from .schedule_builder import build_scheduling_result
from .scoring import ScoringConfig, compute_weights
from .types import SchedulingResult
from .venue_index import VenueIndex

logger = logging.getLogger(__name__)


def _scoring_config(objective: Objective | str, alpha: float) -> ScoringConfig:
    try:
        parsed = Objective.parse(objective)
    except ValueError as e:
        raise InvalidObjective(str(e)) from e
    return ScoringConfig(objective=parsed, alpha=alpha)


def solve(
    events: Iterable[Event] | EventCatalog,
    objective: Objective | str = Objective.ATTENDANCE,
    alpha: float = 0.5,
) -> SchedulingResult:
    """
    Compute the best schedule for a catalog.

    Args:
        events: Event records, or an already built catalog
        objective: What to maximize
        alpha: Blend coefficient for the hybrid objective (1.0 = attendance only)

    Returns:
        A solved SchedulingResult

    Raises:
        SchedulingError: If the request or catalog fails validation
    """
    config = _scoring_config(objective, alpha)
    catalog = events if isinstance(events, EventCatalog) else EventCatalog(events)

    if not len(catalog):
        logger.info("No events provided, returning an empty schedule")
        return SchedulingResult.empty(config.objective)

    order = validate_catalog(catalog)
    weights = compute_weights(catalog, config)
    index = VenueIndex(catalog)
    state = optimize(catalog, order, weights, index)
    result = build_scheduling_result(catalog, state, config.objective)

    logger.info(
        "Scheduled %d of %d events (%s), score %d",
        len(result.events),
        len(catalog),
        config.objective.value,
        result.total_score,
    )
    return result


def schedule_events(
    events: Iterable[Event] | EventCatalog,
    objective: Objective | str = Objective.ATTENDANCE,
    alpha: float = 0.5,
) -> SchedulingResult:
    """
    Like ``solve`` but report validation failures as an "invalid" result.

    A failed result never carries a partial schedule.
    """
    try:
        return solve(events, objective, alpha)
    except SchedulingError as e:
        logger.warning("Scheduling failed: %s", e)
        return SchedulingResult.failure(_reported_objective(objective), e)


def _reported_objective(objective: Objective | str) -> Objective:
    """Objective to put on a failed result; unknown names report as attendance."""
    try:
        return Objective.parse(objective)
    except ValueError:
        return Objective.ATTENDANCE
