"""
Build a SchedulingResult from the optimizer's state.

Walks venue-parent and prerequisite links back from the terminal events
with an explicit worklist, so deep prerequisite chains never hit the
recursion limit.
"""

from .models import Event, EventCatalog, Objective
from .optimizer import OptimizerState
from .types import SchedulingResult
from .venue_index import finish_order_key


def reconstruct_schedule(catalog: EventCatalog, state: OptimizerState) -> tuple[Event, ...]:
    """
    Recover the chosen events, each exactly once, sorted by finish time.

    An event reachable both as a venue parent and as a shared prerequisite
    is still included only once.
    """
    visited: set[int] = set()
    worklist = list(reversed(state.terminals))

    while worklist:
        event_id = worklist.pop()
        if event_id in visited:
            continue
        visited.add(event_id)

        event = catalog[event_id]
        venue_parent = state.parent.get(event_id)
        if venue_parent is not None:
            worklist.append(venue_parent)
        worklist.extend(event.required_ids)

    return tuple(sorted((catalog[i] for i in visited), key=finish_order_key))


def build_scheduling_result(
    catalog: EventCatalog,
    state: OptimizerState,
    objective: Objective,
) -> SchedulingResult:
    """Turn the optimizer state into the public result."""
    return SchedulingResult(
        status="solved",
        objective=objective,
        total_score=state.total_score,
        events=reconstruct_schedule(catalog, state),
    )
