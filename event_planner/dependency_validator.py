"""
Dependency graph validation for an event catalog.

Builds the prerequisite graph, rejects unknown references and cycles via
Kahn's algorithm, and only then checks that every prerequisite finishes
before its dependent starts. The first failure aborts validation.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterable

from .errors import (
    DependencyCycle,
    InvalidEvent,
    SchedulingError,
    TimingViolation,
    UnknownDependency,
)
from .models import Event, EventCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependencyGraph:
    """Prerequisite graph: edges point from a prerequisite to its dependents."""

    dependents: dict[int, list[int]]
    indegree: dict[int, int]

    @property
    def edge_count(self) -> int:
        return sum(self.indegree.values())


def check_event_records(catalog: EventCatalog) -> None:
    """Reject records that no schedule could use (negative values, end before start)."""
    for event in catalog:
        if event.end < event.start:
            raise InvalidEvent(event.id, f"end {event.end} is before start {event.start}")
        if event.attendance < 0:
            raise InvalidEvent(event.id, f"attendance {event.attendance} is negative")
        if event.revenue < 0:
            raise InvalidEvent(event.id, f"revenue {event.revenue} is negative")


def build_dependency_graph(catalog: EventCatalog) -> DependencyGraph:
    """
    Build the prerequisite graph for a catalog.

    Raises:
        UnknownDependency: If a prerequisite id is not in the catalog
    """
    dependents: dict[int, list[int]] = {event.id: [] for event in catalog}
    indegree: dict[int, int] = {event.id: 0 for event in catalog}

    for event in catalog:
        for dep_id in event.required_ids:
            if dep_id not in catalog:
                raise UnknownDependency(event.id, dep_id)
            dependents[dep_id].append(event.id)
            indegree[event.id] += 1

    return DependencyGraph(dependents=dependents, indegree=indegree)


def topological_order(graph: DependencyGraph) -> list[int]:
    """
    Order events so every prerequisite precedes its dependents.

    Zero-indegree events are seeded in catalog order, so the result is stable.

    Raises:
        DependencyCycle: If some events can never reach indegree zero
    """
    indegree = dict(graph.indegree)
    queue = deque(node for node, degree in indegree.items() if degree == 0)
    order: list[int] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph.dependents[node]:
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                queue.append(neighbor)

    if len(order) < len(indegree):
        remaining = {node for node, degree in indegree.items() if degree > 0}
        raise DependencyCycle(tuple(sorted(_cycle_members(graph, remaining))))

    return order


def _cycle_members(graph: DependencyGraph, remaining: set[int]) -> set[int]:
    """Drop nodes that only hang off a cycle downstream, keeping the cycle itself."""
    members = set(remaining)
    changed = True
    while changed:
        changed = False
        for node in list(members):
            if not any(n in members for n in graph.dependents[node]):
                members.discard(node)
                changed = True
    # Never report an empty set for a non-empty leftover
    return members or remaining


def check_timing(catalog: EventCatalog) -> None:
    """
    Check that every prerequisite ends no later than its dependent starts.

    Events are checked in catalog order and prerequisites in declared order.
    """
    for event in catalog:
        for dep_id in event.required_ids:
            dep = catalog[dep_id]
            if dep.end > event.start:
                raise TimingViolation(event.id, dep_id, event.start, dep.end)


def validate_catalog(catalog: EventCatalog) -> list[int]:
    """
    Run all structural and timing checks and return the topological order.

    Raises:
        SchedulingError: The first violation found
    """
    check_event_records(catalog)
    graph = build_dependency_graph(catalog)
    logger.debug(
        "Dependency graph: %d events, %d edges", len(graph.indegree), graph.edge_count
    )
    order = topological_order(graph)
    check_timing(catalog)
    return order


def validate_and_report(events: Iterable[Event] | EventCatalog) -> tuple[bool, list[str]]:
    """
    Validate a catalog and return a report instead of raising.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    try:
        catalog = events if isinstance(events, EventCatalog) else EventCatalog(events)
        validate_catalog(catalog)
        return (True, [])
    except SchedulingError as e:
        return (False, [str(e)])
