"""
Joint optimizer for venue conflicts and prerequisite chains.

Pure functions over an already validated catalog. The catalog is split into
independent components: events are linked when they clash at a venue or
when one is a prerequisite of the other. Each component is solved on its own:

- Without prerequisite links a component is a single-venue weighted interval
  problem, and the venue DP table (own weight plus the best compatible
  predecessor at the venue) answers it directly.
- With prerequisite links the component is searched depth-first in reverse
  finish order. Choosing an event makes its prerequisites mandatory, and the
  per-venue DP maxima over the undecided events bound what is still reachable.
  The search is exact while it stays within ``SEARCH_NODE_BUDGET`` nodes.
  Past the budget the component falls back to a greedy pass over
  prerequisite closures, which takes polynomial time and always yields a
  feasible, dependency-closed schedule, though not necessarily the best one.
"""

import logging
from bisect import bisect_left, insort
from collections import defaultdict
from dataclasses import dataclass
from typing import NamedTuple

from .models import Event, EventCatalog
from .venue_index import VenueIndex, finish_order_key

logger = logging.getLogger(__name__)

# Nodes the exact search may visit per component before it gives up
SEARCH_NODE_BUDGET = 50_000


@dataclass(frozen=True)
class VenueTable:
    """Venue DP over a set of events, ignoring prerequisites."""

    dp: dict[int, int]  # best venue-feasible score of a run ending with the event
    predecessor: dict[int, int | None]  # best compatible earlier event at the venue


@dataclass(frozen=True)
class OptimizerState:
    """Everything the schedule builder needs to recover the chosen events."""

    dp: dict[int, int]
    parent: dict[int, int | None]  # previous chosen event at the same venue
    terminals: tuple[int, ...]  # last chosen event per venue and component
    total_score: int
    components: int = 0


class _Frame(NamedTuple):
    position: int
    score: int
    latest_by_venue: dict[str, Event]
    required: frozenset[int]
    chosen: tuple[int, ...]


def build_venue_table(index: VenueIndex, weights: dict[int, int]) -> VenueTable:
    """
    Compute the venue DP table for every event in the index.

    For each event: its own weight plus the highest score among the events at
    the same venue that finish by its start.
    """
    dp: dict[int, int] = {}
    predecessor: dict[int, int | None] = {}

    for venue in index.venues:
        # best_upto[id]: highest (dp, id) among the group up to and including id
        best_upto: dict[int, tuple[int, int]] = {}
        running: tuple[int, int] | None = None
        for event in index.events_at(venue):
            score = weights[event.id]
            previous = None
            latest = index.latest_compatible(event)
            if latest is not None and best_upto[latest.id][0] > 0:
                score += best_upto[latest.id][0]
                previous = best_upto[latest.id][1]
            dp[event.id] = score
            predecessor[event.id] = previous

            if running is None or score > running[0]:
                running = (score, event.id)
            best_upto[event.id] = running

    return VenueTable(dp=dp, predecessor=predecessor)


def split_components(catalog: EventCatalog, index: VenueIndex) -> list[list[Event]]:
    """Group events that interact through a venue clash or a prerequisite link."""
    root: dict[int, int] = {event.id: event.id for event in catalog}

    def find(node: int) -> int:
        while root[node] != node:
            root[node] = root[root[node]]
            node = root[node]
        return node

    def union(a: int, b: int) -> None:
        ra, rb = find(a), find(b)
        if ra != rb:
            root[rb] = ra

    for cluster in index.overlap_clusters():
        for event in cluster[1:]:
            union(cluster[0].id, event.id)
    for event in catalog:
        for dep_id in event.required_ids:
            union(event.id, dep_id)

    # Keep components and their members in catalog order
    components: dict[int, list[Event]] = {}
    for event in catalog:
        components.setdefault(find(event.id), []).append(event)
    return list(components.values())


def _best_chain(index: VenueIndex, table: VenueTable) -> list[int]:
    """Follow the venue DP back from the best-scoring event at each venue."""
    chosen: list[int] = []
    for venue in index.venues:
        best: Event | None = None
        for event in index.events_at(venue):
            if best is None or table.dp[event.id] > table.dp[best.id]:
                best = event
        if best is None or table.dp[best.id] <= 0:
            continue
        node: int | None = best.id
        while node is not None:
            chosen.append(node)
            node = table.predecessor[node]
    return chosen


def _prefix_bounds(order: list[Event], dp: dict[int, int]) -> list[int]:
    """bounds[k]: sum over venues of the best dp among ``order[:k]``."""
    bounds = [0]
    best_by_venue: dict[str, int] = {}
    total = 0
    for event in order:
        current = best_by_venue.get(event.venue, 0)
        if dp[event.id] > current:
            total += dp[event.id] - current
            best_by_venue[event.venue] = dp[event.id]
        bounds.append(total)
    return bounds


def _search_component(
    order: list[Event],
    weights: dict[int, int],
    table: VenueTable,
    budget: int = SEARCH_NODE_BUDGET,
) -> tuple[list[int], bool]:
    """
    Branch and bound over one component.

    ``order`` must be a topological order (every prerequisite before its
    dependents); it is walked backwards so that choosing an event can mark
    its prerequisites as mandatory before they are reached.

    Returns:
        The best schedule found and whether the search finished within
        ``budget`` nodes (only then is the schedule known to be optimal)
    """
    bounds = _prefix_bounds(order, table.dp)
    best_score = -1
    best_chosen: tuple[int, ...] = ()
    explored = 0

    stack = [_Frame(len(order) - 1, 0, {}, frozenset(), ())]
    while stack:
        if explored >= budget:
            break
        frame = stack.pop()
        explored += 1

        if frame.position < 0:
            if frame.score > best_score:
                best_score = frame.score
                best_chosen = frame.chosen
            continue

        if frame.score + bounds[frame.position + 1] <= best_score:
            continue

        event = order[frame.position]
        weight = weights[event.id]
        required = event.id in frame.required
        latest = frame.latest_by_venue.get(event.venue)
        fits = latest is None or not event.overlaps(latest)

        # Pushed first, popped last: including the event is explored first
        if not required:
            stack.append(frame._replace(position=frame.position - 1))
        if fits and (required or weight > 0):
            stack.append(
                _Frame(
                    position=frame.position - 1,
                    score=frame.score + weight,
                    latest_by_venue={**frame.latest_by_venue, event.venue: event},
                    required=frame.required | frozenset(event.required_ids),
                    chosen=frame.chosen + (event.id,),
                )
            )

    logger.debug(
        "Searched component of %d events: %d nodes, best score %d",
        len(order),
        explored,
        best_score,
    )
    return list(best_chosen), not stack


def _closures(order: list[Event]) -> dict[int, frozenset[int]]:
    """Each event together with everything it transitively requires."""
    closure: dict[int, frozenset[int]] = {}
    for event in order:
        members = {event.id}
        for dep_id in event.required_ids:
            members |= closure[dep_id]
        closure[event.id] = frozenset(members)
    return closure


def _clashes(timeline: list[tuple[int, int]], event: Event) -> bool:
    """
    Check ``event`` against a clash-free venue timeline of (start, end) pairs.

    Sorted by start, a clash-free timeline also has non-decreasing ends, so
    the last interval starting before ``event.end`` is the only candidate.
    """
    position = bisect_left(timeline, (event.end, event.end))
    return position > 0 and timeline[position - 1][1] > event.start


def _fits(added: list[Event], timelines: dict[str, list[tuple[int, int]]]) -> bool:
    """Whether ``added`` clashes neither with itself nor with the timelines."""
    reach: dict[str, int] = {}
    for event in sorted(added, key=lambda e: (e.start, e.end)):
        if event.start < reach.get(event.venue, event.start):
            return False
        if _clashes(timelines[event.venue], event):
            return False
        reach[event.venue] = max(reach.get(event.venue, event.end), event.end)
    return True


def _greedy_component(order: list[Event], weights: dict[int, int]) -> list[int]:
    """
    Greedy selection over prerequisite closures.

    Events are tried by the total weight of their closure, heaviest first, and
    each closure is added whole when it fits next to what is already chosen.
    """
    rank = {event.id: position for position, event in enumerate(order)}
    by_id = {event.id: event for event in order}
    closure = _closures(order)
    value = {
        event_id: sum(weights[member] for member in members)
        for event_id, members in closure.items()
    }

    chosen: set[int] = set()
    timelines: dict[str, list[tuple[int, int]]] = defaultdict(list)
    for event in sorted(order, key=lambda e: (-value[e.id], rank[e.id])):
        if weights[event.id] <= 0 or event.id in chosen:
            continue
        added = [by_id[member] for member in closure[event.id] - chosen]
        if not _fits(added, timelines):
            continue
        for member in added:
            insort(timelines[member.venue], (member.start, member.end))
            chosen.add(member.id)

    return sorted(chosen, key=rank.__getitem__)


def _solve_component(
    component: list[Event],
    rank: dict[int, int],
    weights: dict[int, int],
    table: VenueTable,
) -> list[int]:
    # Finish order with topological tie-break is itself a topological order
    walk = sorted(component, key=lambda e: (e.end, e.start, rank[e.id]))
    chosen, complete = _search_component(walk, weights, table, SEARCH_NODE_BUDGET)
    if complete:
        return chosen

    greedy = _greedy_component(walk, weights)
    searched_score = sum(weights[event_id] for event_id in chosen)
    greedy_score = sum(weights[event_id] for event_id in greedy)
    logger.info(
        "Search budget exhausted on a component of %d events, "
        "using the better of search (%d) and greedy (%d)",
        len(component),
        searched_score,
        greedy_score,
    )
    return greedy if greedy_score > searched_score else chosen


def optimize(
    catalog: EventCatalog,
    order: list[int],
    weights: dict[int, int],
    index: VenueIndex,
) -> OptimizerState:
    """
    Find a maximum-score feasible schedule.

    Args:
        catalog: The validated event catalog
        order: Topological order of the catalog's event ids
        weights: Per-event score under the chosen objective
        index: Venue index built over the whole catalog

    Returns:
        OptimizerState with the DP table, venue parents and terminal events
    """
    rank = {event_id: position for position, event_id in enumerate(order)}

    dp: dict[int, int] = {}
    parent: dict[int, int | None] = {}
    terminals: list[int] = []
    total_score = 0

    components = split_components(catalog, index)
    for component in components:
        component_index = VenueIndex(component)
        table = build_venue_table(component_index, weights)
        dp.update(table.dp)

        if any(event.required_ids for event in component):
            chosen = _solve_component(component, rank, weights, table)
        else:
            chosen = _best_chain(component_index, table)

        total_score += sum(weights[event_id] for event_id in chosen)

        by_venue: dict[str, list[Event]] = {}
        for event_id in chosen:
            event = catalog[event_id]
            by_venue.setdefault(event.venue, []).append(event)
        for venue_events in by_venue.values():
            venue_events.sort(key=finish_order_key)
            previous: int | None = None
            for event in venue_events:
                parent[event.id] = previous
                previous = event.id
            terminals.append(venue_events[-1].id)

    logger.debug(
        "Optimized %d events in %d components, total score %d",
        len(catalog),
        len(components),
        total_score,
    )
    return OptimizerState(
        dp=dp,
        parent=parent,
        terminals=tuple(terminals),
        total_score=total_score,
        components=len(components),
    )
