"""Shared helpers and fixtures for the event planner tests."""

import random
from itertools import combinations

import pytest

from event_planner.models import DEMO_EVENTS, Event


def make_event(
    id,
    start,
    end,
    attendance=10,
    revenue=5,
    venue="A",
    prerequisites=(),
):
    """Build an Event with sensible defaults."""
    return Event(
        id=id,
        start=start,
        end=end,
        attendance=attendance,
        revenue=revenue,
        venue=venue,
        prerequisites=tuple(prerequisites),
    )


def random_events(seed, max_size=12):
    """
    Random valid catalog: prerequisites only point at lower ids that end in time,
    so there are no cycles and no timing violations.
    """
    rng = random.Random(seed)
    size = rng.randint(1, max_size)
    venues = ["A", "B", "C"][: rng.randint(1, 3)]

    events = []
    for event_id in range(1, size + 1):
        start = rng.randint(0, 20)
        end = start + rng.randint(0, 6)
        candidates = [e.id for e in events if e.end <= start]
        prerequisites = []
        if candidates and rng.random() < 0.5:
            prerequisites = rng.sample(candidates, k=min(len(candidates), rng.randint(1, 2)))
            if rng.random() < 0.2:
                prerequisites.append(prerequisites[0])  # duplicates must not double count
        events.append(
            make_event(
                event_id,
                start,
                end,
                attendance=rng.randint(0, 50),
                revenue=rng.randint(0, 50),
                venue=rng.choice(venues),
                prerequisites=prerequisites,
            )
        )
    return events


def brute_force_best(events, weights):
    """Best total weight over every feasible subset (exponential, keep it small)."""
    best = 0
    for mask in range(1 << len(events)):
        chosen = [e for i, e in enumerate(events) if mask >> i & 1]
        ids = {e.id for e in chosen}
        if any(dep not in ids for e in chosen for dep in e.required_ids):
            continue
        if any(a.overlaps(b) for a, b in combinations(chosen, 2)):
            continue
        best = max(best, sum(weights[e.id] for e in chosen))
    return best


@pytest.fixture
def demo_events():
    return list(DEMO_EVENTS)
