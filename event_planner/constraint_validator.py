"""
Constraint validation for a chosen schedule.

This module checks that a set of chosen events still satisfies the hard
constraints without re-running the optimizer. The CLI uses it as a sanity
check on generated schedules, and it can vet hand-edited schedules too.
"""

from collections import defaultdict
from typing import Iterable

from .models import Event


class ConstraintViolation(Exception):
    """Raised when a scheduling constraint is violated."""

    pass


def validate_schedule(chosen: Iterable[Event]) -> None:
    """
    Validate that the chosen events form a feasible schedule.

    Args:
        chosen: The events in the schedule

    Raises:
        ConstraintViolation: If any constraint is violated
    """
    events = list(chosen)
    event_map = {e.id: e for e in events}

    if len(event_map) != len(events):
        raise ConstraintViolation("Schedule lists the same event more than once")

    # Validate venue conflicts (no two events at same venue at same time)
    _validate_venue_conflicts(events)

    # Validate that every prerequisite is scheduled and finishes in time
    _validate_dependency_closure(events, event_map)


def _validate_venue_conflicts(events: list[Event]) -> None:
    """Validate that no two events use the same venue at overlapping times."""

    venue_events: dict[str, list[Event]] = defaultdict(list)
    for event in events:
        venue_events[event.venue].append(event)

    for venue, venue_event_list in venue_events.items():
        venue_event_list.sort(key=lambda e: (e.start, e.end, e.id))

        # Only events still running at the next start can clash with it
        running: list[Event] = []
        for next_event in venue_event_list:
            running = [e for e in running if e.end > next_event.start]
            for current_event in running:
                if current_event.overlaps(next_event):
                    raise ConstraintViolation(
                        f"Venue conflict at {venue}: "
                        f"{current_event.id} ({current_event.start}-{current_event.end}) "
                        f"overlaps with {next_event.id} ({next_event.start}-{next_event.end})"
                    )
            running.append(next_event)


def _validate_dependency_closure(events: list[Event], event_map: dict[int, Event]) -> None:
    """Validate that each event's prerequisites are scheduled and end before it starts."""

    for event in events:
        for dep_id in event.required_ids:
            dep = event_map.get(dep_id)
            if dep is None:
                raise ConstraintViolation(
                    f"Event {event.id} is scheduled without its prerequisite {dep_id}"
                )
            if dep.end > event.start:
                raise ConstraintViolation(
                    f"Event {event.id} starts at {event.start} before its prerequisite "
                    f"{dep_id} ends at {dep.end}"
                )


def validate_and_report(chosen: Iterable[Event]) -> tuple[bool, list[str]]:
    """
    Validate a schedule and return detailed report.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    try:
        validate_schedule(chosen)
        return (True, [])
    except ConstraintViolation as e:
        return (False, [str(e)])
