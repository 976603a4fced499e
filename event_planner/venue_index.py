"""
Venue grouping for conflict lookups.

Events are grouped by venue and each group is sorted by finish time, so the
latest event that finishes before a given start is one binary search away.
"""

from bisect import bisect_right
from collections import defaultdict
from typing import Iterable

from .models import Event


def finish_order_key(event: Event) -> tuple[int, int, int]:
    """Sort key for a venue group: end time, then start time, then id."""
    return (event.end, event.start, event.id)


class VenueIndex:
    """Events per venue, sorted ascending by finish time."""

    def __init__(self, events: Iterable[Event]):
        groups: dict[str, list[Event]] = defaultdict(list)
        for event in events:
            groups[event.venue].append(event)

        self._groups: dict[str, list[Event]] = {}
        self._ends: dict[str, list[int]] = {}
        self._positions: dict[int, int] = {}
        for venue, group in groups.items():
            group.sort(key=finish_order_key)
            self._groups[venue] = group
            self._ends[venue] = [e.end for e in group]
            for position, event in enumerate(group):
                self._positions[event.id] = position

    @property
    def venues(self) -> list[str]:
        return list(self._groups)

    def events_at(self, venue: str) -> list[Event]:
        """Events at a venue in finish order."""
        return list(self._groups.get(venue, ()))

    def compatible_count(self, venue: str, start: int) -> int:
        """Number of leading events in the venue group that end at or before ``start``."""
        return bisect_right(self._ends.get(venue, ()), start)

    def predecessor_count(self, event: Event) -> int:
        """
        Number of events that precede ``event`` in its venue group and end by its start.

        A zero-length event sorts among events ending at its own start, so the
        count is capped at the event's position.
        """
        count = self.compatible_count(event.venue, event.start)
        return min(count, self._positions[event.id])

    def latest_compatible(self, event: Event) -> Event | None:
        """
        Find the latest-finishing event at the same venue that ends by ``event.start``.

        Back-to-back events (end == start) count as compatible.
        """
        count = self.predecessor_count(event)
        if count == 0:
            return None
        return self._groups[event.venue][count - 1]

    def overlap_clusters(self) -> list[list[Event]]:
        """
        Split each venue group into runs of transitively overlapping events.

        Two events in different clusters never clash.
        """
        clusters: list[list[Event]] = []
        for group in self._groups.values():
            current: list[Event] = []
            reach = None
            for event in sorted(group, key=lambda e: (e.start, e.end, e.id)):
                if current and reach is not None and event.start < reach:
                    current.append(event)
                    reach = max(reach, event.end)
                else:
                    if current:
                        clusters.append(current)
                    current = [event]
                    reach = event.end
            if current:
                clusters.append(current)
        return clusters
