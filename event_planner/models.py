from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from .errors import DuplicateEvent


class Objective(Enum):
    """What the optimizer maximizes"""

    ATTENDANCE = "attendance"
    REVENUE = "revenue"
    HYBRID = "hybrid"

    @classmethod
    def parse(cls, value: "str | int | Objective") -> "Objective":
        """Parse an objective from its name or from the menu codes 1/2/3."""
        if isinstance(value, Objective):
            return value
        text = str(value).strip().lower()
        if text in OBJECTIVE_MENU_CODES:
            return OBJECTIVE_MENU_CODES[text]
        try:
            return cls(text)
        except ValueError:
            choices = ", ".join(o.value for o in cls)
            raise ValueError(f"Unknown objective: {value!r} (expected one of {choices})") from None


OBJECTIVE_MENU_CODES: dict[str, Objective] = {
    "1": Objective.ATTENDANCE,
    "2": Objective.REVENUE,
    "3": Objective.HYBRID,
}


@dataclass(frozen=True)
class Event:
    id: int
    start: int
    end: int
    attendance: int
    revenue: int
    venue: str
    prerequisites: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of ids but store an immutable tuple
        if not isinstance(self.prerequisites, tuple):
            object.__setattr__(self, "prerequisites", tuple(self.prerequisites))

    @property
    def required_ids(self) -> tuple[int, ...]:
        """Prerequisite ids without duplicates, in first-seen order."""
        return tuple(dict.fromkeys(self.prerequisites))

    def overlaps(self, other: "Event") -> bool:
        """Check if two events clash at the same venue (back-to-back is fine)."""
        return (
            self.venue == other.venue
            and self.start < other.end
            and other.start < self.end
        )

    def describe(self) -> str:
        text = (
            f"ID {self.id} [{self.start}-{self.end}] Venue: {self.venue}"
            f" | Att: {self.attendance} | Rev: {self.revenue}"
        )
        if self.prerequisites:
            text += " | Deps: " + ", ".join(str(d) for d in self.prerequisites)
        return text


class EventCatalog:
    """Ordered, read-only collection of events with an id lookup."""

    def __init__(self, events: Iterable[Event]):
        self._events: tuple[Event, ...] = tuple(events)
        self._by_id: dict[int, Event] = {}
        for event in self._events:
            if event.id in self._by_id:
                raise DuplicateEvent(event.id)
            self._by_id[event.id] = event

    @property
    def events(self) -> tuple[Event, ...]:
        return self._events

    @property
    def ids(self) -> tuple[int, ...]:
        return tuple(e.id for e in self._events)

    def __getitem__(self, event_id: int) -> Event:
        return self._by_id[event_id]

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._by_id

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return f"EventCatalog({len(self._events)} events)"


# Predefined catalog: conflicts in HallA, dependency chain 3 -> 4 -> 6 and 1 -> 5
DEMO_EVENTS: tuple[Event, ...] = (
    Event(1, 1, 3, 100, 50, "HallA"),
    Event(2, 2, 4, 120, 60, "HallA"),
    Event(3, 5, 7, 150, 80, "HallB"),
    Event(4, 8, 9, 200, 100, "HallB", (3,)),
    Event(5, 6, 8, 180, 90, "HallA", (1,)),
    Event(6, 9, 11, 220, 110, "HallC", (4,)),
)
