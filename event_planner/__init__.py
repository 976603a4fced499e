from .models import DEMO_EVENTS, Event, EventCatalog, Objective
from .errors import (
    DependencyCycle,
    DuplicateEvent,
    InvalidEvent,
    InvalidObjective,
    SchedulingError,
    TimingViolation,
    UnknownDependency,
)
from .engine import schedule_events, solve
from .scoring import ScoringConfig
from .types import SchedulingResult

__all__ = [
    "DEMO_EVENTS",
    "DependencyCycle",
    "DuplicateEvent",
    "Event",
    "EventCatalog",
    "InvalidEvent",
    "InvalidObjective",
    "Objective",
    "SchedulingError",
    "SchedulingResult",
    "ScoringConfig",
    "TimingViolation",
    "UnknownDependency",
    "schedule_events",
    "solve",
]
