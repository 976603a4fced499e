"""
Type definitions for the event planner.

This module contains the result type shared by the engine, the printers and
the DTO layer.
"""

from dataclasses import dataclass

from .errors import SchedulingError
from .models import Event, Objective


@dataclass(frozen=True)
class SchedulingResult:
    """Outcome of one engine run: a schedule, or the error that prevented one."""

    status: str  # "solved" or "invalid"
    objective: Objective
    total_score: int
    events: tuple[Event, ...]
    error: SchedulingError | None = None

    @property
    def ok(self) -> bool:
        return self.status == "solved"

    @property
    def event_ids(self) -> list[int]:
        return [e.id for e in self.events]

    @property
    def total_attendance(self) -> int:
        return sum(e.attendance for e in self.events)

    @property
    def total_revenue(self) -> int:
        return sum(e.revenue for e in self.events)

    @classmethod
    def empty(cls, objective: Objective) -> "SchedulingResult":
        return cls(status="solved", objective=objective, total_score=0, events=())

    @classmethod
    def failure(cls, objective: Objective, error: SchedulingError) -> "SchedulingResult":
        return cls(status="invalid", objective=objective, total_score=0, events=(), error=error)
