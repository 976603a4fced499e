"""
Pydantic DTOs for the planner's request/response shape.

All file and JSON I/O goes through these validated DTOs so the engine only
ever sees well-formed Event records.
"""

import re
from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from .models import Event, Objective
from .types import SchedulingResult


class EventRecord(BaseModel):
    """A single event as it appears in a request, a CSV row or a response."""

    id: int = Field(description="Unique event identifier")
    start: int = Field(description="Start time")
    end: int = Field(description="End time (not before start)")
    attendance: int = Field(description="Expected attendance", ge=0)
    revenue: int = Field(description="Expected revenue", ge=0)
    venue: str = Field(description="Venue label", min_length=1)
    prerequisites: list[int] = Field(
        default_factory=list,
        description="IDs of events that must be scheduled and finish first",
    )

    @field_validator('prerequisites', mode='before')
    @classmethod
    def parse_prerequisites(cls, v: str | list[int] | None) -> list[int]:
        """Accept '3 4', '3,4' or '' from CSV as well as a list."""
        if v is None:
            return []
        if isinstance(v, str):
            return [int(p) for p in re.split(r"[,\s;]+", v.strip()) if p]
        return v

    @model_validator(mode='after')
    def validate_time_range(self) -> Self:
        """Ensure end is not before start."""
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must not be before start ({self.start})")
        return self

    def to_event(self) -> Event:
        return Event(
            id=self.id,
            start=self.start,
            end=self.end,
            attendance=self.attendance,
            revenue=self.revenue,
            venue=self.venue,
            prerequisites=tuple(self.prerequisites),
        )

    @classmethod
    def from_event(cls, event: Event) -> 'EventRecord':
        return cls(
            id=event.id,
            start=event.start,
            end=event.end,
            attendance=event.attendance,
            revenue=event.revenue,
            venue=event.venue,
            prerequisites=list(event.prerequisites),
        )

    def to_csv_dict(self) -> dict[str, str]:
        """Convert to dictionary for CSV writing."""
        return {
            'id': str(self.id),
            'start': str(self.start),
            'end': str(self.end),
            'attendance': str(self.attendance),
            'revenue': str(self.revenue),
            'venue': self.venue,
            'prerequisites': ' '.join(str(p) for p in self.prerequisites),
        }

    @classmethod
    def from_csv_dict(cls, row: dict[str, str]) -> 'EventRecord':
        """Create from CSV row dictionary with validation."""
        return cls(
            id=int(row['id']),
            start=int(row['start']),
            end=int(row['end']),
            attendance=int(row['attendance']),
            revenue=int(row['revenue']),
            venue=row['venue'],
            prerequisites=row.get('prerequisites') or '',
        )


class ScheduleRequest(BaseModel):
    """A catalog plus the objective to optimize."""

    events: list[EventRecord] = Field(default_factory=list)
    objective: Objective = Field(default=Objective.ATTENDANCE)
    alpha: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Hybrid blend coefficient (higher prioritizes attendance)",
    )

    @field_validator('objective', mode='before')
    @classmethod
    def parse_objective(cls, v: str | int | Objective) -> Objective:
        return Objective.parse(v)

    def to_events(self) -> list[Event]:
        return [record.to_event() for record in self.events]


class ErrorDetail(BaseModel):
    """Structured validation failure."""

    code: str
    message: str
    context: dict[str, object] = Field(default_factory=dict)


class ScheduleResponse(BaseModel):
    """Serializable form of a SchedulingResult."""

    status: str
    objective: Objective
    total_score: int
    total_attendance: int
    total_revenue: int
    events: list[EventRecord]
    error: ErrorDetail | None = None

    @classmethod
    def from_result(cls, result: SchedulingResult) -> 'ScheduleResponse':
        error = None
        if result.error is not None:
            error = ErrorDetail(
                code=result.error.code,
                message=str(result.error),
                context=result.error.to_dict(),
            )
        return cls(
            status=result.status,
            objective=result.objective,
            total_score=result.total_score,
            total_attendance=result.total_attendance,
            total_revenue=result.total_revenue,
            events=[EventRecord.from_event(e) for e in result.events],
            error=error,
        )
