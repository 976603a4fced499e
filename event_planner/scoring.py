"""
Per-event scoring under the attendance, revenue and hybrid objectives.

Normalization bounds are an explicit value computed once per run, so two
runs with different objectives never share state.
"""

from dataclasses import dataclass
from typing import Iterable

from .errors import InvalidObjective
from .models import Event, EventCatalog, Objective

# Hybrid scores are fractions in [0, 1]; scale them so the optimizer can add integers
HYBRID_SCALE = 1_000_000


@dataclass(frozen=True)
class ScoringConfig:
    """Objective selection plus the hybrid blend coefficient."""

    objective: Objective = Objective.ATTENDANCE
    alpha: float = 0.5  # only used by the hybrid objective; higher favours attendance

    def __post_init__(self) -> None:
        if not isinstance(self.objective, Objective):
            object.__setattr__(self, "objective", Objective.parse(self.objective))
        if self.objective is Objective.HYBRID and not 0.0 <= self.alpha <= 1.0:
            raise InvalidObjective(f"alpha must be within [0, 1], got {self.alpha}")


@dataclass(frozen=True)
class NormalizationBounds:
    """Catalog-wide maxima, floored at 1 to avoid dividing by zero."""

    max_attendance: int = 1
    max_revenue: int = 1

    @classmethod
    def from_events(cls, events: Iterable[Event]) -> "NormalizationBounds":
        max_attendance = 1
        max_revenue = 1
        for event in events:
            max_attendance = max(max_attendance, event.attendance)
            max_revenue = max(max_revenue, event.revenue)
        return cls(max_attendance=max_attendance, max_revenue=max_revenue)


def event_weight(event: Event, config: ScoringConfig, bounds: NormalizationBounds) -> int:
    """Score a single event under the configured objective."""
    if config.objective is Objective.ATTENDANCE:
        return event.attendance
    if config.objective is Objective.REVENUE:
        return event.revenue

    norm_attendance = event.attendance / bounds.max_attendance
    norm_revenue = event.revenue / bounds.max_revenue
    blended = config.alpha * norm_attendance + (1.0 - config.alpha) * norm_revenue
    # int() truncates toward zero
    return int(blended * HYBRID_SCALE)


def compute_weights(catalog: EventCatalog, config: ScoringConfig) -> dict[int, int]:
    """Score every event in the catalog against bounds taken from the whole catalog."""
    bounds = NormalizationBounds.from_events(catalog)
    return {event.id: event_weight(event, config, bounds) for event in catalog}
