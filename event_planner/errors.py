"""
Errors raised while validating an event catalog.

All of these are caller-input defects found before optimization starts.
None of them are retryable, and a failed run never carries a partial schedule.
"""


class SchedulingError(Exception):
    """Base class for catalog and request validation failures."""

    code = "scheduling_error"

    def to_dict(self) -> dict[str, object]:
        """Structured context for rendering a diagnostic."""
        return {}


class InvalidEvent(SchedulingError):
    """Raised when a single event record is malformed."""

    code = "invalid_event"

    def __init__(self, event_id: int, reason: str):
        self.event_id = event_id
        self.reason = reason
        super().__init__(f"Event {event_id} is invalid: {reason}")

    def to_dict(self) -> dict[str, object]:
        return {"event_id": self.event_id, "reason": self.reason}


class DuplicateEvent(SchedulingError):
    """Raised when two events share an identifier."""

    code = "duplicate_event"

    def __init__(self, event_id: int):
        self.event_id = event_id
        super().__init__(f"Event ID {event_id} appears more than once")

    def to_dict(self) -> dict[str, object]:
        return {"event_id": self.event_id}


class UnknownDependency(SchedulingError):
    """Raised when a prerequisite id is not in the catalog."""

    code = "unknown_dependency"

    def __init__(self, event_id: int, missing_dep_id: int):
        self.event_id = event_id
        self.missing_dep_id = missing_dep_id
        super().__init__(f"Event ID {event_id} depends on unknown ID {missing_dep_id}")

    def to_dict(self) -> dict[str, object]:
        return {"event_id": self.event_id, "missing_dep_id": self.missing_dep_id}


class DependencyCycle(SchedulingError):
    """Raised when the prerequisite graph is not a DAG."""

    code = "dependency_cycle"

    def __init__(self, event_ids: tuple[int, ...]):
        self.event_ids = tuple(event_ids)
        ids = ", ".join(str(i) for i in self.event_ids)
        super().__init__(f"Dependency cycle detected among events: {ids}")

    def to_dict(self) -> dict[str, object]:
        return {"event_ids": list(self.event_ids)}


class TimingViolation(SchedulingError):
    """Raised when a prerequisite ends after its dependent starts."""

    code = "timing_violation"

    def __init__(self, event_id: int, dep_id: int, event_start: int, dep_end: int):
        self.event_id = event_id
        self.dep_id = dep_id
        self.event_start = event_start
        self.dep_end = dep_end
        super().__init__(
            f"Event {event_id} starts at {event_start} before its dependency "
            f"{dep_id} ends at {dep_end}"
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "event_id": self.event_id,
            "dep_id": self.dep_id,
            "event_start": self.event_start,
            "dep_end": self.dep_end,
        }


class InvalidObjective(SchedulingError):
    """Raised for an unusable objective configuration, e.g. alpha outside [0, 1]."""

    code = "invalid_objective"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid objective: {reason}")

    def to_dict(self) -> dict[str, object]:
        return {"reason": self.reason}
