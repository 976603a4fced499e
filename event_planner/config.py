"""Configuration defaults for the event planner."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


@dataclass
class PlannerConfig:
    """Default objective and logging settings."""

    objective: str = "attendance"
    alpha: float = 0.5  # Hybrid blend: 1.0 = attendance only, 0.0 = revenue only
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        """Load configuration from environment variables."""
        return cls(
            objective=os.getenv("EVENT_PLANNER_OBJECTIVE", "attendance"),
            alpha=float(os.getenv("EVENT_PLANNER_ALPHA", "0.5")),
            log_level=os.getenv("EVENT_PLANNER_LOG_LEVEL", "INFO").upper(),
        )
