"""
Schedule printing and formatting utilities.

This module formats a scheduling result for the terminal: the chosen events
in finish order followed by attendance and revenue totals.
"""

from .models import Objective
from .types import SchedulingResult


def format_schedule_for_printing(result: SchedulingResult) -> str:
    """Format a result as readable text."""
    if not result.ok:
        return f"SCHEDULING FAILED: {result.error}"

    lines: list[str] = []
    score_label = "Maximum score achievable"
    if result.objective is Objective.HYBRID:
        score_label += " (scaled by 1e6)"
    lines.append(f"{score_label}: {result.total_score}")
    lines.append("")
    if result.events:
        lines.append("--- Selected Events (by finish time) ---")
        for event in result.events:
            lines.append(f" - {event.describe()}")
    else:
        lines.append("No events scheduled")
    lines.append("-" * 51)
    lines.append(
        f" TOTALS -> Attendance: {result.total_attendance} | Revenue: {result.total_revenue}"
    )
    return "\n".join(lines)
