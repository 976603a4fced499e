"""Tests for schedule text output."""

from conftest import make_event
from event_planner.engine import schedule_events, solve
from event_planner.models import DEMO_EVENTS, Objective
from event_planner.schedule_printer import format_schedule_for_printing


class TestFormatSchedule:
    def test_demo_schedule(self):
        text = format_schedule_for_printing(solve(DEMO_EVENTS))
        lines = text.splitlines()
        assert lines[0] == "Maximum score achievable: 850"
        assert " - ID 4 [8-9] Venue: HallB | Att: 200 | Rev: 100 | Deps: 3" in lines
        assert lines[-1] == " TOTALS -> Attendance: 850 | Revenue: 430"

    def test_hybrid_score_is_labelled(self):
        text = format_schedule_for_printing(solve(DEMO_EVENTS, Objective.HYBRID, 0.5))
        assert text.startswith("Maximum score achievable (scaled by 1e6): ")

    def test_empty_schedule_reports_zero_score(self):
        text = format_schedule_for_printing(solve([]))
        lines = text.splitlines()
        assert lines[0] == "Maximum score achievable: 0"
        assert "No events scheduled" in lines
        assert lines[-1] == " TOTALS -> Attendance: 0 | Revenue: 0"

    def test_all_zero_catalog_prints_like_empty(self):
        result = solve([make_event(1, 0, 1, attendance=0, revenue=0)])
        text = format_schedule_for_printing(result)
        assert "Maximum score achievable: 0" in text
        assert "No events scheduled" in text

    def test_failure(self):
        result = schedule_events([make_event(1, 0, 1, prerequisites=[9])])
        text = format_schedule_for_printing(result)
        assert text == "SCHEDULING FAILED: Event ID 1 depends on unknown ID 9"
