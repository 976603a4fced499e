"""Tests for environment-driven configuration."""

from event_planner.config import PlannerConfig


class TestPlannerConfig:
    def test_defaults(self, monkeypatch):
        for name in ("EVENT_PLANNER_OBJECTIVE", "EVENT_PLANNER_ALPHA", "EVENT_PLANNER_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        assert PlannerConfig.from_env() == PlannerConfig()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("EVENT_PLANNER_OBJECTIVE", "hybrid")
        monkeypatch.setenv("EVENT_PLANNER_ALPHA", "0.8")
        monkeypatch.setenv("EVENT_PLANNER_LOG_LEVEL", "debug")
        config = PlannerConfig.from_env()
        assert config == PlannerConfig(objective="hybrid", alpha=0.8, log_level="DEBUG")
