"""Tests for the scoring model."""

import pytest

from conftest import make_event
from event_planner.errors import InvalidObjective
from event_planner.models import DEMO_EVENTS, EventCatalog, Objective
from event_planner.scoring import (
    HYBRID_SCALE,
    NormalizationBounds,
    ScoringConfig,
    compute_weights,
    event_weight,
)


class TestNormalizationBounds:
    def test_maxima_over_catalog(self):
        bounds = NormalizationBounds.from_events(DEMO_EVENTS)
        assert bounds == NormalizationBounds(max_attendance=220, max_revenue=110)

    def test_floored_at_one(self):
        bounds = NormalizationBounds.from_events([make_event(1, 0, 1, 0, 0)])
        assert bounds == NormalizationBounds(max_attendance=1, max_revenue=1)

    def test_empty_catalog(self):
        assert NormalizationBounds.from_events([]) == NormalizationBounds(1, 1)


class TestEventWeight:
    event = make_event(1, 0, 1, attendance=100, revenue=30)
    bounds = NormalizationBounds(max_attendance=200, max_revenue=120)

    def test_attendance(self):
        assert event_weight(self.event, ScoringConfig(Objective.ATTENDANCE), self.bounds) == 100

    def test_revenue(self):
        assert event_weight(self.event, ScoringConfig(Objective.REVENUE), self.bounds) == 30

    def test_hybrid_blend(self):
        config = ScoringConfig(Objective.HYBRID, alpha=0.5)
        # 0.5 * 0.5 + 0.5 * 0.25 = 0.375
        assert event_weight(self.event, config, self.bounds) == 375_000

    def test_hybrid_truncates(self):
        config = ScoringConfig(Objective.HYBRID, alpha=1.0)
        bounds = NormalizationBounds(max_attendance=3, max_revenue=1)
        event = make_event(1, 0, 1, attendance=1, revenue=0)
        # 1/3 * 1e6 = 333333.33...
        assert event_weight(event, config, bounds) == 333_333

    @pytest.mark.parametrize("alpha, expected", [(1.0, 500_000), (0.0, 250_000)])
    def test_hybrid_extremes(self, alpha, expected):
        config = ScoringConfig(Objective.HYBRID, alpha=alpha)
        assert event_weight(self.event, config, self.bounds) == expected

    def test_max_event_scores_full_scale(self):
        config = ScoringConfig(Objective.HYBRID, alpha=0.5)
        event = make_event(1, 0, 1, attendance=200, revenue=120)
        assert event_weight(event, config, self.bounds) == HYBRID_SCALE


class TestScoringConfig:
    @pytest.mark.parametrize("alpha", [-0.1, 1.5, float("nan")])
    def test_hybrid_rejects_alpha_out_of_range(self, alpha):
        with pytest.raises(InvalidObjective):
            ScoringConfig(Objective.HYBRID, alpha=alpha)

    def test_alpha_ignored_for_plain_objectives(self):
        assert ScoringConfig(Objective.REVENUE, alpha=7).objective is Objective.REVENUE

    def test_objective_given_as_name(self):
        assert ScoringConfig("hybrid").objective is Objective.HYBRID


class TestComputeWeights:
    def test_uses_catalog_wide_bounds(self):
        catalog = EventCatalog([
            make_event(1, 0, 1, attendance=50, revenue=10),
            make_event(2, 0, 1, attendance=100, revenue=40),
        ])
        weights = compute_weights(catalog, ScoringConfig(Objective.HYBRID, alpha=0.5))
        assert weights == {1: 375_000, 2: 1_000_000}

    def test_attendance_weights(self):
        weights = compute_weights(EventCatalog(DEMO_EVENTS), ScoringConfig())
        assert weights == {1: 100, 2: 120, 3: 150, 4: 200, 5: 180, 6: 220}
