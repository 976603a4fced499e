"""Tests for events, the catalog and objective parsing."""

import pytest

from conftest import make_event
from event_planner.errors import DuplicateEvent
from event_planner.models import DEMO_EVENTS, EventCatalog, Objective


class TestEvent:
    def test_prerequisites_are_stored_as_tuple(self):
        event = make_event(1, 0, 5, prerequisites=[3, 4])
        assert event.prerequisites == (3, 4)

    def test_required_ids_drop_duplicates_in_order(self):
        event = make_event(1, 0, 5, prerequisites=[4, 3, 4, 3])
        assert event.required_ids == (4, 3)

    def test_overlapping_events_at_same_venue_clash(self):
        assert make_event(1, 1, 3).overlaps(make_event(2, 2, 4))

    def test_back_to_back_events_do_not_clash(self):
        assert not make_event(1, 1, 3).overlaps(make_event(2, 3, 5))

    def test_different_venues_never_clash(self):
        assert not make_event(1, 1, 3, venue="A").overlaps(make_event(2, 1, 3, venue="B"))

    def test_describe_lists_dependencies(self):
        text = make_event(4, 8, 9, 200, 100, "HallB", prerequisites=[3]).describe()
        assert text == "ID 4 [8-9] Venue: HallB | Att: 200 | Rev: 100 | Deps: 3"

    def test_describe_without_dependencies(self):
        assert "Deps" not in make_event(1, 1, 3).describe()


class TestEventCatalog:
    def test_lookup_and_order(self):
        catalog = EventCatalog(DEMO_EVENTS)
        assert len(catalog) == 6
        assert catalog.ids == (1, 2, 3, 4, 5, 6)
        assert catalog[4].venue == "HallB"
        assert 7 not in catalog

    def test_duplicate_ids_are_rejected(self):
        with pytest.raises(DuplicateEvent) as exc_info:
            EventCatalog([make_event(1, 0, 1), make_event(1, 2, 3)])
        assert exc_info.value.event_id == 1


class TestObjective:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("attendance", Objective.ATTENDANCE),
            ("Revenue", Objective.REVENUE),
            (" HYBRID ", Objective.HYBRID),
            ("1", Objective.ATTENDANCE),
            (2, Objective.REVENUE),
            ("3", Objective.HYBRID),
            (Objective.REVENUE, Objective.REVENUE),
        ],
    )
    def test_parse(self, value, expected):
        assert Objective.parse(value) is expected

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown objective"):
            Objective.parse("profit")
