"""Tests for post-hoc schedule validation."""

import pytest

from conftest import make_event
from event_planner.constraint_validator import (
    ConstraintViolation,
    validate_and_report,
    validate_schedule,
)


class TestValidateSchedule:
    def test_accepts_back_to_back(self):
        validate_schedule([make_event(1, 0, 3), make_event(2, 3, 5)])

    def test_rejects_venue_overlap(self):
        with pytest.raises(ConstraintViolation, match="Venue conflict at A"):
            validate_schedule([make_event(1, 0, 3), make_event(2, 2, 5)])

    def test_rejects_overlap_hidden_behind_instant(self):
        # A zero-length event between the two does not hide the clash
        with pytest.raises(ConstraintViolation):
            validate_schedule([make_event(1, 1, 10), make_event(2, 5, 5), make_event(3, 5, 12)])

    def test_rejects_missing_prerequisite(self):
        with pytest.raises(ConstraintViolation, match="without its prerequisite 1"):
            validate_schedule([make_event(2, 3, 5, prerequisites=[1])])

    def test_rejects_late_prerequisite(self):
        with pytest.raises(ConstraintViolation, match="before its prerequisite"):
            validate_schedule([
                make_event(1, 0, 4, venue="B"),
                make_event(2, 3, 5, prerequisites=[1]),
            ])

    def test_rejects_repeated_event(self):
        event = make_event(1, 0, 3)
        with pytest.raises(ConstraintViolation, match="more than once"):
            validate_schedule([event, event])


class TestValidateAndReport:
    def test_report(self):
        assert validate_and_report([make_event(1, 0, 3)]) == (True, [])
        is_valid, errors = validate_and_report([make_event(1, 0, 3), make_event(2, 1, 2)])
        assert not is_valid
        assert len(errors) == 1
