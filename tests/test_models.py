"""Unit tests for Advent Calendar models."""
from __future__ import annotations

from datetime import date

import pytest

from custom_components.advent_calendar.models import (
    BadgeRecord,
    CalendarItem,
    StreakState,
    build_calendar,
    validate_calendar,
)


class TestBuildCalendar:
    """Test build_calendar."""

    def test_twenty_four_consecutive_days(self):
        items = build_calendar(date(2025, 12, 1))
        assert len(items) == 24
        assert items[0] == CalendarItem(day=1, unlock_date=date(2025, 12, 1), title="Day 1")
        assert items[-1].day == 24
        assert items[-1].unlock_date == date(2025, 12, 24)

    def test_crosses_month_boundary(self):
        items = build_calendar(date(2025, 11, 28))
        assert items[3].unlock_date == date(2025, 12, 1)


class TestValidateCalendar:
    """Test validate_calendar."""

    def test_sorts_by_day(self):
        items = build_calendar(date(2025, 12, 1))
        assert validate_calendar(reversed(items)) == items

    def test_duplicate_day(self):
        items = [
            CalendarItem(day=1, unlock_date=date(2025, 12, 1)),
            CalendarItem(day=1, unlock_date=date(2025, 12, 2)),
        ]
        with pytest.raises(ValueError, match="Duplicate"):
            validate_calendar(items)

    def test_day_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            validate_calendar([CalendarItem(day=25, unlock_date=date(2025, 12, 25))])

    def test_unlock_dates_must_increase(self):
        items = [
            CalendarItem(day=1, unlock_date=date(2025, 12, 2)),
            CalendarItem(day=2, unlock_date=date(2025, 12, 2)),
        ]
        with pytest.raises(ValueError, match="must be after"):
            validate_calendar(items)


class TestBadgeRecord:
    """Test BadgeRecord."""

    def test_as_dict(self):
        record = BadgeRecord(day=3, title="Day 3 Complete!", emoji="⭐", earned_at=123.0)
        assert record.as_dict() == {"day": 3, "title": "Day 3 Complete!", "emoji": "⭐", "earned_at": 123.0}

    def test_from_dict(self):
        data = {"day": 3, "title": "Day 3 Complete!", "emoji": "⭐", "earned_at": 123}
        assert BadgeRecord.from_dict(data) == BadgeRecord(3, "Day 3 Complete!", "⭐", 123)

    @pytest.mark.parametrize(
        "data",
        [
            None,
            [3, "title"],
            {"day": 3, "title": "x", "emoji": "y"},
            {"day": "3", "title": "x", "emoji": "y", "earned_at": 1.0},
            {"day": 3, "title": 5, "emoji": "y", "earned_at": 1.0},
            {"day": 3, "title": "x", "emoji": "y", "earned_at": "yesterday"},
            {"day": 3, "title": "x", "emoji": "y", "earned_at": True},
        ],
    )
    def test_from_dict_malformed(self, data):
        assert BadgeRecord.from_dict(data) is None


def test_streak_state_defaults():
    state = StreakState()
    assert state.current_streak == 0
    assert state.longest_streak == 0
    assert state.last_completed_unlock_date is None
