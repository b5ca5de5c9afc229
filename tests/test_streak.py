"""Unit tests for streak tracking."""
from __future__ import annotations

from datetime import date, datetime, timedelta
import json

import pytest

from custom_components.advent_calendar.const import KEY_STREAK
from custom_components.advent_calendar.exceptions import StorageUnavailable
from custom_components.advent_calendar.models import StreakUpdate
from custom_components.advent_calendar.streak import StreakTracker

D = date(2025, 12, 1)


@pytest.fixture
def tracker(memory_store):
    return StreakTracker(memory_store)


class TestStreakTracker:
    """Test StreakTracker."""

    def test_initial_state(self, tracker):
        assert tracker.current_streak == 0
        assert tracker.longest_streak == 0
        assert tracker.last_completed_unlock_date is None

    def test_first_completion_starts_streak(self, tracker):
        assert tracker.update(D) == StreakUpdate(new_streak=1)
        assert tracker.longest_streak == 1
        assert tracker.last_completed_unlock_date == D

    def test_consecutive_days(self, tracker):
        """D, D+1, D+2 gives a streak of three."""
        for offset in range(3):
            tracker.update(D + timedelta(days=offset))
        assert tracker.current_streak == 3
        assert tracker.longest_streak == 3

    def test_gap_resets(self, tracker):
        tracker.update(D)
        result = tracker.update(D + timedelta(days=5))
        assert result.new_streak == 1
        assert tracker.current_streak == 1
        assert tracker.longest_streak == 1

    def test_same_date_is_noop(self, tracker):
        tracker.update(D)
        tracker.update(D + timedelta(days=1))
        assert tracker.update(D + timedelta(days=1)).new_streak == 2
        assert tracker.longest_streak == 2

    def test_out_of_order_resets(self, tracker):
        """Completing an earlier day after a later one restarts the streak."""
        tracker.update(D + timedelta(days=3))
        tracker.update(D + timedelta(days=4))
        assert tracker.update(D + timedelta(days=1)).new_streak == 1
        assert tracker.last_completed_unlock_date == D + timedelta(days=1)

    def test_longest_survives_break(self, tracker):
        """Reaching four then breaking keeps longest at four."""
        for offset in range(4):
            tracker.update(D + timedelta(days=offset))
        tracker.update(D + timedelta(days=10))
        assert tracker.current_streak == 1
        assert tracker.longest_streak == 4

        tracker.update(D + timedelta(days=11))
        assert tracker.current_streak == 2
        assert tracker.longest_streak == 4

    def test_datetime_unlock_date_stripped(self, tracker):
        tracker.update(datetime(2025, 12, 1, 23, 30))
        tracker.update(datetime(2025, 12, 2, 0, 5))
        assert tracker.current_streak == 2

    def test_longest_never_below_current(self, tracker):
        for offset in range(6):
            tracker.update(D + timedelta(days=offset * (1 if offset % 3 else 2)))
            assert tracker.longest_streak >= tracker.current_streak


class TestStreakPersistence:
    """Test how the streak record is stored and recovered."""

    def test_state_persisted(self, tracker, memory_store):
        tracker.update(D)
        stored = json.loads(memory_store.data[KEY_STREAK])
        assert stored == {
            "current_streak": 1,
            "longest_streak": 1,
            "last_completed_unlock_date": "2025-12-01",
        }

    def test_state_reloaded_by_new_instance(self, tracker, memory_store):
        tracker.update(D)
        tracker.update(D + timedelta(days=1))
        again = StreakTracker(memory_store)
        assert again.current_streak == 2
        assert again.update(D + timedelta(days=2)).new_streak == 3

    @pytest.mark.parametrize("raw", ["nope", "[]", "null"])
    def test_malformed_reads_as_zero(self, memory_store, raw):
        memory_store.data[KEY_STREAK] = raw
        tracker = StreakTracker(memory_store)
        assert tracker.current_streak == 0
        assert tracker.update(D).new_streak == 1

    def test_inconsistent_counters_repaired(self, memory_store):
        memory_store.data[KEY_STREAK] = json.dumps({
            "current_streak": 5,
            "longest_streak": 2,
            "last_completed_unlock_date": "not a date",
        })
        state = StreakTracker(memory_store).state
        assert state.current_streak == 5
        assert state.longest_streak == 5
        assert state.last_completed_unlock_date is None

    def test_negative_counters_clamped(self, memory_store):
        memory_store.data[KEY_STREAK] = json.dumps({"current_streak": -3, "longest_streak": "7"})
        state = StreakTracker(memory_store).state
        assert state.current_streak == 0
        assert state.longest_streak == 0

    def test_write_failure_leaves_state(self, tracker, memory_store):
        tracker.update(D)
        memory_store.fail_writes = True
        with pytest.raises(StorageUnavailable):
            tracker.update(D + timedelta(days=1))
        memory_store.fail_writes = False
        assert tracker.current_streak == 1

    def test_update_during_read_failure_keeps_record(self, memory_store):
        """An update that cannot read the stored streak must not reset it."""
        stored = json.dumps({
            "current_streak": 4,
            "longest_streak": 4,
            "last_completed_unlock_date": "2025-12-04",
        })
        memory_store.data[KEY_STREAK] = stored
        memory_store.fail_reads = True

        with pytest.raises(StorageUnavailable):
            StreakTracker(memory_store).update(date(2025, 12, 5))

        assert memory_store.writes == []
        assert memory_store.data[KEY_STREAK] == stored
