"""Property-based tests for rolling-window mood aggregation.

**Feature: mood-journal**
"""

from datetime import date, datetime, time, timedelta

from hypothesis import given, settings
from hypothesis import strategies as st

from moodjournal.models import MoodEntry
from moodjournal.stats import (
    calculate_daily_series,
    calculate_weekly_average,
    entries_in_window,
    window_days,
)

TODAY = date(2026, 10, 18)


def entry_on(day: date, mood: int, at: time = time(12, 0), entry_id: int = 0) -> MoodEntry:
    """Build an entry recorded at a local wall-clock time on a given day."""
    timestamp = int(datetime.combine(day, at).timestamp() * 1000)
    return MoodEntry(id=entry_id, mood=mood, note="", timestamp=timestamp)


entry_strategy = st.builds(
    entry_on,
    day=st.integers(min_value=-20, max_value=3).map(lambda d: TODAY + timedelta(days=d)),
    mood=st.integers(min_value=1, max_value=5),
    at=st.times(min_value=time(1, 0), max_value=time(22, 59)),
)


class TestWeeklyAverage:
    """
    **Feature: mood-journal, Property: Weekly Average Correctness**

    *For any* entries, the weekly average is the mean mood of every entry
    dated within the last 7 calendar days, or 0.0 if there are none.
    """

    def test_same_day_entries(self):
        entries = [entry_on(TODAY, mood) for mood in (5, 3, 1)]
        assert calculate_weekly_average(entries, TODAY) == 3.0

    def test_no_entries(self):
        assert calculate_weekly_average([], TODAY) == 0.0

    def test_only_old_entries(self):
        entries = [entry_on(TODAY - timedelta(days=7), 5), entry_on(TODAY - timedelta(days=30), 1)]
        assert calculate_weekly_average(entries, TODAY) == 0.0

    def test_each_entry_counts_once(self):
        busy_day = TODAY - timedelta(days=1)
        entries = [entry_on(busy_day, 5) for _ in range(3)] + [entry_on(TODAY, 1)]

        # (5 + 5 + 5 + 1) / 4, not the mean of the per-day means
        assert calculate_weekly_average(entries, TODAY) == 4.0

    def test_window_edges_use_calendar_days(self):
        first_day = TODAY - timedelta(days=6)
        entries = [
            entry_on(first_day, 4, at=time(0, 0, 30)),
            entry_on(first_day - timedelta(days=1), 1, at=time(23, 59, 30)),
        ]
        assert calculate_weekly_average(entries, TODAY) == 4.0

    def test_future_entries_excluded(self):
        entries = [entry_on(TODAY + timedelta(days=1), 1), entry_on(TODAY, 5)]
        assert calculate_weekly_average(entries, TODAY) == 5.0

    @given(entries=st.lists(entry_strategy, max_size=40))
    @settings(max_examples=100)
    def test_average_matches_window_mean(self, entries: list[MoodEntry]):
        start = TODAY - timedelta(days=6)
        moods = [e.mood for e in entries if start <= e.local_date() <= TODAY]
        expected = sum(moods) / len(moods) if moods else 0.0

        assert abs(calculate_weekly_average(entries, TODAY) - expected) < 1e-9


class TestDailySeries:
    """
    **Feature: mood-journal, Property: Daily Series Zero-Fill**

    *For any* entries, the daily series has exactly 7 slots, oldest first,
    ending today, with 0.0 for days without entries.
    """

    def test_zero_fill(self):
        entries = [entry_on(TODAY, 4), entry_on(TODAY - timedelta(days=3), 2)]

        series = calculate_daily_series(entries, TODAY)

        assert len(series) == 7
        assert series[-1].day == TODAY
        assert series[-1].avg_mood == 4.0
        assert series[3].day == TODAY - timedelta(days=3)
        assert series[3].avg_mood == 2.0
        others = [dm.avg_mood for i, dm in enumerate(series) if i not in (3, 6)]
        assert others == [0.0] * 5

    def test_empty_series(self):
        series = calculate_daily_series([], TODAY)
        assert [dm.avg_mood for dm in series] == [0.0] * 7

    def test_labels_are_short_weekday_names(self):
        series = calculate_daily_series([], TODAY)
        assert [dm.day_label for dm in series] == [d.strftime("%a") for d in window_days(TODAY)]

    def test_same_day_entries_share_bucket(self):
        entries = [
            entry_on(TODAY, 1, at=time(0, 5)),
            entry_on(TODAY, 4, at=time(23, 55)),
        ]
        series = calculate_daily_series(entries, TODAY)
        assert series[-1].avg_mood == 2.5

    def test_entries_outside_window_ignored(self):
        entries = [entry_on(TODAY - timedelta(days=7), 5), entry_on(TODAY + timedelta(days=1), 5)]
        series = calculate_daily_series(entries, TODAY)
        assert all(dm.avg_mood == 0.0 for dm in series)

    @given(entries=st.lists(entry_strategy, max_size=40))
    @settings(max_examples=100)
    def test_series_shape(self, entries: list[MoodEntry]):
        series = calculate_daily_series(entries, TODAY)

        assert len(series) == 7
        assert [dm.day for dm in series] == window_days(TODAY)
        assert all(0.0 <= dm.avg_mood <= 5.0 for dm in series)

    @given(entries=st.lists(entry_strategy, max_size=40))
    @settings(max_examples=100)
    def test_non_empty_days_match_entries(self, entries: list[MoodEntry]):
        series = calculate_daily_series(entries, TODAY)

        for dm in series:
            moods = [e.mood for e in entries if e.local_date() == dm.day]
            if moods:
                assert abs(dm.avg_mood - sum(moods) / len(moods)) < 1e-9
            else:
                assert dm.avg_mood == 0.0


class TestWindow:
    """Window helpers."""

    def test_window_days(self):
        days = window_days(TODAY)
        assert days[0] == date(2026, 10, 12)
        assert days[-1] == TODAY
        assert len(days) == 7

    def test_entries_in_window_preserves_order(self):
        entries = [
            entry_on(TODAY, 3, entry_id=2),
            entry_on(TODAY - timedelta(days=10), 3, entry_id=1),
            entry_on(TODAY - timedelta(days=2), 3, entry_id=0),
        ]
        assert [e.id for e in entries_in_window(entries, TODAY)] == [2, 0]
