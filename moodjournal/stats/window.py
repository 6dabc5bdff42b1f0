"""Rolling 7-day mood aggregation.

Entries are bucketed by the local calendar day of their timestamp, never
by elapsed hours: two entries made at 00:01 and 23:59 on the same day land
in the same bucket, and an entry from seven calendar days ago is outside
the window regardless of the time of day.
"""

from collections import defaultdict
from datetime import date, timedelta
from typing import Iterable

from moodjournal.models import DayMood, MoodEntry

WINDOW_DAYS = 7


def window_days(today: date) -> list[date]:
    """Calendar days of the rolling window, oldest first.

    Args:
        today: Last day of the window.

    Returns:
        The 7 dates from ``today - 6 days`` through ``today``.
    """
    start = today - timedelta(days=WINDOW_DAYS - 1)
    return [start + timedelta(days=i) for i in range(WINDOW_DAYS)]


def entries_in_window(entries: Iterable[MoodEntry], today: date) -> list[MoodEntry]:
    """Filter entries to those recorded within the rolling window."""
    start = today - timedelta(days=WINDOW_DAYS - 1)
    return [e for e in entries if start <= e.local_date() <= today]


def _mean(moods: list[int]) -> float:
    return sum(moods) / len(moods) if moods else 0.0


def calculate_weekly_average(entries: Iterable[MoodEntry], today: date) -> float:
    """Calculate the average mood over the last 7 days.

    Every entry counts once, so a day with three entries weighs three times
    as much as a day with one.

    Args:
        entries: Mood entries in any order.
        today: Last day of the window.

    Returns:
        Mean mood of entries in the window, or 0.0 if there are none.
    """
    return _mean([e.mood for e in entries_in_window(entries, today)])


def calculate_daily_series(entries: Iterable[MoodEntry], today: date) -> list[DayMood]:
    """Calculate the per-day average mood for each day of the window.

    Args:
        entries: Mood entries in any order.
        today: Last day of the window.

    Returns:
        Exactly 7 DayMood records, oldest first, with 0.0 for days
        without entries.
    """
    by_day: dict[date, list[int]] = defaultdict(list)
    for entry in entries_in_window(entries, today):
        by_day[entry.local_date()].append(entry.mood)

    return [
        DayMood(day=day, day_label=day.strftime("%a"), avg_mood=_mean(by_day.get(day, [])))
        for day in window_days(today)
    ]
