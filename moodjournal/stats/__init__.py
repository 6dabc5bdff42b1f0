"""Mood aggregation module."""

from moodjournal.stats.window import (
    WINDOW_DAYS,
    calculate_daily_series,
    calculate_weekly_average,
    entries_in_window,
    window_days,
)

__all__ = [
    "WINDOW_DAYS",
    "calculate_daily_series",
    "calculate_weekly_average",
    "entries_in_window",
    "window_days",
]
