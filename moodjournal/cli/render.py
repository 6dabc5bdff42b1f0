"""Shared rich formatting helpers for the CLI."""

from moodjournal.models import MoodEntry


def mood_color(mood: float) -> str:
    """Rich style for a mood value; 0.0 means no data."""
    if mood <= 0.0:
        return "grey62"
    if mood <= 2.0:
        return "red"
    if mood < 4.0:
        return "dark_orange"
    return "green"


def format_entry_time(entry: MoodEntry) -> str:
    """Format an entry's timestamp like 'Sun, Oct 18 9:05 PM'."""
    created = entry.created_at()
    return f"{created:%a, %b} {created.day} {created.hour % 12 or 12}:{created:%M %p}"
