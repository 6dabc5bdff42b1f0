"""Data models for MoodJournal."""

from moodjournal.models.entry import MoodEntry, now_millis
from moodjournal.models.day import DayMood, JournalState

__all__ = [
    "MoodEntry",
    "DayMood",
    "JournalState",
    "now_millis",
]
