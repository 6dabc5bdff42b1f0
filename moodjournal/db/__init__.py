"""Local SQLite persistence for MoodJournal."""

from moodjournal.db.preferences import ResetTracker, current_week_key
from moodjournal.db.store import EntryStore

__all__ = ["EntryStore", "ResetTracker", "current_week_key"]
