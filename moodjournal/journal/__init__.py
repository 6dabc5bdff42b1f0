"""Journal orchestration: weekly resets and derived views."""

from moodjournal.journal.controller import ResetController
from moodjournal.journal.viewmodel import MoodJournal

__all__ = ["MoodJournal", "ResetController"]
