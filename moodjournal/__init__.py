"""MoodJournal - a local daily mood journal with weekly resets."""

__version__ = "0.1.0"
