"""CLI commands for MoodJournal.

This package provides the command-line interface for MoodJournal:
logging moods, viewing history and weekly stats, resetting the week,
and exporting entries as CSV.
"""

from moodjournal.cli.main import cli, main

__all__ = ["cli", "main"]
