"""Durable weekly-reset bookkeeping."""

import logging
from datetime import date
from typing import Optional

from moodjournal.db.store import SQLiteStore
from moodjournal.errors import MalformedPreferenceValue

logger = logging.getLogger(__name__)

LAST_RESET_WEEK = "last_reset_week"
NO_RESET = -1


def current_week_key(today: date) -> int:
    """Encode the ISO-8601 week of a date as ``year * 100 + week``.

    The ISO week-based year is used so the last days of December and the
    first days of January that share a week get the same key.

    Args:
        today: Calendar date.

    Returns:
        Week key, e.g. 202642 for 2026-10-18.
    """
    iso_year, iso_week, _ = today.isocalendar()
    return iso_year * 100 + iso_week


class ResetTracker(SQLiteStore):
    """Stores the week in which the journal was last reset."""

    REQUIRED_TABLES = ["preferences"]

    def _init_schema(self) -> None:
        self._execute("""
            CREATE TABLE IF NOT EXISTS preferences (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)

    def _get_preference(self, key: str) -> Optional[str]:
        rows = self._execute("SELECT value FROM preferences WHERE key = ?", (key,)).rows
        return rows[0]["value"] if rows else None

    def _set_preference(self, key: str, value: str) -> None:
        self._execute(
            "INSERT OR REPLACE INTO preferences (key, value) VALUES (?, ?)",
            (key, value),
        )

    def last_reset_week(self) -> int:
        """Get the stored week key of the last reset.

        Returns:
            The week key, or -1 if no reset was ever recorded or the stored
            value is unreadable.
        """
        raw = self._get_preference(LAST_RESET_WEEK)
        if raw is None:
            return NO_RESET
        try:
            return int(raw)
        except ValueError:
            logger.warning("%s", MalformedPreferenceValue(LAST_RESET_WEEK, raw))
            return NO_RESET

    def should_reset(self, today: date) -> bool:
        """Whether today's week differs from the last recorded reset week."""
        return self.last_reset_week() != current_week_key(today)

    def mark_reset(self, today: date) -> None:
        """Record today's week as the last reset week."""
        week_key = current_week_key(today)
        self._set_preference(LAST_RESET_WEEK, str(week_key))
        logger.info("Marked weekly reset for week %d", week_key)
