"""Weekly reset orchestration."""

import logging
from datetime import date
from typing import Callable, Optional

from moodjournal.db import EntryStore, ResetTracker

logger = logging.getLogger(__name__)


class ResetController:
    """Clears the journal once per week, or on demand.

    Entries are always deleted before the reset week is recorded. If the
    process dies in between, the next launch still sees a pending reset.
    """

    def __init__(
        self,
        store: EntryStore,
        tracker: ResetTracker,
        today: Callable[[], date] = date.today,
    ):
        """Initialize the controller.

        Args:
            store: Entry store to clear.
            tracker: Tracker holding the last reset week.
            today: Returns the current local calendar date.
        """
        self.store = store
        self.tracker = tracker
        self._today = today

    def auto_reset_if_new_week(self, today: Optional[date] = None) -> bool:
        """Reset the journal if no reset has happened this week.

        Args:
            today: Date to evaluate; defaults to the current date.

        Returns:
            True if the journal was reset.
        """
        today = today or self._today()
        if not self.tracker.should_reset(today):
            return False
        removed = self._reset(today)
        logger.info("New week detected, cleared %d entries", removed)
        return True

    def manual_reset(self, today: Optional[date] = None) -> int:
        """Reset the journal now, regardless of the week.

        Args:
            today: Date to record the reset for; defaults to the current date.

        Returns:
            Number of entries removed.
        """
        return self._reset(today or self._today())

    def _reset(self, today: date) -> int:
        removed = self.store.delete_all()
        self.tracker.mark_reset(today)
        return removed
