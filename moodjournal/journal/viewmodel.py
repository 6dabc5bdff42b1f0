"""Presentation-facing journal state.

MoodJournal keeps the derived views (entry list, weekly average, daily
series) current by subscribing to the EntryStore, and exposes the commands
a view issues.
"""

import logging
from datetime import date
from typing import Callable, Optional

from moodjournal.db import EntryStore, ResetTracker
from moodjournal.journal.controller import ResetController
from moodjournal.models import DayMood, JournalState, MoodEntry
from moodjournal.stats import calculate_daily_series, calculate_weekly_average

logger = logging.getLogger(__name__)

StateListener = Callable[[JournalState], None]


class MoodJournal:
    """View-facing facade over the entry store and weekly reset."""

    def __init__(
        self,
        store: EntryStore,
        tracker: ResetTracker,
        today: Callable[[], date] = date.today,
    ):
        """Initialize the journal and subscribe to store changes.

        Args:
            store: Entry store, constructed once by the application.
            tracker: Reset tracker sharing the store's database.
            today: Returns the current local calendar date.
        """
        self.store = store
        self.controller = ResetController(store, tracker, today=today)
        self._today = today
        self._listeners: list[StateListener] = []
        self._state = JournalState()
        self._unsubscribe: Optional[Callable[[], None]] = store.subscribe(self._on_entries)

    def _on_entries(self, entries: tuple[MoodEntry, ...]) -> None:
        today = self._today()
        self._state = JournalState(
            mood_list=entries,
            weekly_average_mood=calculate_weekly_average(entries, today),
            daily_series=tuple(calculate_daily_series(entries, today)),
        )
        for listener in list(self._listeners):
            self._deliver(listener)

    def _deliver(self, listener: StateListener) -> None:
        try:
            listener(self._state)
        except Exception:
            logger.exception("Journal state listener %r failed", listener)

    # ==================== Views ====================

    @property
    def state(self) -> JournalState:
        return self._state

    @property
    def mood_list(self) -> tuple[MoodEntry, ...]:
        return self._state.mood_list

    @property
    def weekly_average_mood(self) -> float:
        return self._state.weekly_average_mood

    @property
    def daily_series(self) -> tuple[DayMood, ...]:
        return self._state.daily_series

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with the state now and after every change."""
        self._listeners.append(listener)
        self._deliver(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ==================== Commands ====================

    def add_mood(self, mood: int, note: str = "") -> MoodEntry:
        """Record a mood entry.

        Raises:
            InvalidMoodValue: If mood is not an integer from 1 to 5.
        """
        return self.store.insert(mood, note)

    def reset_week_manual(self) -> int:
        """Clear all entries and mark this week as reset."""
        return self.controller.manual_reset()

    def auto_reset_if_new_week(self) -> bool:
        """Clear all entries if this is the first launch of a new week."""
        return self.controller.auto_reset_if_new_week()

    def close(self) -> None:
        """Stop receiving store updates."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
