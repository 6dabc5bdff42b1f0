"""SQLite data store for MoodJournal."""

import logging
import sqlite3
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from moodjournal.errors import InvalidMoodValue, StorageUnavailable
from moodjournal.models import MoodEntry, now_millis
from moodjournal.models.entry import MAX_MOOD, MIN_MOOD

logger = logging.getLogger(__name__)

EntryListener = Callable[[tuple[MoodEntry, ...]], None]


class _FetchedCursor:
    """Cursor results captured before the connection is closed."""

    def __init__(self, lastrowid: Optional[int], rowcount: int, rows: list[sqlite3.Row]):
        self.lastrowid = lastrowid
        self.rowcount = rowcount
        self.rows = rows


class SQLiteStore(ABC):
    """Shared connection handling for the SQLite-backed stores."""

    REQUIRED_TABLES: list[str] = []

    def __init__(self, db_path: Path):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file.

        Raises:
            StorageUnavailable: If the database cannot be created or opened.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailable(f"Cannot create {self.db_path.parent}: {e}") from e

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageUnavailable(f"Cannot open {self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        return conn

    def _execute(self, sql: str, params: tuple = ()) -> _FetchedCursor:
        """Run one statement in its own committed transaction.

        Rows are fetched before the connection closes.
        """
        conn = self._get_connection()
        try:
            with conn:
                cursor = conn.execute(sql, params)
                rows = cursor.fetchall()
            return _FetchedCursor(cursor.lastrowid, cursor.rowcount, rows)
        except sqlite3.Error as e:
            raise StorageUnavailable(f"Database error on {self.db_path}: {e}") from e
        finally:
            conn.close()

    @abstractmethod
    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        pass

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        rows = self._execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
        ).rows
        return [row["name"] for row in rows]


class EntryStore(SQLiteStore):
    """Durable, append-only collection of mood entries.

    Every mutation is pushed to subscribers as a full snapshot of the
    entries, newest first.
    """

    REQUIRED_TABLES = ["mood_entries"]

    def __init__(self, db_path: Path, clock: Callable[[], int] = now_millis):
        """Initialize the entry store.

        Args:
            db_path: Path to the SQLite database file.
            clock: Returns the current instant in epoch milliseconds.
        """
        self._clock = clock
        self._lock = threading.RLock()
        self._listeners: list[EntryListener] = []
        super().__init__(db_path)

    def _init_schema(self) -> None:
        self._execute("""
            CREATE TABLE IF NOT EXISTS mood_entries (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                mood INTEGER NOT NULL,
                note TEXT NOT NULL,
                timestamp INTEGER NOT NULL
            )
        """)

    # ==================== Entries ====================

    def insert(self, mood: int, note: str = "") -> MoodEntry:
        """Record a new mood entry timestamped now.

        Args:
            mood: Mood rating from 1 to 5.
            note: Optional note.

        Returns:
            The stored entry with its assigned ID.

        Raises:
            InvalidMoodValue: If mood is not an integer from 1 to 5.
            StorageUnavailable: If the entry could not be written.
        """
        if isinstance(mood, bool) or not isinstance(mood, int) or not MIN_MOOD <= mood <= MAX_MOOD:
            raise InvalidMoodValue(mood)
        entry = MoodEntry(mood=mood, note=note or "", timestamp=self._clock())

        with self._lock:
            cursor = self._execute(
                "INSERT INTO mood_entries (mood, note, timestamp) VALUES (?, ?, ?)",
                (entry.mood, entry.note, entry.timestamp),
            )
            entry = entry.model_copy(update={"id": cursor.lastrowid})
            logger.debug("Inserted mood entry %s (mood=%s)", entry.id, mood)
            self._notify()
        return entry

    def list_all(self) -> list[MoodEntry]:
        """Get all entries, most recent first.

        Returns:
            List of entries ordered by timestamp descending.
        """
        rows = self._execute(
            """
            SELECT id, mood, note, timestamp
            FROM mood_entries
            ORDER BY timestamp DESC, id DESC
            """
        ).rows
        return [
            MoodEntry(
                id=row["id"],
                mood=row["mood"],
                note=row["note"],
                timestamp=row["timestamp"],
            )
            for row in rows
        ]

    def delete_all(self) -> int:
        """Delete every entry.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            removed = self._execute("DELETE FROM mood_entries").rowcount
            logger.info("Deleted %d mood entries", removed)
            self._notify()
        return removed

    def count(self) -> int:
        """Number of stored entries."""
        return self._execute("SELECT COUNT(*) AS count FROM mood_entries").rows[0]["count"]

    # ==================== Subscriptions ====================

    def subscribe(self, listener: EntryListener) -> Callable[[], None]:
        """Register a listener for entry snapshots.

        The listener is called immediately with the current entries and
        again after every insert or delete.

        Args:
            listener: Callable receiving a tuple of entries, newest first.

        Returns:
            A callable that removes the listener.
        """
        with self._lock:
            snapshot = tuple(self.list_all())
            self._listeners.append(listener)
        self._deliver(listener, snapshot)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        """Push a fresh snapshot to every listener. Caller holds the lock."""
        if not self._listeners:
            return
        snapshot = tuple(self.list_all())
        for listener in list(self._listeners):
            self._deliver(listener, snapshot)

    @staticmethod
    def _deliver(listener: EntryListener, snapshot: tuple[MoodEntry, ...]) -> None:
        """Call one listener. A failing listener is logged and skipped."""
        try:
            listener(snapshot)
        except Exception:
            logger.exception("Entry listener %r failed", listener)
