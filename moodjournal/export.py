"""CSV export of mood entries."""

import csv
import io
from pathlib import Path
from typing import Iterable, TextIO

from moodjournal.models import MoodEntry

CSV_FIELDS = ["id", "mood", "note", "timestamp"]
DEFAULT_EXPORT_NAME = "moodjournal_moods.csv"


def _write_rows(entries: Iterable[MoodEntry], f: TextIO) -> int:
    writer = csv.writer(f, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_FIELDS)
    count = 0
    for entry in entries:
        writer.writerow([entry.id, entry.mood, entry.note, entry.timestamp])
        count += 1
    return count


def entries_to_csv(entries: Iterable[MoodEntry]) -> str:
    """Render entries as CSV text with an ``id,mood,note,timestamp`` header."""
    buf = io.StringIO()
    _write_rows(entries, buf)
    return buf.getvalue()


def write_csv(entries: Iterable[MoodEntry], output_path: Path) -> int:
    """Export entries to a CSV file.

    Rows are written in the order given, so pass ``EntryStore.list_all()``
    to get newest-first output. Notes containing commas, quotes or newlines
    are quoted with inner quotes doubled.

    Args:
        entries: Entries to export.
        output_path: Output file path.

    Returns:
        Number of entries exported.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        return _write_rows(entries, f)
