"""Exceptions raised by MoodJournal."""


class MoodJournalError(Exception):
    """Base class for all MoodJournal errors."""


class StorageUnavailable(MoodJournalError):
    """The local database could not be opened, read or written."""


class InvalidMoodValue(MoodJournalError, ValueError):
    """A mood rating outside 1-5 was submitted."""

    def __init__(self, mood: object):
        self.mood = mood
        super().__init__(f"Mood must be an integer from 1 to 5, got {mood!r}")


class MalformedPreferenceValue(MoodJournalError):
    """A stored preference could not be read as the expected type."""

    def __init__(self, key: str, raw: object):
        self.key = key
        self.raw = raw
        super().__init__(f"Preference {key!r} has unreadable value {raw!r}")


class ConfigError(MoodJournalError):
    """The configuration file exists but could not be parsed."""
