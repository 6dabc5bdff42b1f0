"""MoodEntry data model."""

import time
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

MIN_MOOD = 1
MAX_MOOD = 5


def now_millis() -> int:
    """Current instant as milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


class MoodEntry(BaseModel):
    """Represents one recorded mood rating."""

    id: Optional[int] = Field(default=None, description="Database ID")
    mood: int = Field(..., ge=MIN_MOOD, le=MAX_MOOD, description="Mood rating (1-5)")
    note: str = Field(default="", description="Optional free-text note")
    timestamp: int = Field(
        default_factory=now_millis, description="Creation instant in epoch milliseconds"
    )

    model_config = {"frozen": True}

    def created_at(self) -> datetime:
        """Creation instant as a local, timezone-aware datetime."""
        return datetime.fromtimestamp(self.timestamp / 1000).astimezone()

    def local_date(self) -> date:
        """Local calendar day the entry was recorded on."""
        return datetime.fromtimestamp(self.timestamp / 1000).date()
