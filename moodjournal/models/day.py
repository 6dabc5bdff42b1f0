"""Derived, non-persisted view models."""

from datetime import date

from pydantic import BaseModel, Field

from moodjournal.models.entry import MoodEntry


class DayMood(BaseModel):
    """Average mood for one calendar day of the rolling window."""

    day: date = Field(..., description="Calendar date of the slot")
    day_label: str = Field(..., description="Short weekday name")
    avg_mood: float = Field(..., ge=0, le=5, description="Mean mood, 0.0 if no entries")

    model_config = {"frozen": True}


class JournalState(BaseModel):
    """Snapshot of every derived value a view renders."""

    mood_list: tuple[MoodEntry, ...] = Field(default=(), description="Entries, newest first")
    weekly_average_mood: float = Field(default=0.0, description="Rolling 7-day average")
    daily_series: tuple[DayMood, ...] = Field(default=(), description="7 per-day averages")

    model_config = {"frozen": True}
