"""Data models for a generated reading schedule."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from reading_plan.core.formatter import EMPTY_READING, format_date, format_range
from reading_plan.models.catalog import ChapterRef


class DateRange(BaseModel):
    """Inclusive span of calendar days."""

    model_config = ConfigDict(frozen=True)

    start: dt.date
    end: dt.date

    @property
    def total_days(self) -> int:
        return (self.end - self.start).days + 1


class ScheduleEntry(BaseModel):
    """One day of the plan. Both refs are None on days with no reading."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    chapter_start: ChapterRef | None = None
    chapter_end: ChapterRef | None = None
    chapter_count: int = 0
    estimated_minutes: int = 0

    @property
    def is_empty(self) -> bool:
        return self.chapter_start is None or self.chapter_end is None

    @property
    def date_label(self) -> str:
        return format_date(self.date)

    @property
    def reading(self) -> str:
        """Formatted reading range, or the placeholder on empty days."""
        formatted = format_range(self.chapter_start, self.chapter_end)
        return formatted if formatted is not None else EMPTY_READING


class Schedule(BaseModel):
    """Complete day-by-day plan for one request."""

    start_date: dt.date
    end_date: dt.date
    start_book: str
    end_book: str
    entries: list[ScheduleEntry] = Field(default_factory=list)
    selected_chapter_count: int
    total_days: int
    total_chapters: int

    @property
    def reading_days(self) -> int:
        return sum(1 for entry in self.entries if not entry.is_empty)


class PlanRequest(BaseModel):
    """Raw schedule inputs as submitted, echoed back when validation fails."""

    start_date: str
    end_date: str
    start_book: str
    end_book: str
