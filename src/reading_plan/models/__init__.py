"""Data models."""

from reading_plan.models.catalog import (
    Book,
    ChapterRef,
    SelectedRange,
)
from reading_plan.models.schedule import (
    DateRange,
    PlanRequest,
    Schedule,
    ScheduleEntry,
)

__all__ = [
    # Catalog models
    "Book",
    "ChapterRef",
    "SelectedRange",
    # Schedule models
    "DateRange",
    "ScheduleEntry",
    "Schedule",
    "PlanRequest",
]
