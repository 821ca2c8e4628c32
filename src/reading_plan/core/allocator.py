"""Distribute an ordered run of chapters across an inclusive range of days."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from datetime import timedelta

from reading_plan.core.errors import DateOrderError
from reading_plan.models.catalog import ChapterRef
from reading_plan.models.schedule import DateRange, ScheduleEntry

log = logging.getLogger(__name__)

DEFAULT_MINUTES_PER_CHAPTER = 4
DEFAULT_MIN_MINUTES = 5


def day_window(day: int, chapter_count: int, total_days: int) -> tuple[int, int]:
    """Return the inclusive (start, end) chapter indices for a day.

    Uses a cumulative-floor partition: every chapter lands on exactly one
    day, windows never overlap and keep chapter order, and window sizes
    differ by at most one. The window is empty when end < start, which only
    happens when there are more days than chapters.
    """
    start = (day * chapter_count) // total_days
    end = ((day + 1) * chapter_count) // total_days - 1
    return start, end


def iter_windows(chapter_count: int, total_days: int) -> Iterator[tuple[int, int]]:
    """Yield the window of every day in order."""
    for day in range(total_days):
        yield day_window(day, chapter_count, total_days)


def estimate_minutes(
    chapter_count: int,
    minutes_per_chapter: int = DEFAULT_MINUTES_PER_CHAPTER,
    min_minutes: int = DEFAULT_MIN_MINUTES,
) -> int:
    """Estimated reading time for a day with the given number of chapters."""
    if chapter_count <= 0:
        return 0
    return max(chapter_count * minutes_per_chapter, min_minutes)


def allocate(
    date_range: DateRange,
    chapters: Sequence[ChapterRef],
    minutes_per_chapter: int = DEFAULT_MINUTES_PER_CHAPTER,
    min_minutes: int = DEFAULT_MIN_MINUTES,
) -> list[ScheduleEntry]:
    """Assign each day in the range a contiguous slice of chapters.

    Returns exactly one entry per day, in date order. The chapter sequence is
    only indexed, never modified.

    Raises:
        DateOrderError: If the range ends before it starts
    """
    total_days = date_range.total_days
    if total_days < 1:
        raise DateOrderError()

    selected_count = len(chapters)
    entries: list[ScheduleEntry] = []

    for day, (start, end) in enumerate(iter_windows(selected_count, total_days)):
        current = date_range.start + timedelta(days=day)
        if end >= start:
            count = end - start + 1
            entries.append(
                ScheduleEntry(
                    date=current,
                    chapter_start=chapters[start],
                    chapter_end=chapters[end],
                    chapter_count=count,
                    estimated_minutes=estimate_minutes(
                        count, minutes_per_chapter, min_minutes
                    ),
                )
            )
        else:
            entries.append(ScheduleEntry(date=current))

    log.debug(
        "Allocated %d chapters across %d days (%d reading days)",
        selected_count,
        total_days,
        sum(1 for entry in entries if not entry.is_empty),
    )
    return entries
