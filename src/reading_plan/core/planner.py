"""Turn raw schedule inputs into a validated reading schedule."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

from reading_plan.config import Settings
from reading_plan.core.allocator import allocate
from reading_plan.core.chapter_index import ChapterIndex
from reading_plan.core.errors import (
    DateOrderError,
    DateRangeTooLongError,
    InvalidDateError,
)
from reading_plan.models.schedule import DateRange, PlanRequest, Schedule

log = logging.getLogger(__name__)


def parse_date(value: str | date) -> date:
    """Parse a YYYY-MM-DD calendar date.

    Raises:
        InvalidDateError: If the value is not a valid date
    """
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError) as e:
        raise InvalidDateError() from e


def resolve_request(
    index: ChapterIndex,
    start_date: str | None = None,
    end_date: str | None = None,
    start_book: str | None = None,
    end_book: str | None = None,
    today: date | None = None,
    span_days: int = 365,
) -> PlanRequest:
    """Fill in defaults for any missing or blank input.

    Defaults are today, today + span_days, and the first and last books of
    the catalog. Supplied values are kept verbatim, even if invalid.
    """
    today = today or date.today()
    return PlanRequest(
        start_date=start_date or today.isoformat(),
        end_date=end_date or (today + timedelta(days=span_days)).isoformat(),
        start_book=start_book or index.first_book.name,
        end_book=end_book or index.last_book.name,
    )


def build_schedule(
    index: ChapterIndex,
    request: PlanRequest,
    settings: Settings | None = None,
) -> Schedule:
    """Build the full schedule for a request.

    Dates are validated before the book range; the first failure is raised
    and no partial schedule is produced.

    Raises:
        InvalidDateError: If either date does not parse
        DateOrderError: If the end date is before the start date
        DateRangeTooLongError: If the range exceeds settings.max_days
        InvalidBookError: If either book is not in the catalog
        BookOrderError: If the end book is before the start book
    """
    settings = settings or Settings()

    start = parse_date(request.start_date)
    end = parse_date(request.end_date)
    if end < start:
        raise DateOrderError()
    if (end - start).days + 1 > settings.max_days:
        raise DateRangeTooLongError()

    selected = index.select(request.start_book, request.end_book)
    date_range = DateRange(start=start, end=end)

    entries = allocate(
        date_range,
        selected.chapters,
        minutes_per_chapter=settings.minutes_per_chapter,
        min_minutes=settings.min_minutes,
    )

    log.debug(
        "Built schedule %s..%s for %s..%s",
        start,
        end,
        request.start_book,
        request.end_book,
    )

    return Schedule(
        start_date=start,
        end_date=end,
        start_book=request.start_book,
        end_book=request.end_book,
        entries=entries,
        selected_chapter_count=selected.count,
        total_days=date_range.total_days,
        total_chapters=index.total_chapters,
    )
