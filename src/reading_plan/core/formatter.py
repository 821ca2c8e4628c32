"""Human-readable rendering of chapter references and dates."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reading_plan.models.catalog import ChapterRef

# Shown on days with nothing assigned
EMPTY_READING = "—"


def format_range(
    start_ref: ChapterRef | None, end_ref: ChapterRef | None
) -> str | None:
    """Format a pair of chapter references.

    Returns None when either reference is missing so callers can render
    their own placeholder.

    Examples:
        Genesis 1 .. Genesis 1   -> "Genesis 1"
        Genesis 1 .. Genesis 3   -> "Genesis 1-3"
        Genesis 50 .. Exodus 2   -> "Genesis 50 - Exodus 2"
    """
    if start_ref is None or end_ref is None:
        return None
    if start_ref.book == end_ref.book:
        if start_ref.chapter == end_ref.chapter:
            return f"{start_ref.book} {start_ref.chapter}"
        return f"{start_ref.book} {start_ref.chapter}-{end_ref.chapter}"
    return f"{start_ref.book} {start_ref.chapter} - {end_ref.book} {end_ref.chapter}"


def format_date(value: date) -> str:
    """Format a date as e.g. "Jan 1, 2024"."""
    return f"{value:%b} {value.day}, {value.year}"
