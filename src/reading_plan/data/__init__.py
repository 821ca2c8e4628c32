"""Static reference data."""

from reading_plan.data.bible_books import BIBLE_BOOKS

__all__ = ["BIBLE_BOOKS"]
