from datetime import date

import pytest

from reading_plan.core.formatter import EMPTY_READING, format_date, format_range
from reading_plan.models.catalog import ChapterRef


def ref(book: str, chapter: int, book_index: int = 0) -> ChapterRef:
    return ChapterRef(book=book, book_index=book_index, chapter=chapter)


def test_single_chapter():
    assert format_range(ref("Jude", 1), ref("Jude", 1)) == "Jude 1"


def test_range_within_book():
    assert format_range(ref("Genesis", 1), ref("Genesis", 3)) == "Genesis 1-3"


def test_range_across_books():
    assert format_range(ref("Genesis", 50), ref("Exodus", 2, 1)) == "Genesis 50 - Exodus 2"


def test_numbered_book_names():
    assert format_range(ref("1 John", 5), ref("2 John", 1, 1)) == "1 John 5 - 2 John 1"


@pytest.mark.parametrize("start, end", [(None, None), (None, "x"), ("x", None)])
def test_missing_reference_returns_marker(start, end):
    start = ref("Genesis", 1) if start else None
    end = ref("Genesis", 1) if end else None

    assert format_range(start, end) is None


def test_placeholder_is_clean_dash():
    assert EMPTY_READING == "—"


@pytest.mark.parametrize(
    "value, expected",
    [
        (date(2024, 1, 1), "Jan 1, 2024"),
        (date(2024, 12, 25), "Dec 25, 2024"),
        (date(2025, 3, 9), "Mar 9, 2025"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected
