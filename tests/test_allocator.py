from datetime import date, timedelta

import pytest

from reading_plan.core.allocator import allocate, day_window, estimate_minutes, iter_windows
from reading_plan.core.errors import DateOrderError
from reading_plan.models.schedule import DateRange


def _range(days: int, start: date = date(2024, 1, 1)) -> DateRange:
    return DateRange(start=start, end=start + timedelta(days=days - 1))


CASES = [(90, 3), (90, 1), (5, 10), (1189, 365), (1189, 366), (7, 7), (1, 30), (0, 4), (260, 90)]


@pytest.mark.parametrize("chapter_count, total_days", CASES)
def test_windows_partition_every_chapter_once(chapter_count, total_days):
    assigned = []
    for start, end in iter_windows(chapter_count, total_days):
        assigned.extend(range(start, end + 1))

    assert assigned == list(range(chapter_count))


@pytest.mark.parametrize("chapter_count, total_days", CASES)
def test_windows_are_monotonic_and_balanced(chapter_count, total_days):
    windows = list(iter_windows(chapter_count, total_days))
    starts = [start for start, _ in windows]
    sizes = [max(0, end - start + 1) for start, end in windows]

    assert len(windows) == total_days
    assert starts == sorted(starts)
    assert max(sizes) - min(sizes) <= 1


@pytest.mark.parametrize("chapter_count, total_days", CASES)
def test_empty_days_only_when_days_outnumber_chapters(chapter_count, total_days):
    empty = sum(1 for start, end in iter_windows(chapter_count, total_days) if end < start)

    if total_days <= chapter_count:
        assert empty == 0
    else:
        assert empty == total_days - chapter_count


def test_day_window_formula():
    assert day_window(0, 90, 3) == (0, 29)
    assert day_window(1, 90, 3) == (30, 59)
    assert day_window(2, 90, 3) == (60, 89)
    assert day_window(0, 5, 10) == (0, -1)


def test_allocate_three_days_evenly(small_index):
    chapters = small_index.select("Genesis", "Exodus").chapters
    entries = allocate(_range(3), chapters)

    assert [entry.date for entry in entries] == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]
    assert [entry.chapter_count for entry in entries] == [30, 30, 30]
    assert entries[0].chapter_start == chapters[0]
    assert entries[0].chapter_end == chapters[29]
    assert entries[1].chapter_start == chapters[30]
    assert entries[1].chapter_end == chapters[59]
    assert entries[2].chapter_start == chapters[60]
    assert entries[2].chapter_end == chapters[89]
    assert entries[0].reading == "Genesis 1-30"
    assert entries[1].reading == "Genesis 31 - Exodus 10"
    assert entries[2].reading == "Exodus 11-40"


def test_allocate_single_day_gets_everything(small_index):
    chapters = small_index.select("Genesis", "Exodus").chapters
    entries = allocate(_range(1), chapters)

    assert len(entries) == 1
    assert entries[0].chapter_count == 90
    assert entries[0].reading == "Genesis 1 - Exodus 40"


def test_allocate_more_days_than_chapters_interleaves_empty_days(small_index):
    chapters = small_index.chapters[:5]
    entries = allocate(_range(10), chapters)

    assert len(entries) == 10
    assert sum(1 for entry in entries if entry.is_empty) == 5
    assert [entry.chapter_count for entry in entries] == [0, 1] * 5
    assert [entry.chapter_start for entry in entries if not entry.is_empty] == list(chapters)
    assert entries[0].reading == "—"
    assert entries[0].estimated_minutes == 0


def test_allocate_does_not_modify_chapters(small_index):
    chapters = list(small_index.chapters)
    snapshot = list(chapters)

    allocate(_range(17), chapters)

    assert chapters == snapshot


def test_allocate_rejects_reversed_range(small_index):
    reversed_range = DateRange(start=date(2024, 1, 2), end=date(2024, 1, 1))

    with pytest.raises(DateOrderError):
        allocate(reversed_range, small_index.chapters)


def test_allocate_crosses_leap_day(bible_index):
    entries = allocate(DateRange(start=date(2024, 2, 28), end=date(2024, 3, 1)), bible_index.chapters)

    assert [entry.date for entry in entries] == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


def test_estimate_minutes():
    assert estimate_minutes(0) == 0
    assert estimate_minutes(1) == 5
    assert estimate_minutes(3) == 12
    assert estimate_minutes(2, minutes_per_chapter=10, min_minutes=5) == 20
    assert estimate_minutes(1, minutes_per_chapter=1, min_minutes=0) == 1


def test_estimate_does_not_change_allocation(small_index):
    chapters = small_index.chapters
    fast = allocate(_range(7), chapters, minutes_per_chapter=1, min_minutes=0)
    slow = allocate(_range(7), chapters, minutes_per_chapter=30, min_minutes=60)

    assert [(e.chapter_start, e.chapter_end) for e in fast] == [
        (e.chapter_start, e.chapter_end) for e in slow
    ]
