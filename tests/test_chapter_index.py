import pytest

from reading_plan.core.chapter_index import ChapterIndex, default_index
from reading_plan.core.errors import BookOrderError, InvalidBookError, ScheduleError
from reading_plan.models.catalog import Book


def test_index_flattens_catalog_in_order(small_index):
    chapters = small_index.chapters

    assert small_index.total_chapters == 90
    assert len(small_index) == 90
    assert (chapters[0].book, chapters[0].chapter, chapters[0].book_index) == ("Genesis", 1, 0)
    assert (chapters[49].book, chapters[49].chapter) == ("Genesis", 50)
    assert (chapters[50].book, chapters[50].chapter, chapters[50].book_index) == ("Exodus", 1, 1)
    assert (chapters[-1].book, chapters[-1].chapter) == ("Exodus", 40)


def test_bible_catalog_totals(bible_index):
    assert len(bible_index.books) == 66
    assert bible_index.total_chapters == 1189
    assert bible_index.first_book.name == "Genesis"
    assert bible_index.last_book.name == "Revelation"


def test_default_index_is_built_once():
    assert default_index() is default_index()


def test_empty_catalog_rejected():
    with pytest.raises(ValueError):
        ChapterIndex([])


def test_select_full_range(small_index):
    selected = small_index.select("Genesis", "Exodus")

    assert selected.count == 90
    assert selected.chapters == small_index.chapters


def test_select_single_book(bible_index):
    selected = bible_index.select("Jude", "Jude")

    assert selected.count == 1
    assert str(selected.chapters[0]) == "Jude 1"


def test_select_spans_books_inclusively(bible_index):
    selected = bible_index.select("Matthew", "John")

    assert selected.count == 28 + 16 + 24 + 21
    assert selected.chapters[0].book == "Matthew"
    assert selected.chapters[-1].book == "John"
    assert selected.chapters[-1].chapter == 21
    assert all(
        bible_index.position_of("Matthew") <= ref.book_index <= bible_index.position_of("John")
        for ref in selected.chapters
    )


@pytest.mark.parametrize(
    "start, end",
    [("Genesis", "Leviticus"), ("Nope", "Exodus"), ("genesis", "Exodus"), ("Genesis", "")],
)
def test_select_unknown_book(small_index, start, end):
    with pytest.raises(InvalidBookError) as exc_info:
        small_index.select(start, end)
    assert str(exc_info.value) == "Please choose valid start and end books."


def test_select_reversed_books(small_index):
    with pytest.raises(BookOrderError) as exc_info:
        small_index.select("Exodus", "Genesis")
    assert isinstance(exc_info.value, ScheduleError)
    assert "come after the start book" in str(exc_info.value)


def test_duplicate_names_resolve_to_first_position():
    index = ChapterIndex(
        [Book(name="A", chapter_count=1), Book(name="B", chapter_count=2), Book(name="A", chapter_count=3)]
    )
    assert index.position_of("A") == 0
    assert index.total_chapters == 6
