"""Flattened chapter index over the book catalog, and book-range selection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import cache

from reading_plan.core.errors import BookOrderError, InvalidBookError
from reading_plan.models.catalog import Book, ChapterRef, SelectedRange

log = logging.getLogger(__name__)


class ChapterIndex:
    """Every chapter of every book, in catalog then chapter order.

    Built once from static catalog data and never mutated afterwards, so a
    single instance can be shared by any number of concurrent requests.
    """

    def __init__(self, books: Sequence[Book]):
        if not books:
            raise ValueError("Book catalog is empty")

        self._books: tuple[Book, ...] = tuple(books)
        self._positions: dict[str, int] = {}
        # offsets[i] is where book i starts in the flattened sequence
        self._offsets: list[int] = []

        chapters: list[ChapterRef] = []
        for book_index, book in enumerate(self._books):
            self._positions.setdefault(book.name, book_index)
            self._offsets.append(len(chapters))
            for chapter in range(1, book.chapter_count + 1):
                chapters.append(
                    ChapterRef(book=book.name, book_index=book_index, chapter=chapter)
                )
        self._offsets.append(len(chapters))
        self._chapters: tuple[ChapterRef, ...] = tuple(chapters)

        log.debug(
            "Built chapter index: %d books, %d chapters",
            len(self._books),
            len(self._chapters),
        )

    @property
    def books(self) -> tuple[Book, ...]:
        return self._books

    @property
    def chapters(self) -> tuple[ChapterRef, ...]:
        return self._chapters

    @property
    def total_chapters(self) -> int:
        return len(self._chapters)

    @property
    def first_book(self) -> Book:
        return self._books[0]

    @property
    def last_book(self) -> Book:
        return self._books[-1]

    def __len__(self) -> int:
        return len(self._chapters)

    def position_of(self, book_name: str) -> int | None:
        """Catalog position of a book (exact, case-sensitive match)."""
        return self._positions.get(book_name)

    def select(self, start_book: str, end_book: str) -> SelectedRange:
        """Select every chapter from the start book through the end book.

        Raises:
            InvalidBookError: If either name is not in the catalog
            BookOrderError: If the end book comes before the start book
        """
        start_idx = self.position_of(start_book)
        end_idx = self.position_of(end_book)

        if start_idx is None or end_idx is None:
            raise InvalidBookError()
        if end_idx < start_idx:
            raise BookOrderError()

        # Chapters of a book are contiguous, so the range is a single slice
        chapters = self._chapters[self._offsets[start_idx] : self._offsets[end_idx + 1]]
        return SelectedRange(start_book=start_book, end_book=end_book, chapters=chapters)


@cache
def default_index() -> ChapterIndex:
    """Process-wide index over the built-in Bible catalog."""
    from reading_plan.data.bible_books import BIBLE_BOOKS

    return ChapterIndex(BIBLE_BOOKS)
