"""Data models for the book catalog and chapter references."""

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """A catalog entry."""

    model_config = ConfigDict(frozen=True)

    name: str
    chapter_count: int = Field(ge=1)


class ChapterRef(BaseModel):
    """A single chapter, tagged with its book's catalog position."""

    model_config = ConfigDict(frozen=True)

    book: str
    book_index: int = Field(ge=0)  # 0-based position in the catalog
    chapter: int = Field(ge=1)

    def __str__(self) -> str:
        return f"{self.book} {self.chapter}"


class SelectedRange(BaseModel):
    """Contiguous run of chapters spanning a start and end book (inclusive)."""

    model_config = ConfigDict(frozen=True)

    start_book: str
    end_book: str
    chapters: tuple[ChapterRef, ...]

    @property
    def count(self) -> int:
        return len(self.chapters)
