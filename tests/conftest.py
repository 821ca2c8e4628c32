"""Shared fixtures."""

import pytest

from reading_plan.config import Settings
from reading_plan.core.chapter_index import ChapterIndex, default_index
from reading_plan.models.catalog import Book


@pytest.fixture
def small_index() -> ChapterIndex:
    """Genesis (50) and Exodus (40): 90 chapters."""
    return ChapterIndex([Book(name="Genesis", chapter_count=50), Book(name="Exodus", chapter_count=40)])


@pytest.fixture
def bible_index() -> ChapterIndex:
    return default_index()


@pytest.fixture
def settings() -> Settings:
    return Settings()
