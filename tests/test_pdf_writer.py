import re
from datetime import datetime
from io import BytesIO

import pytest
from pypdf import PdfReader
from reportlab.platypus import Table

from reading_plan.core.planner import build_schedule
from reading_plan.export.pdf_writer import SchedulePdfWriter
from reading_plan.models.schedule import PlanRequest


@pytest.fixture
def year_schedule(bible_index):
    return build_schedule(
        bible_index,
        PlanRequest(
            start_date="2025-01-01",
            end_date="2025-12-31",
            start_book="Genesis",
            end_book="Revelation",
        ),
    )


@pytest.fixture
def short_schedule(small_index):
    return build_schedule(
        small_index,
        PlanRequest(
            start_date="2024-01-01",
            end_date="2024-01-03",
            start_book="Genesis",
            end_book="Exodus",
        ),
    )


def _text(pdf: bytes) -> str:
    reader = PdfReader(BytesIO(pdf))
    return "\n".join(page.extract_text() for page in reader.pages)


def test_render_short_schedule(short_schedule):
    pdf = SchedulePdfWriter().render(short_schedule)

    assert pdf.startswith(b"%PDF")
    text = _text(pdf)
    assert "Bible Reading Schedule" in text
    assert "Chapters in range: 90 of 90" in text
    assert "Days: 3" in text
    assert "Genesis 1-30" in text
    assert "Exodus 11-40" in text


def test_long_schedule_overflows_onto_more_pages(year_schedule):
    two_columns = PdfReader(BytesIO(SchedulePdfWriter(columns=2).render(year_schedule)))
    one_column = PdfReader(BytesIO(SchedulePdfWriter(columns=1).render(year_schedule)))

    assert len(two_columns.pages) > 1
    assert len(one_column.pages) > len(two_columns.pages)


def test_story_keeps_schedule_order(short_schedule):
    writer = SchedulePdfWriter()
    rows = [flowable for flowable in writer.build_story(short_schedule) if isinstance(flowable, Table)]

    assert len(rows) == len(short_schedule.entries)


def test_write_to_path(tmp_path, short_schedule):
    target = tmp_path / "plan.pdf"

    SchedulePdfWriter(page_size="letter").write(short_schedule, target)

    assert target.read_bytes().startswith(b"%PDF")


@pytest.mark.parametrize("kwargs", [{"columns": 0}, {"columns": 4}, {"page_size": "a3"}])
def test_invalid_layout_rejected(kwargs):
    with pytest.raises(ValueError):
        SchedulePdfWriter(**kwargs)


def test_column_width_shrinks_with_more_columns():
    assert SchedulePdfWriter(columns=3).column_width < SchedulePdfWriter(columns=1).column_width


DATE_LABEL = re.compile(r"(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec) (\d{1,2}), (\d{4})(?!\d)")


def test_rows_follow_schedule_order_across_columns_and_pages(year_schedule):
    reader = PdfReader(BytesIO(SchedulePdfWriter(columns=2).render(year_schedule)))
    text = "\n".join(page.extract_text() for page in reader.pages)

    title_end = text.index("Days: 365")
    labels = [
        datetime.strptime(" ".join(match.groups()), "%b %d %Y").date()
        for match in DATE_LABEL.finditer(text[title_end:])
    ]

    assert len(reader.pages) > 1
    assert labels == [entry.date for entry in year_schedule.entries]
    # Start/end dates in the title block come before any row
    assert text.index("Start date: Jan 1, 2025") < title_end
