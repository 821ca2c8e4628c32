"""Render a reading schedule as a paginated, multi-column PDF."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import BinaryIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import (
    BaseDocTemplate,
    Frame,
    FrameBreak,
    NextPageTemplate,
    PageTemplate,
    Paragraph,
    Table,
)
from reportlab.platypus.flowables import Flowable
from reportlab.platypus.tables import TableStyle

from reading_plan.core.formatter import format_date
from reading_plan.models.schedule import Schedule, ScheduleEntry

log = logging.getLogger(__name__)

PAGE_SIZES = {"a4": A4, "letter": letter}

TITLE = "Bible Reading Schedule"
PDF_FILENAME = "bible-reading-schedule.pdf"

# Height reserved for the title block on the first page
TITLE_BLOCK_HEIGHT = 130

LINE_COLOR = colors.HexColor("#cccccc")
BOX_COLOR = colors.HexColor("#555555")
TEXT_COLOR = colors.HexColor("#111111")


class Checkbox(Flowable):
    """Empty square for ticking off a day's reading."""

    def __init__(self, size: float = 8):
        super().__init__()
        self.size = size

    def wrap(self, avail_width: float, avail_height: float) -> tuple[float, float]:
        return self.size, self.size

    def draw(self) -> None:
        self.canv.setStrokeColor(BOX_COLOR)
        self.canv.setLineWidth(0.6)
        self.canv.rect(0, 0, self.size, self.size, stroke=1, fill=0)


class SchedulePdfWriter:
    """Lay out a schedule as rows flowing down columns, then across pages.

    Rows fill the first column top to bottom, then the next column, then the
    next page. Each row is a single-row table, which never splits across
    columns.
    """

    def __init__(
        self,
        columns: int = 2,
        page_size: str = "a4",
        margin: float = 50,
        column_gap: float = 18,
    ):
        """Initialize the writer.

        Args:
            columns: Number of columns per page, 1-3 (1 gives a plain list)
            page_size: "a4" or "letter"
            margin: Page margin in points
            column_gap: Horizontal space between columns in points
        """
        if not 1 <= columns <= 3:
            raise ValueError(f"columns must be between 1 and 3, got {columns}")
        if page_size not in PAGE_SIZES:
            supported = ", ".join(PAGE_SIZES)
            raise ValueError(f"Unsupported page size: {page_size}. Supported: {supported}")

        self.columns = columns
        self.page_size = PAGE_SIZES[page_size]
        self.margin = margin
        self.column_gap = column_gap

        styles = getSampleStyleSheet()
        self.title_style = ParagraphStyle(
            "ScheduleTitle",
            parent=styles["Title"],
            fontSize=20,
            leading=24,
            alignment=0,
            spaceAfter=6,
        )
        self.info_style = ParagraphStyle(
            "ScheduleInfo",
            parent=styles["Normal"],
            fontSize=11,
            leading=14,
        )
        self.reading_style = ParagraphStyle(
            "ScheduleReading",
            parent=styles["Normal"],
            fontSize=9,
            leading=11,
            textColor=TEXT_COLOR,
        )

    @property
    def column_width(self) -> float:
        page_width, _ = self.page_size
        usable = page_width - 2 * self.margin
        return (usable - (self.columns - 1) * self.column_gap) / self.columns

    def _column_frames(self, height: float, prefix: str) -> list[Frame]:
        return [
            Frame(
                self.margin + i * (self.column_width + self.column_gap),
                self.margin,
                self.column_width,
                height,
                leftPadding=0,
                rightPadding=0,
                topPadding=0,
                bottomPadding=0,
                id=f"{prefix}{i}",
            )
            for i in range(self.columns)
        ]

    def _page_templates(self) -> list[PageTemplate]:
        page_width, page_height = self.page_size
        body_height = page_height - 2 * self.margin

        title_frame = Frame(
            self.margin,
            page_height - self.margin - TITLE_BLOCK_HEIGHT,
            page_width - 2 * self.margin,
            TITLE_BLOCK_HEIGHT,
            leftPadding=0,
            rightPadding=0,
            topPadding=0,
            bottomPadding=0,
            id="title",
        )
        first = PageTemplate(
            id="first",
            frames=[title_frame]
            + self._column_frames(body_height - TITLE_BLOCK_HEIGHT, "first-col"),
            onPage=self._draw_footer,
        )
        rest = PageTemplate(
            id="columns",
            frames=self._column_frames(body_height, "col"),
            onPage=self._draw_footer,
        )
        return [first, rest]

    def _draw_footer(self, canvas, doc) -> None:
        page_width, _ = self.page_size
        canvas.saveState()
        canvas.setFont("Helvetica", 8)
        canvas.setFillColor(colors.grey)
        canvas.drawRightString(
            page_width - self.margin, self.margin / 2, f"Page {doc.page}"
        )
        canvas.restoreState()

    def title_block(self, schedule: Schedule) -> list[Flowable]:
        """Title and summary lines shown at the top of the first page."""
        lines = [
            f"Start date: {format_date(schedule.start_date)}",
            f"End date: {format_date(schedule.end_date)}",
            f"Books: {schedule.start_book} - {schedule.end_book}",
            f"Chapters in range: {schedule.selected_chapter_count} "
            f"of {schedule.total_chapters}",
            f"Days: {schedule.total_days}",
        ]
        return [Paragraph(TITLE, self.title_style)] + [
            Paragraph(escape(line), self.info_style) for line in lines
        ]

    def entry_row(self, entry: ScheduleEntry) -> Table:
        """One unsplittable row: checkbox, date, reading, estimated minutes.

        The minutes column is left out when there are more than two columns.
        """
        box_width, date_width, minutes_width = 14, 60, 36
        cells = [
            Checkbox(),
            entry.date_label,
            Paragraph(escape(entry.reading), self.reading_style),
        ]
        widths = [box_width, date_width]

        show_minutes = self.columns <= 2
        if show_minutes:
            reading_width = self.column_width - box_width - date_width - minutes_width
            cells.append(f"{entry.estimated_minutes} min" if not entry.is_empty else "")
            widths += [reading_width, minutes_width]
        else:
            widths.append(self.column_width - box_width - date_width)

        style = [
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 9),
            ("TEXTCOLOR", (0, 0), (-1, -1), TEXT_COLOR),
            ("LEFTPADDING", (0, 0), (-1, -1), 2),
            ("RIGHTPADDING", (0, 0), (-1, -1), 2),
            ("TOPPADDING", (0, 0), (-1, -1), 2),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
            ("LINEBELOW", (0, 0), (-1, -1), 0.25, LINE_COLOR),
        ]
        if show_minutes:
            style += [
                ("TEXTCOLOR", (3, 0), (3, 0), colors.grey),
                ("ALIGN", (3, 0), (3, 0), "RIGHT"),
            ]

        table = Table([cells], colWidths=widths)
        table.setStyle(TableStyle(style))
        return table

    def build_story(self, schedule: Schedule) -> list[Flowable]:
        """Flowables for the whole document, in schedule order."""
        story: list[Flowable] = [NextPageTemplate("columns")]
        story.extend(self.title_block(schedule))
        story.append(FrameBreak())
        story.extend(self.entry_row(entry) for entry in schedule.entries)
        return story

    def write(self, schedule: Schedule, target: BinaryIO | Path) -> None:
        """Write the PDF to a path or binary file object."""
        if isinstance(target, Path):
            target = str(target)

        doc = BaseDocTemplate(
            target,
            pagesize=self.page_size,
            leftMargin=self.margin,
            rightMargin=self.margin,
            topMargin=self.margin,
            bottomMargin=self.margin,
            title=TITLE,
            author="reading-plan",
        )
        doc.addPageTemplates(self._page_templates())
        doc.build(self.build_story(schedule))

        log.debug(
            "Rendered %d schedule rows in %d column(s) across %d page(s)",
            len(schedule.entries),
            self.columns,
            doc.page,
        )

    def render(self, schedule: Schedule) -> bytes:
        """Render the PDF into memory and return its bytes."""
        buffer = BytesIO()
        self.write(schedule, buffer)
        return buffer.getvalue()
