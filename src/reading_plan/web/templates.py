"""HTML rendering for the schedule form and results page."""

from __future__ import annotations

import html
from dataclasses import dataclass
from urllib.parse import urlencode

from reading_plan.models.catalog import Book
from reading_plan.models.schedule import PlanRequest, Schedule


@dataclass
class PageStats:
    """Numbers shown above the schedule."""

    total_chapters: int
    selected_chapters: int | None = None
    total_days: int | None = None


PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Bible Reading Schedule</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <style>
    body {
      margin: 0 auto;
      max-width: 960px;
      padding: 24px;
      font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
      color: #111;
    }
    form {
      display: grid;
      grid-template-columns: repeat(auto-fit, minmax(180px, 1fr));
      gap: 12px;
      align-items: end;
    }
    label { display: flex; flex-direction: column; font-size: 0.9em; gap: 4px; }
    .error {
      background: #fde8e8;
      border: 1px solid #f5a3a3;
      color: #8a1c1c;
      padding: 10px 14px;
      border-radius: 6px;
      margin: 16px 0;
    }
    .stats { color: #555; margin: 16px 0; }
    table { border-collapse: collapse; width: 100%; }
    th, td { text-align: left; padding: 6px 8px; border-bottom: 1px solid #ddd; }
    td.empty { color: #999; }
  </style>
</head>
<body>
  <h1>Bible Reading Schedule</h1>
  <form method="get" action="/schedule">
    <label>Start date
      <input type="date" name="startDate" value="__START_DATE__">
    </label>
    <label>End date
      <input type="date" name="endDate" value="__END_DATE__">
    </label>
    <label>Start book
      <select name="startBook">__START_BOOK_OPTIONS__</select>
    </label>
    <label>End book
      <select name="endBook">__END_BOOK_OPTIONS__</select>
    </label>
    <button type="submit">Generate schedule</button>
  </form>
__ERROR__
__STATS__
__SCHEDULE__
</body>
</html>
"""


def _book_options(books: tuple[Book, ...], selected: str) -> str:
    options = []
    if selected not in {book.name for book in books}:
        # Keep an unknown submitted name visible next to the error
        value = html.escape(selected)
        options.append(f'<option value="{value}" selected>{value}</option>')
    for book in books:
        attr = " selected" if book.name == selected else ""
        name = html.escape(book.name)
        options.append(f'<option value="{name}"{attr}>{name}</option>')
    return "".join(options)


def _stats_html(stats: PageStats) -> str:
    parts = [f"Total chapters: {stats.total_chapters}"]
    if stats.selected_chapters is not None:
        parts.append(f"Chapters in range: {stats.selected_chapters}")
    if stats.total_days is not None:
        parts.append(f"Days: {stats.total_days}")
    return f'  <p class="stats">{" &middot; ".join(parts)}</p>'


def _schedule_html(schedule: Schedule, values: PlanRequest) -> str:
    query = urlencode(
        {
            "startDate": values.start_date,
            "endDate": values.end_date,
            "startBook": values.start_book,
            "endBook": values.end_book,
        }
    )
    rows = []
    for entry in schedule.entries:
        css = ' class="empty"' if entry.is_empty else ""
        rows.append(
            f"      <tr><td>{html.escape(entry.date_label)}</td>"
            f"<td{css}>{html.escape(entry.reading)}</td></tr>"
        )
    return "\n".join(
        [
            f'  <p><a href="/download?{html.escape(query)}">Download PDF</a></p>',
            "  <table>",
            "    <thead><tr><th>Date</th><th>Reading</th></tr></thead>",
            "    <tbody>",
            *rows,
            "    </tbody>",
            "  </table>",
        ]
    )


def render_page(
    books: tuple[Book, ...],
    values: PlanRequest,
    stats: PageStats,
    schedule: Schedule | None = None,
    error: str | None = None,
) -> str:
    """Render the form, optional error message, stats, and optional schedule.

    The form is always populated from ``values`` so submitted input is
    echoed back, including invalid input.
    """
    error_html = f'  <div class="error">{html.escape(error)}</div>' if error else ""
    schedule_html = _schedule_html(schedule, values) if schedule is not None else ""

    return (
        PAGE_HTML.replace("__START_DATE__", html.escape(values.start_date))
        .replace("__END_DATE__", html.escape(values.end_date))
        .replace("__START_BOOK_OPTIONS__", _book_options(books, values.start_book))
        .replace("__END_BOOK_OPTIONS__", _book_options(books, values.end_book))
        .replace("__ERROR__", error_html)
        .replace("__STATS__", _stats_html(stats))
        .replace("__SCHEDULE__", schedule_html)
    )
