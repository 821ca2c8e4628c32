"""Interactive wizard for building and exporting a reading plan."""

from __future__ import annotations

from pathlib import Path

import questionary
from questionary import Style
from rich.console import Console

from reading_plan.commands.plan import display_schedule, display_summary
from reading_plan.config import Settings
from reading_plan.core.chapter_index import ChapterIndex
from reading_plan.core.errors import ScheduleError
from reading_plan.core.planner import build_schedule, parse_date, resolve_request
from reading_plan.export.pdf_writer import PDF_FILENAME, SchedulePdfWriter
from reading_plan.models.schedule import PlanRequest


# Custom questionary style
WIZARD_STYLE = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "bold"),
    ("answer", "fg:cyan bold"),
    ("pointer", "fg:cyan bold"),
    ("highlighted", "fg:cyan bold"),
    ("selected", "fg:green"),
    ("separator", "fg:gray"),
    ("instruction", "fg:gray"),
])


class WizardCancelled(Exception):
    """Raised when the user aborts a prompt (Ctrl-C or Esc)."""


def _answer(value):
    if value is None:
        raise WizardCancelled()
    return value


def validate_date(text: str) -> bool | str:
    """questionary validator: True or an error message."""
    try:
        parse_date(text)
    except ScheduleError:
        return "Use the format YYYY-MM-DD"
    return True


def ask_dates(defaults: PlanRequest) -> tuple[str, str]:
    """Prompt for start and end dates."""
    start = _answer(
        questionary.text(
            "Start date (YYYY-MM-DD):",
            default=defaults.start_date,
            validate=validate_date,
            style=WIZARD_STYLE,
        ).ask()
    )
    end = _answer(
        questionary.text(
            "End date (YYYY-MM-DD):",
            default=defaults.end_date,
            validate=validate_date,
            style=WIZARD_STYLE,
        ).ask()
    )
    return start, end


def ask_books(index: ChapterIndex, defaults: PlanRequest) -> tuple[str, str]:
    """Prompt for start and end books. End choices begin at the start book."""
    names = [book.name for book in index.books]
    start = _answer(
        questionary.select(
            "Start book:",
            choices=[
                questionary.Choice(title=f"{b.name}  ({b.chapter_count})", value=b.name)
                for b in index.books
            ],
            default=defaults.start_book,
            style=WIZARD_STYLE,
            instruction="(Use arrow keys, Enter to select)",
        ).ask()
    )

    remaining = index.books[names.index(start):]
    end_default = defaults.end_book if defaults.end_book in names[names.index(start):] else start
    end = _answer(
        questionary.select(
            "End book:",
            choices=[
                questionary.Choice(title=f"{b.name}  ({b.chapter_count})", value=b.name)
                for b in remaining
            ],
            default=end_default,
            style=WIZARD_STYLE,
            instruction="(Use arrow keys, Enter to select)",
        ).ask()
    )
    return start, end


def ask_export(default_path: Path) -> Path | None:
    """Offer to export the plan as a PDF. Returns the chosen path or None."""
    if not _answer(
        questionary.confirm(
            "Export this plan as a PDF?", default=True, style=WIZARD_STYLE
        ).ask()
    ):
        return None
    path = _answer(
        questionary.text(
            "Output file:", default=str(default_path), style=WIZARD_STYLE
        ).ask()
    )
    return Path(path).expanduser()


def execute_run(
    index: ChapterIndex,
    console: Console,
    settings: Settings,
) -> None:
    """Run the interactive wizard."""
    defaults = resolve_request(index, span_days=settings.default_span_days)

    console.print("[bold cyan]Bible reading plan[/]")
    console.print(
        f"[dim]{len(index.books)} books, {index.total_chapters} chapters[/]"
    )
    console.print()

    try:
        while True:
            start_date, end_date = ask_dates(defaults)
            start_book, end_book = ask_books(index, defaults)
            request = PlanRequest(
                start_date=start_date,
                end_date=end_date,
                start_book=start_book,
                end_book=end_book,
            )
            try:
                schedule = build_schedule(index, request, settings)
                break
            except ScheduleError as e:
                console.print(f"[red]{e}[/]")
                # Re-prompt with what the user entered
                defaults = request

        display_summary(schedule, console)
        display_schedule(schedule, console)

        output = ask_export(Path.cwd() / PDF_FILENAME)
        if output is None:
            return

        writer = SchedulePdfWriter(
            columns=settings.pdf_columns, page_size=settings.page_size
        )
        output.parent.mkdir(parents=True, exist_ok=True)
        writer.write(schedule, output)
        console.print(f"[green]Exported to {output}[/]")

    except WizardCancelled:
        console.print("[dim]Cancelled[/]")
