"""Plan command implementation."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from reading_plan.config import Settings
from reading_plan.core.chapter_index import ChapterIndex
from reading_plan.core.formatter import format_date
from reading_plan.core.planner import build_schedule
from reading_plan.models.schedule import PlanRequest, Schedule


def display_summary(schedule: Schedule, console: Console) -> None:
    """Display the schedule summary panel."""
    console.print()
    console.print(
        Panel(
            f"[bold]{schedule.start_book} - {schedule.end_book}[/]\n\n"
            f"[dim]Dates:[/] {format_date(schedule.start_date)} - "
            f"{format_date(schedule.end_date)}\n"
            f"[dim]Chapters in range:[/] {schedule.selected_chapter_count} "
            f"of {schedule.total_chapters}\n"
            f"[dim]Days:[/] {schedule.total_days} "
            f"({schedule.reading_days} with reading)",
            title="Reading Plan",
            border_style="green",
        )
    )


def display_schedule(schedule: Schedule, console: Console) -> None:
    """Display the day-by-day table."""
    console.print()
    table = Table(title="Schedule", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=5)
    table.add_column("Date", style="white")
    table.add_column("Reading", style="green")
    table.add_column("Chapters", justify="right", style="dim")
    table.add_column("Est.", justify="right", style="yellow")

    for day, entry in enumerate(schedule.entries, start=1):
        if entry.is_empty:
            table.add_row(str(day), entry.date_label, f"[dim]{entry.reading}[/]", "", "")
        else:
            table.add_row(
                str(day),
                entry.date_label,
                entry.reading,
                str(entry.chapter_count),
                f"{entry.estimated_minutes} min",
            )

    console.print(table)
    console.print()


def execute_plan(
    index: ChapterIndex,
    request: PlanRequest,
    console: Console,
    settings: Settings,
    as_json: bool = False,
) -> Schedule:
    """Execute the plan command.

    Raises:
        ScheduleError: If the request fails validation
    """
    schedule = build_schedule(index, request, settings)

    if as_json:
        console.print_json(schedule.model_dump_json())
    else:
        display_summary(schedule, console)
        display_schedule(schedule, console)

    return schedule
