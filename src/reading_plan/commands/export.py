"""Export command implementation."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from reading_plan.config import Settings
from reading_plan.core.chapter_index import ChapterIndex
from reading_plan.core.planner import build_schedule
from reading_plan.export.pdf_writer import SchedulePdfWriter
from reading_plan.models.schedule import PlanRequest, Schedule


def execute_export(
    index: ChapterIndex,
    request: PlanRequest,
    output_file: Path,
    console: Console,
    settings: Settings,
    columns: int | None = None,
    page_size: str | None = None,
    quiet: bool = False,
) -> Schedule:
    """Execute the export command.

    Raises:
        ScheduleError: If the request fails validation
    """
    schedule = build_schedule(index, request, settings)

    writer = SchedulePdfWriter(
        columns=columns or settings.pdf_columns,
        page_size=page_size or settings.page_size,
    )

    output_file.parent.mkdir(parents=True, exist_ok=True)
    writer.write(schedule, output_file)

    if quiet:
        console.print(f"[green]Exported to {output_file}[/]")
    else:
        console.print()
        console.print(
            Panel(
                f"[green]Exported {schedule.total_days} day(s) covering "
                f"{schedule.selected_chapter_count} chapter(s)[/]\n\n"
                f"[dim]Books:[/] {schedule.start_book} - {schedule.end_book}\n"
                f"[dim]Columns:[/] {writer.columns}\n"
                f"[dim]Output file:[/] {output_file}",
                title="Export Complete",
                border_style="green",
            )
        )
        console.print()

    return schedule
