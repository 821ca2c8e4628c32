"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from reading_plan.config import Settings
from reading_plan.core.chapter_index import default_index
from reading_plan.core.errors import ScheduleError
from reading_plan.core.planner import resolve_request
from reading_plan.export.pdf_writer import PDF_FILENAME

log = logging.getLogger(__name__)

app = typer.Typer(
    name="reading-plan",
    help="Generate a day-by-day Bible reading plan and export it as PDF.",
    add_completion=False,
)

console = Console()

StartDateOption = Annotated[
    Optional[str],
    typer.Option("--start-date", "-s", help="First day of the plan, YYYY-MM-DD (default: today)"),
]
EndDateOption = Annotated[
    Optional[str],
    typer.Option("--end-date", "-e", help="Last day of the plan, YYYY-MM-DD (default: today + 365 days)"),
]
StartBookOption = Annotated[
    Optional[str],
    typer.Option("--start-book", "-b", help="First book, exact catalog name (default: Genesis)"),
]
EndBookOption = Annotated[
    Optional[str],
    typer.Option("--end-book", "-B", help="Last book, exact catalog name (default: Revelation)"),
]


def load_settings() -> Settings:
    """Load settings from the environment, exiting on invalid values."""
    try:
        return Settings.from_env()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/]")
        raise typer.Exit(1)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Generate a day-by-day Bible reading plan.

    Run without arguments to start the interactive wizard.
    """
    settings = load_settings()
    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        # No subcommand provided, run the interactive wizard
        from reading_plan.commands.run import execute_run

        execute_run(index=default_index(), console=console, settings=settings)


@app.command()
def plan(
    ctx: typer.Context,
    start_date: StartDateOption = None,
    end_date: EndDateOption = None,
    start_book: StartBookOption = None,
    end_book: EndBookOption = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the schedule as JSON"),
    ] = False,
) -> None:
    """Show the reading plan for a date range and book range."""
    from reading_plan.commands.plan import execute_plan

    settings: Settings = ctx.obj
    index = default_index()
    request = resolve_request(
        index,
        start_date=start_date,
        end_date=end_date,
        start_book=start_book,
        end_book=end_book,
        span_days=settings.default_span_days,
    )

    try:
        execute_plan(index, request, console, settings, as_json=as_json)
    except ScheduleError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def export(
    ctx: typer.Context,
    start_date: StartDateOption = None,
    end_date: EndDateOption = None,
    start_book: StartBookOption = None,
    end_book: EndBookOption = None,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output PDF path", dir_okay=False),
    ] = Path(PDF_FILENAME),
    columns: Annotated[
        Optional[int],
        typer.Option("--columns", "-c", help="Columns per page (default: 2)", min=1, max=3),
    ] = None,
    page_size: Annotated[
        Optional[str],
        typer.Option("--page-size", help="Page size: a4 or letter"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress summary output"),
    ] = False,
) -> None:
    """Export the reading plan as a multi-column PDF."""
    from reading_plan.commands.export import execute_export

    if page_size is not None and page_size.lower() not in ("a4", "letter"):
        console.print(f"[red]Invalid page size: {page_size}. Use a4 or letter.[/]")
        raise typer.Exit(1)

    settings: Settings = ctx.obj
    index = default_index()
    request = resolve_request(
        index,
        start_date=start_date,
        end_date=end_date,
        start_book=start_book,
        end_book=end_book,
        span_days=settings.default_span_days,
    )

    try:
        execute_export(
            index,
            request,
            output_file=output,
            console=console,
            settings=settings,
            columns=columns,
            page_size=page_size.lower() if page_size else None,
            quiet=quiet,
        )
    except ScheduleError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def books() -> None:
    """List the books in canonical order with their chapter counts."""
    index = default_index()

    table = Table(title="Books", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Book", style="white")
    table.add_column("Chapters", justify="right", style="green")

    for position, book in enumerate(index.books, start=1):
        table.add_row(str(position), book.name, str(book.chapter_count))

    table.add_section()
    table.add_row("", "[bold]Total[/]", f"[bold]{index.total_chapters}[/]")

    console.print(table)


@app.command()
def serve(
    ctx: typer.Context,
    host: Annotated[
        Optional[str],
        typer.Option("--host", help="Bind address (default: 127.0.0.1)"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="Port (default: $PORT or 3000)", min=1, max=65535),
    ] = None,
) -> None:
    """Serve the web form and PDF download."""
    import uvicorn

    from reading_plan.web.app import create_app

    settings: Settings = ctx.obj
    web_app = create_app(index=default_index(), settings=settings)
    bind_host = host or settings.host
    bind_port = port or settings.port

    log.info(
        "Bible reading schedule generator listening on %s:%d", bind_host, bind_port
    )
    console.print(f"[green]Listening on http://{bind_host}:{bind_port}[/]")
    uvicorn.run(web_app, host=bind_host, port=bind_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    app()
