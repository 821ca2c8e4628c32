"""FastAPI application serving the schedule form, results, and PDF download."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Query, Request
from fastapi.responses import HTMLResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from reading_plan.config import Settings
from reading_plan.core.chapter_index import ChapterIndex, default_index
from reading_plan.core.errors import ScheduleError
from reading_plan.core.planner import build_schedule, resolve_request
from reading_plan.export.pdf_writer import PDF_FILENAME, SchedulePdfWriter
from reading_plan.models.schedule import PlanRequest
from reading_plan.web.templates import PageStats, render_page

log = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "That route was not found. Use the form to generate a schedule."


def create_app(
    index: ChapterIndex | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create the web application.

    Args:
        index: Chapter index shared by all requests (default: built-in catalog)
        settings: Application settings (default: from environment)
    """
    index = index or default_index()
    settings = settings or Settings.from_env()

    app = FastAPI(title="Bible Reading Schedule", docs_url=None, redoc_url=None)
    app.state.chapter_index = index
    app.state.settings = settings

    def resolve(
        start_date: str | None,
        end_date: str | None,
        start_book: str | None,
        end_book: str | None,
    ) -> PlanRequest:
        return resolve_request(
            index,
            start_date=start_date,
            end_date=end_date,
            start_book=start_book,
            end_book=end_book,
            span_days=settings.default_span_days,
        )

    def default_page(status_code: int = 200, error: str | None = None) -> HTMLResponse:
        content = render_page(
            index.books,
            resolve(None, None, None, None),
            PageStats(
                total_chapters=index.total_chapters,
                selected_chapters=index.total_chapters,
            ),
            error=error,
        )
        return HTMLResponse(content, status_code=status_code)

    def error_page(values: PlanRequest, error: ScheduleError) -> HTMLResponse:
        log.info("Rejected schedule request %s: %s", values.model_dump(), error)
        content = render_page(
            index.books,
            values,
            PageStats(total_chapters=index.total_chapters),
            error=str(error),
        )
        return HTMLResponse(content, status_code=400)

    @app.get("/", response_class=HTMLResponse)
    def home() -> HTMLResponse:
        return default_page()

    @app.get("/schedule", response_class=HTMLResponse)
    def schedule(
        start_date: str | None = Query(None, alias="startDate"),
        end_date: str | None = Query(None, alias="endDate"),
        start_book: str | None = Query(None, alias="startBook"),
        end_book: str | None = Query(None, alias="endBook"),
    ) -> HTMLResponse:
        values = resolve(start_date, end_date, start_book, end_book)
        try:
            result = build_schedule(index, values, settings)
        except ScheduleError as e:
            return error_page(values, e)

        content = render_page(
            index.books,
            values,
            PageStats(
                total_chapters=index.total_chapters,
                selected_chapters=result.selected_chapter_count,
                total_days=result.total_days,
            ),
            schedule=result,
        )
        return HTMLResponse(content)

    @app.get("/download")
    def download(
        start_date: str | None = Query(None, alias="startDate"),
        end_date: str | None = Query(None, alias="endDate"),
        start_book: str | None = Query(None, alias="startBook"),
        end_book: str | None = Query(None, alias="endBook"),
    ) -> Response:
        values = resolve(start_date, end_date, start_book, end_book)
        try:
            result = build_schedule(index, values, settings)
        except ScheduleError as e:
            return error_page(values, e)

        writer = SchedulePdfWriter(
            columns=settings.pdf_columns,
            page_size=settings.page_size,
        )
        return Response(
            content=writer.render(result),
            media_type="application/pdf",
            headers={"Content-Disposition": f"attachment; filename={PDF_FILENAME}"},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> Response:
        # Unknown paths and unsupported methods both fall through to the form
        if exc.status_code in (404, 405):
            return default_page(status_code=404, error=NOT_FOUND_MESSAGE)
        return HTMLResponse(
            f"<h1>{exc.status_code}</h1>", status_code=exc.status_code
        )

    return app
