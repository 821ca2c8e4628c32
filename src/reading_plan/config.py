"""Runtime configuration loaded from environment variables."""

import os
from collections.abc import Mapping
from typing import ClassVar, Literal

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Application settings."""

    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=1, le=65535)
    default_span_days: int = Field(default=365, ge=0, le=36500)  # end date = today + N
    max_days: int = Field(default=36525, ge=1, le=365250)
    pdf_columns: int = Field(default=2, ge=1, le=3)
    page_size: Literal["a4", "letter"] = "a4"
    minutes_per_chapter: int = Field(default=4, ge=1)
    min_minutes: int = Field(default=5, ge=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Environment variable -> field name
    ENV_VARS: ClassVar[dict[str, str]] = {
        "PORT": "port",
        "READING_PLAN_HOST": "host",
        "READING_PLAN_SPAN_DAYS": "default_span_days",
        "READING_PLAN_MAX_DAYS": "max_days",
        "READING_PLAN_PDF_COLUMNS": "pdf_columns",
        "READING_PLAN_PAGE_SIZE": "page_size",
        "READING_PLAN_MINUTES_PER_CHAPTER": "minutes_per_chapter",
        "READING_PLAN_MIN_MINUTES": "min_minutes",
        "READING_PLAN_LOG_LEVEL": "log_level",
    }

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from the environment, ignoring blank values.

        Raises:
            pydantic.ValidationError: If a variable has an invalid value
        """
        environ = os.environ if environ is None else environ
        values = {}
        for var, field_name in cls.ENV_VARS.items():
            raw = environ.get(var, "").strip()
            if raw:
                if field_name == "page_size":
                    raw = raw.lower()
                elif field_name == "log_level":
                    raw = raw.upper()
                values[field_name] = raw
        return cls.model_validate(values)
