"""Web interface for the reading schedule generator."""

from reading_plan.web.app import create_app

__all__ = ["create_app"]
