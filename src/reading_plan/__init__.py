"""Day-by-day Bible reading plan generator."""

__version__ = "0.1.0"
