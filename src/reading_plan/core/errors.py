"""Errors raised while building a reading schedule."""


class ScheduleError(ValueError):
    """Base class for user-input validation failures.

    The message is meant to be shown to the user as-is.
    """

    message = "Unable to build a reading schedule."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidDateError(ScheduleError):
    """A supplied date does not parse as a calendar date."""

    message = "Please provide valid start and end dates."


class DateOrderError(ScheduleError):
    """The end date precedes the start date."""

    message = "End date must be on or after the start date."


class InvalidBookError(ScheduleError):
    """A supplied book name is not in the catalog."""

    message = "Please choose valid start and end books."


class BookOrderError(ScheduleError):
    """The end book precedes the start book in catalog order."""

    message = "End book must be the same or come after the start book."


class DateRangeTooLongError(ScheduleError):
    """The date range covers more days than the configured maximum."""

    message = "Date range is too long. Please choose a shorter range."
