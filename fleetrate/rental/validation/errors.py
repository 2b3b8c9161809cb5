"""Validation errors for requested date ranges.

These are recoverable: they are meant to be shown next to the date inputs,
never to abort the caller.
"""

from datetime import date


class ValidationError(ValueError):
    """Raised when a requested date range cannot be booked as entered."""

    pass


class InvalidOrder(ValidationError):
    """Raised when the end date precedes the start date."""

    def __init__(self, start: date, end: date):
        self.start = start
        self.end = end
        super().__init__(
            f"End date {end.isoformat()} is before start date {start.isoformat()}"
        )


class BeforeMinimum(ValidationError):
    """Raised when the start date precedes the earliest bookable date."""

    def __init__(self, start: date, min_date: date):
        self.start = start
        self.min_date = min_date
        super().__init__(
            f"Start date {start.isoformat()} is before the earliest allowed date "
            f"{min_date.isoformat()}"
        )
