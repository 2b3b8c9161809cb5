"""
Availability checks and the booking calendar.
"""

from .month_grid import (
    WEEKDAY_LABELS,
    CalendarDay,
    DateSelection,
    month_calendar,
    shift_month,
)
from .checker import (
    AvailabilityChecker,
    AvailabilityResult,
    is_available,
    is_day_occupied,
    ranges_overlap,
)

__all__ = [
    # Overlap checks
    "AvailabilityResult",
    "AvailabilityChecker",
    "is_available",
    "is_day_occupied",
    "ranges_overlap",
    # Calendar
    "CalendarDay",
    "DateSelection",
    "month_calendar",
    "shift_month",
    "WEEKDAY_LABELS",
]
