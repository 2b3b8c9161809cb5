"""Month grid and range selection for the booking date picker."""

from __future__ import annotations

import calendar
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import List, Optional, Sequence

from dateutil.relativedelta import relativedelta

from fleetrate.rental.schema.ranges import DateRange, OccupiedRange
from fleetrate.utils.date import DateLike, to_date, today

from .checker import is_day_occupied

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass(frozen=True)
class CalendarDay:
    """One day cell of the month grid."""

    date: date
    is_occupied: bool = False
    is_before_min: bool = False
    is_selected: bool = False
    is_start: bool = False
    is_end: bool = False
    is_in_range: bool = False

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def is_disabled(self) -> bool:
        return self.is_occupied or self.is_before_min


@dataclass(frozen=True)
class DateSelection:
    """Start/end picked so far, and which end the next click sets.

    Clicks never mutate; each returns the next selection state.
    """

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    selecting_start: bool = True

    def click(self, cell: CalendarDay) -> DateSelection:
        if cell.is_disabled:
            return self
        return self.pick(cell.date)

    def pick(self, day: DateLike) -> DateSelection:
        d = to_date(day)
        if self.selecting_start:
            return replace(self, start_date=d, selecting_start=False)
        if self.start_date is not None and d < self.start_date:
            # Restart the range from the earlier day, still waiting for an end
            return replace(self, start_date=d, end_date=None, selecting_start=False)
        return replace(self, end_date=d, selecting_start=True)

    def clear(self) -> DateSelection:
        return DateSelection()

    @property
    def is_complete(self) -> bool:
        """Both ends set, with the start no later than the end.

        A start re-picked after the old end leaves the selection incomplete
        until a new end is picked.
        """
        if self.start_date is None or self.end_date is None:
            return False
        return self.start_date <= self.end_date

    def to_range(self) -> Optional[DateRange]:
        """The selected range once complete, otherwise None."""
        if not self.is_complete:
            return None
        return DateRange(self.start_date, self.end_date)


def shift_month(anchor: DateLike, months: int) -> date:
    """First day of the month ``months`` away from ``anchor``'s month."""
    return to_date(anchor).replace(day=1) + relativedelta(months=months)


def month_calendar(
    year: int,
    month: int,
    occupied: Sequence[OccupiedRange],
    selection: Optional[DateSelection] = None,
    min_date: Optional[DateLike] = None,
) -> List[Optional[CalendarDay]]:
    """Build a Sunday-first month grid.

    Leading cells before the 1st are None. ``min_date`` defaults to today.
    """
    floor = to_date(min_date) if min_date is not None else today()
    selection = selection or DateSelection()
    start, end = selection.start_date, selection.end_date

    first = date(year, month, 1)
    leading = (first.weekday() + 1) % 7  # Monday=0 -> Sunday-first offset
    cells: List[Optional[CalendarDay]] = [None] * leading

    for offset in range(calendar.monthrange(year, month)[1]):
        d = first + timedelta(days=offset)
        both = start is not None and end is not None
        cells.append(
            CalendarDay(
                date=d,
                is_occupied=is_day_occupied(d, occupied),
                is_before_min=d < floor,
                is_selected=both and start <= d <= end,
                is_start=start is not None and d == start,
                is_end=end is not None and d == end,
                is_in_range=both and start < d < end,
            )
        )
    return cells
