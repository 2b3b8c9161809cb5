"""Date range validation for booking requests."""

from datetime import date, tzinfo
from typing import Optional

from fleetrate.rental.schema.ranges import DateRange
from fleetrate.utils.date import DateLike, to_date
from fleetrate.utils.date import today as current_date

from .errors import BeforeMinimum, InvalidOrder


def validate(
    start: DateLike,
    end: DateLike,
    min_date: Optional[DateLike] = None,
    *,
    today: Optional[date] = None,
    tz: Optional[tzinfo] = None,
) -> DateRange:
    """Check a requested start/end pair and return it as a normalized range.

    Args:
        start: Requested first day
        end: Requested last day
        min_date: Earliest bookable day; defaults to today
        today: Overrides the current date used to default ``min_date``
        tz: Zone used to determine today when ``today`` is not given

    Returns:
        DateRange with both ends reduced to calendar days

    Raises:
        InvalidOrder: If ``end`` is before ``start``
        BeforeMinimum: If ``start`` is before ``min_date``
    """
    start_day = to_date(start)
    end_day = to_date(end)

    if end_day < start_day:
        raise InvalidOrder(start_day, end_day)

    if min_date is None:
        floor = today if today is not None else current_date(tz)
    else:
        floor = to_date(min_date)
    if start_day < floor:
        raise BeforeMinimum(start_day, floor)

    return DateRange(start_day, end_day)
