from datetime import date, datetime, tzinfo
from typing import Optional, Union

from pandas import NaT, Timestamp

from fleetrate.config import get_default_timezone

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a calendar date (time of day dropped).
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats, and ISO datetimes
    such as '2025-01-01T00:00:00.000Z' as sent by the booking API.
    """
    if date_like is NaT:
        raise ValueError("NaT is not a valid date")
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        text = date_like.strip()
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        if "T" in text:
            return to_date(text.split("T", 1)[0])
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def datetime_to_str(datetime_date: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(datetime_date).strftime(DATE_FMT)


def today(tz: Optional[tzinfo] = None) -> date:
    """Current calendar date in ``tz`` (defaults to the configured zone)."""
    if tz is None:
        tz = get_default_timezone()
    return datetime.now(tz).date()
