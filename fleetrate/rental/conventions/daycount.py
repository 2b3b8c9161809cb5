"""Day count convention for rental billing."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timezone

from fleetrate.utils.date import DateLike, to_date

logger = logging.getLogger(__name__)

ONE_DAY_MS = 24 * 60 * 60 * 1000


def utc_midnight_ms(day: DateLike) -> int:
    """Milliseconds since the epoch at UTC midnight of ``day``."""
    d: date = to_date(day)
    return int(datetime(d.year, d.month, d.day, tzinfo=timezone.utc).timestamp()) * 1000


def rental_days(start: DateLike, end: DateLike) -> int:
    """Return the billed duration in days between two calendar dates.

    Follows the convention:
        days = ceil((end - start) / ONE_DAY_MS)
    on UTC-midnight timestamps, so Mon -> Wed is 2 and DST shifts never add
    or drop a day. The result is negative when ``end`` precedes ``start``.
    """
    elapsed_ms = utc_midnight_ms(end) - utc_midnight_ms(start)
    days = math.ceil(elapsed_ms / ONE_DAY_MS)
    if days < 0:
        logger.debug("End precedes start in rental_days: %s, %s", start, end)
    return days
