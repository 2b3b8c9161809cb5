"""
Date range and rate value types shared by validation, pricing and availability.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from fleetrate.utils.date import DateLike, to_date

from .enums import BookingStatus

logger = logging.getLogger(__name__)


def to_amount(value: Any) -> float:
    """Coerce a rate/price as sent by the API (number, numeric string or empty) to a float.

    Anything that is not a finite number becomes 0.0, which downstream code
    treats as "not priced".
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        logger.debug("Treating non-numeric amount %r as 0", value)
        return 0.0
    if math.isnan(amount) or math.isinf(amount):
        return 0.0
    return amount


@dataclass(frozen=True)
class DateRange:
    """A span of calendar days.

    Ordering is not enforced here since an interactive selection may briefly
    hold an end before its start; use ``validate`` to get a checked range.
    """

    start_date: date
    end_date: date

    @classmethod
    def of(cls, start: DateLike, end: DateLike) -> "DateRange":
        """Build a range from date-likes, dropping any time of day."""
        return cls(to_date(start), to_date(end))

    def contains(self, day: date) -> bool:
        """Inclusive membership test."""
        return self.start_date <= day <= self.end_date

    def overlaps(self, other: "DateRange") -> bool:
        """Inclusive overlap test; ranges sharing an endpoint overlap."""
        return self.start_date <= other.end_date and self.end_date >= other.start_date

    def __str__(self) -> str:
        return f"{self.start_date.isoformat()}..{self.end_date.isoformat()}"


@dataclass(frozen=True)
class OccupiedRange(DateRange):
    """An existing booking's span, identified for conflict reporting."""

    id: str = ""

    @classmethod
    def of(cls, start: DateLike, end: DateLike, id: str = "") -> "OccupiedRange":
        return cls(to_date(start), to_date(end), str(id))


@dataclass(frozen=True)
class RateSchedule:
    """Daily and optional weekly rate for a rental vehicle, in whole currency units."""

    daily_rate: float
    weekly_rate: Optional[float] = None

    def __post_init__(self):
        if self.daily_rate < 0:
            raise ValueError(f"daily_rate must be non-negative, got {self.daily_rate}")
        if self.weekly_rate is not None and self.weekly_rate < 0:
            raise ValueError(f"weekly_rate must be non-negative, got {self.weekly_rate}")

    @classmethod
    def from_raw(cls, daily_rate: Any, weekly_rate: Any = None) -> "RateSchedule":
        """Build from loosely typed API values; a zero or missing weekly rate becomes None."""
        weekly = to_amount(weekly_rate)
        return cls(daily_rate=to_amount(daily_rate), weekly_rate=weekly if weekly > 0 else None)

    @property
    def has_weekly_rate(self) -> bool:
        return self.weekly_rate is not None and self.weekly_rate > 0


@dataclass(frozen=True)
class BookingRecord:
    """A booking as reported by the backend, reduced to what availability needs."""

    id: str
    vehicle_id: str
    start_date: date
    end_date: date
    status: BookingStatus = BookingStatus.CONFIRMED

    @classmethod
    def from_payload(cls, payload: dict) -> "BookingRecord":
        """Parse a booking dict using the API's camelCase keys."""
        raw_status = payload.get("status") or BookingStatus.CONFIRMED.value
        return cls(
            id=str(payload["id"]),
            vehicle_id=str(payload.get("vehicleId", payload.get("vehicle_id", ""))),
            start_date=to_date(payload.get("startDate", payload.get("start_date"))),
            end_date=to_date(payload.get("endDate", payload.get("end_date"))),
            status=BookingStatus(str(raw_status).lower()),
        )

    @property
    def occupied_range(self) -> OccupiedRange:
        return OccupiedRange(self.start_date, self.end_date, self.id)
