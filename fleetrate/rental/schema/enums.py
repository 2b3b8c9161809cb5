"""
Core enumeration types for the rental engine.
"""

from enum import Enum


class ListingType(Enum):
    """How a vehicle is offered."""

    RENTAL = "rental"
    SALE = "sale"
    BOTH = "both"


class BookingMode(Enum):
    """What the customer is booking."""

    RENTAL = "rental"
    SALE = "sale"


class BookingStatus(Enum):
    """Booking lifecycle states reported by the backend."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def blocks_vehicle(self) -> bool:
        """Whether a booking in this state keeps its dates occupied."""
        return self in (BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingStatus.ACTIVE)


class BillingBasis(Enum):
    """Which rate a rental cost was computed with."""

    NONE = "NONE"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"


class SortKey(Enum):
    """Listing sort orders offered by the vehicle browser."""

    PRICE = "price"
    YEAR = "year"
    NAME = "name"
