"""
Listing and booking filters.

Provides composable filters for the vehicle browser and for deciding which
bookings occupy a vehicle's dates.
"""

from typing import Callable, Iterable, List, Optional, Set

from fleetrate.rental.schema.enums import BookingStatus, ListingType, SortKey
from fleetrate.rental.schema.ranges import BookingRecord
from fleetrate.rental.schema.vehicles import VehicleListing

from .base import BaseFilter

DEFAULT_PAGE_SIZE = 6


class BookingStatusFilter(BaseFilter):
    """
    Filter bookings by status.

    Completed and cancelled bookings free their dates, so availability
    should only see the blocking states.
    """

    def __init__(self, allowed_statuses: Set[BookingStatus]):
        self.allowed_statuses = set(allowed_statuses)

    @classmethod
    def blocking(cls) -> "BookingStatusFilter":
        """Create filter keeping bookings that occupy the vehicle."""
        return cls({s for s in BookingStatus if s.blocks_vehicle})

    def filter(self, bookings: List[BookingRecord]) -> List[BookingRecord]:
        return [b for b in bookings if b.status in self.allowed_statuses]


class ListingTypeFilter(BaseFilter):
    """
    Filter listings by how they are offered.

    ``ListingType.BOTH`` keeps every listing.
    """

    def __init__(self, listing_type: ListingType):
        self.listing_type = listing_type

    def filter(self, listings: List[VehicleListing]) -> List[VehicleListing]:
        if self.listing_type is ListingType.BOTH:
            return list(listings)
        return [v for v in listings if v.listing_type is self.listing_type]


class ActiveFilter(BaseFilter):
    """Keep only listings that are switched on."""

    def filter(self, listings: List[VehicleListing]) -> List[VehicleListing]:
        return [v for v in listings if v.is_active]


class CategoryFilter(BaseFilter):
    """Keep listings in one category; no category means no filtering."""

    def __init__(self, category_id: Optional[str]):
        self.category_id = category_id

    def filter(self, listings: List[VehicleListing]) -> List[VehicleListing]:
        if not self.category_id:
            return list(listings)
        return [v for v in listings if v.category_id == self.category_id]


class SearchFilter(BaseFilter):
    """
    Case-insensitive substring search over make, model and description.
    """

    def __init__(self, term: str):
        self.term = (term or "").lower()

    def filter(self, listings: List[VehicleListing]) -> List[VehicleListing]:
        if not self.term:
            return list(listings)
        return [
            v
            for v in listings
            if self.term in v.make.lower()
            or self.term in v.model.lower()
            or self.term in v.description.lower()
        ]


class CustomFilter(BaseFilter):
    """
    Filter records using custom predicate function.
    """

    def __init__(self, predicate: Callable[[object], bool]):
        """
        Initialize custom filter.

        Args:
            predicate: Function that returns True if record should be kept
        """
        self.predicate = predicate

    def filter(self, records: list) -> list:
        return [r for r in records if self.predicate(r)]


class CompositeFilter(BaseFilter):
    """
    Combine multiple filters using AND logic.
    """

    def __init__(self, filters: Iterable[BaseFilter] = ()):
        self.filters = list(filters)

    def add_filter(self, filter_instance: BaseFilter) -> None:
        self.filters.append(filter_instance)

    def filter(self, records: list) -> list:
        """
        Apply all filters in sequence.

        Args:
            records: Records to filter

        Returns:
            Records that pass all filters
        """
        result = records
        for f in self.filters:
            result = f.filter(result)
        return result


def sort_listings(listings: Iterable[VehicleListing], sort_by: SortKey = SortKey.PRICE) -> List[VehicleListing]:
    """Order listings the way the vehicle browser does.

    PRICE is cheapest daily rate first, YEAR is newest first, NAME is by make.
    """
    if sort_by is SortKey.PRICE:
        return sorted(listings, key=lambda v: v.daily_rate or 0)
    if sort_by is SortKey.YEAR:
        return sorted(listings, key=lambda v: v.year, reverse=True)
    if sort_by is SortKey.NAME:
        return sorted(listings, key=lambda v: v.make.lower())
    raise ValueError(f"Unknown sort key: {sort_by}")


def paginate(listings: List[VehicleListing], page: int, per_page: int = DEFAULT_PAGE_SIZE) -> List[VehicleListing]:
    """Everything loaded up to ``page`` ("load more" paging, 1-based)."""
    if page < 1:
        raise ValueError("page must be >= 1")
    return listings[: page * per_page]


def has_more(total: int, page: int, per_page: int = DEFAULT_PAGE_SIZE) -> bool:
    return page * per_page < total
