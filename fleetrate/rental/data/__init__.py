"""
Data loading for listings and bookings.

Provides abstractions and implementations for loading rental data from the
REST API or JSON snapshots, plus filters for listings and bookings.
"""

from .base import BaseDataSource, BaseFilter, BookingFilter, DataSource, DataSourceError
from .factory import (
    DataSourceType,
    create_availability_data_source,
    create_data_source,
)
from .filters import (
    DEFAULT_PAGE_SIZE,
    ActiveFilter,
    BookingStatusFilter,
    CategoryFilter,
    CompositeFilter,
    CustomFilter,
    ListingTypeFilter,
    SearchFilter,
    has_more,
    paginate,
    sort_listings,
)
from .frames import listings_to_frame, occupied_ranges_from_frame, occupied_ranges_to_frame
from .loaders import JSONDataSource, RestDataSource

__all__ = [
    # Base abstractions
    "DataSource",
    "BookingFilter",
    "BaseDataSource",
    "BaseFilter",
    "DataSourceError",
    # Concrete implementations
    "RestDataSource",
    "JSONDataSource",
    # Filters
    "BookingStatusFilter",
    "ListingTypeFilter",
    "ActiveFilter",
    "CategoryFilter",
    "SearchFilter",
    "CustomFilter",
    "CompositeFilter",
    "sort_listings",
    "paginate",
    "has_more",
    "DEFAULT_PAGE_SIZE",
    # DataFrames
    "occupied_ranges_from_frame",
    "occupied_ranges_to_frame",
    "listings_to_frame",
    # Factory
    "create_data_source",
    "create_availability_data_source",
    "DataSourceType",
]
