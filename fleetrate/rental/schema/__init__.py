"""
Value types for the rental engine.
"""

from .enums import BillingBasis, BookingMode, BookingStatus, ListingType, SortKey
from .ranges import BookingRecord, DateRange, OccupiedRange, RateSchedule, to_amount
from .vehicles import VehicleListing, parse_string_list, split_feature_input

__all__ = [
    # Enums
    "ListingType",
    "BookingMode",
    "BookingStatus",
    "BillingBasis",
    "SortKey",
    # Ranges and rates
    "DateRange",
    "OccupiedRange",
    "RateSchedule",
    "BookingRecord",
    "to_amount",
    # Listings
    "VehicleListing",
    "parse_string_list",
    "split_feature_input",
]
