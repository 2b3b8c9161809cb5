"""Vehicle rental pricing and availability.

Key modules:
- validation: Requested date range checks
- pricing: Daily/weekly rental cost and sale price
- availability: Booking overlap checks and the calendar grid
- schema: Date range, rate, booking and listing types
- conventions: Rental day count
- data: Listing and booking sources
"""

from .availability import AvailabilityChecker, AvailabilityResult, is_available, is_day_occupied
from .conventions import rental_days
from .pricing import CostQuote, booking_cost, calculate_cost, format_price, quote_cost, sale_cost
from .schema import DateRange, OccupiedRange, RateSchedule, VehicleListing
from .validation import BeforeMinimum, InvalidOrder, ValidationError, validate

__all__ = [
    # Types
    "DateRange",
    "OccupiedRange",
    "RateSchedule",
    "VehicleListing",
    "CostQuote",
    "AvailabilityResult",
    "AvailabilityChecker",
    # Main functions
    "validate",
    "calculate_cost",
    "quote_cost",
    "sale_cost",
    "booking_cost",
    "format_price",
    "is_available",
    "is_day_occupied",
    "rental_days",
    # Exceptions
    "ValidationError",
    "InvalidOrder",
    "BeforeMinimum",
]
