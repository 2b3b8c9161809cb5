"""Rental pricing.

Provides:
- Daily/weekly rental cost calculation with a breakdown
- The flat sale-price path
- Currency formatting for displayed totals
"""

from .formatting import CURRENCY_SYMBOLS, format_price
from .rates import (
    DAYS_PER_WEEK,
    CostQuote,
    booking_cost,
    calculate_cost,
    quote_cost,
    sale_cost,
)

__all__ = [
    "CostQuote",
    "calculate_cost",
    "quote_cost",
    "sale_cost",
    "booking_cost",
    "format_price",
    "CURRENCY_SYMBOLS",
    "DAYS_PER_WEEK",
]
