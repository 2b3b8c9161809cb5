"""Rental cost calculation.

Rentals are billed per day, switching to whole weeks at the weekly rate once
a stay reaches seven days and the vehicle has a weekly rate. Leftover days are
billed at the daily rate. A zero result means "cannot price yet" (no range
selected or no daily rate) rather than a free rental.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from fleetrate.rental.conventions.daycount import rental_days
from fleetrate.rental.schema.enums import BillingBasis, BookingMode
from fleetrate.rental.schema.ranges import DateRange, RateSchedule, to_amount
from fleetrate.rental.schema.vehicles import VehicleListing

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7

Amount = Union[int, float]


@dataclass(frozen=True)
class CostQuote:
    """Rental cost together with how it was reached.

    Attributes:
        total: Total cost in currency units (0 when not priceable)
        days: Billed duration in days
        weeks: Whole weeks billed at the weekly rate
        remaining_days: Days billed at the daily rate after whole weeks
        basis: Rate the total was computed with (NONE when not priceable)
    """

    total: Amount
    days: int
    weeks: int = 0
    remaining_days: int = 0
    basis: BillingBasis = BillingBasis.NONE

    @property
    def priced(self) -> bool:
        """False when the zero total only means "nothing to price yet"."""
        return self.basis is not BillingBasis.NONE


def quote_cost(date_range: DateRange, rates: RateSchedule) -> CostQuote:
    """Price a rental and return the full breakdown.

    Args:
        date_range: Validated rental range
        rates: Vehicle's daily and optional weekly rate

    Returns:
        CostQuote whose ``total`` equals ``calculate_cost(date_range, rates)``

    Examples:
        >>> quote = quote_cost(DateRange.of("2025-01-01", "2025-01-11"), RateSchedule(50, 300))
        >>> quote.total, quote.weeks, quote.remaining_days
        (450, 1, 3)
    """
    days = rental_days(date_range.start_date, date_range.end_date)

    if days <= 0:
        return CostQuote(total=0, days=max(days, 0))

    if rates.daily_rate == 0:
        logger.debug("No daily rate; %s left unpriced", date_range)
        return CostQuote(total=0, days=days)

    if days >= DAYS_PER_WEEK and rates.has_weekly_rate:
        weeks, remaining = divmod(days, DAYS_PER_WEEK)
        total = weeks * rates.weekly_rate + remaining * rates.daily_rate
        logger.debug(
            "Weekly billing for %s: %s weeks + %s days = %s", date_range, weeks, remaining, total
        )
        return CostQuote(
            total=total, days=days, weeks=weeks, remaining_days=remaining, basis=BillingBasis.WEEKLY
        )

    total = days * rates.daily_rate
    logger.debug("Daily billing for %s: %s days = %s", date_range, days, total)
    return CostQuote(total=total, days=days, remaining_days=days, basis=BillingBasis.DAILY)


def calculate_cost(date_range: DateRange, rates: RateSchedule) -> Amount:
    """Total rental cost for a range; 0 when the range is empty or there is no daily rate."""
    return quote_cost(date_range, rates).total


def sale_cost(sale_price: Any) -> float:
    """Cost of a one-time purchase: the sale price itself, 0 when unset."""
    return max(to_amount(sale_price), 0.0)


def booking_cost(
    listing: VehicleListing,
    mode: BookingMode,
    date_range: Optional[DateRange] = None,
) -> Amount:
    """Cost shown on the booking form for a listing.

    Sales ignore dates entirely. Rentals without a selected range cost 0.
    """
    if mode is BookingMode.SALE:
        return sale_cost(listing.sale_price)
    if date_range is None:
        return 0
    return calculate_cost(date_range, listing.rates)
