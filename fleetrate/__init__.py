"""Vehicle rental pricing and availability library.

This package provides the pricing, date-range validation and availability
rules used by the rental booking front end, extracted so both client and
server code can share them.

Key modules:
- rental.pricing: Rental cost calculation and price formatting
- rental.availability: Overlap detection and calendar month grids
- rental.validation: Date range validation
- rental.schema: Date range, rate and vehicle listing types
- rental.data: Listing/booking data sources and filters
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "rental",
    "utils",
    "config",
]
