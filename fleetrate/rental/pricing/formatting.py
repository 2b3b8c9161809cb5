"""Whole-unit currency formatting for displayed prices."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from fleetrate.config import get_default_currency

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "KRW": "₩",
}


def format_price(amount: Union[int, float], currency: Optional[str] = None) -> str:
    """Format an amount with no fractional digits and thousands separators.

    Halves round away from zero, so 1234.5 renders as "$1,235". Currencies
    without a known symbol are prefixed with their code.
    """
    code = (currency or get_default_currency()).upper()
    rounded = Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    return f"{sign}{symbol}{abs(int(rounded)):,}"
