"""
Runtime configuration for fleetrate.

Values are read once from the environment; the time zone and currency
defaults can be overridden at runtime with the setters below.
"""

import os
from datetime import tzinfo
from typing import Optional

from dateutil import tz

API_BASE_URL = os.getenv(
    "FLEETRATE_API_URL",
    "https://car-rental-backend-production-d57f.up.railway.app/api/v1",
)
API_TIMEOUT = float(os.getenv("FLEETRATE_API_TIMEOUT", "10"))

_DEFAULT_CURRENCY = os.getenv("FLEETRATE_CURRENCY", "USD").upper()
_DEFAULT_TIMEZONE_NAME: Optional[str] = os.getenv("FLEETRATE_TIMEZONE") or None
_DEFAULT_TIMEZONE: Optional[tzinfo] = None  # Resolved on first use


def _resolve_timezone(name: Optional[str]) -> tzinfo:
    if name is None:
        return tz.tzlocal()
    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown time zone: {name}")
    return zone


def get_default_timezone() -> tzinfo:
    """Get the zone used to decide what "today" is, initializing if needed."""
    global _DEFAULT_TIMEZONE
    if _DEFAULT_TIMEZONE is None:
        _DEFAULT_TIMEZONE = _resolve_timezone(_DEFAULT_TIMEZONE_NAME)
    return _DEFAULT_TIMEZONE


def set_default_timezone(name: Optional[str]) -> None:
    """Set the default time zone by IANA name (None for the machine's zone)."""
    global _DEFAULT_TIMEZONE
    _DEFAULT_TIMEZONE = _resolve_timezone(name)


def get_default_currency() -> str:
    return _DEFAULT_CURRENCY


def set_default_currency(code: str) -> None:
    """Set the ISO 4217 code used when formatting prices."""
    global _DEFAULT_CURRENCY
    _DEFAULT_CURRENCY = code.upper()
