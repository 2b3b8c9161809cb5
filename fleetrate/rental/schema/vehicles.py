"""
Vehicle listing schema.

Backend payloads send ``images`` and ``features`` either as arrays or as
JSON-encoded strings; both are normalized to lists of strings here, once,
at the boundary.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .enums import ListingType
from .ranges import RateSchedule, to_amount

logger = logging.getLogger(__name__)


def parse_string_list(value: Any) -> List[str]:
    """Normalize a list-or-JSON-string field to a list of non-empty strings.

    Invalid JSON, non-list JSON and None all yield an empty list.
    """
    if value is None:
        return []
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        try:
            value = json.loads(text)
        except ValueError:
            logger.warning("Discarding unparseable list field: %r", value)
            return []
    if not isinstance(value, (list, tuple)):
        logger.warning("Expected a list, got %s", type(value).__name__)
        return []
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


def split_feature_input(text: str) -> List[str]:
    """Turn one admin feature entry into the features it adds.

    A bracketed JSON array adds each trimmed element; anything else (including
    a bracketed string that fails to parse) adds the trimmed text itself.
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return []
    if trimmed.startswith("[") and trimmed.endswith("]"):
        try:
            parsed = json.loads(trimmed)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return [str(f).strip() for f in parsed if str(f).strip()]
    return [trimmed]


@dataclass(frozen=True)
class VehicleListing:
    """A vehicle offered for rental and/or sale."""

    id: str
    make: str
    model: str
    year: int
    listing_type: ListingType = ListingType.RENTAL
    category_id: Optional[str] = None
    subcategory_id: Optional[str] = None
    daily_rate: float = 0.0
    weekly_rate: Optional[float] = None
    sale_price: float = 0.0
    description: str = ""
    features: List[str] = field(default_factory=list)
    images: List[str] = field(default_factory=list)
    is_active: bool = True

    @classmethod
    def from_payload(cls, payload: dict) -> "VehicleListing":
        """Parse a vehicle dict using the API's camelCase keys."""
        rates = RateSchedule.from_raw(payload.get("dailyRate"), payload.get("weeklyRate"))
        return cls(
            id=str(payload["id"]),
            make=str(payload.get("make") or ""),
            model=str(payload.get("model") or ""),
            year=int(payload.get("year") or 0),
            listing_type=ListingType(str(payload.get("type") or "rental").lower()),
            category_id=payload.get("categoryId"),
            subcategory_id=payload.get("subcategoryId"),
            daily_rate=rates.daily_rate,
            weekly_rate=rates.weekly_rate,
            sale_price=to_amount(payload.get("salePrice")),
            description=str(payload.get("description") or ""),
            features=parse_string_list(payload.get("features")),
            images=parse_string_list(payload.get("images")),
            is_active=bool(payload.get("isActive", True)),
        )

    @property
    def rates(self) -> RateSchedule:
        return RateSchedule(self.daily_rate, self.weekly_rate)

    @property
    def display_name(self) -> str:
        return f"{self.year} {self.make} {self.model}".strip()

    @property
    def primary_image(self) -> Optional[str]:
        return self.images[0] if self.images else None
