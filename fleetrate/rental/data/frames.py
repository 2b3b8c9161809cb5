"""DataFrame conversion for occupied ranges and listings."""

from typing import Iterable, List

import pandas as pd

from fleetrate.rental.schema.ranges import OccupiedRange
from fleetrate.rental.schema.vehicles import VehicleListing
from fleetrate.utils.date import to_date

_COLUMN_ALIASES = {
    "startDate": "start_date",
    "endDate": "end_date",
}


def _to_day(value):
    return None if pd.isna(value) else to_date(value)


def occupied_ranges_from_frame(df: pd.DataFrame) -> List[OccupiedRange]:
    """Build occupied ranges from a table with id, start and end columns.

    Both snake_case and the API's camelCase column names are accepted. Cells
    are parsed one at a time, so plain dates and ISO timestamps may share a
    column. Rows with a missing start or end are dropped.
    """
    frame = df.rename(columns=_COLUMN_ALIASES)
    missing = {"start_date", "end_date"} - set(frame.columns)
    if missing:
        raise ValueError(f"Missing columns: {sorted(missing)}")
    if "id" not in frame.columns:
        frame = frame.assign(id=frame.index.astype(str))

    frame = frame.assign(
        start_date=frame["start_date"].map(_to_day),
        end_date=frame["end_date"].map(_to_day),
    ).dropna(subset=["start_date", "end_date"])

    return [
        OccupiedRange(row.start_date, row.end_date, str(row.id))
        for row in frame.itertuples(index=False)
    ]


def occupied_ranges_to_frame(ranges: Iterable[OccupiedRange]) -> pd.DataFrame:
    """Inverse of :func:`occupied_ranges_from_frame`, with datetime64 columns."""
    records = [{"id": r.id, "start_date": r.start_date, "end_date": r.end_date} for r in ranges]
    frame = pd.DataFrame(records, columns=["id", "start_date", "end_date"])
    frame["start_date"] = pd.to_datetime(frame["start_date"])
    frame["end_date"] = pd.to_datetime(frame["end_date"])
    return frame


def listings_to_frame(listings: Iterable[VehicleListing]) -> pd.DataFrame:
    """Tabulate listings for dashboards and reports."""
    columns = [
        "id", "make", "model", "year", "listing_type", "category_id",
        "daily_rate", "weekly_rate", "sale_price", "is_active",
    ]
    records = [
        {
            "id": v.id,
            "make": v.make,
            "model": v.model,
            "year": v.year,
            "listing_type": v.listing_type.value,
            "category_id": v.category_id,
            "daily_rate": v.daily_rate,
            "weekly_rate": v.weekly_rate,
            "sale_price": v.sale_price,
            "is_active": v.is_active,
        }
        for v in listings
    ]
    return pd.DataFrame(records, columns=columns)
