"""Listing schema, filter and data source tests."""

import json
from datetime import date

import pandas as pd
import pytest
import requests

from fleetrate.rental.data import (
    ActiveFilter,
    BookingStatusFilter,
    CategoryFilter,
    CompositeFilter,
    CustomFilter,
    DataSource,
    DataSourceError,
    DataSourceType,
    JSONDataSource,
    ListingTypeFilter,
    RestDataSource,
    SearchFilter,
    create_availability_data_source,
    create_data_source,
    has_more,
    listings_to_frame,
    occupied_ranges_from_frame,
    occupied_ranges_to_frame,
    paginate,
    sort_listings,
)
from fleetrate.rental.schema import (
    BookingRecord,
    BookingStatus,
    ListingType,
    OccupiedRange,
    SortKey,
    VehicleListing,
    parse_string_list,
    split_feature_input,
)

VEHICLES = [
    {
        "id": "v1",
        "make": "Toyota",
        "model": "Corolla",
        "year": 2021,
        "type": "rental",
        "categoryId": "cars",
        "dailyRate": "50",
        "weeklyRate": "300",
        "description": "Reliable compact",
        "features": '["Bluetooth", "Air Conditioning"]',
        "images": ["a.jpg", "b.jpg"],
        "isActive": True,
    },
    {
        "id": "v2",
        "make": "Ford",
        "model": "Transit",
        "year": 2023,
        "type": "both",
        "categoryId": "vans",
        "dailyRate": 90,
        "salePrice": 32000,
        "description": "Long wheelbase van",
        "features": ["Roof rack"],
        "images": "not json",
        "isActive": True,
    },
    {
        "id": "v3",
        "make": "BMW",
        "model": "X5",
        "year": 2019,
        "type": "sale",
        "categoryId": "cars",
        "salePrice": "41000",
        "description": "Luxury SUV with toyota-level reliability",
        "isActive": False,
    },
]

BOOKINGS = [
    {"id": "b1", "vehicleId": "v1", "startDate": "2025-03-10", "endDate": "2025-03-15", "status": "confirmed"},
    {"id": "b2", "vehicleId": "v1", "startDate": "2025-03-20T00:00:00.000Z", "endDate": "2025-03-22T00:00:00.000Z", "status": "CANCELLED"},
    {"id": "b3", "vehicleId": "v1", "startDate": "2025-04-01", "endDate": "2025-04-03", "status": "active"},
    {"id": "b4", "vehicleId": "v2", "startDate": "2025-03-01", "endDate": "2025-03-02", "status": "pending"},
    {"id": "b5", "vehicleId": "v1", "endDate": "2025-05-02"},
]


@pytest.fixture
def listings():
    return [VehicleListing.from_payload(v) for v in VEHICLES]


# ==================== Schema ====================

def test_listing_from_payload(listings):
    corolla, transit, bmw = listings
    assert corolla.rates.daily_rate == 50.0
    assert corolla.rates.weekly_rate == 300.0
    assert corolla.features == ["Bluetooth", "Air Conditioning"]
    assert corolla.primary_image == "a.jpg"
    assert transit.listing_type is ListingType.BOTH
    assert transit.weekly_rate is None
    assert transit.images == []
    assert transit.primary_image is None
    assert bmw.daily_rate == 0.0
    assert bmw.sale_price == 41000.0
    assert not bmw.is_active
    assert bmw.display_name == "2019 BMW X5"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, []),
        ("", []),
        ("[]", []),
        ('["GPS", " ", "Heated seats"]', ["GPS", "Heated seats"]),
        (["GPS", None, "USB"], ["GPS", "USB"]),
        ("{broken", []),
        ('{"a": 1}', []),
    ],
)
def test_parse_string_list(value, expected):
    assert parse_string_list(value) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  Sunroof ", ["Sunroof"]),
        ("", []),
        ('["GPS", " USB ", ""]', ["GPS", "USB"]),
        ("[not json]", ["[not json]"]),
    ],
)
def test_split_feature_input(text, expected):
    assert split_feature_input(text) == expected


def test_booking_record_from_payload():
    record = BookingRecord.from_payload(BOOKINGS[1])
    assert record.start_date == date(2025, 3, 20)
    assert record.status is BookingStatus.CANCELLED
    assert record.occupied_range == OccupiedRange(date(2025, 3, 20), date(2025, 3, 22), "b2")


# ==================== Filters ====================

def test_listing_type_filter(listings):
    assert [v.id for v in ListingTypeFilter(ListingType.RENTAL).filter(listings)] == ["v1"]
    assert [v.id for v in ListingTypeFilter(ListingType.SALE).filter(listings)] == ["v3"]
    assert len(ListingTypeFilter(ListingType.BOTH).filter(listings)) == 3


def test_search_and_category(listings):
    composite = CompositeFilter([ActiveFilter(), CategoryFilter("cars")])
    assert [v.id for v in composite.filter(listings)] == ["v1"]

    search = SearchFilter("TOYOTA")
    assert [v.id for v in search.filter(listings)] == ["v1", "v3"]
    assert len(SearchFilter("").filter(listings)) == 3
    assert len(CategoryFilter(None).filter(listings)) == 3


def test_custom_filter(listings):
    cheap = CustomFilter(lambda v: 0 < v.daily_rate < 60)
    assert [v.id for v in cheap.filter(listings)] == ["v1"]


def test_sort_listings(listings):
    assert [v.id for v in sort_listings(listings, SortKey.PRICE)] == ["v3", "v1", "v2"]
    assert [v.id for v in sort_listings(listings, SortKey.YEAR)] == ["v2", "v1", "v3"]
    assert [v.id for v in sort_listings(listings, SortKey.NAME)] == ["v3", "v2", "v1"]


def test_paginate():
    items = list(range(14))
    assert paginate(items, 1) == items[:6]
    assert paginate(items, 2) == items[:12]
    assert paginate(items, 3) == items
    assert has_more(14, 2)
    assert not has_more(14, 3)
    with pytest.raises(ValueError):
        paginate(items, 0)


def test_booking_status_filter():
    records = [BookingRecord.from_payload(b) for b in BOOKINGS[:4]]
    kept = BookingStatusFilter.blocking().filter(records)
    assert [b.id for b in kept] == ["b1", "b3", "b4"]


# ==================== JSON source ====================

@pytest.fixture
def snapshot(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps({"vehicles": VEHICLES, "bookings": BOOKINGS}))
    return path


def test_json_source(snapshot):
    source = create_availability_data_source(DataSourceType.JSON, path=str(snapshot))
    assert isinstance(source, DataSource)
    assert isinstance(source, JSONDataSource)
    assert [v.id for v in source.load_listings()] == ["v1", "v2", "v3"]
    assert source.load_listing("v2").make == "Ford"

    ranges = source.load_occupied_ranges("v1")
    assert [r.id for r in ranges] == ["b1", "b3"]


def test_json_source_without_filters_keeps_cancelled(snapshot):
    source = create_data_source(DataSourceType.JSON, path=snapshot)
    assert [b.id for b in source.load_bookings("v1")] == ["b1", "b2", "b3"]


def test_json_source_skips_malformed_listings(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"vehicles": [{"make": "no id"}, VEHICLES[1], dict(VEHICLES[2], type="lease")]}))
    assert [v.id for v in JSONDataSource(path).load_listings()] == ["v2"]


def test_json_source_errors(tmp_path, snapshot):
    with pytest.raises(DataSourceError):
        JSONDataSource(tmp_path / "missing.json").load_listings()
    with pytest.raises(DataSourceError):
        JSONDataSource(snapshot).load_listing("nope")
    with pytest.raises(ValueError):
        create_data_source(DataSourceType.JSON)


# ==================== REST source ====================

class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, routes):
        self.routes = routes
        self.headers = {}
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append((url, params, headers, timeout))
        result = self.routes[url]
        if isinstance(result, Exception):
            raise result
        return result


BASE = "https://api.example.test/api/v1"


def test_rest_source_loads_listings_and_ranges():
    detail = dict(VEHICLES[0], rentals=[b for b in BOOKINGS if b["vehicleId"] == "v1"])
    session = FakeSession(
        {
            f"{BASE}/vehicles": FakeResponse({"vehicles": VEHICLES}),
            f"{BASE}/vehicles/v1": FakeResponse({"data": detail}),
            f"{BASE}/bookings": FakeResponse({"message": "Forbidden"}, 403),
        }
    )
    source = create_availability_data_source(
        DataSourceType.REST, base_url=BASE + "/", timeout=5, token="tok", session=session
    )

    assert [v.id for v in source.load_listings()] == ["v1", "v2", "v3"]
    assert source.load_listing("v1").model == "Corolla"
    assert [r.id for r in source.load_occupied_ranges("v1")] == ["b1", "b3"]

    url, params, headers, timeout = session.calls[-1]
    assert (url, params, timeout) == (f"{BASE}/vehicles/v1", None, 5)
    assert headers == {"Content-Type": "application/json", "Authorization": "Bearer tok"}
    assert all(call[0] != f"{BASE}/bookings" for call in session.calls)


def test_rest_source_ranges_from_embedded_rentals():
    rentals = [
        {"id": "r1", "startDate": "2025-06-01T00:00:00.000Z", "endDate": "2025-06-04T00:00:00.000Z", "status": "PENDING"},
        {"id": "r2", "endDate": "2025-06-09T00:00:00.000Z"},
    ]
    session = FakeSession(
        {
            f"{BASE}/vehicles/v1": FakeResponse({"data": dict(VEHICLES[0], rentals=rentals)}),
            f"{BASE}/vehicles/v2": FakeResponse({"data": VEHICLES[1]}),
        }
    )
    source = RestDataSource(base_url=BASE, session=session)
    assert source.load_occupied_ranges("v1") == [OccupiedRange(date(2025, 6, 1), date(2025, 6, 4), "r1")]
    assert source.load_occupied_ranges("v2") == []


def test_rest_source_skips_malformed_listings(caplog):
    session = FakeSession({f"{BASE}/vehicles": FakeResponse([VEHICLES[0], {"make": "no id"}, "junk"])})
    source = RestDataSource(base_url=BASE, session=session)
    with caplog.at_level("WARNING", logger="fleetrate.rental.data.loaders"):
        assert [v.id for v in source.load_listings()] == ["v1"]
    assert "Skipping malformed vehicle" in caplog.text


def test_rest_source_malformed_single_listing():
    session = FakeSession(
        {
            f"{BASE}/vehicles/v7": FakeResponse({"data": {"make": "no id"}}),
            f"{BASE}/vehicles": FakeResponse({"vehicles": {"not": "a list"}}),
        }
    )
    source = RestDataSource(base_url=BASE, session=session)
    with pytest.raises(DataSourceError, match="v7"):
        source.load_listing("v7")
    with pytest.raises(DataSourceError):
        source.load_listings()


def test_rest_source_timeout():
    session = FakeSession({f"{BASE}/vehicles": requests.Timeout("slow")})
    source = RestDataSource(base_url=BASE, session=session)
    with pytest.raises(DataSourceError, match="Request timeout"):
        source.load_listings()


def test_rest_source_http_error_message():
    session = FakeSession(
        {
            f"{BASE}/vehicles/v9": FakeResponse({"message": "Vehicle not found"}, 404),
            f"{BASE}/vehicles": FakeResponse(ValueError("no body"), 500),
        }
    )
    source = RestDataSource(base_url=BASE, session=session)
    with pytest.raises(DataSourceError, match="Vehicle not found"):
        source.load_listing("v9")
    with pytest.raises(DataSourceError, match="status: 500"):
        source.load_listings()


def test_rest_source_without_token_sends_no_auth():
    session = FakeSession({f"{BASE}/vehicles": FakeResponse([])})
    RestDataSource(base_url=BASE, session=session).load_listings()
    assert "Authorization" not in session.calls[0][2]


def test_rest_source_leaves_caller_session_untouched():
    session = FakeSession({f"{BASE}/vehicles": FakeResponse([])})
    RestDataSource(base_url=BASE, token="tok", session=session).load_listings()
    assert session.headers == {}
    assert session.calls[0][2]["Authorization"] == "Bearer tok"


# ==================== DataFrames ====================

def test_occupied_ranges_from_frame():
    df = pd.DataFrame(
        {
            "id": ["b1", "b2", "b3"],
            "startDate": ["2025-03-10", "2025-03-20T00:00:00.000Z", None],
            "endDate": ["2025-03-15", "2025-03-22T00:00:00.000Z", "2025-03-30"],
        }
    )
    ranges = occupied_ranges_from_frame(df)
    assert ranges == [
        OccupiedRange(date(2025, 3, 10), date(2025, 3, 15), "b1"),
        OccupiedRange(date(2025, 3, 20), date(2025, 3, 22), "b2"),
    ]


def test_occupied_ranges_frame_inverse():
    ranges = [OccupiedRange(date(2025, 3, 10), date(2025, 3, 15), "b1")]
    frame = occupied_ranges_to_frame(ranges)
    assert list(frame.columns) == ["id", "start_date", "end_date"]
    assert occupied_ranges_from_frame(frame) == ranges


def test_frame_missing_columns():
    with pytest.raises(ValueError, match="end_date"):
        occupied_ranges_from_frame(pd.DataFrame({"start_date": ["2025-03-10"]}))


def test_listings_to_frame(listings):
    frame = listings_to_frame(listings)
    assert frame.shape == (3, 10)
    assert frame.loc[frame["id"] == "v2", "listing_type"].item() == "both"
