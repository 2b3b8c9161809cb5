"""
Concrete data source implementations.

Provides loaders for the rental REST API and for JSON snapshot files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import requests

from fleetrate import config
from fleetrate.rental.schema.ranges import BookingRecord
from fleetrate.rental.schema.vehicles import VehicleListing

from .base import BaseDataSource, DataSourceError

logger = logging.getLogger(__name__)


def _unwrap(payload: Any, *keys: str) -> Any:
    """Return the first present envelope key's value, or the payload itself."""
    if isinstance(payload, dict):
        for key in keys:
            if key in payload:
                return payload[key]
    return payload


def _parse_listings(raw_listings: List[Dict]) -> List[VehicleListing]:
    listings = []
    for raw in raw_listings:
        try:
            listings.append(VehicleListing.from_payload(raw))
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            vehicle_id = raw.get("id") if isinstance(raw, dict) else None
            logger.warning("Skipping malformed vehicle %r: %s", vehicle_id, exc)
    return listings


def _parse_listing(raw: Dict, vehicle_id: str) -> VehicleListing:
    try:
        return VehicleListing.from_payload(raw)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise DataSourceError(f"Malformed vehicle {vehicle_id}: {exc}") from exc


def _parse_bookings(raw_bookings: List[Dict], vehicle_id: str) -> List[BookingRecord]:
    bookings = []
    for raw in raw_bookings:
        try:
            booking = BookingRecord.from_payload(raw)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping malformed booking %r: %s", raw.get("id"), exc)
            continue
        if booking.vehicle_id and booking.vehicle_id != str(vehicle_id):
            continue
        bookings.append(booking)
    return bookings


class RestDataSource(BaseDataSource):
    """
    Load listings and bookings from the rental REST API.

    Requests carry JSON headers and, when a token is given, a bearer
    Authorization header. Each request uses a fixed timeout and is not
    retried. Bookings come from the ``rentals`` array embedded in the
    vehicle detail response.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize REST data source.

        Args:
            base_url: API root including version (defaults to FLEETRATE_API_URL)
            timeout: Seconds before a request is abandoned (defaults to FLEETRATE_API_TIMEOUT)
            token: Bearer token supplied by the caller
            session: Session to send requests with
        """
        super().__init__()
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.API_TIMEOUT
        self.session = session or requests.Session()
        self.headers = {"Content-Type": "application/json"}
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    def _get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.get(
                url, params=params, headers=self.headers, timeout=self.timeout
            )
        except requests.Timeout as exc:
            logger.error("Timed out after %ss: GET %s", self.timeout, url)
            raise DataSourceError("Request timeout. Please try again.") from exc
        except requests.RequestException as exc:
            logger.error("Request failed: GET %s: %s", url, exc)
            raise DataSourceError(str(exc)) from exc

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("message") if isinstance(body, dict) else None
            raise DataSourceError(message or f"HTTP error! status: {response.status_code}")

        try:
            return response.json()
        except ValueError as exc:
            raise DataSourceError(f"Invalid JSON from {url}") from exc

    def load_listings(self) -> List[VehicleListing]:
        payload = _unwrap(self._get("/vehicles"), "vehicles", "data")
        if not isinstance(payload, list):
            raise DataSourceError(f"Unexpected vehicle list from {self.base_url}")
        listings = _parse_listings(payload)
        logger.info("Loaded %s listings from %s", len(listings), self.base_url)
        return listings

    def _fetch_vehicle(self, vehicle_id: str) -> Dict:
        payload = _unwrap(self._get(f"/vehicles/{vehicle_id}"), "vehicle", "data")
        if not isinstance(payload, dict):
            raise DataSourceError(f"Unexpected vehicle payload for {vehicle_id}")
        return payload

    def load_listing(self, vehicle_id: str) -> VehicleListing:
        return _parse_listing(self._fetch_vehicle(vehicle_id), vehicle_id)

    def _fetch_bookings(self, vehicle_id: str) -> List[BookingRecord]:
        rentals = self._fetch_vehicle(vehicle_id).get("rentals") or []
        return _parse_bookings(rentals, vehicle_id)


class JSONDataSource(BaseDataSource):
    """
    Load listings and bookings from a JSON snapshot.

    Expected file format:
        {"vehicles": [...], "bookings": [...]}
    with records shaped like the REST API's.
    """

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        self.path = Path(path)
        self._data: Optional[Dict] = None

    def _load_json_file(self) -> Dict:
        if self._data is None:
            try:
                with open(self.path, "r") as f:
                    self._data = json.load(f)
            except (OSError, ValueError) as exc:
                raise DataSourceError(f"Cannot read {self.path}: {exc}") from exc
            logger.info("Loaded rental snapshot from %s", self.path)
        return self._data

    def load_listings(self) -> List[VehicleListing]:
        return _parse_listings(self._load_json_file().get("vehicles", []))

    def load_listing(self, vehicle_id: str) -> VehicleListing:
        for raw in self._load_json_file().get("vehicles", []):
            if str(raw.get("id")) == str(vehicle_id):
                return _parse_listing(raw, vehicle_id)
        raise DataSourceError(f"No vehicle {vehicle_id} in {self.path}")

    def _fetch_bookings(self, vehicle_id: str) -> List[BookingRecord]:
        raw_bookings = [
            b
            for b in self._load_json_file().get("bookings", [])
            if str(b.get("vehicleId", b.get("vehicle_id"))) == str(vehicle_id)
        ]
        return _parse_bookings(raw_bookings, vehicle_id)
