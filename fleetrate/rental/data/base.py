"""
Base abstractions for listing and booking data.

Defines interfaces for data sources and record filters.
"""

from abc import ABC, abstractmethod
from typing import List, Protocol, runtime_checkable

from fleetrate.rental.schema.ranges import BookingRecord, OccupiedRange
from fleetrate.rental.schema.vehicles import VehicleListing


class DataSourceError(RuntimeError):
    """Raised when a data source cannot deliver listings or bookings."""

    pass


@runtime_checkable
class DataSource(Protocol):
    """
    Protocol for listing and booking sources.

    The rental backend is the system of record; a data source only converts
    what it returns into typed values.
    """

    def load_listings(self) -> List[VehicleListing]:
        """
        Load every vehicle listing.

        Returns:
            List of VehicleListing objects
        """
        ...

    def load_listing(self, vehicle_id: str) -> VehicleListing:
        """
        Load one vehicle listing.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            VehicleListing for the vehicle
        """
        ...

    def load_occupied_ranges(self, vehicle_id: str) -> List[OccupiedRange]:
        """
        Load the date ranges already booked for a vehicle.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            List of OccupiedRange objects
        """
        ...


@runtime_checkable
class BookingFilter(Protocol):
    """Protocol for filtering booking records."""

    def filter(self, bookings: List[BookingRecord]) -> List[BookingRecord]:
        ...


class BaseDataSource(ABC):
    """
    Abstract base class for data sources.

    Applies registered booking filters before bookings become occupied ranges.
    """

    def __init__(self):
        self._filters: List[BookingFilter] = []

    def add_filter(self, filter_instance: BookingFilter) -> None:
        """
        Add a filter to be applied when loading bookings.

        Args:
            filter_instance: Filter to add
        """
        self._filters.append(filter_instance)

    def _apply_filters(self, bookings: List[BookingRecord]) -> List[BookingRecord]:
        result = bookings
        for filter_instance in self._filters:
            result = filter_instance.filter(result)
        return result

    def load_bookings(self, vehicle_id: str) -> List[BookingRecord]:
        """Bookings for a vehicle with all registered filters applied."""
        return self._apply_filters(self._fetch_bookings(vehicle_id))

    def load_occupied_ranges(self, vehicle_id: str) -> List[OccupiedRange]:
        return [b.occupied_range for b in self.load_bookings(vehicle_id)]

    @abstractmethod
    def load_listings(self) -> List[VehicleListing]:
        """Load listings (to be implemented by subclasses)."""
        pass

    @abstractmethod
    def load_listing(self, vehicle_id: str) -> VehicleListing:
        """Load a single listing (to be implemented by subclasses)."""
        pass

    @abstractmethod
    def _fetch_bookings(self, vehicle_id: str) -> List[BookingRecord]:
        """Fetch unfiltered bookings (to be implemented by subclasses)."""
        pass


class BaseFilter(ABC):
    """
    Abstract base class for record filters.

    Works on listings or bookings; each concrete filter documents which.
    """

    @abstractmethod
    def filter(self, records: list) -> list:
        """
        Filter records based on specific criteria.

        Args:
            records: Records to filter

        Returns:
            Filtered records
        """
        pass
