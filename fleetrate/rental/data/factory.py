"""
Factory for creating data sources.
"""

from enum import Enum
from pathlib import Path

from .base import DataSource
from .filters import BookingStatusFilter
from .loaders import JSONDataSource, RestDataSource


class DataSourceType(Enum):
    """Supported data source types."""
    REST = "rest"
    JSON = "json"


def create_data_source(
    source_type: DataSourceType,
    **kwargs
) -> DataSource:
    """
    Create data source with appropriate configuration.

    Args:
        source_type: Type of data source to create
        **kwargs: Configuration parameters specific to source type

    Returns:
        Configured data source

    Examples:
        >>> # REST source against the configured API
        >>> source = create_data_source(DataSourceType.REST, token=access_token)

        >>> # JSON snapshot
        >>> source = create_data_source(DataSourceType.JSON, path="/path/to/snapshot.json")
    """
    if source_type == DataSourceType.REST:
        return RestDataSource(
            base_url=kwargs.get("base_url"),
            timeout=kwargs.get("timeout"),
            token=kwargs.get("token"),
            session=kwargs.get("session"),
        )
    elif source_type == DataSourceType.JSON:
        path = kwargs.get("path")
        if not path:
            raise ValueError("path required for JSON data source")
        return JSONDataSource(path=Path(path))
    else:
        raise ValueError(f"Unsupported data source type: {source_type}")


def create_availability_data_source(
    source_type: DataSourceType,
    apply_standard_filters: bool = True,
    **kwargs
) -> DataSource:
    """
    Create data source whose occupied ranges only include blocking bookings.

    Args:
        source_type: Type of data source
        apply_standard_filters: Whether to drop completed and cancelled bookings
        **kwargs: Additional configuration for data source

    Returns:
        Configured data source
    """
    source = create_data_source(source_type, **kwargs)

    if apply_standard_filters:
        source.add_filter(BookingStatusFilter.blocking())

    return source
