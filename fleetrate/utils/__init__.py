"""Shared helpers."""

from .date import DATE_FMT, COMPACT_FMT, datetime_to_str, to_date, today

__all__ = [
    "DATE_FMT",
    "COMPACT_FMT",
    "to_date",
    "datetime_to_str",
    "today",
]
