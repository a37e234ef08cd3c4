"""Calendar helpers used by the time traveler."""

from discrete_time.utils.date import format_date, is_valid_timestamp, to_timestamp
from discrete_time.utils.units import TimeUnit, add, get_time_unit, subtract

__all__ = [
    "TimeUnit",
    "add",
    "format_date",
    "get_time_unit",
    "is_valid_timestamp",
    "subtract",
    "to_timestamp",
]
