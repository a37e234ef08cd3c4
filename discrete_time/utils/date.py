"""Timestamp coercion and formatting helpers."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional

from dateutil.parser import isoparse
from pandas import NaT, Timestamp

logger = logging.getLogger(__name__)

DATE_FMT = "%Y-%m-%d"


def to_timestamp(value: Any) -> Optional[datetime]:
    """
    Coerce a date-like value into a datetime.

    Accepts datetime, date, pandas Timestamp and ISO-8601 strings. Anything
    that is not a real calendar timestamp (bad syntax, day-of-month overflow,
    booleans, numbers) yields None instead of raising.
    """
    if value is None or value is NaT or isinstance(value, bool):
        return None
    if isinstance(value, Timestamp):
        return value.to_pydatetime()
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return isoparse(value.strip())
        except (ValueError, OverflowError) as exc:
            logger.debug("Could not parse %r as an ISO date: %s", value, exc)
            return None
    logger.debug("Unsupported type for timestamp: %s", type(value))
    return None


def is_valid_timestamp(value: Optional[datetime]) -> bool:
    return isinstance(value, datetime)


def format_date(value: Optional[datetime], fmt: str = DATE_FMT) -> str:
    """
    Format a timestamp, 'YYYY-MM-DD' by default.
    """
    if not is_valid_timestamp(value):
        raise ValueError("Cannot format an invalid timestamp")
    return value.strftime(fmt)
