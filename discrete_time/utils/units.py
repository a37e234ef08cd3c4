"""Calendar units and unit-based date arithmetic."""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Union

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)


class TimeUnit(Enum):
    """Calendar units a series can step by."""

    YEARS = "years"
    QUARTERS = "quarters"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"

    def delta(self, amount: Union[int, float]) -> relativedelta:
        """Return a relativedelta spanning ``amount`` of this unit."""
        if self is TimeUnit.QUARTERS:
            return relativedelta(months=3 * amount)
        if self is TimeUnit.MILLISECONDS:
            return relativedelta(microseconds=1000 * amount)
        return relativedelta(**{self.value: amount})


# Short aliases are case-sensitive ("M" is months, "m" is minutes).
_SHORT_ALIASES: Dict[str, TimeUnit] = {
    "y": TimeUnit.YEARS,
    "Q": TimeUnit.QUARTERS,
    "M": TimeUnit.MONTHS,
    "w": TimeUnit.WEEKS,
    "d": TimeUnit.DAYS,
    "h": TimeUnit.HOURS,
    "m": TimeUnit.MINUTES,
    "s": TimeUnit.SECONDS,
    "ms": TimeUnit.MILLISECONDS,
    "us": TimeUnit.MICROSECONDS,
}

_NAMES: Dict[str, TimeUnit] = {}
for _unit in TimeUnit:
    _NAMES[_unit.value] = _unit
    _NAMES[_unit.value[:-1]] = _unit
del _unit


def get_time_unit(unit: Union[str, TimeUnit]) -> TimeUnit:
    """Resolve a unit name, singular/plural or short alias, to a TimeUnit."""
    if isinstance(unit, TimeUnit):
        return unit
    if not isinstance(unit, str):
        raise ValueError(f"Unsupported time unit: {unit!r}")
    key = unit.strip()
    if key in _SHORT_ALIASES:
        return _SHORT_ALIASES[key]
    try:
        return _NAMES[key.lower()]
    except KeyError as exc:
        raise ValueError(f"Unsupported time unit: {unit!r}") from exc


def add(
    ts: Optional[datetime], amount: Union[int, float], unit: Union[str, TimeUnit]
) -> Optional[datetime]:
    """Add ``amount`` units to a timestamp. An invalid (None) timestamp stays invalid."""
    delta = get_time_unit(unit).delta(amount)
    if ts is None:
        logger.debug("Skipping arithmetic on invalid timestamp")
        return None
    return ts + delta


def subtract(
    ts: Optional[datetime], amount: Union[int, float], unit: Union[str, TimeUnit]
) -> Optional[datetime]:
    """Subtract ``amount`` units from a timestamp."""
    delta = get_time_unit(unit).delta(amount)
    if ts is None:
        logger.debug("Skipping arithmetic on invalid timestamp")
        return None
    return ts - delta
