"""
Configuration for a time series.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

from discrete_time.utils.units import TimeUnit

logger = logging.getLogger(__name__)

DEFAULT_TIME_SCALE = 1


@dataclass(frozen=True)
class TravelerSettings:
    """Settings for a TimeTraveler.

    Values are stored as given; checking happens in TimeTraveler.validate.

    Args:
        starts_at: Start of the series (datetime, date, pandas Timestamp or ISO string)
        steps: Total number of intervals in the series
        time_units: Unit of each interval (e.g. "days", "months", TimeUnit.YEARS)
        time_scale: Number of time units per interval (default: 1)
    """

    starts_at: Any = None
    steps: Any = None
    time_units: Union[str, TimeUnit, None] = None
    time_scale: Optional[Union[int, float]] = None

    @property
    def effective_time_scale(self) -> Union[int, float]:
        """Time scale with the default applied for unset or falsy values."""
        return self.time_scale or DEFAULT_TIME_SCALE

    @classmethod
    def known_fields(cls, mapping: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the entries of ``mapping`` that name a settings field."""
        known = {f.name for f in fields(cls)}
        ignored = sorted(set(mapping) - known)
        if ignored:
            logger.debug("Ignoring unknown traveler settings: %s", ignored)
        return {key: value for key, value in mapping.items() if key in known}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "TravelerSettings":
        """Build settings from a plain dict. Keys that are not settings fields are ignored."""
        return cls(**cls.known_fields(mapping))


def coerce_settings(
    settings: Union[TravelerSettings, Mapping[str, Any], None] = None, **overrides: Any
) -> TravelerSettings:
    """Normalize settings given as a TravelerSettings, a mapping and/or keywords."""
    if settings is None:
        return TravelerSettings.from_mapping(overrides)
    if isinstance(settings, TravelerSettings):
        base = settings
    elif isinstance(settings, Mapping):
        base = TravelerSettings.from_mapping(settings)
    else:
        raise TypeError(f"Unsupported settings type: {type(settings)}")
    if overrides:
        return replace(base, **TravelerSettings.known_fields(overrides))
    return base
