"""Discrete time series generation.

Steps a start date forward by a fixed calendar increment and calls a function
on every step. Useful for simulating time series data in tests, demos and UI
prototypes.

Example:
    >>> import discrete_time
    >>> settings = {"starts_at": "1900-10-31", "steps": 100, "time_units": "years"}
    >>> discrete_time.run(settings, lambda t: print(f"Now: {t.now:%Y-%m-%d} Step: {t.step}"))
"""

from typing import Any, Mapping, Union

from discrete_time.exceptions import InvalidTravelerError
from discrete_time.settings import DEFAULT_TIME_SCALE, TravelerSettings
from discrete_time.traveler import Cursor, Tick, TickCallback, TimeTraveler
from discrete_time.utils.units import TimeUnit

__version__ = "1.0.0"

SettingsLike = Union[TravelerSettings, Mapping[str, Any]]

# Legacy name for the TimeTraveler class
traveler = TimeTraveler


def run(settings: SettingsLike, callback: TickCallback) -> None:
    """Create a TimeTraveler from ``settings`` and run it with ``callback``."""
    return TimeTraveler(settings).run(callback)


async def run_async(settings: SettingsLike, callback: TickCallback) -> None:
    """Coroutine version of run."""
    return await TimeTraveler(settings).run_async(callback)


__all__ = [
    "__version__",
    "DEFAULT_TIME_SCALE",
    "Cursor",
    "InvalidTravelerError",
    "Tick",
    "TickCallback",
    "TimeTraveler",
    "TimeUnit",
    "TravelerSettings",
    "run",
    "run_async",
    "traveler",
]
