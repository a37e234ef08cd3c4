"""
Stepping through discrete time series.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from datetime import datetime
from numbers import Integral, Real
from typing import Any, Callable, Iterator, List, Mapping, Optional, Union

import pandas as pd

from discrete_time.exceptions import InvalidTravelerError
from discrete_time.settings import TravelerSettings, coerce_settings
from discrete_time.utils.date import is_valid_timestamp, to_timestamp
from discrete_time.utils.units import add, subtract

logger = logging.getLogger(__name__)

STARTS_AT_ERROR = "starts_at must be a valid ISO date"
STEPS_ERROR = "steps must be an integer"


@dataclass(frozen=True)
class Tick:
    """Step and time handed to the callback on each iteration."""

    step: int
    now: Optional[datetime]

    @property
    def time(self) -> Optional[datetime]:
        return self.now


@dataclass
class Cursor:
    """Current position of a TimeTraveler."""

    step: int
    time: Optional[datetime]

    def tick(self) -> Tick:
        return Tick(step=self.step, now=self.time)


TickCallback = Callable[[Tick], Any]


def _is_whole_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Integral):
        return True
    if isinstance(value, Real):
        return float(value).is_integer()
    return False


class TimeTraveler:
    """Creates and steps through time series data.

    Example:
        >>> traveler = TimeTraveler(starts_at="2016-10-31", steps=100,
        ...                         time_units="days", time_scale=10)
        >>> traveler.run(lambda tick: print(tick.step, tick.now))

    Attributes:
        starts_at: Start of the series, None if the given value is not a valid date
        steps: Total number of intervals in the series
        time_units: Unit of each interval
        time_scale: Number of time units per interval
        current: Cursor holding the current step and time

    Stepping never modifies ``starts_at``; a value assigned to it later is
    coerced again when validating. Each step assigns a new datetime to
    ``current.time``, so ticks already handed out keep their values.
    """

    def __init__(
        self,
        settings: Union[TravelerSettings, Mapping[str, Any], None] = None,
        **kwargs: Any,
    ):
        self.settings = coerce_settings(settings, **kwargs)

        self.starts_at = to_timestamp(self.settings.starts_at)
        self.steps = self.settings.steps
        self.time_units = self.settings.time_units
        self.time_scale = self.settings.effective_time_scale
        self.current = Cursor(step=0, time=self.starts_at)

    def __repr__(self) -> str:
        return (
            f"TimeTraveler(starts_at={self.starts_at!r}, steps={self.steps!r}, "
            f"time_units={self.time_units!r}, time_scale={self.time_scale!r}, "
            f"current={self.current!r})"
        )

    # Validation
    def validate(self) -> List[str]:
        """Return a list of error messages, empty if the traveler is valid."""
        errors = []

        if not is_valid_timestamp(to_timestamp(self.starts_at)):
            errors.append(STARTS_AT_ERROR)
        if not _is_whole_number(self.steps):
            errors.append(STEPS_ERROR)

        return errors

    def is_valid(self) -> bool:
        return not self.validate()

    def _ensure_valid(self) -> None:
        errors = self.validate()
        if errors:
            logger.debug("Refusing to run invalid traveler: %s", errors)
            raise InvalidTravelerError(errors)

    # Stepping
    def step_forward(self) -> None:
        """Move one step (time_scale x time_units) forward."""
        new_time = add(self.current.time, self.time_scale, self.time_units)
        self.current.step += 1
        self.current.time = new_time

    def step_backward(self) -> None:
        """Move one step (time_scale x time_units) backward."""
        new_time = subtract(self.current.time, self.time_scale, self.time_units)
        self.current.step -= 1
        self.current.time = new_time

    # Iteration
    def ticks(self) -> Iterator[Tick]:
        """
        Validate, then yield a Tick for each remaining interval.

        The cursor advances when the next tick is requested, so the consumer
        always sees the step and time before the advance.

        Raises:
            InvalidTravelerError: if the settings are invalid
        """
        self._ensure_valid()
        return self._travel(int(self.steps))

    def _travel(self, steps: int) -> Iterator[Tick]:
        logger.debug("Travelling %s steps from %s", steps, self.current)
        for _ in range(steps):
            yield self.current.tick()
            self.step_forward()

    def run(self, callback: TickCallback) -> None:
        """
        Call ``callback`` with the current Tick once per interval.

        Args:
            callback: Called with the Tick before each step forward

        Raises:
            InvalidTravelerError: if the settings are invalid. Nothing is
                called and the cursor does not move.
        """
        for tick in self.ticks():
            callback(tick)

    async def run_async(self, callback: TickCallback) -> None:
        """
        Coroutine version of run.

        Awaitable results of ``callback`` are awaited before the cursor
        advances, so callbacks never overlap.
        """
        for tick in self.ticks():
            result = callback(tick)
            if inspect.isawaitable(result):
                await result

    def to_frame(self) -> pd.DataFrame:
        """Run the series and collect it into a DataFrame with 'step' and 'time' columns."""
        rows = [(tick.step, tick.now) for tick in self.ticks()]
        return pd.DataFrame(rows, columns=["step", "time"])
