from __future__ import annotations

from typing import Any, Dict

import pytest


@pytest.fixture
def daily_settings() -> Dict[str, Any]:
    return {"starts_at": "2016-10-31", "steps": 5, "time_units": "days", "time_scale": 1}


@pytest.fixture
def recorder():
    """Callback that records every tick it is called with."""

    class Recorder:
        def __init__(self):
            self.ticks = []

        def __call__(self, tick):
            self.ticks.append(tick)

        @property
        def steps(self):
            return [tick.step for tick in self.ticks]

    return Recorder()
