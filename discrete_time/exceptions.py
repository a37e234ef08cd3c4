"""Error types for discrete-time."""

from __future__ import annotations

from typing import Iterable


class InvalidTravelerError(ValueError):
    """Raised when a TimeTraveler is run with invalid settings."""

    def __init__(self, errors: Iterable[str]):
        self.errors = list(errors)
        super().__init__("Invalid TimeTraveler: " + ",".join(self.errors))
